"""Validation report models and text formatting."""

from .schema import (
    ValidationReason,
    ChangeAction,
    ConflictType,
    TimeRange,
    TimeSlot,
    ScheduleValidationError,
    ScheduleState,
    ScheduleSuggestion,
    ConfigValues,
    ChangesSummary,
    ScheduleValidationResult,
    ScheduleChange,
    TimeConflict,
)

__all__ = [
    # Enums
    "ValidationReason",
    "ChangeAction",
    "ConflictType",
    # Slots
    "TimeRange",
    "TimeSlot",
    # Validation report
    "ScheduleValidationError",
    "ScheduleState",
    "ScheduleSuggestion",
    "ConfigValues",
    "ChangesSummary",
    "ScheduleValidationResult",
    # Remediation and conflicts
    "ScheduleChange",
    "TimeConflict",
]
