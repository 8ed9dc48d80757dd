"""
Output schema for generated slots and validation reports.

Everything here is derived data: produced on demand, never persisted.
JSON output uses camelCase keys to match the configuration files.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import Field

from schedule_validator.data.models import CamelModel, Schedule, TimeString


# =============================================================================
# Enums
# =============================================================================

class ValidationReason(str, Enum):
    """Why a schedule no longer fits its configuration, in check order."""
    OUTSIDE_WORKING_DAYS = "outside_working_days"
    OUTSIDE_TIME_RANGE = "outside_time_range"
    INVALID_DURATION = "invalid_duration"
    OVERLAPS_BREAK = "overlaps_break"


class ChangeAction(str, Enum):
    """Action proposed for a schedule during remediation."""
    UPDATE = "update"
    DELETE = "delete"


class ConflictType(str, Enum):
    """Resource that is double-booked."""
    TEACHER = "teacher"
    CLASSROOM = "classroom"


# =============================================================================
# Time Slots
# =============================================================================

class TimeRange(CamelModel):
    """A start/end pair on some day."""
    start_time: TimeString
    end_time: TimeString

    def __str__(self) -> str:
        return f"{self.start_time}-{self.end_time}"


class TimeSlot(CamelModel):
    """A row of a day's timetable grid."""
    start: TimeString
    end: TimeString
    label: str
    is_break: bool = False
    is_configured: bool = False  # comes from break_slots rather than the cursor walk


# =============================================================================
# Validation Report
# =============================================================================

class ScheduleValidationError(CamelModel):
    """One failing schedule."""
    field: str  # 'schedule_<id>'
    message: str
    code: ValidationReason


class ScheduleState(CamelModel):
    """Where a schedule currently sits."""
    day_of_week: int
    start_time: str
    end_time: str


class ScheduleSuggestion(CamelModel):
    """Textual remediation for one failing schedule."""
    schedule_id: Union[int, str]
    reason: ValidationReason
    current_state: ScheduleState
    recommendation: str


class ConfigValues(CamelModel):
    """Scalar configuration values compared by the change summary."""
    class_duration: int
    working_days: list[int]
    start_time: str
    end_time: str


class ChangesSummary(CamelModel):
    """What changed between the old and the new configuration."""
    duration_changed: bool
    working_days_changed: bool
    start_time_changed: bool
    end_time_changed: bool
    break_slots_changed: bool
    old_values: ConfigValues
    new_values: ConfigValues

    @property
    def any_changed(self) -> bool:
        return (
            self.duration_changed
            or self.working_days_changed
            or self.start_time_changed
            or self.end_time_changed
            or self.break_slots_changed
        )


class ScheduleValidationResult(CamelModel):
    """Complete report of reconciling schedules with a new configuration."""
    is_valid: bool
    errors: list[ScheduleValidationError] = Field(default_factory=list)
    affected_schedules: list[Schedule] = Field(default_factory=list)
    suggestions: list[ScheduleSuggestion] = Field(default_factory=list)
    changes_summary: ChangesSummary

    def codes_by_schedule(self) -> dict[Union[int, str], ValidationReason]:
        """Failure code keyed by schedule ID."""
        return {
            suggestion.schedule_id: suggestion.reason
            for suggestion in self.suggestions
        }


# =============================================================================
# Remediation and Conflicts
# =============================================================================

class ScheduleChange(CamelModel):
    """A proposed change to one schedule."""
    action: ChangeAction
    schedule: Schedule
    original_schedule: Optional[Schedule] = None
    reason: Optional[ValidationReason] = None


class TimeConflict(CamelModel):
    """Two schedules booking the same teacher or classroom at once."""
    type: ConflictType
    day_of_week: int
    start_time: str
    end_time: str
    schedule_ids: list[Union[int, str]]
    teacher_id: Optional[int] = None
    classroom: Optional[str] = None
    message: str
