"""Schedule configuration validator - per-day slots, validation and repair."""

from .data.models import ScheduleConfig, ScheduleSlot, Schedule, LegacyScheduleConfig
from .data.convert import convert_to_per_day
from .data.loader import ConfigLoadError, load_schedule_config, load_schedules
from .generator import (
    generate_time_slots_for_day,
    generate_time_slots_per_day,
    build_day_grid,
)
from .validator import (
    validate_single_schedule,
    validate_schedules_against_config,
    summarize_changes,
)
from .suggestions import suggest_valid_time_slot, plan_remediation
from .conflicts import find_time_conflicts
from .output.schema import ScheduleValidationResult, TimeSlot

__all__ = [
    # Models
    "ScheduleConfig",
    "ScheduleSlot",
    "Schedule",
    "LegacyScheduleConfig",
    "ScheduleValidationResult",
    "TimeSlot",
    # Loading
    "ConfigLoadError",
    "convert_to_per_day",
    "load_schedule_config",
    "load_schedules",
    # Generation
    "generate_time_slots_for_day",
    "generate_time_slots_per_day",
    "build_day_grid",
    # Validation
    "validate_single_schedule",
    "validate_schedules_against_config",
    "summarize_changes",
    "suggest_valid_time_slot",
    "plan_remediation",
    "find_time_conflicts",
]
