"""Configuration data model, loading and conversion."""

from .models import (
    Day,
    SlotType,
    ScheduleSlot,
    ScheduleConfig,
    LegacyScheduleConfig,
    Schedule,
    day_name,
    day_short_label,
    from_storage_day,
    to_storage_day,
    minutes_to_time,
    time_to_minutes,
)
from .convert import convert_to_per_day, apply_slots_to_days
from .loader import (
    ConfigLoadError,
    load_schedule_config,
    load_schedules,
    load_config_file,
    load_schedules_file,
)
from .presets import get_preset, get_preset_data, preset_names

__all__ = [
    # Models
    "Day",
    "SlotType",
    "ScheduleSlot",
    "ScheduleConfig",
    "LegacyScheduleConfig",
    "Schedule",
    # Helpers
    "day_name",
    "day_short_label",
    "from_storage_day",
    "to_storage_day",
    "minutes_to_time",
    "time_to_minutes",
    # Conversion
    "convert_to_per_day",
    "apply_slots_to_days",
    # Loader
    "ConfigLoadError",
    "load_schedule_config",
    "load_schedules",
    "load_config_file",
    "load_schedules_file",
    # Presets
    "get_preset",
    "get_preset_data",
    "preset_names",
]
