"""Load and validate schedule configurations and schedules from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from ..logging import get_logger
from .convert import convert_to_per_day, is_legacy_shape, normalize_storage_days
from .models import LegacyScheduleConfig, Schedule, ScheduleConfig, from_storage_day

log = get_logger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration or schedule file cannot be loaded."""
    pass


def load_schedule_config(data: dict, storage_days: bool = False) -> ScheduleConfig:
    """
    Build a per-day configuration from a raw dictionary.

    This is the only place the legacy flat ``breakSlots`` list is recognised;
    everything downstream sees a ``ScheduleConfig``.

    Args:
        data: Raw config (camelCase or snake_case keys)
        storage_days: Day numbers use the stored 0-6 format (0=Sunday)

    Returns:
        Validated per-day configuration

    Raises:
        ConfigLoadError: If the data is not a valid configuration
    """
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Configuration must be a JSON object, got {type(data).__name__}")

    if storage_days:
        data = normalize_storage_days(data)

    legacy = is_legacy_shape(data)
    model = LegacyScheduleConfig if legacy else ScheduleConfig
    try:
        config = model.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid schedule configuration:\n{e}") from e

    if legacy:
        log.info("legacy_config_loaded", section_id=config.section_id)
    return convert_to_per_day(config)


def load_schedules(data: Any, storage_days: bool = False) -> list[Schedule]:
    """
    Build schedules from a raw list, or from ``{"schedules": [...]}``.

    Raises:
        ConfigLoadError: If any entry is invalid or IDs repeat
    """
    if isinstance(data, dict) and "schedules" in data:
        data = data["schedules"]
    if not isinstance(data, list):
        raise ConfigLoadError("Schedules must be a JSON list")

    schedules: list[Schedule] = []
    errors: list[str] = []
    seen: set = set()

    for i, item in enumerate(data):
        if storage_days and isinstance(item, dict):
            item = dict(item)
            for key in ("dayOfWeek", "day_of_week"):
                if key in item:
                    item[key] = from_storage_day(int(item[key]))
        try:
            schedule = Schedule.model_validate(item)
        except ValidationError as e:
            errors.append(f"Schedule {i}: {e}")
            continue
        if schedule.id in seen:
            errors.append(f"Duplicate schedule ID: {schedule.id}")
        seen.add(schedule.id)
        schedules.append(schedule)

    if errors:
        raise ConfigLoadError("; ".join(errors))

    return schedules


def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON in {path}: {e}") from e


def load_config_file(path: Union[str, Path], storage_days: bool = False) -> ScheduleConfig:
    """
    Load a schedule configuration from a JSON file.

    Args:
        path: Path to the JSON file
        storage_days: Day numbers use the stored 0-6 format

    Returns:
        Validated per-day configuration

    Raises:
        ConfigLoadError: If the file is missing, not JSON, or invalid
    """
    config = load_schedule_config(_read_json(path), storage_days=storage_days)
    log.debug("config_file_loaded", path=str(path), section_id=config.section_id)
    return config


def load_schedules_file(path: Union[str, Path], storage_days: bool = False) -> list[Schedule]:
    """Load schedules from a JSON file."""
    schedules = load_schedules(_read_json(path), storage_days=storage_days)
    log.debug("schedules_file_loaded", path=str(path), count=len(schedules))
    return schedules
