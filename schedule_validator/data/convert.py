"""Structural conversions between configuration shapes."""

from __future__ import annotations

from typing import Iterable

from ..logging import get_logger
from .models import (
    AnyScheduleConfig,
    ScheduleConfig,
    ScheduleSlot,
    from_storage_day,
)

log = get_logger(__name__)


def convert_to_per_day(config: AnyScheduleConfig) -> ScheduleConfig:
    """
    Resolve a configuration to the per-day ``break_slots`` form.

    A legacy flat list is copied onto every working day and no other day.
    A per-day configuration is returned as is, so converting twice is the
    same as converting once. Slot consistency is not checked here.

    Args:
        config: Legacy or per-day configuration

    Returns:
        Per-day configuration
    """
    if isinstance(config, ScheduleConfig):
        return config

    break_slots = {
        day: [slot.model_copy() for slot in config.break_slots]
        for day in config.working_days
    }
    log.debug(
        "config_converted",
        section_id=config.section_id,
        days=list(break_slots),
        slots_per_day=len(config.break_slots),
    )
    return ScheduleConfig.model_validate({
        **config.model_dump(exclude={"break_slots"}),
        "break_slots": break_slots,
    })


def apply_slots_to_days(
    break_slots: dict[int, list[ScheduleSlot]],
    days: Iterable[int],
    slots: list[ScheduleSlot],
) -> dict[int, list[ScheduleSlot]]:
    """
    Copy one slot pattern onto several days.

    Returns a new mapping; the listed days get their own copy of ``slots``,
    every other day keeps what it had.
    """
    updated = {day: list(day_slots) for day, day_slots in break_slots.items()}
    for day in days:
        updated[day] = [slot.model_copy() for slot in slots]
    return updated


def normalize_storage_days(data: dict) -> dict:
    """
    Map a raw config dict from stored day numbers (0=Sunday) to ISO days.

    Rewrites ``workingDays``/``working_days`` and the keys of a per-day
    ``breakSlots``/``break_slots`` mapping. Returns a new dict.
    """
    result = dict(data)
    for key in ("workingDays", "working_days"):
        if key in result:
            result[key] = [from_storage_day(int(d)) for d in result[key]]
    for key in ("breakSlots", "break_slots"):
        if isinstance(result.get(key), dict):
            result[key] = {
                from_storage_day(int(day)): slots for day, slots in result[key].items()
            }
    return result


def is_legacy_shape(data: dict) -> bool:
    """Whether a raw config dict stores its break slots as one flat list."""
    slots = data.get("breakSlots", data.get("break_slots"))
    return isinstance(slots, list)

