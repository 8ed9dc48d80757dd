"""
Time-slot generation for a section's school day.

The generator walks the daily window in class-duration steps and drops every
candidate that collides with a configured slot for that day. Time is handled
as minutes from midnight throughout.

Example (07:00-09:30, 45 min, break 08:30-08:45):
    07:00-07:45  emitted
    07:45-08:30  emitted
    08:30-09:15  overlaps break -> cursor jumps to 08:45
    08:45-09:30  emitted
"""

from __future__ import annotations

from typing import Optional

from .data.models import ScheduleConfig, ScheduleSlot, minutes_to_time, time_to_minutes
from .logging import get_logger
from .output.schema import TimeSlot

log = get_logger(__name__)


def _first_overlapping(
    slots: list[ScheduleSlot],
    start_minutes: int,
    end_minutes: int,
) -> Optional[ScheduleSlot]:
    for slot in slots:
        if slot.overlaps(start_minutes, end_minutes):
            return slot
    return None


def _regular_slot(start_minutes: int, end_minutes: int) -> TimeSlot:
    start = minutes_to_time(start_minutes)
    end = minutes_to_time(end_minutes)
    return TimeSlot(start=start, end=end, label=f"{start} - {end}")


def _configured_slot(slot: ScheduleSlot) -> TimeSlot:
    return TimeSlot(
        start=slot.start,
        end=slot.end,
        label=slot.label or slot.type.value,
        is_break=not slot.counts_as_class,
        is_configured=True,
    )


def generate_time_slots_for_day(config: ScheduleConfig, day: int) -> list[TimeSlot]:
    """
    Compute the ordered class periods of one day.

    A candidate ``[cursor, cursor + class_duration)`` that overlaps any slot
    configured for ``day`` is discarded and the cursor moves to that slot's
    end; otherwise the candidate is emitted and the cursor advances by the
    class duration. The walk stops once a full period no longer fits before
    ``end_time``.

    Configured slots that count as class time are returned as class periods
    of their own, with whatever length they were configured with.

    Args:
        config: Per-day schedule configuration
        day: Day of week (1-7)

    Returns:
        Class periods sorted by start time
    """
    day_slots = config.slots_for_day(day)
    duration = config.class_duration
    end = config.end_minutes
    cursor = config.start_minutes

    periods: list[TimeSlot] = []
    while cursor + duration <= end:
        blocker = _first_overlapping(day_slots, cursor, cursor + duration)
        if blocker is not None:
            cursor = blocker.end_minutes
            continue
        periods.append(_regular_slot(cursor, cursor + duration))
        cursor += duration

    periods.extend(_configured_slot(s) for s in day_slots if s.counts_as_class)
    periods.sort(key=lambda p: p.start)

    log.debug("day_slots_generated", day=day, periods=len(periods))
    return periods


def generate_time_slots_per_day(config: ScheduleConfig) -> dict[int, list[TimeSlot]]:
    """Class periods for every working day, keyed by day."""
    return {day: generate_time_slots_for_day(config, day) for day in config.working_days}


def build_day_grid(config: ScheduleConfig, day: int) -> list[TimeSlot]:
    """
    Full display grid for a day: class periods plus every configured break.

    Breaks carry ``is_break=True``. Rows are sorted by start time.
    """
    grid = generate_time_slots_for_day(config, day)
    grid.extend(_configured_slot(s) for s in config.slots_for_day(day) if not s.counts_as_class)
    grid.sort(key=lambda p: p.start)
    return grid


def instructional_minutes(config: ScheduleConfig, day: int) -> int:
    """Total minutes of class periods the generator yields for a day."""
    return sum(
        time_to_minutes(p.end) - time_to_minutes(p.start)
        for p in generate_time_slots_for_day(config, day)
    )
