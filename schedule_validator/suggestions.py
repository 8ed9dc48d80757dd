"""
Best-effort repair of schedules broken by a configuration change.

Suggestions are starting points for a person to confirm, never applied
automatically.
"""

from __future__ import annotations

from typing import Optional, Union

from .data.models import Schedule, ScheduleConfig, ScheduleSlot, minutes_to_time
from .logging import get_logger
from .output.schema import (
    ChangeAction,
    ScheduleChange,
    ScheduleValidationResult,
    TimeRange,
)
from .settings import SuggestionScope

log = get_logger(__name__)


def _blocking_slots(
    schedule: Schedule,
    config: ScheduleConfig,
    scope: SuggestionScope,
) -> list[ScheduleSlot]:
    if scope == SuggestionScope.SAME_DAY:
        return config.slots_for_day(schedule.day_of_week)
    return config.all_slots()


def suggest_valid_time_slot(
    schedule: Schedule,
    config: ScheduleConfig,
    scope: Union[SuggestionScope, str] = SuggestionScope.ALL_DAYS,
) -> Optional[TimeRange]:
    """
    Find the first class-length slot of the day that avoids the breaks.

    Scans from ``start_time`` in ``class_duration`` steps. With
    ``SuggestionScope.ALL_DAYS`` the candidate must avoid the slots of every
    day, so it is also clear on the schedule's own day; with
    ``SuggestionScope.SAME_DAY`` only the schedule's day is consulted.

    Args:
        schedule: Schedule to relocate
        config: New configuration
        scope: Which slots to avoid

    Returns:
        TimeRange for the first free candidate, or None if the day is full
    """
    scope = SuggestionScope(scope)
    blocking = _blocking_slots(schedule, config, scope)
    duration = config.class_duration

    cursor = config.start_minutes
    while cursor + duration <= config.end_minutes:
        if not any(slot.overlaps(cursor, cursor + duration) for slot in blocking):
            return TimeRange(
                start_time=minutes_to_time(cursor),
                end_time=minutes_to_time(cursor + duration),
            )
        cursor += duration

    log.debug("no_slot_available", schedule_id=schedule.id, scope=scope.value)
    return None


def _target_day(schedule: Schedule, config: ScheduleConfig) -> int:
    if config.is_working_day(schedule.day_of_week):
        return schedule.day_of_week
    return config.working_days[0]


def plan_remediation(
    result: ScheduleValidationResult,
    new_config: ScheduleConfig,
    action: Union[ChangeAction, str] = ChangeAction.UPDATE,
    scope: Union[SuggestionScope, str] = SuggestionScope.ALL_DAYS,
) -> list[ScheduleChange]:
    """
    Turn a validation report into proposed schedule changes.

    ``ChangeAction.DELETE`` proposes deleting every affected schedule.
    ``ChangeAction.UPDATE`` moves each one: a schedule on a day that is no
    longer worked goes to the first working day, and its time comes from
    ``suggest_valid_time_slot``. Schedules with no free slot are proposed for
    deletion instead.

    Args:
        result: Validation report for the new configuration
        new_config: Configuration the schedules must fit
        action: UPDATE to adjust, DELETE to drop
        scope: Slots the suggestion engine avoids

    Returns:
        One ScheduleChange per affected schedule, in report order
    """
    action = ChangeAction(action)

    reasons = result.codes_by_schedule()
    changes: list[ScheduleChange] = []

    for schedule in result.affected_schedules:
        reason = reasons.get(schedule.id)

        if action == ChangeAction.DELETE:
            changes.append(ScheduleChange(
                action=ChangeAction.DELETE,
                schedule=schedule,
                original_schedule=schedule,
                reason=reason,
            ))
            continue

        moved = schedule.model_copy(update={"day_of_week": _target_day(schedule, new_config)})
        slot = suggest_valid_time_slot(moved, new_config, scope=scope)
        if slot is None:
            changes.append(ScheduleChange(
                action=ChangeAction.DELETE,
                schedule=schedule,
                original_schedule=schedule,
                reason=reason,
            ))
            continue

        changes.append(ScheduleChange(
            action=ChangeAction.UPDATE,
            schedule=moved.model_copy(update={
                "start_time": slot.start_time,
                "end_time": slot.end_time,
            }),
            original_schedule=schedule,
            reason=reason,
        ))

    log.info(
        "remediation_planned",
        action=action.value,
        updates=sum(1 for c in changes if c.action == ChangeAction.UPDATE),
        deletes=sum(1 for c in changes if c.action == ChangeAction.DELETE),
    )
    return changes
