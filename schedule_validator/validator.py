"""
Validation of placed schedules against a (possibly changed) configuration.

A schedule that no longer fits is reported as data, never raised. Each
schedule gets at most one reason; checks run in this order and the first
failure wins:

1. outside_working_days - day is not a working day
2. outside_time_range   - interval leaves the daily window
3. invalid_duration     - length differs from the class duration
4. overlaps_break       - interval overlaps a non-class slot configured for that day

A schedule that exactly matches a class-counting slot configured for its day
is a bookable period of that slot's own length, so checks 3 and 4 pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .data.models import Schedule, ScheduleConfig, day_name, intervals_overlap
from .logging import get_logger
from .output.schema import (
    ChangesSummary,
    ConfigValues,
    ScheduleState,
    ScheduleSuggestion,
    ScheduleValidationError,
    ScheduleValidationResult,
    ValidationReason,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class ScheduleCheck:
    """Outcome of checking a single schedule."""
    reason: Optional[ValidationReason] = None
    message: Optional[str] = None
    recommendation: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None


VALID = ScheduleCheck()


# =============================================================================
# Single Schedule
# =============================================================================

def validate_single_schedule(schedule: Schedule, config: ScheduleConfig) -> ScheduleCheck:
    """
    Check one schedule against a configuration.

    Args:
        schedule: Placed class assignment
        config: Configuration to check against

    Returns:
        ScheduleCheck with the first failing reason, or a valid check
    """
    if not config.is_working_day(schedule.day_of_week):
        days = ", ".join(day_name(d) for d in config.working_days)
        return ScheduleCheck(
            reason=ValidationReason.OUTSIDE_WORKING_DAYS,
            message=f"Schedule is on {day_name(schedule.day_of_week)}, which is not a working day",
            recommendation=f"Move to a working day: {days}",
        )

    start = schedule.start_minutes
    end = schedule.end_minutes

    if start < config.start_minutes or end > config.end_minutes:
        return ScheduleCheck(
            reason=ValidationReason.OUTSIDE_TIME_RANGE,
            message=(
                f"Schedule {schedule.start_time}-{schedule.end_time} is outside "
                f"the allowed range {config.start_time}-{config.end_time}"
            ),
            recommendation=f"Adjust the schedule into the allowed range {config.start_time}-{config.end_time}",
        )

    day_slots = config.slots_for_day(schedule.day_of_week)

    # A configured class period is bookable at its own length
    for slot in day_slots:
        if slot.counts_as_class and slot.start_minutes == start and slot.end_minutes == end:
            return VALID

    duration = end - start
    if duration != config.class_duration:
        return ScheduleCheck(
            reason=ValidationReason.INVALID_DURATION,
            message=(
                f"Schedule duration ({duration} min) does not match the "
                f"configured class duration ({config.class_duration} min)"
            ),
            recommendation=f"Duration must be {config.class_duration} minutes",
        )

    # Only this day's non-class slots apply
    for slot in day_slots:
        if slot.counts_as_class:
            continue
        if intervals_overlap(start, end, slot.start_minutes, slot.end_minutes):
            return ScheduleCheck(
                reason=ValidationReason.OVERLAPS_BREAK,
                message=f"Schedule overlaps {slot.label or slot.type.value} ({slot.start}-{slot.end})",
                recommendation="Move the schedule away from the configured breaks",
            )

    return VALID


# =============================================================================
# Configuration Diff
# =============================================================================

def _config_values(config: ScheduleConfig) -> ConfigValues:
    return ConfigValues(
        class_duration=config.class_duration,
        working_days=list(config.working_days),
        start_time=config.start_time,
        end_time=config.end_time,
    )


def summarize_changes(old_config: ScheduleConfig, new_config: ScheduleConfig) -> ChangesSummary:
    """
    Diff two configurations.

    Working days compare as full ordered lists; break slots compare
    structurally, day by day and slot by slot.
    """
    old_breaks = {day: [s.model_dump() for s in slots] for day, slots in old_config.break_slots.items()}
    new_breaks = {day: [s.model_dump() for s in slots] for day, slots in new_config.break_slots.items()}

    return ChangesSummary(
        duration_changed=old_config.class_duration != new_config.class_duration,
        working_days_changed=list(old_config.working_days) != list(new_config.working_days),
        start_time_changed=old_config.start_time != new_config.start_time,
        end_time_changed=old_config.end_time != new_config.end_time,
        break_slots_changed=old_breaks != new_breaks,
        old_values=_config_values(old_config),
        new_values=_config_values(new_config),
    )


# =============================================================================
# Batch Validation
# =============================================================================

def validate_schedules_against_config(
    schedules: list[Schedule],
    old_config: ScheduleConfig,
    new_config: ScheduleConfig,
) -> ScheduleValidationResult:
    """
    Find the schedules a configuration change invalidates.

    Args:
        schedules: Schedules placed under the old configuration
        old_config: Configuration before the edit
        new_config: Configuration after the edit

    Returns:
        ScheduleValidationResult with one error and one suggestion per
        affected schedule, plus a summary of what changed
    """
    errors: list[ScheduleValidationError] = []
    affected: list[Schedule] = []
    suggestions: list[ScheduleSuggestion] = []

    for schedule in schedules:
        check = validate_single_schedule(schedule, new_config)
        if check.is_valid:
            continue

        log.debug(
            "schedule_invalid",
            schedule_id=schedule.id,
            reason=check.reason.value,
            day=schedule.day_of_week,
        )
        errors.append(ScheduleValidationError(
            field=f"schedule_{schedule.id}",
            message=check.message,
            code=check.reason,
        ))
        affected.append(schedule)
        suggestions.append(ScheduleSuggestion(
            schedule_id=schedule.id,
            reason=check.reason,
            current_state=ScheduleState(
                day_of_week=schedule.day_of_week,
                start_time=schedule.start_time,
                end_time=schedule.end_time,
            ),
            recommendation=check.recommendation,
        ))

    result = ScheduleValidationResult(
        is_valid=not errors,
        errors=errors,
        affected_schedules=affected,
        suggestions=suggestions,
        changes_summary=summarize_changes(old_config, new_config),
    )
    log.info(
        "validation_complete",
        section_id=new_config.section_id,
        checked=len(schedules),
        affected=len(affected),
    )
    return result


def group_suggestions_by_reason(
    result: ScheduleValidationResult,
) -> dict[ValidationReason, list[ScheduleSuggestion]]:
    """Group suggestions by failure reason, reasons in check order."""
    groups: dict[ValidationReason, list[ScheduleSuggestion]] = {}
    for reason in ValidationReason:
        matching = [s for s in result.suggestions if s.reason == reason]
        if matching:
            groups[reason] = matching
    return groups
