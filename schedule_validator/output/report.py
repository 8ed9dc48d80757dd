"""Plain-text reports for validation results and remediation plans."""

from __future__ import annotations

from schedule_validator.data.models import day_name, day_short_label
from schedule_validator.output.schema import (
    ChangeAction,
    ChangesSummary,
    ScheduleChange,
    ScheduleValidationResult,
    ValidationReason,
)
from schedule_validator.validator import group_suggestions_by_reason


REASON_LABELS: dict[ValidationReason, str] = {
    ValidationReason.OUTSIDE_WORKING_DAYS: "Outside working days",
    ValidationReason.OUTSIDE_TIME_RANGE: "Outside the daily time range",
    ValidationReason.INVALID_DURATION: "Wrong duration",
    ValidationReason.OVERLAPS_BREAK: "Overlaps a break",
}


def describe_changes(summary: ChangesSummary) -> list[str]:
    """One line per changed configuration field, old -> new."""
    old, new = summary.old_values, summary.new_values
    lines = []
    if summary.duration_changed:
        lines.append(f"Class duration: {old.class_duration} min -> {new.class_duration} min")
    if summary.working_days_changed:
        old_days = ",".join(day_short_label(d) for d in old.working_days)
        new_days = ",".join(day_short_label(d) for d in new.working_days)
        lines.append(f"Working days: {old_days} -> {new_days}")
    if summary.start_time_changed:
        lines.append(f"Start time: {old.start_time} -> {new.start_time}")
    if summary.end_time_changed:
        lines.append(f"End time: {old.end_time} -> {new.end_time}")
    if summary.break_slots_changed:
        lines.append("Break slots changed")
    return lines


def generate_report(result: ScheduleValidationResult) -> str:
    """
    Generate a human-readable validation report.

    Args:
        result: Validation result to describe

    Returns:
        Formatted string report
    """
    lines = []

    lines.append("=" * 70)
    lines.append("SCHEDULE CONFIGURATION CHANGE REPORT")
    lines.append("=" * 70)
    lines.append("")

    lines.append("-" * 40)
    lines.append("CHANGES")
    lines.append("-" * 40)
    changes = describe_changes(result.changes_summary)
    lines.extend(changes or ["No configuration changes"])
    lines.append("")

    lines.append("-" * 40)
    lines.append("AFFECTED SCHEDULES")
    lines.append("-" * 40)
    if result.is_valid:
        lines.append("All schedules fit the new configuration.")
    else:
        lines.append(f"{len(result.affected_schedules)} schedule(s) no longer fit.")
        for reason, suggestions in group_suggestions_by_reason(result).items():
            lines.append("")
            lines.append(f"{REASON_LABELS[reason]} ({len(suggestions)})")
            for s in suggestions:
                state = s.current_state
                lines.append(
                    f"  - #{s.schedule_id} {day_name(state.day_of_week)} "
                    f"{state.start_time}-{state.end_time}: {s.recommendation}"
                )

    lines.append("")
    lines.append("=" * 70)
    return "\n".join(lines)


def format_changes(changes: list[ScheduleChange]) -> str:
    """One line per proposed change."""
    lines = []
    for change in changes:
        s = change.schedule
        if change.action == ChangeAction.DELETE:
            lines.append(f"DELETE #{s.id} {day_name(s.day_of_week)} {s.start_time}-{s.end_time}")
        else:
            o = change.original_schedule
            lines.append(
                f"UPDATE #{s.id} {day_short_label(o.day_of_week)} {o.start_time}-{o.end_time}"
                f" -> {day_short_label(s.day_of_week)} {s.start_time}-{s.end_time}"
            )
    return "\n".join(lines)
