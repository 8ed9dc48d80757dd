"""Detection of teacher and classroom double bookings."""

from __future__ import annotations

from .data.models import Schedule, day_name, intervals_overlap, minutes_to_time
from .logging import get_logger
from .output.schema import ConflictType, TimeConflict

log = get_logger(__name__)


def _conflict(
    kind: ConflictType,
    first: Schedule,
    second: Schedule,
) -> TimeConflict:
    start = minutes_to_time(max(first.start_minutes, second.start_minutes))
    end = minutes_to_time(min(first.end_minutes, second.end_minutes))
    if kind == ConflictType.TEACHER:
        who = f"Teacher {first.teacher_id}"
    else:
        who = f"Classroom {first.classroom}"
    return TimeConflict(
        type=kind,
        day_of_week=first.day_of_week,
        start_time=start,
        end_time=end,
        schedule_ids=[first.id, second.id],
        teacher_id=first.teacher_id if kind == ConflictType.TEACHER else None,
        classroom=first.classroom if kind == ConflictType.CLASSROOM else None,
        message=(
            f"{who} is booked twice on {day_name(first.day_of_week)} "
            f"{start}-{end} (schedules {first.id} and {second.id})"
        ),
    )


def find_time_conflicts(schedules: list[Schedule]) -> list[TimeConflict]:
    """
    Find pairs of schedules sharing a teacher or classroom at the same time.

    Intervals overlap half-open, so back-to-back classes are fine. Each
    pair is reported at most once per conflict type, in input order.

    Args:
        schedules: Schedules to compare, possibly across sections

    Returns:
        List of conflicts, teacher conflicts before classroom ones per pair
    """
    conflicts: list[TimeConflict] = []

    for i, first in enumerate(schedules):
        for second in schedules[i + 1:]:
            if first.day_of_week != second.day_of_week:
                continue
            if not intervals_overlap(
                first.start_minutes, first.end_minutes,
                second.start_minutes, second.end_minutes,
            ):
                continue

            if first.teacher_id is not None and first.teacher_id == second.teacher_id:
                conflicts.append(_conflict(ConflictType.TEACHER, first, second))
            if first.classroom and first.classroom == second.classroom:
                conflicts.append(_conflict(ConflictType.CLASSROOM, first, second))

    if conflicts:
        log.info("conflicts_found", count=len(conflicts))
    return conflicts
