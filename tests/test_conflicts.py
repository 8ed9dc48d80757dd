"""Tests for teacher and classroom conflict detection."""

from __future__ import annotations

from schedule_validator.conflicts import find_time_conflicts
from schedule_validator.data.models import Schedule
from schedule_validator.output.schema import ConflictType


def sched(id_, day: int, start: str, end: str, **extra) -> Schedule:
    return Schedule(id=id_, day_of_week=day, start_time=start, end_time=end, **extra)


class TestFindTimeConflicts:
    """Tests for find_time_conflicts."""

    def test_no_schedules(self):
        assert find_time_conflicts([]) == []

    def test_teacher_double_booked(self):
        conflicts = find_time_conflicts([
            sched(1, 1, "08:00", "08:45", teacher_id=7, section_id=1),
            sched(2, 1, "08:30", "09:15", teacher_id=7, section_id=2),
        ])

        assert len(conflicts) == 1
        conflict = conflicts[0]
        assert conflict.type == ConflictType.TEACHER
        assert conflict.teacher_id == 7
        assert conflict.schedule_ids == [1, 2]
        assert (conflict.start_time, conflict.end_time) == ("08:30", "08:45")
        assert "Teacher 7" in conflict.message
        assert "Monday" in conflict.message

    def test_classroom_double_booked(self):
        conflicts = find_time_conflicts([
            sched(1, 2, "08:00", "08:45", classroom="A-101"),
            sched(2, 2, "08:00", "08:45", classroom="A-101"),
        ])
        assert [c.type for c in conflicts] == [ConflictType.CLASSROOM]
        assert conflicts[0].classroom == "A-101"
        assert conflicts[0].teacher_id is None

    def test_teacher_and_classroom(self):
        conflicts = find_time_conflicts([
            sched(1, 1, "08:00", "08:45", teacher_id=7, classroom="A-101"),
            sched(2, 1, "08:00", "08:45", teacher_id=7, classroom="A-101"),
        ])
        assert [c.type for c in conflicts] == [ConflictType.TEACHER, ConflictType.CLASSROOM]

    def test_back_to_back_is_fine(self):
        assert find_time_conflicts([
            sched(1, 1, "08:00", "08:45", teacher_id=7, classroom="A-101"),
            sched(2, 1, "08:45", "09:30", teacher_id=7, classroom="A-101"),
        ]) == []

    def test_different_days(self):
        assert find_time_conflicts([
            sched(1, 1, "08:00", "08:45", teacher_id=7),
            sched(2, 2, "08:00", "08:45", teacher_id=7),
        ]) == []

    def test_missing_teacher_or_room_never_conflicts(self):
        assert find_time_conflicts([
            sched(1, 1, "08:00", "08:45"),
            sched(2, 1, "08:00", "08:45"),
            sched(3, 1, "08:00", "08:45", classroom=""),
            sched(4, 1, "08:00", "08:45", classroom=""),
        ]) == []

    def test_every_pair_reported(self):
        conflicts = find_time_conflicts([
            sched(1, 1, "08:00", "08:45", teacher_id=7),
            sched(2, 1, "08:00", "08:45", teacher_id=7),
            sched(3, 1, "08:00", "08:45", teacher_id=7),
        ])
        assert [c.schedule_ids for c in conflicts] == [[1, 2], [1, 3], [2, 3]]
