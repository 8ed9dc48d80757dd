"""
Pydantic models for section schedule configuration.

Time conventions:
- Wire format is 'HH:MM' (24-hour)
- Computations use minutes from midnight (0-1439)
- Days are 1-7 (Monday-Sunday, ISO 8601)

Example times:
- 07:00 = 420
- 13:15 = 795
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


# =============================================================================
# Constants and Enums
# =============================================================================

class Day(int, Enum):
    """Day of week: 1=Monday through 7=Sunday."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class SlotType(str, Enum):
    """Purpose of a configured slot."""
    ACTIVITY = "activity"
    BREAK = "break"
    LUNCH = "lunch"
    FREE = "free"
    CLASS = "class"
    CUSTOM = "custom"


ALL_DAYS: list[int] = [d.value for d in Day]

DAY_NAMES: dict[int, str] = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}

DAY_SHORT_LABELS: dict[int, str] = {day: name[:3].upper() for day, name in DAY_NAMES.items()}

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

# Type aliases for documentation
TimeString = Annotated[str, Field(pattern=TIME_PATTERN, description="Time of day as HH:MM")]
DayOfWeek = Annotated[int, Field(ge=1, le=7, description="Day of week (1=Monday, 7=Sunday)")]


# =============================================================================
# Helper Functions
# =============================================================================

def minutes_to_time(minutes: int) -> str:
    """Convert minutes from midnight to HH:MM format."""
    h, m = divmod(minutes, 60)
    return f"{h:02d}:{m:02d}"


def time_to_minutes(time_str: str) -> int:
    """Convert HH:MM format to minutes from midnight."""
    h, m = map(int, time_str.split(":"))
    return h * 60 + m


def day_name(day: int) -> str:
    """Get day name from index."""
    return DAY_NAMES.get(day, f"Day {day}")


def day_short_label(day: int) -> str:
    """Get three-letter day label from index."""
    return DAY_SHORT_LABELS.get(day, str(day))


def from_storage_day(day: int) -> int:
    """
    Convert a stored day number (0=Sunday ... 6=Saturday) to ISO 1-7.

    Only Sunday moves; Monday-Saturday share the same number in both formats.
    """
    return 7 if day == 0 else day


def to_storage_day(day: int) -> int:
    """Convert an ISO day (1-7) to the stored 0-6 format (Sunday=0)."""
    return 0 if day == 7 else day


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Half-open overlap test on minute intervals: touching edges do not overlap."""
    return start_a < end_b and end_a > start_b


# =============================================================================
# Base
# =============================================================================

class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, dumps camelCase by alias."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


# =============================================================================
# Slots
# =============================================================================

class ScheduleSlot(CamelModel):
    """
    A configured interval within a day: break, lunch, activity, or class.

    A slot with ``type == class`` or ``is_class`` set counts as instructional
    time even though it is not a regular class assignment.
    """

    start: TimeString = Field(description="Start time (HH:MM)")
    end: TimeString = Field(description="End time (HH:MM)")
    label: str = Field(default="", description="Display label (e.g. 'RECREO')")
    type: SlotType = Field(default=SlotType.BREAK, description="Purpose of the slot")
    is_class: bool = Field(default=False, description="Counts as class time")
    description: Optional[str] = Field(default=None, description="Optional notes")

    @model_validator(mode="after")
    def validate_time_range(self) -> "ScheduleSlot":
        """Ensure start time is before end time."""
        if time_to_minutes(self.start) >= time_to_minutes(self.end):
            raise ValueError(f"start ({self.start}) must be before end ({self.end})")
        return self

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end)

    @property
    def duration_minutes(self) -> int:
        """Calculate slot duration."""
        return self.end_minutes - self.start_minutes

    @property
    def counts_as_class(self) -> bool:
        """Whether this slot is instructional time rather than a break."""
        return self.type == SlotType.CLASS or self.is_class

    def overlaps(self, start_minutes: int, end_minutes: int) -> bool:
        return intervals_overlap(start_minutes, end_minutes, self.start_minutes, self.end_minutes)

    def __str__(self) -> str:
        return f"{self.label or self.type.value} {self.start}-{self.end}"


# =============================================================================
# Configuration Models
# =============================================================================

class _ConfigFields(CamelModel):
    """Fields shared by the per-day and the legacy configuration shapes."""

    id: Optional[int] = Field(default=None, description="Persistence identifier")
    section_id: int = Field(description="Owning section")
    working_days: list[DayOfWeek] = Field(min_length=1, description="Days classes may be scheduled")
    start_time: TimeString = Field(description="Daily window start (HH:MM)")
    end_time: TimeString = Field(description="Daily window end (HH:MM)")
    class_duration: int = Field(ge=1, le=1440, description="Minutes per class period")
    created_at: Optional[str] = Field(default=None, description="ISO 8601 timestamp")
    updated_at: Optional[str] = Field(default=None, description="ISO 8601 timestamp")

    @field_validator("working_days")
    @classmethod
    def validate_unique_days(cls, days: list[int]) -> list[int]:
        seen: set[int] = set()
        for day in days:
            if day in seen:
                raise ValueError(f"Duplicate working day: {day}")
            seen.add(day)
        return days

    @model_validator(mode="after")
    def validate_day_window(self):
        """Ensure the daily window is ordered and holds every configured slot."""
        if self.start_minutes >= self.end_minutes:
            raise ValueError(
                f"start_time ({self.start_time}) must be before end_time ({self.end_time})"
            )
        for slot in self.all_slots():
            if slot.start_minutes < self.start_minutes or slot.end_minutes > self.end_minutes:
                raise ValueError(
                    f"Slot {slot} falls outside the daily window "
                    f"{self.start_time}-{self.end_time}"
                )
        return self

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    def all_slots(self) -> list[ScheduleSlot]:
        return []


class ScheduleConfig(_ConfigFields):
    """
    Authoritative per-section schedule policy.

    ``break_slots`` maps each day to its own ordered list of non-class slots,
    so days need not share a break pattern. JSON keys are the day numbers as
    strings.
    """

    break_slots: dict[DayOfWeek, list[ScheduleSlot]] = Field(
        default_factory=dict,
        description="Configured slots per day of week",
    )

    def slots_for_day(self, day: int) -> list[ScheduleSlot]:
        """Configured slots for a day, in configured order."""
        return self.break_slots.get(day, [])

    def all_slots(self) -> list[ScheduleSlot]:
        """Every configured slot across all days, flattened."""
        return [slot for slots in self.break_slots.values() for slot in slots]

    def is_working_day(self, day: int) -> bool:
        return day in self.working_days

    def __str__(self) -> str:
        days = ",".join(day_short_label(d) for d in self.working_days)
        return (
            f"Section {self.section_id}: {days} {self.start_time}-{self.end_time} "
            f"({self.class_duration} min)"
        )


class LegacyScheduleConfig(_ConfigFields):
    """Older configuration shape: one flat break list shared by every working day."""

    break_slots: list[ScheduleSlot] = Field(
        default_factory=list,
        description="Slots applied uniformly to every working day",
    )

    def all_slots(self) -> list[ScheduleSlot]:
        return list(self.break_slots)


AnyScheduleConfig = Union[ScheduleConfig, LegacyScheduleConfig]


# =============================================================================
# Schedules
# =============================================================================

class Schedule(CamelModel):
    """
    A placed class assignment.

    Only judged against a configuration, never created here. Time ordering is
    not enforced; a reversed interval surfaces as a validation failure.
    """

    id: Union[int, str] = Field(description="Schedule ID (temporary IDs are strings)")
    day_of_week: DayOfWeek = Field(description="Day of week")
    start_time: TimeString = Field(description="Start time (HH:MM)")
    end_time: TimeString = Field(description="End time (HH:MM)")
    course_assignment_id: Optional[int] = Field(default=None, description="Course assignment")
    teacher_id: Optional[int] = Field(default=None, description="Teaching teacher")
    section_id: Optional[int] = Field(default=None, description="Owning section")
    classroom: Optional[str] = Field(default=None, description="Classroom name")

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def __str__(self) -> str:
        return f"Schedule {self.id} ({day_name(self.day_of_week)} {self.start_time}-{self.end_time})"
