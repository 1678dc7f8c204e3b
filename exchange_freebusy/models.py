"""Value types for the GetUserAvailability translator.

Dataclasses carry the typed request parameters and decoded records;
TypedDicts describe the JSON shapes returned by the MCP tool.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import IntEnum
from typing import Any, TypedDict

DEFAULT_TIME_ZONE = "Europe/London"
DEFAULT_EMAIL_ADDRESS = "test.test@test.com"
DEFAULT_INTERVAL_MINUTES = 60


class AvailabilityStatus(IntEnum):
    """Status of one merged free/busy slot, as encoded by Exchange."""
    FREE = 0
    TENTATIVE = 1
    BUSY = 2
    OUT_OF_OFFICE = 3
    NO_DATA = 4


def _start_of_today() -> datetime:
    return datetime.combine(date.today(), time(0, 0, 1))


def _end_of_today() -> datetime:
    return datetime.combine(date.today() + timedelta(days=1), time()) - timedelta(seconds=1)


@dataclass
class AvailabilityRequest:
    """Parameters of a single GetUserAvailability call.

    ``start_time`` and ``end_time`` are naive wall-clock values in
    ``time_zone``; the offset travels separately in the TimeZone block.
    """
    time_zone: str = DEFAULT_TIME_ZONE
    email_address: str = DEFAULT_EMAIL_ADDRESS
    start_time: datetime = field(default_factory=_start_of_today)
    end_time: datetime = field(default_factory=_end_of_today)
    merged_free_busy_interval_in_minutes: int = DEFAULT_INTERVAL_MINUTES

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.merged_free_busy_interval_in_minutes <= 0:
            raise ValueError(
                "merged_free_busy_interval_in_minutes must be positive, got "
                f"{self.merged_free_busy_interval_in_minutes}"
            )
        if self.start_time >= self.end_time:
            raise ValueError(
                f"start_time {self.start_time} must be before end_time {self.end_time}"
            )

    def reset(self) -> None:
        """Restore every field to its default."""
        self.time_zone = DEFAULT_TIME_ZONE
        self.email_address = DEFAULT_EMAIL_ADDRESS
        self.start_time = _start_of_today()
        self.end_time = _end_of_today()
        self.merged_free_busy_interval_in_minutes = DEFAULT_INTERVAL_MINUTES


@dataclass(frozen=True)
class TimezoneRule:
    """Offsets of a zone at one reference instant, in whole minutes."""
    utc_offset_minutes: int
    standard_offset_minutes: int
    daylight_saving_active: bool


@dataclass(frozen=True)
class CalendarEventDetails:
    """Optional detail block of a CalendarEvent (present for DetailedMerged views)."""
    id: str = ""
    subject: str = ""
    location: str = ""
    is_meeting: bool = False
    is_recurring: bool = False
    is_exception: bool = False
    is_reminder_set: bool = False
    is_private: bool = False


@dataclass(frozen=True)
class CalendarEvent:
    """A busy period returned inside CalendarEventArray."""
    start_time: datetime
    end_time: datetime
    busy_type: str
    details: CalendarEventDetails | None = None


@dataclass
class AvailabilityResult:
    """Decoded GetUserAvailability response."""
    merged_free_busy: list[AvailabilityStatus] = field(default_factory=list)
    items: list[Any] = field(default_factory=list)


# ------------------------------------------------------------------
# JSON shapes returned by the MCP tool
# ------------------------------------------------------------------

class EventSummary(TypedDict, total=False):
    """A calendar event as returned to MCP clients."""
    type: str
    start: str
    end: str
    busy_type: str
    subject: str
    location: str
    is_meeting: bool
    is_recurring: bool
    is_private: bool


class Availability(TypedDict, total=False):
    """Availability data for a single mailbox."""
    email: str
    time_zone: str
    interval_minutes: int
    busy_slots: int
    free_slots: int
    merged_freebusy: str
    events: list[EventSummary]
