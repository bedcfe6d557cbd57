"""Calendar date and time of day with clamped, zero-based fields."""

from __future__ import annotations

import time
from dataclasses import dataclass

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WEEKDAYS_SHORT = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def _lookup(table: tuple[str, ...], index: int, fallback: str) -> str:
    return table[index] if 0 <= index < len(table) else fallback


@dataclass(frozen=True)
class Date:
    """Raw date fields; month, day and weekday (Monday first) are zero-based."""

    seconds: int
    minutes: int
    hour: int
    weekday: int
    day: int
    month: int
    year: int


class DateTime:
    """A point in time held as clamped calendar fields."""

    __slots__ = ("_date",)

    def __init__(self, year: int, month: int, day: int, weekday: int,
                 hour: int, minutes: int, seconds: int) -> None:
        self._date = Date(
            seconds=_clamp(seconds, 0, 59),
            minutes=minutes,
            hour=_clamp(hour, 0, 23),
            weekday=_clamp(weekday, 0, 6),
            day=_clamp(day, 0, 30),
            month=_clamp(month, 0, 11),
            year=year,
        )

    @classmethod
    def from_date(cls, date: Date) -> DateTime:
        return cls(date.year, date.month, date.day, date.weekday, date.hour, date.minutes, date.seconds)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> DateTime:
        """Build from a POSIX timestamp interpreted in local time."""
        tm = time.localtime(timestamp)
        # Weekday counted from Sunday, then shifted down by one.
        sunday_based = (tm.tm_wday + 1) % 7
        return cls(
            year=tm.tm_year,
            month=tm.tm_mon - 1,
            day=tm.tm_mday - 1,
            weekday=sunday_based - 1,
            hour=tm.tm_hour,
            minutes=tm.tm_min,
            seconds=tm.tm_sec,
        )

    @classmethod
    def now(cls) -> DateTime:
        return cls.from_timestamp(time.time())

    def _key(self) -> tuple[int, ...]:
        d = self._date
        return (d.year, d.month, d.day, d.weekday, d.hour, d.minutes, d.seconds)

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __gt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        d = self._date
        return (f"DateTime(year={d.year}, month={d.month}, day={d.day}, weekday={d.weekday}, "
                f"hour={d.hour}, minutes={d.minutes}, seconds={d.seconds})")

    @property
    def date(self) -> Date:
        return self._date

    @property
    def seconds(self) -> int:
        return self._date.seconds

    @property
    def minutes(self) -> int:
        return self._date.minutes

    @property
    def hour(self) -> int:
        return self._date.hour

    @property
    def weekday(self) -> int:
        return self._date.weekday

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def year(self) -> int:
        return self._date.year

    def weekday_string(self, abbreviation: bool = False) -> str:
        if abbreviation:
            return _lookup(_WEEKDAYS_SHORT, self.weekday, "Inv")
        return _lookup(_WEEKDAYS, self.weekday, "Invalid")

    def month_string(self, abbreviation: bool = False) -> str:
        if abbreviation:
            return _lookup(_MONTHS_SHORT, self.month, "Inv")
        return _lookup(_MONTHS, self.month, "Invalid")

    def time_string(self) -> str:
        """Hour and minutes as ``HH:MM``."""
        return f"{self.hour:02d}:{self.minutes:02d}"

    def ansi_date_string(self) -> str:
        """Year, zero-based month and zero-based day as ``YYYY-MM-DD``."""
        return f"{self.year}-{self.month:02d}-{self.day:02d}"