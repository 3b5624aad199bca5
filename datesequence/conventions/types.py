"""
Basic types and enums used across the sequence engine.
"""

import calendar
import functools
from datetime import MAXYEAR, date, datetime
from enum import Enum


class CalendarUnit(Enum):
    """Calendar components an interval can be expressed in."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"

    @classmethod
    def from_name(cls, name: str) -> "CalendarUnit":
        """Look up a unit by name, accepting plurals and any case ('days', 'Month')."""
        key = name.upper().strip()
        if key.endswith("S"):
            key = key[:-1]
        try:
            return cls[key]
        except KeyError as exc:
            raise ValueError(f"Unsupported calendar unit: {name}") from exc


@functools.total_ordering
class CalendarDate:
    """A proleptic Gregorian calendar date with no upper year bound.

    Compares and hashes equal to the matching ``datetime.date``; ``to_date``
    converts back while the year is within ``date.max``.
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int):
        if year < 1:
            raise OverflowError(f"year {year} is out of range")
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            raise ValueError(f"day is out of range for month: {year}-{month}-{day}")
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_date(cls, dt: date) -> "CalendarDate":
        return cls(dt.year, dt.month, dt.day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def to_date(self) -> date:
        if self._year > MAXYEAR:
            raise OverflowError(f"{self} is past {date.max}")
        return date(self._year, self._month, self._day)

    def toordinal(self) -> int:
        """Proleptic Gregorian ordinal, 0001-01-01 being day 1."""
        y = self._year - 1
        days_before_year = y * 365 + y // 4 - y // 100 + y // 400
        days_before_month = sum(calendar.monthrange(self._year, m)[1] for m in range(1, self._month))
        return days_before_year + days_before_month + self._day

    def weekday(self) -> int:
        """Monday is 0 and Sunday is 6, as for ``date.weekday``."""
        return (self.toordinal() + 6) % 7

    def isoformat(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def _key(self, other):
        if isinstance(other, CalendarDate):
            return (other._year, other._month, other._day)
        if isinstance(other, date) and not isinstance(other, datetime):
            return (other.year, other.month, other.day)
        return None

    def __eq__(self, other):
        key = self._key(other)
        if key is None:
            return NotImplemented
        return (self._year, self._month, self._day) == key

    def __lt__(self, other):
        key = self._key(other)
        if key is None:
            return NotImplemented
        return (self._year, self._month, self._day) < key

    def __hash__(self):
        if self._year <= MAXYEAR:
            return hash(date(self._year, self._month, self._day))
        return hash((self._year, self._month, self._day))

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"CalendarDate({self._year}, {self._month}, {self._day})"
