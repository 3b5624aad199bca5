"""
Core data structures for date sequences: step intervals and termination rules.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from datesequence.conventions.arithmetic import advance, tenor_to_quantity_and_unit
from datesequence.conventions.types import CalendarDate, CalendarUnit
from datesequence.errors import EndDateNotFoundError, InvalidIntervalError

IntervalLike = Union["Interval", Tuple[int, Union[CalendarUnit, str]], str]


@dataclass(frozen=True)
class Interval:
    """Quantity and units of the step between consecutive dates.

    Attributes:
        quantity: Number of units per step, strictly positive
        unit: Calendar unit of the step
    """

    quantity: int
    unit: CalendarUnit

    def __post_init__(self):
        if isinstance(self.unit, str):
            object.__setattr__(self, "unit", CalendarUnit.from_name(self.unit))
        if not isinstance(self.unit, CalendarUnit):
            raise TypeError(f"Unsupported calendar unit: {self.unit!r}")
        quantity = self.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, numbers.Integral) or quantity <= 0:
            raise InvalidIntervalError(quantity, self.unit)
        object.__setattr__(self, "quantity", int(quantity))

    @classmethod
    def parse(cls, tenor: str) -> "Interval":
        """Build an interval from a tenor string such as '7D', '2W', '1M' or '10Y'."""
        quantity, unit = tenor_to_quantity_and_unit(tenor)
        return cls(quantity, unit)

    @classmethod
    def coerce(cls, value: IntervalLike) -> "Interval":
        """Accept an Interval, a (quantity, unit) pair or a tenor string."""
        if isinstance(value, Interval):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(*value)
        raise TypeError(f"Unsupported interval: {value!r}")

    def step(self, dt: CalendarDate) -> CalendarDate:
        """Return the date one interval after ``dt``."""
        return advance(dt, self.quantity, self.unit)

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit.value.lower()}"


class TerminationRule(ABC):
    """Decides whether iteration is finished when ``current`` is the next candidate."""

    @abstractmethod
    def is_finished(self, current: CalendarDate, end: Optional[CalendarDate]) -> bool:
        pass

    def __call__(self, current: CalendarDate, end: Optional[CalendarDate]) -> bool:
        return self.is_finished(current, end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Unbounded(TerminationRule):
    """Never finishes."""

    def is_finished(self, current: CalendarDate, end: Optional[CalendarDate]) -> bool:
        return False


class HalfOpen(TerminationRule):
    """Right-open bound: the end date itself is never emitted."""

    def is_finished(self, current: CalendarDate, end: Optional[CalendarDate]) -> bool:
        if end is None:
            raise EndDateNotFoundError()
        return current >= end


class Closed(TerminationRule):
    """Right-closed bound: the end date is emitted if it lies on the step grid."""

    def is_finished(self, current: CalendarDate, end: Optional[CalendarDate]) -> bool:
        if end is None:
            raise EndDateNotFoundError()
        return current > end
