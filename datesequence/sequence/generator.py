"""Date sequence generation.

This module produces lazily computed, increasing sequences of dates spaced by
a fixed calendar interval. Sequences are either infinite or bounded by an end
date that is excluded (``to``) or included when it lands on the step grid
(``through``). All arithmetic is Gregorian, date-only and in UTC.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Union

from datesequence.conventions.types import CalendarDate, CalendarUnit
from datesequence.errors import InvalidBoundsError, InvalidRequestError
from datesequence.utils.date import (
    DashedDateFormatter,
    DateLike,
    shared_formatter,
    to_date,
)

from .core import Closed, HalfOpen, Interval, IntervalLike, Unbounded

logger = logging.getLogger(__name__)

ShouldStop = Callable[[CalendarDate, Optional[CalendarDate]], bool]


class DateSequence:
    """A generator for infinite and bounded date sequences.

    The sequence is its own iterator: consuming it advances an internal cursor
    and there is no way to rewind. Build a new instance to iterate again.

    Dates are emitted as CalendarDate values, which compare equal to the
    matching datetime.date and carry on past year 9999.

    Examples:
        >>> seq = DateSequence.through("2018-01-01", "2018-01-15", (7, "day"))
        >>> [d.isoformat() for d in seq]
        ['2018-01-01', '2018-01-08', '2018-01-15']
    """

    def __init__(
        self,
        start: DateLike,
        every: IntervalLike,
        *,
        end: Optional[DateLike] = None,
        should_stop: Optional[ShouldStop] = None,
        formatter: Optional[DashedDateFormatter] = None,
    ):
        """
        Validate inputs and set the cursor on ``start``.

        Args:
            start: First date in the sequence
            every: Interval between elements, as an Interval, a (quantity, unit)
                pair or a tenor string such as '7D'
            end: End date; None for an infinite sequence
            should_stop: Predicate ``(current, end) -> bool`` deciding whether the
                sequence is finished. Required when ``end`` is given.
            formatter: Date text formatter; defaults to the shared instance

        Raises:
            InvalidStringError: If a date string cannot be parsed
            InvalidBoundsError: If ``end`` precedes ``start``
            InvalidIntervalError: If the interval quantity is not positive
        """
        self._formatter = formatter or shared_formatter()
        start_date = self._coerce(start)

        if end is None:
            if should_stop is not None:
                raise TypeError("should_stop requires an end date")
            end_date = None
            interval = Interval.coerce(every)
            should_stop = Unbounded()
        else:
            end_date = self._coerce(end)
            if end_date < start_date:
                raise InvalidBoundsError(start_date, end_date)
            interval = Interval.coerce(every)
            if should_stop is None:
                raise TypeError("bounded sequences require should_stop")

        self._current = start_date
        self._end = end_date
        self._interval = interval
        self._should_stop = should_stop
        logger.debug(
            "DateSequence start=%s end=%s every=%s rule=%r",
            start_date, end_date, interval, should_stop,
        )

    # Construction

    @classmethod
    def starting(
        cls,
        start: DateLike,
        every: IntervalLike,
        formatter: Optional[DashedDateFormatter] = None,
    ) -> "DateSequence":
        """Produce an infinite sequence beginning at ``start``."""
        return cls(start, every, formatter=formatter)

    @classmethod
    def bounded(
        cls,
        start: DateLike,
        end: DateLike,
        every: IntervalLike,
        should_stop: ShouldStop,
        formatter: Optional[DashedDateFormatter] = None,
    ) -> "DateSequence":
        """Produce a bounded sequence terminated by a custom predicate."""
        return cls(start, every, end=end, should_stop=should_stop, formatter=formatter)

    @classmethod
    def to(
        cls,
        start: DateLike,
        end: DateLike,
        every: IntervalLike,
        formatter: Optional[DashedDateFormatter] = None,
    ) -> "DateSequence":
        """Produce a bounded sequence which never includes ``end``."""
        return cls.bounded(start, end, every, HalfOpen(), formatter)

    @classmethod
    def through(
        cls,
        start: DateLike,
        end: DateLike,
        every: IntervalLike,
        formatter: Optional[DashedDateFormatter] = None,
    ) -> "DateSequence":
        """Produce a bounded sequence which includes ``end`` if it falls on the step grid."""
        return cls.bounded(start, end, every, Closed(), formatter)

    # State

    @property
    def current(self) -> CalendarDate:
        """Next date to be considered for emission."""
        return self._current

    @property
    def end(self) -> Optional[CalendarDate]:
        return self._end

    @property
    def interval(self) -> Interval:
        return self._interval

    @property
    def should_stop(self) -> ShouldStop:
        return self._should_stop

    @property
    def is_bounded(self) -> bool:
        return self._end is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current={self._current}, end={self._end}, "
            f"every={self._interval}, should_stop={self._should_stop!r})"
        )

    # Iteration

    def next_date(self) -> Optional[CalendarDate]:
        """Return the next date, or None once the sequence is finished.

        Once finished, further calls keep returning None and the cursor stays put.
        """
        n = self._current
        if self._should_stop(n, self._end):
            return None
        self._current = self._interval.step(n)
        return n

    def __iter__(self) -> Iterator[CalendarDate]:
        return self

    def __next__(self) -> CalendarDate:
        n = self.next_date()
        if n is None:
            raise StopIteration
        return n

    def strings(self) -> Iterator[str]:
        """Yield the remaining dates as YYYY-MM-DD strings, consuming the sequence."""
        for n in self:
            yield self._formatter.format(n)

    # Queries

    def contains(self, element: DateLike) -> bool:
        """Return whether the sequence yields ``element`` from its current position.

        Non-destructive: the cursor is restored to where it was before the call.
        Safe on infinite sequences because dates only increase, so the search
        stops at the first date past ``element``.

        Raises:
            InvalidStringError: If ``element`` is a string that cannot be parsed
        """
        target = self._coerce(element)
        bookmark = self._current
        try:
            while True:
                n = self.next_date()
                if n is None or n > target:
                    return False
                if n == target:
                    return True
        finally:
            self._current = bookmark

    def __contains__(self, element: DateLike) -> bool:
        return self.contains(element)

    def contains_matching(self, predicate: Callable[[CalendarDate], bool]) -> bool:
        """Return whether any remaining date satisfies ``predicate``.

        The remaining sequence is materialized first, which leaves it exhausted.

        Raises:
            InvalidRequestError: If the sequence is infinite
        """
        if self._end is None:
            raise InvalidRequestError("cannot guarantee an infinite sequence will return")
        return any(predicate(n) for n in self._materialize())

    def reversed(self) -> List[CalendarDate]:
        """Return the remaining dates in reverse order, exhausting the sequence.

        Raises:
            InvalidRequestError: If the sequence is infinite
        """
        if self._end is None:
            raise InvalidRequestError("cannot reverse infinite sequence")
        dates = self._materialize()
        dates.reverse()
        return dates

    def __reversed__(self) -> Iterator[CalendarDate]:
        return iter(self.reversed())

    def _coerce(self, value: Union[DateLike, CalendarDate]) -> CalendarDate:
        if isinstance(value, CalendarDate):
            return value
        return CalendarDate.from_date(to_date(value, self._formatter))

    def _materialize(self) -> List[CalendarDate]:
        dates = list(self)
        logger.debug("Materialized %s dates, sequence exhausted at %s", len(dates), self._current)
        return dates


def make_unbounded(
    start_date_text: str, interval_quantity: int, interval_unit: Union[CalendarUnit, str]
) -> DateSequence:
    """Infinite sequence from ``start_date_text`` every ``interval_quantity`` units."""
    return DateSequence.starting(start_date_text, (interval_quantity, interval_unit))


def make_half_open(
    start_date_text: str,
    end_date_text: str,
    interval_quantity: int,
    interval_unit: Union[CalendarUnit, str],
) -> DateSequence:
    """Sequence over ``[start, end)``."""
    return DateSequence.to(start_date_text, end_date_text, (interval_quantity, interval_unit))


def make_closed(
    start_date_text: str,
    end_date_text: str,
    interval_quantity: int,
    interval_unit: Union[CalendarUnit, str],
) -> DateSequence:
    """Sequence over ``[start, end]``."""
    return DateSequence.through(start_date_text, end_date_text, (interval_quantity, interval_unit))
