"""Dash-separated ISO-8601 date strings (e.g. 2018-05-12), always read as UTC."""

from __future__ import annotations

import re
import threading
from datetime import date, datetime, timezone
from typing import Optional, Union

from pandas import Timestamp

from datesequence.conventions.types import CalendarDate
from datesequence.errors import InvalidStringError

DEFAULT_DATE_FORMAT = "{year:04d}-{month:02d}-{day:02d}"

DateLike = Union[str, date, datetime, Timestamp, CalendarDate]


class DashedDateFormatter:
    """Parses and produces YYYY-MM-DD strings.

    Only the exact dashed year-month-day form is accepted: four digit year,
    two digit month and day, ASCII hyphens, nothing else. Years past 9999
    format with more digits and are not accepted back by ``parse``.
    """

    _PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

    def parse(self, text: str) -> date:
        if not isinstance(text, str):
            raise InvalidStringError(text)
        match = self._PATTERN.fullmatch(text)
        if match is None:
            raise InvalidStringError(text)
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise InvalidStringError(text) from exc

    def format(self, dt: Union[date, CalendarDate]) -> str:
        return DEFAULT_DATE_FORMAT.format(year=dt.year, month=dt.month, day=dt.day)


_SHARED_FORMATTER: Optional[DashedDateFormatter] = None  # Built on first use
_SHARED_LOCK = threading.Lock()


def shared_formatter() -> DashedDateFormatter:
    """Return the process-wide formatter, building it on first use."""
    global _SHARED_FORMATTER
    if _SHARED_FORMATTER is None:
        with _SHARED_LOCK:
            if _SHARED_FORMATTER is None:
                _SHARED_FORMATTER = DashedDateFormatter()
    return _SHARED_FORMATTER


def set_shared_formatter(formatter: DashedDateFormatter) -> None:
    """Install the process-wide formatter used when none is injected."""
    global _SHARED_FORMATTER
    with _SHARED_LOCK:
        _SHARED_FORMATTER = formatter


def parse_date(text: str, formatter: Optional[DashedDateFormatter] = None) -> date:
    """
    Parse a 'YYYY-MM-DD' string into a date.

    Raises InvalidStringError for anything else, including valid-looking
    strings that name impossible dates such as '2018-02-30'.
    """
    return (formatter or shared_formatter()).parse(text)


def format_date(dt: DateLike, formatter: Optional[DashedDateFormatter] = None) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    if not isinstance(dt, CalendarDate):
        dt = to_date(dt)
    return (formatter or shared_formatter()).format(dt)


def to_date(date_like: DateLike, formatter: Optional[DashedDateFormatter] = None) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date.

    Timezone-aware values are converted to UTC before the time is dropped.
    """
    if isinstance(date_like, CalendarDate):
        return date_like.to_date()
    if isinstance(date_like, Timestamp):
        if date_like.tzinfo is not None:
            date_like = date_like.tz_convert("UTC")
        return date_like.date()
    if isinstance(date_like, datetime):
        if date_like.tzinfo is not None:
            date_like = date_like.astimezone(timezone.utc)
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        return parse_date(date_like, formatter)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")
