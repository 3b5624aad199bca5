"""Date Sequence Generator.

This package generates infinite and bounded sequences of calendar dates spaced
by a fixed interval, and parses/formats dash-separated ISO-8601 date strings.

Key modules:
- sequence: Sequence engine, intervals and termination rules
- conventions: Calendar units and calendar-aware arithmetic
- utils: YYYY-MM-DD parsing and formatting
- errors: Exceptions raised on invalid input or requests
"""

from .conventions import CalendarDate, CalendarUnit, advance
from .errors import (
    DateSequenceError,
    EndDateNotFoundError,
    InvalidBoundsError,
    InvalidIntervalError,
    InvalidRequestError,
    InvalidStringError,
)
from .sequence import (
    Closed,
    DateSequence,
    HalfOpen,
    Interval,
    TerminationRule,
    Unbounded,
    make_closed,
    make_half_open,
    make_unbounded,
)
from .utils import DashedDateFormatter, format_date, parse_date, to_date

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Sequences
    "DateSequence",
    "Interval",
    "TerminationRule",
    "Unbounded",
    "HalfOpen",
    "Closed",
    "make_unbounded",
    "make_half_open",
    "make_closed",
    # Calendar
    "CalendarDate",
    "CalendarUnit",
    "advance",
    # Date text
    "DashedDateFormatter",
    "parse_date",
    "format_date",
    "to_date",
    # Errors
    "DateSequenceError",
    "InvalidStringError",
    "InvalidIntervalError",
    "InvalidBoundsError",
    "InvalidRequestError",
    "EndDateNotFoundError",
]
