"""Exceptions raised by date sequence construction and queries."""

from __future__ import annotations

from datetime import date
from typing import Any


class DateSequenceError(Exception):
    """Base class for all date sequence errors."""


class InvalidStringError(DateSequenceError, ValueError):
    """Raised when a date string does not match the dashed YYYY-MM-DD form."""

    def __init__(self, text: Any):
        self.text = text
        super().__init__(f"Invalid date string: {text!r}")


class InvalidIntervalError(DateSequenceError, ValueError):
    """Raised when an interval quantity is zero or negative."""

    def __init__(self, quantity: Any, unit: Any):
        self.quantity = quantity
        self.unit = unit
        super().__init__(f"Interval quantity must be positive, got {quantity!r} {unit}")


class InvalidBoundsError(DateSequenceError, ValueError):
    """Raised when the end date precedes the start date."""

    def __init__(self, start: date | None = None, end: date | None = None):
        self.start = start
        self.end = end
        super().__init__(f"End date {end} precedes start date {start}")


class InvalidRequestError(DateSequenceError, RuntimeError):
    """Raised when an operation cannot be honoured, e.g. reversing an infinite sequence."""


class EndDateNotFoundError(DateSequenceError, RuntimeError):
    """Raised when a bounded termination rule is evaluated without an end date.

    This is a programming fault: bounded rules are only ever wired in by the
    bounded constructors, which always supply an end date.
    """

    def __init__(self) -> None:
        super().__init__("end date cannot be None")
