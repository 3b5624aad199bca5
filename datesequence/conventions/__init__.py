"""Calendar units, calendar dates and calendar-aware arithmetic."""

from .arithmetic import advance, tenor_to_quantity_and_unit
from .types import CalendarDate, CalendarUnit

__all__ = [
    "CalendarDate",
    "CalendarUnit",
    "advance",
    "tenor_to_quantity_and_unit",
]
