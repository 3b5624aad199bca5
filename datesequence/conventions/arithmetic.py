"""
Calendar-aware date arithmetic and tenor parsing.

All arithmetic is Gregorian and date-only; month and year steps clamp to the
last day of the target month when the day does not exist there. The Gregorian
calendar repeats every 400 years (146097 days), so dates beyond ``date.max``
are stepped by moving them into range by whole cycles and back again.
"""

from datetime import date
from typing import Dict, Tuple, Union

from dateutil.relativedelta import relativedelta

from .types import CalendarDate, CalendarUnit

CYCLE_YEARS = 400
CYCLE_DAYS = 146097

_TENOR_SUFFIXES: Dict[str, CalendarUnit] = {
    "D": CalendarUnit.DAY,
    "W": CalendarUnit.WEEK,
    "M": CalendarUnit.MONTH,
    "Y": CalendarUnit.YEAR,
}


def _shift(dt: CalendarDate, quantity: int, unit: CalendarUnit) -> CalendarDate:
    cycles, base_year = divmod(dt.year - 1, CYCLE_YEARS)
    anchor = date(base_year + 1, dt.month, dt.day)

    if unit in (CalendarUnit.DAY, CalendarUnit.WEEK):
        days = quantity * 7 if unit is CalendarUnit.WEEK else quantity
        extra, days = divmod(days, CYCLE_DAYS)
        moved = anchor + relativedelta(days=days)
    elif unit in (CalendarUnit.MONTH, CalendarUnit.YEAR):
        months = quantity * 12 if unit is CalendarUnit.YEAR else quantity
        years, months = divmod(months, 12)
        extra, years = divmod(years, CYCLE_YEARS)
        moved = anchor + relativedelta(years=years, months=months)
    else:
        raise ValueError(f"Unsupported calendar unit: {unit}")

    return CalendarDate(moved.year + (cycles + extra) * CYCLE_YEARS, moved.month, moved.day)


def advance(
    dt: Union[date, CalendarDate], quantity: int, unit: CalendarUnit
) -> Union[date, CalendarDate]:
    """Return ``dt`` moved forward by ``quantity`` units of ``unit``.

    A ``date`` comes back as a ``date`` (OverflowError past ``date.max``);
    a ``CalendarDate`` comes back as a ``CalendarDate`` with no upper bound.

    Examples:
        >>> advance(date(2018, 1, 31), 1, CalendarUnit.MONTH)
        datetime.date(2018, 2, 28)
        >>> advance(CalendarDate(9999, 12, 31), 1, CalendarUnit.DAY)
        CalendarDate(10000, 1, 1)
    """
    if not isinstance(unit, CalendarUnit):
        raise ValueError(f"Unsupported calendar unit: {unit}")
    if isinstance(dt, CalendarDate):
        return _shift(dt, quantity, unit)
    return _shift(CalendarDate.from_date(dt), quantity, unit).to_date()


def tenor_to_quantity_and_unit(tenor: str) -> Tuple[int, CalendarUnit]:
    """Convert a tenor string (e.g. '7D', '2W', '3M', '1Y') to (quantity, unit)."""
    t = tenor.upper().strip()
    if len(t) < 2 or t[-1] not in _TENOR_SUFFIXES or not (t[:-1].isascii() and t[:-1].isdigit()):
        raise ValueError(f"Unsupported tenor: {tenor}")
    return int(t[:-1]), _TENOR_SUFFIXES[t[-1]]
