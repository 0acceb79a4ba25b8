"""Month and weekday name tables.

The four tables are read once from Babel's CLDR data for English and frozen
into tuples at import time. They are never written afterwards, so any
number of threads may read them without locking.

There is no locale negotiation: names are always English, whatever the
process locale, because patterns are meant to be locale-independent.

Python 3.13+. Uses Babel for CLDR data.
"""

import logging

from babel.dates import get_day_names, get_month_names

from datepattern.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR, NAMES_LOCALE

__all__ = [
    "DAYS_ABBREVIATED",
    "DAYS_WIDE",
    "MONTHS_ABBREVIATED",
    "MONTHS_WIDE",
    "month_name",
    "weekday_name",
]

logger = logging.getLogger(__name__)


def _load_months(width: str) -> tuple[str, ...]:
    # Babel keys months 1-12
    names = get_month_names(width, context="format", locale=NAMES_LOCALE)
    return tuple(str(names[month]) for month in range(1, MONTHS_PER_YEAR + 1))


def _load_days(width: str) -> tuple[str, ...]:
    # Babel keys weekdays 0-6 starting on Monday
    names = get_day_names(width, context="format", locale=NAMES_LOCALE)
    return tuple(str(names[day]) for day in range(DAYS_PER_WEEK))


# Index 0 holds January / Monday; accessors below take 1-based numbers.
MONTHS_ABBREVIATED: tuple[str, ...] = _load_months("abbreviated")
MONTHS_WIDE: tuple[str, ...] = _load_months("wide")
DAYS_ABBREVIATED: tuple[str, ...] = _load_days("abbreviated")
DAYS_WIDE: tuple[str, ...] = _load_days("wide")

logger.debug("Loaded month and weekday names from CLDR locale '%s'", NAMES_LOCALE)


def month_name(month: int, *, wide: bool = False) -> str:
    """Return the English name of a month.

    Args:
        month: Month number, 1-12
        wide: Full name ("March") instead of abbreviation ("Mar")

    Returns:
        Month name

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        msg = f"month must be in 1..{MONTHS_PER_YEAR}, got {month}"
        raise ValueError(msg)
    table = MONTHS_WIDE if wide else MONTHS_ABBREVIATED
    return table[month - 1]


def weekday_name(isoweekday: int, *, wide: bool = False) -> str:
    """Return the English name of a weekday.

    Args:
        isoweekday: ISO weekday number, Monday == 1 ... Sunday == 7
        wide: Full name ("Saturday") instead of abbreviation ("Sat")

    Returns:
        Weekday name

    Raises:
        ValueError: If isoweekday is outside 1-7
    """
    if not 1 <= isoweekday <= DAYS_PER_WEEK:
        msg = f"isoweekday must be in 1..{DAYS_PER_WEEK}, got {isoweekday}"
        raise ValueError(msg)
    table = DAYS_WIDE if wide else DAYS_ABBREVIATED
    return table[isoweekday - 1]
