"""Structural type for the date collaborator.

The formatter never constructs, validates or mutates dates. It reads the
four accessors below, which ``datetime.date`` and ``datetime.datetime``
already provide, so callers pass stdlib dates directly.

Python 3.13+.
"""

from typing import Protocol

__all__ = ["DateLike"]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class DateLike(Protocol):
    """A valid calendar date.

    Attributes:
        year: Proleptic Gregorian year
        month: Month of year, 1-12
        day: Day of month, 1-31
    """

    @property
    def year(self) -> int:
        """Year number."""
        ...

    @property
    def month(self) -> int:
        """Month number (1-12)."""
        ...

    @property
    def day(self) -> int:
        """Day of month (1-31)."""
        ...

    def isoweekday(self) -> int:
        """Day of week, Monday == 1 ... Sunday == 7."""
        ...
# pylint: enable=unnecessary-ellipsis
