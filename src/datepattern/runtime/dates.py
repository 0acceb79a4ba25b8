"""Pattern-driven date formatting.

- format_date() returns tuple[str | None, tuple[DatePatternError, ...]]
- format_date_strict() returns str and raises DatePatternError
- Patterns are parsed on every call; nothing is cached between calls

Thread-safe. No shared mutable state; the name tables are read-only.

Python 3.13+.
"""

import logging

from datepattern.core import DateLike
from datepattern.diagnostics import DatePatternError, ErrorTemplate, PatternTypeError
from datepattern.syntax import parse_pattern

from .renderer import render

__all__ = ["format_date", "format_date_strict"]

logger = logging.getLogger(__name__)


def format_date_strict(date: DateLike, pattern: str) -> str:
    """Render a date through a pattern, raising on invalid patterns.

    Args:
        date: Date to render (e.g. ``datetime.date(2024, 3, 2)``)
        pattern: Pattern string (e.g. "yyyy-mm-dd")

    Returns:
        Rendered date

    Raises:
        PatternTypeError: If pattern is not a string
        PartNotSupportedError: On the first unsupported part
        NoPartFoundError: If the pattern has no section

    Example:
        >>> format_date_strict(date(2024, 3, 2), "d mmm yy")
        '2 Mar 24'
    """
    if not isinstance(pattern, str):
        diagnostic = ErrorTemplate.pattern_type_invalid(  # type: ignore[unreachable]
            type(pattern).__name__
        )
        raise PatternTypeError(diagnostic)

    return render(parse_pattern(pattern), date)


def format_date(
    date: DateLike,
    pattern: str,
) -> tuple[str | None, tuple[DatePatternError, ...]]:
    """Render a date through a pattern.

    Never raises for a bad pattern. Errors are returned in the tuple.

    A valid pattern is any combination of sections separated by separators.

    Separators:
        ``/`` slash, ``.`` period, ``-`` hyphen, `` `` space

    Sections:
        yy    Two-digit year, e.g. 24
        yyyy  Full year, e.g. 2024
        m     Month, e.g. 3
        mm    Two-digit month, e.g. 03
        mmm   Abbreviated month name, e.g. Mar
        mmmm  Full month name, e.g. March
        d     Day of month, e.g. 2
        dd    Two-digit day of month, e.g. 02
        ddd   Abbreviated weekday name, e.g. Sat
        dddd  Full weekday name, e.g. Saturday

    Names follow the CLDR English calendar data.

    Args:
        date: Date to render
        pattern: Pattern string

    Returns:
        Tuple of (result, errors):
        - result: Rendered string, or None if the pattern is invalid
        - errors: Tuple holding the error (empty tuple on success)

    Examples:
        >>> result, errors = format_date(date(2024, 3, 2), "yyyy-mm-dd")
        >>> result
        '2024-03-02'
        >>> errors
        ()

        >>> result, errors = format_date(date(2024, 3, 2), "yy-qq")
        >>> result is None
        True
        >>> str(errors[0])
        'Part not supported: qq'
    """
    logger.debug("Formatting %r with pattern %r", date, pattern)
    try:
        return (format_date_strict(date, pattern), ())
    except DatePatternError as e:
        logger.debug("Pattern %r rejected: %s", pattern, e)
        return (None, (e,))
