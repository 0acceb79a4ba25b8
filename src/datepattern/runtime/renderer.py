"""Section rendering.

Each section renders from the date alone; no token ever looks at its
neighbours. Separators render as their own character. The output is the
plain concatenation of the rendered tokens.

Python 3.13+.
"""

from collections.abc import Iterable

from datepattern.core import DateLike
from datepattern.diagnostics import ErrorTemplate, NoPartFoundError
from datepattern.enums import Section, Separator, Token

from .names import month_name, weekday_name

__all__ = ["render", "render_section"]


def render_section(section: Section, date: DateLike) -> str:
    """Render one section against a date.

    Args:
        section: Section to render
        date: Date supplying year, month, day and weekday

    Returns:
        Rendered text (e.g. "24" for YY in 2024)
    """
    match section:
        case Section.YY:
            return f"{date.year % 100:02d}"
        case Section.YYYY:
            return str(date.year)
        case Section.M:
            return str(date.month)
        case Section.MM:
            return f"{date.month:02d}"
        case Section.MMM:
            return month_name(date.month)
        case Section.MMMM:
            return month_name(date.month, wide=True)
        case Section.D:
            return str(date.day)
        case Section.DD:
            return f"{date.day:02d}"
        case Section.DDD:
            return weekday_name(date.isoweekday())
        case Section.DDDD:
            return weekday_name(date.isoweekday(), wide=True)


def render(tokens: Iterable[Token], date: DateLike) -> str:
    """Render a resolved token sequence.

    Args:
        tokens: Resolved tokens in pattern order
        date: Date to render

    Returns:
        Concatenation of every token's rendering

    Raises:
        NoPartFoundError: If the tokens contain no section
    """
    parts: list[str] = []
    has_section = False
    for token in tokens:
        if isinstance(token, Separator):
            parts.append(token.value)
        else:
            has_section = True
            parts.append(render_section(token, date))

    if not has_section:
        raise NoPartFoundError(ErrorTemplate.no_part_found())
    return "".join(parts)
