"""Closed vocabulary of pattern tokens.

Uses StrEnum so that every member *is* its canonical spelling:
``Section.YYYY == "yyyy"`` and ``str(Separator.SLASH) == "/"``.
Rendering a member back into a pattern is therefore just ``str(member)``.

Python 3.13+.
"""

from enum import StrEnum
from typing import TypeAlias


class Section(StrEnum):
    """Date component rendered from the formatted date.

    StrEnum provides automatic string conversion: str(Section.MMM) == "mmm"
    """

    YY = "yy"
    """Two-digit year: 24"""

    YYYY = "yyyy"
    """Full year: 2024"""

    M = "m"
    """Month without padding: 3"""

    MM = "mm"
    """Two-digit month: 03"""

    MMM = "mmm"
    """Abbreviated month name: Mar"""

    MMMM = "mmmm"
    """Full month name: March"""

    D = "d"
    """Day of month without padding: 2"""

    DD = "dd"
    """Two-digit day of month: 02"""

    DDD = "ddd"
    """Abbreviated weekday name: Sat"""

    DDDD = "dddd"
    """Full weekday name: Saturday"""


class Separator(StrEnum):
    """Literal character copied verbatim between sections.

    StrEnum provides automatic string conversion: str(Separator.HYPHEN) == "-"
    """

    SLASH = "/"
    """Oblique stroke: 2024/03/02"""

    PERIOD = "."
    """Full stop: 02.03.2024"""

    HYPHEN = "-"
    """Hyphen: 2024-03-02"""

    SPACE = " "
    """Space: 2 Mar 2024"""


Token: TypeAlias = Section | Separator
"""A resolved pattern element."""


__all__ = [
    "Section",
    "Separator",
    "Token",
]
