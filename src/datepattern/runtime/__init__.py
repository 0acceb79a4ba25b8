"""Runtime: rendering resolved patterns against dates.

Public API:
    format_date - Render, returning (result, errors)
    format_date_strict - Render, raising DatePatternError
    render - Render an already-parsed token sequence
    render_section - Render a single section
    month_name, weekday_name - CLDR English name lookups

Python 3.13+. Uses Babel for CLDR data.
"""

from .dates import format_date, format_date_strict
from .names import month_name, weekday_name
from .renderer import render, render_section

__all__ = [
    "format_date",
    "format_date_strict",
    "month_name",
    "render",
    "render_section",
    "weekday_name",
]
