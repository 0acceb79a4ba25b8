"""datepattern - render dates through small token patterns.

Formats a calendar date with a locale-independent pattern language:
sections (yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd) joined by
separators ('/', '.', '-', ' ').

    >>> from datetime import date
    >>> from datepattern import format_date
    >>> format_date(date(2024, 3, 2), "d mmm yy")
    ('2 Mar 24', ())

Public API:
    format_date - Render a date, returning (result, errors)
    format_date_strict - Render a date, raising on invalid patterns
    parse_pattern - Tokenize and resolve a pattern once
    render - Render already-resolved tokens
    Section, Separator, Token - Pattern vocabulary

Exceptions:
    DatePatternError - Base exception class
    PartNotSupportedError - Unknown part in the pattern
    NoPartFoundError - Pattern without any section
    PatternTypeError - Pattern was not a string

Submodules:
    datepattern.syntax - Tokenizer and resolver
    datepattern.runtime - Renderer and CLDR name tables
    datepattern.diagnostics - Error types, codes and formatting
    datepattern.cli - Interactive front end
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    DatePatternError,
    NoPartFoundError,
    PartNotSupportedError,
    PatternTypeError,
)
from .enums import Section, Separator, Token
from .runtime import format_date, format_date_strict, render
from .syntax import parse_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("datepattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DatePatternError",
    "NoPartFoundError",
    "PartNotSupportedError",
    "PatternTypeError",
    "Section",
    "Separator",
    "Token",
    "__version__",
    "format_date",
    "format_date_strict",
    "parse_pattern",
    "render",
]
