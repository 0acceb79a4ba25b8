"""Shared constants for datepattern.

Single source of truth for the values the tokenizer, the name tables and
the command-line front end agree on. Placing them here keeps the syntax and
runtime packages free of circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "SEPARATOR_CHARS",
    # Name tables
    "NAMES_LOCALE",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    # Command-line front end
    "DATE_INPUT_FORMAT",
    "DATE_PROMPT",
    "PATTERN_PROMPT",
    "RESULT_PREFIX",
    "ERROR_PREFIX",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Characters that split a pattern into parts. Each one is its own token;
# consecutive separators are never merged.
SEPARATOR_CHARS: frozenset[str] = frozenset({"/", ".", "-", " "})

# ============================================================================
# NAME TABLES
# ============================================================================

# Month and weekday names come from CLDR English regardless of the
# process locale.
NAMES_LOCALE: str = "en"

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# ============================================================================
# COMMAND-LINE FRONT END
# ============================================================================

# strptime format for dates typed at the prompt (e.g. 2024-03-02)
DATE_INPUT_FORMAT: str = "%Y-%m-%d"

DATE_PROMPT: str = "Insert date (YYYY-MM-DD): "
PATTERN_PROMPT: str = "Insert format: "
RESULT_PREFIX: str = "Formatted date: "
ERROR_PREFIX: str = "Error: "
