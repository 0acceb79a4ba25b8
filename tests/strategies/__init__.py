"""Hypothesis strategies for datepattern property-based testing.

Usage:
    from tests.strategies import valid_patterns, any_dates
    from tests.strategies.patterns import unsupported_parts
"""

from .patterns import (
    any_dates,
    section_spellings,
    separator_chars,
    unsupported_parts,
    valid_patterns,
)

__all__ = [
    "any_dates",
    "section_spellings",
    "separator_chars",
    "unsupported_parts",
    "valid_patterns",
]
