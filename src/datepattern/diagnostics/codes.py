"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (tokenizing, resolving, rendering)
        2000-2999: Input errors reported by the command-line front end
    """

    # Pattern errors (1000-1999)
    PART_NOT_SUPPORTED = 1001
    NO_PART_FOUND = 1002
    PATTERN_TYPE_INVALID = 1003

    # Input errors (2000-2999)
    DATE_INPUT_INVALID = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a part inside the pattern string.

    Patterns are single-line, so a span is a half-open range of character
    offsets. Offsets count Unicode code points, not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the first character."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough structure for
    both humans (hint, column) and tools (code, span).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern (None when not tied to a part)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PART_NOT_SUPPORTED]: Part not supported: qq
              --> column 4
              = help: Use one of: yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
