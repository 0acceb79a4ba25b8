"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
``str(error)`` is the plain diagnostic message (``Part not supported: qq``)
so the errors read naturally when printed; the full Rust-style rendering is
available through ``error.diagnostic.format_error()``.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateInputError",
    "DatePatternError",
    "NoPartFoundError",
    "PartNotSupportedError",
    "PatternTypeError",
]


class DatePatternError(Exception):
    """Base exception for all datepattern errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DatePatternError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class PartNotSupportedError(DatePatternError):
    """A pattern part matched no section or separator.

    Raised by the resolver on the first unrecognized part; the parts after
    it are never examined.

    Attributes:
        part: The offending substring, verbatim
        position: Character offset of the part in the pattern
    """

    def __init__(self, message: str | Diagnostic, *, part: str, position: int = 0) -> None:
        super().__init__(message)
        self.part = part
        self.position = position


class NoPartFoundError(DatePatternError):
    """The pattern produced no section to render.

    Raised for the empty pattern and for patterns made only of separators.
    """


class PatternTypeError(DatePatternError):
    """The pattern was not a string (runtime defense for untyped callers)."""


class DateInputError(DatePatternError):
    """Date text typed at the prompt could not be parsed.

    Only the command-line front end raises this; the core never builds dates.

    Attributes:
        input_value: The text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value
