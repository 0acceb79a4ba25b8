"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Callers build a Diagnostic through one of these factories and hand it to
    the matching exception class.
    """

    # Spellings listed in hints, in vocabulary order
    _SECTIONS_HINT = "yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd"
    _SEPARATORS_HINT = "'/', '.', '-', ' '"

    @staticmethod
    def part_not_supported(part: str, position: int) -> Diagnostic:
        """Pattern part matched no section or separator.

        Args:
            part: The offending substring, verbatim
            position: Character offset of the part in the pattern

        Returns:
            Diagnostic for PART_NOT_SUPPORTED
        """
        msg = f"Part not supported: {part}"
        return Diagnostic(
            code=DiagnosticCode.PART_NOT_SUPPORTED,
            message=msg,
            span=SourceSpan(start=position, end=position + len(part)),
            hint=(
                f"Use one of: {ErrorTemplate._SECTIONS_HINT}, "
                f"separated by {ErrorTemplate._SEPARATORS_HINT}"
            ),
        )

    @staticmethod
    def no_part_found() -> Diagnostic:
        """Pattern produced no section.

        Returns:
            Diagnostic for NO_PART_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PART_FOUND,
            message="No part found",
            hint="A pattern needs at least one section, e.g. 'yyyy-mm-dd'",
        )

    @staticmethod
    def pattern_type_invalid(type_name: str) -> Diagnostic:
        """Pattern was not a string.

        Args:
            type_name: Name of the type actually received

        Returns:
            Diagnostic for PATTERN_TYPE_INVALID
        """
        msg = f"Pattern must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TYPE_INVALID,
            message=msg,
        )

    @staticmethod
    def date_input_invalid(value: str, reason: str) -> Diagnostic:
        """Date text typed by the user could not be parsed.

        Args:
            value: The text that failed to parse
            reason: Parser explanation (usually from strptime)

        Returns:
            Diagnostic for DATE_INPUT_INVALID
        """
        msg = f"Invalid date '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.DATE_INPUT_INVALID,
            message=msg,
            hint="Dates are entered as YYYY-MM-DD, e.g. 2024-03-02",
        )
