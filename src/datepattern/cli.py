"""Interactive front end for datepattern.

Reads a date and a pattern from the user, prints the rendered date or the
error, and asks again. Bad input never ends the loop; only the end of the
input stream (or a failure reading it) does.

Usage:
    datepattern                          # interactive loop
    datepattern 2024-03-02 "d mmm yy"    # format once and exit
    datepattern --errors rust            # Rust-style error output

Exit codes:
    0: End of input reached (interactive) or formatting succeeded (one-shot)
    1: Reading input failed (interactive) or date/pattern invalid (one-shot)

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date, datetime
from typing import TextIO

from datepattern.constants import (
    DATE_INPUT_FORMAT,
    DATE_PROMPT,
    ERROR_PREFIX,
    PATTERN_PROMPT,
    RESULT_PREFIX,
)
from datepattern.diagnostics import (
    DateInputError,
    DatePatternError,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)
from datepattern.runtime import format_date

__all__ = ["main", "parse_input_date", "run_interactive", "run_once"]

logger = logging.getLogger(__name__)


def parse_input_date(value: str) -> date:
    """Parse a date typed by the user.

    Args:
        value: Date text in YYYY-MM-DD form (surrounding whitespace ignored)

    Returns:
        The parsed date

    Raises:
        DateInputError: If the text is not a valid YYYY-MM-DD date
    """
    text = value.strip()
    try:
        return datetime.strptime(text, DATE_INPUT_FORMAT).date()
    except ValueError as e:
        diagnostic = ErrorTemplate.date_input_invalid(text, str(e))
        raise DateInputError(diagnostic, input_value=text) from e


def _describe(error: DatePatternError, formatter: DiagnosticFormatter) -> str:
    if error.diagnostic is None:
        return str(error)
    return formatter.format(error.diagnostic)


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.strip()


def run_once(
    date_text: str,
    pattern: str,
    formatter: DiagnosticFormatter,
    *,
    stdout: TextIO | None = None,
) -> int:
    """Format a single date and print the result.

    Args:
        date_text: Date in YYYY-MM-DD form
        pattern: Pattern string
        formatter: Renders errors for display
        stdout: Output stream (default: sys.stdout)

    Returns:
        Exit code: 0 on success, 1 on invalid date or pattern
    """
    out = stdout if stdout is not None else sys.stdout
    try:
        value = parse_input_date(date_text)
    except DateInputError as e:
        print(f"{ERROR_PREFIX}{_describe(e, formatter)}", file=out)
        return 1

    result, errors = format_date(value, pattern)
    if errors:
        for error in errors:
            print(f"{ERROR_PREFIX}{_describe(error, formatter)}", file=out)
        return 1

    print(result, file=out)
    return 0


def run_interactive(
    formatter: DiagnosticFormatter,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Prompt for dates and patterns until the input stream ends.

    Args:
        formatter: Renders errors for display
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)
        stderr: Stream for input failures (default: sys.stderr)

    Returns:
        Exit code: 0 at end of input, 1 if reading input failed
    """
    inp = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    while True:
        try:
            date_text = _read_line(DATE_PROMPT, inp, out)
            try:
                value = parse_input_date(date_text)
            except DateInputError as e:
                print(f"{ERROR_PREFIX}{_describe(e, formatter)}", file=out, flush=True)
                continue

            pattern = _read_line(PATTERN_PROMPT, inp, out)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            logger.debug("Input stream closed, leaving interactive loop")
            return 0
        except OSError as e:
            logger.error("Reading input failed: %s", e)
            print(f"Error reading input: {e}", file=err)
            return 1

        result, errors = format_date(value, pattern)
        if errors:
            for error in errors:
                print(f"{ERROR_PREFIX}{_describe(error, formatter)}", file=out)
        else:
            print(f"{RESULT_PREFIX}{result}", file=out)
        out.flush()


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="datepattern",
        description="Format dates with yyyy/mm/dd style patterns.",
        epilog=(
            "Sections: yy yyyy m mm mmm mmmm d dd ddd dddd. "
            "Separators: '/' '.' '-' and space."
        ),
    )
    parser.add_argument(
        "date",
        nargs="?",
        help="Date to format (YYYY-MM-DD). Omit for the interactive prompt.",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        help="Pattern to format the date with, e.g. 'd mmm yyyy'",
    )
    parser.add_argument(
        "--errors",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.SIMPLE.value,
        help="How to display errors (default: simple)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if args.date is not None and args.pattern is None:
        parser.error("a pattern is required when a date is given")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``datepattern`` console script."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.errors))

    if args.date is not None:
        return run_once(args.date, args.pattern, formatter)
    return run_interactive(formatter)
