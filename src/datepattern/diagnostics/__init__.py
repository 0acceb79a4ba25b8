"""Diagnostic system for datepattern errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DateInputError,
    DatePatternError,
    NoPartFoundError,
    PartNotSupportedError,
    PatternTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateInputError",
    "DatePatternError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NoPartFoundError",
    "OutputFormat",
    "PartNotSupportedError",
    "PatternTypeError",
    "SourceSpan",
]
