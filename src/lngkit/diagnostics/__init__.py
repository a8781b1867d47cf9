"""Diagnostic system for lngkit errors.

Provides structured error diagnostics with codes, positions and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourcePosition
from .errors import (
    LngError,
    LngSyntaxError,
    LngValidationError,
    PluralGrammarError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LngError",
    "LngSyntaxError",
    "LngValidationError",
    "OutputFormat",
    "PluralGrammarError",
    "SourcePosition",
]
