"""Diagnostic building blocks: numeric codes, file positions and the
Diagnostic record every lngkit error carries.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourcePosition",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every reported problem.

    Ranges:
        3000-3999: Syntax errors (scanner/parser failures)
        4000-4999: Plural grammar errors
        5000-5099: Validation errors (source text structure)
        5100-5199: Validation errors (translation content)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_TOKEN = 3001
    HEADER_ITEM_MISSING = 3002
    HEADER_VALUE_INVALID = 3003

    # Plural grammar errors (4000-4999)
    PLURAL_DEFINITION_INVALID = 4001

    # Validation errors (5000-5099) - source text structure
    SOURCE_TEXT_EMPTY = 5001
    ENCODING_INVALID = 5002
    PLURAL_SOURCE_PLACEHOLDER_MISSING = 5003
    DUPLICATE_ENTRY = 5004

    # Validation errors (5100-5199) - translation content
    PLACEHOLDER_MISSING = 5101
    LINE_BREAK_MISMATCH = 5102
    ACCELERATOR_MISMATCH = 5103
    ACCELERATOR_AT_END = 5104
    COLON_MISSING = 5105
    PERIOD_MISSING = 5106
    ELLIPSIS_MISSING = 5107
    PROTECTED_TERM_MISSING = 5108
    SPACE_BEFORE_PUNCTUATION = 5109
    PLURAL_FORM_COUNT_MISMATCH = 5110
    PLURAL_FORM_DUPLICATE = 5111
    PLURAL_FORM_NUMBER_MISSING = 5112


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Row and column of a problem inside a language file.

    Attributes:
        row: Line number (0-indexed)
        col: Column number in characters (0-indexed)
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        """Raises ValueError for negative coordinates."""
        if self.row < 0:
            msg = f"SourcePosition.row must be >= 0, got {self.row}"
            raise ValueError(msg)
        if self.col < 0:
            msg = f"SourcePosition.col must be >= 0, got {self.col}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported problem.

    Attributes:
        code: Unique error code
        message: Text shown to the translator
        position: Location in the language file (None until known)
        hint: How to fix it, if there is a known remedy
    """

    code: DiagnosticCode
    message: str
    position: SourcePosition | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """The bare message, without code or position."""
        return self.message

    def at(self, position: SourcePosition) -> "Diagnostic":
        """Return a copy of this diagnostic located at position."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            position=position,
            hint=self.hint,
        )

    def format_error(self) -> str:
        """Multi-line rendering with code, location and hint.

        Example output:
            error[PLACEHOLDER_MISSING]: Placeholder %x missing in translation
              --> row 12, column 8

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
