"""lngkit exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Syntax and validation errors share one shape: a message plus the 0-based
row/column of the offending position.

Python 3.13+. Zero external dependencies.
"""

from typing import Self

from .codes import Diagnostic, SourcePosition


class LngError(Exception):
    """Base exception for all lngkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LngError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """Plain error message without code or position decoration."""
        if self.diagnostic is not None:
            return self.diagnostic.message
        return str(self)


class LngSyntaxError(LngError):
    """Language file could not be parsed.

    Always fatal to the current parse: no partial model is returned.
    """

    @property
    def position(self) -> SourcePosition | None:
        """Offending position, if known."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.position

    @property
    def row(self) -> int | None:
        """0-based row of the offending position."""
        position = self.position
        return None if position is None else position.row

    @property
    def col(self) -> int | None:
        """0-based column of the offending position."""
        position = self.position
        return None if position is None else position.col

    def at(self, position: SourcePosition) -> Self:
        """Return a copy of this error located at position.

        Errors without a diagnostic are returned unchanged.
        """
        if self.diagnostic is None:
            return self
        return type(self)(self.diagnostic.at(position))


class LngValidationError(LngSyntaxError):
    """Translation entry violates a validation rule.

    The validator raises it without position; the parser re-raises it at the
    scanner position of the offending entry.
    """


class PluralGrammarError(LngError):
    """Plural form definition cannot be compiled or is inconsistent.

    Examples:
    - Syntax error in the expression (``n == 1 ? 0``)
    - Expression yields a form index outside ``[0, plural_count)``
    - A plural form is never selected for any count
    """
