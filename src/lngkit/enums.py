"""Enumerations for lngkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenType(StrEnum):
    """Kind of token produced by the scanner.

    Tag tokens carry their literal spelling as value, so
    ``str(TokenType.SOURCE) == "<source>"``.
    """

    HEADER = "<header>"
    """Start of the header block."""

    SOURCE = "<source>"
    """Start of an entry: the original text follows."""

    TARGET = "<target>"
    """Start of the translation part of an entry."""

    EMPTY = "<empty>"
    """Marker for an untranslated entry."""

    PLURAL = "<pluralform>"
    """Prefix of one plural form (original or translated)."""

    TEXT = "text"
    """Free text between tags."""

    END = "end"
    """End of input."""

    @property
    def is_tag(self) -> bool:
        """Whether this token type has a literal spelling in the source."""
        return self.value.startswith("<")


class LoadStatus(StrEnum):
    """Outcome of loading a language file from disk."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


# Tag tokens in scan order.
KNOWN_TAGS: tuple[TokenType, ...] = tuple(t for t in TokenType if t.is_tag)

__all__ = [
    "KNOWN_TAGS",
    "LoadStatus",
    "TokenType",
]
