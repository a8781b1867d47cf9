"""Language file syntax package.

Provides scanner, parser, translation rules, model definitions and
generation. Separate from localization to enable tooling (linters,
formatters, editor plugins) that never touches the file system.

Python 3.13+.
"""

from collections.abc import Sequence

from lngkit.plural_rules import PluralGrammarFactory

from .model import (
    LngResource,
    PluralEntry,
    PluralForms,
    SingularEntry,
    SingularPluralPair,
    Token,
    TranslationEntry,
    TranslationHeader,
    TranslationMap,
    TranslationPluralMap,
)
from .parser import LngParser
from .position import column_offset, line_offset, source_position
from .scanner import Scanner, decode_source, normalize_text
from .serializer import SerializationValidationError, generate_lng
from .validator import validate_plural_translation, validate_translation

__all__ = [
    "LngParser",
    "LngResource",
    "PluralEntry",
    "PluralForms",
    "Scanner",
    "SerializationValidationError",
    "SingularEntry",
    "SingularPluralPair",
    "Token",
    "TranslationEntry",
    "TranslationHeader",
    "TranslationMap",
    "TranslationPluralMap",
    "column_offset",
    "decode_source",
    "generate_lng",
    "line_offset",
    "normalize_text",
    "parse_header",
    "parse_lng",
    "source_position",
    "validate_plural_translation",
    "validate_translation",
]


def parse_lng(
    source: bytes | str,
    *,
    grammar_factory: PluralGrammarFactory | None = None,
    max_source_size: int | None = None,
    protected_terms: Sequence[str] | None = None,
    reject_duplicates: bool = False,
) -> LngResource:
    """Parse a language file.

    Convenience function for LngParser(...).parse(); keyword arguments are
    passed to the LngParser constructor.

    Args:
        source: Raw file content (UTF-8, optional BOM) or decoded text

    Returns:
        Header plus singular and plural translation maps

    Raises:
        LngSyntaxError: On the first syntax error
        LngValidationError: On the first entry violating a translation rule

    Example:
        >>> from lngkit.syntax import parse_lng
        >>> resource = parse_lng(source_bytes)
        >>> resource.header.locale
        'en_GB'
    """
    parser = LngParser(
        grammar_factory=grammar_factory,
        max_source_size=max_source_size,
        protected_terms=protected_terms,
        reject_duplicates=reject_duplicates,
    )
    return parser.parse(source)


def parse_header(source: bytes | str) -> TranslationHeader:
    """Parse only the header of a language file with default settings.

    Convenience function for LngParser().parse_header().
    """
    parser = LngParser()
    return parser.parse_header(source)
