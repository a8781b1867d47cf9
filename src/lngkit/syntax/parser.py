"""Recursive-descent parser for language files.

Grammar:
    resource    := header entry*
    header      := HEADER text
    entry       := SOURCE (singular | plural)
    singular    := text TARGET (text | EMPTY)
    plural      := PLURAL text PLURAL text TARGET ((PLURAL text)+ | EMPTY)

The parser pulls tokens one at a time from a Scanner and keeps exactly one
token of lookahead. Every entry is validated before it is stored; the first
syntax or validation error aborts the parse (no partial model is returned).

Error positions:
    Errors about the header (missing items, invalid plural_count, invalid
    plural definition) are reported just after the header tag. All other errors are
    reported at the scanner position, i.e. just after the lookahead token.

Duplicate entries:
    The first occurrence of an original text wins; later duplicates are
    dropped with a logged warning, or rejected with reject_duplicates=True.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large files.
"""

import logging
from collections.abc import Callable, Sequence

from lngkit.constants import (
    DEFAULT_PROTECTED_TERMS,
    MAX_SOURCE_SIZE,
    WHITESPACE_CHARS,
)
from lngkit.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    LngSyntaxError,
    LngValidationError,
    PluralGrammarError,
    SourcePosition,
)
from lngkit.enums import TokenType
from lngkit.plural_rules import PluralFormInfo, PluralGrammar, PluralGrammarFactory

from .model import (
    LngResource,
    SingularPluralPair,
    Token,
    TranslationHeader,
    TranslationMap,
    TranslationPluralMap,
)
from .scanner import Scanner
from .validator import validate_plural_translation, validate_translation

__all__ = ["LngParser"]

logger = logging.getLogger(__name__)


def _split_header_items(raw: str) -> dict[str, str]:
    """Decompose header text into ``name: value`` items.

    Lines without a colon or with an empty name are ignored; the first
    occurrence of a name wins.
    """
    items: dict[str, str] = {}
    for line in raw.split("\n"):
        name, sep, value = line.partition(":")
        name = name.strip(WHITESPACE_CHARS)
        if sep and name:
            items.setdefault(name, value.strip(WHITESPACE_CHARS))
    return items


def _describe_expected(token_type: TokenType) -> str:
    match token_type:
        case TokenType.TEXT:
            return "text"
        case TokenType.END:
            return "end of file"
        case _:
            return str(token_type)


class _TokenStream:
    """One token of lookahead over a scanner."""

    __slots__ = ("scanner", "token")

    def __init__(self, source: bytes | str) -> None:
        self.scanner = Scanner(source)
        self.token: Token = self.scanner.next_token()

    def advance(self) -> None:
        self.token = self.scanner.next_token()

    def error(self, diagnostic: Diagnostic) -> LngSyntaxError:
        return LngSyntaxError(diagnostic.at(self.scanner.position))

    def expect(self, token_type: TokenType) -> None:
        if self.token.type != token_type:
            raise self.error(
                ErrorTemplate.unexpected_token(
                    _describe_expected(token_type), self.token.describe()
                )
            )

    def consume(self, token_type: TokenType) -> Token:
        self.expect(token_type)
        token = self.token
        self.advance()
        return token


class LngParser:
    """Language file parser.

    Design:
    - Stateless between calls: all scanning state is local to parse()
    - Validation is part of parsing: a file that parses is a file that
      passed every translation rule

    Attributes:
        max_source_size: Maximum source size in UTF-8 bytes (default: 10 MB)
        protected_terms: Names that must appear verbatim in translations
        reject_duplicates: Raise on duplicate entries instead of dropping them

    Example:
        >>> parser = LngParser()
        >>> resource = parser.parse(source_bytes)
        >>> resource.translations["Hello"]
        'Bonjour'
    """

    __slots__ = (
        "_grammar_factory",
        "_max_source_size",
        "_protected_terms",
        "_reject_duplicates",
    )

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        protected_terms: Sequence[str] | None = None,
        reject_duplicates: bool = False,
        grammar_factory: PluralGrammarFactory | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            max_source_size: Maximum source size (default: 10 MB).
                            Set to 0 to disable the limit (not recommended).
            protected_terms: Product and file names that must never be
                            translated (default: DEFAULT_PROTECTED_TERMS)
            reject_duplicates: Raise LngValidationError for duplicate entries
            grammar_factory: Builds the plural grammar from the header
                            (default: PluralFormInfo)
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._protected_terms = tuple(
            protected_terms if protected_terms is not None else DEFAULT_PROTECTED_TERMS
        )
        self._reject_duplicates = reject_duplicates
        self._grammar_factory: PluralGrammarFactory = (
            grammar_factory if grammar_factory is not None else PluralFormInfo
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size."""
        return self._max_source_size

    @property
    def protected_terms(self) -> tuple[str, ...]:
        """Names that must appear verbatim in translations."""
        return self._protected_terms

    @property
    def reject_duplicates(self) -> bool:
        """Whether duplicate entries are an error."""
        return self._reject_duplicates

    def parse(self, source: bytes | str) -> LngResource:
        """Parse a complete language file.

        Args:
            source: Raw file content (UTF-8, optional BOM) or decoded text

        Returns:
            Header plus singular and plural translation maps

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            LngSyntaxError: On the first syntax error or invalid plural
                definition
            LngValidationError: On the first entry violating a translation rule
        """
        self._check_size(source)
        stream = _TokenStream(source)

        header, header_pos = self._parse_header(stream)
        grammar = self._build_grammar(header, header_pos)

        translations: TranslationMap = {}
        plural_translations: TranslationPluralMap = {}
        while stream.token.type != TokenType.END:
            self._parse_entry(stream, grammar, translations, plural_translations)

        logger.debug(
            "Parsed language file for %s: %d singular, %d plural entries",
            header.locale,
            len(translations),
            len(plural_translations),
        )
        return LngResource(
            header=header,
            translations=translations,
            plural_translations=plural_translations,
        )

    def parse_header(self, source: bytes | str) -> TranslationHeader:
        """Parse only the header of a language file.

        Entries are not scanned and the plural definition is not compiled.

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            LngSyntaxError: If the header is missing or incomplete
        """
        self._check_size(source)
        header, _ = self._parse_header(_TokenStream(source))
        return header

    def _check_size(self, source: bytes | str) -> None:
        if self._max_source_size <= 0:
            return
        # str input is measured in UTF-8 bytes, like the file it came from
        size = (
            len(source.encode("utf-8", errors="surrogateescape"))
            if isinstance(source, str)
            else len(source)
        )
        if size > self._max_source_size:
            msg = (
                f"Source size ({size:,} bytes) exceeds maximum "
                f"({self._max_source_size:,} bytes). "
                "Configure max_source_size in LngParser constructor to increase limit."
            )
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def _parse_header(self, stream: _TokenStream) -> tuple[TranslationHeader, SourcePosition]:
        header_pos = stream.scanner.position
        stream.consume(TokenType.HEADER)
        items = _split_header_items(stream.consume(TokenType.TEXT).text)

        def value(name: str) -> str:
            if name not in items:
                raise LngSyntaxError(ErrorTemplate.header_item_missing(name).at(header_pos))
            return items[name]

        language_name = value("language")
        locale = value("locale")
        flag_file = value("image")
        plural_count_text = value("plural_count")
        try:
            plural_count = int(plural_count_text)
        except ValueError as e:
            raise LngSyntaxError(
                ErrorTemplate.header_value_invalid("plural_count", plural_count_text).at(
                    header_pos
                )
            ) from e
        plural_definition = value("plural_definition")
        translator_name = value("translator")

        header = TranslationHeader(
            language_name=language_name,
            translator_name=translator_name,
            locale=locale,
            flag_file=flag_file,
            plural_count=plural_count,
            plural_definition=plural_definition,
        )
        return header, header_pos

    def _build_grammar(
        self, header: TranslationHeader, header_pos: SourcePosition
    ) -> PluralGrammar:
        try:
            return self._grammar_factory(header.plural_definition, header.plural_count)
        except PluralGrammarError as e:
            diagnostic = (
                e.diagnostic
                if e.diagnostic is not None
                else ErrorTemplate.plural_definition_invalid(str(e))
            )
            raise LngSyntaxError(diagnostic.at(header_pos)) from e

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def _parse_entry(
        self,
        stream: _TokenStream,
        grammar: PluralGrammar,
        translations: TranslationMap,
        plural_translations: TranslationPluralMap,
    ) -> None:
        stream.consume(TokenType.SOURCE)

        if stream.token.type == TokenType.PLURAL:
            self._parse_plural(stream, grammar, plural_translations)
            return

        original = stream.consume(TokenType.TEXT).text

        stream.consume(TokenType.TARGET)
        if stream.token.type == TokenType.TEXT:
            translation = stream.token.text
            stream.advance()
        else:
            stream.consume(TokenType.EMPTY)
            translation = ""

        self._validate(
            stream,
            lambda: validate_translation(
                original, translation, protected_terms=self._protected_terms
            ),
        )
        self._store(stream, translations, original, translation)

    def _parse_plural(
        self,
        stream: _TokenStream,
        grammar: PluralGrammar,
        plural_translations: TranslationPluralMap,
    ) -> None:
        # SOURCE already consumed
        stream.consume(TokenType.PLURAL)
        singular = stream.consume(TokenType.TEXT).text
        stream.consume(TokenType.PLURAL)
        plural = stream.consume(TokenType.TEXT).text
        original: SingularPluralPair = (singular, plural)

        stream.consume(TokenType.TARGET)

        forms: list[str] = []
        while stream.token.type == TokenType.PLURAL:
            stream.advance()
            forms.append(stream.consume(TokenType.TEXT).text)

        if not forms:
            stream.consume(TokenType.EMPTY)

        self._validate(
            stream,
            lambda: validate_plural_translation(
                original, forms, grammar, protected_terms=self._protected_terms
            ),
        )
        self._store(stream, plural_translations, original, tuple(forms))

    def _validate(self, stream: _TokenStream, check: Callable[[], None]) -> None:
        try:
            check()
        except LngValidationError as e:
            raise e.at(stream.scanner.position) from None

    def _store[K, V](
        self, stream: _TokenStream, mapping: dict[K, V], key: K, value: V
    ) -> None:
        if key not in mapping:
            mapping[key] = value
            return
        if self._reject_duplicates:
            raise LngValidationError(
                ErrorTemplate.duplicate_entry(key).at(stream.scanner.position)
            )
        logger.warning(
            "Dropping duplicate entry at row %d: %r (first occurrence wins)",
            stream.scanner.row,
            key,
        )
