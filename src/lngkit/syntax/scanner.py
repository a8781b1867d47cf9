"""Scanner for the tag-delimited language file format.

Converts a byte stream into typed tokens, one token per call. The scanner
never raises: malformed input surfaces as an unexpected token in the parser.

Token recognition:
    1. Skip ASCII whitespace (U+00A0 is content and never skipped)
    2. End of input -> END
    3. Known tag at the current position -> that tag
    4. Otherwise raw text up to the next known tag, edges trimmed and line
       breaks normalized to \\n -> TEXT

Encoding:
    Bytes are decoded as UTF-8 with ``surrogateescape``. Invalid sequences are
    preserved as lone surrogates so the validator can report them for the
    entry they occur in, with position.

Python 3.13+. Zero external dependencies.
"""

import re

from lngkit.constants import BYTE_ORDER_MARK, WHITESPACE_CHARS
from lngkit.diagnostics import SourcePosition
from lngkit.enums import KNOWN_TAGS, TokenType

from .model import Token
from .position import column_offset, line_offset, source_position

__all__ = ["Scanner", "decode_source", "normalize_text"]

_TAG_PATTERN = re.compile("|".join(re.escape(tag.value) for tag in KNOWN_TAGS))
_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]*")


def decode_source(source: bytes | str) -> str:
    """Decode a language file byte stream, keeping invalid UTF-8 recoverable.

    Args:
        source: Raw file content or already decoded text

    Returns:
        Text with invalid byte sequences mapped to lone surrogates
    """
    if isinstance(source, str):
        return source
    return source.decode("utf-8", errors="surrogateescape")


def normalize_text(text: str) -> str:
    """Trim ASCII whitespace at both ends and convert line breaks to \\n.

    Example:
        >>> normalize_text("  first\\r\\nsecond\\rthird \\t")
        'first\\nsecond\\nthird'
    """
    text = text.strip(WHITESPACE_CHARS)
    return text.replace("\r\n", "\n").replace("\r", "\n")


class Scanner:
    """Pull scanner over one language file.

    The position is a plain character offset; row and column are computed on
    demand from the consumed prefix (O(n), only needed for errors).

    Example:
        >>> scanner = Scanner(b"<source> Hello <target> Bonjour")
        >>> scanner.next_token()
        Token(type=<TokenType.SOURCE: '<source>'>, text='')
        >>> scanner.next_token().text
        'Hello'
    """

    __slots__ = ("_pos", "_source")

    def __init__(self, source: bytes | str) -> None:
        """Initialize scanner, dropping a leading UTF-8 byte-order mark.

        Rows and columns are counted from the first character after the mark.

        Args:
            source: Raw file content or already decoded text
        """
        self._source = decode_source(source).removeprefix(BYTE_ORDER_MARK)
        self._pos = 0

    @property
    def source(self) -> str:
        """Decoded source text."""
        return self._source

    @property
    def offset(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    @property
    def row(self) -> int:
        """Current row, starting with 0."""
        return line_offset(self._source, self._pos)

    @property
    def col(self) -> int:
        """Current column, starting with 0."""
        return column_offset(self._source, self._pos)

    @property
    def position(self) -> SourcePosition:
        """Current row and column."""
        return source_position(self._source, self._pos)

    def next_token(self) -> Token:
        """Consume and return the next token.

        Returns:
            Next token; END once the input is exhausted (repeatedly)
        """
        source = self._source
        pos = _WHITESPACE_RUN.match(source, self._pos).end()  # type: ignore[union-attr]

        if pos >= len(source):
            self._pos = pos
            return Token(TokenType.END)

        for tag in KNOWN_TAGS:
            if source.startswith(tag.value, pos):
                self._pos = pos + len(tag.value)
                return Token(tag)

        # Otherwise assume text
        match = _TAG_PATTERN.search(source, pos)
        end = match.start() if match is not None else len(source)
        self._pos = end

        text = normalize_text(source[pos:end])
        if not text and end == len(source):
            return Token(TokenType.END)
        return Token(TokenType.TEXT, text)
