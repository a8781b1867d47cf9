"""Tests for the language file scanner.

Covers:
- Tag recognition and text tokens between tags
- Whitespace skipping (ASCII only, U+00A0 is content)
- Line break normalization inside text
- Byte-order mark handling and surrogate-escaped invalid UTF-8
- Position tracking after each token
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lngkit.enums import TokenType
from lngkit.syntax import Scanner, Token, decode_source, normalize_text
from tests.strategies import lng_plain_text


def _tokens(source: bytes | str) -> list[Token]:
    scanner = Scanner(source)
    tokens = [scanner.next_token()]
    while tokens[-1].type != TokenType.END:
        tokens.append(scanner.next_token())
    return tokens


class TestTagRecognition:
    """Known tags become their own token type."""

    def test_all_tags(self) -> None:
        """Every tag is recognized, separated by whitespace or not."""
        tokens = _tokens("<header><source> <target>\n<empty>\t<pluralform>")
        assert [t.type for t in tokens] == [
            TokenType.HEADER,
            TokenType.SOURCE,
            TokenType.TARGET,
            TokenType.EMPTY,
            TokenType.PLURAL,
            TokenType.END,
        ]

    def test_text_between_tags(self) -> None:
        """Text runs up to the next known tag and is trimmed."""
        tokens = _tokens("<source>  Hello world \n<target> Hallo Welt")
        assert tokens == [
            Token(TokenType.SOURCE),
            Token(TokenType.TEXT, "Hello world"),
            Token(TokenType.TARGET),
            Token(TokenType.TEXT, "Hallo Welt"),
            Token(TokenType.END),
        ]

    def test_unknown_tag_is_text(self) -> None:
        """Angle brackets that do not form a known tag are plain text."""
        tokens = _tokens("<source> <b>bold</b> <target>")
        assert tokens[1] == Token(TokenType.TEXT, "<b>bold</b>")

    def test_tags_are_case_sensitive(self) -> None:
        """<SOURCE> is not a tag."""
        tokens = _tokens("<SOURCE> x")
        assert tokens[0] == Token(TokenType.TEXT, "<SOURCE> x")


class TestEndOfInput:
    """END is returned at the end and keeps being returned."""

    def test_empty_input(self) -> None:
        assert _tokens(b"") == [Token(TokenType.END)]

    def test_whitespace_only(self) -> None:
        assert _tokens(" \t\r\n\v\f") == [Token(TokenType.END)]

    def test_end_is_repeated(self) -> None:
        scanner = Scanner("<empty>")
        assert scanner.next_token().type == TokenType.EMPTY
        assert scanner.next_token().type == TokenType.END
        assert scanner.next_token().type == TokenType.END


class TestTextNormalization:
    """Text tokens use \\n line breaks and keep inner whitespace."""

    def test_crlf_and_cr_become_lf(self) -> None:
        tokens = _tokens("<source> first\r\nsecond\rthird\n<target>")
        assert tokens[1].text == "first\nsecond\nthird"

    def test_no_break_space_is_content(self) -> None:
        """U+00A0 is not trimmed at the edges."""
        tokens = _tokens("<source>\u00a0Hello\u00a0 <target>")
        assert tokens[1].text == "\u00a0Hello\u00a0"

    def test_normalize_text_helper(self) -> None:
        assert normalize_text("  a\r\nb\rc \t") == "a\nb\nc"

    @given(lng_plain_text())
    def test_plain_text_roundtrips_through_scanner(self, text: str) -> None:
        """Property: trimmed one-line text survives scanning unchanged."""
        tokens = _tokens(f"<target>  {text}\r\n")
        assert tokens[1] == Token(TokenType.TEXT, text)


class TestEncoding:
    """Byte input is decoded as UTF-8."""

    def test_bom_is_skipped(self) -> None:
        tokens = _tokens(b"\xef\xbb\xbf<header>")
        assert tokens[0].type == TokenType.HEADER

    def test_bom_in_text_input_is_skipped(self) -> None:
        tokens = _tokens("\ufeff<header>")
        assert tokens[0].type == TokenType.HEADER

    def test_invalid_utf8_preserved_as_surrogates(self) -> None:
        """Undecodable bytes do not abort scanning."""
        tokens = _tokens(b"<source> caf\xe9 <target>")
        assert tokens[1].text == "caf\udce9"

    def test_decode_source_passes_str_through(self) -> None:
        assert decode_source("abc") == "abc"

    @given(st.binary(max_size=200))
    def test_scanner_never_raises(self, data: bytes) -> None:
        """Property: arbitrary bytes always tokenize to END eventually."""
        tokens = _tokens(data)
        assert tokens[-1].type == TokenType.END


class TestPosition:
    """Scanner position is the 0-based row/column after the last token."""

    def test_position_after_tokens(self) -> None:
        scanner = Scanner("<header>\r\n\tlanguage: x\r\n<source> abc")
        scanner.next_token()
        assert (scanner.row, scanner.col) == (0, 8)
        scanner.next_token()  # header text
        scanner.next_token()  # <source>
        assert (scanner.row, scanner.col) == (2, 8)
        assert scanner.position.row == 2

    def test_bom_is_not_counted_in_columns(self) -> None:
        scanner = Scanner(b"\xef\xbb\xbf<header>")
        scanner.next_token()
        assert scanner.offset == 8
        assert (scanner.row, scanner.col) == (0, 8)
        assert not scanner.source.startswith("\ufeff")
