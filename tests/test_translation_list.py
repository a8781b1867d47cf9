"""Tests for the ordered translation set."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lngkit.localization import TranslationList
from lngkit.syntax import PluralEntry, SingularEntry
from tests.strategies import lng_plain_text


def _visit(entries: TranslationList) -> list[SingularEntry | PluralEntry]:
    visited: list[SingularEntry | PluralEntry] = []
    entries.for_each(visited.append, visited.append)
    return visited


class TestInsertion:
    """Entries are unique per key and keep insertion order."""

    def test_empty(self) -> None:
        entries = TranslationList()
        assert len(entries) == 0
        assert not entries.has_untranslated()
        assert _visit(entries) == []

    def test_add_singular_twice(self) -> None:
        entries = TranslationList()
        entries.add_singular("x")
        entries.add_singular("x")
        assert _visit(entries) == [SingularEntry("x")]

    def test_add_plural_twice(self) -> None:
        entries = TranslationList()
        entries.add_plural(("1 x", "%x x"))
        entries.add_plural(("1 x", "%x x"))
        assert len(entries) == 1

    def test_singular_and_plural_keys_are_separate(self) -> None:
        entries = TranslationList()
        entries.add_singular("a")
        entries.add_plural(("a", "%x a"))
        assert len(entries) == 2

    def test_order(self) -> None:
        entries = TranslationList()
        entries.add_singular("a")
        entries.add_plural(("1 b", "%x b"))
        entries.add_singular("c")
        assert _visit(entries) == [
            SingularEntry("a"),
            PluralEntry(("1 b", "%x b")),
            SingularEntry("c"),
        ]

    def test_for_each_dispatches_by_kind(self) -> None:
        entries = TranslationList()
        entries.add_singular("a")
        entries.add_plural(("1 b", "%x b"))
        singulars: list[SingularEntry] = []
        plurals: list[PluralEntry] = []
        entries.for_each(singulars.append, plurals.append)
        assert [e.original for e in singulars] == ["a"]
        assert [e.original for e in plurals] == [("1 b", "%x b")]

    @given(st.lists(lng_plain_text()))
    def test_order_and_uniqueness(self, keys: list[str]) -> None:
        """Property: visit order is first-insertion order of distinct keys."""
        entries = TranslationList()
        for key in keys:
            entries.add_singular(key)
        visited = [entry.original for entry in _visit(entries)]
        assert visited == list(dict.fromkeys(keys))
        assert len(entries) == len(visited)


class TestOldTranslations:
    """Old translations are a default-value source only."""

    def test_reuses_old_translation(self) -> None:
        entries = TranslationList({"Hello": "Hallo"}, {("1 x", "%x x"): ("1 y", "%x y")})
        entries.add_singular("Hello")
        entries.add_plural(("1 x", "%x x"))
        assert _visit(entries) == [
            SingularEntry("Hello", "Hallo"),
            PluralEntry(("1 x", "%x x"), ("1 y", "%x y")),
        ]
        assert not entries.has_untranslated()

    def test_new_key_is_untranslated(self) -> None:
        entries = TranslationList({"Hello": "Hallo"})
        entries.add_singular("Bye")
        assert _visit(entries) == [SingularEntry("Bye", "")]
        assert entries.has_untranslated()

    def test_old_only_keys_are_dropped(self) -> None:
        entries = TranslationList({"Old": "Alt"})
        assert len(entries) == 0

    def test_empty_old_translation(self) -> None:
        entries = TranslationList({"Hello": ""}, {("1 x", "%x x"): ()})
        entries.add_singular("Hello")
        entries.add_plural(("1 x", "%x x"))
        assert all(not entry.has_translation for entry in _visit(entries))

    def test_old_maps_are_copied(self) -> None:
        old = {"Hello": "Hallo"}
        entries = TranslationList(old)
        old["Hello"] = "Servus"
        entries.add_singular("Hello")
        assert _visit(entries) == [SingularEntry("Hello", "Hallo")]


class TestRejectedOriginals:
    """Originals the parser could not read back are refused on insertion."""

    @pytest.mark.parametrize(
        "original",
        ["", " Hello", "Hello\n", "\tHello", "a\r\nb", "a <target> b", "<empty>"],
    )
    def test_singular(self, original: str) -> None:
        entries = TranslationList()
        with pytest.raises(ValueError, match="Source text must not"):
            entries.add_singular(original)
        assert len(entries) == 0

    @pytest.mark.parametrize(
        "pair",
        [("", "%x files"), ("1 file", ""), ("1 file ", "%x files"), ("1 <source>", "%x")],
    )
    def test_plural(self, pair: tuple[str, str]) -> None:
        entries = TranslationList()
        with pytest.raises(ValueError, match="Source text must not"):
            entries.add_plural(pair)
        assert len(entries) == 0

    def test_plural_without_placeholder(self) -> None:
        with pytest.raises(ValueError, match="must contain %x"):
            TranslationList().add_plural(("1 file", "many files"))

    def test_inner_line_breaks_and_no_break_space_allowed(self) -> None:
        entries = TranslationList()
        entries.add_singular("First\nSecond")
        entries.add_singular("\u00a0Hello")
        assert len(entries) == 2
