"""Ordered set of translation entries.

Collects the entries a language file should contain, in the order the
application wants them, and fills each one from a previous file's
translations when available. The generator consumes it through for_each().

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping

from lngkit.constants import PRIMARY_PLACEHOLDER
from lngkit.enums import KNOWN_TAGS
from lngkit.syntax.model import (
    PluralEntry,
    PluralForms,
    SingularEntry,
    SingularPluralPair,
    TranslationEntry,
    TranslationMap,
    TranslationPluralMap,
)
from lngkit.syntax.scanner import normalize_text

__all__ = ["TranslationList"]


def _check_original(text: str) -> None:
    """Reject source texts the parser would not read back unchanged.

    Raises:
        ValueError: If text is empty, has whitespace at either end, contains a
            carriage return or contains a tag
    """
    if not text:
        msg = "Source text must not be empty"
        raise ValueError(msg)
    if normalize_text(text) != text:
        msg = f"Source text must not start or end with whitespace or contain \\r: {text!r}"
        raise ValueError(msg)
    for tag in KNOWN_TAGS:
        if tag.value in text:
            msg = f"Source text must not contain {tag.value}: {text!r}"
            raise ValueError(msg)


class TranslationList:
    """Insertion-ordered, de-duplicated translation entries.

    Old translations act purely as a default-value source: adding a key that
    has a non-empty old translation stores that translation, any other key is
    stored untranslated. Adding a key twice has no effect.

    Not thread-safe; build one list per output file.

    Example:
        >>> entries = TranslationList({"Hello": "Bonjour", "Bye": ""})
        >>> entries.add_singular("Hello")
        >>> entries.add_singular("Bye")
        >>> entries.add_singular("Hello")
        >>> len(entries), entries.has_untranslated()
        (2, True)
    """

    __slots__ = (
        "_entries",
        "_old_plural_translations",
        "_old_translations",
        "_plural_seen",
        "_singular_seen",
    )

    def __init__(
        self,
        old_translations: Mapping[str, str] | None = None,
        old_plural_translations: Mapping[SingularPluralPair, PluralForms] | None = None,
    ) -> None:
        self._old_translations: TranslationMap = dict(old_translations or {})
        self._old_plural_translations: TranslationPluralMap = dict(
            old_plural_translations or {}
        )
        self._entries: list[TranslationEntry] = []
        self._singular_seen: set[str] = set()
        self._plural_seen: set[SingularPluralPair] = set()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"TranslationList(entries={len(self._entries)})"

    def add_singular(self, original: str) -> None:
        """Append a singular entry unless the original text is already present.

        Raises:
            ValueError: If original would not survive a generate and parse cycle
        """
        if original in self._singular_seen:
            return
        _check_original(original)
        self._singular_seen.add(original)
        self._entries.append(
            SingularEntry(original, self._old_translations.get(original, ""))
        )

    def add_plural(self, original: SingularPluralPair) -> None:
        """Append a plural entry unless the original pair is already present.

        Raises:
            ValueError: If either text would not survive a generate and parse
                cycle, or the plural text lacks %x
        """
        if original in self._plural_seen:
            return
        singular, plural = original
        _check_original(singular)
        _check_original(plural)
        if PRIMARY_PLACEHOLDER not in plural:
            msg = f"Plural source text must contain {PRIMARY_PLACEHOLDER}: {plural!r}"
            raise ValueError(msg)
        self._plural_seen.add(original)
        self._entries.append(
            PluralEntry(original, tuple(self._old_plural_translations.get(original, ())))
        )

    def has_untranslated(self) -> bool:
        """Whether any entry lacks a translation."""
        return any(not entry.has_translation for entry in self._entries)

    def for_each(
        self,
        on_singular: Callable[[SingularEntry], None],
        on_plural: Callable[[PluralEntry], None],
    ) -> None:
        """Visit every entry in insertion order.

        Args:
            on_singular: Called for each singular entry
            on_plural: Called for each plural entry
        """
        for entry in self._entries:
            match entry:
                case SingularEntry():
                    on_singular(entry)
                case PluralEntry():
                    on_plural(entry)
