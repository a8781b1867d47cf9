"""Language file model definitions.

Header, tokens, translation entries and the result of one parse.
Includes the closed entry union matched exhaustively by consumers.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from lngkit.enums import TokenType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "TranslationMap",
    "SingularPluralPair",
    "PluralForms",
    "TranslationPluralMap",
    # Tokens
    "Token",
    # Resource structure
    "TranslationHeader",
    "LngResource",
    # Entries
    "SingularEntry",
    "PluralEntry",
    "TranslationEntry",
]

# ============================================================================
# TYPE ALIASES
# ============================================================================

type TranslationMap = dict[str, str]
"""Original text -> translation (empty string = untranslated)."""

type SingularPluralPair = tuple[str, str]
"""Original singular and plural phrase, e.g. ("1 house", "%x houses")."""

type PluralForms = tuple[str, ...]
"""Translation per plural form index (empty tuple = untranslated)."""

type TranslationPluralMap = dict[SingularPluralPair, PluralForms]
"""Original pair -> plural forms."""

# ============================================================================
# TOKENS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Token:
    """Scanner token.

    Attributes:
        type: Token kind
        text: Normalized text for TEXT tokens, empty otherwise
    """

    type: TokenType
    text: str = ""

    def describe(self) -> str:
        """Human-readable description for error messages."""
        match self.type:
            case TokenType.TEXT:
                preview = self.text if len(self.text) <= 30 else self.text[:30] + "..."
                return f"text {preview!r}"
            case TokenType.END:
                return "end of file"
            case _:
                return str(self.type)


# ============================================================================
# RESOURCE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class TranslationHeader:
    """Metadata block at the top of every language file.

    Attributes:
        language_name: Display name, e.g. "English (UK)"
        translator_name: e.g. "Zenju"
        locale: ISO 639 language code plus optional ISO 3166 country code,
            e.g. "de", "en_GB"
        flag_file: Flag image file name, e.g. "england.png"
        plural_count: Number of plural forms (>= 1)
        plural_definition: gettext plural expression, e.g. "n == 1 ? 0 : 1"
    """

    language_name: str
    translator_name: str
    locale: str
    flag_file: str
    plural_count: int
    plural_definition: str


@dataclass(frozen=True, slots=True)
class LngResource:
    """Everything one parse produces.

    Both maps are read-only views over private copies of the given maps.

    Attributes:
        header: File header
        translations: Singular entries by original text
        plural_translations: Plural entries by original pair
    """

    header: TranslationHeader
    translations: Mapping[str, str] = field(default_factory=dict)
    plural_translations: Mapping[SingularPluralPair, PluralForms] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))
        object.__setattr__(
            self, "plural_translations", MappingProxyType(dict(self.plural_translations))
        )


# ============================================================================
# ENTRIES
# ============================================================================


@dataclass(frozen=True, slots=True)
class SingularEntry:
    """Singular translation entry."""

    original: str
    translation: str = ""

    @property
    def has_translation(self) -> bool:
        """False for untranslated entries."""
        return bool(self.translation)


@dataclass(frozen=True, slots=True)
class PluralEntry:
    """Plural translation entry."""

    original: SingularPluralPair
    forms: PluralForms = ()

    @property
    def has_translation(self) -> bool:
        """False for untranslated entries."""
        return bool(self.forms)


type TranslationEntry = SingularEntry | PluralEntry
