"""Language file update workflow.

Regenerates a language file for the current set of application strings:
entries the application no longer uses disappear, new entries appear
untranslated, everything else keeps its existing translation.

Python 3.13+. Depends on Babel for locale display names and plural rules.
"""

import logging
from collections.abc import Iterable

from lngkit.locale_utils import get_babel_locale, locale_display_name
from lngkit.plural_rules import plural_rule_for_locale
from lngkit.syntax import (
    LngParser,
    SingularPluralPair,
    TranslationHeader,
    generate_lng,
)

from .ordered import TranslationList

__all__ = ["new_header", "update_lng"]

logger = logging.getLogger(__name__)

type WantedEntry = str | SingularPluralPair
"""Singular original text, or (singular, plural) original pair."""


def new_header(
    locale: str,
    *,
    translator: str,
    flag_file: str,
) -> TranslationHeader:
    """Build a header for a new language file.

    The language name is the locale's native display name and the plural
    grammar comes from Babel's gettext plural table.

    Args:
        locale: Locale code (BCP-47 or POSIX format accepted)
        translator: Translator name
        flag_file: Flag image file name

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> header = new_header("de-DE", translator="Max", flag_file="germany.png")
        >>> header.locale, header.plural_count
        ('de_DE', 2)
    """
    babel_locale = get_babel_locale(locale)
    plural_count, plural_definition = plural_rule_for_locale(locale)
    return TranslationHeader(
        language_name=locale_display_name(locale),
        translator_name=translator,
        locale=str(babel_locale),
        flag_file=flag_file,
        plural_count=plural_count,
        plural_definition=plural_definition,
    )


def update_lng(
    old_source: bytes | str | None,
    wanted: Iterable[WantedEntry],
    *,
    header: TranslationHeader | None = None,
    untranslated_to_top: bool = False,
    parser: LngParser | None = None,
) -> bytes:
    """Regenerate a language file for the wanted entries.

    Args:
        old_source: Existing file content, or None for a new file
        wanted: Entries in output order; str keys are singular, 2-tuples are
            plural
        header: Header to write (default: the old file's header)
        untranslated_to_top: Emit untranslated entries first
        parser: Parser for old_source (default: LngParser())

    Returns:
        UTF-8 encoded file content with CRLF line endings

    Raises:
        ValueError: If neither old_source nor header is given, or a wanted
            original could not be read back from the generated file
        TypeError: If an entry of wanted is neither str nor a str pair
        LngSyntaxError: If old_source does not parse
    """
    translations = TranslationList()
    if old_source is not None:
        resource = (parser if parser is not None else LngParser()).parse(old_source)
        translations = TranslationList(resource.translations, resource.plural_translations)
        if header is None:
            header = resource.header
    if header is None:
        msg = "A header is required when there is no existing language file"
        raise ValueError(msg)

    for entry in wanted:
        match entry:
            case str():
                translations.add_singular(entry)
            case (str() as singular, str() as plural):
                translations.add_plural((singular, plural))
            case _:
                msg = f"Expected str or (singular, plural) pair, got {entry!r}"
                raise TypeError(msg)

    logger.info(
        "Updated language file for %s: %d entries, untranslated: %s",
        header.locale,
        len(translations),
        translations.has_untranslated(),
    )
    return generate_lng(translations, header, untranslated_to_top=untranslated_to_top)
