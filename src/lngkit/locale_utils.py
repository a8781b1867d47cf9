"""Locale code handling for language file headers.

Headers carry POSIX-style codes ("de", "en_GB", "pt_BR"); callers may pass
either that form or the hyphenated BCP-47 form ("pt-BR").

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_display_name",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Turn a hyphenated locale code into the underscore form headers use.

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
        >>> normalize_locale(" de ")
        'de'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, memoized per code.

    Raises:
        babel.core.UnknownLocaleError: Babel has no CLDR data for the code
        ValueError: The code is malformed
    """
    from babel import Locale  # noqa: PLC0415 - CLDR data load on first use

    return Locale.parse(normalize_locale(locale_code))


def locale_display_name(locale_code: str) -> str:
    """Native display name of a locale, as used for the header "language" item.

    Example:
        >>> locale_display_name("de_DE")
        'Deutsch (Deutschland)'
    """
    locale = get_babel_locale(locale_code)
    name = locale.get_display_name()
    return name if name else str(locale)
