"""Tests for locale normalization and cached Babel lookups."""

from __future__ import annotations

import pytest
from babel.core import UnknownLocaleError

from lngkit.locale_utils import get_babel_locale, locale_display_name, normalize_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-GB", "en_GB"), ("de", "de"), ("zh-Hans-CN", "zh_Hans_CN"), (" pt-BR ", "pt_BR")],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestBabelLocale:
    """Cached Locale lookups."""

    def test_cached(self) -> None:
        assert get_babel_locale("de_DE") is get_babel_locale("de_DE")

    def test_bcp47(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert (locale.language, locale.territory) == ("pt", "BR")

    def test_unknown(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_YY")

    def test_display_name_is_native(self) -> None:
        assert locale_display_name("fr").lower().startswith("fran")
