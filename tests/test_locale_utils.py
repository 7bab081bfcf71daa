"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale, clear_locale_cache and
get_system_locale.

Python 3.13+.
"""

import logging
import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from numinput.constants import DEFAULT_LOCALE
from numinput.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 hyphens become POSIX underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        """POSIX identifier passes through unchanged."""
        assert normalize_locale("de_DE") == "de_DE"

    def test_multiple_hyphens(self) -> None:
        """Every hyphen is converted."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_surrounding_whitespace_stripped(self) -> None:
        """Whitespace around the identifier is dropped."""
        assert normalize_locale("  fr-FR \n") == "fr_FR"

    @given(
        parts=st.lists(
            st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=4),
            min_size=1,
            max_size=3,
        )
    )
    def test_hyphen_and_underscore_forms_agree(self, parts: list[str]) -> None:
        """'a-b' and 'a_b' normalize to the same identifier."""
        event(f"subtags={len(parts)}")
        assert normalize_locale("-".join(parts)) == normalize_locale("_".join(parts))
        assert "-" not in normalize_locale("-".join(parts))


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self, fresh_locale_cache: None) -> None:
        """BCP-47 format locale parsed correctly."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_simple_locale(self, fresh_locale_cache: None) -> None:
        """Locale without region parsed correctly."""
        locale = get_babel_locale("fr")
        assert locale.language == "fr"
        assert locale.territory is None

    def test_caching(self, fresh_locale_cache: None) -> None:
        """Repeated calls return the cached Locale object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_unknown_locale_raises(self, fresh_locale_cache: None) -> None:
        """Well-formed but unknown locale raises UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx-XX")

    def test_malformed_locale_raises(self, fresh_locale_cache: None) -> None:
        """Malformed identifier raises ValueError."""
        with pytest.raises(ValueError, match="not a valid locale identifier"):
            get_babel_locale("invalid_locale_code_xyz")


class TestClearLocaleCache:
    """Test clear_locale_cache function."""

    def test_clears_populated_cache(self) -> None:
        """clear_locale_cache() empties the lru_cache."""
        get_babel_locale("en_US")
        get_babel_locale("de_DE")
        assert get_babel_locale.cache_info().currsize > 0

        clear_locale_cache()

        assert get_babel_locale.cache_info().currsize == 0

    def test_idempotent(self) -> None:
        """clear_locale_cache() can be called repeatedly."""
        clear_locale_cache()
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0


class TestGetSystemLocale:
    """Test get_system_locale with OS and environment detection."""

    def test_getlocale_success(self) -> None:
        """OS-level locale.getlocale() result is used first."""
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en_US"

    def test_getlocale_with_encoding(self) -> None:
        """Encoding suffix is stripped."""
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX", None])
    def test_pseudo_locale_falls_back_to_env(self, pseudo: str | None) -> None:
        """C, POSIX and None from getlocale() fall through to LANG."""
        with (
            patch("locale.getlocale", return_value=(pseudo, None)),
            patch.dict(os.environ, {"LANG": "fr_FR.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    def test_getlocale_valueerror_fallback(self) -> None:
        """ValueError from getlocale() falls through to environment."""
        with (
            patch("locale.getlocale", side_effect=ValueError("mock error")),
            patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"

    def test_lc_all_priority(self) -> None:
        """LC_ALL has priority over LC_MESSAGES and LANG."""
        env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "de_DE"

    def test_lc_messages_before_lang(self) -> None:
        """LC_MESSAGES is used when LC_ALL is not set."""
        env = {"LC_MESSAGES": "fr_FR", "LANG": "en_US"}
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == "fr_FR"

    def test_fallback_to_default_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Undetectable locale returns DEFAULT_LOCALE and logs a warning."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
            caplog.at_level(logging.WARNING, logger="numinput.locale_utils"),
        ):
            assert get_system_locale() == DEFAULT_LOCALE
        assert "Could not determine system locale" in caplog.text

    def test_pseudo_locale_with_encoding_skipped(self) -> None:
        """C.UTF-8 counts as a pseudo-locale once the encoding is dropped."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LC_ALL": "C.UTF-8", "LANG": "nl_NL.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "nl_NL"
