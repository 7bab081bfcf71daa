"""Locale resolution for profiles: identifier normalization and host detection.

Babel expects POSIX identifiers (de_CH); callers may pass BCP-47 (de-CH).
Parsed Locale objects are cached so that every style built for one locale
shares a single instance.

Python 3.13+.
"""

from __future__ import annotations

import functools
import locale as host_locale
import logging
import os

from babel import Locale

from numinput.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Environment variables consulted when the host locale is unset, in priority order
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Turn a BCP-47 identifier into the POSIX form Babel parses.

    Example:
        >>> normalize_locale(" de-CH ")
        'de_CH'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse and cache a Babel Locale.

    Raises:
        babel.UnknownLocaleError: Well-formed identifier with no CLDR data
        ValueError: Malformed identifier
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop every cached Locale."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str:
    """Detect the host locale, falling back to DEFAULT_LOCALE.

    Tries locale.getlocale(), then LC_ALL, LC_MESSAGES and LANG. Encoding
    suffixes ("de_DE.UTF-8") are dropped and the C/POSIX pseudo-locales
    are skipped.
    """
    try:
        detected, _ = host_locale.getlocale()
    except ValueError:
        detected = None
        logger.debug("locale.getlocale() failed, trying environment variables")

    candidates = [detected, *(os.environ.get(var) for var in _LOCALE_ENV_VARS)]
    for candidate in candidates:
        code = (candidate or "").split(".")[0]
        if code not in _PSEUDO_LOCALES:
            return normalize_locale(code)

    logger.warning("Could not determine system locale, using %s", DEFAULT_LOCALE)
    return DEFAULT_LOCALE
