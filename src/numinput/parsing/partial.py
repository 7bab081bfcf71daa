"""Partial-input helpers for text fields edited one keystroke at a time.

A field widget calls these between keystrokes to keep the text coherent
without a full reformat: detect a typed sign, re-wrap raw digits in the
style's affixes, accept foreign decimal separators, and hold off rounding
while a fraction is still being typed.

The primitives below (normalize_digits, strip_affixes, strip_minus_symbol,
strip_grouping_separator) are also the cleaning steps of the parser.

All functions are pure and never raise for any string input.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from numinput.constants import DECIMAL_SEPARATORS, INTEGER_PATTERN

if TYPE_CHECKING:
    from numinput.runtime.profile import LocaleProfile

__all__ = [
    "insert_affixes",
    "is_fraction_incomplete",
    "is_negative",
    "normalize_decimal_separator",
    "normalize_digits",
    "only_digits",
    "only_locale_digits",
    "strip_affixes",
    "strip_grouping_separator",
    "strip_minus_symbol",
    "to_fraction",
]

_NON_DIGITS = re.compile(r"[^0-9]+")


@functools.lru_cache(maxsize=64)
def _incomplete_fraction_pattern(decimal_symbol: str) -> re.Pattern[str]:
    return re.compile(f"{INTEGER_PATTERN}{re.escape(decimal_symbol)}")


def _minus(profile: LocaleProfile) -> str:
    return profile.minus_symbol or "-"


def normalize_digits(profile: LocaleProfile, text: str) -> str:
    """Replace locale digit glyphs with ASCII digits.

    No-op for profiles whose numbering system is Latin.

    Example:
        >>> normalize_digits(build_profile("ar-EG"), "١٢٣")
        '123'
    """
    if profile.digit_glyphs[0] != "0":
        for index, glyph in enumerate(profile.digit_glyphs):
            text = text.replace(glyph, str(index))
    return text


def strip_affixes(profile: LocaleProfile, text: str) -> str:
    """Remove one prefix (negative or plain) and one suffix.

    The negative prefix is tried first because it usually contains the
    prefix (e.g. "-€" and "€"). The plain prefix is only stripped when the
    negative prefix is absent, so a prefix glyph repeated inside the suffix
    (he: RLM before both the digits and "₪") survives.
    """
    if profile.negative_prefix and profile.negative_prefix in text:
        text = text.replace(profile.negative_prefix, "", 1)
    elif profile.prefix:
        text = text.replace(profile.prefix, "", 1)
    if profile.suffix:
        text = text.replace(profile.suffix, "", 1)
    return text


def strip_minus_symbol(profile: LocaleProfile, text: str) -> str:
    """Remove one minus indicator, typed as '-' or as the locale glyph."""
    minus = _minus(profile)
    return text.replace("-", minus, 1).replace(minus, "", 1)


def strip_grouping_separator(profile: LocaleProfile, text: str) -> str:
    """Remove every grouping separator."""
    if not profile.grouping_symbol:
        return text
    return text.replace(profile.grouping_symbol, "")


def is_negative(profile: LocaleProfile, text: str) -> bool:
    """Check whether text denotes a negative value.

    True if text starts with the negative prefix, or starts with a minus
    indicator once a typed '-' is read as the locale minus glyph.

    Examples:
        >>> profile = build_profile("en", "currency", currency="EUR")
        >>> is_negative(profile, "-€5"), is_negative(profile, "-5"), is_negative(profile, "€5")
        (True, True, False)
    """
    if profile.negative_prefix and text.startswith(profile.negative_prefix):
        return True
    minus = _minus(profile)
    return text.replace("-", minus, 1).startswith(minus)


def insert_affixes(profile: LocaleProfile, digits_text: str, negative: bool) -> str:
    """Wrap raw digit text in the style's prefix and suffix.

    Example:
        >>> insert_affixes(build_profile("en", "percent"), "12", negative=True)
        '-12%'
    """
    prefix = profile.negative_prefix if negative else profile.prefix
    return f"{prefix}{digits_text}{profile.suffix}"


def normalize_decimal_separator(profile: LocaleProfile, text: str, from_index: int) -> str:
    """Rewrite typed decimal separators into the profile's decimal symbol.

    Every ',', '.' and U+066B at or after from_index is replaced, so a user
    may type a separator that is not native to the active locale. Text
    before from_index (typically the grouped integer part) is untouched.

    Example:
        >>> normalize_decimal_separator(build_profile("de"), "1.234.5", 5)
        '1.234,5'
    """
    if profile.decimal_symbol is None:
        return text
    head, tail = text[:from_index], text[from_index:]
    for separator in DECIMAL_SEPARATORS:
        tail = tail.replace(separator, profile.decimal_symbol)
    return head + tail


def is_fraction_incomplete(profile: LocaleProfile, text: str) -> bool:
    """Check for an integer followed by the decimal symbol and nothing else.

    Signals that the user is about to type fraction digits, so the text
    must not be reformatted (which would drop the trailing separator).

    Examples:
        >>> profile = build_profile("en")
        >>> is_fraction_incomplete(profile, "12."), is_fraction_incomplete(profile, "12.3")
        (True, False)
    """
    if profile.decimal_symbol is None:
        return False
    candidate = normalize_digits(profile, strip_grouping_separator(profile, text))
    return _incomplete_fraction_pattern(profile.decimal_symbol).fullmatch(candidate) is not None


def to_fraction(profile: LocaleProfile, text: str) -> str:
    """Turn text typed as separator-then-digits into a zero-led fraction.

    The first character (the typed separator) is dropped; the locale digits
    after it are kept up to maximum_fraction_digits.

    Example:
        >>> to_fraction(build_profile("en"), ".12345")
        '0.123'
    """
    fraction = only_locale_digits(profile, text[1:])[: profile.maximum_fraction_digits]
    return f"{profile.digit_glyphs[0]}{profile.decimal_symbol or ''}{fraction}"


def only_digits(profile: LocaleProfile, text: str) -> str:
    """Normalize digits, then drop every character that is not 0-9."""
    return _NON_DIGITS.sub("", normalize_digits(profile, text))


def only_locale_digits(profile: LocaleProfile, text: str) -> str:
    """Drop every character that is not one of the profile's digit glyphs."""
    glyphs = frozenset(profile.digit_glyphs)
    return "".join(char for char in text if char in glyphs)
