"""Text to number: parse user-typed locale text through a LocaleProfile.

- parse() returns float | None
- parse_decimal() returns tuple[Decimal | None, tuple[NumberParseError, ...]]
- Functions NEVER raise exceptions; failures are None / returned errors

Accepted input:
    - With or without the style's prefix/suffix
    - Negative via the locale negative prefix, the locale minus glyph or '-'
    - Grouped or ungrouped integer part; grouping must sit where the locale
      puts it ("1,234" parses, "1,23,4" does not)
    - Locale digit glyphs or ASCII digits

Thread-safe. Pure functions over an immutable LocaleProfile.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from numinput.constants import INTEGER_PATTERN
from numinput.diagnostics import Diagnostic, ErrorTemplate, NumberParseError, ParseStage
from numinput.enums import NumberStyle

from .partial import (
    is_negative,
    normalize_digits,
    strip_affixes,
    strip_grouping_separator,
    strip_minus_symbol,
)

if TYPE_CHECKING:
    from numinput.runtime.profile import LocaleProfile

__all__ = ["is_valid_integer_format", "parse", "parse_decimal"]


@functools.lru_cache(maxsize=64)
def _number_pattern(decimal_symbol: str | None) -> re.Pattern[str]:
    fraction = f"(?:{re.escape(decimal_symbol)}([0-9]*))?" if decimal_symbol else ""
    return re.compile(f"{INTEGER_PATTERN}{fraction}")


def is_valid_integer_format(profile: LocaleProfile, formatted: str, integer: int) -> bool:
    """Check that an integer part is grouped the way the locale groups it.

    Renders the integer with and without grouping; formatted must equal one
    of the two. Rejects separators in the wrong positions while accepting
    both grouped and ungrouped input.

    Args:
        profile: Parsing profile
        formatted: Integer part of the input, affixes and minus removed
        integer: Integer value of those digits

    Returns:
        True if formatted is a canonical rendering of integer

    Examples:
        >>> profile = build_profile("en")
        >>> is_valid_integer_format(profile, "1,234", 1234)
        True
        >>> is_valid_integer_format(profile, "12,34", 1234)
        False
    """
    return formatted in _canonical_integers(profile, integer)


def _canonical_integers(profile: LocaleProfile, integer: int) -> tuple[str, str]:
    grouped, ungrouped = (
        strip_affixes(
            profile,
            normalize_digits(
                profile, profile.formatter.render_integer(integer, use_grouping=use_grouping)
            ),
        )
        for use_grouping in (True, False)
    )
    return grouped, ungrouped


def parse_decimal(
    profile: LocaleProfile,
    text: str | None,
) -> tuple[Decimal | None, tuple[NumberParseError, ...]]:
    """Parse locale text into an exact Decimal.

    Args:
        profile: Profile built by build_profile()
        text: Text as typed by the user (may be None or empty)

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple with one NumberParseError on failure, empty on success

    Examples:
        >>> profile = build_profile("en")
        >>> parse_decimal(profile, "-123,456.768")
        (Decimal('-123456.768'), ())

        >>> result, errors = parse_decimal(profile, "1,23,4")
        >>> result is None, errors[0].stage
        (True, <ParseStage.GROUPING: 'grouping'>)

    PERCENT profiles return the ratio: "12.5%" parses to Decimal('0.125').
    """
    if not text:
        return _failure(
            profile, "", ParseStage.EMPTY, ErrorTemplate.parse_input_empty(profile.locale_code)
        )

    negative = is_negative(profile, text)
    stripped = strip_minus_symbol(profile, strip_affixes(profile, normalize_digits(profile, text)))

    match = _number_pattern(profile.decimal_symbol).fullmatch(
        strip_grouping_separator(profile, stripped)
    )
    if match is None:
        diagnostic = ErrorTemplate.parse_grammar_mismatch(text, profile.locale_code)
        return _failure(profile, text, ParseStage.GRAMMAR, diagnostic)

    integer_digits = match.group(1)
    fraction_digits = match.group(2) if profile.decimal_symbol else None

    integer_text = stripped.split(profile.decimal_symbol)[0] if profile.decimal_symbol else stripped
    canonical = _canonical_integers(profile, int(integer_digits))
    if integer_text not in canonical:
        diagnostic = ErrorTemplate.parse_grouping_invalid(text, profile.locale_code, canonical[0])
        return _failure(profile, text, ParseStage.GROUPING, diagnostic)

    sign = "-" if negative else ""
    digits = f"{integer_digits}.{fraction_digits}" if fraction_digits else integer_digits
    value = Decimal(f"{sign}{digits}")
    if profile.style is NumberStyle.PERCENT:
        value = value.scaleb(-2)
    return (value, ())


def parse(profile: LocaleProfile, text: str | None) -> float | None:
    """Parse locale text into a float, or None if it is not a valid number.

    Never raises. See parse_decimal() for the accepted grammar and for the
    reason a given text was rejected.

    Examples:
        >>> profile = build_profile("en", "currency", currency="EUR")
        >>> parse(profile, "€1")
        1.0
        >>> parse(profile, "-€1,234.5")
        -1234.5
        >>> parse(profile, "1,23,4") is None
        True
    """
    value, _ = parse_decimal(profile, text)
    return float(value) if value is not None else None


def _failure(
    profile: LocaleProfile,
    text: str,
    stage: ParseStage,
    diagnostic: Diagnostic,
) -> tuple[None, tuple[NumberParseError, ...]]:
    error = NumberParseError(
        diagnostic, input_value=text, locale_code=profile.locale_code, stage=stage
    )
    return (None, (error,))
