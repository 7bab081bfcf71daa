"""Text to number: parse locale text typed into a field back to Python numbers.

- Functions NEVER raise exceptions; failures yield None or returned errors
- Consistent with format()'s "never fails once a profile exists" contract

This module provides the inverse operations to numinput.runtime.formatting:
- Formatting: Python number -> locale-aware display string
- Parsing: Locale-aware display string (possibly still being typed) -> number

Public API:
    Parsing Functions:
        parse - Returns float | None
        parse_decimal - Returns tuple[Decimal | None, tuple[NumberParseError, ...]]

    Partial-input Helpers:
        is_negative, insert_affixes, normalize_decimal_separator,
        is_fraction_incomplete, to_fraction, only_digits, only_locale_digits

Example:
    >>> from numinput import build_profile
    >>> from numinput.parsing import parse
    >>> parse(build_profile("de-DE"), "1.234,56")
    1234.56

Python 3.13+.
"""

from .numbers import is_valid_integer_format, parse, parse_decimal
from .partial import (
    insert_affixes,
    is_fraction_incomplete,
    is_negative,
    normalize_decimal_separator,
    normalize_digits,
    only_digits,
    only_locale_digits,
    strip_affixes,
    strip_grouping_separator,
    strip_minus_symbol,
    to_fraction,
)

__all__ = [
    # Partial-input helpers
    "insert_affixes",
    "is_fraction_incomplete",
    "is_negative",
    "normalize_decimal_separator",
    "only_digits",
    "only_locale_digits",
    "to_fraction",
    # Parser primitives
    "is_valid_integer_format",
    "normalize_digits",
    "strip_affixes",
    "strip_grouping_separator",
    "strip_minus_symbol",
    # Parsing functions
    "parse",
    "parse_decimal",
]
