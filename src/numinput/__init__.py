"""numinput - locale-aware number codec for editable text fields.

Converts between numbers and their locale-specific text, in both
directions, and supplies the predicates a text field needs while a value is
only partially typed. Locale data comes from Unicode CLDR via Babel.

Public API:
    build_profile - Derive an immutable LocaleProfile for a locale and style
    parse - Locale text -> float | None (never raises)
    parse_decimal - Locale text -> (Decimal | None, errors)
    format - Number -> canonical locale text
    is_negative, insert_affixes, normalize_decimal_separator,
    is_fraction_incomplete, to_fraction, only_digits, only_locale_digits -
        Partial-input helpers

Exceptions:
    NumberInputError - Base exception class
    ConfigurationError - Unsupported locale/style/currency/unit combination
    NumberParseError - Parse failure (returned, never raised)

Example:
    >>> from numinput import build_profile, format, parse
    >>> profile = build_profile("en", "currency", currency="EUR")
    >>> format(profile, 1234.5)
    '€1,234.5'
    >>> parse(profile, "€1,234.50")
    1234.5

Submodules:
    numinput.runtime.profile - LocaleProfile and build_profile
    numinput.runtime.number_format - Babel-backed rendering and formatToParts
    numinput.parsing - Parser and partial-input helpers
    numinput.diagnostics - Error types, codes and templates
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ConfigurationError, NumberInputError, NumberParseError
from .enums import CurrencyDisplay, NumberStyle, PartType, UnitDisplay
from .parsing import (
    insert_affixes,
    is_fraction_incomplete,
    is_negative,
    normalize_decimal_separator,
    only_digits,
    only_locale_digits,
    parse,
    parse_decimal,
    to_fraction,
)
from .runtime import FractionBounds, LocaleProfile, build_profile
from .runtime import format  # noqa: A004  # pylint: disable=redefined-builtin

try:
    __version__ = _get_version("numinput")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CurrencyDisplay",
    "FractionBounds",
    "LocaleProfile",
    "NumberInputError",
    "NumberParseError",
    "NumberStyle",
    "PartType",
    "UnitDisplay",
    "__version__",
    "build_profile",
    "format",
    "insert_affixes",
    "is_fraction_incomplete",
    "is_negative",
    "normalize_decimal_separator",
    "only_digits",
    "only_locale_digits",
    "parse",
    "parse_decimal",
    "to_fraction",
]
