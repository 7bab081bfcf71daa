"""Enumerations for numinput type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so callers may pass either
``NumberStyle.CURRENCY`` or the plain string ``"currency"``.

Python 3.13+.
"""

from enum import StrEnum


class NumberStyle(StrEnum):
    """Numeric style a LocaleProfile formats and parses.

    StrEnum provides automatic string conversion: str(NumberStyle.PERCENT) == "percent"
    """

    DECIMAL = "decimal"
    """Plain number: 1,234.5"""

    CURRENCY = "currency"
    """Monetary amount, requires a currency code: €1,234.50"""

    PERCENT = "percent"
    """Ratio rendered as a percentage: 0.25 -> 25%"""

    UNIT = "unit"
    """Measurement, requires a unit identifier: 1,234 Gb"""


class PartType(StrEnum):
    """Type tag of one element of a decomposed formatted number.

    Values follow the part names of ECMA-402 ``formatToParts`` so that
    decompositions read the same as their JavaScript counterpart.
    """

    MINUS_SIGN = "minusSign"
    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    LITERAL = "literal"


class CurrencyDisplay(StrEnum):
    """How a CURRENCY profile renders the currency."""

    SYMBOL = "symbol"
    """Localized symbol: €"""

    CODE = "code"
    """ISO 4217 code: EUR"""


class UnitDisplay(StrEnum):
    """CLDR unit pattern length used by UNIT profiles."""

    SHORT = "short"
    LONG = "long"
    NARROW = "narrow"


__all__ = [
    "CurrencyDisplay",
    "NumberStyle",
    "PartType",
    "UnitDisplay",
]
