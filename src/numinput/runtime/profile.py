"""Locale profile: immutable symbols, affixes and bounds for one number style.

A LocaleProfile is derived once per (locale, style, currency, unit,
precision) combination by reflecting on the formatted probe value and
its magnitude, then shared read-only by every parse/format/partial-input call.

Architecture:
    - build_profile(): Validates inputs, resolves the Babel locale, formats
      PROBE_VALUE into typed parts and derives every field from them
    - LocaleProfile: Frozen dataclass, no setters, equal when built from
      equal inputs
    - All construction failures surface as ConfigurationError; a built
      profile never raises during parsing or formatting

Python 3.13+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from babel import UnknownLocaleError
from babel import numbers as babel_numbers
from babel import units as babel_units

from numinput.constants import NUMBERING_SYSTEM_DIGITS, PROBE_FRACTION_DIGITS, PROBE_VALUE
from numinput.diagnostics import ConfigurationError, ErrorTemplate
from numinput.enums import CurrencyDisplay, NumberStyle, PartType, UnitDisplay
from numinput.locale_utils import get_babel_locale, get_system_locale

from .number_format import LocaleNumberFormat, NumberPart, join_parts

__all__ = ["FractionBounds", "LocaleProfile", "build_profile"]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


@dataclass(frozen=True, slots=True)
class FractionBounds:
    """Minimum and maximum count of fraction digits rendered or accepted.

    Attributes:
        minimum: Fraction digits always rendered (padded with zeros)
        maximum: Fraction digits rendered at most (value is rounded)
    """

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        """Validate FractionBounds invariants.

        Raises:
            ValueError: If minimum is negative or maximum precedes minimum.
        """
        if self.minimum < 0:
            msg = f"FractionBounds.minimum must be >= 0, got {self.minimum}"
            raise ValueError(msg)
        if self.maximum < self.minimum:
            msg = f"FractionBounds.maximum ({self.maximum}) must be >= minimum ({self.minimum})"
            raise ValueError(msg)

    @classmethod
    def exact(cls, digits: int) -> "FractionBounds":
        """Bounds rendering exactly `digits` fraction digits."""
        return cls(digits, digits)


@dataclass(frozen=True, slots=True)
class LocaleProfile:
    """Immutable formatting profile for one locale and number style.

    Use build_profile() to construct instances; it derives every field
    from the locale data and validates the combination.

    Attributes:
        locale: Locale identifier as given (None means host default)
        style: Number style
        currency: ISO 4217 code (CURRENCY style only)
        unit: CLDR unit identifier (UNIT style only)
        digit_glyphs: Glyphs for digits 0-9
        decimal_symbol: Decimal separator, None if no fraction is ever rendered
        grouping_symbol: Grouping separator, None if the locale has none
        minus_symbol: Minus indicator, None if the probe rendered none
        minimum_fraction_digits: Default minimum fraction digits
        maximum_fraction_digits: Default maximum fraction digits
        prefix: Literal text before the digits of a non-negative value
        negative_prefix: Literal text before the digits of a negative value
        suffix: Literal text after the digits of any value
        numbering_system: Resolved CLDR numbering system
        formatter: Locale number format the profile was derived from

    Examples:
        >>> profile = build_profile("en", NumberStyle.CURRENCY, currency="EUR")
        >>> profile.prefix, profile.negative_prefix, profile.suffix
        ('€', '-€', '')
        >>> profile.decimal_symbol, profile.grouping_symbol
        ('.', ',')

    Thread Safety:
        Immutable. Share one instance across any number of fields/threads.
    """

    locale: str | None
    style: NumberStyle
    currency: str | None
    unit: str | None
    digit_glyphs: tuple[str, ...]
    decimal_symbol: str | None
    grouping_symbol: str | None
    minus_symbol: str | None
    minimum_fraction_digits: int
    maximum_fraction_digits: int
    prefix: str
    negative_prefix: str
    suffix: str
    numbering_system: str
    formatter: LocaleNumberFormat

    @property
    def locale_code(self) -> str:
        """Resolved POSIX locale identifier (e.g., 'en_US')."""
        return str(self.formatter.babel_locale)

    @property
    def fraction_bounds(self) -> FractionBounds:
        """Default fraction bounds as a FractionBounds value."""
        return FractionBounds(self.minimum_fraction_digits, self.maximum_fraction_digits)


def build_profile(
    locale: str | None = None,
    style: NumberStyle | str = NumberStyle.DECIMAL,
    currency: str | None = None,
    unit: str | None = None,
    precision: int | FractionBounds | None = None,
    *,
    numbering_system: str = "default",
    currency_display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
    unit_display: UnitDisplay | str = UnitDisplay.SHORT,
) -> LocaleProfile:
    """Derive an immutable LocaleProfile for a locale and number style.

    Formats PROBE_VALUE (-123456.768) into typed parts and reads symbols,
    affixes and digit glyphs off the decomposition. The positive prefix is
    read off a second decomposition of abs(PROBE_VALUE).

    Args:
        locale: BCP-47 or POSIX locale identifier; None detects the system locale
        style: Number style (decimal, currency, percent, unit)
        currency: ISO 4217 code, required for CURRENCY
        unit: CLDR unit identifier (e.g., "gigabit"), required for UNIT
        precision: Fraction digits as an exact count or FractionBounds;
            ignored (forced to 0) when the style renders no fraction
        numbering_system: CLDR numbering system, or "default" for the
            locale's own (e.g., "arab" for ar_EG)
        currency_display: Render the currency as symbol or ISO code
        unit_display: CLDR unit pattern length

    Returns:
        LocaleProfile for the combination

    Raises:
        ConfigurationError: If the locale, style, currency, unit, precision
            or numbering system is unknown or the combination is incomplete

    Examples:
        >>> profile = build_profile("en", "percent", precision=FractionBounds(0, 4))
        >>> profile.suffix, profile.maximum_fraction_digits
        ('%', 4)

        >>> build_profile("en", "currency")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        ConfigurationError: error[CURRENCY_REQUIRED]: Currency style requires a currency code
    """
    number_style = _coerce_option(NumberStyle, "style", style)
    bounds = _coerce_precision(precision)

    if number_style is NumberStyle.CURRENCY:
        if not currency:
            raise ConfigurationError(ErrorTemplate.currency_required())
        currency = currency.upper()
        if not babel_numbers.is_currency(currency):
            raise ConfigurationError(ErrorTemplate.currency_unknown(currency))
    else:
        currency = None

    if number_style is NumberStyle.UNIT:
        if not unit:
            raise ConfigurationError(ErrorTemplate.unit_required())
    else:
        unit = None

    locale_code = locale if locale is not None else get_system_locale()
    try:
        babel_locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ConfigurationError(ErrorTemplate.locale_unknown(locale_code, str(e))) from e

    resolved_system = (
        str(babel_locale.default_numbering_system)
        if numbering_system == "default"
        else numbering_system
    )
    if resolved_system not in NUMBERING_SYSTEM_DIGITS:
        raise ConfigurationError(
            ErrorTemplate.numbering_system_unsupported(numbering_system, locale_code)
        )

    formatter = LocaleNumberFormat(
        babel_locale=babel_locale,
        style=number_style,
        numbering_system=resolved_system,
        currency=currency,
        unit=unit,
        currency_display=_coerce_option(CurrencyDisplay, "currency_display", currency_display),
        unit_display=_coerce_option(UnitDisplay, "unit_display", unit_display),
    )

    probe_digits = (
        babel_numbers.get_currency_precision(currency)
        if currency is not None
        else PROBE_FRACTION_DIGITS
    )
    try:
        parts = formatter.format_to_parts(PROBE_VALUE, probe_digits, probe_digits)
    except babel_numbers.UnsupportedNumberingSystemError as e:
        raise ConfigurationError(
            ErrorTemplate.numbering_system_unsupported(numbering_system, locale_code)
        ) from e
    except babel_units.UnknownUnitError as e:
        raise ConfigurationError(ErrorTemplate.unit_unknown(str(unit), locale_code)) from e

    decimal_symbol = _first_value(parts, PartType.DECIMAL)
    if decimal_symbol is None:
        minimum, maximum = 0, 0
    elif bounds is not None:
        minimum, maximum = bounds.minimum, bounds.maximum
    else:
        minimum, maximum = formatter.default_fraction_digits()

    # Positive and negative sub-patterns may differ beyond the sign
    # (de_CH: "CHF-1" vs "CHF 1"), so the positive prefix comes from the magnitude.
    positive_parts = formatter.format_to_parts(abs(PROBE_VALUE), probe_digits, probe_digits)
    negative_leading = parts[: _first_index(parts, PartType.INTEGER)]
    positive_leading = positive_parts[: _first_index(positive_parts, PartType.INTEGER)]
    last_digits = _last_index(parts, PartType.FRACTION)
    if last_digits < 0:
        last_digits = _last_index(parts, PartType.INTEGER)

    profile = LocaleProfile(
        locale=locale,
        style=number_style,
        currency=currency,
        unit=unit,
        digit_glyphs=tuple(
            formatter.render_integer(digit, use_grouping=False) for digit in range(10)
        ),
        decimal_symbol=decimal_symbol,
        grouping_symbol=_first_value(parts, PartType.GROUP),
        minus_symbol=_first_value(parts, PartType.MINUS_SIGN),
        minimum_fraction_digits=minimum,
        maximum_fraction_digits=maximum,
        prefix=join_parts(positive_leading),
        negative_prefix=join_parts(negative_leading),
        suffix=join_parts(parts[last_digits + 1 :]),
        numbering_system=resolved_system,
        formatter=formatter,
    )
    logger.debug(
        "Built %s profile for %s: prefix=%r negative_prefix=%r suffix=%r fraction=%d..%d",
        number_style,
        profile.locale_code,
        profile.prefix,
        profile.negative_prefix,
        profile.suffix,
        minimum,
        maximum,
    )
    return profile


def _coerce_option(enum_class: type[E], name: str, value: E | str) -> E:
    try:
        return enum_class(value)
    except ValueError as e:
        allowed = tuple(member.value for member in enum_class)
        raise ConfigurationError(ErrorTemplate.option_invalid(name, value, allowed)) from e


def _coerce_precision(precision: int | FractionBounds | None) -> FractionBounds | None:
    if precision is None or isinstance(precision, FractionBounds):
        return precision
    # bool is an int subclass; True is not a precision
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigurationError(ErrorTemplate.precision_invalid(precision))
    return FractionBounds.exact(precision)


def _first_index(parts: tuple[NumberPart, ...], part_type: PartType) -> int:
    return next((i for i, part in enumerate(parts) if part.type is part_type), len(parts))


def _last_index(parts: tuple[NumberPart, ...], part_type: PartType) -> int:
    return max((i for i, part in enumerate(parts) if part.type is part_type), default=-1)


def _first_value(parts: tuple[NumberPart, ...], part_type: PartType) -> str | None:
    return next((part.value for part in parts if part.type is part_type), None)
