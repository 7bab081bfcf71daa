"""Locale number format: Babel-backed rendering and part decomposition.

This module is the locale formatting capability the codec is built on.
It renders numbers with explicit fraction bounds and a grouping toggle, and
decomposes a rendering into typed parts (the Python counterpart of
ECMA-402 ``Intl.NumberFormat.prototype.formatToParts``).

Architecture:
    - LocaleNumberFormat: Immutable (locale, style, currency, unit) handle
    - Patterns come from CLDR via Babel and are rewritten for each request's
      fraction bounds and grouping, so every style shares one code path
    - Babel emits Latin digits; non-Latin numbering systems are produced by
      transliterating its output through NUMBERING_SYSTEM_DIGITS
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal

from babel import Locale
from babel import numbers as babel_numbers
from babel import units as babel_units

from numinput.constants import LATIN_DIGITS, NUMBERING_SYSTEM_DIGITS
from numinput.enums import CurrencyDisplay, NumberStyle, PartType, UnitDisplay

__all__ = ["LocaleNumberFormat", "NumberPart", "join_parts"]

logger = logging.getLogger(__name__)

# Numeric core of a CLDR pattern: integer digits with grouping commas,
# optionally followed by a fraction. Matches once per sub-pattern.
_NUMBER_CORE = re.compile(r"(?P<integer>[#0,]*0)(?:\.[0#]*)?")

_CURRENCY_SIGN = "\xa4"
_ASCII_MINUS = "-"
_MATH_MINUS = "\u2212"


@dataclass(frozen=True, slots=True)
class NumberPart:
    """One typed element of a decomposed formatted number.

    Attributes:
        type: Part type (minusSign, integer, group, decimal, fraction, literal)
        value: Literal text of the part
    """

    type: PartType
    value: str


def join_parts(parts: tuple[NumberPart, ...] | list[NumberPart]) -> str:
    """Concatenate part values."""
    return "".join(part.value for part in parts)


@dataclass(frozen=True, slots=True)
class LocaleNumberFormat:
    """Immutable locale formatting capability for one style.

    Construct through numinput.runtime.profile.build_profile(), which
    validates the combination. Direct construction skips validation and
    lets Babel errors surface on first use.

    Attributes:
        babel_locale: Parsed Babel Locale
        style: Number style rendered by this format
        numbering_system: Resolved CLDR numbering system (e.g., "latn", "arab")
        currency: ISO 4217 code (CURRENCY style only)
        unit: CLDR unit identifier (UNIT style only)
        currency_display: Symbol or ISO code (CURRENCY style only)
        unit_display: CLDR unit pattern length (UNIT style only)

    Examples:
        >>> fmt = LocaleNumberFormat(Locale.parse("en"), NumberStyle.DECIMAL)
        >>> fmt.render(-1234.5, 0, 3)
        '-1,234.5'
        >>> [p.type.value for p in fmt.format_to_parts(-1234.5, 0, 3)]
        ['minusSign', 'integer', 'group', 'integer', 'decimal', 'fraction']

    Thread Safety:
        Immutable. Babel formatting functions hold no shared mutable state.
    """

    babel_locale: Locale
    style: NumberStyle
    numbering_system: str = "latn"
    currency: str | None = None
    unit: str | None = None
    currency_display: CurrencyDisplay = CurrencyDisplay.SYMBOL
    unit_display: UnitDisplay = UnitDisplay.SHORT

    @property
    def digit_glyphs(self) -> tuple[str, ...]:
        """Glyphs for digits 0-9 in this format's numbering system."""
        return tuple(NUMBERING_SYSTEM_DIGITS[self.numbering_system])

    @property
    def pattern(self) -> str:
        """CLDR pattern string for this style and locale.

        UNIT uses the decimal pattern; Babel wraps it in the unit pattern.
        """
        if self.style is NumberStyle.PERCENT:
            return str(self.babel_locale.percent_formats[None].pattern)
        if self.style is NumberStyle.CURRENCY:
            raw_pattern = str(self.babel_locale.currency_formats["standard"].pattern)
            # Single U+00A4 = symbol, double U+00A4 U+00A4 = ISO code per CLDR
            if self.currency_display is CurrencyDisplay.CODE and _CURRENCY_SIGN in raw_pattern:
                return raw_pattern.replace(_CURRENCY_SIGN, _CURRENCY_SIGN * 2)
            return raw_pattern
        return str(self.babel_locale.decimal_formats[None].pattern)

    def default_fraction_digits(self) -> tuple[int, int]:
        """Locale default (minimum, maximum) fraction digits for this style.

        CURRENCY uses the currency's CLDR precision as the maximum. The
        minimum is 0 for every style so that whole values render without a
        trailing fraction while the value is being edited.
        """
        if self.style is NumberStyle.CURRENCY and self.currency is not None:
            return (0, babel_numbers.get_currency_precision(self.currency))
        _, maximum = babel_numbers.parse_pattern(self.pattern).frac_prec
        return (0, maximum)

    def decimal_symbol(self) -> str:
        """Locale decimal separator for this numbering system."""
        return str(
            babel_numbers.get_decimal_symbol(
                self.babel_locale, numbering_system=self.numbering_system
            )
        )

    def group_symbol(self) -> str:
        """Locale grouping separator for this numbering system."""
        return str(
            babel_numbers.get_group_symbol(
                self.babel_locale, numbering_system=self.numbering_system
            )
        )

    def minus_sign_symbol(self) -> str:
        """Locale minus sign for this numbering system."""
        return str(
            babel_numbers.get_minus_sign_symbol(
                self.babel_locale, numbering_system=self.numbering_system
            )
        )

    def render(
        self,
        value: int | float | Decimal,
        minimum_fraction_digits: int,
        maximum_fraction_digits: int,
        *,
        use_grouping: bool = True,
    ) -> str:
        """Render value with the style's affixes and the given fraction bounds.

        Args:
            value: Number to format
            minimum_fraction_digits: Fraction digits always rendered
            maximum_fraction_digits: Fraction digits rendered at most (rounds)
            use_grouping: Render grouping separators

        Returns:
            Canonical locale-formatted string
        """
        pattern = self._rewrite_pattern(
            self.pattern, minimum_fraction_digits, maximum_fraction_digits, use_grouping
        )
        if self.style is NumberStyle.CURRENCY:
            rendered = babel_numbers.format_currency(
                value,
                self.currency,
                format=pattern,
                locale=self.babel_locale,
                currency_digits=False,
                numbering_system=self.numbering_system,
            )
        elif self.style is NumberStyle.PERCENT:
            rendered = babel_numbers.format_percent(
                value,
                format=pattern,
                locale=self.babel_locale,
                numbering_system=self.numbering_system,
            )
        elif self.style is NumberStyle.UNIT:
            rendered = babel_units.format_unit(
                value,
                self.unit,
                length=self.unit_display.value,
                format=pattern,
                locale=self.babel_locale,
                numbering_system=self.numbering_system,
            )
        else:
            rendered = babel_numbers.format_decimal(
                value,
                format=pattern,
                locale=self.babel_locale,
                numbering_system=self.numbering_system,
            )
        return self._transliterate(str(rendered))

    def render_integer(self, value: int, *, use_grouping: bool) -> str:
        """Render an integer magnitude as bare digits, without style affixes.

        Uses the integer core of the style pattern so that grouping sizes
        match the style (e.g. Indian "#,##,##0"). PERCENT values are not
        scaled: 12 renders as "12".
        """
        match = _NUMBER_CORE.search(self.pattern.split(";")[0])
        integer_pattern = match.group("integer") if match and use_grouping else "0"
        rendered = babel_numbers.format_decimal(
            abs(value),
            format=integer_pattern,
            locale=self.babel_locale,
            numbering_system=self.numbering_system,
        )
        return self._transliterate(str(rendered))

    def format_to_parts(
        self,
        value: int | float | Decimal,
        minimum_fraction_digits: int,
        maximum_fraction_digits: int,
    ) -> tuple[NumberPart, ...]:
        """Render value and decompose the result into typed parts.

        The numeric body is the run starting at the first digit glyph and
        continuing over digits, grouping and decimal symbols. Text before it
        and after it is literal, except for the minus sign, which is split
        out wherever it appears.

        Returns:
            Parts whose values concatenate to render(value, ...)
        """
        text = self.render(value, minimum_fraction_digits, maximum_fraction_digits)
        glyphs = frozenset(self.digit_glyphs)
        group = self.group_symbol()
        decimal = self.decimal_symbol()

        first = next((i for i, char in enumerate(text) if char in glyphs), None)
        if first is None:
            return self._split_sign(text)

        end = first
        while end < len(text):
            if text[end] in glyphs:
                end += 1
            elif group and text.startswith(group, end):
                end += len(group)
            elif decimal and text.startswith(decimal, end):
                end += len(decimal)
            else:
                break
        # A trailing separator belongs to the suffix (e.g. NBSP before a unit).
        body = text[first:end]
        while body and body[-1] not in glyphs:
            body = body[:-1]
        end = first + len(body)

        return (
            self._split_sign(text[:first])
            + self._split_body(body, glyphs, group, decimal)
            + self._split_sign(text[end:])
        )

    def _split_sign(self, text: str) -> tuple[NumberPart, ...]:
        if not text:
            return ()
        for sign in (self.minus_sign_symbol(), _ASCII_MINUS, _MATH_MINUS):
            index = text.find(sign) if sign else -1
            if index >= 0:
                before, after = text[:index], text[index + len(sign) :]
                parts = [NumberPart(PartType.LITERAL, before)] if before else []
                parts.append(NumberPart(PartType.MINUS_SIGN, sign))
                if after:
                    parts.append(NumberPart(PartType.LITERAL, after))
                return tuple(parts)
        return (NumberPart(PartType.LITERAL, text),)

    @staticmethod
    def _split_body(
        body: str, glyphs: frozenset[str], group: str, decimal: str
    ) -> tuple[NumberPart, ...]:
        parts: list[NumberPart] = []
        run: list[str] = []
        in_fraction = False

        def flush() -> None:
            if run:
                kind = PartType.FRACTION if in_fraction else PartType.INTEGER
                parts.append(NumberPart(kind, "".join(run)))
                run.clear()

        index = 0
        while index < len(body):
            char = body[index]
            if char in glyphs:
                run.append(char)
                index += 1
            elif not in_fraction and decimal and body.startswith(decimal, index):
                flush()
                parts.append(NumberPart(PartType.DECIMAL, decimal))
                in_fraction = True
                index += len(decimal)
            elif group and body.startswith(group, index):
                flush()
                parts.append(NumberPart(PartType.GROUP, group))
                index += len(group)
            else:
                flush()
                parts.append(NumberPart(PartType.LITERAL, char))
                index += 1
        flush()
        return tuple(parts)

    @staticmethod
    def _rewrite_pattern(
        pattern: str, minimum: int, maximum: int, use_grouping: bool
    ) -> str:
        fraction = "." + "0" * minimum + "#" * (maximum - minimum) if maximum > 0 else ""

        def replace(match: re.Match[str]) -> str:
            integer = match.group("integer") if use_grouping else "0"
            return integer + fraction

        return _NUMBER_CORE.sub(replace, pattern)

    def _transliterate(self, text: str) -> str:
        glyphs = NUMBERING_SYSTEM_DIGITS[self.numbering_system]
        if glyphs == "".join(LATIN_DIGITS):
            return text
        return text.translate(str.maketrans("".join(LATIN_DIGITS), glyphs))
