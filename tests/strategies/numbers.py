"""Hypothesis strategies for locale number codec testing.

Provides strategies for generating profiles across locales and styles,
values that fit a profile's fraction bounds, and arbitrary text as a user
might type it into a field.

Usage:
    from hypothesis import given
    from tests.strategies.numbers import profile_by_style, values_for_profile

    @given(data=st.data())
    def test_roundtrip(data):
        profile = data.draw(profile_by_style())
        value = data.draw(values_for_profile(profile))
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from numinput import FractionBounds, LocaleProfile, NumberStyle, build_profile

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# PROFILE STRATEGIES
# ============================================================================

# Locales with distinct decimal/grouping conventions:
# en (. ,), de (, .), fr (, U+202F), en_IN (2-digit groups), ja, lv (, NBSP)
DECIMAL_LOCALES: tuple[str, ...] = ("en", "de_DE", "fr_FR", "en_IN", "ja_JP", "lv_LV")

# (locale, style, options) combinations covering every style
PROFILE_SPECS: tuple[tuple[str, NumberStyle, dict[str, Any]], ...] = (
    ("en", NumberStyle.DECIMAL, {}),
    ("de_DE", NumberStyle.DECIMAL, {}),
    ("fr_FR", NumberStyle.DECIMAL, {}),
    ("en_IN", NumberStyle.DECIMAL, {}),
    ("ar", NumberStyle.DECIMAL, {"numbering_system": "arab"}),
    ("en", NumberStyle.CURRENCY, {"currency": "EUR"}),
    ("de_DE", NumberStyle.CURRENCY, {"currency": "EUR"}),
    ("en", NumberStyle.CURRENCY, {"currency": "JPY"}),
    ("en", NumberStyle.CURRENCY, {"currency": "USD", "currency_display": "code"}),
    # Positive and negative prefixes differ beyond the sign: "CHF 1" / "CHF-1"
    ("de_CH", NumberStyle.CURRENCY, {"currency": "CHF"}),
    ("nl", NumberStyle.CURRENCY, {"currency": "EUR"}),
    # RLM marks in both the prefix and the suffix
    ("he", NumberStyle.CURRENCY, {"currency": "ILS"}),
    ("en", NumberStyle.PERCENT, {"precision": FractionBounds(0, 4)}),
    ("de_DE", NumberStyle.PERCENT, {"precision": FractionBounds(0, 2)}),
    ("en", NumberStyle.UNIT, {"unit": "gigabit"}),
    ("en", NumberStyle.UNIT, {"unit": "kilometer"}),
)

decimal_profiles: SearchStrategy[LocaleProfile] = st.sampled_from(DECIMAL_LOCALES).map(
    build_profile
)


@composite
def profile_by_style(draw: st.DrawFn) -> LocaleProfile:
    """Generate a profile from PROFILE_SPECS, emitting the style as an event."""
    locale, style, options = draw(st.sampled_from(PROFILE_SPECS))
    event(f"profile_style={style.value}")
    event(f"profile_locale={locale}")
    return build_profile(locale, style, **options)


# ============================================================================
# VALUE STRATEGIES
# ============================================================================


def values_for_profile(
    profile: LocaleProfile, max_magnitude: int = 10**9
) -> SearchStrategy[Decimal]:
    """Generate Decimals that render exactly within the profile's bounds.

    PERCENT values are ratios: two more fraction places are allowed because
    rendering multiplies by 100.
    """
    places = profile.maximum_fraction_digits
    if profile.style is NumberStyle.PERCENT:
        places += 2
    return st.decimals(
        min_value=-max_magnitude,
        max_value=max_magnitude,
        places=places,
        allow_nan=False,
        allow_infinity=False,
    )


@composite
def values_by_magnitude(draw: st.DrawFn, places: int = 3) -> Decimal:
    """Generate Decimals grouped by magnitude class, emitting the class."""
    magnitude = draw(st.sampled_from(["zero", "fraction", "small", "thousands", "millions"]))
    event(f"value_magnitude={magnitude}")
    bounds = {
        "zero": (0, 0),
        "fraction": (-1, 1),
        "small": (-999, 999),
        "thousands": (-999_999, 999_999),
        "millions": (-(10**9), 10**9),
    }[magnitude]
    return draw(
        st.decimals(
            min_value=bounds[0],
            max_value=bounds[1],
            places=places,
            allow_nan=False,
            allow_infinity=False,
        )
    )


# ============================================================================
# INPUT TEXT STRATEGIES
# ============================================================================

# Characters a user plausibly types into a number field, plus noise
_FIELD_ALPHABET = st.sampled_from(
    list("0123456789,.-− %€$\xa0 ٫٠١٢abc")
)

typed_text: SearchStrategy[str] = st.one_of(
    st.text(alphabet=_FIELD_ALPHABET, max_size=20),
    st.text(max_size=20),
)
