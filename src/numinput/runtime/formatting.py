"""Number to text: canonical locale rendering through a LocaleProfile.

The inverse of numinput.parsing.numbers.parse(). For every value within the
profile's fraction bounds, parse(profile, format(profile, value)) == value.

Python 3.13+. Uses Babel for i18n.
"""

from decimal import Decimal

from .profile import FractionBounds, LocaleProfile

__all__ = ["format"]


def format(  # noqa: A001  # pylint: disable=redefined-builtin
    profile: LocaleProfile,
    value: int | float | Decimal | None,
    bounds: FractionBounds | None = None,
    *,
    use_grouping: bool = True,
) -> str:
    """Format a number as canonical locale text.

    Args:
        profile: Profile built by build_profile()
        value: Number to format; None yields an empty string
        bounds: Fraction digit bounds (default: the profile's)
        use_grouping: Render grouping separators (default: True)

    Returns:
        Formatted text including the style's affixes

    Examples:
        >>> profile = build_profile("en")
        >>> format(profile, -123456.768)
        '-123,456.768'
        >>> format(profile, 1234.5, FractionBounds(2, 2))
        '1,234.50'
        >>> format(profile, None)
        ''

    Thread Safety:
        Pure function of its arguments.
    """
    if value is None:
        return ""
    if bounds is None:
        bounds = profile.fraction_bounds
    return profile.formatter.render(
        value, bounds.minimum, bounds.maximum, use_grouping=use_grouping
    )
