"""numinput runtime package.

Provides the Babel-backed locale number format, the immutable LocaleProfile
derived from it, and number-to-text formatting.

Python 3.13+.
"""

from .formatting import format  # noqa: A004  # pylint: disable=redefined-builtin
from .number_format import LocaleNumberFormat, NumberPart
from .profile import FractionBounds, LocaleProfile, build_profile

__all__ = [
    "FractionBounds",
    "LocaleNumberFormat",
    "LocaleProfile",
    "NumberPart",
    "build_profile",
    "format",
]
