"""Tests for the numinput top-level API surface.

Python 3.13+.
"""

import numinput
from numinput import NumberStyle, PartType


class TestPublicApi:
    """Test exports and version metadata."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in numinput.__all__:
            assert hasattr(numinput, name), name

    def test_version_is_string(self) -> None:
        """__version__ is set whether or not the package is installed."""
        assert isinstance(numinput.__version__, str)
        assert numinput.__version__

    def test_format_shadows_builtin_only_in_namespace(self) -> None:
        """numinput.format is the codec function, not the builtin."""
        assert numinput.format is not format
        assert callable(numinput.format)

    def test_enum_values(self) -> None:
        """Enums compare equal to their string values."""
        assert NumberStyle("percent") is NumberStyle.PERCENT
        assert str(NumberStyle.CURRENCY) == "currency"
        assert PartType.MINUS_SIGN == "minusSign"
