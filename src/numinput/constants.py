"""Shared constants for numinput.

Centralized configuration constants used across the runtime and parsing
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Probe: The value reflected on to derive a LocaleProfile
- Locale defaults: Fallbacks when no locale can be determined
- Input conventions: Separators and grammar accepted while typing
- Numbering systems: Digit glyph table for non-Latin scripts

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Probe
    "PROBE_VALUE",
    "PROBE_FRACTION_DIGITS",
    # Locale defaults
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    # Input conventions
    "DECIMAL_SEPARATORS",
    "INTEGER_PATTERN",
    # Numbering systems
    "LATIN_DIGITS",
    "NUMBERING_SYSTEM_DIGITS",
    "NUMBERING_SYSTEM_ZEROS",
]

# ============================================================================
# PROBE
# ============================================================================

# Large-magnitude negative value with a non-trivial fraction. Formatting it
# yields every part type at least once: sign, integer runs, grouping
# separator, decimal separator, fraction run and any style literals.
PROBE_VALUE: float = -123456.768

# Fraction digits used when rendering the probe for styles without an
# intrinsic precision (decimal, percent, unit). Currency probes use the
# currency's CLDR precision instead, so zero-decimal currencies (JPY, KRW)
# correctly yield a profile without a decimal symbol.
PROBE_FRACTION_DIGITS: int = 3

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when no locale is given and none can be detected from the environment.
DEFAULT_LOCALE: str = "en_US"

# Maximum cached Babel Locale objects (see locale_utils.get_babel_locale).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT CONVENTIONS
# ============================================================================

# Separators a user may type in place of the locale decimal symbol:
# comma, full stop and U+066B ARABIC DECIMAL SEPARATOR.
DECIMAL_SEPARATORS: tuple[str, ...] = (",", ".", "\u066b")

# Integer run without leading zeros unless the run is exactly "0".
# ASCII class on purpose: Python's \d also matches non-Latin digits.
INTEGER_PATTERN: str = "(0|[1-9][0-9]*)"

# ============================================================================
# NUMBERING SYSTEMS
# ============================================================================

LATIN_DIGITS: tuple[str, ...] = tuple("0123456789")

# Code point of the zero glyph for CLDR numeric numbering systems whose ten
# digits are contiguous. Babel renders Latin digits only; these are used to
# transliterate its output for locales defaulting to another system.
NUMBERING_SYSTEM_ZEROS: dict[str, int] = {
    "latn": 0x0030,
    "arab": 0x0660,  # Arabic-Indic
    "arabext": 0x06F0,  # Extended Arabic-Indic (Persian, Urdu)
    "bali": 0x1B50,
    "beng": 0x09E6,
    "deva": 0x0966,
    "fullwide": 0xFF10,
    "gujr": 0x0AE6,
    "guru": 0x0A66,
    "java": 0xA9D0,
    "khmr": 0x17E0,
    "knda": 0x0CE6,
    "laoo": 0x0ED0,
    "limb": 0x1946,
    "mlym": 0x0D66,
    "mong": 0x1810,
    "mtei": 0xABF0,
    "mymr": 0x1040,
    "nkoo": 0x07C0,
    "olck": 0x1C50,
    "orya": 0x0B66,
    "sund": 0x1BB0,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "thai": 0x0E50,
    "tibt": 0x0F20,
    "vaii": 0xA620,
}

# Ten digit glyphs per numbering system, indexed by digit value.
NUMBERING_SYSTEM_DIGITS: dict[str, str] = {
    name: "".join(chr(zero + offset) for offset in range(10))
    for name, zero in NUMBERING_SYSTEM_ZEROS.items()
} | {
    "hanidec": "\u3007\u4e00\u4e8c\u4e09\u56db\u4e94\u516d\u4e03\u516b\u4e5d",
}
