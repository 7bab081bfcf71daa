"""Hypothesis strategies for numinput property-based testing.

Strategies are organized by domain:

- numbers: Profile combinations, in-bounds values and typed field text

Usage:
    from tests.strategies import decimal_profiles, values_for_profile
    from tests.strategies.numbers import typed_text

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - profile_by_style, values_by_magnitude
"""

from .numbers import (
    DECIMAL_LOCALES,
    PROFILE_SPECS,
    decimal_profiles,
    profile_by_style,
    typed_text,
    values_by_magnitude,
    values_for_profile,
)

__all__ = [
    "DECIMAL_LOCALES",
    "PROFILE_SPECS",
    "decimal_profiles",
    "profile_by_style",
    "typed_text",
    "values_by_magnitude",
    "values_for_profile",
]
