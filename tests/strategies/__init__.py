"""Hypothesis strategies for localeid property-based testing.

Usage:
    from tests.strategies import well_formed_locales, supported_lists

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - well_formed_locales, supported_lists
"""

from .locales import (
    LOCALE_POOL,
    country_subtags,
    keywords,
    language_subtags,
    requested_locales,
    script_subtags,
    supported_lists,
    variant_subtags,
    well_formed_locales,
)

__all__ = [
    "LOCALE_POOL",
    "country_subtags",
    "keywords",
    "language_subtags",
    "requested_locales",
    "script_subtags",
    "supported_lists",
    "variant_subtags",
    "well_formed_locales",
]
