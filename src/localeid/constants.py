"""Shared constants for localeid.

This module provides centralized configuration constants used across the
identifier parser, the normalizer and the negotiation package. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Identifier shape: segment limits and separators
- Accept-Language: header tokenization patterns
- Cache limits: Memory bounds for Babel locale caching
- System locale: Detection defaults

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identifier shape
    "MAX_SEGMENTS",
    "MAX_COUNTRY_LENGTH",
    "KEYWORD_SEPARATOR",
    "SEGMENT_SEPARATORS",
    "DEFAULT_DELIMITER",
    # Accept-Language
    "ACCEPT_LANGUAGE_PATTERN",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # System locale
    "DEFAULT_SYSTEM_LOCALE",
    "POSIX_PSEUDO_LOCALES",
    "SYSTEM_LOCALE_ENV_VARS",
]

# ============================================================================
# IDENTIFIER SHAPE
# ============================================================================

# Maximum number of "_"/"-" delimited segments in an identifier:
# language, script, country, variant. A fifth segment fails the parse.
MAX_SEGMENTS: int = 4

# Country codes are ISO 3166 alpha-2 or UN M.49 numeric (3 digits).
# Anything longer in the country position is treated as a keyword.
MAX_COUNTRY_LENGTH: int = 3

# Separates the identifier from its trailing keyword (ICU style).
KEYWORD_SEPARATOR: str = "@"

# BCP-47 uses "-", POSIX/ICU uses "_". Both are accepted on input.
SEGMENT_SEPARATORS: tuple[str, str] = ("-", "_")

# Delimiter used by normalize() when none is given.
DEFAULT_DELIMITER: str = "_"

# ============================================================================
# ACCEPT-LANGUAGE
# ============================================================================

# One header entry: lang(-subtag)?(;q=weight)?
# Group 1 is the language range; the quality weight is matched but unused.
ACCEPT_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(
    r"([a-z]{1,8}(-[a-z]{1,8})?)\s*(;\s*q\s*=\s*(1|0\.[0-9]+))?",
    re.IGNORECASE,
)

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached babel.Locale instances in locale_utils.get_babel_locale.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# SYSTEM LOCALE
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
DEFAULT_SYSTEM_LOCALE: str = "en_US"

# Pseudo-locales that carry no language information.
POSIX_PSEUDO_LOCALES: tuple[str, ...] = ("C", "POSIX")

# Environment variables consulted in order of precedence.
SYSTEM_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")
