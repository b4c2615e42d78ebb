"""Type aliases for the localeid domain.

Provides semantic type aliases used throughout the package and by user
code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "CountryCode",
    "LanguageCode",
    "LocaleCode",
]

LocaleCode: TypeAlias = str
"""Locale identifier as written by the caller (e.g., 'en-US', 'zh_Hans_CN@collation=pinyin')."""

LanguageCode: TypeAlias = str
"""Lowercase language subtag (e.g., 'en', 'zh')."""

CountryCode: TypeAlias = str
"""Uppercase country subtag (e.g., 'US', 'CN', '419')."""
