"""Locale utilities bridging parsed identifiers to Babel and the OS.

get_babel_locale() turns any identifier parse() accepts into a cached
babel.Locale with CLDR data. get_system_locale() detects the process locale
and returns it in normalized form.

Babel is optional; only get_babel_locale() needs it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localeid.constants import (
    DEFAULT_SYSTEM_LOCALE,
    KEYWORD_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
    POSIX_PSEUDO_LOCALES,
    SYSTEM_LOCALE_ENV_VARS,
)
from localeid.diagnostics import BabelImportError, DiagnosticCode, UnparsableLocaleError
from localeid.identifier import parse
from localeid.normalization import normalize

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    The identifier must pass parse(). It is then handed to Babel's
    Locale.parse() with hyphens converted and the @keyword removed, so
    "zh-hans-cn", "zh_Hans_CN" and "en-US@currency=EUR" all work, and a
    script without a country ("zh-Hant", "sr-Latn") is kept.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale identifier

    Returns:
        Babel Locale object

    Raises:
        UnparsableLocaleError: If locale_code is not a parsable identifier
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If Babel rejects the subtags (e.g., a 3-letter country)
        BabelImportError: If Babel is not installed

    Example:
        >>> locale = get_babel_locale("zh-Hans-CN")
        >>> locale.language, locale.script, locale.territory
        ('zh', 'Hans', 'CN')
    """
    if parse(locale_code) is None:
        raise UnparsableLocaleError(locale_code, code=DiagnosticCode.UNPARSABLE_LOCALE)

    try:
        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel import Locale  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError("get_babel_locale") from e

    return Locale.parse(_babel_identifier(locale_code))


def _babel_identifier(locale_code: str) -> str:
    # "zh-Hant@collation=stroke" -> "zh_Hant"
    identifier, _, _ = locale_code.partition(KEYWORD_SEPARATOR)
    return identifier.replace("-", "_")


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    get_babel_locale.cache_clear()


def _strip_encoding(value: str) -> str:
    # "de_DE.UTF-8" -> "de_DE"
    return value.split(".")[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    "C" and "POSIX" pseudo-locales are skipped, as are values that do not
    parse. The result is passed through normalize().

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_SYSTEM_LOCALE.

    Returns:
        Normalized locale code (e.g., 'de_DE').

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    candidate = _strip_encoding(system_locale) if system_locale else ""
    if candidate and candidate not in POSIX_PSEUDO_LOCALES:
        normalized = normalize(candidate)
        if normalized:
            logger.debug("System locale %r detected via locale.getlocale()", normalized)
            return normalized

    for var in SYSTEM_LOCALE_ENV_VARS:
        value = _strip_encoding(os.environ.get(var, ""))
        if not value or value in POSIX_PSEUDO_LOCALES:
            continue
        normalized = normalize(value)
        if normalized:
            logger.debug("System locale %r detected via %s", normalized, var)
            return normalized

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_SYSTEM_LOCALE
