"""Best-match selection of a supported locale.

get_best() answers "which of my supported locales should serve this
request". Resolution order for a requested ``language_COUNTRY``:

1. The supported locale with the same language and country.
2. With get_any_country: the first supported locale of that language that
   carries any country.
3. The supported locale of that language without a country.
4. The caller's default locale, matched the same way, at most once.

Unsupported locales are not errors. They are logged at DEBUG and resolved
through the default, or to None when nothing matches.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TypeAlias

from localeid.enums import FallbackStage
from localeid.identifier import parse
from localeid.negotiation.index import LanguageEntry, SupportedIndex, prepare_supported
from localeid.normalization import normalize_accept_language
from localeid.types import CountryCode, LanguageCode, LocaleCode

__all__ = [
    "get_best",
    "negotiate_accept_language",
]

logger = logging.getLogger(__name__)

Supported: TypeAlias = SupportedIndex | Mapping[LanguageCode, LanguageEntry] | Iterable[LocaleCode]
"""Either a prepared index or the raw supported-locale list."""


def _as_index(supported: Supported) -> Mapping[LanguageCode, LanguageEntry]:
    if isinstance(supported, Mapping):
        return supported
    return prepare_supported(supported)


def _select(
    entry: LanguageEntry,
    country: CountryCode | None,
    default_locale: LocaleCode | None,
    get_any_country: bool,
) -> LocaleCode | None:
    """Pick a locale from one language's entry."""
    main = entry.main if entry.main is not None else default_locale
    any_country = entry.first_country if get_any_country else None

    if not entry.countries or not country:
        return any_country or main

    exact = entry.countries.get(country)
    if exact:
        return exact
    return any_country or main


def get_best(
    supported: Supported,
    locale: object,
    default_locale: LocaleCode | None = None,
    get_any_country: bool = False,
) -> LocaleCode | None:
    """Select the supported locale that best serves locale.

    An exact language and country match always wins. get_any_country only
    changes the fallback when the country is not supported: the first
    supported country of the language is preferred over its country-less
    entry.

    Args:
        supported: SupportedIndex from prepare_supported(), or the raw list
            of supported locales (indexed on every call)
        locale: Requested locale identifier
        default_locale: Tried once when locale is missing or its language
            is not supported. Also used as the country-less fallback for a
            supported language that has no country-less entry.
        get_any_country: Prefer any supported country of the language over
            its country-less entry

    Returns:
        One of the supported locale strings, default_locale, or None

    Raises:
        UnparsableLocaleError: If supported is a raw list with an
            unparsable entry

    Example:
        >>> index = prepare_supported(["en", "en-US", "en-GB", "fr"])
        >>> get_best(index, "en-CA")
        'en'
        >>> get_best(index, "en-CA", get_any_country=True)
        'en-US'
        >>> get_best(index, "es", "fr")
        'fr'
    """
    index = _as_index(supported)

    candidate: object = locale
    default = default_locale
    stage = FallbackStage.REQUESTED
    if not candidate and default:
        candidate, default = default, None
        stage = FallbackStage.DEFAULT

    while True:
        if not candidate:
            logger.debug("Locale %r is not supported", candidate)
            return None

        parsed = parse(candidate)
        if parsed is None:
            return default

        entry = index.get(parsed.language)
        if entry is not None:
            return _select(entry, parsed.country, default, get_any_country)

        logger.debug("Locale %r is not supported", candidate)
        # Default is tried at most once, and only when it is set and differs
        # from the locale that just failed.
        if stage is FallbackStage.DEFAULT or not default or candidate == default:
            return None
        candidate, default = default, None
        stage = FallbackStage.DEFAULT


def negotiate_accept_language(
    supported: Supported,
    accept_language: str | None,
    default_locale: LocaleCode | None = None,
    get_any_country: bool = False,
) -> LocaleCode | None:
    """Select a supported locale for an Accept-Language header.

    Candidates are tried in header order (quality weights do not reorder
    them). The first candidate that resolves to a supported locale wins;
    otherwise default_locale is resolved against the supported set.

    Args:
        supported: SupportedIndex or raw list of supported locales
        accept_language: Raw Accept-Language header value, or None
        default_locale: Locale to resolve when no candidate matches
        get_any_country: Passed through to get_best()

    Returns:
        A supported locale string, default_locale, or None

    Example:
        >>> negotiate_accept_language(["en", "fr", "de-DE"], "de-AT,fr;q=0.8", "en")
        'fr'
    """
    index = _as_index(supported)

    for candidate in normalize_accept_language(accept_language):
        best = get_best(index, candidate, None, get_any_country)
        if best:
            logger.debug("Negotiated %r from Accept-Language candidate %r", best, candidate)
            return best

    if not default_locale:
        return None
    return get_best(index, None, default_locale, get_any_country)
