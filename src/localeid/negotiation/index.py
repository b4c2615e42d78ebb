"""Supported-locale index for best-match selection.

prepare_supported() groups a flat list of supported locales by language so
that get_best() can answer "which supported locale carries this language
and country" with two dictionary lookups.

The index is assembled by a function-local builder and frozen before it is
returned; a SupportedIndex is never mutated afterwards and may be shared
freely between threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from localeid.diagnostics import UnparsableLocaleError
from localeid.identifier import parse
from localeid.types import CountryCode, LanguageCode, LocaleCode

__all__ = [
    "LanguageEntry",
    "SupportedIndex",
    "prepare_supported",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """Supported locales sharing one language.

    Attributes:
        main: Supported locale without a country (e.g., 'en'), if any.
            When several are given, the last one wins.
        countries: Uppercase country code -> supported locale carrying it
        first_country: First country-bearing supported locale, in input
            order. Used for any-country fallback.
    """

    main: LocaleCode | None = None
    countries: Mapping[CountryCode, LocaleCode] = field(
        default_factory=lambda: MappingProxyType({})
    )
    first_country: LocaleCode | None = None


class SupportedIndex(Mapping[LanguageCode, LanguageEntry]):
    """Immutable language -> LanguageEntry mapping.

    Build with prepare_supported(). Behaves as a read-only Mapping keyed by
    lowercase language code.

    Example:
        >>> index = prepare_supported(["en", "en-US", "fr"])
        >>> index["en"].countries["US"]
        'en-US'
        >>> "de" in index
        False
    """

    __slots__ = ("_entries", "_locales")

    def __init__(
        self,
        entries: Mapping[LanguageCode, LanguageEntry],
        locales: tuple[LocaleCode, ...] = (),
    ) -> None:
        self._entries: Mapping[LanguageCode, LanguageEntry] = MappingProxyType(dict(entries))
        self._locales = locales

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Supported locales the index was built from, in input order."""
        return self._locales

    def __getitem__(self, language: LanguageCode) -> LanguageEntry:
        return self._entries[language]

    def __iter__(self) -> Iterator[LanguageCode]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SupportedIndex({dict(self._entries)!r})"


class _LanguageEntryBuilder:
    """Mutable accumulator for one language during prepare_supported()."""

    __slots__ = ("countries", "first_country", "main")

    def __init__(self) -> None:
        self.main: LocaleCode | None = None
        self.countries: dict[CountryCode, LocaleCode] = {}
        self.first_country: LocaleCode | None = None

    def add(self, country: CountryCode | None, locale: LocaleCode) -> None:
        if country:
            self.countries[country] = locale
            if not self.first_country:
                self.first_country = locale
        else:
            self.main = locale

    def freeze(self) -> LanguageEntry:
        return LanguageEntry(
            main=self.main,
            countries=MappingProxyType(dict(self.countries)),
            first_country=self.first_country,
        )


def prepare_supported(supported: Iterable[LocaleCode]) -> SupportedIndex:
    """Index supported locales by language and country.

    Args:
        supported: Supported locale identifiers in priority order. Original
            strings are stored as-is; lookups return them unchanged.
            A single string is one locale, not a sequence of characters.

    Returns:
        Immutable SupportedIndex

    Raises:
        UnparsableLocaleError: If any entry cannot be parsed. No partial
            index is returned.

    Example:
        >>> index = prepare_supported(["en", "en-US", "en-GB", "fr"])
        >>> index["en"].first_country
        'en-US'
        >>> index["en"].main
        'en'
    """
    if isinstance(supported, str):
        supported = (supported,)

    builders: dict[LanguageCode, _LanguageEntryBuilder] = {}
    locales: list[LocaleCode] = []

    for locale in supported:
        parsed = parse(locale)
        if parsed is None:
            raise UnparsableLocaleError(locale)

        builder = builders.get(parsed.language)
        if builder is None:
            builder = builders[parsed.language] = _LanguageEntryBuilder()
        builder.add(parsed.country, locale)
        locales.append(locale)

    logger.debug(
        "Indexed %d supported locales across %d languages", len(locales), len(builders)
    )
    return SupportedIndex(
        {language: builder.freeze() for language, builder in builders.items()},
        tuple(locales),
    )
