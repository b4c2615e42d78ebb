"""Hypothesis strategies for locale identifiers.

Provides reusable strategies for generating identifier test data:
- Subtag strategies (language, script, country, variant, keyword)
- Well-formed identifiers paired with their expected ParsedLocale
- Supported-locale lists for negotiation tests

Event-Emitting Strategies (HypoFuzz-Optimized):
- well_formed_locales: Emits locale_shape=<shape>, locale_sep=hyphen|underscore|mixed
- supported_lists: Emits supported_size=small|medium|large

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from localeid import ParsedLocale

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Realistic supported locales, mixed separators as seen in real configs.
LOCALE_POOL = [
    "en", "en-US", "en-GB", "en_AU",
    "de", "de-DE", "de_AT", "de-CH",
    "fr", "fr-FR", "fr-CA",
    "es", "es-ES", "es-419",
    "pt-BR", "pt-PT",
    "zh-Hans-CN", "zh_Hant_TW",
    "sr-Latn-RS", "sr-Cyrl-RS",
    "lv", "lv-LV", "ja", "ko", "ar",
]

_MIXED_CASE_LETTERS = string.ascii_letters


def _mixed_case(min_size: int, max_size: int) -> st.SearchStrategy[str]:
    return st.text(alphabet=_MIXED_CASE_LETTERS, min_size=min_size, max_size=max_size)


language_subtags = _mixed_case(2, 3)
script_subtags = _mixed_case(4, 4)
country_subtags = st.one_of(
    _mixed_case(2, 2),
    st.text(alphabet=string.digits, min_size=3, max_size=3),
)
variant_subtags = st.text(
    alphabet=string.ascii_letters + string.digits, min_size=1, max_size=8,
)
keywords = st.text(
    alphabet=string.ascii_letters + string.digits + "=;-_@",
    min_size=1,
    max_size=30,
)


@st.composite
def well_formed_locales(draw: DrawFn) -> tuple[str, ParsedLocale]:
    """Generate an identifier string with the ParsedLocale it must parse to.

    Shapes: language, language-country, language-script-country,
    language-script-country-variant, each with an optional @keyword.
    language-script alone is excluded: a 4-letter script in the country
    position is read as a keyword.

    Events emitted:
    - locale_shape=<shape>
    - locale_sep=hyphen|underscore|mixed
    - locale_keyword=yes|no
    """
    shape = draw(st.sampled_from(["l", "lc", "lsc", "lscv"]))
    event(f"locale_shape={shape}")

    language = draw(language_subtags)
    script = draw(script_subtags) if "s" in shape else None
    country = draw(country_subtags) if "c" in shape else None
    variant = draw(variant_subtags) if "v" in shape else None
    keyword = draw(st.none() | keywords)
    event(f"locale_keyword={'no' if keyword is None else 'yes'}")

    segments = [s for s in (language, script, country, variant) if s is not None]
    separators = draw(
        st.lists(
            st.sampled_from(["-", "_"]),
            min_size=len(segments) - 1,
            max_size=len(segments) - 1,
        )
    )
    if not separators:
        event("locale_sep=none")
    elif set(separators) == {"-"}:
        event("locale_sep=hyphen")
    elif set(separators) == {"_"}:
        event("locale_sep=underscore")
    else:
        event("locale_sep=mixed")

    identifier = segments[0]
    for separator, segment in zip(separators, segments[1:], strict=True):
        identifier += separator + segment
    if keyword is not None:
        identifier += "@" + keyword

    expected = ParsedLocale(
        language=language.lower(),
        script=script.capitalize() if script else None,
        country=country.upper() if country else None,
        variant=variant.upper() if variant else None,
        keyword=keyword,
    )
    return identifier, expected


@st.composite
def supported_lists(draw: DrawFn, min_size: int = 1, max_size: int = 10) -> list[str]:
    """Generate supported-locale lists (unique, ordered) from LOCALE_POOL.

    Events emitted:
    - supported_size=small|medium|large
    """
    locales = draw(
        st.lists(
            st.sampled_from(LOCALE_POOL),
            min_size=min_size,
            max_size=max_size,
            unique=True,
        )
    )
    size_class = (
        "small" if len(locales) <= 2
        else "medium" if len(locales) <= 6
        else "large"
    )
    event(f"supported_size={size_class}")
    return locales


requested_locales = st.sampled_from([*LOCALE_POOL, "en-CA", "de-LU", "xx", "xx-YY", "it-IT"])
