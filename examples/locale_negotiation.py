"""localeid Example - Parsing and Best-Match Negotiation.

Demonstrates real-world usage of localeid for choosing which supported
locale serves a request.

Scenarios covered:
1. Parsing and normalizing identifiers
2. Country fallback inside a supported language
3. Default-locale fallback for unsupported languages
4. Negotiating from an Accept-Language header

Python 3.13+.
"""

from __future__ import annotations

from localeid import (
    get_best,
    negotiate_accept_language,
    normalize,
    normalize_accept_language,
    parse,
    prepare_supported,
)

SUPPORTED = ["en", "en-US", "en-GB", "fr", "de-DE", "de-AT", "zh-Hans-CN"]


def example_1_parsing() -> None:
    """Example 1: Parsing identifiers into fields."""
    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    for identifier in ["en-us", "zh_hans_CN@collation=pinyin", "sr-Latn-RS-posix", "a-b-c-d-e"]:
        print(f"{identifier!r:32} -> {parse(identifier)}")
        print(f"{'':32}    normalized: {normalize(identifier)!r}")


def example_2_country_fallback() -> None:
    """Example 2: Country fallback within English."""
    print("\n" + "=" * 60)
    print("Example 2: Country Fallback")
    print("=" * 60)

    index = prepare_supported(SUPPORTED)
    for requested in ["en-US", "en-CA"]:
        plain = get_best(index, requested)
        any_country = get_best(index, requested, get_any_country=True)
        print(f"{requested}: {plain!r} (any country: {any_country!r})")
    # Output:
    # en-US: 'en-US' (any country: 'en-US')
    # en-CA: 'en' (any country: 'en-US')


def example_3_default_fallback() -> None:
    """Example 3: Unsupported languages resolve the default."""
    print("\n" + "=" * 60)
    print("Example 3: Default Fallback")
    print("=" * 60)

    index = prepare_supported(SUPPORTED)
    print(f"es    with default fr    -> {get_best(index, 'es', 'fr')!r}")
    print(f"de-CH with default en    -> {get_best(index, 'de-CH', 'en')!r}")
    print(f"xx    with default xx    -> {get_best(index, 'xx', 'xx')!r}")
    # Output:
    # es    with default fr    -> 'fr'
    # de-CH with default en    -> 'en'
    # xx    with default xx    -> None


def example_4_accept_language() -> None:
    """Example 4: Accept-Language negotiation."""
    print("\n" + "=" * 60)
    print("Example 4: Accept-Language")
    print("=" * 60)

    header = "de-CH,fr;q=0.8,en;q=0.5"
    print(f"Candidates: {normalize_accept_language(header)}")
    print(f"Negotiated: {negotiate_accept_language(SUPPORTED, header, 'en')!r}")
    print(f"Any country: {negotiate_accept_language(SUPPORTED, header, 'en', True)!r}")
    # Output:
    # Candidates: ['de_CH', 'fr', 'en']
    # Negotiated: 'fr'
    # Any country: 'de-DE'


# Main execution
if __name__ == "__main__":
    example_1_parsing()
    example_2_country_fallback()
    example_3_default_fallback()
    example_4_accept_language()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
