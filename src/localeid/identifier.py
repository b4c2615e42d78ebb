"""Locale identifier parsing.

Decomposes ICU/BCP-47 style identifiers such as ``en-US`` or
``zh_Hans_CN@collation=pinyin`` into a ParsedLocale record.

Supported shape (at most 4 segments, "-" and "_" interchangeable)::

    language[_script][_country][_variant][@keyword]

Segment positions are ambiguous, so fields are assigned from the right:
a variant exists only in the 4-segment form, the last remaining segment is
the country, and whatever is left before it is the script.

Parsing is total: malformed input yields None rather than an exception.
The accessor functions (get_language, get_country, ...) are thin
projections over parse() and propagate None the same way.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localeid.constants import (
    DEFAULT_DELIMITER,
    KEYWORD_SEPARATOR,
    MAX_COUNTRY_LENGTH,
    MAX_SEGMENTS,
    SEGMENT_SEPARATORS,
)

__all__ = [
    "ParsedLocale",
    "get_country",
    "get_keyword",
    "get_language",
    "get_script",
    "get_variant",
    "parse",
]


@dataclass(frozen=True, slots=True)
class ParsedLocale:
    """Structured components of a locale identifier.

    Case is normalized at parse time: language lowercase, script
    capitalized, country and variant uppercase. The keyword is kept
    verbatim.

    Attributes:
        language: Lowercase language subtag (always non-empty)
        script: Capitalized script subtag (e.g., 'Hans'), if any
        country: Uppercase country subtag (e.g., 'US'), if any
        variant: Uppercase variant (e.g., 'POSIX'), if any
        keyword: Trailing keyword text, if any
    """

    language: str
    script: str | None = None
    country: str | None = None
    variant: str | None = None
    keyword: str | None = None

    def to_string(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        """Render language, script and country joined by delimiter.

        Variant and keyword are never part of the rendered form.

        Example:
            >>> parse("zh-hans-cn@collation=pinyin").to_string("-")
            'zh-Hans-CN'
        """
        result = self.language
        if self.script:
            result += f"{delimiter}{self.script}"
        if self.country:
            result += f"{delimiter}{self.country}"
        return result


def parse(locale: object) -> ParsedLocale | None:
    """Parse a locale identifier into its components.

    Args:
        locale: Locale identifier. Any value is coerced with str();
            None and other falsy values yield None.

    Returns:
        ParsedLocale, or None when the identifier is empty, has more than
        four segments, or starts with an empty language segment.

    Example:
        >>> parse("zh-Hans-CN")
        ParsedLocale(language='zh', script='Hans', country='CN', variant=None, keyword=None)
        >>> parse("de@collation=phonebook").keyword
        'collation=phonebook'
        >>> parse("a_b_c_d_e") is None
        True
    """
    if not locale:
        return None

    identifier, separator, tail = str(locale).partition(KEYWORD_SEPARATOR)
    keyword = tail if separator else None

    hyphen, underscore = SEGMENT_SEPARATORS
    parts = identifier.replace(hyphen, underscore).split(underscore)
    if not parts or len(parts) > MAX_SEGMENTS:
        return None

    language = parts.pop(0)
    if not language:
        return None
    language = language.lower()

    if not parts:
        return ParsedLocale(language=language, keyword=keyword)

    variant: str | None = None
    if len(parts) == 3:
        variant = parts.pop().upper() or None

    country: str | None = parts.pop()
    # Special case: an oversized country slot ("en_POSIX", "en_US_POSIX")
    # holds a keyword, and the segment before it is the real country.
    # Overrides any "@" keyword.
    if len(country) > MAX_COUNTRY_LENGTH:
        keyword = country
        country = parts.pop() if parts else None
    country = country.upper() if country else None

    script: str | None = None
    if parts:
        script = parts.pop().capitalize() or None

    return ParsedLocale(
        language=language,
        script=script,
        country=country,
        variant=variant,
        keyword=keyword,
    )


def get_language(locale: object) -> str | None:
    """Return the lowercase language of locale, or None if unparsable."""
    parsed = parse(locale)
    return parsed.language if parsed else None


def get_country(locale: object) -> str | None:
    """Return the uppercase country of locale, or None."""
    parsed = parse(locale)
    return parsed.country if parsed else None


def get_script(locale: object) -> str | None:
    """Return the capitalized script of locale, or None."""
    parsed = parse(locale)
    return parsed.script if parsed else None


def get_variant(locale: object) -> str | None:
    """Return the uppercase variant of locale, or None."""
    parsed = parse(locale)
    return parsed.variant if parsed else None


def get_keyword(locale: object) -> str | None:
    """Return the verbatim keyword of locale, or None."""
    parsed = parse(locale)
    return parsed.keyword if parsed else None
