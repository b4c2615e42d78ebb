"""Canonical locale strings and Accept-Language splitting.

normalize() reduces any parsable identifier to ``language[_Script][_COUNTRY]``
so that differently written identifiers compare equal. Variant and keyword
are dropped.

normalize_accept_language() pre-splits an HTTP ``Accept-Language`` header
into normalized candidates, preserving header order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localeid.constants import ACCEPT_LANGUAGE_PATTERN, DEFAULT_DELIMITER
from localeid.identifier import parse

__all__ = [
    "normalize",
    "normalize_accept_language",
]


def normalize(locale: object, delimiter: str = DEFAULT_DELIMITER) -> str | None:
    """Return the canonical form of a locale identifier.

    Args:
        locale: Locale identifier (any value accepted by parse())
        delimiter: Separator placed between language, script and country

    Returns:
        Canonical string, or None if locale is not parsable

    Example:
        >>> normalize("zh-hans-cn")
        'zh_Hans_CN'
        >>> normalize("en-US-POSIX")
        'en_US'
        >>> normalize("pt-br", delimiter="-")
        'pt-BR'
    """
    parsed = parse(locale)
    if parsed is None:
        return None
    return parsed.to_string(delimiter)


def normalize_accept_language(accept_language: str | None) -> list[str]:
    """Split an Accept-Language header into normalized locale candidates.

    Quality weights are recognised so they are not mistaken for language
    ranges, but results keep header order; they are not sorted by weight.
    Entries that do not normalize are skipped.

    Args:
        accept_language: Raw header value, or None

    Returns:
        Normalized locales in header order (empty for a missing header)

    Example:
        >>> normalize_accept_language("en-US,fr;q=0.8,de;q=0.5")
        ['en_US', 'fr', 'de']
    """
    if not accept_language:
        return []

    result: list[str] = []
    for match in ACCEPT_LANGUAGE_PATTERN.finditer(accept_language):
        locale = normalize(match.group(1))
        if locale:
            result.append(locale)
    return result
