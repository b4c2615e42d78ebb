"""localeid - Locale identifier parsing and best-match negotiation.

Parses ICU/BCP-47 style locale identifiers ("en-US",
"zh_Hans_CN@collation=pinyin") into structured components and selects the
best supported locale for a request, with default-locale and any-country
fallback.

Public API:
    parse - Parse an identifier into a ParsedLocale (None if unparsable)
    get_language, get_country, get_script, get_variant, get_keyword - Field accessors
    normalize - Canonical language[_Script][_COUNTRY] form
    normalize_accept_language - Split an Accept-Language header into candidates
    prepare_supported - Build a SupportedIndex from supported locales
    get_best - Select the best supported locale for a request
    negotiate_accept_language - Select the best supported locale for a header

Exceptions:
    LocaleIdError - Base exception class
    UnparsableLocaleError - A supported locale could not be parsed
    BabelImportError - A Babel-backed helper was used without Babel

Submodules:
    localeid.negotiation - SupportedIndex, LanguageEntry and selection
    localeid.diagnostics - Error types and diagnostic codes
    localeid.locale_utils - Babel bridge and system locale detection (Babel optional)
"""

# Essential Public API
from .diagnostics import BabelImportError, LocaleIdError, UnparsableLocaleError
from .identifier import (
    ParsedLocale,
    get_country,
    get_keyword,
    get_language,
    get_script,
    get_variant,
    parse,
)
from .negotiation import (
    LanguageEntry,
    SupportedIndex,
    get_best,
    negotiate_accept_language,
    prepare_supported,
)
from .normalization import normalize, normalize_accept_language

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeid")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "LanguageEntry",
    "LocaleIdError",
    "ParsedLocale",
    "SupportedIndex",
    "UnparsableLocaleError",
    "__version__",
    "get_best",
    "get_country",
    "get_keyword",
    "get_language",
    "get_script",
    "get_variant",
    "negotiate_accept_language",
    "normalize",
    "normalize_accept_language",
    "parse",
    "prepare_supported",
]
