"""Best-match negotiation against a set of supported locales.

Submodules:
    index    - LanguageEntry, SupportedIndex, prepare_supported
    selector - get_best, negotiate_accept_language

Python 3.13+. Zero external dependencies.
"""

from localeid.negotiation.index import LanguageEntry, SupportedIndex, prepare_supported
from localeid.negotiation.selector import get_best, negotiate_accept_language

__all__ = [
    "LanguageEntry",
    "SupportedIndex",
    "get_best",
    "negotiate_accept_language",
    "prepare_supported",
]
