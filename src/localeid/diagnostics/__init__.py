"""Diagnostic system for localeid errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import BabelImportError, LocaleIdError, UnparsableLocaleError

__all__ = [
    "BabelImportError",
    "Diagnostic",
    "DiagnosticCode",
    "LocaleIdError",
    "UnparsableLocaleError",
]
