"""localeid exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "BabelImportError",
    "LocaleIdError",
    "UnparsableLocaleError",
]

_IDENTIFIER_SHAPE_HINT = (
    "Use language[-script][-country][-variant][@keyword] "
    "with at most 4 '-' or '_' separated segments"
)


class LocaleIdError(Exception):
    """Base exception for all localeid errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleIdError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnparsableLocaleError(LocaleIdError):
    """A locale string that must parse could not be parsed.

    Raised when building a supported-locale index from a list that contains
    a malformed entry. A malformed supported list is a configuration bug in
    the caller, so the whole build fails instead of skipping the entry.

    Plain parse() never raises this; it returns None for unparsable input.

    Attributes:
        locale: The offending value, exactly as the caller supplied it
    """

    def __init__(
        self,
        locale: object,
        *,
        code: DiagnosticCode = DiagnosticCode.UNPARSABLE_SUPPORTED_LOCALE,
    ) -> None:
        """Initialize UnparsableLocaleError.

        Args:
            locale: The value that failed to parse
            code: Diagnostic code describing where the failure happened
        """
        diagnostic = Diagnostic(
            code=code,
            message=f"Locale {locale!r} is not parsable",
            hint=_IDENTIFIER_SHAPE_HINT,
        )
        super().__init__(diagnostic)
        self.locale = locale


class BabelImportError(LocaleIdError, ImportError):
    """A Babel-backed helper was called without Babel installed.

    Also an ImportError, so callers that already guard optional imports
    catch it unchanged.

    Attributes:
        feature: Name of the helper that needs Babel
    """

    def __init__(self, feature: str) -> None:
        """Initialize BabelImportError.

        Args:
            feature: Name of the helper that needs Babel
        """
        diagnostic = Diagnostic(
            code=DiagnosticCode.BABEL_UNAVAILABLE,
            message=f"{feature} requires Babel for CLDR locale data",
            hint="Install with: pip install localeid[babel]",
        )
        super().__init__(diagnostic)
        self.feature = feature
