"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for localeid failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Identifier errors (unparsable locale strings)
        2000-2999: Negotiation errors (supported-set configuration)
        3000-3999: Integration errors (optional Babel bridge)
    """

    # Identifier errors (1000-1999)
    UNPARSABLE_LOCALE = 1001

    # Negotiation errors (2000-2999)
    UNPARSABLE_SUPPORTED_LOCALE = 2001

    # Integration errors (3000-3999)
    BABEL_UNAVAILABLE = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNPARSABLE_SUPPORTED_LOCALE]: Locale 'a-b-c-d-e' is not parsable
              = help: Use language[-script][-country][-variant][@keyword]

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
