"""Enumerations for localeid type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FallbackStage(StrEnum):
    """Stage of best-match selection in get_best().

    Selection tries the requested locale first and the default locale at
    most once afterwards. DEFAULT is never re-entered.

    StrEnum provides automatic string conversion: str(FallbackStage.DEFAULT) == "default"
    """

    REQUESTED = "requested"
    """Matching the locale the caller asked for."""

    DEFAULT = "default"
    """Matching the caller's default locale after the requested one failed."""


__all__ = [
    "FallbackStage",
]
