"""Enumerations for currencymatrix type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ProviderMode(StrEnum):
    """Locale-data provider whose expectations are authoritative for a run.

    StrEnum provides automatic string conversion: str(ProviderMode.CLDR) == "CLDR"
    """

    COMPAT = "COMPAT"
    """Legacy locale data. The only mode that runs currency symbol-table cases."""

    CLDR = "CLDR"
    """Unicode CLDR locale data."""


class CaseOutcome(StrEnum):
    """Result of evaluating a single case."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


__all__ = [
    "CaseOutcome",
    "ProviderMode",
]
