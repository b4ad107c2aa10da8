"""Shared constants for currencymatrix.

Constants are grouped by domain:
- Sample input: The fixed magnitude every currency case formats
- Symbol expectations: Encoding of time-gated symbol entries
- Configuration: Environment variable names and defaults

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal
from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sample input
    "SAMPLE_AMOUNT",
    # Symbol expectations
    "SYMBOL_SEPARATOR",
    "TIME_GATED_TOKEN_COUNT",
    "CUTOVER_FORMAT",
    "NO_CURRENCY_CODE",
    "NO_CURRENCY_SYMBOL",
    # Configuration
    "ENV_LOCALE_PROVIDERS",
    "ENV_SYMBOLS_FILE",
    "DEFAULT_SYMBOLS_FILE",
]

# ============================================================================
# SAMPLE INPUT
# ============================================================================

# Every currency case formats this value. Decimal keeps 1234.56 exact so that
# rounding to zero fraction digits (JPY) lands on 1235 deterministically.
SAMPLE_AMOUNT: Decimal = Decimal("1234.56")

# ============================================================================
# SYMBOL EXPECTATIONS
# ============================================================================

# Compound entries are encoded as "current;cutover;future".
SYMBOL_SEPARATOR: str = ";"
TIME_GATED_TOKEN_COUNT: int = 3

# Cutover timestamps are UTC, yyyy-MM-dd-HH-mm-ss.
CUTOVER_FORMAT: str = "%Y-%m-%d-%H-%M-%S"

# ISO 4217 "no currency" code and the generic currency sign used for
# locales without a territory.
NO_CURRENCY_CODE: str = "XXX"
NO_CURRENCY_SYMBOL: str = "\xa4"

# ============================================================================
# CONFIGURATION
# ============================================================================

ENV_LOCALE_PROVIDERS: str = "CURRENCYMATRIX_LOCALE_PROVIDERS"
ENV_SYMBOLS_FILE: str = "CURRENCYMATRIX_SYMBOLS_FILE"

DEFAULT_SYMBOLS_FILE: Path = (
    Path(__file__).parent / "expectations" / "data" / "currency_symbols.properties"
)
