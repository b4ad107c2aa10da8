"""Hypothesis strategies for currencymatrix property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- symbols: Literal and time-gated symbol expectations, locale identifiers

Usage:
    from tests.strategies import literal_symbols, time_gated_entries
"""

from .symbols import (
    cutover_instants,
    encode_time_gated,
    literal_symbols,
    locale_identifiers,
    time_gated_entries,
)

__all__ = [
    "cutover_instants",
    "encode_time_gated",
    "literal_symbols",
    "locale_identifiers",
    "time_gated_entries",
]
