"""Expectation data: the provider-selected format matrix and the symbol table.

Exports:
    ExpectationTable: Locale x currency expected literals for one provider mode
    SymbolTable: Locale -> currency symbol expectations from the side file
    LiteralSymbol, TimeGatedSymbol: Parsed symbol expectations
    read_symbol_file: Read the .properties side file without parsing values
    load_symbol_table: Read the side file and parse it for a provider mode
    resolve_expected_symbol: Resolve a raw symbol value against a clock

Python 3.13+.
"""

from .properties import SymbolTable, load_symbol_table, parse_properties, read_symbol_file
from .symbols import (
    LiteralSymbol,
    SymbolExpectation,
    TimeGatedSymbol,
    parse_cutover,
    parse_symbol_expectation,
    resolve_expected_symbol,
)
from .table import ExpectationTable

__all__ = [
    "ExpectationTable",
    "LiteralSymbol",
    "SymbolExpectation",
    "SymbolTable",
    "TimeGatedSymbol",
    "load_symbol_table",
    "parse_cutover",
    "parse_properties",
    "parse_symbol_expectation",
    "read_symbol_file",
    "resolve_expected_symbol",
]
