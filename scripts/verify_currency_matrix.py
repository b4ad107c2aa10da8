#!/usr/bin/env python3
"""Verify currency formatting and currency symbols against Babel CLDR data.

Runs both case families with the configured provider mode:
    1. Currency format matrix: every (locale, currency) cell of the
       provider's expectation matrix.
    2. Currency symbol table: every locale Babel provides, against the
       symbol side file (COMPAT only; skipped under CLDR).

Every case runs; mismatches are collected and printed at the end.

Exit codes:
    0: All cases passed or were skipped.
    1: One or more mismatches.
    2: Configuration error (unknown provider mode, bad matrix shape,
       unreadable symbol table) before any case runs, or a malformed
       cutover under COMPAT, reported after the currency matrix.

Usage:
    verify_currency_matrix.py [--provider COMPAT|CLDR] [--symbols PATH]
                              [--format rust|simple|json] [--color] [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from currencymatrix.config import HarnessConfig, load_config, parse_provider_mode
from currencymatrix.diagnostics import (
    ConfigurationError,
    DiagnosticFormatter,
    MalformedCutoverError,
    OutputFormat,
)
from currencymatrix.expectations import ExpectationTable, SymbolTable, read_symbol_file
from currencymatrix.runtime import (
    BabelFormattingService,
    FormattingService,
    RunSummary,
    run_currency_matrix,
    run_symbol_table,
)


def _print_summary(summary: RunSummary, formatter: DiagnosticFormatter) -> None:
    """Print one case family's counts and failures."""
    print(summary.name)
    print("=" * 50)
    print(f"Passed:  {summary.passed}")
    print(f"Failed:  {summary.failed}")
    print(f"Skipped: {summary.skipped}")
    print()
    if summary.failures:
        print(formatter.format_all(summary.failures))
        print()


def run(
    config: HarnessConfig,
    service: FormattingService,
    formatter: DiagnosticFormatter,
) -> int:
    """Run both case families and print the report.

    The symbol side file is read before any case runs. Its values are parsed
    after the currency matrix has been reported, and only under COMPAT.

    Raises:
        ConfigurationError: If the expectation data or symbol file is invalid
        MalformedCutoverError: If a symbol entry has a malformed cutover
            (COMPAT only, after the currency matrix report)
    """
    mode = config.provider_mode
    table = ExpectationTable.default(mode)
    raw_symbols = read_symbol_file(config.symbols_path)

    print(f"Provider mode: {mode}")
    print()
    currency_summary = run_currency_matrix(table, service)
    _print_summary(currency_summary, formatter)

    # Parsed after the matrix report; COMPAT only
    symbols = SymbolTable.for_provider(raw_symbols, mode, source=str(config.symbols_path))
    symbol_summary = run_symbol_table(symbols, service, mode)
    _print_summary(symbol_summary, formatter)

    failed = currency_summary.failed + symbol_summary.failed
    if failed:
        print(f"[FAIL] {failed} mismatch(es) found.")
        print("[EXIT-CODE] 1")
        return 1

    print("[PASS] All cases passed or were skipped.")
    print("[EXIT-CODE] 0")
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify currency formatting and symbols against Babel CLDR data.",
    )
    parser.add_argument(
        "--provider",
        help="Provider mode, COMPAT or CLDR (default: CURRENCYMATRIX_LOCALE_PROVIDERS or CLDR).",
    )
    parser.add_argument(
        "--symbols",
        type=Path,
        help="Currency symbol side file (default: CURRENCYMATRIX_SYMBOLS_FILE or packaged).",
    )
    parser.add_argument(
        "--format",
        choices=[str(fmt) for fmt in OutputFormat],
        default=str(OutputFormat.RUST),
        help="Diagnostic output format.",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize rust-style diagnostics.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log run progress and per-locale warnings.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, service: FormattingService | None = None) -> int:
    """Run currency matrix verification."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format), color=args.color)

    try:
        config = load_config()
        if args.provider is not None:
            config = dataclasses.replace(config, provider_mode=parse_provider_mode(args.provider))
        if args.symbols is not None:
            config = dataclasses.replace(config, symbols_path=args.symbols)
        return run(config, service if service is not None else BabelFormattingService(), formatter)
    except (ConfigurationError, MalformedCutoverError) as e:
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic))
        else:
            print(f"[ERROR] {e}")
        print("[EXIT-CODE] 2")
        return 2


if __name__ == "__main__":
    sys.exit(main())
