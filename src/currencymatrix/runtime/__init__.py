"""Runtime: case expansion, evaluation, and the Locale Formatting Service.

Exports:
    FormattingService, CurrencyFormatter: Service protocols the harness drives
    BabelFormattingService: CLDR-backed service implementation
    expand_currency_cases, expand_symbol_cases: Case generators
    evaluate_currency_case, evaluate_symbol_case: Single-case evaluators
    run_currency_matrix, run_symbol_table: Whole-family runners

Python 3.13+.
"""

from .babel_service import (
    BabelCurrencyFormatter,
    BabelFormattingService,
    currency_fraction_digits,
    default_currency,
)
from .evaluator import CaseResult, evaluate_currency_case, evaluate_symbol_case
from .expander import CurrencyCase, SymbolCase, expand_currency_cases, expand_symbol_cases
from .runner import RunSummary, run_currency_matrix, run_symbol_table
from .service import CurrencyFormatter, FormattingService

__all__ = [
    "BabelCurrencyFormatter",
    "BabelFormattingService",
    "CaseResult",
    "CurrencyCase",
    "CurrencyFormatter",
    "FormattingService",
    "RunSummary",
    "SymbolCase",
    "currency_fraction_digits",
    "default_currency",
    "evaluate_currency_case",
    "evaluate_symbol_case",
    "expand_currency_cases",
    "expand_symbol_cases",
    "run_currency_matrix",
    "run_symbol_table",
]
