"""Full expectation-matrix runs against live Babel CLDR data.

One pytest case per (locale, currency) cell and one per available locale's
currency symbol. Marked 'matrix': the expected literals track one locale-data
release, so these only run when requested.

The symbol side file is read at import, so a missing file stops the module.
Its values are parsed by the 'symbols' fixture; a malformed cutover errors
only the symbol cases.

Run:
    pytest -m matrix
    CURRENCYMATRIX_LOCALE_PROVIDERS=COMPAT pytest -m matrix
"""

from __future__ import annotations

import pytest

from currencymatrix.config import load_config
from currencymatrix.enums import CaseOutcome
from currencymatrix.expectations import ExpectationTable, SymbolTable, read_symbol_file
from currencymatrix.locale_utils import LocaleId
from currencymatrix.runtime import (
    BabelFormattingService,
    CurrencyCase,
    evaluate_currency_case,
    evaluate_symbol_case,
    expand_currency_cases,
    expand_symbol_cases,
)

pytestmark = pytest.mark.matrix

CONFIG = load_config()
SERVICE = BabelFormattingService()

CURRENCY_CASES = list(expand_currency_cases(ExpectationTable.default(CONFIG.provider_mode)))
RAW_SYMBOLS = read_symbol_file(CONFIG.symbols_path)


@pytest.fixture(scope="module")
def symbols() -> SymbolTable:
    return SymbolTable.for_provider(
        RAW_SYMBOLS, CONFIG.provider_mode, source=str(CONFIG.symbols_path)
    )


@pytest.mark.parametrize("case", CURRENCY_CASES, ids=lambda case: case.case_id)
def test_currency_format(case: CurrencyCase) -> None:
    """Formatting SAMPLE_AMOUNT matches the provider's expected literal."""
    result = evaluate_currency_case(
        case,
        SERVICE.currency_formatter(case.locale),
        fraction_digits=SERVICE.fraction_digits,
    )
    result.raise_for_outcome()


@pytest.mark.parametrize("locale", SERVICE.available_locales(), ids=str)
def test_currency_symbol(locale: LocaleId, symbols: SymbolTable) -> None:
    """Each locale's currency symbol matches the side file."""
    [case] = expand_symbol_cases((locale,), symbols)
    result = evaluate_symbol_case(case, SERVICE, CONFIG.provider_mode)
    if result.outcome is CaseOutcome.SKIPPED:
        pytest.skip(result.message)
    result.raise_for_outcome()
