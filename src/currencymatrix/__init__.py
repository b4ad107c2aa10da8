"""currencymatrix - data-driven verification of locale currency formatting.

Checks that a locale formatting service renders a fixed sample amount, and
reports each locale's currency symbol, exactly as a provider-specific
expectation matrix says it should.

Public API:
    ExpectationTable - Locale x currency expected literals for one provider mode
    SymbolTable / read_symbol_file / load_symbol_table - Currency symbol side file
    resolve_expected_symbol - Resolve time-gated symbol expectations
    expand_currency_cases / expand_symbol_cases - Case generators
    evaluate_currency_case / evaluate_symbol_case - Single-case evaluation
    run_currency_matrix / run_symbol_table - Whole-family runs
    BabelFormattingService - CLDR-backed formatting service
    HarnessConfig / load_config - Environment configuration
    LocaleId, ProviderMode, CaseOutcome

Exceptions:
    HarnessError - Base exception class
    ConfigurationError - Invalid configuration (fatal before any case runs)
    MalformedCutoverError - Unparseable time-gated cutover
    CaseMismatchError - Actual output differs from expected
"""

from .config import HarnessConfig, load_config
from .diagnostics import (
    CaseMismatchError,
    ConfigurationError,
    HarnessError,
    MalformedCutoverError,
)
from .enums import CaseOutcome, ProviderMode
from .expectations import (
    ExpectationTable,
    SymbolTable,
    load_symbol_table,
    read_symbol_file,
    resolve_expected_symbol,
)
from .locale_utils import LocaleId
from .runtime import (
    BabelFormattingService,
    evaluate_currency_case,
    evaluate_symbol_case,
    expand_currency_cases,
    expand_symbol_cases,
    run_currency_matrix,
    run_symbol_table,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencymatrix")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelFormattingService",
    "CaseMismatchError",
    "CaseOutcome",
    "ConfigurationError",
    "ExpectationTable",
    "HarnessConfig",
    "HarnessError",
    "LocaleId",
    "MalformedCutoverError",
    "ProviderMode",
    "SymbolTable",
    "__version__",
    "evaluate_currency_case",
    "evaluate_symbol_case",
    "expand_currency_cases",
    "expand_symbol_cases",
    "load_config",
    "load_symbol_table",
    "read_symbol_file",
    "resolve_expected_symbol",
    "run_currency_matrix",
    "run_symbol_table",
]
