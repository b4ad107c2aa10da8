"""Case evaluation against a Locale Formatting Service.

Each evaluator drives the service for one case and returns a CaseResult. A
mismatch is a FAILED result, not an exception, so a run can continue past it;
CaseResult.raise_for_outcome() turns it into a CaseMismatchError for pytest.

Errors that are not mismatches (malformed cutover, formatting failure)
propagate unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from currencymatrix.constants import SAMPLE_AMOUNT
from currencymatrix.diagnostics import CaseMismatchError, Diagnostic, ErrorTemplate
from currencymatrix.enums import CaseOutcome, ProviderMode

from .expander import CurrencyCase, SymbolCase

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from .service import CurrencyFormatter, FormattingService

__all__ = [
    "CaseResult",
    "evaluate_currency_case",
    "evaluate_symbol_case",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CaseResult:
    """Outcome of one case.

    Attributes:
        case: The evaluated case
        outcome: PASSED, FAILED, or SKIPPED
        diagnostic: Failure or skip reason (None when passed)
        actual: Output the service produced (None when skipped)
    """

    case: CurrencyCase | SymbolCase
    outcome: CaseOutcome
    diagnostic: Diagnostic | None = None
    actual: str | None = None

    @property
    def message(self) -> str:
        """Human-readable diagnostic message ('' when passed)."""
        return self.diagnostic.message if self.diagnostic is not None else ""

    def raise_for_outcome(self) -> None:
        """Raise CaseMismatchError if the case failed.

        Raises:
            CaseMismatchError: If outcome is FAILED
        """
        if self.outcome is CaseOutcome.FAILED and self.diagnostic is not None:
            raise CaseMismatchError(self.diagnostic)


def evaluate_currency_case(
    case: CurrencyCase,
    formatter: CurrencyFormatter,
    *,
    fraction_digits: Callable[[str], int],
) -> CaseResult:
    """Format SAMPLE_AMOUNT and compare with the case's expected literal.

    With a currency override, the formatter is switched to that currency and
    its fraction digits pinned to the currency's default fraction digits
    (not the locale's), so e.g. JPY renders 1234.56 as 1,235 in any locale.

    The formatter is mutated; pass a fresh one or one whose previous
    configuration the case fully overwrites.

    Args:
        case: Case to evaluate
        formatter: Formatter constructed for case.locale
        fraction_digits: Currency code -> default fraction digits, usually
            FormattingService.fraction_digits

    Returns:
        PASSED or FAILED result
    """
    if case.currency is not None:
        formatter.set_currency(case.currency)
        digits = fraction_digits(case.currency)
        formatter.set_fraction_digits(digits, digits)

    actual = formatter.format(SAMPLE_AMOUNT)
    if actual == case.expected:
        return CaseResult(case=case, outcome=CaseOutcome.PASSED, actual=actual)

    diagnostic = ErrorTemplate.currency_format_mismatch(
        str(case.locale), case.currency, case.expected, actual
    )
    return CaseResult(case=case, outcome=CaseOutcome.FAILED, diagnostic=diagnostic, actual=actual)


def evaluate_symbol_case(
    case: SymbolCase,
    service: FormattingService,
    mode: ProviderMode,
    *,
    now: datetime | None = None,
) -> CaseResult:
    """Compare locale's currency symbol with its (time-resolved) expectation.

    Symbol cases only run under the COMPAT provider; under any other mode
    they are skipped. A locale without an expectation is skipped with a
    warning, which is distinct from a wrong symbol.

    Args:
        case: Case to evaluate
        service: Formatting service providing the actual symbol
        mode: Active provider mode
        now: Clock for time-gated expectations (default: current UTC time)

    Returns:
        PASSED, FAILED, or SKIPPED result
    """
    if mode != ProviderMode.COMPAT:
        diagnostic = ErrorTemplate.provider_not_applicable(str(mode), str(ProviderMode.COMPAT))
        return CaseResult(case=case, outcome=CaseOutcome.SKIPPED, diagnostic=diagnostic)

    if case.expected is None:
        diagnostic = ErrorTemplate.symbol_missing(str(case.locale))
        logger.warning("%s", diagnostic.message)
        return CaseResult(case=case, outcome=CaseOutcome.SKIPPED, diagnostic=diagnostic)

    expected = case.expected.resolve(now)
    actual = service.currency_symbol(case.locale)
    if actual == expected:
        return CaseResult(case=case, outcome=CaseOutcome.PASSED, actual=actual)

    diagnostic = ErrorTemplate.currency_symbol_mismatch(str(case.locale), expected, actual)
    return CaseResult(case=case, outcome=CaseOutcome.FAILED, diagnostic=diagnostic, actual=actual)
