"""Run whole case families and collect their results.

A mismatch never stops a run; every case is evaluated and reported.
Configuration and service errors propagate to the caller.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from currencymatrix.diagnostics import ErrorTemplate
from currencymatrix.enums import CaseOutcome, ProviderMode

from .evaluator import CaseResult, evaluate_currency_case, evaluate_symbol_case
from .expander import expand_currency_cases, expand_symbol_cases

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from currencymatrix.diagnostics import Diagnostic
    from currencymatrix.expectations import ExpectationTable, SymbolExpectation

    from .service import FormattingService

__all__ = [
    "RunSummary",
    "run_currency_matrix",
    "run_symbol_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Ordered results of one case family run.

    Attributes:
        name: Case family label used in logs and reports
        results: Results in case enumeration order
    """

    name: str
    results: tuple[CaseResult, ...]

    @classmethod
    def collect(cls, name: str, results: Iterable[CaseResult]) -> RunSummary:
        summary = cls(name=name, results=tuple(results))
        logger.info(
            "%s: %d passed, %d failed, %d skipped",
            name,
            summary.passed,
            summary.failed,
            summary.skipped,
        )
        return summary

    def _count(self, outcome: CaseOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def passed(self) -> int:
        return self._count(CaseOutcome.PASSED)

    @property
    def failed(self) -> int:
        return self._count(CaseOutcome.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(CaseOutcome.SKIPPED)

    @property
    def ok(self) -> bool:
        """True if no case failed (skips do not count as failures)."""
        return self.failed == 0

    @property
    def failures(self) -> tuple[Diagnostic, ...]:
        """Diagnostics of failed cases, in enumeration order."""
        return tuple(
            result.diagnostic
            for result in self.results
            if result.outcome is CaseOutcome.FAILED and result.diagnostic is not None
        )


def run_currency_matrix(table: ExpectationTable, service: FormattingService) -> RunSummary:
    """Evaluate every (locale, currency) case of table.

    Every case gets a freshly constructed formatter, so no currency or
    fraction-digit configuration carries over between cases.
    """
    results = (
        evaluate_currency_case(
            case,
            service.currency_formatter(case.locale),
            fraction_digits=service.fraction_digits,
        )
        for case in expand_currency_cases(table)
    )
    return RunSummary.collect(f"Currency format matrix ({table.mode})", results)


def run_symbol_table(
    symbols: Mapping[str, SymbolExpectation],
    service: FormattingService,
    mode: ProviderMode,
    *,
    now: datetime | None = None,
) -> RunSummary:
    """Evaluate the symbol expectation of every locale the service provides.

    Under any mode other than COMPAT every case is skipped.
    """
    if mode != ProviderMode.COMPAT:
        diagnostic = ErrorTemplate.provider_not_applicable(str(mode), str(ProviderMode.COMPAT))
        logger.warning("%s", diagnostic.message)

    cases = expand_symbol_cases(service.available_locales(), symbols)
    results = (evaluate_symbol_case(case, service, mode, now=now) for case in cases)
    return RunSummary.collect(f"Currency symbol table ({mode})", results)
