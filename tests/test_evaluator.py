"""Tests for single-case evaluation against a formatting service.

Uses FakeFormattingService so outcomes do not depend on locale data.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from currencymatrix.constants import SAMPLE_AMOUNT
from currencymatrix.diagnostics import CaseMismatchError, DiagnosticCode
from currencymatrix.enums import CaseOutcome, ProviderMode
from currencymatrix.expectations import LiteralSymbol, TimeGatedSymbol
from currencymatrix.locale_utils import LocaleId
from currencymatrix.runtime import (
    CurrencyCase,
    SymbolCase,
    evaluate_currency_case,
    evaluate_symbol_case,
)
from tests.helpers.fake_service import FAKE_FRACTION_DIGITS, FakeFormattingService

fake_digits = FAKE_FRACTION_DIGITS.__getitem__

# ============================================================================
# Currency format cases
# ============================================================================


class TestEvaluateCurrencyCase:
    """Test formatter configuration and comparison."""

    def test_default_currency_passes(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="USD 1234.56", currency=None, locale=LocaleId.US)
        formatter = fake_service.currency_formatter(case.locale)

        result = evaluate_currency_case(case, formatter, fraction_digits=fake_digits)

        assert result.outcome is CaseOutcome.PASSED
        assert result.actual == "USD 1234.56"
        assert result.diagnostic is None
        assert result.message == ""

    def test_default_currency_leaves_formatter_unconfigured(
        self, fake_service: FakeFormattingService
    ) -> None:
        case = CurrencyCase(expected="EUR 1234.56", currency=None, locale=LocaleId.GERMANY)
        formatter = fake_service.currency_formatter(case.locale)

        evaluate_currency_case(case, formatter, fraction_digits=fake_digits)

        assert formatter.calls == [("format", SAMPLE_AMOUNT)]

    def test_override_sets_currency_then_digits(self, fake_service: FakeFormattingService) -> None:
        """Override pins both bounds to the currency's default fraction digits."""
        case = CurrencyCase(expected="JPY 1235", currency="JPY", locale=LocaleId.US)
        formatter = fake_service.currency_formatter(case.locale)

        result = evaluate_currency_case(case, formatter, fraction_digits=fake_digits)

        assert result.outcome is CaseOutcome.PASSED
        assert formatter.calls == [
            ("set_currency", "JPY"),
            ("set_fraction_digits", (0, 0)),
            ("format", SAMPLE_AMOUNT),
        ]

    def test_override_uses_currency_digits_not_locale(
        self, fake_service: FakeFormattingService
    ) -> None:
        """A two-digit currency keeps two digits in a zero-digit locale."""
        case = CurrencyCase(expected="USD 1234.56", currency="USD", locale=LocaleId.JAPAN)
        formatter = fake_service.currency_formatter(case.locale)

        result = evaluate_currency_case(case, formatter, fraction_digits=fake_digits)

        assert result.outcome is CaseOutcome.PASSED

    def test_mismatch_is_failed_result(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="¥1,235", currency="JPY", locale=LocaleId.JAPAN)
        formatter = fake_service.currency_formatter(case.locale)

        result = evaluate_currency_case(case, formatter, fraction_digits=fake_digits)

        assert result.outcome is CaseOutcome.FAILED
        assert result.actual == "JPY 1235"
        assert result.diagnostic is not None
        assert result.diagnostic.code is DiagnosticCode.CURRENCY_FORMAT_MISMATCH
        assert result.diagnostic.expected == "¥1,235"
        assert result.message == "Failed with locale: ja_JP, currency: JPY"

    def test_mismatch_default_currency_message(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="nope", currency=None, locale=LocaleId.ITALY)
        result = evaluate_currency_case(
            case, fake_service.currency_formatter(case.locale), fraction_digits=fake_digits
        )
        assert result.message == "Failed with locale: it_IT, default currency"

    def test_fraction_digits_from_service(self, fake_service: FakeFormattingService) -> None:
        """Currency digits come from the service, not from a locale data backend."""
        case = CurrencyCase(expected="BHD 1234.560", currency="BHD", locale=LocaleId.GERMANY)
        formatter = fake_service.currency_formatter(case.locale)

        result = evaluate_currency_case(
            case, formatter, fraction_digits=fake_service.fraction_digits
        )

        assert result.outcome is CaseOutcome.PASSED
        assert ("set_fraction_digits", (3, 3)) in formatter.calls

    def test_fraction_digits_source_is_required(
        self, fake_service: FakeFormattingService
    ) -> None:
        case = CurrencyCase(expected="JPY 1235", currency="JPY", locale=LocaleId.GERMANY)
        with pytest.raises(TypeError, match="fraction_digits"):
            evaluate_currency_case(  # type: ignore[call-arg]
                case, fake_service.currency_formatter(case.locale)
            )


class TestRaiseForOutcome:
    """Test conversion of results to pytest outcomes."""

    def test_failed_raises_case_mismatch(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="x", currency=None, locale=LocaleId.US)
        result = evaluate_currency_case(
            case, fake_service.currency_formatter(case.locale), fraction_digits=fake_digits
        )

        with pytest.raises(CaseMismatchError, match="Failed with locale: en_US, default currency"):
            result.raise_for_outcome()

    def test_failed_is_assertion_error(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="x", currency=None, locale=LocaleId.US)
        result = evaluate_currency_case(
            case, fake_service.currency_formatter(case.locale), fraction_digits=fake_digits
        )

        with pytest.raises(AssertionError):
            result.raise_for_outcome()

    def test_passed_does_not_raise(self, fake_service: FakeFormattingService) -> None:
        case = CurrencyCase(expected="USD 1234.56", currency=None, locale=LocaleId.US)
        result = evaluate_currency_case(
            case, fake_service.currency_formatter(case.locale), fraction_digits=fake_digits
        )
        result.raise_for_outcome()

    def test_skipped_does_not_raise(self, fake_service: FakeFormattingService) -> None:
        case = SymbolCase(expected=LiteralSymbol("$"), locale=LocaleId.US)
        result = evaluate_symbol_case(case, fake_service, ProviderMode.CLDR)
        assert result.outcome is CaseOutcome.SKIPPED
        result.raise_for_outcome()


# ============================================================================
# Currency symbol cases
# ============================================================================


class TestEvaluateSymbolCase:
    """Test provider gating, missing expectations, and time-gated symbols."""

    @pytest.fixture
    def service(self) -> FakeFormattingService:
        return FakeFormattingService(symbols={"en_US": "$", "hr_HR": "€"})

    def test_match_passes(self, service: FakeFormattingService) -> None:
        case = SymbolCase(expected=LiteralSymbol("$"), locale=LocaleId.US)
        result = evaluate_symbol_case(case, service, ProviderMode.COMPAT)
        assert result.outcome is CaseOutcome.PASSED
        assert result.actual == "$"

    def test_mismatch_fails(self, service: FakeFormattingService) -> None:
        case = SymbolCase(expected=LiteralSymbol("US$"), locale=LocaleId.US)
        result = evaluate_symbol_case(case, service, ProviderMode.COMPAT)

        assert result.outcome is CaseOutcome.FAILED
        assert result.message == "Wrong currency symbol for locale en_US, expected: US$, got: $"

    def test_skipped_under_cldr(self, service: FakeFormattingService) -> None:
        """The provider gate applies before any lookup."""
        case = SymbolCase(expected=LiteralSymbol("wrong"), locale=LocaleId.US)
        result = evaluate_symbol_case(case, service, ProviderMode.CLDR)

        assert result.outcome is CaseOutcome.SKIPPED
        assert result.diagnostic is not None
        assert result.diagnostic.code is DiagnosticCode.PROVIDER_NOT_APPLICABLE
        assert result.actual is None

    def test_missing_expectation_skipped_with_warning(
        self, service: FakeFormattingService, caplog: pytest.LogCaptureFixture
    ) -> None:
        case = SymbolCase(expected=None, locale=LocaleId("xx", territory="YY"))
        with caplog.at_level(logging.WARNING, logger="currencymatrix.runtime.evaluator"):
            result = evaluate_symbol_case(case, service, ProviderMode.COMPAT)

        assert result.outcome is CaseOutcome.SKIPPED
        assert result.diagnostic is not None
        assert result.diagnostic.code is DiagnosticCode.SYMBOL_EXPECTATION_MISSING
        assert "No expected currency symbol defined for locale xx_YY" in caplog.text

    def test_time_gated_before_cutover_expects_current(
        self, service: FakeFormattingService
    ) -> None:
        expected = TimeGatedSymbol("kn", datetime(2022, 12, 31, 23, tzinfo=UTC), "€")
        case = SymbolCase(expected=expected, locale=LocaleId("hr", territory="HR"))

        result = evaluate_symbol_case(
            case, service, ProviderMode.COMPAT, now=datetime(2022, 6, 1, tzinfo=UTC)
        )

        assert result.outcome is CaseOutcome.FAILED
        assert result.diagnostic is not None
        assert result.diagnostic.expected == "kn"

    def test_time_gated_after_cutover_expects_future(
        self, service: FakeFormattingService, frozen_now: datetime
    ) -> None:
        expected = TimeGatedSymbol("kn", datetime(2022, 12, 31, 23, tzinfo=UTC), "€")
        case = SymbolCase(expected=expected, locale=LocaleId("hr", territory="HR"))

        result = evaluate_symbol_case(case, service, ProviderMode.COMPAT, now=frozen_now)

        assert result.outcome is CaseOutcome.PASSED
