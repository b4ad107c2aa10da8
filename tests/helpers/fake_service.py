"""Deterministic formatting service for unit tests.

FakeFormattingService implements the FormattingService protocol without any
locale data: formatters render "<CODE> <amount>" with the configured number
of fraction digits, and symbols come from a plain dict. Every formatter it
constructs is recorded, so tests can assert on construction and
configuration calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal

from currencymatrix.locale_utils import LocaleId

DEFAULT_CURRENCIES: dict[str, str] = {
    "US": "USD",
    "JP": "JPY",
    "DE": "EUR",
    "IT": "EUR",
    "AT": "EUR",
    "CH": "CHF",
}

FAKE_FRACTION_DIGITS: dict[str, int] = {
    "USD": 2,
    "EUR": 2,
    "DEM": 2,
    "CHF": 2,
    "JPY": 0,
    "BHD": 3,
}


@dataclass
class FakeCurrencyFormatter:
    """Formatter that renders '<CODE> <amount>' with bounded fraction digits."""

    locale: LocaleId
    currency: str
    fraction_digits: tuple[int, int] | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)

    def set_currency(self, currency: str) -> None:
        self.calls.append(("set_currency", currency))
        self.currency = currency

    def set_fraction_digits(self, minimum: int, maximum: int) -> None:
        self.calls.append(("set_fraction_digits", (minimum, maximum)))
        self.fraction_digits = (minimum, maximum)

    def format(self, value: int | float | Decimal) -> str:
        self.calls.append(("format", value))
        digits = (
            self.fraction_digits[1]
            if self.fraction_digits is not None
            else FAKE_FRACTION_DIGITS.get(self.currency, 2)
        )
        quantum = Decimal(1).scaleb(-digits)
        amount = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_EVEN)
        return f"{self.currency} {amount}"


@dataclass
class FakeFormattingService:
    """In-memory FormattingService with recorded formatter construction."""

    symbols: dict[str, str] = field(default_factory=dict)
    locales: tuple[LocaleId, ...] = ()
    formatters: list[FakeCurrencyFormatter] = field(default_factory=list)

    def currency_formatter(self, locale: LocaleId) -> FakeCurrencyFormatter:
        formatter = FakeCurrencyFormatter(
            locale=locale, currency=DEFAULT_CURRENCIES.get(locale.territory, "XXX")
        )
        self.formatters.append(formatter)
        return formatter

    def currency_symbol(self, locale: LocaleId) -> str:
        return self.symbols[str(locale)]

    def fraction_digits(self, currency: str) -> int:
        return FAKE_FRACTION_DIGITS.get(currency, 2)

    def available_locales(self) -> tuple[LocaleId, ...]:
        return self.locales
