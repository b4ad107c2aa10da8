"""Locale Formatting Service interface consumed by the harness.

The harness never formats anything itself. It drives a formatting service
through these protocols and compares the service's output with expected
literals.

Protocols (structural typing) rather than ABCs, so any object with the right
methods can stand in: the Babel-backed service in production, a table-driven
fake in unit tests.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from currencymatrix.locale_utils import LocaleId

__all__ = [
    "CurrencyFormatter",
    "FormattingService",
]


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class CurrencyFormatter(Protocol):
    """Mutable currency formatter bound to one locale.

    Configuration persists on the instance between calls. Callers must set
    everything a format call depends on, or use a fresh instance.
    """

    def set_currency(self, currency: str) -> None:
        """Format with this ISO 4217 currency instead of the locale default."""
        ...

    def set_fraction_digits(self, minimum: int, maximum: int) -> None:
        """Bound the number of fraction digits in formatted output."""
        ...

    def format(self, value: int | float | Decimal) -> str:
        """Format value as a currency amount."""
        ...


class FormattingService(Protocol):
    """Source of currency formatters, currency symbols, and locales."""

    def currency_formatter(self, locale: LocaleId) -> CurrencyFormatter:
        """Construct a new currency formatter for locale."""
        ...

    def currency_symbol(self, locale: LocaleId) -> str:
        """Get the symbol of locale's own currency, as displayed in locale."""
        ...

    def fraction_digits(self, currency: str) -> int:
        """Get the default number of fraction digits of an ISO 4217 currency."""
        ...

    def available_locales(self) -> tuple[LocaleId, ...]:
        """Enumerate every locale the service has data for, in service order."""
        ...
# pylint: enable=unnecessary-ellipsis
