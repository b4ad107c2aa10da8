"""Matrix expansion: turn expectation data into individual cases.

Both expanders are generator functions. Calling one again re-enumerates
from the start, so a case sequence can be rebuilt for every run or every
pytest collection.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from currencymatrix.locale_utils import LocaleId

if TYPE_CHECKING:
    from currencymatrix.expectations import ExpectationTable, SymbolExpectation

__all__ = [
    "CurrencyCase",
    "SymbolCase",
    "expand_currency_cases",
    "expand_symbol_cases",
]


@dataclass(frozen=True, slots=True)
class CurrencyCase:
    """Format SAMPLE_AMOUNT for locale with an optional currency override.

    Attributes:
        expected: Exact expected output
        currency: ISO 4217 override, or None for the locale's own currency
        locale: Locale to format for
    """

    expected: str
    currency: str | None
    locale: LocaleId

    @property
    def case_id(self) -> str:
        """Stable identifier, e.g. 'ja_JP-JPY' or 'en_US-default'."""
        return f"{self.locale}-{self.currency or 'default'}"


@dataclass(frozen=True, slots=True)
class SymbolCase:
    """Check the currency symbol of locale's own currency.

    Attributes:
        expected: Parsed symbol expectation, or None if the table has no entry
        locale: Locale whose symbol is checked
    """

    expected: SymbolExpectation | None
    locale: LocaleId

    @property
    def case_id(self) -> str:
        return str(self.locale)


def expand_currency_cases(table: ExpectationTable) -> Iterator[CurrencyCase]:
    """Yield one case per (locale, currency) cell of table.

    Locales are the outer loop and currencies the inner loop, both in
    declared order, so the n-th case is cell (n // M, n % M).

    Example:
        >>> table = ExpectationTable.default(ProviderMode.CLDR)
        >>> first = next(expand_currency_cases(table))
        >>> first.case_id, first.expected
        ('en_US-default', '$1,234.56')
    """
    for i, locale in enumerate(table.locales):
        for j, currency in enumerate(table.currencies):
            yield CurrencyCase(expected=table.expected(i, j), currency=currency, locale=locale)


def expand_symbol_cases(
    locales: Iterable[LocaleId],
    symbols: Mapping[str, SymbolExpectation],
) -> Iterator[SymbolCase]:
    """Yield one case per locale, looking its expectation up by str(locale).

    Locale order is whatever the caller's enumeration (normally the
    formatting service's available_locales()) produces.
    """
    for locale in locales:
        yield SymbolCase(expected=symbols.get(str(locale)), locale=locale)
