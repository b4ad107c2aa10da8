"""Babel-backed Locale Formatting Service.

Implements the FormattingService protocol on top of Babel's CLDR data.

Architecture:
    - BabelFormattingService: Stateless factory for formatters and symbols
    - BabelCurrencyFormatter: Mutable per-locale formatter (currency and
      fraction-digit bounds are instance state)
    - No dependency on Python's locale module (avoids global state)

Default currency:
    A locale's own currency is the first current legal tender of its
    territory. Locales without a territory (or with a territory that has no
    tender, e.g. "001") format with XXX and display the generic currency
    sign.

Python 3.13+. Uses Babel for i18n.
"""

import copy
import logging
from decimal import Decimal, InvalidOperation

from babel import localedata
from babel import numbers as babel_numbers

from currencymatrix.constants import NO_CURRENCY_CODE, NO_CURRENCY_SYMBOL
from currencymatrix.diagnostics import FormattingServiceError
from currencymatrix.locale_utils import LocaleId, get_babel_locale

__all__ = [
    "BabelCurrencyFormatter",
    "BabelFormattingService",
    "currency_fraction_digits",
    "default_currency",
]

logger = logging.getLogger(__name__)


def currency_fraction_digits(currency: str) -> int:
    """Get the canonical default fraction digits of an ISO 4217 currency.

    Examples:
        >>> currency_fraction_digits("JPY")
        0
        >>> currency_fraction_digits("USD")
        2
    """
    return int(babel_numbers.get_currency_precision(currency))


def default_currency(locale: LocaleId) -> str:
    """Get the ISO 4217 code of locale's own currency (XXX if none)."""
    if not locale.territory:
        return NO_CURRENCY_CODE
    currencies = babel_numbers.get_territory_currencies(locale.territory, tender=True)
    if not currencies:
        return NO_CURRENCY_CODE
    return str(currencies[0])


class BabelCurrencyFormatter:
    """Currency formatter for one locale, configured by mutation.

    A fresh formatter uses the locale's own currency and that currency's
    fraction digits, like Babel's format_currency(). Setting fraction-digit
    bounds switches to the locale's standard currency pattern with the
    fraction precision replaced.

    Thread Safety:
        Not thread-safe. Instances carry mutable configuration and must not
        be shared between concurrently running cases.

    Examples:
        >>> formatter = BabelCurrencyFormatter(LocaleId.JAPAN)
        >>> formatter.format(Decimal("1234.56"))
        '￥1,235'

        >>> formatter = BabelCurrencyFormatter(LocaleId.US)
        >>> formatter.set_currency("JPY")
        >>> formatter.set_fraction_digits(0, 0)
        >>> formatter.format(Decimal("1234.56"))
        '¥1,235'
    """

    __slots__ = ("_babel_locale", "_currency", "_fraction_digits", "locale")

    def __init__(self, locale: LocaleId) -> None:
        self.locale = locale
        self._babel_locale = get_babel_locale(locale)
        self._currency = default_currency(locale)
        self._fraction_digits: tuple[int, int] | None = None

    @property
    def currency(self) -> str:
        """ISO 4217 code the formatter currently formats with."""
        return self._currency

    def set_currency(self, currency: str) -> None:
        self._currency = currency

    def set_fraction_digits(self, minimum: int, maximum: int) -> None:
        """Set minimum and maximum fraction digits.

        Raises:
            ValueError: If minimum is negative or exceeds maximum
        """
        if minimum < 0 or maximum < minimum:
            msg = f"Invalid fraction digit bounds: minimum={minimum}, maximum={maximum}"
            raise ValueError(msg)
        self._fraction_digits = (minimum, maximum)

    def format(self, value: int | float | Decimal) -> str:
        """Format value with the locale's standard currency pattern.

        Raises:
            FormattingServiceError: If Babel cannot format the value
        """
        try:
            if self._fraction_digits is None:
                return str(
                    babel_numbers.format_currency(
                        value,
                        self._currency,
                        locale=self._babel_locale,
                        currency_digits=True,
                    )
                )

            pattern = copy.copy(self._babel_locale.currency_formats["standard"])
            pattern.frac_prec = self._fraction_digits
            return str(
                pattern.apply(
                    value,
                    self._babel_locale,
                    currency=self._currency,
                    currency_digits=False,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Currency formatting failed for '{self._currency} {value}' in {self.locale}: {e}"
            raise FormattingServiceError(msg) from e


class BabelFormattingService:
    """FormattingService backed by Babel's CLDR data.

    Stateless: formatters it constructs own all mutable configuration.

    Examples:
        >>> service = BabelFormattingService()
        >>> service.currency_symbol(LocaleId.GERMANY)
        '€'
        >>> service.fraction_digits("JPY")
        0
        >>> LocaleId.US in service.available_locales()
        True
    """

    def currency_formatter(self, locale: LocaleId) -> BabelCurrencyFormatter:
        return BabelCurrencyFormatter(locale)

    def currency_symbol(self, locale: LocaleId) -> str:
        """Get the symbol of locale's own currency as displayed in locale."""
        code = default_currency(locale)
        if code == NO_CURRENCY_CODE:
            return NO_CURRENCY_SYMBOL
        return str(babel_numbers.get_currency_symbol(code, locale=get_babel_locale(locale)))

    def fraction_digits(self, currency: str) -> int:
        return currency_fraction_digits(currency)

    def available_locales(self) -> tuple[LocaleId, ...]:
        """Enumerate Babel's locales in sorted identifier order, without root."""
        identifiers = sorted(localedata.locale_identifiers())
        locales = tuple(
            LocaleId.parse(identifier) for identifier in identifiers if identifier != "root"
        )
        logger.debug("Babel provides %d locales", len(locales))
        return locales
