"""Static expectation data for the currency format matrix.

Expected output of formatting SAMPLE_AMOUNT (1234.56) for every locale and
currency override, per locale-data provider. Row i belongs to LOCALES[i],
column j to CURRENCIES[j].

Literals are exact, including non-breaking (U+00A0) and narrow non-breaking
(U+202F) spaces; invisible and look-alike glyphs are written as escapes.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

from currencymatrix.enums import ProviderMode
from currencymatrix.locale_utils import LocaleId

# ruff: noqa: RUF001 - ambiguous unicode glyphs are the point of these literals
__all__ = [
    "CLDR_EXPECTATIONS",
    "COMPAT_EXPECTATIONS",
    "CURRENCIES",
    "EXPECTATIONS",
    "LOCALES",
]

CurrencyMatrix: TypeAlias = tuple[tuple[str, ...], ...]

LOCALES: tuple[LocaleId, ...] = (
    LocaleId.US,
    LocaleId.JAPAN,
    LocaleId.GERMANY,
    LocaleId.ITALY,
    LocaleId("it", territory="IT", variant="EURO"),
    LocaleId.parse("de-AT"),
    LocaleId.parse("fr-CH"),
)

# None formats with the locale's own currency and fraction digits.
CURRENCIES: tuple[str | None, ...] = (None, "USD", "JPY", "DEM", "EUR")

COMPAT_EXPECTATIONS: CurrencyMatrix = (
    ("$1,234.56", "$1,234.56", "JPY1,235", "DEM1,234.56", "EUR1,234.56"),
    ("\uffe51,235", "USD1,234.56", "\uffe51,235", "DEM1,234.56", "EUR1,234.56"),
    ("1.234,56 €", "1.234,56 USD", "1.235 JPY", "1.234,56 DM", "1.234,56 €"),
    ("€ 1.234,56", "USD 1.234,56", "JPY 1.235", "DEM 1.234,56", "€ 1.234,56"),
    ("€ 1.234,56", "USD 1.234,56", "JPY 1.235", "DEM 1.234,56", "€ 1.234,56"),
    ("€ 1.234,56", "USD 1.234,56", "JPY 1.235", "DEM 1.234,56", "€ 1.234,56"),
    ("SFr. 1'234.56", "USD 1'234.56", "JPY 1'235", "DEM 1'234.56", "EUR 1'234.56"),
)

CLDR_EXPECTATIONS: CurrencyMatrix = (
    ("$1,234.56", "$1,234.56", "\xa51,235", "DEM1,234.56", "€1,234.56"),
    ("\uffe51,235", "$1,234.56", "\uffe51,235", "DEM1,234.56", "€1,234.56"),
    (
        "1.234,56\xa0€",
        "1.234,56\xa0$",
        "1.235\xa0\xa5",
        "1.234,56\xa0DM",
        "1.234,56\xa0€",
    ),
    (
        "1.234,56\xa0€",
        "1.234,56\xa0USD",
        "1.235\xa0JPY",
        "1.234,56\xa0DEM",
        "1.234,56\xa0€",
    ),
    (
        "1.234,56\xa0€",
        "1.234,56\xa0USD",
        "1.235\xa0JPY",
        "1.234,56\xa0DEM",
        "1.234,56\xa0€",
    ),
    (
        "€\xa01.234,56",
        "$\xa01.234,56",
        "\xa5\xa01.235",
        "DM\xa01.234,56",
        "€\xa01.234,56",
    ),
    (
        "1\u202f234.56\xa0CHF",
        "1\u202f234.56\xa0$US",
        "1\u202f235\xa0JPY",
        "1\u202f234.56\xa0DEM",
        "1\u202f234.56\xa0€",
    ),
)

EXPECTATIONS: dict[ProviderMode, CurrencyMatrix] = {
    ProviderMode.COMPAT: COMPAT_EXPECTATIONS,
    ProviderMode.CLDR: CLDR_EXPECTATIONS,
}
