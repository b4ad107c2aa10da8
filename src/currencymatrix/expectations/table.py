"""Provider-selected expectation table for the currency format matrix.

ExpectationTable pairs a locale list and a currency list with one expectation
matrix per provider mode. The provider mode is an explicit constructor
argument; the authoritative matrix is selected once, at construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from currencymatrix.diagnostics import ErrorTemplate, MatrixShapeError
from currencymatrix.enums import ProviderMode
from currencymatrix.locale_utils import LocaleId

from .matrices import CURRENCIES, EXPECTATIONS, LOCALES

__all__ = ["ExpectationTable"]


@dataclass(frozen=True, slots=True)
class ExpectationTable:
    """Immutable locale x currency expectation table for one provider mode.

    Every matrix, authoritative or not, is checked against the locale and
    currency lists when the table is built, so a data bug in the inactive
    provider's matrix is caught on every run.

    Use ExpectationTable.create() or ExpectationTable.default() to construct
    instances; they copy and validate their inputs.

    Examples:
        >>> table = ExpectationTable.default(ProviderMode.CLDR)
        >>> table.expected(0, 0)
        '$1,234.56'
        >>> table.shape
        (7, 5)
    """

    mode: ProviderMode
    locales: tuple[LocaleId, ...]
    currencies: tuple[str | None, ...]
    matrices: Mapping[ProviderMode, tuple[tuple[str, ...], ...]] = field(repr=False)
    _active: tuple[tuple[str, ...], ...] = field(repr=False, compare=False)

    @classmethod
    def create(
        cls,
        mode: ProviderMode,
        locales: Sequence[LocaleId],
        currencies: Sequence[str | None],
        matrices: Mapping[ProviderMode, Sequence[Sequence[str]]],
    ) -> ExpectationTable:
        """Build a table, validating every matrix's shape.

        Args:
            mode: Provider mode whose matrix is authoritative
            locales: Row labels, in enumeration order
            currencies: Column labels (None = locale default), in enumeration order
            matrices: One expectation matrix per provider mode

        Returns:
            Validated ExpectationTable

        Raises:
            MatrixShapeError: If any matrix row/column count disagrees with
                the locale/currency lists, or no matrix exists for mode
        """
        frozen = {
            provider: tuple(tuple(row) for row in matrix)
            for provider, matrix in matrices.items()
        }
        locale_tuple = tuple(locales)
        currency_tuple = tuple(currencies)

        for provider, matrix in frozen.items():
            _check_shape(provider, matrix, locale_tuple, len(currency_tuple))

        if mode not in frozen:
            raise MatrixShapeError(ErrorTemplate.matrix_missing(str(mode)))

        return cls(
            mode=mode,
            locales=locale_tuple,
            currencies=currency_tuple,
            matrices=frozen,
            _active=frozen[mode],
        )

    @classmethod
    def default(cls, mode: ProviderMode) -> ExpectationTable:
        """Build the table from the packaged expectation data."""
        return cls.create(mode, LOCALES, CURRENCIES, EXPECTATIONS)

    @property
    def shape(self) -> tuple[int, int]:
        """(locale count, currency count)."""
        return len(self.locales), len(self.currencies)

    def expected(self, locale_index: int, currency_index: int) -> str:
        """Get the authoritative expected literal for a (locale, currency) cell."""
        return self._active[locale_index][currency_index]


def _check_shape(
    mode: ProviderMode,
    matrix: tuple[tuple[str, ...], ...],
    locales: tuple[LocaleId, ...],
    currency_count: int,
) -> None:
    if len(matrix) != len(locales):
        raise MatrixShapeError(ErrorTemplate.matrix_row_count(str(mode), len(matrix), len(locales)))
    for index, (row, locale) in enumerate(zip(matrix, locales, strict=True)):
        if len(row) != currency_count:
            raise MatrixShapeError(
                ErrorTemplate.matrix_column_count(
                    str(mode), index, str(locale), len(row), currency_count
                )
            )
