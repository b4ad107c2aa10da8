"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Case diagnostic wording is stable so that failure
    output stays greppable across provider runs.
    """

    @staticmethod
    def unknown_provider_mode(value: str, choices: tuple[str, ...]) -> Diagnostic:
        """Provider mode setting names no known provider.

        Args:
            value: The configured value
            choices: Accepted provider mode names

        Returns:
            Diagnostic for UNKNOWN_PROVIDER_MODE
        """
        msg = f"Unknown locale provider mode '{value}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PROVIDER_MODE,
            message=msg,
            hint=f"Use one of: {', '.join(choices)}",
        )

    @staticmethod
    def matrix_row_count(mode: str, rows: int, locales: int) -> Diagnostic:
        """Expectation matrix row count differs from the locale count."""
        msg = f"{mode} expectation matrix has {rows} rows for {locales} locales"
        return Diagnostic(
            code=DiagnosticCode.MATRIX_ROW_COUNT_MISMATCH,
            message=msg,
            hint="Add or remove matrix rows so each locale has exactly one",
        )

    @staticmethod
    def matrix_missing(mode: str) -> Diagnostic:
        """No expectation matrix is defined for the active provider mode."""
        msg = f"No expectation matrix defined for provider mode {mode}"
        return Diagnostic(code=DiagnosticCode.MATRIX_MISSING, message=msg)

    @staticmethod
    def matrix_column_count(
        mode: str, row: int, locale_code: str, columns: int, currencies: int
    ) -> Diagnostic:
        """Expectation matrix row has the wrong number of columns."""
        msg = (
            f"{mode} expectation matrix row {row} ({locale_code}) has "
            f"{columns} columns for {currencies} currencies"
        )
        return Diagnostic(
            code=DiagnosticCode.MATRIX_COLUMN_COUNT_MISMATCH,
            message=msg,
            locale_code=locale_code,
            hint="Each row needs one expected literal per currency override",
        )

    @staticmethod
    def symbol_table_unreadable(path: str, reason: str) -> Diagnostic:
        """Currency symbol side file could not be read."""
        msg = f"Cannot read currency symbol table: {reason}"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_TABLE_UNREADABLE,
            message=msg,
            location=path,
            hint="Check the file exists or set CURRENCYMATRIX_SYMBOLS_FILE",
        )

    @staticmethod
    def cutover_malformed(raw: str, timestamp: str) -> Diagnostic:
        """Cutover field of a time-gated symbol failed strict parsing."""
        msg = f"Malformed cutover timestamp '{timestamp}' in symbol expectation '{raw}'"
        return Diagnostic(
            code=DiagnosticCode.CUTOVER_MALFORMED,
            message=msg,
            hint="Cutover timestamps are UTC in the form yyyy-MM-dd-HH-mm-ss",
        )

    @staticmethod
    def symbol_token_count(raw: str, count: int) -> Diagnostic:
        """Compound symbol expectation has other than three tokens."""
        msg = f"Symbol expectation '{raw}' has {count} tokens; treating it as a literal"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_TOKEN_COUNT,
            message=msg,
            hint="Time-gated symbols are encoded as current;cutover;future",
            severity="warning",
        )

    @staticmethod
    def currency_format_mismatch(
        locale_code: str, currency_code: str | None, expected: str, actual: str
    ) -> Diagnostic:
        """Formatted sample differs from the expected literal."""
        context = (
            ", default currency" if currency_code is None else f", currency: {currency_code}"
        )
        msg = f"Failed with locale: {locale_code}{context}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_FORMAT_MISMATCH,
            message=msg,
            locale_code=locale_code,
            currency_code=currency_code,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def currency_symbol_mismatch(locale_code: str, expected: str, actual: str) -> Diagnostic:
        """Locale currency symbol differs from the expected symbol."""
        msg = (
            f"Wrong currency symbol for locale {locale_code}, "
            f"expected: {expected}, got: {actual}"
        )
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_SYMBOL_MISMATCH,
            message=msg,
            locale_code=locale_code,
            expected=expected,
            actual=actual,
        )

    @staticmethod
    def symbol_missing(locale_code: str) -> Diagnostic:
        """No symbol table entry exists for a locale."""
        msg = f"No expected currency symbol defined for locale {locale_code}"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_EXPECTATION_MISSING,
            message=msg,
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def provider_not_applicable(mode: str, required: str) -> Diagnostic:
        """Case family does not run under the active provider mode."""
        msg = f"Currency symbol cases run only under {required}, active provider is {mode}"
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_NOT_APPLICABLE,
            message=msg,
            severity="warning",
        )
