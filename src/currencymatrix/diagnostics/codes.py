"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (provider mode, matrix shape, side file)
        2000-2999: Expectation errors (symbol table entries)
        3000-3999: Case errors (mismatches and skips)
    """

    # Configuration errors (1000-1999)
    UNKNOWN_PROVIDER_MODE = 1001
    MATRIX_ROW_COUNT_MISMATCH = 1002
    MATRIX_COLUMN_COUNT_MISMATCH = 1003
    SYMBOL_TABLE_UNREADABLE = 1004
    MATRIX_MISSING = 1005

    # Expectation errors (2000-2999)
    CUTOVER_MALFORMED = 2001
    SYMBOL_TOKEN_COUNT = 2002

    # Case errors (3000-3999)
    CURRENCY_FORMAT_MISMATCH = 3001
    CURRENCY_SYMBOL_MISMATCH = 3002
    SYMBOL_EXPECTATION_MISSING = 3003
    PROVIDER_NOT_APPLICABLE = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale the diagnostic refers to (case diagnostics)
        currency_code: Currency override the diagnostic refers to
        expected: Expected literal (mismatch diagnostics)
        actual: Actual output (mismatch diagnostics)
        location: Side file or table location (configuration diagnostics)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    currency_code: str | None = None
    expected: str | None = None
    actual: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CURRENCY_FORMAT_MISMATCH]: Failed with locale: ja_JP, currency: JPY
              = expected: '￥1,235'
              = actual: '￥1,234.56'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
