"""Harness exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CaseMismatchError",
    "ConfigurationError",
    "FormattingServiceError",
    "HarnessError",
    "MalformedCutoverError",
    "MatrixShapeError",
    "SymbolTableLoadError",
]


class HarnessError(Exception):
    """Base exception for all harness errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize HarnessError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(HarnessError):
    """Harness configuration is invalid. Fatal before any case executes."""


class MatrixShapeError(ConfigurationError):
    """Expectation matrix does not line up with its locale or currency list.

    A missing locale/currency combination is a data bug caught when the
    expectation table is built, not a condition to recover from per case.
    """


class SymbolTableLoadError(ConfigurationError):
    """Currency symbol side file is missing or unreadable."""


class MalformedCutoverError(HarnessError, ValueError):
    """Cutover timestamp of a time-gated symbol failed strict parsing.

    Never defaulted: a symbol entry that cannot be resolved deterministically
    must not silently produce an expected value.
    """


class CaseMismatchError(HarnessError, AssertionError):
    """Actual output differs from the resolved expected literal.

    Subclasses AssertionError so pytest reports it as a test failure
    rather than an error.
    """


class FormattingServiceError(HarnessError):
    """The formatting service could not produce output for a case."""
