"""Diagnostic system for harness errors and case results.

Provides structured diagnostics with codes, hints, and expected/actual values.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CaseMismatchError,
    ConfigurationError,
    FormattingServiceError,
    HarnessError,
    MalformedCutoverError,
    MatrixShapeError,
    SymbolTableLoadError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CaseMismatchError",
    "ConfigurationError",
    "FormattingServiceError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "HarnessError",
    "MalformedCutoverError",
    "MatrixShapeError",
    "OutputFormat",
    "SymbolTableLoadError",
]
