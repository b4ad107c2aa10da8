"""Currency symbol expectations with scheduled symbol changes.

A symbol table value is either a literal symbol or a time-gated entry encoded
as "current;cutover;future", where cutover is a UTC timestamp in the form
yyyy-MM-dd-HH-mm-ss. Time-gated entries let one static table stay correct
across a real-world symbol change without edits on the cutover date.

Entries are parsed once, into LiteralSymbol or TimeGatedSymbol, when the
table is loaded. Resolution against a clock happens per case.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TypeAlias

from currencymatrix.constants import CUTOVER_FORMAT, SYMBOL_SEPARATOR, TIME_GATED_TOKEN_COUNT
from currencymatrix.diagnostics import ErrorTemplate, MalformedCutoverError

__all__ = [
    "LiteralSymbol",
    "SymbolExpectation",
    "TimeGatedSymbol",
    "parse_cutover",
    "parse_symbol_expectation",
    "resolve_expected_symbol",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LiteralSymbol:
    """Symbol expectation that never changes."""

    symbol: str

    def resolve(self, now: datetime | None = None) -> str:  # noqa: ARG002 - uniform API
        """Return the symbol; the clock is irrelevant for literals."""
        return self.symbol


@dataclass(frozen=True, slots=True)
class TimeGatedSymbol:
    """Symbol expectation scheduled to change at a cutover instant.

    Attributes:
        current: Symbol expected up to and including the cutover instant
        cutover: Timezone-aware UTC instant of the change
        future: Symbol expected strictly after the cutover instant
    """

    current: str
    cutover: datetime
    future: str

    def resolve(self, now: datetime | None = None) -> str:
        """Pick the symbol that applies at now (default: current UTC time).

        The cutover instant itself still resolves to the current symbol; only
        a cutover strictly in the past selects the future one.

        Examples:
            >>> entry = parse_symbol_expectation("€;2030-01-01-00-00-00;$")
            >>> entry.resolve(datetime(2029, 12, 31, tzinfo=UTC))
            '€'
            >>> entry.resolve(datetime(2030, 1, 1, 0, 0, 1, tzinfo=UTC))
            '$'
        """
        if now is None:
            now = datetime.now(UTC)
        if self.cutover < now:
            return self.future
        return self.current


SymbolExpectation: TypeAlias = LiteralSymbol | TimeGatedSymbol


def parse_cutover(timestamp: str, raw: str | None = None) -> datetime:
    """Parse a cutover timestamp strictly as UTC yyyy-MM-dd-HH-mm-ss.

    Args:
        timestamp: Timestamp token, e.g. "2030-01-01-00-00-00"
        raw: Full expectation string, for the diagnostic

    Returns:
        Timezone-aware UTC datetime

    Raises:
        MalformedCutoverError: If the token does not match the format exactly
            or names an impossible date/time
    """
    try:
        parsed = datetime.strptime(timestamp, CUTOVER_FORMAT)
    except ValueError as e:
        diagnostic = ErrorTemplate.cutover_malformed(raw if raw is not None else timestamp, timestamp)
        raise MalformedCutoverError(diagnostic) from e
    return parsed.replace(tzinfo=UTC)


def parse_symbol_expectation(raw: str) -> SymbolExpectation:
    """Parse a symbol table value into a literal or time-gated expectation.

    Tokens are split on ";" and empty tokens are discarded. Exactly three
    tokens make a time-gated entry. Any other count keeps the whole value as
    a literal and logs a warning.

    Args:
        raw: Symbol table value

    Returns:
        LiteralSymbol or TimeGatedSymbol

    Raises:
        MalformedCutoverError: If a three-token entry has a malformed cutover

    Examples:
        >>> parse_symbol_expectation("kr")
        LiteralSymbol(symbol='kr')
        >>> parse_symbol_expectation("a;b").symbol
        'a;b'
    """
    if SYMBOL_SEPARATOR not in raw:
        return LiteralSymbol(raw)

    tokens = [token for token in raw.split(SYMBOL_SEPARATOR) if token]
    if len(tokens) != TIME_GATED_TOKEN_COUNT:
        logger.warning("%s", ErrorTemplate.symbol_token_count(raw, len(tokens)).message)
        return LiteralSymbol(raw)

    current, timestamp, future = tokens
    return TimeGatedSymbol(current=current, cutover=parse_cutover(timestamp, raw), future=future)


def resolve_expected_symbol(raw: str, now: datetime | None = None) -> str:
    """Resolve a raw symbol table value to the literal expected at now.

    Values without a separator are returned unchanged.

    Raises:
        MalformedCutoverError: If a time-gated value has a malformed cutover
    """
    return parse_symbol_expectation(raw).resolve(now)
