"""Currency symbol side file loading.

The side file is a Java-style .properties table keyed by the canonical
locale string (e.g., "ja_JP") whose values are symbol expectations.
Supported syntax:
    - "#" and "!" comment lines, blank lines
    - "=", ":" or whitespace key/value separators
    - \\uXXXX, \\t, \\n, \\r, \\f escapes; any other escaped character is literal
    - Line continuation with a trailing unescaped backslash

Reading is fatal on any I/O failure: without its expectations the symbol
case family cannot run at all. Values are parsed separately, and only for
the provider mode that runs symbol cases.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from currencymatrix.diagnostics import ErrorTemplate, SymbolTableLoadError
from currencymatrix.enums import ProviderMode

from .symbols import SymbolExpectation, parse_symbol_expectation

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Parsing
    "parse_properties",
    # Symbol table
    "SymbolTable",
    "load_symbol_table",
    "read_symbol_file",
]

_SIMPLE_ESCAPES: dict[str, str] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_KEY_TERMINATORS: frozenset[str] = frozenset("=: \t\f")
# Only CR, LF and CRLF end a line; other Unicode separators belong to values
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _logical_lines(text: str) -> Iterator[str]:
    """Join continuation lines and drop blanks and comments."""
    pending = ""
    for physical in _LINE_BREAK.split(text):
        line = physical.lstrip(" \t\f")
        if not pending and (not line or line[0] in "#!"):
            continue

        # Odd number of trailing backslashes means the newline is escaped
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue

        yield pending + line
        pending = ""

    if pending:
        yield pending


def _unescape(text: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\" or index + 1 == len(text):
            out.append(char)
            index += 1
            continue

        escaped = text[index + 1]
        if escaped == "u":
            digits = text[index + 2 : index + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                msg = f"Malformed \\uXXXX escape: {text[index : index + 6]!r}"
                raise ValueError(msg)
            out.append(chr(int(digits, 16)))
            index += 6
        else:
            out.append(_SIMPLE_ESCAPES.get(escaped, escaped))
            index += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _KEY_TERMINATORS:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse .properties text into a key/value dict.

    Later duplicates override earlier keys.

    Raises:
        ValueError: If a \\uXXXX escape is malformed

    Example:
        >>> parse_properties("ja_JP=\\\\uffe5\\n# comment\\nen_US : $")
        {'ja_JP': '￥', 'en_US': '$'}
    """
    return dict(_split_entry(line) for line in _logical_lines(text))


@dataclass(frozen=True, slots=True)
class SymbolTable(Mapping[str, SymbolExpectation]):
    """Read-only mapping from canonical locale string to symbol expectation.

    Attributes:
        entries: Parsed expectations keyed by str(LocaleId)
        source: Where the table was loaded from (for diagnostics)
    """

    entries: Mapping[str, SymbolExpectation]
    source: str = "<memory>"

    @classmethod
    def from_raw(cls, raw: Mapping[str, str], source: str = "<memory>") -> SymbolTable:
        """Parse every raw value once.

        Raises:
            MalformedCutoverError: If any time-gated value has a malformed cutover
        """
        entries = {key: parse_symbol_expectation(value) for key, value in raw.items()}
        return cls(entries=entries, source=source)

    @classmethod
    def for_provider(
        cls, raw: Mapping[str, str], mode: ProviderMode, source: str = "<memory>"
    ) -> SymbolTable:
        """Parse raw values only if symbol cases run under mode.

        Symbol cases run only under COMPAT. Under any other mode the entries
        are never consulted, so they are not parsed and a malformed cutover
        cannot fail the run.

        Raises:
            MalformedCutoverError: If mode is COMPAT and any time-gated value
                has a malformed cutover
        """
        if mode != ProviderMode.COMPAT:
            return cls(entries={}, source=source)
        return cls.from_raw(raw, source=source)

    def __getitem__(self, key: str) -> SymbolExpectation:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def read_symbol_file(path: str | Path) -> dict[str, str]:
    """Read the currency symbol side file without parsing its values.

    Args:
        path: Path to the .properties file (UTF-8; ASCII with \\u escapes works)

    Returns:
        Raw values keyed by canonical locale string

    Raises:
        SymbolTableLoadError: If the file is missing, unreadable, or not
            valid .properties text
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
        return parse_properties(text)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise SymbolTableLoadError(
            ErrorTemplate.symbol_table_unreadable(str(file_path), str(e))
        ) from e


def load_symbol_table(path: str | Path, mode: ProviderMode = ProviderMode.COMPAT) -> SymbolTable:
    """Load the currency symbol side file and parse it for mode.

    Raises:
        SymbolTableLoadError: If the file cannot be read
        MalformedCutoverError: If mode is COMPAT and an entry has a
            malformed cutover timestamp
    """
    return SymbolTable.for_provider(read_symbol_file(path), mode, source=str(Path(path)))
