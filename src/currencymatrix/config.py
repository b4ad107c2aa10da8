"""Harness configuration from the environment.

The provider mode is resolved once, here, and then passed explicitly to
everything that depends on it. Nothing else reads the environment.

Environment:
    CURRENCYMATRIX_LOCALE_PROVIDERS: COMPAT or CLDR (case-insensitive,
        default CLDR)
    CURRENCYMATRIX_SYMBOLS_FILE: Path to the currency symbol side file
        (default: the packaged currency_symbols.properties)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from currencymatrix.constants import DEFAULT_SYMBOLS_FILE, ENV_LOCALE_PROVIDERS, ENV_SYMBOLS_FILE
from currencymatrix.diagnostics import ConfigurationError, ErrorTemplate
from currencymatrix.enums import ProviderMode

__all__ = [
    "HarnessConfig",
    "load_config",
    "parse_provider_mode",
]


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Immutable harness configuration.

    Attributes:
        provider_mode: Provider whose expectations are authoritative
        symbols_path: Currency symbol side file
    """

    provider_mode: ProviderMode = ProviderMode.CLDR
    symbols_path: Path = DEFAULT_SYMBOLS_FILE


def parse_provider_mode(value: str) -> ProviderMode:
    """Parse a provider mode name, case-insensitively.

    Raises:
        ConfigurationError: If value names no provider mode

    Example:
        >>> parse_provider_mode("compat")
        <ProviderMode.COMPAT: 'COMPAT'>
    """
    try:
        return ProviderMode(value.strip().upper())
    except ValueError:
        choices = tuple(str(mode) for mode in ProviderMode)
        raise ConfigurationError(ErrorTemplate.unknown_provider_mode(value, choices)) from None


def load_config(environ: Mapping[str, str] | None = None) -> HarnessConfig:
    """Build configuration from environment variables.

    Args:
        environ: Variables to read (default: os.environ)

    Returns:
        HarnessConfig

    Raises:
        ConfigurationError: If CURRENCYMATRIX_LOCALE_PROVIDERS is invalid
    """
    env = os.environ if environ is None else environ

    mode_value = env.get(ENV_LOCALE_PROVIDERS, "")
    provider_mode = parse_provider_mode(mode_value) if mode_value else ProviderMode.CLDR

    symbols_value = env.get(ENV_SYMBOLS_FILE, "")
    symbols_path = Path(symbols_value) if symbols_value else DEFAULT_SYMBOLS_FILE

    return HarnessConfig(provider_mode=provider_mode, symbols_path=symbols_path)
