"""Locale identifiers and BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
LocaleId is the canonical, immutable locale key: its string form indexes the
currency symbol table and identifies the locale in case diagnostics.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleId",
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("de-AT")
        'de_AT'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Immutable locale identifier: language, optional script, territory, variant.

    Unlike a Babel Locale, a LocaleId may carry a variant that has no CLDR
    data (e.g., it_IT_EURO). Services decide how to resolve such variants.

    Examples:
        >>> str(LocaleId.parse("de-AT"))
        'de_AT'
        >>> str(LocaleId("it", territory="IT", variant="EURO"))
        'it_IT_EURO'
        >>> LocaleId.parse("sr_Latn_RS").script
        'Latn'
    """

    US: ClassVar[LocaleId]
    JAPAN: ClassVar[LocaleId]
    GERMANY: ClassVar[LocaleId]
    ITALY: ClassVar[LocaleId]

    language: str
    territory: str = ""
    variant: str = ""
    script: str = ""

    def __post_init__(self) -> None:
        """Validate the language subtag.

        Raises:
            ValueError: If language is empty or not alphabetic
        """
        if not self.language or not self.language.isalpha():
            msg = f"Locale language must be alphabetic, got {self.language!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return the canonical underscore form (symbol-table key)."""
        parts = (self.language, self.script, self.territory, self.variant)
        return "_".join(part for part in parts if part)

    @classmethod
    def parse(cls, identifier: str) -> LocaleId:
        """Parse a BCP-47 or POSIX locale identifier.

        Subtags after the language are classified by shape: four letters is a
        script, two letters or three digits is a territory, and whatever
        remains is joined into the variant.

        Args:
            identifier: Locale identifier (e.g., "de-AT", "it_IT_EURO")

        Returns:
            Parsed LocaleId

        Raises:
            ValueError: If identifier is empty or the language is malformed
        """
        parts = [part for part in normalize_locale(identifier).split("_") if part]
        if not parts:
            msg = f"Empty locale identifier: {identifier!r}"
            raise ValueError(msg)

        language = parts.pop(0).lower()
        script = ""
        territory = ""
        if parts and len(parts[0]) == 4 and parts[0].isalpha():
            script = parts.pop(0).title()
        if parts and (
            (len(parts[0]) == 2 and parts[0].isalpha())
            or (len(parts[0]) == 3 and parts[0].isdigit())
        ):
            territory = parts.pop(0).upper()
        variant = "_".join(parts).upper()

        return cls(language, territory=territory, variant=variant, script=script)


LocaleId.US = LocaleId("en", territory="US")
LocaleId.JAPAN = LocaleId("ja", territory="JP")
LocaleId.GERMANY = LocaleId("de", territory="DE")
LocaleId.ITALY = LocaleId("it", territory="IT")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale: LocaleId) -> Locale:
    """Get a Babel Locale for a LocaleId with caching.

    Variants without CLDR data are dropped and the lookup retried on the
    base locale.

    Args:
        locale: Locale identifier

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If the base locale is not recognized
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale(
            locale.language,
            territory=locale.territory or None,
            script=locale.script or None,
            variant=locale.variant or None,
        )
    except UnknownLocaleError:
        if not locale.variant:
            raise
        logger.debug("No CLDR data for variant of '%s'; using base locale", locale)
        return Locale(
            locale.language,
            territory=locale.territory or None,
            script=locale.script or None,
        )
