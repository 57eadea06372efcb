"""
FILE: datemark/core/settings.py
PURPOSE: Environment-driven defaults
EXPORTS:
  - default_locale() -> str
  - default_pattern() -> str
  - resolve_locale(locale) -> str
DEPENDENCIES:
  - os (environment lookup)
  - logging (unknown locale trace)
  - datemark.core.constants
  - datemark.core.exceptions (InvalidInputError)
NOTES:
  - Read at call time so tests can monkeypatch the environment
  - Unknown DATEMARK_LOCALE values fall back to the default locale
"""

import logging
import os
from typing import Optional

from .constants import (
    DEFAULT_LOCALE,
    DEFAULT_PATTERN,
    ENV_LOCALE,
    ENV_PATTERN,
    SUPPORTED_LOCALES,
)
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def default_locale() -> str:
    """Locale from $DATEMARK_LOCALE, or the built-in default."""
    locale = os.environ.get(ENV_LOCALE, "").strip().lower()
    if not locale:
        return DEFAULT_LOCALE
    if locale not in SUPPORTED_LOCALES:
        logger.debug("ignoring unsupported %s=%r", ENV_LOCALE, locale)
        return DEFAULT_LOCALE
    return locale


def default_pattern() -> str:
    """Pattern from $DATEMARK_PATTERN, or the built-in default."""
    return os.environ.get(ENV_PATTERN) or DEFAULT_PATTERN


def resolve_locale(locale: Optional[str]) -> str:
    """
    Validate an explicit locale, or fall back to the configured default.

    Args:
        locale: "en", "zh" (any case), or None

    Returns:
        Normalized locale code

    Raises:
        InvalidInputError: If an explicit locale is not supported
    """
    if locale is None:
        return default_locale()

    normalized = locale.strip().lower()
    if normalized not in SUPPORTED_LOCALES:
        raise InvalidInputError(
            f"Unsupported locale '{locale}'. Valid locales: {', '.join(SUPPORTED_LOCALES)}"
        )
    return normalized
