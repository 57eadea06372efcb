"""
FILE: datemark/core/formatter.py
PURPOSE: Token-substitution date formatting engine
EXPORTS:
  - format_date(source, pattern, strict) -> str
  - render(instant, pattern) -> str
  - TOKEN_RE: Compiled token regex
DEPENDENCIES:
  - re (token scanning)
  - datemark.core.parsing (to_instant)
  - datemark.core.models (Instant)
  - datemark.core.exceptions (InvalidDateError)
NOTES:
  - Single left-to-right scan, substituted text is never re-scanned
  - Run length 1 -> raw value, run length >= 2 -> zero-padded to width 2
  - yyyy is inserted as-is, never padded or truncated
"""

import re
from typing import Any

from .constants import DEFAULT_PATTERN
from .exceptions import InvalidDateError
from .models import Instant
from .parsing import to_instant

# Alternation order is the precedence order: yyyy, hh, h, then the field runs
TOKEN_RE = re.compile(r"yyyy|hh|h|M+|d+|H+|m+|s+|q+|S+")


def _pad(value: int) -> str:
    """Left-pad to at least 2 digits."""
    return str(value).zfill(2)


def _substitute(match: "re.Match", instant: Instant) -> str:
    """Replacement text for one token run."""
    run = match.group(0)

    if run == "yyyy":
        return str(instant.year)

    if run == "hh":
        meridiem, hour = instant.hour12
        return f"{meridiem} {_pad(hour)}"

    if run == "h":
        meridiem, hour = instant.hour12
        return f"{meridiem}{hour}"

    value = instant.field_table()[run[0]]
    if len(run) == 1:
        return str(value)
    return _pad(value)


def render(instant: Instant, pattern: str = DEFAULT_PATTERN) -> str:
    """Substitute every token in pattern with fields from instant."""
    return TOKEN_RE.sub(lambda match: _substitute(match, instant), pattern)


def format_date(source: Any, pattern: str = DEFAULT_PATTERN, strict: bool = False) -> str:
    """
    Format a date-like value with a token pattern.

    Supported tokens:
        yyyy  -> 2018        (year, as-is)
        MM/M  -> 02 / 2      (month)
        dd/d  -> 07 / 7      (day of month)
        HH/H  -> 09 / 9      (24-hour)
        hh/h  -> PM 02 / PM2 (12-hour with AM/PM prefix)
        mm/m  -> 08 / 8      (minute)
        ss/s  -> 06 / 6      (second)
        S     -> 5           (millisecond, SS pads to 2 digits)
        q     -> 1           (quarter)

    Args:
        source: datetime, date, Instant, ISO-like string or epoch ms
        pattern: Format pattern (default "yyyy-MM-dd")
        strict: Raise InvalidDateError instead of returning "" for bad input

    Returns:
        Formatted string, or "" for empty or unparseable input

    Raises:
        InvalidDateError: Only when strict=True and source is not a date

    Examples:
        >>> format_date("2018-01-30")
        '2018-01-30'
        >>> format_date(datetime(2018, 1, 30, 14, 5), "hh:mm")
        'PM 02:05'
        >>> format_date(None)
        ''
    """
    if not source:
        return ""

    instant = to_instant(source)
    if not instant:
        if strict:
            raise InvalidDateError(source)
        return ""

    return render(instant, pattern)
