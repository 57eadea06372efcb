"""
FILE: datemark/core/parsing.py
PURPOSE: Normalize heterogeneous date sources into an Instant
EXPORTS:
  - to_instant(source) -> Instant | Invalid
  - epoch_ms_to_instant(ms) -> Instant | Invalid
  - DATE_LAYOUTS: strptime layouts accepted for string sources
DEPENDENCIES:
  - re (numeric source detection)
  - datetime (stdlib)
  - logging (debug trace of rejected sources)
  - datemark.core.models (Instant, INVALID)
NOTES:
  - "-" is rewritten to "/" before parsing so "2018-01-30" is a local date
  - Purely numeric sources are epoch milliseconds, integer part only
  - Never raises for bad input, returns INVALID instead
"""

import logging
import re
from datetime import datetime, date, timedelta
from typing import Any

from .models import Instant, INVALID, DateResult

logger = logging.getLogger(__name__)

# Digits with an optional fractional part, e.g. "1517241600000" or "1517241600000.0"
NUMERIC_RE = re.compile(r"^\s*\+?(\d+)(?:\.\d*)?\s*$")

DATE_LAYOUTS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S.%f",
    "%Y/%m/%dT%H:%M",
    "%Y/%m/%dT%H:%M:%S",
    "%Y/%m/%dT%H:%M:%S.%f",
    "%Y/%m",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
)


def epoch_ms_to_instant(ms: int) -> DateResult:
    """
    Convert epoch milliseconds to a local Instant.

    Args:
        ms: Milliseconds since 1970-01-01T00:00:00Z

    Returns:
        Instant in local wall-clock time, or INVALID when out of range
    """
    try:
        seconds, remainder = divmod(ms, 1000)
        value = datetime.fromtimestamp(seconds) + timedelta(milliseconds=remainder)
    except (OverflowError, OSError, ValueError):
        logger.debug("epoch value out of range: %s", ms)
        return INVALID
    return Instant.from_datetime(value)


def _parse_text(text: str) -> DateResult:
    """Parse a slash-normalized string with the accepted layouts."""
    text = text.strip()
    for layout in DATE_LAYOUTS:
        try:
            return Instant.from_datetime(datetime.strptime(text, layout))
        except ValueError:
            continue
    logger.debug("unparseable date string: %r", text)
    return INVALID


def to_instant(source: Any) -> DateResult:
    """
    Resolve a date-like value to an Instant.

    Args:
        source: datetime, date, Instant, string, or number (epoch ms)

    Returns:
        Instant, or INVALID if the source cannot be read as a date

    Examples:
        >>> to_instant("2018-01-30")
        Instant(year=2018, month=1, day=30, hour=0, minute=0, second=0, millisecond=0)
        >>> to_instant("not a date")
        Invalid
    """
    if source is None:
        return INVALID

    if isinstance(source, Instant):
        return source

    if isinstance(source, (datetime, date)):
        return Instant.from_datetime(source)

    # bool is an int subclass, str() keeps it out of the numeric branch
    text = str(source).replace("-", "/")

    numeric = NUMERIC_RE.match(text)
    if numeric:
        return epoch_ms_to_instant(int(numeric.group(1)))

    return _parse_text(text)
