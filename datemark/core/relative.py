"""
FILE: datemark/core/relative.py
PURPOSE: Relative-time labels ("just now", "today 18:31") and clock strings
EXPORTS:
  - to_local_label(target, clock, locale) -> str
  - to_day_label(target, clock, locale) -> str
  - seconds_to_clock(seconds) -> str
  - classify_elapsed(elapsed) -> str
  - elapsed_ms(target, clock) -> Optional[int]
DEPENDENCIES:
  - datetime (stdlib)
  - logging (bucket trace)
  - datemark.core.formatter (format_date, render)
  - datemark.core.parsing (to_instant)
  - datemark.core.settings (resolve_locale)
NOTES:
  - "now" comes from an injectable clock, read once per call
  - Thresholds are inclusive upper bounds checked in ascending order
  - Future targets (negative elapsed) land in the "just now" bucket
  - Invalid targets render as "" (unavailable)
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from .constants import (
    ABSOLUTE_PATTERN,
    BUCKET_JUST_NOW,
    BUCKET_OLDER,
    BUCKET_THRESHOLDS,
    CLOCK_PATTERN,
    DAY_PATTERN,
    EPOCH_ANCHOR,
    LOCALE_LABELS,
    TIME_PATTERN,
)
from .formatter import format_date, render
from .parsing import to_instant
from .settings import resolve_locale

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_ONE_MS = timedelta(milliseconds=1)


def _now(clock: Optional[Clock]) -> datetime:
    now = (clock or datetime.now)()
    # Wall-clock comparison only
    return now.replace(tzinfo=None)


def classify_elapsed(elapsed: int) -> str:
    """
    Pick the bucket for an elapsed duration.

    Args:
        elapsed: Milliseconds between target and now (may be negative)

    Returns:
        One of the BUCKET_* names from constants
    """
    for upper_bound, bucket in BUCKET_THRESHOLDS:
        if elapsed <= upper_bound:
            return bucket
    return BUCKET_OLDER


def elapsed_ms(target: Any, clock: Optional[Clock] = None) -> Optional[int]:
    """
    Whole milliseconds from target to now.

    Returns:
        Elapsed milliseconds, or None if target is not a date
    """
    instant = to_instant(target)
    if not instant:
        return None
    return (_now(clock) - instant.to_datetime()) // _ONE_MS


def _bucket_for(target: Any, clock: Optional[Clock]):
    """Resolve target and classify it, or (None, None) when invalid."""
    instant = to_instant(target)
    if not instant:
        logger.debug("no relative label for invalid target %r", target)
        return None, None

    elapsed = (_now(clock) - instant.to_datetime()) // _ONE_MS
    bucket = classify_elapsed(elapsed)
    logger.debug("target %r elapsed=%dms bucket=%s", target, elapsed, bucket)
    return instant, bucket


def to_local_label(
    target: Any,
    clock: Optional[Clock] = None,
    locale: Optional[str] = None,
) -> str:
    """
    Convert a timestamp to a short label with clock time.

    Args:
        target: Past timestamp (string, epoch ms, or datetime)
        clock: Zero-argument callable returning now (defaults to datetime.now)
        locale: "en" or "zh" (defaults to $DATEMARK_LOCALE, then "en")

    Returns:
        "just now", "today 18:31", "yesterday 18:31",
        "day before yesterday 18:31", or "2018-12-10 18:31".
        Empty string when target is not a date.

    Example:
        >>> to_local_label("2018-12-10 18:31:37", clock=lambda: datetime(2018, 12, 10, 20, 0))
        'today 18:31'
    """
    labels = LOCALE_LABELS[resolve_locale(locale)]
    instant, bucket = _bucket_for(target, clock)
    if instant is None:
        return ""

    if bucket == BUCKET_JUST_NOW:
        return labels[bucket]
    if bucket == BUCKET_OLDER:
        return render(instant, ABSOLUTE_PATTERN)
    return f"{labels[bucket]} {render(instant, TIME_PATTERN)}"


def to_day_label(
    target: Any,
    clock: Optional[Clock] = None,
    locale: Optional[str] = None,
) -> str:
    """
    Convert a timestamp to a day-only label.

    Returns:
        "just now", "today", "yesterday", "day before yesterday",
        or the day of month as "10日". Empty string when target is not a date.
    """
    labels = LOCALE_LABELS[resolve_locale(locale)]
    instant, bucket = _bucket_for(target, clock)
    if instant is None:
        return ""

    if bucket == BUCKET_OLDER:
        return render(instant, DAY_PATTERN)
    return labels[bucket]


def seconds_to_clock(seconds: int) -> str:
    """
    Convert an elapsed-seconds count to "HH:mm:ss".

    Seconds are added to EPOCH_ANCHOR (local midnight), so the result only
    makes sense for 0 <= seconds < 86400; larger values wrap to the next day.
    Values too large for a date, or not finite, give "".

    Examples:
        >>> seconds_to_clock(60)
        '00:01:00'
        >>> seconds_to_clock(3661)
        '01:01:01'
    """
    try:
        value = EPOCH_ANCHOR + timedelta(seconds=int(seconds))
    except (OverflowError, ValueError):
        logger.debug("seconds out of range: %r", seconds)
        return ""
    return format_date(value, CLOCK_PATTERN)
