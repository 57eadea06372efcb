"""
FILE: datemark/__init__.py
PURPOSE: Public library API
EXPORTS:
  - format_date(source, pattern, strict) -> str
  - seconds_to_clock(seconds) -> str
  - to_local_label(target, clock, locale) -> str
  - to_day_label(target, clock, locale) -> str
  - to_instant(source) -> Instant | Invalid
  - Instant, INVALID
NOTES:
  - CLI and REPL live in datemark.cli / datemark.repl and are not imported here
"""

from .core.formatter import format_date
from .core.models import Instant, INVALID
from .core.parsing import to_instant
from .core.relative import seconds_to_clock, to_local_label, to_day_label

__all__ = [
    "format_date",
    "seconds_to_clock",
    "to_local_label",
    "to_day_label",
    "to_instant",
    "Instant",
    "INVALID",
]
