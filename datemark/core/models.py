"""
FILE: datemark/core/models.py
PURPOSE: Domain models for resolved dates
EXPORTS:
  - Instant (frozen dataclass)
  - Invalid / INVALID (sentinel for unparseable sources)
  - DateResult (Instant | Invalid)
DEPENDENCIES:
  - dataclasses (stdlib)
  - datetime (stdlib)
  - json (stdlib)
  - typing (stdlib)
NOTES:
  - Instant only holds wall-clock fields, tzinfo is dropped
  - INVALID is falsy so callers can write `if not result`
  - Instant rejects impossible fields at construction (ValueError)
"""

from dataclasses import dataclass, asdict
from datetime import datetime, date
from typing import Dict, Tuple, Union
import json


@dataclass(frozen=True)
class Instant:
    """A fully resolved local calendar/clock value."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __post_init__(self):
        # Raises ValueError for impossible fields (month 13, Feb 30, 1000 ms)
        self.to_datetime()

    @classmethod
    def from_datetime(cls, value: Union[datetime, date]) -> "Instant":
        """Build an Instant from a datetime (or a plain date at midnight)."""
        if not isinstance(value, datetime):
            return cls(year=value.year, month=value.month, day=value.day)

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
        )

    def to_datetime(self) -> datetime:
        """Naive local datetime with the same wall-clock fields."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
        )

    @property
    def quarter(self) -> int:
        return (self.month + 2) // 3

    @property
    def hour12(self) -> Tuple[str, int]:
        """Meridiem prefix and hour on the 12-hour dial (12:xx is PM 0)."""
        if self.hour > 11:
            return "PM", self.hour - 12
        return "AM", self.hour

    def field_table(self) -> Dict[str, int]:
        """Token character -> value for every run-length token."""
        return {
            "M": self.month,
            "d": self.day,
            "H": self.hour,
            "m": self.minute,
            "s": self.second,
            "q": self.quarter,
            "S": self.millisecond,
        }

    def to_json(self) -> str:
        """Serialize instant to JSON string."""
        return json.dumps(asdict(self), indent=2)


class Invalid:
    """Result of normalizing a source that is not a date."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Invalid"


INVALID = Invalid()

DateResult = Union[Instant, Invalid]
