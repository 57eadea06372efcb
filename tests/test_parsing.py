"""
Tests for source normalization and the Instant model.
"""

import json
from datetime import datetime, date, timezone, timedelta

import pytest

# Path setup handled by conftest.py
from datemark.core.models import Instant, INVALID, Invalid
from datemark.core.parsing import to_instant, epoch_ms_to_instant


def test_invalid_is_falsy_singleton():
    assert not INVALID
    assert Invalid() is INVALID
    assert repr(INVALID) == "Invalid"


@pytest.mark.parametrize("text,expected", [
    ("2018-01-30", Instant(2018, 1, 30)),
    ("2018/01/30", Instant(2018, 1, 30)),
    ("2018-1-5", Instant(2018, 1, 5)),
    ("2018-12-10 18:31", Instant(2018, 12, 10, 18, 31)),
    ("2018-12-10 18:31:37", Instant(2018, 12, 10, 18, 31, 37)),
    ("2018-12-10 18:31:37.250", Instant(2018, 12, 10, 18, 31, 37, 250)),
    ("2018-12-10T18:31:37", Instant(2018, 12, 10, 18, 31, 37)),
    ("2018-12", Instant(2018, 12, 1)),
    ("12/10/2018", Instant(2018, 12, 10)),
    ("  2018-01-30  ", Instant(2018, 1, 30)),
])
def test_string_layouts(text, expected):
    assert to_instant(text) == expected


@pytest.mark.parametrize("source", [None, "", "yesterday", "2018-02-30", "-1000", "true", True])
def test_unparseable_sources(source):
    assert to_instant(source) is INVALID


def test_numeric_string_is_epoch_ms():
    ms = 1544437897123
    expected = datetime.fromtimestamp(ms // 1000)
    instant = to_instant(str(ms))
    assert instant.to_datetime().replace(microsecond=0) == expected
    assert instant.millisecond == 123


def test_float_epoch_uses_integer_part():
    assert to_instant(1544437897123.9) == to_instant(1544437897123)


def test_epoch_out_of_range():
    assert epoch_ms_to_instant(10 ** 20) is INVALID


def test_datetime_source_drops_tzinfo():
    aware = datetime(2018, 1, 30, 18, 31, tzinfo=timezone(timedelta(hours=8)))
    assert to_instant(aware) == Instant(2018, 1, 30, 18, 31)


def test_date_source_is_midnight():
    assert to_instant(date(2018, 1, 30)) == Instant(2018, 1, 30, 0, 0, 0, 0)


def test_instant_passes_through():
    instant = Instant(2018, 1, 30, 1, 2, 3, 4)
    assert to_instant(instant) is instant


@pytest.mark.parametrize("fields", [
    (2018, 13, 45),
    (2018, 2, 30),
    (2018, 1, 30, 24),
    (2018, 1, 30, 0, 0, 0, 1000),
])
def test_instant_rejects_impossible_fields(fields):
    with pytest.raises(ValueError):
        Instant(*fields)


def test_instant_accepts_leap_day():
    assert Instant(2020, 2, 29).to_datetime() == datetime(2020, 2, 29)


def test_field_table():
    instant = Instant(2018, 8, 9, 21, 5, 7, 42)
    assert instant.field_table() == {
        "M": 8, "d": 9, "H": 21, "m": 5, "s": 7, "q": 3, "S": 42,
    }


def test_hour12():
    assert Instant(2018, 1, 1, 0).hour12 == ("AM", 0)
    assert Instant(2018, 1, 1, 11).hour12 == ("AM", 11)
    assert Instant(2018, 1, 1, 12).hour12 == ("PM", 0)
    assert Instant(2018, 1, 1, 23).hour12 == ("PM", 11)


def test_round_trip_datetime():
    value = datetime(2018, 12, 10, 18, 31, 37, 250000)
    assert Instant.from_datetime(value).to_datetime() == value


def test_to_json():
    data = json.loads(Instant(2018, 1, 30).to_json())
    assert data["year"] == 2018
    assert data["millisecond"] == 0
