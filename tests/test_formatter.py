"""
Tests for the token formatting engine.
"""

from datetime import datetime, date

import pytest

# Path setup handled by conftest.py
from datemark.core.formatter import format_date, render
from datemark.core.models import Instant
from datemark.core.exceptions import InvalidDateError


MORNING = datetime(2018, 2, 7, 9, 8, 6, 5000)
AFTERNOON = datetime(2018, 7, 4, 14, 2, 3)


@pytest.mark.parametrize("source", [None, "", 0, 0.0, False])
def test_empty_source_returns_empty_string(source):
    """Falsy sources short-circuit to ''."""
    assert format_date(source) == ""
    assert format_date(source, strict=True) == ""


def test_default_pattern():
    assert format_date("2018-01-30") == "2018-01-30"
    assert format_date(datetime(2018, 1, 30, 23, 59)) == "2018-01-30"


def test_padded_and_unpadded_fields():
    assert format_date(MORNING, "yyyy-MM-dd HH:mm:ss") == "2018-02-07 09:08:06"
    assert format_date(MORNING, "yyyy-M-d H:m:s") == "2018-2-7 9:8:6"


def test_24_hour():
    assert format_date(MORNING, "HH") == "09"
    assert format_date(MORNING, "H") == "9"


def test_12_hour_pm():
    assert format_date(AFTERNOON, "hh") == "PM 02"
    assert format_date(AFTERNOON, "h") == "PM2"


def test_12_hour_am():
    assert format_date(MORNING, "hh") == "AM 09"
    assert format_date(MORNING, "h") == "AM9"


def test_12_hour_edges():
    """Noon is PM 00, midnight is AM 00."""
    assert format_date(datetime(2018, 1, 1, 12, 0), "hh") == "PM 00"
    assert format_date(datetime(2018, 1, 1, 0, 0), "hh") == "AM 00"
    assert format_date(datetime(2018, 1, 1, 23, 0), "h") == "PM11"


def test_meridiem_prefix_is_not_rescanned():
    """The M in AM/PM must not be replaced by the month."""
    assert format_date(AFTERNOON, "hh:mm") == "PM 02:02"
    assert format_date(AFTERNOON, "yyyy/MM/dd hh:mm:ss") == "2018/07/04 PM 02:02:03"


@pytest.mark.parametrize("month,quarter", [
    (1, "1"), (2, "1"), (3, "1"),
    (4, "2"), (6, "2"),
    (7, "3"), (9, "3"),
    (10, "4"), (12, "4"),
])
def test_quarter(month, quarter):
    assert format_date(datetime(2018, month, 15), "q") == quarter


def test_quarter_padded():
    assert format_date(datetime(2018, 11, 1), "qq") == "04"


def test_milliseconds():
    """S is raw, runs of S pad to at least 2 digits and never truncate."""
    assert format_date(MORNING, "S") == "5"
    assert format_date(MORNING, "SS") == "05"
    assert format_date(MORNING, "SSS") == "05"
    assert format_date(datetime(2018, 1, 1, 0, 0, 0, 123000), "SS") == "123"
    assert format_date(datetime(2018, 1, 1, 0, 0, 0, 123000), "S") == "123"


def test_long_runs_still_pad_to_two():
    assert format_date(MORNING, "MMMM") == "02"
    assert format_date(MORNING, "ddd") == "07"


def test_year_is_not_padded():
    assert format_date(datetime(5, 3, 1), "yyyy-MM") == "5-03"
    assert format_date(datetime(987, 3, 1), "yyyy") == "987"


def test_partial_year_token_is_literal():
    """Only the full yyyy run is a year token."""
    assert format_date(MORNING, "yy") == "yy"
    assert format_date(MORNING, "yyyyy") == "2018y"


def test_literals_pass_through():
    assert format_date(MORNING, "[yyyy] at HH:mm, Q q!") == "[2018] at 09:08, Q 1!"


def test_repeated_tokens_all_replaced():
    assert format_date(MORNING, "dd/dd d") == "07/07 7"
    assert format_date(MORNING, "M MM") == "2 02"


def test_dash_string_is_local_date():
    assert format_date("2018-01-30 18:31:37", "yyyy-MM-dd HH:mm:ss") == "2018-01-30 18:31:37"


def test_epoch_milliseconds():
    ms = 1517241600000
    expected = datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
    assert format_date(ms, "yyyy-MM-dd HH:mm:ss") == expected
    assert format_date(str(ms), "yyyy-MM-dd HH:mm:ss") == expected


def test_plain_date_source():
    assert format_date(date(2018, 1, 30), "yyyy-MM-dd HH:mm") == "2018-01-30 00:00"


def test_instant_source():
    instant = Instant(2018, 1, 30, 18, 31, 37, 250)
    assert format_date(instant, "yyyy-MM-dd HH:mm:ss") == "2018-01-30 18:31:37"


@pytest.mark.parametrize("source", ["not a date", "2018-13-45", "hello-world", object()])
def test_invalid_source_returns_empty_string(source):
    assert format_date(source) == ""


def test_strict_mode_raises():
    with pytest.raises(InvalidDateError) as exc_info:
        format_date("not a date", strict=True)
    assert exc_info.value.source == "not a date"


def test_idempotent():
    first = format_date(AFTERNOON, "yyyy-MM-dd hh:mm:ss q S")
    second = format_date(AFTERNOON, "yyyy-MM-dd hh:mm:ss q S")
    assert first == second


def test_render_without_tokens():
    assert render(Instant(2018, 1, 30), "--::") == "--::"
