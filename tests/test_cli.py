"""
Test the one-shot CLI and that running 'datemark' without arguments launches the REPL.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def run_cli(*args, input_text=None):
    return subprocess.run(
        [sys.executable, "-m", "datemark", *args],
        input=input_text,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )


def test_default_launches_repl():
    """Test that running CLI without arguments launches REPL."""
    result = run_cli(input_text="fmt 2018-01-30 yyyy/MM/dd\nexit\n")

    assert "datemark REPL" in result.stdout, f"Expected REPL welcome message, got: {result.stdout}"
    assert "2018/01/30" in result.stdout
    assert "Goodbye!" in result.stdout, f"Expected goodbye message, got: {result.stdout}"
    assert result.returncode == 0, f"Expected exit code 0, got: {result.returncode}"


def test_version():
    result = run_cli("version")
    assert "datemark v" in result.stdout
    assert result.returncode == 0


def test_fmt():
    result = run_cli("fmt", "2018-01-30 14:05:09", "yyyy/MM/dd hh:mm:ss", "--raw")
    assert result.stdout.strip() == "2018/01/30 PM 02:05:09"
    assert result.returncode == 0


def test_fmt_default_pattern():
    result = run_cli("fmt", "2018-01-30 14:05:09", "--raw")
    assert result.stdout.strip() == "2018-01-30"


def test_fmt_invalid_date_exits_1():
    result = run_cli("fmt", "not-a-date")
    assert result.returncode == 1
    assert "Invalid date" in result.stderr


def test_fmt_empty_source_exits_1():
    result = run_cli("fmt", "")
    assert result.returncode == 1
    assert "Invalid date" in result.stderr
    assert result.stdout.strip() == ""


def test_fmt_json():
    result = run_cli("fmt", "2018-07-04", "q", "--json")
    data = json.loads(result.stdout)
    assert data["result"] == "3"
    assert data["pattern"] == "q"


def test_fields_json():
    result = run_cli("fields", "2018-07-04 09:05:03", "--json")
    data = json.loads(result.stdout)
    assert data["month"] == 7
    assert data["quarter"] == 3
    assert data["tokens"]["hh"] == "AM 09"


def test_clock():
    result = run_cli("clock", "60", "--raw")
    assert result.stdout.strip() == "00:01:00"


def test_clock_warns_outside_one_day():
    result = run_cli("clock", "86400", "--raw")
    assert result.stdout.strip() == "00:00:00"
    assert "wraps around" in result.stderr


def test_clock_out_of_range_exits_1():
    result = run_cli("clock", "999999999999")
    assert result.returncode == 1
    assert "out of range" in result.stderr


def test_ago_absolute_for_old_dates():
    result = run_cli("ago", "2018-01-30 08:05", "--raw")
    assert result.stdout.strip() == "2018-01-30 08:05"


def test_day_zh():
    result = run_cli("day", "2018-01-30", "--locale", "zh", "--json")
    data = json.loads(result.stdout)
    assert data["result"] == "30日"
    assert data["locale"] == "zh"


def test_bad_locale_exits_1():
    result = run_cli("ago", "2018-01-30", "--locale", "fr")
    assert result.returncode == 1
    assert "Unsupported locale" in result.stderr
