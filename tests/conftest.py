"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from datetime import datetime
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# 2018-12-10 18:31:37.250, a Monday
REFERENCE_NOW = datetime(2018, 12, 10, 18, 31, 37, 250000)


@pytest.fixture
def fixed_clock():
    """Clock callable pinned to REFERENCE_NOW."""
    return lambda: REFERENCE_NOW


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see the developer's DATEMARK_* settings."""
    monkeypatch.delenv("DATEMARK_LOCALE", raising=False)
    monkeypatch.delenv("DATEMARK_PATTERN", raising=False)
