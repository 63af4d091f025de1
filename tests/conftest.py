"""Pytest configuration and shared fixtures for dataknobs_validators tests."""

import sys
import time
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from dataknobs_validators import PluginRegistry, ValidatorConfig, v  # noqa: E402


@pytest.fixture
def all_errors():
    """Configuration reporting every failing rule per field."""
    return ValidatorConfig(first_error_only=False)


@pytest.fixture
def signup_schema():
    """A small signup form schema used across tests."""
    return v.object({
        "name": v.string().trim().required(),
        "email": v.string().trim().lowercase().required().email(),
        "password": v.string().required().min_length(8),
        "password_confirmation": v.string().required().same_as("password").omit(),
        "newsletter": v.boolean().default(False),
    })


@pytest.fixture
def plugin_registry():
    """An isolated plugin registry."""
    registry = PluginRegistry("test_plugins")
    yield registry
    registry.clear()


@pytest.fixture
def non_utc_clock(monkeypatch):
    """Run with the process timezone set well away from UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
