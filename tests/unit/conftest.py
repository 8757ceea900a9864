"""Pytest configuration and shared fixtures for unit tests."""

import datetime as dt

import pytest
from overpassql.preferences import CONFIG_DIR_ENV, ENDPOINT_ENV

# 2024-12-01T00:00:00Z, the "now" all pinned date tests are written against
FIXED_NOW = dt.datetime(2024, 12, 1, tzinfo=dt.timezone.utc)


@pytest.fixture(autouse=True)
def isolated_preferences(tmp_path, monkeypatch):
    """Keep preferences of the developer machine out of the tests."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    monkeypatch.delenv(ENDPOINT_ENV, raising=False)
    return config_dir


@pytest.fixture
def fixed_clock():
    """A clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def pinned_now(monkeypatch):
    """Pin the default clock of the shortcut resolver to FIXED_NOW."""
    monkeypatch.setattr("overpassql.shortcuts.utc_now", lambda: FIXED_NOW)
    return FIXED_NOW
