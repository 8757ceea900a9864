"""Test fixture utilities for loading queries and server responses.

This module provides helper functions for loading test fixtures from the
organized fixture directories:

- `queries/` - Overpass QL query files
- `status/` - plain text responses of the `status` endpoint

Usage:
    from tests.unit.fixtures import load_status_fixture

    def test_status():
        status = Status.from_text(load_status_fixture("default"))
        assert status.rate_limit == 6
"""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def query_fixture_path(name: str) -> Path:
    """Return the path of a query fixture, e.g. ``"cycle_network"``.

    Raises:
        FileNotFoundError: If the fixture does not exist
    """
    path = FIXTURES_DIR / "queries" / f"{name}.overpassql"
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


def load_status_fixture(name: str) -> str:
    """Load a status response fixture by name."""
    path = FIXTURES_DIR / "status" / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path.read_text(encoding="utf-8")


def load_text_fixture(filename: str) -> str:
    """Load any other fixture file in the fixtures directory."""
    return (FIXTURES_DIR / filename).read_text(encoding="utf-8")
