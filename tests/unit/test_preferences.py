"""Tests for endpoint preferences."""

import json
import logging

import overpassql
import pytest
from overpassql.preferences import (
    DEFAULT_ENDPOINT,
    ENDPOINT_ENV,
    load_preferences,
    preferences_path,
)


class TestSetEndpoint:
    """Tests for set_endpoint / get_endpoint."""

    def test_default_endpoint(self):
        assert overpassql.get_endpoint() == DEFAULT_ENDPOINT == "https://overpass-api.de/api/"

    def test_add_endpoint(self, isolated_preferences):
        assert overpassql.set_endpoint("https://overpass.osm.jp/api/") is True

        assert overpassql.get_endpoint() == "https://overpass.osm.jp/api/"
        assert preferences_path() == isolated_preferences / "preferences.json"
        assert json.loads(preferences_path().read_text()) == {
            "endpoint": "https://overpass.osm.jp/api/"
        }

    def test_unset_endpoint(self):
        overpassql.set_endpoint("https://overpass.osm.jp/api/")

        assert overpassql.set_endpoint() is False
        assert overpassql.get_endpoint() == DEFAULT_ENDPOINT
        assert "endpoint" not in load_preferences()

    def test_unset_without_preferences_file(self):
        assert overpassql.set_endpoint(None) is False
        assert not preferences_path().exists()

    def test_force_trailing_slash(self, caplog):
        with caplog.at_level(logging.WARNING, logger="overpassql.preferences"):
            assert overpassql.set_endpoint("https://overpass-api.de/api") is False

        assert "expected to have a trailing slash" in caplog.text
        assert "No new endpoint is set" in caplog.text
        assert overpassql.get_endpoint() == DEFAULT_ENDPOINT
        assert load_preferences() == {}

    def test_environment_overrides_stored_endpoint(self, monkeypatch):
        overpassql.set_endpoint("https://overpass.osm.jp/api/")
        monkeypatch.setenv(ENDPOINT_ENV, "http://localhost:12345/api/")

        assert overpassql.get_endpoint() == "http://localhost:12345/api/"

    @pytest.mark.parametrize(
        "content", ["{not json", '["a", "list"]'], ids=["broken", "not_a_dict"]
    )
    def test_unreadable_preferences_are_ignored(self, content):
        path = preferences_path()
        path.parent.mkdir(parents=True)
        path.write_text(content)

        assert load_preferences() == {}
        assert overpassql.get_endpoint() == DEFAULT_ENDPOINT

    def test_other_preferences_are_kept(self):
        path = preferences_path()
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"other": 1}))

        overpassql.set_endpoint("https://overpass.osm.jp/api/")
        overpassql.set_endpoint()

        assert load_preferences() == {"other": 1}
