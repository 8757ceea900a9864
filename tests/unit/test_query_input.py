"""Tests for reading queries and unescaping server messages."""

import pytest
from overpassql.query_input import get_query, unescape_html

from tests.unit.fixtures import query_fixture_path

SIMPLE_QUERY = "[out:json];node[amenity=drinking_water]({{bbox}});out;"


class TestGetQuery:
    """Tests for get_query."""

    def test_pass_through_normal_string(self):
        assert get_query(SIMPLE_QUERY) == SIMPLE_QUERY

    def test_read_file(self):
        assert get_query(str(query_fixture_path("drinking_water_simple"))) == SIMPLE_QUERY

    def test_read_path_object(self):
        assert get_query(query_fixture_path("drinking_water_simple")) == SIMPLE_QUERY

    @pytest.mark.parametrize("filename", ["query.ql", "QUERY.QL", "query.OverpassQL"])
    def test_suffix_is_case_insensitive(self, tmp_path, filename):
        path = tmp_path / filename
        path.write_text("node(1);out;", encoding="utf-8")

        assert get_query(str(path)) == "node(1);out;"

    def test_other_suffix_is_a_query(self):
        assert get_query("queries/query.txt") == "queries/query.txt"

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            get_query("nofile.ql")


class TestUnescapeHtml:
    """Tests for unescape_html."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("abc", "abc"),
            ("&lt;b&gt; &quot;test&quot; &amp;", '<b> "test" &'),
            ("it&#39;s", "it's"),
        ],
        ids=["plain", "entities", "apostrophe"],
    )
    def test_unescape(self, text, expected):
        assert unescape_html(text) == expected
