"""
Unit tests for api/responses.py range parsing and helpers.
"""
import pytest

from api.responses import (
    DEFAULT_MEDIA_TYPE,
    UNSATISFIABLE,
    guess_media_type,
    parse_range,
    plain_status,
)


@pytest.mark.unit
class TestParseRange:
    """Tests for parse_range()."""

    @pytest.mark.parametrize("header,expected", [
        ("bytes=0-4", (0, 4)),
        ("bytes=5-", (5, 9)),
        ("bytes=-3", (7, 9)),
        ("bytes=-20", (0, 9)),
        ("bytes=8-100", (8, 9)),
        ("bytes= 2-3 ", (2, 3)),
    ])
    def test_satisfiable(self, header, expected):
        assert parse_range(header, 10) == expected

    @pytest.mark.parametrize("header", ["bytes=10-", "bytes=10-20", "bytes=-0"])
    def test_unsatisfiable(self, header):
        assert parse_range(header, 10) is UNSATISFIABLE

    def test_any_range_on_empty_body_unsatisfiable(self):
        assert parse_range("bytes=0-", 0) is UNSATISFIABLE

    @pytest.mark.parametrize("header", [
        None,
        "",
        "items=0-4",
        "bytes=",
        "bytes=abc",
        "bytes=4-2",
        "bytes=a-b",
        "bytes=-x",
        "bytes=0-1,3-4",
    ])
    def test_ignored(self, header):
        assert parse_range(header, 10) is None


@pytest.mark.unit
class TestHelpers:
    """Tests for small response helpers."""

    def test_guess_text(self):
        assert guess_media_type("a.b-c.txt") == "text/plain"

    def test_guess_unknown(self):
        assert guess_media_type("a.b-c.unknownext") == DEFAULT_MEDIA_TYPE

    def test_plain_status_body_is_phrase(self):
        response = plain_status(404)
        assert response.status_code == 404
        assert response.body == b"Not Found"
