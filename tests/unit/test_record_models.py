"""
Unit tests for domain record, query and content models.
"""

import os

import pytest
from pydantic import ValidationError

from domain.models import (
    ContentMode,
    MatchOp,
    MessagePart,
    OutputOptions,
    Presentation,
    Record,
    RecordMeta,
    decode_hex,
    term_matches,
)


@pytest.mark.unit
class TestDecodeHex:
    """Tests for decode_hex()."""

    @pytest.mark.parametrize("payload", [b"", b"\x00", os.urandom(4096)])
    def test_round_trip(self, payload):
        assert decode_hex(payload.hex()) == payload

    def test_postgres_bytea_prefix(self):
        assert decode_hex("\\x68656c6c6f") == b"hello"

    def test_uppercase_digits(self):
        assert decode_hex("FF00") == b"\xff\x00"

    def test_none_is_empty(self):
        assert decode_hex(None) == b""

    def test_odd_length_rejected(self):
        with pytest.raises(ValueError):
            decode_hex("abc")

    def test_non_hex_rejected(self):
        with pytest.raises(ValueError):
            decode_hex("zz")

    def test_non_ascii_rejected(self):
        with pytest.raises(ValueError):
            decode_hex("é0")


@pytest.mark.unit
class TestRecordMeta:
    """Tests for RecordMeta validation."""

    def test_null_columns_get_defaults(self):
        meta = RecordMeta.model_validate({
            "uuid": "r1",
            "host": None,
            "status": None,
            "header": None,
        })
        assert meta.host == ""
        assert meta.status == 0
        assert meta.header == {}

    def test_header_value_order_preserved(self):
        meta = RecordMeta(uuid="r1", header={"Set-Cookie": ["a=1", "b=2"]})
        assert meta.header["Set-Cookie"] == ["a=1", "b=2"]

    def test_single_string_header_value_wrapped(self):
        meta = RecordMeta(uuid="r1", request_header={"Host": "example.com"})
        assert meta.request_header == {"Host": ["example.com"]}

    def test_frozen(self):
        meta = RecordMeta(uuid="r1")
        with pytest.raises(ValidationError):
            meta.host = "other"

    def test_record_meta_excludes_bodies(self):
        record = Record(uuid="r1", host="example.com", body=b"x", request_body=b"y")
        meta = record.meta
        assert type(meta) is RecordMeta
        assert meta.host == "example.com"
        assert "body" not in meta.model_dump()


@pytest.mark.unit
class TestTermMatches:
    """Tests for term_matches()."""

    def test_numeric_term_includes_status(self):
        fields = {(m.field, m.op) for m in term_matches("200")}
        assert ("status", MatchOp.EQUALS) in fields
        assert ("host", MatchOp.CONTAINS) in fields

    def test_largest_int4_term_includes_status(self):
        fields = {m.field for m in term_matches("2147483647")}
        assert "status" in fields

    def test_term_beyond_integer_range_skips_status(self):
        matches = term_matches("99999999999999999999")

        assert "status" not in {m.field for m in matches}
        assert ("path", MatchOp.CONTAINS) in {(m.field, m.op) for m in matches}

    def test_text_term_skips_status(self):
        fields = [m.field for m in term_matches("GET")]
        assert fields == ["host", "origin", "path", "content_type", "method", "scheme"]


@pytest.mark.unit
class TestContentMode:
    """Tests for ContentMode and OutputOptions."""

    def test_six_modes(self):
        assert len(ContentMode) == 6

    @pytest.mark.parametrize("mode", list(ContentMode))
    def test_exactly_one_body_per_mode(self, mode):
        options = mode.options()
        assert options.request_body != options.response_body

    def test_raw_sets_wire_only(self):
        options = ContentMode.RESPONSE_RAW.options()
        assert options == OutputOptions(wire=True, response_body=True)

    def test_embed_sets_embed_only(self):
        options = ContentMode.REQUEST_EMBED.options()
        assert options == OutputOptions(embed=True, request_body=True)

    def test_lookup(self):
        mode = ContentMode.lookup(MessagePart.RESPONSE, Presentation.CONTENT)
        assert mode is ContentMode.RESPONSE_CONTENT

    def test_none_options(self):
        assert OutputOptions().is_none
        assert not OutputOptions(wire=True).is_none
