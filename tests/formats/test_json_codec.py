"""Tests for the JSON adapter."""

import json

import pytest

from ctxmap.types.context import Context
from ctxmap.types.errors import GenericError, JsonError


@pytest.fixture
def ctx():
    context = Context.new()
    context.insert("string", "test")
    context.insert("number", 42)
    context.insert("boolean", True)
    return context


class TestToJson:
    """Test cases for Context.to_json()."""

    def test_compact(self, ctx):
        """Test compact output with sorted keys."""
        assert ctx.to_json() == '{"boolean":true,"number":42,"string":"test"}'

    def test_pretty(self, ctx):
        """Test indented output."""
        text = ctx.to_json(pretty=True)
        assert "\n" in text
        assert '  "number": 42' in text
        assert json.loads(text) == {"string": "test", "number": 42, "boolean": True}

    def test_unicode_kept_as_text(self):
        """Test that non-ASCII text is not escaped."""
        ctx = Context.from_dict({"name": "José"})
        assert ctx.to_json() == '{"name":"José"}'

    def test_bytes_written_as_integers(self):
        """Test that bytes become an array of integers."""
        ctx = Context.from_dict({"raw": b"\x01\xff"})
        assert ctx.to_json() == '{"raw":[1,255]}'

    def test_nan_rejected(self):
        """Test that non-finite floats fail with a JSON error."""
        ctx = Context.from_dict({"x": float("nan")})
        with pytest.raises(JsonError):
            ctx.to_json()

    def test_bytes_map_key_rejected(self):
        """Test that map keys JSON cannot express fail with a JSON error."""
        ctx = Context.from_dict({"m": {b"k": 1}})
        with pytest.raises(JsonError):
            ctx.to_json()


class TestFromJson:
    """Test cases for Context.from_json()."""

    def test_round_trip(self, ctx):
        """Test that parsing the output restores every entry."""
        loaded = Context.from_json(ctx.to_json())
        assert loaded.inner() == ctx.inner()

    def test_nested_values(self):
        """Test that nested arrays and objects are kept."""
        loaded = Context.from_json('{"cfg": {"hosts": ["a", "b"], "port": 8080}, "nothing": null}')
        assert loaded.get("cfg") == {"hosts": ["a", "b"], "port": 8080}
        assert "nothing" in loaded
        assert loaded.get("nothing") is None

    @pytest.mark.parametrize("text", ["{ invalid: json }", "invalid json", '{"a": 1', ""])
    def test_invalid_json(self, text):
        """Test that malformed input raises the JSON variant, never a generic one."""
        with pytest.raises(JsonError) as exc_info:
            Context.from_json(text)
        assert not isinstance(exc_info.value, GenericError)
        assert exc_info.value.kind == "json"

    @pytest.mark.parametrize("text", ["[1, 2]", '"text"', "42", "null"])
    def test_top_level_must_be_object(self, text):
        """Test that valid JSON which is not an object is rejected."""
        with pytest.raises(JsonError, match="object"):
            Context.from_json(text)

    def test_export_by_name(self, ctx):
        """Test the format-by-name entry points."""
        text = ctx.export("json", pretty=True)
        assert text == ctx.to_json(pretty=True)
        assert Context.from_format("json", text) == ctx
