"""End-to-end tests across the text formats."""

import pytest

from ctxmap import Context, JsonError


class TestRoundTrip:
    """Test cases for serializing and parsing back."""

    def test_json_pretty_round_trip(self):
        """Test the canonical name/age example through pretty JSON."""
        ctx = Context.new()
        ctx.insert("name", "Alice")
        ctx.insert("age", 30)

        loaded = Context.from_json(ctx.to_json(pretty=True))
        assert loaded.get("name") == "Alice"
        assert loaded.get("age") == 30

    def test_invalid_json_is_format_error(self):
        """Test that bad JSON is reported with the JSON variant."""
        with pytest.raises(JsonError):
            Context.from_json("{ invalid: json }")

    def test_cross_format_equivalence(self):
        """Test that scalar contexts read back identically from every format."""
        ctx = Context.from_dict(
            {
                "name": "Charlie",
                "age": 35,
                "height": 1.82,
                "admin": False,
                "empty": "",
                "quote": 'say "hi"',
            }
        )
        results = {fmt: Context.from_format(fmt, ctx.export(fmt)) for fmt in ("json", "toml", "yaml")}

        for key in ctx.inner():
            seen = {fmt: loaded.get(key) for fmt, loaded in results.items()}
            assert seen == {"json": ctx.get(key), "toml": ctx.get(key), "yaml": ctx.get(key)}

    def test_nested_structures(self):
        """Test nested lists and maps through every format."""
        ctx = Context.from_dict({"cfg": {"hosts": ["a", "b"], "limits": {"cpu": 2}}})
        for fmt in ("json", "toml", "yaml"):
            for pretty in (True, False):
                loaded = Context.from_format(fmt, ctx.export(fmt, pretty))
                assert loaded.get("cfg") == ctx.get("cfg")
