"""Tests for the capability registry."""

import pytest

from ctxmap import formats
from ctxmap.formats import available_formats, get_codec
from ctxmap.types.context import Context
from ctxmap.types.errors import FormatUnavailableError, GenericError


@pytest.fixture
def missing_yaml_backend(monkeypatch):
    """Pretends the YAML backend is not installed."""
    module, extra, _ = formats._CAPABILITIES["yaml"]
    monkeypatch.setitem(formats._CAPABILITIES, "yaml", (module, extra, "ctxmap_missing_backend"))


class TestRegistry:
    """Test cases for available_formats() and get_codec()."""

    def test_all_capabilities_available(self):
        """Test that every capability is reported when its backend is installed."""
        assert available_formats() == ["json", "toml", "yaml", "headers"]

    def test_get_codec(self):
        """Test that adapters are returned as modules with the codec functions."""
        codec = get_codec("json")
        assert codec.dumps({"a": 1}) == '{"a":1}'
        assert codec.loads('{"a": 1}') == {"a": 1}

    def test_unknown_format(self):
        """Test that unknown capability names are a generic error."""
        with pytest.raises(GenericError, match="unknown format"):
            get_codec("xml")

    def test_unknown_text_format(self):
        """Test that headers are not a text format for export()."""
        with pytest.raises(GenericError, match="unknown text format"):
            Context().export("headers")
        with pytest.raises(GenericError, match="unknown text format"):
            Context.from_format("ini", "a = 1")


class TestMissingBackend:
    """Test cases for capabilities whose backend is not installed."""

    def test_not_listed(self, missing_yaml_backend):
        """Test that the capability disappears from available_formats()."""
        assert "yaml" not in available_formats()
        assert "json" in available_formats()

    def test_export_fails(self, missing_yaml_backend):
        """Test that using the capability raises FormatUnavailableError."""
        with pytest.raises(FormatUnavailableError, match=r"pyctxmap\[yaml\]"):
            Context.from_dict({"a": 1}).to_yaml()

    def test_import_fails_as_generic(self, missing_yaml_backend):
        """Test that the failure is catchable as a generic error."""
        with pytest.raises(GenericError):
            Context.from_yaml("a: 1\n")

    def test_other_formats_unaffected(self, missing_yaml_backend):
        """Test that other capabilities keep working."""
        assert Context.from_dict({"a": 1}).to_json() == '{"a":1}'
