"""ctxmap: a keyed container of typed values that travels across formats.

A Context maps string keys to dynamically-typed values (null, bool, int,
float, str, bytes, lists and nested maps) and converts to and from JSON,
TOML and YAML through one contract, or projects itself onto HTTP headers.

Capabilities are optional and loaded on first use:
- json: always available (standard library)
- toml: needs tomli-w (``pip install pyctxmap[toml]``)
- yaml: needs PyYAML (``pip install pyctxmap[yaml]``)
- headers: needs httpx (``pip install pyctxmap[headers]``)

Example:
    from ctxmap import Context

    ctx = Context.new()
    ctx.insert("name", "Alice")
    ctx.insert("age", 30)

    text = ctx.to_json(pretty=True)
    same = Context.from_json(text)
    assert same.get("age") == 30
"""

from .types import (
    BaseContext,
    Context,
    ContextError,
    FormatUnavailableError,
    GenericError,
    HeadersError,
    JsonError,
    TomlError,
    Value,
    YamlError,
)
from .formats import available_formats  # isort: skip

__all__ = [
    "BaseContext",
    "Context",
    "ContextError",
    "FormatUnavailableError",
    "GenericError",
    "HeadersError",
    "JsonError",
    "TomlError",
    "Value",
    "YamlError",
    "available_formats",
]
