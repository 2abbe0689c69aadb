"""Core types: the Context contract, the Value union and the error taxonomy.

Key components:
- BaseContext: abstract contract (insert, get, extend, inner) plus format export
- Context: default pydantic-backed implementation
- Value: the union of storable values
- ContextError and its subclasses: one per failure family

Example:
    from ctxmap.types import Context

    ctx = Context.new()
    ctx.insert("user_id", "12345")
    ctx.to_json()  # '{"user_id":"12345"}'
"""

from .context import BaseContext, Context
from .errors import (
    ContextError,
    FormatUnavailableError,
    GenericError,
    HeadersError,
    JsonError,
    TomlError,
    YamlError,
)
from .value import Scalar, Value

__all__ = [
    "BaseContext",
    "Context",
    "ContextError",
    "FormatUnavailableError",
    "GenericError",
    "HeadersError",
    "JsonError",
    "Scalar",
    "TomlError",
    "Value",
    "YamlError",
]
