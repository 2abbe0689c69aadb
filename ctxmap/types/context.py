"""Context contract and its default implementation.

This module provides BaseContext, the abstract contract every context
container implements (insert, get, extend, inner), and Context, the default
pydantic-backed container. The contract supplies the format adapters: any
subclass that implements the five primitive operations can be exported to and
loaded from JSON, TOML, YAML and HTTP headers.
"""

import abc
import copy
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Self

import pydantic

from ctxmap.formats import TEXT_FORMATS, get_codec
from ctxmap.types.errors import GenericError
from ctxmap.types.value import Value, ensure_key, ensure_value

if TYPE_CHECKING:
    import httpx


class BaseContext(abc.ABC):
    """Contract for a keyed container of Values with format export.

    Subclasses implement new(), insert(), get(), extend() and inner(); the
    export and import methods are built on top of those and work unchanged
    for every implementation.

    Example:
        class DictContext(BaseContext):
            def __init__(self):
                self._data = {}

            @classmethod
            def new(cls):
                return cls()

            def insert(self, key, value):
                self._data[key] = value

            def get(self, key):
                return self._data.get(key)

            def extend(self, data):
                self._data.update(data)

            def inner(self):
                return dict(self._data)

        yaml_text = DictContext.from_json('{"a": 1}').to_yaml()
    """

    # ------------------------------------------------------------------
    # Primitive operations
    # ------------------------------------------------------------------
    @classmethod
    @abc.abstractmethod
    def new(cls) -> Self:
        """Returns an empty context."""

    @abc.abstractmethod
    def insert(self, key: str, value: Any) -> None:
        """Inserts or overwrites a single entry."""

    @abc.abstractmethod
    def get(self, key: str) -> Value | None:
        """Returns the value stored under key, or None when absent."""

    @abc.abstractmethod
    def extend(self, data: Mapping[str, Any]) -> None:
        """Merges a mapping into the context, overwriting on key collision."""

    @abc.abstractmethod
    def inner(self) -> dict[str, Value]:
        """Returns a snapshot copy of every entry."""

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Builds a context holding the entries of a mapping."""
        ctx = cls.new()
        ctx.extend(data)
        return ctx

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------
    def export(self, fmt: str, pretty: bool = False) -> str:
        """Serializes the context to one of the text formats.

        Args:
            fmt: "json", "toml" or "yaml"
            pretty: Human-readable output where the format distinguishes it

        Returns:
            The serialized document

        Raises:
            GenericError: If fmt is not a text format
            FormatUnavailableError: If the format's backend is not installed
            JsonError, TomlError, YamlError: If serialization fails
        """
        if fmt not in TEXT_FORMATS:
            raise GenericError(f"unknown text format {fmt!r}, expected one of {list(TEXT_FORMATS)}")
        return get_codec(fmt).dumps(self.inner(), pretty)  # type: ignore[no-any-return]

    @classmethod
    def from_format(cls, fmt: str, text: str) -> Self:
        """Parses a document in one of the text formats into a new context.

        The context is only built once the whole document has been parsed and
        normalised, so a failure never yields a partially populated context.

        Raises:
            GenericError: If fmt is not a text format
            FormatUnavailableError: If the format's backend is not installed
            JsonError, TomlError, YamlError: If the text is invalid or not a mapping
        """
        if fmt not in TEXT_FORMATS:
            raise GenericError(f"unknown text format {fmt!r}, expected one of {list(TEXT_FORMATS)}")
        return cls.from_dict(get_codec(fmt).loads(text))

    def to_json(self, pretty: bool = False) -> str:
        return self.export("json", pretty)

    @classmethod
    def from_json(cls, text: str) -> Self:
        return cls.from_format("json", text)

    def to_toml(self, pretty: bool = False) -> str:
        return self.export("toml", pretty)

    @classmethod
    def from_toml(cls, text: str) -> Self:
        return cls.from_format("toml", text)

    def to_yaml(self, pretty: bool = True) -> str:
        # block style by default; pretty=False gives a single flow mapping
        return self.export("yaml", pretty)

    @classmethod
    def from_yaml(cls, text: str) -> Self:
        return cls.from_format("yaml", text)

    # ------------------------------------------------------------------
    # Transport binding
    # ------------------------------------------------------------------
    def to_headers(self, prefix: str = "") -> "httpx.Headers":
        """Projects every entry onto an HTTP header.

        Example:
            ctx = Context.from_dict({"user": "alice", "retries": 3})
            response = httpx.get(url, headers=ctx.to_headers(prefix="x-ctx-"))
        """
        return get_codec("headers").to_headers(self.inner(), prefix)  # type: ignore[no-any-return]

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], prefix: str = "") -> Self:
        """Builds a context from the headers whose name starts with prefix."""
        return cls.from_dict(get_codec("headers").from_headers(headers, prefix))


class Context(pydantic.BaseModel, BaseContext):
    """Default context: a validated mapping from string keys to Values.

    Entries are kept in insertion order; inner() and every export list them
    sorted by key. Values are checked on the way in, so an unsupported value
    raises GenericError and leaves the context untouched.

    Example:
        ctx = Context.new()
        ctx.insert("name", "Alice")
        ctx.extend({"age": 30, "tags": ["admin"]})

        ctx.get("age")          # 30
        ctx.to_json(pretty=True)
        Context.from_yaml("name: Bob\\n").get("name")  # "Bob"
    """

    model_config = pydantic.ConfigDict(extra="forbid")

    data: dict[str, Any] = pydantic.Field(default_factory=dict)

    @pydantic.field_validator("data", mode="before")  # type: ignore[misc]
    def validate_data(cls, v: Any) -> dict[str, Value]:
        """Applies the Value rules to every entry.

        Raises:
            GenericError: If v is not a mapping, a key is not a string, or a value
                is not a Value
        """
        if not isinstance(v, Mapping):
            raise GenericError(f"context data must be a mapping, got {type(v).__name__!r}")
        return {ensure_key(k): ensure_value(val, k) for k, val in v.items()}

    @classmethod
    def new(cls) -> Self:
        return cls()

    def insert(self, key: str, value: Any) -> None:
        """Inserts or overwrites a single entry.

        Raises:
            GenericError: If key is not a string or value is not a Value
        """
        self.data[ensure_key(key)] = ensure_value(value, key)

    def get(self, key: str) -> Value | None:
        return self.data.get(key)

    def extend(self, data: Mapping[str, Any]) -> None:
        """Merges a mapping into the context, overwriting on key collision.

        Every entry is validated before any is written.

        Raises:
            GenericError: If data is not a mapping, or any key or value is invalid
        """
        if not isinstance(data, Mapping):
            raise GenericError(f"extend expects a mapping, got {type(data).__name__!r}")
        validated = {ensure_key(k): ensure_value(v, k) for k, v in data.items()}
        self.data.update(validated)

    def inner(self) -> dict[str, Value]:
        return copy.deepcopy(dict(sorted(self.data.items())))

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)
