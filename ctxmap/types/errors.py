"""Error taxonomy for context manipulation and export.

Every failure raised by ctxmap is a ContextError. Callers either surface
``str(err)`` verbatim or branch on the subclass (or its ``kind``) to tell a
format failure from a generic one:

    try:
        ctx = Context.from_json(payload)
    except JsonError as exc:
        log.warning("bad payload: %s", exc.message)
"""

from typing import ClassVar


class ContextError(Exception):
    """Base class for all ctxmap errors.

    Attributes:
        message: Opaque diagnostic text, usually produced by the format backend
        kind: Short tag naming the error family
    """

    kind: ClassVar[str] = "generic"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class GenericError(ContextError):
    """Raised for failures not tied to a specific format."""


class FormatUnavailableError(GenericError):
    """Raised when a format's backend library is not installed."""


class JsonError(ContextError):
    """Raised when JSON parsing or serialization fails."""

    kind = "json"


class TomlError(ContextError):
    """Raised when TOML parsing or serialization fails."""

    kind = "toml"


class YamlError(ContextError):
    """Raised when YAML parsing or serialization fails."""

    kind = "yaml"


class HeadersError(ContextError):
    """Raised when a context entry cannot be projected onto a header."""

    kind = "headers"
