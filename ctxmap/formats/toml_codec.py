"""TOML adapter: ``tomllib`` reads, ``tomli-w`` writes.

Nested maps become TOML tables and lists become arrays. TOML has no null and
only string keys, so contexts holding ``None`` or non-string nested keys
cannot be written.
"""

import logging
import tomllib
from typing import Any

import tomli_w

from ctxmap.types.errors import TomlError
from ctxmap.types.value import Value, from_parsed, jsonable

logger = logging.getLogger(__name__)


def _check(value: Any, path: str) -> None:
    if value is None:
        raise TomlError(f"unsupported None value at {path}")
    if isinstance(value, list):
        for i, item in enumerate(value):
            _check(item, f"{path}[{i}]")
    elif isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise TomlError(f"map keys must be strings, got {type(k).__name__!r} at {path}")
            _check(v, f"{path}.{k}")


def dumps(data: dict[str, Value], pretty: bool = False) -> str:
    """Serializes a context snapshot to a TOML document.

    Args:
        data: Snapshot returned by ``inner()``
        pretty: Write strings containing newlines as multi-line strings

    Raises:
        TomlError: If a value has no TOML representation
    """
    for key, value in data.items():
        _check(value, key)
    try:
        text = tomli_w.dumps(jsonable(data), multiline_strings=pretty)
    except (TypeError, ValueError) as exc:
        raise TomlError(str(exc)) from exc
    logger.debug("Serialized %d entries to TOML", len(data))
    return text


def loads(text: str) -> dict[str, Value]:
    """Parses a TOML document; dates and times become ISO-8601 strings."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        logger.debug("Rejected TOML input: %s", exc)
        raise TomlError(str(exc)) from exc
    return {key: from_parsed(value, key) for key, value in data.items()}
