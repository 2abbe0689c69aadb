"""JSON adapter backed by the standard library ``json`` module."""

import json
import logging

from ctxmap.types.errors import JsonError
from ctxmap.types.value import Value, from_parsed, jsonable

logger = logging.getLogger(__name__)


def dumps(data: dict[str, Value], pretty: bool = False) -> str:
    """Serializes a context snapshot to JSON text.

    Args:
        data: Snapshot returned by ``inner()``
        pretty: Two-space indented output when True, compact separators otherwise

    Returns:
        The JSON document

    Raises:
        JsonError: If a value cannot be encoded (non-finite float, bytes map key, ...)
    """
    try:
        if pretty:
            text = json.dumps(jsonable(data), indent=2, ensure_ascii=False, allow_nan=False)
        else:
            text = json.dumps(jsonable(data), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise JsonError(str(exc)) from exc
    logger.debug("Serialized %d entries to JSON", len(data))
    return text


def loads(text: str) -> dict[str, Value]:
    """Parses JSON text whose top level must be an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Rejected JSON input: %s", exc)
        raise JsonError(str(exc)) from exc
    if not isinstance(data, dict):
        raise JsonError(f"expected a JSON object at top level, got {type(data).__name__}")
    return {key: from_parsed(value, key) for key, value in data.items()}


def stringify(value: Value) -> str:
    """Deterministic compact JSON text for a single value."""
    try:
        return json.dumps(jsonable(value), separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise JsonError(str(exc)) from exc
