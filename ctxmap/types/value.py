"""The Value union and the rules for what a context may store.

A Value is one of ``None``, ``bool``, ``int``, ``float``, ``str``, ``bytes``,
a list of Values, or a dict mapping hashable scalars to Values. Tuples and
bytearrays are accepted on input and normalised to lists and bytes.
"""

import datetime
from collections.abc import Mapping
from typing import Any, TypeAlias

from ctxmap.types.errors import GenericError

Scalar: TypeAlias = None | bool | int | float | str | bytes
Value: TypeAlias = Scalar | list["Value"] | dict[Scalar, "Value"]

_SCALAR_TYPES = (type(None), bool, int, float, str, bytes)
_TEMPORAL_TYPES = (datetime.datetime, datetime.date, datetime.time)


def _join(path: str, part: Any) -> str:
    return f"{path}[{part!r}]" if path else repr(part)


def _convert(value: Any, path: str, temporal: bool) -> Any:
    if isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if temporal and isinstance(value, _TEMPORAL_TYPES):
        return value.isoformat()
    if isinstance(value, list | tuple):
        return [_convert(item, _join(path, i), temporal) for i, item in enumerate(value)]
    if isinstance(value, Mapping):
        out = {}
        for k, v in value.items():
            if temporal and isinstance(k, _TEMPORAL_TYPES):
                k = k.isoformat()
            elif not isinstance(k, _SCALAR_TYPES):
                raise GenericError(f"unsupported map key type {type(k).__name__!r} at {path or '<root>'}")
            out[k] = _convert(v, _join(path, k), temporal)
        return out
    raise GenericError(f"unsupported value type {type(value).__name__!r} at {path or '<root>'}")


def ensure_value(value: Any, path: str = "") -> Value:
    """Validates a caller-supplied value and returns its normalised form.

    Args:
        value: Candidate value
        path: Location used in error messages (the context key)

    Returns:
        The value with tuples turned into lists and bytearrays into bytes

    Raises:
        GenericError: If the value (or anything nested in it) is not a Value
    """
    return _convert(value, path, temporal=False)


def from_parsed(value: Any, path: str = "") -> Value:
    """Normalises data produced by a format parser.

    Same rules as ensure_value, except that dates, times and datetimes
    (produced by the TOML and YAML parsers) become ISO-8601 strings, both as
    values and as map keys.
    """
    return _convert(value, path, temporal=True)


def ensure_key(key: Any) -> str:
    """Checks that a top-level context key is a string."""
    if not isinstance(key, str):
        raise GenericError(f"context keys must be str, got {type(key).__name__!r}")
    return key


def jsonable(value: Value) -> Any:
    """Rewrites a Value into the subset JSON and TOML can carry.

    Bytes become lists of integers. Everything else is returned unchanged.
    """
    if isinstance(value, bytes):
        return list(value)
    if isinstance(value, list):
        return [jsonable(item) for item in value]
    if isinstance(value, dict):
        return {k: jsonable(v) for k, v in value.items()}
    return value
