"""Projection of context entries onto HTTP header fields.

Headers only carry text, so string values are written verbatim and every
other value is written as its compact JSON encoding:

    {"user": "alice", "retries": 3, "tags": ["a", "b"]}
    ->  user: alice
        retries: 3
        tags: ["a","b"]
"""

import logging
import re
from collections.abc import Mapping

import httpx

from ctxmap.formats import json_codec
from ctxmap.types.errors import GenericError, HeadersError, JsonError
from ctxmap.types.value import Value

logger = logging.getLogger(__name__)

# RFC 7230 section 3.2.6 token
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_CHARS = ("\r", "\n", "\x00")


def display(value: Value) -> str:
    """Returns the header text for a value.

    Raises:
        GenericError: If the value has no textual form (e.g. a NaN nested in a map)
    """
    if isinstance(value, str):
        return value
    try:
        return json_codec.stringify(value)
    except JsonError as exc:
        raise GenericError(f"value has no header representation: {exc.message}") from exc


def to_headers(data: dict[str, Value], prefix: str = "") -> httpx.Headers:
    """Builds a header collection from a context snapshot.

    Args:
        data: Snapshot returned by ``inner()``
        prefix: Text prepended to every header name, e.g. ``"x-ctx-"``

    Returns:
        UTF-8 encoded headers, one per context entry

    Raises:
        HeadersError: If a name is not a valid token or a value contains CR, LF or NUL
    """
    headers = httpx.Headers(encoding="utf-8")
    for key, value in data.items():
        name = f"{prefix}{key}"
        if not _TOKEN.fullmatch(name):
            raise HeadersError(f"invalid header name {name!r}")
        text = display(value)
        if any(ch in text for ch in _FORBIDDEN_CHARS):
            raise HeadersError(f"invalid header value for {name!r}: contains a control character")
        headers[name] = text
    logger.debug("Projected %d entries onto headers", len(data))
    return headers


def from_headers(headers: Mapping[str, str], prefix: str = "") -> dict[str, str]:
    """Extracts context entries from a header collection.

    Only headers whose name starts with ``prefix`` (compared case-insensitively)
    are kept, with the prefix stripped. Names come back lower-cased and values
    stay strings.
    """
    if not isinstance(headers, httpx.Headers):
        headers = httpx.Headers(headers, encoding="utf-8")
    prefix = prefix.lower()
    data = {}
    for name, value in headers.items():
        if name.startswith(prefix) and len(name) > len(prefix):
            data[name[len(prefix) :]] = value
    return data
