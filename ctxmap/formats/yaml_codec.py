"""YAML adapter backed by PyYAML's safe loader and dumper."""

import logging
from typing import Any

import yaml

from ctxmap.types.errors import GenericError, YamlError
from ctxmap.types.value import Value, from_parsed

logger = logging.getLogger(__name__)

# plain scalars YAML 1.1 would otherwise resolve to something other than text
_RESOLVED_TAGS = frozenset(
    f"tag:yaml.org,2002:{name}" for name in ("bool", "int", "float", "null", "timestamp")
)


class _ContextLoader(yaml.SafeLoader):
    """Safe loader that reads plain top-level keys as text.

    Keeps ``on: push``, ``yes: 1`` or ``2020-01-01: x`` usable as context keys
    instead of turning them into bools, ints or dates.
    """

    def construct_document(self, node: yaml.Node) -> Any:
        if isinstance(node, yaml.MappingNode):
            for key_node, _ in node.value:
                if isinstance(key_node, yaml.ScalarNode) and key_node.style is None and key_node.tag in _RESOLVED_TAGS:
                    key_node.tag = "tag:yaml.org,2002:str"
        return super().construct_document(node)


def dumps(data: dict[str, Value], pretty: bool = True) -> str:
    """Serializes a context snapshot to a YAML document.

    Args:
        data: Snapshot returned by ``inner()``
        pretty: Block style when True, single flow-style mapping when False

    Raises:
        YamlError: If the dumper cannot represent a value
    """
    try:
        text = yaml.safe_dump(
            data,
            default_flow_style=not pretty,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise YamlError(str(exc)) from exc
    logger.debug("Serialized %d entries to YAML", len(data))
    return text


def loads(text: str) -> dict[str, Value]:
    """Parses a YAML document whose top level must be a mapping.

    An empty document yields an empty mapping.
    """
    try:
        data: Any = yaml.load(text, Loader=_ContextLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        logger.debug("Rejected YAML input: %s", exc)
        raise YamlError(str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise YamlError(f"expected a mapping at top level, got {type(data).__name__}")
    for key in data:
        if not isinstance(key, str):
            raise YamlError(f"top-level keys must be strings, got {type(key).__name__!r}")
    try:
        return {key: from_parsed(value, key) for key, value in data.items()}
    except GenericError as exc:
        raise YamlError(exc.message) from exc
