"""Format adapters and the registry that gates them.

Each capability lives in its own module and depends on one backend library:

- json: ``ctxmap.formats.json_codec`` (standard library ``json``)
- toml: ``ctxmap.formats.toml_codec`` (``tomllib`` + ``tomli-w``)
- yaml: ``ctxmap.formats.yaml_codec`` (``PyYAML``)
- headers: ``ctxmap.formats.headers`` (``httpx``)

Adapters are imported on first use, so a capability whose backend is not
installed costs nothing until somebody asks for it, at which point
FormatUnavailableError is raised.

Example:
    from ctxmap.formats import available_formats, get_codec

    if "yaml" in available_formats():
        text = get_codec("yaml").dumps({"name": "Alice"}, pretty=True)
"""

import importlib
import importlib.util
import logging
from types import ModuleType

from ctxmap.types.errors import FormatUnavailableError, GenericError

logger = logging.getLogger(__name__)

# capability -> (adapter module, backend distribution install hint, backend import name)
_CAPABILITIES: dict[str, tuple[str, str, str]] = {
    "json": ("ctxmap.formats.json_codec", "", "json"),
    "toml": ("ctxmap.formats.toml_codec", "toml", "tomli_w"),
    "yaml": ("ctxmap.formats.yaml_codec", "yaml", "yaml"),
    "headers": ("ctxmap.formats.headers", "headers", "httpx"),
}

TEXT_FORMATS = ("json", "toml", "yaml")


def _backend_installed(backend: str) -> bool:
    return importlib.util.find_spec(backend) is not None


def available_formats() -> list[str]:
    """Lists the capabilities whose backend library is installed."""
    return [name for name, (_, _, backend) in _CAPABILITIES.items() if _backend_installed(backend)]


def get_codec(name: str) -> ModuleType:
    """Imports and returns the adapter module for a capability.

    Args:
        name: Capability name (json, toml, yaml or headers)

    Returns:
        The adapter module

    Raises:
        GenericError: If the capability name is unknown
        FormatUnavailableError: If the capability's backend is not installed
    """
    try:
        module, extra, backend = _CAPABILITIES[name]
    except KeyError:
        raise GenericError(f"unknown format {name!r}, expected one of {sorted(_CAPABILITIES)}") from None
    if not _backend_installed(backend):
        hint = f" (install pyctxmap[{extra}])" if extra else ""
        raise FormatUnavailableError(f"format {name!r} requires {backend!r} which is not installed{hint}")
    logger.debug("Loading %s adapter from %s", name, module)
    return importlib.import_module(module)


__all__ = ["TEXT_FORMATS", "available_formats", "get_codec"]
