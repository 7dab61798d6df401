"""Layer configuration files.

Layer lists live in a TOML document, either at the top level:

    layers = ["outdated-browser", "modal", "site-header"]

or under `[tool.cssmix]` when kept in `pyproject.toml`.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cssmix.layers import DEFAULT_LAYERS, Layers, make_layers

__all__ = ["load_layers", "parse_layers"]

logger = logging.getLogger(__name__)


def _table(data: dict[str, Any]) -> dict[str, Any]:
    tool = data.get("tool")
    if isinstance(tool, dict) and isinstance(tool.get("cssmix"), dict):
        return tool["cssmix"]
    return data


def parse_layers(text: str, source: str = "<string>") -> Layers:
    """Read the layer list out of TOML text.

    Raises:
        ValueError: The document is not valid TOML, or `layers` is not a list of unique strings.
    """
    try:
        data: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as error:
        raise ValueError(f"Invalid TOML in {source}: {error}") from error

    table = _table(data)
    if "layers" not in table:
        logger.debug("No layers in %s, using the defaults", source)
        return DEFAULT_LAYERS

    layers = table["layers"]
    if not isinstance(layers, list) or not all(isinstance(name, str) for name in layers):
        raise ValueError(f"`layers` in {source} must be a list of strings")
    return make_layers(layers)


def load_layers(path: str | Path | None = None) -> Layers:
    """Load the layer list from a TOML file, or the defaults when no file is given."""
    if path is None:
        return DEFAULT_LAYERS
    path = Path(path)
    logger.debug("Loading layers from %s", path)
    return parse_layers(path.read_text(encoding="utf-8"), str(path))
