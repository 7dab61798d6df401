"""Named z-index layers.

Layers are listed once, in order, and referred to by name everywhere else so that
no magic `z-index` integers end up scattered around a stylesheet:

    >>> resolve_layer("site-header", DEFAULT_LAYERS)
    3

A layer at 1-indexed position `p` in a list of `n` layers resolves to `n - p + 1`.
"""
from __future__ import annotations
from collections.abc import Iterable, Sequence
import logging

from cssmix.style import Declaration

__all__ = ["Layers", "DEFAULT_LAYERS", "make_layers", "resolve_layer", "z_index"]

logger = logging.getLogger(__name__)

Layers = tuple[str, ...]

DEFAULT_LAYERS: Layers = (
    "outdated-browser",
    "modal",
    "site-header",
    "page-wrapper",
    "site-footer",
)


def make_layers(names: Iterable[str]) -> Layers:
    """Build an immutable layer list.

    Raises:
        ValueError: A layer name is empty or listed more than once.
    """
    layers = tuple(names)
    seen = set()
    for name in layers:
        if not isinstance(name, str) or name == "":
            raise ValueError(f"Layer names must be non-empty strings, found {name!r}")
        if name in seen:
            raise ValueError(f"Duplicate layer name {name!r}")
        seen.add(name)
    return layers


def resolve_layer(name: str, layers: Sequence[str] = DEFAULT_LAYERS) -> int | None:
    """Stacking value for the layer `name`, or `None` with a warning when it isn't listed."""
    if name not in layers:
        logger.warning(
            'There is no item "%s" in this list; choose one of: %s',
            name,
            ", ".join(layers),
        )
        return None
    return len(layers) - (layers.index(name) + 1) + 1


def z_index(name: str, layers: Sequence[str] = DEFAULT_LAYERS) -> list[Declaration]:
    if (value := resolve_layer(name, layers)) is None:
        return []
    return [Declaration("z-index", value)]
