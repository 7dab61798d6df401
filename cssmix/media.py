from __future__ import annotations
import logging
from typing import Literal

from cssmix.style import (
    AtRule,
    ColorFormat,
    Color,
    Content,
    Declaration,
    Length,
    Node,
    Rule,
    UnsupportedOption,
    dimension,
    expand,
    length,
)

__all__ = [
    "Breakpoint",
    "BREAKPOINTS",
    "LEGACY_BREAKPOINTS",
    "PLACEHOLDER_SELECTORS",
    "breakpoint_query",
    "breakpoint",
    "mq",
    "supports",
    "selection",
    "input_placeholder",
]

logger = logging.getLogger(__name__)

Breakpoint = Literal["xs", "sm", "md", "lg"]

BREAKPOINTS: dict[str, tuple[Literal["min", "max"], int]] = {
    "xs": ("max", 767),
    "sm": ("min", 768),
    "md": ("min", 992),
    "lg": ("min", 1200),
}

# `xs` and `sm` both include 767px
LEGACY_BREAKPOINTS: dict[str, tuple[Literal["min", "max"], int]] = {
    **BREAKPOINTS,
    "sm": ("min", 767),
}

PLACEHOLDER_SELECTORS = (
    "&.placeholder",
    "&:-moz-placeholder",
    "&::-moz-placeholder",
    "&:-ms-input-placeholder",
    "&::-webkit-input-placeholder",
)


def breakpoint_query(token: Breakpoint, legacy: bool = False) -> str:
    """Media query condition for a breakpoint class, e.g. `md` => `(min-width: 992px)`.

    Args
        token (Breakpoint): One of `xs`, `sm`, `md`, `lg`.
        legacy (bool): Use the legacy thresholds where `xs` and `sm` overlap at 767px.
    """
    table = LEGACY_BREAKPOINTS if legacy else BREAKPOINTS
    if token not in table:
        raise UnsupportedOption("breakpoint", token, table.keys())
    if legacy and token in ("xs", "sm"):
        logger.warning("Legacy breakpoints xs and sm both match a 767px wide viewport")
    kind, width = table[token]
    return f"({kind}-width: {width}px)"


def breakpoint(token: Breakpoint, content: Content, legacy: bool = False) -> AtRule:
    return AtRule("media", breakpoint_query(token, legacy), expand(content))


def mq(width: Length, content: Content, type: Literal["min", "max"] = "min") -> AtRule:
    """Arbitrary `min-width`/`max-width` media query."""
    if type not in ("min", "max"):
        raise UnsupportedOption("media query type", type, ("min", "max"))
    return AtRule("media", f"({type}-width: {dimension(*length(width))})", expand(content))


def supports(condition: str, content: Content) -> AtRule:
    """Wrap content in `@supports`. Bare conditions get their parentheses added."""
    condition = condition.strip()
    if not condition.startswith(("(", "not ", "selector(")):
        condition = f"({condition})"
    return AtRule("supports", condition, expand(content))


def selection(
    content: Content | None = None,
    color: ColorFormat | None = None,
    background: ColorFormat | None = None,
) -> list[Node]:
    """Text selection styling, repeated for the `-moz-` pseudo element."""
    decls: list[Node] = []
    if color is not None:
        decls.append(Declaration("color", Color.new(color)))
    if background is not None:
        decls.append(Declaration("background", Color.new(background)))
    decls.extend(expand(content))
    return [Rule("&::selection", list(decls)), Rule("&::-moz-selection", list(decls))]


def input_placeholder(content: Content) -> list[Node]:
    # Kept as separate rules, an unknown pseudo element invalidates a whole selector list
    nodes = expand(content)
    return [Rule(selector, list(nodes)) for selector in PLACEHOLDER_SELECTORS]
