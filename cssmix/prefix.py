"""Vendor prefixed pass-through helpers.

Each helper emits the prefixed variants first and the standard property last so the
standard one wins wherever it is supported.
"""
from __future__ import annotations
from collections.abc import Iterable

from cssmix.style import AtRule, Content, Declaration, UnsupportedOption, expand, number

__all__ = [
    "VENDORS",
    "prefixed",
    "keyframes",
    "animation",
    "transition",
    "appearance",
    "opacity",
    "antialias",
]

VENDORS = ("webkit", "moz", "ms", "o")


def prefixed(property: str, value: str, prefixes: Iterable[str] = VENDORS) -> list[Declaration]:
    return [
        *(Declaration(f"-{prefix}-{property}", value) for prefix in prefixes),
        Declaration(property, value),
    ]


def keyframes(name: str, content: Content) -> list[AtRule]:
    """The same keyframe steps under every vendor's `@keyframes` spelling."""
    if name.strip() == "":
        raise UnsupportedOption("animation name", name)
    steps = expand(content)
    return [
        *(AtRule(f"-{prefix}-keyframes", name, list(steps)) for prefix in VENDORS),
        AtRule("keyframes", name, list(steps)),
    ]


def animation(value: str) -> list[Declaration]:
    return prefixed("animation", value)


def transition(*values: str) -> list[Declaration]:
    if len(values) == 0:
        raise UnsupportedOption("transition", values)
    return prefixed("transition", ", ".join(values))


def appearance(value: str = "none") -> list[Declaration]:
    return prefixed("appearance", value, ("webkit", "moz"))


def opacity(value: float) -> list[Declaration]:
    """`opacity` plus the old IE alpha filter."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 1:
        raise UnsupportedOption("opacity", value)
    return [
        Declaration("opacity", number(value)),
        Declaration("filter", f"alpha(opacity={number(value * 100)})"),
    ]


def antialias() -> list[Declaration]:
    return [
        Declaration("-webkit-font-smoothing", "antialiased"),
        Declaration("-moz-osx-font-smoothing", "grayscale"),
    ]
