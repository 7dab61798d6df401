from __future__ import annotations

from cssmix.gradients import is_direction, legacy_direction, linear_gradient, normalize_gradient
from cssmix.layers import DEFAULT_LAYERS, make_layers, resolve_layer, z_index
from cssmix.layout import (
    grid,
    grid_fallback,
    grid_item,
    push_auto,
    spacing,
    truncate,
    visibility,
    visually_hidden,
)
from cssmix.media import breakpoint, breakpoint_query, input_placeholder, mq, selection, supports
from cssmix.prefix import animation, antialias, appearance, keyframes, opacity, prefixed, transition
from cssmix.shapes import pseudo, triangle, triangle_offset
from cssmix.sheet import Stylesheet
from cssmix.style import AtRule, Color, Declaration, Rule, UnsupportedOption
from cssmix.units import ratio_padding, rem, rem_of, responsive_ratio

__version__ = "0.1.0"

""" # Helpers

+ Layers:
    - z-index by layer name
+ Units:
    - rem with px fallback
    - intrinsic ratio boxes
+ Shapes:
    - pseudo element preamble
    - border triangles
+ Gradients:
    - linear gradient with solid + -webkit- fallbacks
+ Media:
    - breakpoints, @supports, ::selection, placeholders
+ Prefix:
    - keyframes, animation, transition, appearance, opacity, antialiasing
+ Layout:
    - grid shims, spacing, visually hidden, truncation
"""

__all__ = [
    "__version__",
    "AtRule",
    "Color",
    "Declaration",
    "Rule",
    "Stylesheet",
    "UnsupportedOption",
    "DEFAULT_LAYERS",
    "make_layers",
    "resolve_layer",
    "z_index",
    "rem",
    "rem_of",
    "ratio_padding",
    "responsive_ratio",
    "pseudo",
    "triangle",
    "triangle_offset",
    "is_direction",
    "normalize_gradient",
    "legacy_direction",
    "linear_gradient",
    "breakpoint",
    "breakpoint_query",
    "mq",
    "supports",
    "selection",
    "input_placeholder",
    "prefixed",
    "keyframes",
    "animation",
    "transition",
    "appearance",
    "opacity",
    "antialias",
    "grid",
    "grid_item",
    "grid_fallback",
    "push_auto",
    "spacing",
    "visually_hidden",
    "visibility",
    "truncate",
]
