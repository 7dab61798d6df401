from __future__ import annotations
from typing import Literal, TypedDict

from cssmix.style import (
    ColorFormat,
    Color,
    Declaration,
    Length,
    UnsupportedOption,
    dimension,
    length,
    round_half_up,
    with_defaults,
)

__all__ = [
    "Direction",
    "DIRECTIONS",
    "PseudoOptions",
    "PSEUDO_DEFAULTS",
    "pseudo",
    "triangle",
    "triangle_offset",
]

Direction = Literal["down", "up", "right", "left"]
DIRECTIONS: tuple[Direction, ...] = ("down", "up", "right", "left")

class PseudoOptions(TypedDict, total=False):
    display: str
    position: str
    content: str

PSEUDO_DEFAULTS: PseudoOptions = {
    "display": "block",
    "position": "absolute",
    "content": '""',
}

# direction => (transparent sides, colored side, margin side)
_TRIANGLE: dict[str, tuple[tuple[str, str], str, str]] = {
    "down": (("left", "right"), "top", "top"),
    "up": (("left", "right"), "bottom", "bottom"),
    "right": (("top", "bottom"), "left", "right"),
    "left": (("top", "bottom"), "right", "left"),
}


def pseudo(options: PseudoOptions | None = None) -> list[Declaration]:
    """Declarations every `::before`/`::after` needs to render."""
    opts = with_defaults(PSEUDO_DEFAULTS, options)
    return [
        Declaration("content", opts["content"]),
        Declaration("display", opts["display"]),
        Declaration("position", opts["position"]),
    ]


def _direction(direction: str) -> Direction:
    if direction not in _TRIANGLE:
        raise UnsupportedOption("direction", direction, DIRECTIONS)
    return direction  # type: ignore[return-value]


def triangle_offset(direction: Direction, size: Length = 6) -> str:
    """Negative margin pulling the triangle onto the edge of its parent.

    Vertical triangles are offset by `round(size / 2.5)`, horizontal ones by their full size.
    """
    direction = _direction(direction)
    value, unit = length(size)
    if value <= 0:
        raise UnsupportedOption("triangle size", size)
    if direction in ("down", "up"):
        return dimension(-round_half_up(value / 2.5), unit)
    return dimension(-value, unit)


def triangle(
    color: ColorFormat,
    direction: Direction,
    size: Length = 6,
    position: str = "absolute",
    round: bool = False,
) -> list[Declaration]:
    """Arrow drawn with the border trick, meant to be applied to a pseudo element.

    Raises:
        UnsupportedOption: `direction` is not one of `down`, `up`, `right`, `left`, or `size`
            is not positive.
    """
    direction = _direction(direction)
    value, unit = length(size)
    border = dimension(value, unit)
    transparent, colored, margin = _TRIANGLE[direction]

    decls = [
        *pseudo({"position": position}),
        Declaration("width", "0"),
        Declaration("height", "0"),
    ]
    if round:
        decls.append(Declaration("border-radius", "3px"))

    decls.extend(Declaration(f"border-{side}", f"{border} solid transparent") for side in transparent)
    decls.append(Declaration(f"border-{colored}", f"{border} solid {Color.new(color)}"))
    decls.append(Declaration(f"margin-{margin}", triangle_offset(direction, size)))
    return decls
