from __future__ import annotations

from cssmix.shapes import pseudo
from cssmix.style import (
    Declaration,
    Length,
    Node,
    Rule,
    UnsupportedOption,
    dimension,
    length,
    number,
)

__all__ = ["REM_BASE", "rem_of", "rem", "ratio_padding", "responsive_ratio"]

# Pixels per rem, assumes `html { font-size: 62.5%; }`
REM_BASE = 10


def _pixels(size: Length) -> float:
    value, unit = length(size)
    if unit != "px":
        raise UnsupportedOption("pixel size", size)
    return value


def rem_of(size: Length) -> str:
    """Rem equivalent of a pixel size, `rem_of(20) == "2rem"`."""
    return dimension(_pixels(size) / REM_BASE, "rem")


def rem(size: Length, property: str = "font-size") -> list[Declaration]:
    """Pixel fallback followed by the rem value for `property`."""
    return [
        Declaration(property, dimension(_pixels(size), "px")),
        Declaration(property, rem_of(size)),
    ]


def ratio_padding(x: float, y: float) -> str:
    """Top padding that gives a box an intrinsic `x:y` ratio."""
    for option, value in (("ratio width", x), ("ratio height", y)):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise UnsupportedOption(option, value)
    return f"{number((y / x) * 100)}%"


def responsive_ratio(x: float, y: float, pseudo_element: bool = False) -> list[Node]:
    """Intrinsic ratio box.

    Args
        x (float): Width factor.
        y (float): Height factor.
        pseudo_element (bool): Put the padding on a generated `::before` instead of the element itself.
    """
    padding = ratio_padding(x, y)
    if not pseudo_element:
        return [Declaration("padding-top", padding)]

    return [
        Rule(
            "&::before",
            [
                *pseudo({"position": "relative"}),
                Declaration("width", "100%"),
                Declaration("padding-top", padding),
            ],
        )
    ]
