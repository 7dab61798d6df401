"""Linear gradients with a solid fallback and a `-webkit-` prefixed variant.

The prefixed syntax predates the `to <side>` keywords and measures angles from the
east, counter-clockwise, so the direction has to be translated for it:

    to top    => bottom
    45deg     => 45deg   (90deg - 45deg)
    180deg    => -90deg
"""
from __future__ import annotations
import logging

from cssmix.css.lexer import CSSParseError
from cssmix.css.parser import Parse, serialize, strip
from cssmix.css.tokens import Dimension, Ident, Whitespace
from cssmix.style import Color, ColorFormat, Declaration, UnsupportedOption, number

__all__ = [
    "DEFAULT_DIRECTION",
    "LEGACY_KEYWORDS",
    "is_direction",
    "normalize_gradient",
    "legacy_direction",
    "linear_gradient",
]

logger = logging.getLogger(__name__)

DEFAULT_DIRECTION = "180deg"

LEGACY_KEYWORDS: dict[str, str] = {
    "to top": "bottom",
    "to top right": "bottom left",
    "to right top": "left bottom",
    "to right": "left",
    "to bottom right": "top left",
    "to right bottom": "left top",
    "to bottom": "top",
    "to bottom left": "top right",
    "to left bottom": "right top",
    "to left": "right",
    "to left top": "right bottom",
    "to top left": "bottom right",
}


def _angle(value: str) -> Dimension | None:
    try:
        component = Parse.parse_component_value(value)
    except CSSParseError:
        return None
    if isinstance(component, Dimension) and component.is_angle:
        return component
    return None


def _keyword(value: str) -> str | None:
    try:
        components = Parse.parse_component_values(value)
    except CSSParseError:
        return None
    words = [c for c in components if not isinstance(c, Whitespace)]
    if not all(isinstance(word, Ident) for word in words):
        return None
    keyword = " ".join(word.raw.lower() for word in words)
    return keyword if keyword in LEGACY_KEYWORDS else None


def is_direction(value: object) -> bool:
    """Whether `value` is an angle (`deg`, `grad`, `turn`, `rad`) or a `to <side>` keyword."""
    if not isinstance(value, str):
        return False
    return _angle(value) is not None or _keyword(value) is not None


def _split(arg: str | ColorFormat) -> list[str]:
    if isinstance(arg, tuple):
        return [Color.new(arg)]
    if not isinstance(arg, str):
        raise UnsupportedOption("gradient argument", arg)
    try:
        stops = [serialize(stop) for stop in Parse.parse_comma_separated(arg)]
    except CSSParseError as error:
        raise UnsupportedOption("gradient argument", arg) from error
    if len(stops) == 0 or "" in stops:
        raise UnsupportedOption("gradient color stop", arg)
    return stops


def normalize_gradient(*args: str | ColorFormat) -> tuple[str, list[str]]:
    """Split gradient arguments into a direction and its color stops.

    When the first argument isn't a direction it is the first color stop and the
    direction defaults to `180deg` (top to bottom).
    """
    values = [value for arg in args for value in _split(arg)]
    if len(values) > 0 and is_direction(values[0]):
        direction, stops = _keyword(values[0]) or values[0], values[1:]
    else:
        direction, stops = DEFAULT_DIRECTION, values

    if len(stops) == 0:
        raise UnsupportedOption("gradient color stops", list(args))
    return direction, stops


def legacy_direction(value: str) -> str:
    """Direction in the syntax of the prefixed `-webkit-linear-gradient`."""
    if (keyword := _keyword(value)) is not None:
        return LEGACY_KEYWORDS[keyword]
    if (angle := _angle(value)) is not None:
        return f"{number(90 - angle.degrees())}deg"
    raise UnsupportedOption("gradient direction", value, ["<angle>", *LEGACY_KEYWORDS])


def _first_color(stop: str) -> str:
    components = strip(Parse.parse_component_values(stop))
    return str(components[0])


def linear_gradient(*args: str | ColorFormat) -> list[Declaration]:
    """Solid first color, prefixed gradient, then the standard gradient."""
    direction, stops = normalize_gradient(*args)
    joined = ", ".join(stops)
    logger.debug("linear-gradient direction=%s stops=%s", direction, stops)
    return [
        Declaration("background", _first_color(stops[0])),
        Declaration("background", f"-webkit-linear-gradient({legacy_direction(direction)}, {joined})"),
        Declaration("background", f"linear-gradient({direction}, {joined})"),
    ]
