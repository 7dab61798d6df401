from __future__ import annotations
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
import math
from typing import Any, TypeVar
from typing_extensions import TypeAliasType

from cssmix.css.lexer import CSSParseError
from cssmix.css.parser import Parse
from cssmix.css.tokens import Dimension, Number, Percentage

__all__ = [
    "Color",
    "ColorFormat",
    "Length",
    "Declaration",
    "Rule",
    "AtRule",
    "Node",
    "Content",
    "UnsupportedOption",
    "expand",
    "number",
    "length",
    "dimension",
    "round_half_up",
    "with_defaults",
]

ColorFormat = TypeAliasType(
    "ColorFormat",
    tuple[int, int, int] | tuple[int, int, int, float] | str,
)

Length = TypeAliasType("Length", int | float | str)


class UnsupportedOption(ValueError):
    """An option value that the helper has no output for."""

    def __init__(self, option: str, value: Any, choices: Iterable[Any] | None = None) -> None:
        self.option = option
        self.value = value
        self.choices = tuple(choices) if choices is not None else None
        message = f"Unsupported {option} {value!r}"
        if self.choices:
            message += f"; expected one of: {', '.join(str(c) for c in self.choices)}"
        super().__init__(message)


@dataclass
class Color:
    """Helper class to normalize color arguments into css color values."""

    @staticmethod
    def new(color: ColorFormat) -> str:
        if isinstance(color, tuple) and len(color) == 3:
            return Color.rgb(*color)
        elif isinstance(color, tuple) and len(color) == 4:
            return Color.rgba(*color)
        elif isinstance(color, str) and color.strip().startswith("#"):
            return Color.hex(color.strip())
        elif isinstance(color, str) and color.strip() != "":
            # Named colors, `transparent`, `currentColor`, `var(--x)`, ...
            return color.strip()
        raise UnsupportedOption("color", color)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> str:
        return f"rgb({Color._channel(r)}, {Color._channel(g)}, {Color._channel(b)})"

    @staticmethod
    def rgba(r: int, g: int, b: int, a: float) -> str:
        if not 0 <= a <= 1:
            raise UnsupportedOption("alpha", a)
        return f"rgba({Color._channel(r)}, {Color._channel(g)}, {Color._channel(b)}, {number(a)})"

    @staticmethod
    def hex(code: str) -> str:
        digits = code.lstrip("#")
        if len(digits) not in [3, 4, 6, 8] or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise UnsupportedOption("hex color", code)
        return f"#{digits}"

    @staticmethod
    def _channel(value: int) -> int:
        if not isinstance(value, int) or not 0 <= value <= 255:
            raise UnsupportedOption("color channel", value)
        return value


def round_half_up(value: float) -> int:
    """Round like Sass' `round()`, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def number(value: float) -> str:
    """Format a number the way Sass prints it: up to 10 decimals without trailing zeros."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, found {value!r}")
    if isinstance(value, int):
        return str(value)
    result = f"{value:.10f}".rstrip("0").rstrip(".")
    if result in ("-0", ""):
        return "0"
    return result


def length(value: Length) -> tuple[float, str]:
    """Split a length into its numeric value and unit. Bare numbers are pixels.

    Raises:
        UnsupportedOption: When the value is not a single number, percentage, or dimension.
    """
    if isinstance(value, bool):
        raise UnsupportedOption("length", value)
    if isinstance(value, (int, float)):
        return value, "px"

    try:
        component = Parse.parse_component_value(value)
    except CSSParseError as error:
        raise UnsupportedOption("length", value) from error

    if isinstance(component, Dimension):
        return _intish(component.value), component.unit
    elif isinstance(component, Percentage):
        return _intish(component.value), "%"
    elif isinstance(component, Number):
        return _intish(component.value), "px"
    raise UnsupportedOption("length", value)


def dimension(value: float, unit: str) -> str:
    return f"{number(value)}{unit}"


def _intish(value: float) -> float:
    return int(value) if float(value).is_integer() else value


class Declaration:
    """A single `name: value;` entry."""

    __slots__ = ("name", "value", "important")

    def __init__(self, name: str, value: Any, important: bool = False) -> None:
        self.name = name
        if isinstance(value, str):
            self.value = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            self.value = number(value)
        else:
            raise TypeError(f"Declaration {name!r} expects a string or number value, found {value!r}")
        self.important = important

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Declaration):
            return (
                self.name == __value.name
                and self.value == __value.value
                and self.important == __value.important
            )
        return False

    def __hash__(self) -> int:
        return hash((self.name, self.value, self.important))

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.name!r}, {self.value!r})"

    def __str__(self) -> str:
        return f"{self.name}: {self.value}{' !important' if self.important else ''};"


@dataclass
class Rule:
    """A nested ruleset. `&` in the selector refers to the parent selector."""

    selector: str
    children: list[Node] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Rule({self.selector!r}, children={self.children})"


@dataclass
class AtRule:
    """`@name prelude { ... }`, or the statement `@name prelude;` when there are no children."""

    name: str
    prelude: str = ""
    children: list[Node] | None = None

    def __repr__(self) -> str:
        block = "None" if self.children is None else "{...}"
        return f"AtRule({self.name!r}, prelude={self.prelude!r}, block={block})"

    @property
    def header(self) -> str:
        return f"@{self.name} {self.prelude}".rstrip()


Node = Declaration | Rule | AtRule

Content = TypeAliasType("Content", Iterable[Node] | Callable[[], Iterable[Node]])


def expand(content: Content | None) -> list[Node]:
    """Resolve a content block into a list of nodes.

    A content block is either an iterable of nodes or a callable returning one.
    """
    if content is None:
        return []
    if callable(content):
        content = content()
    nodes = list(content)
    for node in nodes:
        if not isinstance(node, (Declaration, Rule, AtRule)):
            raise TypeError(f"Expected a css node in content block, found {node!r}")
    return nodes


T = TypeVar("T", bound=Mapping)

def with_defaults(defaults: T, options: Mapping[str, Any] | None) -> T:
    """Fill the missing keys of `options` from `defaults`. Unknown keys are rejected."""
    options = dict(options or {})
    for key in options:
        if key not in defaults:
            raise UnsupportedOption("option", key, defaults.keys())
    merged = dict(defaults)
    merged.update(options)
    return merged  # type: ignore[return-value]
