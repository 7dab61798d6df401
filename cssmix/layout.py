from __future__ import annotations
from typing import Literal

from cssmix.media import supports
from cssmix.style import (
    Content,
    Declaration,
    Length,
    Node,
    Rule,
    UnsupportedOption,
    dimension,
    expand,
    length,
    number,
)

__all__ = [
    "grid",
    "grid_item",
    "grid_fallback",
    "push_auto",
    "spacing",
    "visually_hidden",
    "visibility",
    "truncate",
]


def _positive(option: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise UnsupportedOption(option, value)
    return value


def grid(columns: int, gap: Length | None = None) -> list[Declaration]:
    """Equal width grid columns with the `-ms-grid` shim first.

    The old IE syntax has no gap property so the gap becomes its own track between columns.
    """
    columns = _positive("grid columns", columns)
    if gap is None:
        ms_columns = "(1fr)" if columns == 1 else f"(1fr)[{columns}]"
    else:
        gap = dimension(*length(gap))
        ms_columns = f" {gap} ".join("1fr" for _ in range(columns))

    decls = [
        Declaration("display", "-ms-grid"),
        Declaration("-ms-grid-columns", ms_columns),
        Declaration("display", "grid"),
        Declaration("grid-template-columns", f"repeat({columns}, 1fr)"),
    ]
    if gap is not None:
        decls.append(Declaration("grid-gap", gap))
        decls.append(Declaration("gap", gap))
    return decls


def grid_item(column: int, row: int = 1, span: int = 1) -> list[Declaration]:
    column = _positive("grid column", column)
    row = _positive("grid row", row)
    span = _positive("grid span", span)
    return [
        Declaration("-ms-grid-column", column),
        Declaration("-ms-grid-column-span", span),
        Declaration("-ms-grid-row", row),
        Declaration("grid-column", f"{column} / span {span}"),
        Declaration("grid-row", row),
    ]


def grid_fallback(columns: int, content: Content | None = None, gap: Length | None = None) -> list[Node]:
    """Floated columns for renderers without grid, replaced by a real grid under `@supports`."""
    columns = _positive("grid columns", columns)
    return [
        Rule(
            "&::after",
            [
                Declaration("content", '""'),
                Declaration("display", "table"),
                Declaration("clear", "both"),
            ],
        ),
        Rule(
            "& > *",
            [
                Declaration("float", "left"),
                Declaration("width", f"{number(100 / columns)}%"),
            ],
        ),
        supports(
            "display: grid",
            [
                *grid(columns, gap),
                Rule("&::after", [Declaration("content", "none")]),
                Rule("& > *", [Declaration("float", "none"), Declaration("width", "auto")]),
                *expand(content),
            ],
        ),
    ]


def push_auto() -> list[Declaration]:
    """Center a block horizontally."""
    return [Declaration("margin-left", "auto"), Declaration("margin-right", "auto")]


def _spacing_value(value: Length) -> str:
    if value == "auto":
        return value
    return dimension(*length(value))


def spacing(
    property: Literal["margin", "padding"],
    top: Length,
    right: Length | None = None,
    bottom: Length | None = None,
    left: Length | None = None,
) -> list[Declaration]:
    """`margin`/`padding` shorthand with css' one to four value semantics."""
    if property not in ("margin", "padding"):
        raise UnsupportedOption("spacing property", property, ("margin", "padding"))

    values = [top, right, bottom, left]
    while len(values) > 1 and values[-1] is None:
        values.pop()
    if None in values:
        raise UnsupportedOption("spacing", values)
    return [Declaration(property, " ".join(_spacing_value(v) for v in values))]


def visually_hidden() -> list[Declaration]:
    """Hide an element visually while keeping it available to screen readers."""
    return [
        Declaration("margin", "-1px"),
        Declaration("padding", "0"),
        Declaration("width", "1px"),
        Declaration("height", "1px"),
        Declaration("overflow", "hidden"),
        Declaration("clip", "rect(0 0 0 0)"),
        Declaration("clip", "rect(0, 0, 0, 0)"),
        Declaration("position", "absolute"),
    ]


def visibility(visible: bool) -> list[Declaration]:
    return [Declaration("visibility", "visible" if visible else "hidden")]


def truncate(boundary: Length) -> list[Declaration]:
    """Single line of text cut off with an ellipsis past `boundary`."""
    return [
        Declaration("max-width", dimension(*length(boundary))),
        Declaration("white-space", "nowrap"),
        Declaration("overflow", "hidden"),
        Declaration("text-overflow", "ellipsis"),
    ]
