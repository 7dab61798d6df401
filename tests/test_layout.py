from __future__ import annotations

import pytest

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
from cssmix.style import AtRule, Declaration, Rule, UnsupportedOption


def test_grid_without_gap() -> None:
    assert grid(3) == [
        Declaration("display", "-ms-grid"),
        Declaration("-ms-grid-columns", "(1fr)[3]"),
        Declaration("display", "grid"),
        Declaration("grid-template-columns", "repeat(3, 1fr)"),
    ]


def test_grid_with_gap_interleaves_ms_tracks() -> None:
    decls = grid(3, 20)
    assert decls[1] == Declaration("-ms-grid-columns", "1fr 20px 1fr 20px 1fr")
    assert decls[-2:] == [Declaration("grid-gap", "20px"), Declaration("gap", "20px")]


@pytest.mark.parametrize("columns", [0, -1, 1.5, True])
def test_grid_rejects_bad_columns(columns) -> None:
    with pytest.raises(UnsupportedOption):
        grid(columns)


def test_grid_item() -> None:
    assert grid_item(2, row=3, span=2) == [
        Declaration("-ms-grid-column", "2"),
        Declaration("-ms-grid-column-span", "2"),
        Declaration("-ms-grid-row", "3"),
        Declaration("grid-column", "2 / span 2"),
        Declaration("grid-row", "3"),
    ]


def test_grid_fallback_structure() -> None:
    nodes = grid_fallback(4, [Declaration("align-items", "start")])
    clearfix, columns, guarded = nodes
    assert isinstance(clearfix, Rule) and clearfix.selector == "&::after"
    assert isinstance(columns, Rule) and Declaration("width", "25%") in columns.children
    assert isinstance(guarded, AtRule)
    assert guarded.name == "supports" and guarded.prelude == "(display: grid)"
    assert Declaration("grid-template-columns", "repeat(4, 1fr)") in guarded.children
    assert guarded.children[-1] == Declaration("align-items", "start")


def test_push_auto() -> None:
    assert push_auto() == [Declaration("margin-left", "auto"), Declaration("margin-right", "auto")]


@pytest.mark.parametrize(
    "args, expected",
    [
        ((10,), "10px"),
        ((10, "auto"), "10px auto"),
        (("1em", 0, 2), "1em 0px 2px"),
        ((1, 2, 3, 4), "1px 2px 3px 4px"),
    ],
)
def test_spacing(args, expected) -> None:
    assert spacing("margin", *args) == [Declaration("margin", expected)]


def test_spacing_rejects_gaps_and_properties() -> None:
    with pytest.raises(UnsupportedOption):
        spacing("padding", 1, None, 3)
    with pytest.raises(UnsupportedOption):
        spacing("border", 1)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedOption):
        spacing("margin", "wide")


def test_visually_hidden() -> None:
    names = [d.name for d in visually_hidden()]
    assert names.count("clip") == 2
    assert names[-1] == "position"


def test_visibility() -> None:
    assert visibility(True) == [Declaration("visibility", "visible")]
    assert visibility(False) == [Declaration("visibility", "hidden")]


def test_truncate() -> None:
    assert truncate(300) == [
        Declaration("max-width", "300px"),
        Declaration("white-space", "nowrap"),
        Declaration("overflow", "hidden"),
        Declaration("text-overflow", "ellipsis"),
    ]
    assert truncate("80%")[0] == Declaration("max-width", "80%")
