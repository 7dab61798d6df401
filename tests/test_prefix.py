from __future__ import annotations

import pytest

from cssmix.prefix import animation, antialias, appearance, keyframes, opacity, prefixed, transition
from cssmix.style import AtRule, Declaration, Rule, UnsupportedOption


def test_prefixed_puts_standard_property_last() -> None:
    assert [d.name for d in prefixed("user-select", "none")] == [
        "-webkit-user-select",
        "-moz-user-select",
        "-ms-user-select",
        "-o-user-select",
        "user-select",
    ]


def test_animation() -> None:
    decls = animation("fade-in 1s ease")
    assert decls[-1] == Declaration("animation", "fade-in 1s ease")
    assert all(d.value == "fade-in 1s ease" for d in decls)


def test_transition_joins_values() -> None:
    assert transition("color .3s", "opacity .2s")[-1] == Declaration("transition", "color .3s, opacity .2s")
    with pytest.raises(UnsupportedOption):
        transition()


def test_keyframes() -> None:
    steps = [Rule("from", [Declaration("opacity", "0")]), Rule("to", [Declaration("opacity", "1")])]
    rules = keyframes("fade", steps)
    assert [rule.name for rule in rules] == [
        "-webkit-keyframes",
        "-moz-keyframes",
        "-ms-keyframes",
        "-o-keyframes",
        "keyframes",
    ]
    assert all(isinstance(rule, AtRule) and rule.prelude == "fade" for rule in rules)
    assert all(rule.children == steps for rule in rules)


def test_keyframes_requires_name() -> None:
    with pytest.raises(UnsupportedOption):
        keyframes(" ", [])


def test_appearance() -> None:
    assert appearance() == [
        Declaration("-webkit-appearance", "none"),
        Declaration("-moz-appearance", "none"),
        Declaration("appearance", "none"),
    ]


@pytest.mark.parametrize("value, ie", [(0.5, "50"), (1, "100"), (0, "0"), (0.7, "70")])
def test_opacity(value, ie) -> None:
    decls = opacity(value)
    assert decls[1] == Declaration("filter", f"alpha(opacity={ie})")


@pytest.mark.parametrize("value", [-0.1, 1.5, "0.5", True])
def test_opacity_out_of_range(value) -> None:
    with pytest.raises(UnsupportedOption):
        opacity(value)


def test_antialias() -> None:
    assert antialias() == [
        Declaration("-webkit-font-smoothing", "antialiased"),
        Declaration("-moz-osx-font-smoothing", "grayscale"),
    ]
