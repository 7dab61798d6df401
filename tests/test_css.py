"""Value lexing and parsing."""
from __future__ import annotations

import pytest

from cssmix.css import CSSParseError, FunctionBlock, Parse, serialize, tokenize
from cssmix.css.tokens import (
    Comma,
    Delim,
    Dimension,
    Function,
    Hash,
    Ident,
    Number,
    Percentage,
    RParantheses,
    String,
    Whitespace,
)


def test_tokenize_dimensions_and_numbers() -> None:
    tokens = tokenize("45deg -1.5rem 10% 3 1e2")
    values = [t for t in tokens if not isinstance(t, Whitespace)]
    assert [type(t) for t in values] == [Dimension, Dimension, Percentage, Number, Number]
    assert values[0].value == 45 and values[0].unit == "deg"
    assert values[1].value == -1.5 and values[1].unit == "rem"
    assert values[2].value == 10
    assert values[3].type == "integer"
    assert values[4].value == 100 and values[4].type == "number"


def test_em_is_not_an_exponent() -> None:
    (token,) = tokenize("2em")
    assert isinstance(token, Dimension)
    assert token.unit == "em"


def test_tokenize_function_and_punctuation() -> None:
    tokens = tokenize("rgba(0,0,0,.5) / #fff 'a'")
    assert isinstance(tokens[0], Function) and tokens[0].raw == "rgba"
    assert isinstance(tokens[2], Comma)
    assert any(isinstance(t, RParantheses) for t in tokens)
    assert Delim("/") in tokens
    assert Hash("fff") in tokens
    assert any(isinstance(t, String) and t.raw == "a" for t in tokens)


def test_custom_property_ident() -> None:
    (token,) = tokenize("--brand-color")
    assert token == Ident("--brand-color")


def test_unclosed_string_raises() -> None:
    with pytest.raises(CSSParseError):
        tokenize("'open")


@pytest.mark.parametrize("unit, degrees", [("deg", 90), ("turn", 360), ("grad", 90)])
def test_angle_degrees(unit: str, degrees: float) -> None:
    value = {"deg": "90", "turn": "1", "grad": "100"}[unit]
    (token,) = tokenize(f"{value}{unit}")
    assert token.is_angle
    assert token.degrees() == pytest.approx(degrees)


def test_non_angle_degrees_raises() -> None:
    (token,) = tokenize("10px")
    assert not token.is_angle
    with pytest.raises(ValueError):
        token.degrees()


def test_parse_component_value_function() -> None:
    value = Parse.parse_component_value("  rgba(0, 0, 0, .5)  ")
    assert isinstance(value, FunctionBlock)
    assert value.name == "rgba"
    assert str(value) == "rgba(0, 0, 0, .5)"


def test_parse_component_value_rejects_extra_tokens() -> None:
    with pytest.raises(CSSParseError):
        Parse.parse_component_value("1px 2px")


def test_unclosed_function_raises() -> None:
    with pytest.raises(CSSParseError):
        Parse.parse_component_values("rgba(0, 0")


def test_parse_comma_separated_keeps_function_commas() -> None:
    entries = Parse.parse_comma_separated("red 10%,  hsl(0, 50%, 50%) ,blue")
    assert [serialize(entry) for entry in entries] == ["red 10%", "hsl(0, 50%, 50%)", "blue"]


def test_parse_comma_separated_empty() -> None:
    assert Parse.parse_comma_separated("   ") == []
    assert Parse.parse_comma_separated("") == []


def test_parse_comma_separated_keeps_empty_entries() -> None:
    entries = Parse.parse_comma_separated("red,, blue,")
    assert [serialize(entry) for entry in entries] == ["red", "", "blue", ""]
