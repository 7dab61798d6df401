from __future__ import annotations
from pathlib import Path

import pytest

from cssmix.config import load_layers, parse_layers
from cssmix.layers import DEFAULT_LAYERS


def test_top_level_layers() -> None:
    assert parse_layers('layers = ["a", "b", "c"]') == ("a", "b", "c")


def test_pyproject_table() -> None:
    text = """
[project]
name = "site"

[tool.cssmix]
layers = ["modal", "header"]
"""
    assert parse_layers(text) == ("modal", "header")


def test_missing_layers_fall_back_to_defaults() -> None:
    assert parse_layers('title = "x"') == DEFAULT_LAYERS


@pytest.mark.parametrize("text", ['layers = "modal"', "layers = [1, 2]", 'layers = ["a", "a"]', "layers = ["])
def test_invalid_layers(text: str) -> None:
    with pytest.raises(ValueError):
        parse_layers(text)


def test_load_layers_from_file(tmp_path: Path) -> None:
    path = tmp_path / "layers.toml"
    path.write_text('layers = ["dropdown", "modal"]\n', encoding="utf-8")
    assert load_layers(path) == ("dropdown", "modal")


def test_load_layers_defaults() -> None:
    assert load_layers(None) == DEFAULT_LAYERS
