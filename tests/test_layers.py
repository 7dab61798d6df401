"""Z-index resolution by layer name."""
from __future__ import annotations
import logging

import pytest

from cssmix.layers import DEFAULT_LAYERS, make_layers, resolve_layer, z_index
from cssmix.style import Declaration


def test_site_header_resolves_to_three() -> None:
    assert resolve_layer("site-header", DEFAULT_LAYERS) == 3


@pytest.mark.parametrize("position, name", list(enumerate(DEFAULT_LAYERS, start=1)))
def test_value_is_length_minus_position_plus_one(position: int, name: str) -> None:
    assert resolve_layer(name, DEFAULT_LAYERS) == len(DEFAULT_LAYERS) - position + 1


def test_single_letter_layers() -> None:
    layers = make_layers("ABCDE")
    assert resolve_layer("C", layers) == 3
    assert resolve_layer("A", layers) == 5
    assert resolve_layer("E", layers) == 1


def test_missing_layer_returns_none_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="cssmix.layers"):
        assert resolve_layer("tooltip", DEFAULT_LAYERS) is None

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert '"tooltip"' in record.getMessage()
    assert "site-header" in record.getMessage()


def test_missing_layer_in_empty_list() -> None:
    assert resolve_layer("modal", ()) is None


def test_z_index_declaration() -> None:
    assert z_index("modal") == [Declaration("z-index", "4")]
    assert z_index("nope") == []


def test_make_layers_rejects_duplicates() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        make_layers(["modal", "header", "modal"])


def test_make_layers_rejects_empty_names() -> None:
    with pytest.raises(ValueError):
        make_layers(["modal", ""])


def test_make_layers_is_immutable() -> None:
    layers = make_layers(["a", "b"])
    assert isinstance(layers, tuple)
