from __future__ import annotations

import json

import pytest
from helpers import solid_sprite

from sheet_packer import (
    AmethystFormat,
    AmethystNamedFormat,
    ConfigurationError,
    PackerOptions,
    SpriteAnchor,
    encode,
    get_format,
    pack,
)

ANCHORS = [SpriteAnchor(2, 4, 0, 3, 1), SpriteAnchor(0, 0, 0, 2, 2), SpriteAnchor(1, 0, 0, 2, 2)]


def test_amethyst_orders_sprites_by_id():
    data = AmethystFormat().encode((8, 4), ANCHORS)

    assert data["texture_width"] == 8.0
    assert data["texture_height"] == 4.0
    assert [sprite["x"] for sprite in data["sprites"]] == [0.0, 0.0, 4.0]
    assert data["sprites"][2] == {"x": 4.0, "y": 0.0, "width": 3.0, "height": 1.0, "offsets": None}


def test_named_format_attaches_names():
    data = AmethystNamedFormat().encode((8, 4), ANCHORS, ["a", "b", "c"])

    assert [sprite["name"] for sprite in data["sprites"]] == ["a", "b", "c"]


def test_named_format_requires_a_name_per_sprite():
    with pytest.raises(ConfigurationError):
        AmethystNamedFormat().encode((8, 4), ANCHORS, ["a"])


def test_encode_is_idempotent():
    sheets = pack(
        [solid_sprite(2, 2, 1), solid_sprite(2, 2, 1), solid_sprite(3, 1, 2)],
        options=PackerOptions(max_width=8, max_height=8),
    )
    fmt = get_format("amethyst_named")
    first = json.dumps(encode(sheets[0], fmt, ["x", "y", "z"]))
    second = json.dumps(encode(sheets[0], fmt, ["x", "y", "z"]))

    assert first == second


def test_unknown_format_name():
    with pytest.raises(ValueError):
        get_format("xml")
