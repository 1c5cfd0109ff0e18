"""Sprite sheet metadata in the Amethyst engine layout."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sheet_packer.data import SpriteAnchor
from sheet_packer.errors import ConfigurationError
from sheet_packer.formats.base import Format


def _sprite_position(anchor: SpriteAnchor) -> Dict[str, Any]:
    return {
        "x": float(anchor.x),
        "y": float(anchor.y),
        "width": float(anchor.width),
        "height": float(anchor.height),
        "offsets": None,
    }


class AmethystFormat(Format):
    """Texture size plus sprite rectangles ordered by sprite id."""

    name = "amethyst"

    def encode(
        self,
        dimensions: Tuple[int, int],
        anchors: Sequence[SpriteAnchor],
        options: Any = None,
    ) -> Dict[str, Any]:
        ordered = sorted(anchors, key=lambda anchor: anchor.id)
        return {
            "texture_width": float(dimensions[0]),
            "texture_height": float(dimensions[1]),
            "sprites": [_sprite_position(anchor) for anchor in ordered],
        }


class AmethystNamedFormat(Format):
    """Amethyst layout with a name per sprite.

    ``options`` is the list of names indexed by sprite id.
    """

    name = "amethyst_named"

    def encode(
        self,
        dimensions: Tuple[int, int],
        anchors: Sequence[SpriteAnchor],
        options: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        names = list(options or [])
        sprites: List[Dict[str, Any]] = []
        for anchor in sorted(anchors, key=lambda anchor: anchor.id):
            if anchor.id >= len(names):
                raise ConfigurationError(f"No name provided for sprite {anchor.id}.")
            sprites.append({"name": names[anchor.id], **_sprite_position(anchor)})
        return {
            "texture_width": float(dimensions[0]),
            "texture_height": float(dimensions[1]),
            "sprites": sprites,
        }
