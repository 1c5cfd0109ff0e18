from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

from sheet_packer import InputSprite, SpriteSheet


def solid_sprite(width: int, height: int, value: int, channels: int = 4) -> InputSprite:
    pixels = np.full((height, width, channels), value, dtype=np.uint8)
    return InputSprite.from_array(pixels)


def gradient_sprite(width: int, height: int, seed: int, channels: int = 4) -> InputSprite:
    """Sprite whose pixels differ per position so misplaced rows are caught."""

    values = (np.arange(width * height * channels, dtype=np.int64) + seed * 31) % 251
    return InputSprite.from_array(values.astype(np.uint8).reshape(height, width, channels))


def all_anchor_ids(sheets: Iterable[SpriteSheet]) -> List[int]:
    return sorted(anchor.id for sheet in sheets for anchor in sheet.anchors)


def assert_no_overlap(anchors) -> None:
    anchors = list(anchors)
    for i, first in enumerate(anchors):
        for second in anchors[i + 1 :]:
            assert not first.intersects(second), (first, second)


def assert_contained(anchors, dimensions: Tuple[int, int]) -> None:
    width, height = dimensions
    for anchor in anchors:
        assert anchor.x >= 0 and anchor.y >= 0
        assert anchor.right <= width and anchor.bottom <= height
