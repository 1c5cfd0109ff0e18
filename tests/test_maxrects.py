from __future__ import annotations

import pytest
from helpers import assert_contained, assert_no_overlap

from sheet_packer import (
    ConfigurationError,
    Heuristic,
    MaxRectsPacker,
    PackerOptions,
    SimplePacker,
    SpriteData,
)
from sheet_packer.packing import MaxRectsSheet


def _ids(results):
    return sorted(anchor.id for result in results for anchor in result.anchors)


def test_fifty_squares_fit_one_sheet():
    sizes = [(index, SpriteData(16, 16)) for index in range(50)]
    results = MaxRectsPacker().pack(sizes, PackerOptions(max_width=256, max_height=256))

    assert len(results) == 1
    sheet = results[0]
    assert _ids(results) == list(range(50))
    assert_no_overlap(sheet.anchors)
    assert_contained(sheet.anchors, sheet.dimensions)
    occupied = sum(anchor.width * anchor.height for anchor in sheet.anchors)
    assert occupied <= sheet.dimensions[0] * sheet.dimensions[1]


@pytest.mark.parametrize("heuristic", list(Heuristic))
@pytest.mark.parametrize("allow_rotation", [False, True])
def test_every_heuristic_places_everything(mixed_sizes, heuristic, allow_rotation):
    options = PackerOptions(
        max_width=64,
        max_height=64,
        padding=1,
        allow_rotation=allow_rotation,
        heuristic=heuristic,
    )
    results = MaxRectsPacker().pack(mixed_sizes, options)

    assert _ids(results) == [index for index, _ in mixed_sizes]
    for result in results:
        assert_no_overlap(result.anchors)
        assert_contained(result.anchors, result.dimensions)
        assert result.dimensions[0] <= 64 and result.dimensions[1] <= 64


def test_denser_than_shelf_packing(mixed_sizes):
    options = PackerOptions(max_width=64, max_height=64)
    dense = MaxRectsPacker().pack(mixed_sizes, options)
    shelf = SimplePacker().pack(mixed_sizes, options)

    assert len(dense) <= len(shelf)


def test_packing_is_deterministic(mixed_sizes):
    options = PackerOptions(max_width=96, max_height=96, allow_rotation=True)
    first = MaxRectsPacker().pack(mixed_sizes, options)
    second = MaxRectsPacker().pack(mixed_sizes, options)

    assert [r.anchors for r in first] == [r.anchors for r in second]


def test_rotation_lets_tall_sprite_fit_wide_sheet():
    options = PackerOptions(max_width=10, max_height=2, allow_rotation=True)
    results = MaxRectsPacker().pack([(0, SpriteData(2, 10))], options)

    anchor = results[0].anchors[0]
    assert anchor.rotated
    assert (anchor.width, anchor.height) == (10, 2)
    assert results[0].dimensions == (10, 2)


def test_oversized_sprite_without_rotation_fails():
    options = PackerOptions(max_width=10, max_height=2)
    with pytest.raises(ConfigurationError):
        MaxRectsPacker().pack([(0, SpriteData(1, 1)), (1, SpriteData(2, 10))], options)


def test_overflow_opens_new_sheet():
    sizes = [(index, SpriteData(8, 8)) for index in range(5)]
    results = MaxRectsPacker().pack(sizes, PackerOptions(max_width=16, max_height=16))

    assert [len(result.anchors) for result in results] == [4, 1]


def test_padding_keeps_sprites_apart():
    sizes = [(index, SpriteData(4, 4)) for index in range(4)]
    results = MaxRectsPacker().pack(sizes, PackerOptions(max_width=10, max_height=10, padding=2))

    assert len(results) == 1
    anchors = results[0].anchors
    for i, first in enumerate(anchors):
        for second in anchors[i + 1 :]:
            gap_x = max(second.x - first.right, first.x - second.right)
            gap_y = max(second.y - first.bottom, first.y - second.bottom)
            assert max(gap_x, gap_y) >= 2


def test_free_rectangles_are_pruned():
    sheet = MaxRectsSheet(PackerOptions(max_width=8, max_height=8))
    sheet.insert(0, SpriteData(4, 4))

    assert sorted(sheet.free_rects) == [(0, 4, 8, 4), (4, 0, 4, 8)]
    for i, rect in enumerate(sheet.free_rects):
        for j, other in enumerate(sheet.free_rects):
            if i != j:
                assert not other.contains(rect)


def test_invalid_power_of_two_options():
    with pytest.raises(ConfigurationError):
        MaxRectsPacker().pack([(0, SpriteData(1, 1))], PackerOptions(max_width=100, power_of_two=True))
