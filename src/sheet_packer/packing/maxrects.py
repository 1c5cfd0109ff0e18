"""Implementation of the Maximal Rectangles algorithm.

Each sheet tracks the maximal free rectangles left after every placement.
Placing a sprite splits every free rectangle it touches into up to four
remainders, then free rectangles contained in another one are dropped.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

from sheet_packer.data import PackerResult, SpriteAnchor, SpriteData
from sheet_packer.errors import InvariantViolation
from sheet_packer.packing.base import (
    Heuristic,
    Packer,
    PackerOptions,
    SpriteSize,
    check_sizes,
    sheet_dimensions,
)

Score = Tuple[int, int, int, int, int]


class FreeRect(NamedTuple):
    """Free area on a sheet as (x, y, width, height)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: "FreeRect") -> bool:
        return not (
            self.right <= other.x
            or self.bottom <= other.y
            or self.x >= other.right
            or self.y >= other.bottom
        )

    def contains(self, other: "FreeRect") -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and self.right >= other.right
            and self.bottom >= other.bottom
        )


def _score(heuristic: Heuristic, free: FreeRect, width: int, height: int) -> Tuple[int, int]:
    """Return (primary, secondary) score; lower is better."""

    leftover_width = free.width - width
    leftover_height = free.height - height
    short_side = min(leftover_width, leftover_height)
    long_side = max(leftover_width, leftover_height)

    if heuristic is Heuristic.BEST_SHORT_SIDE_FIT:
        return short_side, long_side
    if heuristic is Heuristic.BEST_LONG_SIDE_FIT:
        return long_side, short_side
    if heuristic is Heuristic.BOTTOM_LEFT:
        return free.y + height, free.x
    return free.width * free.height - width * height, short_side


class MaxRectsSheet:
    """Free-rectangle bookkeeping for a single sheet.

    The bin is inflated by ``padding`` on the right and bottom and so is
    every sprite, which leaves padding between sprites but not at the
    sheet edges.
    """

    def __init__(self, options: PackerOptions) -> None:
        self.options = options
        self.padding = options.padding
        self.free_rects: List[FreeRect] = [
            FreeRect(0, 0, options.max_width + self.padding, options.max_height + self.padding)
        ]
        self.anchors: List[SpriteAnchor] = []

    def find_position(self, data: SpriteData) -> Optional[Tuple[int, int, bool]]:
        """Best (x, y, rotated) for a sprite, or None if it does not fit."""

        orientations = [(data.width, data.height, False)]
        if self.options.allow_rotation and data.width != data.height:
            orientations.append((data.height, data.width, True))

        best: Optional[Score] = None
        best_pos: Optional[Tuple[int, int, bool]] = None
        for width, height, rotated in orientations:
            padded_width = width + self.padding
            padded_height = height + self.padding
            for free in self.free_rects:
                if free.width < padded_width or free.height < padded_height:
                    continue
                primary, secondary = _score(self.options.heuristic, free, padded_width, padded_height)
                score = (primary, secondary, free.y, free.x, int(rotated))
                if best is None or score < best:
                    best = score
                    best_pos = (free.x, free.y, rotated)
        return best_pos

    def insert(self, sprite_id: int, data: SpriteData) -> Optional[SpriteAnchor]:
        """Place a sprite on this sheet; returns None when it does not fit."""

        position = self.find_position(data)
        if position is None:
            return None

        x, y, rotated = position
        footprint = data.rotated() if rotated else data
        anchor = SpriteAnchor(
            id=sprite_id,
            x=x,
            y=y,
            width=footprint.width,
            height=footprint.height,
            rotated=rotated,
        )
        used = FreeRect(x, y, footprint.width + self.padding, footprint.height + self.padding)
        self._split_free_rects(used)
        self._prune_free_rects()
        self.anchors.append(anchor)
        return anchor

    def _split_free_rects(self, used: FreeRect) -> None:
        split: List[FreeRect] = []
        for free in self.free_rects:
            if not used.intersects(free):
                split.append(free)
                continue
            if used.x > free.x:
                split.append(FreeRect(free.x, free.y, used.x - free.x, free.height))
            if used.right < free.right:
                split.append(FreeRect(used.right, free.y, free.right - used.right, free.height))
            if used.y > free.y:
                split.append(FreeRect(free.x, free.y, free.width, used.y - free.y))
            if used.bottom < free.bottom:
                split.append(FreeRect(free.x, used.bottom, free.width, free.bottom - used.bottom))
        self.free_rects = split

    def _prune_free_rects(self) -> None:
        """Drop free rectangles contained in another; first of equal twins wins."""

        rects = self.free_rects
        pruned: List[FreeRect] = []
        for i, rect in enumerate(rects):
            redundant = any(
                other.contains(rect) and (other != rect or j < i)
                for j, other in enumerate(rects)
                if j != i
            )
            if not redundant:
                pruned.append(rect)
        self.free_rects = pruned


def _placement_order(sizes: Sequence[SpriteSize]) -> List[SpriteSize]:
    """Largest area first, then longest side, then input id."""

    return sorted(
        sizes,
        key=lambda item: (-item[1].area, -max(item[1].width, item[1].height), item[0]),
    )


class MaxRectsPacker(Packer):
    """Dense multi-sheet packer based on maximal free rectangles."""

    name = "maxrects"

    def pack(self, sizes: Sequence[SpriteSize], options: PackerOptions) -> List[PackerResult]:
        options.validate()
        check_sizes(sizes, options)

        sheets: List[MaxRectsSheet] = []
        for sprite_id, data in _placement_order(sizes):
            for sheet in sheets:
                if sheet.insert(sprite_id, data) is not None:
                    break
            else:
                sheet = MaxRectsSheet(options)
                sheets.append(sheet)
                if sheet.insert(sprite_id, data) is None:
                    raise InvariantViolation(
                        f"Sprite {sprite_id} did not fit on an empty {options.max_width}x"
                        f"{options.max_height} sheet."
                    )

        return [
            PackerResult(sheet_dimensions(sheet.anchors, options), list(sheet.anchors))
            for sheet in sheets
        ]
