"""Shelf packer: rows of sprites in input order."""

from __future__ import annotations

from typing import List, Sequence

from sheet_packer.data import PackerResult, SpriteAnchor
from sheet_packer.packing.base import (
    Packer,
    PackerOptions,
    SpriteSize,
    check_sizes,
    fits_unrotated,
    sheet_dimensions,
)


class SimplePacker(Packer):
    """Place sprites left to right, wrapping to a new row or sheet when full.

    Fast and predictable, but leaves gaps wherever row heights differ.
    A sprite is only rotated when it cannot fit the sheet any other way.
    """

    name = "simple"

    def pack(self, sizes: Sequence[SpriteSize], options: PackerOptions) -> List[PackerResult]:
        options.validate()
        check_sizes(sizes, options)

        results: List[PackerResult] = []
        anchors: List[SpriteAnchor] = []
        x = y = row_height = 0

        for sprite_id, data in sizes:
            rotated = not fits_unrotated(data, options)
            footprint = data.rotated() if rotated else data

            if x > 0 and x + footprint.width > options.max_width:
                x = 0
                y += row_height + options.padding
                row_height = 0
            if anchors and y + footprint.height > options.max_height:
                results.append(PackerResult(sheet_dimensions(anchors, options), anchors))
                anchors = []
                x = y = row_height = 0

            anchors.append(
                SpriteAnchor(
                    id=sprite_id,
                    x=x,
                    y=y,
                    width=footprint.width,
                    height=footprint.height,
                    rotated=rotated,
                )
            )
            x += footprint.width + options.padding
            row_height = max(row_height, footprint.height)

        if anchors:
            results.append(PackerResult(sheet_dimensions(anchors, options), anchors))
        return results
