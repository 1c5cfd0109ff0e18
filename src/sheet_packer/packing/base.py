"""Packer interface and options shared by all strategies."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sheet_packer.data import PackerResult, SpriteAnchor, SpriteData
from sheet_packer.errors import ConfigurationError

SpriteSize = Tuple[int, SpriteData]


class Heuristic(enum.Enum):
    """Free-rectangle selection rules for MaxRects."""

    BEST_AREA_FIT = "best_area_fit"              # Minimize leftover area
    BEST_SHORT_SIDE_FIT = "best_short_side_fit"  # Minimize the shorter leftover side
    BEST_LONG_SIDE_FIT = "best_long_side_fit"    # Minimize the longer leftover side
    BOTTOM_LEFT = "bottom_left"                  # Lowest top edge, then leftmost

    @classmethod
    def from_name(cls, name: str) -> "Heuristic":
        key = name.lower()
        for heuristic in cls:
            if heuristic.value == key:
                return heuristic
        available = ", ".join(h.value for h in cls)
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")


@dataclass(frozen=True)
class PackerOptions:
    """Options recognized by the packers."""

    max_width: int = 4096
    max_height: int = 4096
    allow_rotation: bool = False
    padding: int = 0
    power_of_two: bool = False
    heuristic: Heuristic = Heuristic.BEST_AREA_FIT

    def validate(self) -> None:
        if self.max_width <= 0 or self.max_height <= 0:
            raise ConfigurationError(
                f"Maximum sheet size must be positive, got {self.max_width}x{self.max_height}."
            )
        if self.padding < 0:
            raise ConfigurationError(f"Padding must not be negative, got {self.padding}.")
        if self.power_of_two and not (
            is_power_of_two(self.max_width) and is_power_of_two(self.max_height)
        ):
            raise ConfigurationError(
                "Power-of-two sheets require a power-of-two maximum size, "
                f"got {self.max_width}x{self.max_height}."
            )


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def next_power_of_two(value: int) -> int:
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


def fits_unrotated(data: SpriteData, options: PackerOptions) -> bool:
    return data.width <= options.max_width and data.height <= options.max_height


def fits_rotated(data: SpriteData, options: PackerOptions) -> bool:
    return options.allow_rotation and fits_unrotated(data.rotated(), options)


def check_sizes(sizes: Sequence[SpriteSize], options: PackerOptions) -> None:
    """Reject any sprite that cannot fit on an empty sheet."""

    for sprite_id, data in sizes:
        if not (fits_unrotated(data, options) or fits_rotated(data, options)):
            raise ConfigurationError(
                f"Sprite {sprite_id} ({data.width}x{data.height}) exceeds the maximum "
                f"sheet size {options.max_width}x{options.max_height}."
            )


def sheet_dimensions(anchors: Sequence[SpriteAnchor], options: PackerOptions) -> Tuple[int, int]:
    """Bounding box of the anchors, rounded up to powers of two if requested."""

    width = max((anchor.right for anchor in anchors), default=0)
    height = max((anchor.bottom for anchor in anchors), default=0)
    if options.power_of_two:
        width, height = next_power_of_two(width), next_power_of_two(height)
    return width, height


class Packer(ABC):
    """Strategy that assigns sheet positions to sprite shapes."""

    name: str = ""

    @abstractmethod
    def pack(self, sizes: Sequence[SpriteSize], options: PackerOptions) -> List[PackerResult]:
        """Place every sprite exactly once across one or more sheets.

        Raises ConfigurationError when a sprite cannot fit the maximum
        sheet size. No partial results are returned.
        """
