"""Core data structures used throughout the pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

import numpy as np

from sheet_packer.errors import ConfigurationError


@dataclass(frozen=True)
class InputSprite:
    """Raw sprite pixels, row-major with a fixed channel width."""

    bytes: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Sprite dimensions must be positive, got {self.width}x{self.height}."
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "InputSprite":
        """Build a sprite from an HxWxC uint8 array."""

        if array.ndim != 3:
            raise ConfigurationError("Sprite array must be HxWxC.")
        if array.dtype != np.uint8:
            raise ConfigurationError(f"Sprite array must be uint8, got {array.dtype}.")
        height, width = array.shape[:2]
        pixels = np.ascontiguousarray(array)
        return cls(bytes=pixels.tobytes(), width=width, height=height)


@dataclass(frozen=True)
class SpriteData:
    """Shape of a sprite as seen by the packers."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def rotated(self) -> "SpriteData":
        return SpriteData(width=self.height, height=self.width)


@dataclass(frozen=True)
class Sprite:
    """A unique sprite kept for packing, tagged with its input index."""

    id: int
    data: SpriteData
    input: InputSprite

    @classmethod
    def from_input(cls, sprite_id: int, sprite: InputSprite) -> "Sprite":
        return cls(id=sprite_id, data=SpriteData(sprite.width, sprite.height), input=sprite)


class AliasKind(enum.Enum):
    """Deduplication state of one input index."""

    NOT_ALIASED = 1  # Unique, packed as-is
    ALIASED = 2      # Duplicate of an earlier sprite, never packed
    ALIAS = 3        # Packed, and shared by one or more later duplicates


@dataclass
class AliasEntry:
    """Alias table entry for one input index."""

    kind: AliasKind = AliasKind.NOT_ALIASED
    ids: List[int] = field(default_factory=list)
    canonical: Optional[int] = None

    @property
    def is_kept(self) -> bool:
        return self.kind is not AliasKind.ALIASED


@dataclass(frozen=True)
class SpriteAnchor:
    """Placement of a sprite on a sheet.

    ``width`` and ``height`` describe the footprint on the sheet, so they
    are swapped relative to the source sprite when ``rotated`` is set.
    """

    id: int
    x: int
    y: int
    width: int
    height: int
    rotated: bool = False

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: "SpriteAnchor") -> bool:
        return not (
            self.right <= other.x
            or self.bottom <= other.y
            or self.x >= other.right
            or self.y >= other.bottom
        )

    def with_id(self, sprite_id: int) -> "SpriteAnchor":
        return replace(self, id=sprite_id)


@dataclass
class PackerResult:
    """One sheet produced by a packer: its size and the anchors on it."""

    dimensions: Tuple[int, int]
    anchors: List[SpriteAnchor]


@dataclass
class SpriteSheet:
    """Final composited sheet owned by the caller."""

    buffer: np.ndarray
    stride: int
    dimensions: Tuple[int, int]
    anchors: List[SpriteAnchor]
    channels: int = 4

    @property
    def bytes(self) -> bytes:
        return self.buffer.tobytes()

    def to_array(self) -> np.ndarray:
        """Return an HxWxC view of the sheet without row padding."""

        width, height = self.dimensions
        rows = self.buffer.reshape(height, self.stride)
        return rows[:, : width * self.channels].reshape(height, width, self.channels)

    def anchor_for(self, sprite_id: int) -> Optional[SpriteAnchor]:
        for anchor in self.anchors:
            if anchor.id == sprite_id:
                return anchor
        return None
