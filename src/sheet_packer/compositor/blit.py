"""Blit sprite pixels into strided sheet buffers."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

import numpy as np

from sheet_packer.data import (
    AliasEntry,
    AliasKind,
    PackerResult,
    Sprite,
    SpriteAnchor,
    SpriteSheet,
)
from sheet_packer.errors import ConfigurationError, InvariantViolation


def resolve_stride(
    dimensions: Tuple[int, int],
    channels: int,
    stride: Optional[int] = None,
    row_alignment: int = 1,
) -> int:
    """Row length in bytes for a sheet.

    An explicit stride must hold a full row of pixels; otherwise the packed
    row length is rounded up to ``row_alignment``.
    """

    row_bytes = dimensions[0] * channels
    if stride is not None:
        if stride < row_bytes:
            raise ConfigurationError(
                f"Stride {stride} is smaller than a {dimensions[0]} pixel row ({row_bytes} bytes)."
            )
        return stride
    if row_alignment <= 0:
        raise ConfigurationError(f"Row alignment must be positive, got {row_alignment}.")
    return -(-row_bytes // row_alignment) * row_alignment


def create_pixel_buffer(dimensions: Tuple[int, int], stride: int) -> np.ndarray:
    """Zeroed buffer of ``height * stride`` bytes."""

    return np.zeros(dimensions[1] * stride, dtype=np.uint8)


def sprite_pixels(sprite: Sprite, channels: int, rotated: bool = False) -> np.ndarray:
    """Sprite pixels as HxWxC, rotated 90 degrees clockwise if requested."""

    expected = sprite.data.width * sprite.data.height * channels
    if len(sprite.input.bytes) != expected:
        raise ConfigurationError(
            f"Sprite {sprite.id} holds {len(sprite.input.bytes)} bytes, expected {expected} "
            f"for {sprite.data.width}x{sprite.data.height} with {channels} channels."
        )
    pixels = np.frombuffer(sprite.input.bytes, dtype=np.uint8).reshape(
        sprite.data.height, sprite.data.width, channels
    )
    if rotated:
        pixels = np.rot90(pixels, k=-1)
    return pixels


def write_sprite(
    buffer: np.ndarray,
    dimensions: Tuple[int, int],
    stride: int,
    channels: int,
    sprite: Sprite,
    anchor: SpriteAnchor,
) -> None:
    """Copy a sprite's rows into the buffer at the anchor position."""

    width, height = dimensions
    if anchor.x < 0 or anchor.y < 0 or anchor.right > width or anchor.bottom > height:
        raise InvariantViolation(
            f"Anchor for sprite {anchor.id} at ({anchor.x},{anchor.y}) size "
            f"{anchor.width}x{anchor.height} exceeds sheet {width}x{height}."
        )

    pixels = sprite_pixels(sprite, channels, anchor.rotated)
    if pixels.shape[:2] != (anchor.height, anchor.width):
        raise InvariantViolation(
            f"Anchor for sprite {anchor.id} is {anchor.width}x{anchor.height} but the sprite "
            f"is {pixels.shape[1]}x{pixels.shape[0]} as placed."
        )

    rows = buffer.reshape(height, stride)
    start = anchor.x * channels
    end = start + anchor.width * channels
    rows[anchor.y : anchor.bottom, start:end] = pixels.reshape(anchor.height, -1)


def compose_sheet(
    result: PackerResult,
    sprites: Mapping[int, Sprite],
    stride: int,
    aliases: Sequence[AliasEntry],
    channels: int = 4,
) -> SpriteSheet:
    """Composite one packed sheet and restore anchors for aliased duplicates.

    Aliased duplicates reuse the canonical pixels, so they add anchors but
    never additional blits.
    """

    buffer = create_pixel_buffer(result.dimensions, stride)
    anchors: List[SpriteAnchor] = list(result.anchors)
    additional: List[SpriteAnchor] = []

    for anchor in result.anchors:
        sprite = sprites.get(anchor.id)
        if sprite is None:
            raise InvariantViolation(f"Anchor references unknown sprite {anchor.id}.")
        write_sprite(buffer, result.dimensions, stride, channels, sprite, anchor)
        entry = aliases[anchor.id]
        if entry.kind is AliasKind.ALIAS:
            additional.extend(anchor.with_id(alias) for alias in entry.ids)

    anchors.extend(additional)
    return SpriteSheet(
        buffer=buffer,
        stride=stride,
        dimensions=result.dimensions,
        anchors=anchors,
        channels=channels,
    )
