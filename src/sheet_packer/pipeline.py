"""End-to-end packing: dedup, pack shapes, composite sheets."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from sheet_packer.compositor import compose_sheet, resolve_stride
from sheet_packer.data import InputSprite, PackerResult, Sprite, SpriteSheet
from sheet_packer.dedup import resolve_aliases
from sheet_packer.diagnostics import DiagnosticsTracker, Timer
from sheet_packer.errors import ConfigurationError, InvariantViolation
from sheet_packer.formats import Format
from sheet_packer.packing import MaxRectsPacker, Packer, PackerOptions


def _check_inputs(inputs: Sequence[InputSprite], channels: int) -> None:
    if channels <= 0:
        raise ConfigurationError(f"Channel width must be positive, got {channels}.")
    for index, sprite in enumerate(inputs):
        expected = sprite.width * sprite.height * channels
        if len(sprite.bytes) != expected:
            raise ConfigurationError(
                f"Sprite {index} holds {len(sprite.bytes)} bytes, expected {expected} "
                f"for {sprite.width}x{sprite.height} with {channels} channels."
            )


def validate_packer_results(results: Sequence[PackerResult], sprites: Mapping[int, Sprite]) -> None:
    """Check that packer output places every sprite once without overlap.

    Raises InvariantViolation on the first inconsistency.
    """

    placed = set()
    for sheet_index, result in enumerate(results):
        width, height = result.dimensions
        for anchor in result.anchors:
            sprite = sprites.get(anchor.id)
            if sprite is None:
                raise InvariantViolation(f"Sheet {sheet_index} references unknown sprite {anchor.id}.")
            if anchor.id in placed:
                raise InvariantViolation(f"Sprite {anchor.id} was placed more than once.")
            placed.add(anchor.id)

            expected = sprite.data.rotated() if anchor.rotated else sprite.data
            if (anchor.width, anchor.height) != (expected.width, expected.height):
                raise InvariantViolation(
                    f"Anchor for sprite {anchor.id} is {anchor.width}x{anchor.height}, "
                    f"expected {expected.width}x{expected.height}."
                )
            if anchor.x < 0 or anchor.y < 0 or anchor.right > width or anchor.bottom > height:
                raise InvariantViolation(
                    f"Anchor for sprite {anchor.id} lies outside sheet {sheet_index} ({width}x{height})."
                )

        by_x = sorted(result.anchors, key=lambda anchor: (anchor.x, anchor.y))
        for i, anchor in enumerate(by_x):
            for other in by_x[i + 1 :]:
                if other.x >= anchor.right:
                    break
                if anchor.intersects(other):
                    raise InvariantViolation(
                        f"Sprites {anchor.id} and {other.id} overlap on sheet {sheet_index}."
                    )

    missing = set(sprites) - placed
    if missing:
        raise InvariantViolation(f"Sprites {sorted(missing)} were not placed.")


def pack(
    inputs: Sequence[InputSprite],
    packer: Optional[Packer] = None,
    options: Optional[PackerOptions] = None,
    channels: int = 4,
    stride: Optional[int] = None,
    row_alignment: int = 1,
    tracker: Optional[DiagnosticsTracker] = None,
) -> List[SpriteSheet]:
    """Pack sprites into sheets.

    Byte-identical sprites are packed once and share an anchor position.
    Every input index receives exactly one anchor across the returned
    sheets. All validation happens before any pixel buffer is allocated,
    so a failure never yields partial sheets.
    """

    packer = packer or MaxRectsPacker()
    options = options or PackerOptions()
    tracker = tracker or DiagnosticsTracker()
    _check_inputs(inputs, channels)

    with Timer() as dedup_timer:
        sprites, aliases = resolve_aliases(inputs)
    tracker.track_stage("dedup", dedup_timer.elapsed, len(inputs))

    with Timer() as pack_timer:
        results = packer.pack([(sprite.id, sprite.data) for sprite in sprites], options)
    tracker.track_stage("pack", pack_timer.elapsed, len(sprites))

    by_id = {sprite.id: sprite for sprite in sprites}
    validate_packer_results(results, by_id)
    strides = [
        resolve_stride(result.dimensions, channels, stride, row_alignment) for result in results
    ]

    with Timer() as compose_timer:
        sheets = [
            compose_sheet(result, by_id, sheet_stride, aliases, channels)
            for result, sheet_stride in zip(results, strides)
        ]
    tracker.track_stage("compose", compose_timer.elapsed, len(sheets))

    for index, sheet in enumerate(sheets):
        tracker.track_sheet(index, sheet)
    return sheets


def encode(sheet: SpriteSheet, fmt: Format, options: Any = None) -> Dict[str, Any]:
    """Encode a sheet's placements with the given metadata format."""

    return fmt.encode(sheet.dimensions, sheet.anchors, options)
