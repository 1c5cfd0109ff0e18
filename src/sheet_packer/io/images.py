"""Sprite loading and sheet output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np
from PIL import Image

from sheet_packer.config.schema import Config
from sheet_packer.data import InputSprite, SpriteSheet
from sheet_packer.errors import ConfigurationError

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


def _image_mode(channels: int) -> str:
    if channels not in _MODES:
        raise ConfigurationError(f"No image mode for {channels} channels.")
    return _MODES[channels]


def _iter_sprite_paths(config: Config) -> Iterable[Path]:
    """Yield sprite paths from config in a deterministic order."""

    if config.sprite_paths:
        for sprite_path in config.sprite_paths:
            yield sprite_path
    if config.sprite_dir:
        for path in sorted(config.sprite_dir.iterdir()):
            if path.suffix.lower() in config.sprite_extensions:
                yield path


def load_sprite(path: Path, channels: int = 4) -> InputSprite:
    """Decode an image file into raw sprite pixels."""

    with Image.open(path) as image:
        converted = image.convert(_image_mode(channels))
        pixels = np.asarray(converted, dtype=np.uint8)
    if pixels.ndim == 2:
        pixels = pixels[..., None]
    return InputSprite.from_array(pixels)


def load_sprite_images(config: Config) -> Tuple[List[str], List[InputSprite]]:
    """Load sprite images from configured sources, returning names and pixels."""

    names: List[str] = []
    sprites: List[InputSprite] = []
    for path in _iter_sprite_paths(config):
        names.append(path.stem)
        sprites.append(load_sprite(path, config.channels))
    return names, sprites


def sheet_to_image(sheet: SpriteSheet) -> Image.Image:
    """Wrap a sheet buffer in a PIL image, honoring its stride."""

    mode = _image_mode(sheet.channels)
    return Image.frombuffer(mode, sheet.dimensions, sheet.bytes, "raw", mode, sheet.stride, 1)


def save_sheet(path: Path, sheet: SpriteSheet) -> None:
    """Save a sheet as PNG."""

    path.parent.mkdir(parents=True, exist_ok=True)
    sheet_to_image(sheet).save(path)


def write_metadata(path: Path, data: Dict[str, Any]) -> None:
    """Write encoded sheet metadata as JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True))
