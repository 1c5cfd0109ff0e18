from __future__ import annotations

import json
from dataclasses import replace

import numpy as np
from PIL import Image

from sheet_packer import PackerOptions, pack
from sheet_packer.config import load_config
from sheet_packer.io import load_sprite_images, save_sheet, write_metadata


def _write_png(path, width, height, value):
    pixels = np.full((height, width, 4), value, dtype=np.uint8)
    Image.fromarray(pixels).save(path)


def test_load_sprites_from_directory_in_sorted_order(tmp_path):
    _write_png(tmp_path / "b.png", 2, 3, 10)
    _write_png(tmp_path / "a.png", 4, 1, 20)
    (tmp_path / "notes.txt").write_text("ignored")
    config = replace(load_config(None), sprite_dir=tmp_path)

    names, sprites = load_sprite_images(config)

    assert names == ["a", "b"]
    assert [(s.width, s.height) for s in sprites] == [(4, 1), (2, 3)]
    assert sprites[0].bytes == bytes([20]) * 16


def test_saved_sheet_matches_buffer(tmp_path):
    _write_png(tmp_path / "a.png", 3, 2, 200)
    config = replace(load_config(None), sprite_paths=[tmp_path / "a.png"])
    _, sprites = load_sprite_images(config)
    sheets = pack(sprites, options=PackerOptions(max_width=8, max_height=8), row_alignment=64)

    output = tmp_path / "out" / "sheet.png"
    save_sheet(output, sheets[0])

    with Image.open(output) as image:
        assert image.size == sheets[0].dimensions
        np.testing.assert_array_equal(np.asarray(image), sheets[0].to_array())


def test_write_metadata_is_stable(tmp_path):
    path = tmp_path / "meta.json"
    write_metadata(path, {"b": 1, "a": [1.0, None]})

    assert json.loads(path.read_text()) == {"a": [1.0, None], "b": 1}
    assert path.read_text().index('"a"') < path.read_text().index('"b"')
