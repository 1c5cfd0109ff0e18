"""Image I/O utilities."""

from sheet_packer.io.images import (
    load_sprite,
    load_sprite_images,
    save_sheet,
    sheet_to_image,
    write_metadata,
)

__all__ = ["load_sprite", "load_sprite_images", "save_sheet", "sheet_to_image", "write_metadata"]
