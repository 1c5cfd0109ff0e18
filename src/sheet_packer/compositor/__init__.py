"""Sheet compositing: pixel buffers and sprite blits."""

from sheet_packer.compositor.blit import (
    compose_sheet,
    create_pixel_buffer,
    resolve_stride,
    sprite_pixels,
    write_sprite,
)

__all__ = [
    "compose_sheet",
    "create_pixel_buffer",
    "resolve_stride",
    "sprite_pixels",
    "write_sprite",
]
