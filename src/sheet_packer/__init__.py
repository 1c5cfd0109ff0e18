"""Pack sprites into deduplicated sprite sheets."""

from sheet_packer.data import (
    AliasEntry,
    AliasKind,
    InputSprite,
    PackerResult,
    Sprite,
    SpriteAnchor,
    SpriteData,
    SpriteSheet,
)
from sheet_packer.errors import ConfigurationError, InvariantViolation, PackingError
from sheet_packer.formats import AmethystFormat, AmethystNamedFormat, Format, get_format
from sheet_packer.packing import (
    Heuristic,
    MaxRectsPacker,
    Packer,
    PackerOptions,
    SimplePacker,
    get_packer,
)
from sheet_packer.pipeline import encode, pack, validate_packer_results

__all__ = [
    "AliasEntry",
    "AliasKind",
    "AmethystFormat",
    "AmethystNamedFormat",
    "ConfigurationError",
    "Format",
    "Heuristic",
    "InputSprite",
    "InvariantViolation",
    "MaxRectsPacker",
    "Packer",
    "PackerOptions",
    "PackerResult",
    "PackingError",
    "SimplePacker",
    "Sprite",
    "SpriteAnchor",
    "SpriteData",
    "SpriteSheet",
    "encode",
    "get_format",
    "get_packer",
    "pack",
    "validate_packer_results",
]
