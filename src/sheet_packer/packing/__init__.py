"""Packing strategies and their shared interface."""

from typing import Dict, Type

from sheet_packer.packing.base import (
    Heuristic,
    Packer,
    PackerOptions,
    SpriteSize,
    next_power_of_two,
)
from sheet_packer.packing.maxrects import MaxRectsPacker, MaxRectsSheet
from sheet_packer.packing.simple import SimplePacker

_PACKERS: Dict[str, Type[Packer]] = {
    SimplePacker.name: SimplePacker,
    MaxRectsPacker.name: MaxRectsPacker,
}


def get_packer(name: str) -> Packer:
    """Instantiate a packer by name."""

    key = name.lower()
    if key not in _PACKERS:
        raise ValueError(f"Unknown packer '{name}'. Available: {', '.join(_PACKERS)}")
    return _PACKERS[key]()


__all__ = [
    "Heuristic",
    "MaxRectsPacker",
    "MaxRectsSheet",
    "Packer",
    "PackerOptions",
    "SimplePacker",
    "SpriteSize",
    "get_packer",
    "next_power_of_two",
]
