"""Metadata formats for packed sheets."""

from typing import Dict, Type

from sheet_packer.formats.amethyst import AmethystFormat, AmethystNamedFormat
from sheet_packer.formats.base import Format

_FORMATS: Dict[str, Type[Format]] = {
    AmethystFormat.name: AmethystFormat,
    AmethystNamedFormat.name: AmethystNamedFormat,
}


def get_format(name: str) -> Format:
    """Instantiate a metadata format by name."""

    key = name.lower()
    if key not in _FORMATS:
        raise ValueError(f"Unknown format '{name}'. Available: {', '.join(_FORMATS)}")
    return _FORMATS[key]()


__all__ = ["AmethystFormat", "AmethystNamedFormat", "Format", "get_format"]
