"""Configuration schema and loading utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from sheet_packer.packing.base import Heuristic, PackerOptions

PACKER_NAMES = ("maxrects", "simple")
FORMAT_NAMES = ("amethyst", "amethyst_named")


@dataclass(frozen=True)
class Config:
    """Top-level configuration for a packing run."""

    packer: str = "maxrects"
    format: str = "amethyst_named"
    max_width: int = 4096
    max_height: int = 4096
    allow_rotation: bool = False
    padding: int = 0
    power_of_two: bool = False
    heuristic: str = Heuristic.BEST_AREA_FIT.value
    channels: int = 4
    row_alignment: int = 1
    sprite_paths: List[Path] = field(default_factory=list)
    sprite_dir: Optional[Path] = None
    sprite_extensions: List[str] = field(default_factory=lambda: [".png", ".bmp", ".gif", ".tga"])
    output_name: str = "sheet"
    enable_profiling: bool = False
    profile_output: Optional[Path] = None
    debug_output_dir: Optional[Path] = None

    def packer_options(self) -> PackerOptions:
        return PackerOptions(
            max_width=self.max_width,
            max_height=self.max_height,
            allow_rotation=self.allow_rotation,
            padding=self.padding,
            power_of_two=self.power_of_two,
            heuristic=Heuristic.from_name(self.heuristic),
        )


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into base without mutating either input."""

    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def _check_choice(kind: str, value: str, choices: tuple) -> str:
    key = value.lower()
    if key not in choices:
        raise ValueError(f"Unknown {kind} '{value}'. Available: {', '.join(choices)}")
    return key


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from JSON over the defaults."""

    base = {
        "packer": "maxrects",
        "format": "amethyst_named",
        "max_width": 4096,
        "max_height": 4096,
        "allow_rotation": False,
        "padding": 0,
        "power_of_two": False,
        "heuristic": Heuristic.BEST_AREA_FIT.value,
        "channels": 4,
        "row_alignment": 1,
        "sprite_paths": [],
        "sprite_dir": None,
        "sprite_extensions": [".png", ".bmp", ".gif", ".tga"],
        "output_name": "sheet",
        "enable_profiling": False,
        "profile_output": None,
        "debug_output_dir": None,
    }

    if path:
        raw = json.loads(Path(path).read_text())
        merged = _merge_dict(base, raw)
    else:
        merged = base

    heuristic = str(merged.get("heuristic", base["heuristic"]))
    Heuristic.from_name(heuristic)

    return Config(
        packer=_check_choice("packer", str(merged["packer"]), PACKER_NAMES),
        format=_check_choice("format", str(merged["format"]), FORMAT_NAMES),
        max_width=int(merged.get("max_width", base["max_width"])),
        max_height=int(merged.get("max_height", base["max_height"])),
        allow_rotation=bool(merged.get("allow_rotation", base["allow_rotation"])),
        padding=int(merged.get("padding", base["padding"])),
        power_of_two=bool(merged.get("power_of_two", base["power_of_two"])),
        heuristic=heuristic.lower(),
        channels=int(merged.get("channels", base["channels"])),
        row_alignment=int(merged.get("row_alignment", base["row_alignment"])),
        sprite_paths=[Path(p) for p in merged.get("sprite_paths", [])],
        sprite_dir=Path(merged["sprite_dir"]) if merged.get("sprite_dir") else None,
        sprite_extensions=[
            ext.lower() for ext in merged.get("sprite_extensions", base["sprite_extensions"])
        ],
        output_name=str(merged.get("output_name", base["output_name"])),
        enable_profiling=bool(merged.get("enable_profiling", base["enable_profiling"])),
        profile_output=Path(merged["profile_output"]) if merged.get("profile_output") else None,
        debug_output_dir=Path(merged["debug_output_dir"]) if merged.get("debug_output_dir") else None,
    )
