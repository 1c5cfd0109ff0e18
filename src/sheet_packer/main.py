"""Command-line entry point for packing sprite sheets."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from sheet_packer.config import FORMAT_NAMES, PACKER_NAMES, Config, load_config
from sheet_packer.diagnostics import DiagnosticsTracker
from sheet_packer.errors import PackingError
from sheet_packer.formats import AmethystNamedFormat, get_format
from sheet_packer.io import load_sprite_images, save_sheet, write_metadata
from sheet_packer.packing import Heuristic, get_packer
from sheet_packer.pipeline import encode, pack


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pack sprites into sprite sheets")
    parser.add_argument("sprites", nargs="*", type=Path, help="Sprite image paths")
    parser.add_argument("--sprites-dir", type=Path, help="Directory of sprite images")
    parser.add_argument("--output-dir", type=Path, required=True, help="Output directory")
    parser.add_argument("--config", type=Path, help="Optional JSON config path")
    parser.add_argument("--packer", choices=PACKER_NAMES, help="Packing strategy")
    parser.add_argument("--format", choices=FORMAT_NAMES, help="Metadata format")
    parser.add_argument("--name", help="Base name for output files")
    parser.add_argument("--max-width", type=int, help="Maximum sheet width")
    parser.add_argument("--max-height", type=int, help="Maximum sheet height")
    parser.add_argument("--padding", type=int, help="Pixels between sprites")
    parser.add_argument("--allow-rotation", action="store_true", help="Allow 90 degree rotation")
    parser.add_argument("--power-of-two", action="store_true", help="Round sheets to powers of two")
    parser.add_argument(
        "--heuristic",
        choices=[heuristic.value for heuristic in Heuristic],
        help="MaxRects free-rectangle heuristic",
    )
    parser.add_argument("--enable-profiling", action="store_true", help="Enable timing output")
    parser.add_argument("--profile-output", type=Path, help="Write profiling data to JSON/CSV")
    parser.add_argument("--debug-output-dir", type=Path, help="Write anchor overlays here")
    return parser.parse_args(argv)


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    overrides = {
        "packer": args.packer,
        "format": args.format,
        "output_name": args.name,
        "max_width": args.max_width,
        "max_height": args.max_height,
        "padding": args.padding,
        "heuristic": args.heuristic,
        "sprite_dir": args.sprites_dir,
        "profile_output": args.profile_output,
        "debug_output_dir": args.debug_output_dir,
    }
    changes = {key: value for key, value in overrides.items() if value is not None}
    if args.sprites:
        changes["sprite_paths"] = list(args.sprites)
    if args.allow_rotation:
        changes["allow_rotation"] = True
    if args.power_of_two:
        changes["power_of_two"] = True
    if args.enable_profiling or args.profile_output:
        changes["enable_profiling"] = True
    return replace(config, **changes)


def run(config: Config, output_dir: Path) -> List[Path]:
    """Pack the configured sprites and write sheets plus metadata."""

    if not config.sprite_dir and not config.sprite_paths:
        raise ValueError("Sprites directory or sprite paths must be provided.")
    if config.sprite_dir and not config.sprite_dir.exists():
        raise ValueError("Sprites directory does not exist.")

    output_dir.mkdir(parents=True, exist_ok=True)
    profile_output = config.profile_output
    if config.enable_profiling and profile_output is None:
        profile_output = output_dir / "profile.json"
    tracker = DiagnosticsTracker(
        enable_profiling=config.enable_profiling,
        profile_output=profile_output,
        debug_output_dir=config.debug_output_dir,
    )

    names, inputs = load_sprite_images(config)
    print(f"Loaded {len(inputs)} sprites")
    sheets = pack(
        inputs,
        packer=get_packer(config.packer),
        options=config.packer_options(),
        channels=config.channels,
        row_alignment=config.row_alignment,
        tracker=tracker,
    )

    fmt = get_format(config.format)
    format_options = names if isinstance(fmt, AmethystNamedFormat) else None
    written: List[Path] = []
    for index, sheet in enumerate(sheets):
        image_path = output_dir / f"{config.output_name}-{index}.png"
        metadata_path = output_dir / f"{config.output_name}-{index}.json"
        save_sheet(image_path, sheet)
        write_metadata(metadata_path, encode(sheet, fmt, format_options))
        tracker.save_anchor_overlay(sheet, index)
        written.extend([image_path, metadata_path])
        print(
            f"Sheet {index} | {sheet.dimensions[0]}x{sheet.dimensions[1]} "
            f"| {len(sheet.anchors)} sprites"
        )

    if config.enable_profiling:
        for stage in tracker.stages:
            print(f"{stage.stage}: {stage.elapsed_ms:.2f} ms ({stage.items} items)")
        for record in tracker.sheets:
            print(f"Sheet {record.index} occupancy: {record.occupancy:.1%}")
    tracker.export()
    return written


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config = _apply_overrides(load_config(args.config), args)
    try:
        run(config, args.output_dir)
    except PackingError as exc:
        raise SystemExit(f"Packing failed: {exc}") from exc


if __name__ == "__main__":
    main()
