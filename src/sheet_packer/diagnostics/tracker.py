"""Profiling and diagnostics tracking for the packing pipeline."""

from __future__ import annotations

import csv
import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional

from PIL import ImageDraw

from sheet_packer.data import SpriteSheet
from sheet_packer.io import sheet_to_image


@dataclass
class StageRecord:
    """Wall time spent in one pipeline stage."""

    stage: str
    elapsed_ms: float
    items: int


@dataclass
class SheetRecord:
    """Size and fill of one composited sheet."""

    index: int
    width: int
    height: int
    anchors: int
    occupancy: float


@dataclass
class DiagnosticsTracker:
    """Collects stage timings, sheet occupancy, and debug overlays."""

    enable_profiling: bool = False
    profile_output: Optional[Path] = None
    debug_output_dir: Optional[Path] = None
    stages: List[StageRecord] = field(default_factory=list)
    sheets: List[SheetRecord] = field(default_factory=list)

    def track_stage(self, stage: str, elapsed_s: float, items: int) -> None:
        if not self.enable_profiling:
            return
        self.stages.append(StageRecord(stage=stage, elapsed_ms=elapsed_s * 1000.0, items=items))

    def track_sheet(self, index: int, sheet: SpriteSheet) -> None:
        if not self.enable_profiling:
            return
        width, height = sheet.dimensions
        # Aliases share pixels, so count each distinct rectangle once.
        rects = {(a.x, a.y, a.width, a.height) for a in sheet.anchors}
        used = sum(w * h for _, _, w, h in rects)
        self.sheets.append(
            SheetRecord(
                index=index,
                width=width,
                height=height,
                anchors=len(sheet.anchors),
                occupancy=used / float(width * height) if width and height else 0.0,
            )
        )

    def export(self) -> None:
        """Export records to JSON/CSV if configured."""

        if not self.profile_output or not (self.stages or self.sheets):
            return

        self.profile_output.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "stages": [asdict(record) for record in self.stages],
            "sheets": [asdict(record) for record in self.sheets],
        }
        self.profile_output.write_text(json.dumps(payload, indent=2))

        if self.stages:
            csv_path = self.profile_output.with_suffix(".csv")
            with csv_path.open("w", newline="") as handle:
                writer = csv.DictWriter(handle, fieldnames=list(asdict(self.stages[0]).keys()))
                writer.writeheader()
                for record in self.stages:
                    writer.writerow(asdict(record))

    def save_anchor_overlay(self, sheet: SpriteSheet, index: int) -> Optional[Path]:
        """Save the sheet with anchor rectangles outlined."""

        if not self.debug_output_dir or not sheet.anchors:
            return None
        self.debug_output_dir.mkdir(parents=True, exist_ok=True)
        image = sheet_to_image(sheet).convert("RGBA")
        draw = ImageDraw.Draw(image)
        for anchor in sheet.anchors:
            draw.rectangle(
                (anchor.x, anchor.y, anchor.right - 1, anchor.bottom - 1),
                outline=(255, 0, 0, 255),
                width=1,
            )
        path = self.debug_output_dir / f"anchors_sheet{index}.png"
        image.save(path)
        return path


class Timer:
    """Simple context timer for profiling blocks."""

    def __init__(self) -> None:
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, *_exc: object) -> None:
        self.elapsed = time.perf_counter() - self.start
