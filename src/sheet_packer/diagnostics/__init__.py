"""Profiling and diagnostics."""

from sheet_packer.diagnostics.tracker import DiagnosticsTracker, SheetRecord, StageRecord, Timer

__all__ = ["DiagnosticsTracker", "SheetRecord", "StageRecord", "Timer"]
