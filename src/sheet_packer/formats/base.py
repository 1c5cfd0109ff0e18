"""Metadata format interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence, Tuple

from sheet_packer.data import SpriteAnchor


class Format(ABC):
    """Turns a sheet's dimensions and anchors into consumer metadata."""

    name: str = ""

    @abstractmethod
    def encode(
        self,
        dimensions: Tuple[int, int],
        anchors: Sequence[SpriteAnchor],
        options: Any = None,
    ) -> Dict[str, Any]:
        """Encode placements; the same inputs always yield equal output."""
