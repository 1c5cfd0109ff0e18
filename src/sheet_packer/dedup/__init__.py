"""Content-addressed sprite deduplication."""

from sheet_packer.dedup.resolver import resolve_aliases

__all__ = ["resolve_aliases"]
