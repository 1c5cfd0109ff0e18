"""Resolve byte-identical sprites to a single canonical input."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from sheet_packer.data import AliasEntry, AliasKind, InputSprite, Sprite


def _content_key(sprite: InputSprite) -> Tuple[int, int, bytes]:
    """Identity key for a sprite.

    Pixel bytes decide identity; the shape is part of the key so that two
    sprites sharing a byte sequence but not a layout never share an anchor.
    """

    return (sprite.width, sprite.height, sprite.bytes)


def resolve_aliases(inputs: Sequence[InputSprite]) -> Tuple[List[Sprite], List[AliasEntry]]:
    """Split inputs into the sprites to pack and a per-index alias table.

    The first occurrence of a pixel sequence is canonical. Later duplicates
    are recorded on the canonical entry in input order and marked ALIASED.
    """

    seen: Dict[Tuple[int, int, bytes], int] = {}
    aliases: List[AliasEntry] = [AliasEntry() for _ in inputs]

    for index, sprite in enumerate(inputs):
        canonical = seen.setdefault(_content_key(sprite), index)
        if canonical == index:
            continue
        entry = aliases[canonical]
        entry.kind = AliasKind.ALIAS
        entry.ids.append(index)
        aliases[index] = AliasEntry(kind=AliasKind.ALIASED, canonical=canonical)

    kept = [
        Sprite.from_input(index, sprite)
        for index, sprite in enumerate(inputs)
        if aliases[index].is_kept
    ]
    return kept, aliases
