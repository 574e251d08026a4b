"""Reading of AAF bitmap font files into font sprites."""

from __future__ import annotations

import os
import struct
from pathlib import Path

from wastekit.sprite import Cycle, Frame, Sprite

GLYPH_COUNT = 256
_HEADER = struct.Struct(">I4H")
_ENTRY = struct.Struct(">HHI")
HEADER_SIZE = _HEADER.size + GLYPH_COUNT * _ENTRY.size


def parse_aaf(data: bytes) -> Sprite:
    """Build a font sprite from AAF file contents.

    The sprite variables become line height, glyph gap and line gap. Glyphs
    without pixels get an empty frame as wide as the space character.
    """
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise ValueError(f"AAF data needs at least {HEADER_SIZE} bytes, got {len(data)}")
    _version, height, gap_hor, space, gap_ver = _HEADER.unpack_from(data, 0)
    sprite = Sprite(GLYPH_COUNT)
    sprite.vars[0:3] = [height, gap_hor, gap_ver]
    offset = HEADER_SIZE
    entries = _ENTRY.iter_unpack(data[_HEADER.size:HEADER_SIZE])
    for glyph, (width, rows, _stored_offset) in enumerate(entries):
        size = width * rows
        if size:
            sprite.store(glyph, data[offset:offset + size], width, rows, ox=width // 2, oy=height)
        else:
            sprite.cycles[glyph] = Cycle([Frame(width=space)])
        offset += size
    return sprite


def load_aaf(path: str | os.PathLike[str]) -> Sprite:
    """Read and parse an AAF font file."""
    return parse_aaf(Path(path).read_bytes())