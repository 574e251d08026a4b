"""Code page conversion tables for game text."""

from __future__ import annotations

from collections.abc import Sequence


def _upper_half(encoding: str) -> tuple[int, ...]:
    """Code points of bytes 0x80..0xFF in ``encoding``; zero where a byte is undefined."""
    codes = []
    for byte in range(128, 256):
        try:
            codes.append(ord(bytes([byte]).decode(encoding)))
        except UnicodeDecodeError:
            codes.append(0)
    return tuple(codes)


CP1251 = _upper_half("cp1251")
CP866 = _upper_half("cp866")

# Game text bytes (code page 866) to code page 1251; zero marks an unmapped byte.
_GAME_TEXT = (
    bytes(range(128))
    + bytes(range(192, 240))
    + bytes(48)
    + bytes(range(240, 256))
    + bytes((168, 184, 170, 186, 175, 191, 161, 162, 176, 0, 183, 0, 185, 164, 0, 160))
)


def decode_game_text(data: bytes) -> bytes:
    """Convert game text to code page 1251.

    Conversion stops at the first byte without a counterpart (a zero byte
    included); the rest is returned unchanged.
    """
    data = bytes(data)
    for position, byte in enumerate(data):
        if not _GAME_TEXT[byte]:
            return data[:position].translate(_GAME_TEXT) + data[position:]
    return data.translate(_GAME_TEXT)


def skip_past(text: str, pos: int, symbol: str) -> int:
    """Position just after the next ``symbol`` at or after ``pos``, or the end of text."""
    end = len(text)
    while pos < end and text[pos] != "\0" and text[pos] != symbol:
        pos += 1
    if pos < end and text[pos] == symbol:
        pos += 1
    return pos


def identity_table() -> bytes:
    """The lower half of a conversion table: ASCII maps to itself."""
    return bytes(range(128))


def recode_table(source: Sequence[int], target: Sequence[int]) -> bytes:
    """Map each upper-half byte of ``source`` to the byte of ``target`` with the same character.

    Both arguments list the code points of bytes 0x80..0xFF; characters
    missing from ``target`` map to zero.
    """
    positions = {}
    for index, code in enumerate(target):
        positions.setdefault(code, index + 128)
    return bytes(positions.get(code, 0) for code in source)