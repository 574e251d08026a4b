"""Bitmap font text measurement, line breaking and drawing."""

from __future__ import annotations

from collections.abc import Iterator

from wastekit.bitmap import Bitmap
from wastekit.sprite import ColorScheme, DrawFlags, Sprite, draw

ENCODING = "cp1251"

_GLYPHS = (
    bytes(range(128))
    + bytes(32)
    + bytes((255, 246, 247, 0, 253, 0, 0, 0, 240, 0, 242, 0, 0, 0, 0, 244))
    + bytes((248, 0, 0, 0, 0, 0, 0, 250, 241, 252, 243, 0, 0, 0, 0, 245))
    + bytes(range(128, 176))
    + bytes(range(224, 240))
)

_BREAKS = frozenset((0x20, 0x09, 0x2D))
_NEWLINES = frozenset((0x0A, 0x0D))
_BLANKS = frozenset((0x20, 0x09))


def _encode(text: str | bytes) -> bytes:
    if isinstance(text, str):
        return text.encode(ENCODING, errors="replace")
    return bytes(text)


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _skip_line_end(data: bytes, pos: int) -> int:
    if pos < len(data) and data[pos] in _NEWLINES:
        first = data[pos]
        pos += 1
        if pos < len(data) and data[pos] in _NEWLINES and data[pos] != first:
            pos += 1
    return pos


def _skip_blanks(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] in _BLANKS:
        pos += 1
    return pos


class Font:
    """A font sprite: one cycle per glyph.

    The sprite variables hold the line height, the gap between glyphs and
    the gap between lines, in that order.
    """

    def __init__(self, sprite: Sprite) -> None:
        self.sprite = sprite

    def glyph_index(self, char: str | int) -> int:
        """The glyph cycle used for a character or a single encoded byte."""
        if isinstance(char, str):
            encoded = _encode(char)
            if len(encoded) != 1:
                raise ValueError("glyph_index expects a single character")
            char = encoded[0]
        return _GLYPHS[char & 0xFF]

    def _advance(self, glyph: int) -> int:
        return self.sprite.frame_width(glyph) + self.sprite.vars[1]

    def text_width(self, text: str | bytes) -> int:
        return sum(self._advance(_GLYPHS[byte]) for byte in _encode(text))

    def _break(self, data: bytes, width: int) -> int:
        last_break = -1
        for position, byte in enumerate(data):
            glyph = _GLYPHS[byte]
            if not glyph:
                return position
            if glyph in _BREAKS:
                last_break = position + 1
            elif glyph in _NEWLINES:
                return position + 1
            width -= self._advance(glyph)
            if width < 0:
                return position + 1 if last_break == -1 else last_break
        return len(data)

    def break_count(self, text: str | bytes, width: int) -> int:
        """How many characters of ``text`` go on a line ``width`` pixels wide."""
        return self._break(_encode(text), width)

    def line_height(self) -> int:
        return self.sprite.vars[0] + self.sprite.vars[2]

    def _segments(self, data: bytes, width: int) -> Iterator[bytes]:
        pos = 0
        while pos < len(data) and data[pos]:
            count = self._break(data[pos:], width)
            if not count:
                return
            yield data[pos:pos + count]
            pos = _skip_blanks(data, _skip_line_end(data, pos + count))

    def text_height(self, text: str | bytes, width: int) -> int:
        """Height of ``text`` wrapped to ``width`` pixels."""
        data = _encode(text)
        height = 0
        pos = 0
        while pos < len(data) and data[pos]:
            height += self.line_height()
            count = self._break(data[pos:], width)
            if not count:
                return height
            pos = _skip_blanks(data, _skip_line_end(data, pos + count))
        return height

    def lines(self, text: str | bytes, width: int) -> Iterator[str | bytes]:
        """Yield the wrapped lines of ``text``, of the same type as ``text``."""
        as_text = isinstance(text, str)
        for segment in self._segments(_encode(text), width):
            yield segment.decode(ENCODING, errors="replace") if as_text else segment

    def draw(
        self, bitmap: Bitmap, x: int, y: int, text: str | bytes, scheme: ColorScheme | None = None
    ) -> int:
        """Draw one line of text; return its width in pixels.

        With a colour scheme glyph pixels are colour-keyed, otherwise copied.
        """
        flags = DrawFlags.USE_COLORS if scheme is not None else DrawFlags.NONE
        cursor = x
        for byte in _encode(text):
            glyph = _GLYPHS[byte]
            draw(bitmap, cursor, y, self.sprite, glyph, flags, 0, scheme)
            cursor += self._advance(glyph)
        return cursor - x

    def draw_wrapped(
        self,
        bitmap: Bitmap,
        x: int,
        y: int,
        width: int,
        text: str | bytes,
        scheme: ColorScheme | None = None,
    ) -> int:
        """Draw text wrapped to ``width``; return the height used."""
        top = y
        for segment in self._segments(_encode(text), width):
            self.draw(bitmap, x, y, segment, scheme)
            y += self.line_height()
        return y - top

    def draw_centered(
        self,
        bitmap: Bitmap,
        x: int,
        y: int,
        width: int,
        text: str | bytes,
        scheme: ColorScheme | None = None,
    ) -> int:
        """Draw wrapped text with each line centred in ``width``; return the height used."""
        top = y
        for segment in self._segments(_encode(text), width):
            offset = _cdiv(width - self.text_width(segment), 2)
            self.draw(bitmap, x + offset, y, segment, scheme)
            y += self.line_height()
        return y - top