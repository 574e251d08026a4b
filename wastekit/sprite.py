"""Sprites: frame storage, RLE/raw pixel encoding, clipped drawing and hit tests."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from wastekit.bitmap import Bitmap
from wastekit.color import Color, Palette
from wastekit.geometry import Point, Rect
from wastekit.sorting import xsort

_MASK32 = 0xFFFFFFFF
_MAX_RUN = 0x7F
_MAX_SKIP = 0xFF
_SCHEME_BASES = (0x60, 0xD7, 0x03, 0xE4, 0x3C, 0x90)


class Encoding(enum.IntEnum):
    """How the pixels of a frame are stored."""

    AUTO = 0
    RAW = 1
    RLE = 2


class DrawFlags(enum.IntFlag):
    """Options for :func:`draw` and :func:`hittest`."""

    NONE = 0
    NO_OFFSET = 1
    NO_CENTER = 2
    MIRROR_V = 4
    REAL = 8
    USE_COLORS = 16
    SCALE_TO_CLIP = 32


@dataclass
class Frame:
    """One picture of an animation with its anchor offsets."""

    encoding: Encoding = Encoding.AUTO
    width: int = 0
    height: int = 0
    ox: int = 0
    oy: int = 0
    cx: int = 0
    cy: int = 0
    mx: int = 0
    my: int = 0
    data: bytes | None = None


@dataclass
class Cycle:
    """An animation: a list of frames and the action it plays."""

    frames: list[Frame] = field(default_factory=list)
    action: int = 0


@dataclass
class ColorScheme:
    """Three solid colours and six shading tables used by colour-keyed sprites."""

    colors: tuple[int, int, int]
    shades: tuple[bytes, ...]

    def __post_init__(self) -> None:
        if len(self.shades) != 6 or any(len(table) != 256 for table in self.shades):
            raise ValueError("a colour scheme needs six shading tables of 256 entries")


class Sprite:
    """A set of animation cycles plus a few numeric variables (used by fonts)."""

    def __init__(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError("cycle count cannot be negative")
        self.cycles = [Cycle() for _ in range(count)]
        self.vars = [0, 0, 0, 0]
        self._blobs: dict[bytes, bytes] = {}

    def store(
        self,
        cycle: int,
        pixels: bytes | Sequence[int],
        width: int,
        height: int,
        ox: int = 0,
        oy: int = 0,
        encoding: Encoding = Encoding.AUTO,
        animation_count: int = 1,
        animation: int = 0,
        action: int = 0,
        cx: int = 0,
        cy: int = 0,
        mx: int = 0,
        my: int = 0,
    ) -> Frame:
        """Encode ``pixels`` into frame ``animation`` of ``cycle``.

        Storing animation 0 (re)creates the cycle with ``animation_count`` frames.
        """
        src = _pixels(pixels, width, height)
        encoding = Encoding(encoding)
        if encoding is Encoding.AUTO:
            encoding = Encoding.RAW if is_opaque(src, width, height) else Encoding.RLE
        if not animation:
            if animation_count < 1:
                raise ValueError("a cycle needs at least one frame")
            self.cycles[cycle] = Cycle([Frame() for _ in range(animation_count)], action)
        frames = self.cycles[cycle].frames
        if encoding is Encoding.RAW:
            data = encode_raw(src, width, height)
        else:
            data = encode_rle(src, width, height)
        data = self._blobs.setdefault(data, data)
        frame = Frame(encoding, width, height, ox, oy, cx, cy, mx, my, data)
        frames[animation] = frame
        return frame

    def _cycle(self, cycle: int) -> Cycle | None:
        if not self.cycles:
            return None
        return self.cycles[cycle % len(self.cycles)]

    def frame(self, cycle: int, index: int = 0) -> Frame | None:
        """The frame at ``index`` of ``cycle``, both wrapping around."""
        found = self._cycle(cycle)
        if found is None or not found.frames:
            return None
        return found.frames[index % len(found.frames)]

    def frame_count(self, cycle: int) -> int:
        found = self._cycle(cycle)
        return len(found.frames) if found else 0

    def action(self, cycle: int) -> int:
        found = self._cycle(cycle)
        return found.action if found else 0

    def frame_width(self, cycle: int, index: int = 0) -> int:
        frame = self.frame(cycle, index)
        return frame.width if frame else 0

    def frame_height(self, cycle: int, index: int = 0) -> int:
        frame = self.frame(cycle, index)
        return frame.height if frame else 0


@dataclass
class ZSprite:
    """A sprite queued for depth-sorted drawing."""

    position: Point
    sprite: Sprite
    cycle: int = 0
    flags: DrawFlags = DrawFlags.NONE
    animation: int = 0
    scheme: ColorScheme | None = None


def _pixels(pixels: bytes | Sequence[int], width: int, height: int) -> bytes:
    if width < 0 or height < 0:
        raise ValueError("dimensions cannot be negative")
    src = bytes(pixels)
    if len(src) < width * height:
        raise ValueError(f"need {width * height} pixels, got {len(src)}")
    return src


def _rows(src: bytes, width: int, height: int) -> Iterator[bytes]:
    for row in range(height):
        yield src[row * width:(row + 1) * width]


def is_opaque(pixels: bytes | Sequence[int], width: int, height: int) -> bool:
    """True when no pixel is transparent (zero)."""
    src = _pixels(pixels, width, height)
    return all(0 not in row for row in _rows(src, width, height))


def encode_raw(pixels: bytes | Sequence[int], width: int, height: int) -> bytes:
    """Rows stored one after another without any compression."""
    src = _pixels(pixels, width, height)
    if not height:
        return b""
    return src[:width * height]


def _run_length(row: bytes, start: int, opaque: bool, cap: int) -> int:
    end = min(len(row), start + cap)
    pos = start
    while pos < end and (row[pos] != 0) == opaque:
        pos += 1
    return pos - start


def encode_rle(pixels: bytes | Sequence[int], width: int, height: int) -> bytes:
    """Run-length encode transparent (zero) pixels.

    Per row: 0x01-0x7F is followed by that many pixels, 0x81-0xFF skips
    ``byte - 0x80`` pixels, 0x80 XX skips XX pixels and 0x00 ends the row.
    Transparent pixels at the end of a row are not stored.
    """
    src = _pixels(pixels, width, height)
    if not height:
        return b""
    out = bytearray()
    for row in _rows(src, width, height):
        pos = 0
        while pos < width:
            if row[pos] == 0:
                skip = _run_length(row, pos, False, _MAX_SKIP)
                if pos + skip < width:
                    if skip <= _MAX_RUN:
                        out.append(0x80 + skip)
                    else:
                        out += bytes((0x80, skip))
                pos += skip
                continue
            count = _run_length(row, pos, True, _MAX_RUN)
            out.append(count)
            out += row[pos:pos + count]
            pos += count
        out.append(0)
    return bytes(out)


def skip_rle_rows(data: bytes, offset: int, rows: int) -> int:
    """Offset of the row that comes ``rows`` rows after ``offset``."""
    if rows <= 0:
        return offset
    pos = offset
    while True:
        if pos >= len(data):
            raise ValueError("truncated RLE data")
        code = data[pos]
        pos += 1
        if code == 0:
            rows -= 1
            if rows == 0:
                return pos
        elif code <= _MAX_RUN:
            pos += code
        elif code == 0x80:
            pos += 1


def _steps(source: int, target: int) -> Iterator[int]:
    whole, fraction = divmod(source, target)
    pos = error = 0
    for _ in range(target):
        yield pos
        pos += whole
        error += fraction
        if error >= target:
            error -= target
            pos += 1


def scale(
    pixels: bytes | Sequence[int], width: int, height: int, target_width: int, target_height: int
) -> bytes:
    """Nearest-neighbour resize of a ``width`` x ``height`` picture."""
    if min(width, height, target_width, target_height) <= 0:
        raise ValueError("scale needs positive dimensions")
    src = _pixels(pixels, width, height)
    columns = list(_steps(width, target_width))
    out = bytearray()
    for row in _steps(height, target_height):
        line = src[row * width:(row + 1) * width]
        out += bytes(line[column] for column in columns)
    return bytes(out)


def build_color_schemes(palette: Palette) -> list[tuple[ColorScheme, ColorScheme]]:
    """Normal and highlighted colour schemes for each of the six base colours."""
    schemes = []
    for base in _SCHEME_BASES:
        pair = []
        for highlighted in (False, True):
            index = base
            tint = palette.color(index)
            if highlighted:
                tint = tint.bright(140)
                index = palette.index_of(tint)
            colors = (index, palette.index_of(tint.bright(110)), palette.index_of(tint.bright(120)))
            shades = []
            for level in range(6):
                alpha = 0x20 * (level + 1)
                table = bytearray(256)
                for entry in range(1, 256):
                    table[entry] = palette.index_of(palette.color(entry).mix(tint, alpha))
                shades.append(bytes(table))
            pair.append(ColorScheme(colors, tuple(shades)))
        schemes.append((pair[0], pair[1]))
    return schemes


def _effective_clip(bitmap: Bitmap) -> Rect:
    clip = bitmap.clipping
    return Rect(max(clip.x1, 0), max(clip.y1, 0), min(clip.x2, bitmap.width), min(clip.y2, bitmap.height))


def _lookup(sprite: Sprite, cycle: int, animation: int) -> Frame | None:
    if not sprite.cycles:
        return None
    found = sprite.cycles[(cycle & _MASK32) % len(sprite.cycles)]
    if not found.frames:
        return None
    frame = found.frames[animation % len(found.frames)]
    return frame if frame.data is not None else None


def _place(frame: Frame, x: int, y: int, flags: DrawFlags) -> tuple[int, int, int, int]:
    if flags & DrawFlags.REAL:
        x = x - frame.width // 2 + frame.mx
    elif not flags & DrawFlags.NO_OFFSET:
        x = x - frame.width // 2 + frame.ox
        if not flags & DrawFlags.NO_CENTER:
            x += frame.cx
    x2 = x + frame.width
    if flags & DrawFlags.MIRROR_V:
        y2 = y
        if flags & DrawFlags.REAL:
            y2 = y + frame.height - frame.my - frame.cy
        elif not flags & DrawFlags.NO_OFFSET:
            y2 = y + frame.height - frame.oy
            if not flags & DrawFlags.NO_CENTER:
                y2 -= frame.cy
        y = y2 - frame.height
    else:
        if flags & DrawFlags.REAL:
            y = y - frame.height + frame.my + frame.cy
        elif not flags & DrawFlags.NO_OFFSET:
            y = y - frame.height + frame.oy
            if not flags & DrawFlags.NO_CENTER:
                y += frame.cy
        y2 = y + frame.height
    return x, y, x2, y2


def _skip_rows(frame: Frame, offset: int, rows: int) -> int:
    if frame.encoding is Encoding.RAW:
        return offset + rows * frame.width
    if frame.encoding is Encoding.RLE:
        return skip_rle_rows(frame.data, offset, rows)
    return offset


@dataclass
class _Window:
    offset: int
    x: int
    x2: int
    start_row: int
    step: int
    rows: int


def _window(frame: Frame, x: int, y: int, flags: DrawFlags, clip: Rect) -> _Window | None:
    x, y, x2, y2 = _place(frame, x, y, flags)
    if y2 < clip.y1 or y > clip.y2 or x2 < clip.x1 or x > clip.x2:
        return None
    mirrored = bool(flags & DrawFlags.MIRROR_V)
    offset = 0
    if y < clip.y1:
        if not mirrored:
            offset = _skip_rows(frame, offset, clip.y1 - y)
        y = clip.y1
    if y2 > clip.y2:
        if mirrored:
            offset = _skip_rows(frame, offset, y2 - clip.y2)
        y2 = clip.y2
    if y >= y2:
        return None
    if mirrored:
        return _Window(offset, x, x2, y2 - 1, -1, y2 - y)
    return _Window(offset, x, x2, y, 1, y2 - y)


def _rle_runs(
    data: bytes, pos: int, x: int, row: int, step: int, rows: int, left: int, right: int
) -> Iterator[tuple[int, int, int, int]]:
    """Yield (row, x, data offset, count) for runs not wholly outside ``left..right``."""
    if rows <= 0:
        return
    cursor = x
    while True:
        if pos >= len(data):
            raise ValueError("truncated RLE data")
        code = data[pos]
        pos += 1
        if code == 0:
            row += step
            cursor = x
            rows -= 1
            if rows == 0:
                return
        elif code <= _MAX_RUN:
            if cursor + code <= left or cursor > right:
                cursor += code
                pos += code
                continue
            if cursor < left:
                cut = left - cursor
                cursor += cut
                pos += cut
                code -= cut
            yield row, cursor, pos, code
            cursor += code
            pos += code
        elif code == 0x80:
            if pos >= len(data):
                raise ValueError("truncated RLE data")
            cursor += data[pos]
            pos += 1
        else:
            cursor += code - 0x80


def _take(data: bytes, pos: int, count: int) -> bytes:
    chunk = data[pos:pos + count]
    if len(chunk) != count:
        raise ValueError("truncated sprite data")
    return chunk


def _decode(frame: Frame) -> bytes:
    size = frame.width * frame.height
    if frame.encoding is Encoding.RAW:
        return _take(frame.data, 0, size)
    out = bytearray(size)
    if frame.encoding is Encoding.RLE:
        for row, x, pos, count in _rle_runs(frame.data, 0, 0, 0, 1, frame.height, 0, frame.width):
            count = min(count, frame.width - x)
            if count > 0:
                start = row * frame.width + x
                out[start:start + count] = _take(frame.data, pos, count)
    return bytes(out)


def _draw_scaled(bitmap: Bitmap, frame: Frame, clip: Rect) -> None:
    target_width, target_height = clip.width(), clip.height()
    if min(frame.width, frame.height, target_width, target_height) <= 0:
        return
    scaled = scale(_decode(frame), frame.width, frame.height, target_width, target_height)
    for row, line in enumerate(_rows(scaled, target_width, target_height)):
        base = (clip.y1 + row) * bitmap.width + clip.x1
        for column, value in enumerate(line):
            if value:
                bitmap.pixels[base + column] = value


def _shade(pixels: bytearray, index: int, code: int, scheme: ColorScheme) -> None:
    if 1 <= code <= 6:
        pixels[index] = scheme.shades[6 - code][pixels[index]]
    elif 7 <= code <= 9:
        pixels[index] = scheme.colors[code - 7] & 0xFF


def draw(
    bitmap: Bitmap,
    x: int,
    y: int,
    sprite: Sprite,
    cycle: int,
    flags: DrawFlags = DrawFlags.NONE,
    animation: int = 0,
    scheme: ColorScheme | None = None,
) -> None:
    """Draw a frame of ``sprite`` into ``bitmap`` inside its clipping rectangle."""
    flags = DrawFlags(flags)
    if flags & DrawFlags.USE_COLORS and scheme is None:
        raise ValueError("drawing with colours needs a colour scheme")
    frame = _lookup(sprite, cycle, animation)
    if frame is None:
        return
    clip = _effective_clip(bitmap)
    if flags & DrawFlags.SCALE_TO_CLIP:
        _draw_scaled(bitmap, frame, clip)
        return
    window = _window(frame, x, y, flags, clip)
    if window is None:
        return
    data, pixels, stride = frame.data, bitmap.pixels, bitmap.width
    if frame.encoding is Encoding.RAW:
        offset, left, right = window.offset, window.x, min(window.x2, clip.x2)
        if left < clip.x1:
            offset += clip.x1 - left
            left = clip.x1
        if left >= right:
            return
        count = right - left
        for line in range(window.rows):
            start = (window.start_row + line * window.step) * stride + left
            pixels[start:start + count] = _take(data, offset + line * frame.width, count)
    elif frame.encoding is Encoding.RLE:
        runs = _rle_runs(
            data, window.offset, window.x, window.start_row, window.step, window.rows, clip.x1, clip.x2
        )
        for row, left, pos, count in runs:
            count = min(count, clip.x2 - left)
            if count <= 0:
                continue
            start = row * stride + left
            chunk = _take(data, pos, count)
            if flags & DrawFlags.USE_COLORS:
                for index, code in enumerate(chunk, start):
                    _shade(pixels, index, code, scheme)
            else:
                pixels[start:start + count] = chunk


def hittest(
    bitmap: Bitmap,
    x: int,
    y: int,
    sprite: Sprite,
    cycle: int,
    flags: DrawFlags = DrawFlags.NONE,
    animation: int = 0,
    mouse: Point | None = None,
) -> bool:
    """True if ``mouse`` falls on an opaque run of an RLE frame drawn at ``x``, ``y``."""
    flags = DrawFlags(flags)
    mouse = mouse or Point()
    frame = _lookup(sprite, cycle, animation)
    if frame is None or frame.encoding is not Encoding.RLE:
        return False
    clip = _effective_clip(bitmap)
    window = _window(frame, x, y, flags, clip)
    if window is None:
        return False
    runs = _rle_runs(
        frame.data, window.offset, window.x, window.start_row, window.step, window.rows, clip.x1, clip.x2
    )
    return any(row == mouse.y and left <= mouse.x <= left + count for row, left, _, count in runs)


def _by_depth(first: ZSprite, second: ZSprite) -> int:
    return first.position.y - second.position.y


def draw_sorted(bitmap: Bitmap, zsprites: Iterable[ZSprite]) -> list[ZSprite]:
    """Draw sprites from back (small y) to front; return them in drawing order."""
    ordered = list(zsprites)
    xsort(ordered, _by_depth)
    for item in ordered:
        draw(
            bitmap,
            item.position.x,
            item.position.y,
            item.sprite,
            item.cycle,
            item.flags,
            item.animation,
            item.scheme,
        )
    return ordered


__all__ = [
    "Color",
    "ColorScheme",
    "Cycle",
    "DrawFlags",
    "Encoding",
    "Frame",
    "Sprite",
    "ZSprite",
    "build_color_schemes",
    "draw",
    "draw_sorted",
    "encode_raw",
    "encode_rle",
    "hittest",
    "is_opaque",
    "scale",
    "skip_rle_rows",
]