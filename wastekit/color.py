"""RGBA colours, the built-in 256-entry palette and colour lookup."""

from __future__ import annotations

from dataclasses import dataclass, field

PALETTE_SIZE = 256
PALETTE_BYTES = PALETTE_SIZE * 3
INVERSE_BYTES = 32 * 32 * 32
UNUSED_ENTRY = 255

_DEFAULT_ENTRIES = (
    255, 255, 255, 59, 59, 59, 55, 55, 55, 51, 51, 51, 47, 47, 47, 44, 44, 44, 40, 40, 40, 36, 36, 36,
    32, 32, 32, 29, 29, 29, 25, 25, 25, 21, 21, 21, 18, 18, 18, 14, 14, 14, 10, 10, 10, 8, 8, 8,
    63, 59, 59, 59, 54, 54, 55, 49, 49, 52, 44, 44, 48, 40, 40, 44, 36, 36, 41, 32, 32, 37, 28, 28,
    33, 24, 24, 30, 21, 21, 26, 17, 17, 22, 14, 14, 19, 11, 11, 15, 9, 9, 11, 6, 6, 8, 4, 4,
    59, 59, 63, 54, 54, 59, 49, 49, 55, 44, 44, 52, 40, 40, 48, 36, 36, 44, 32, 32, 41, 28, 28, 37,
    24, 24, 33, 21, 21, 30, 17, 17, 26, 14, 14, 22, 11, 11, 19, 9, 9, 15, 6, 6, 11, 4, 4, 8,
    63, 44, 60, 49, 24, 42, 26, 9, 24, 19, 5, 18, 14, 3, 13, 10, 4, 9, 9, 1, 9, 7, 3, 6,
    63, 63, 50, 63, 63, 31, 57, 54, 3, 51, 46, 7, 46, 39, 10, 41, 34, 12, 36, 30, 9, 31, 26, 6,
    27, 22, 4, 22, 18, 2, 18, 14, 1, 13, 10, 0, 8, 6, 0, 54, 63, 39, 45, 54, 33, 38, 46, 28,
    30, 38, 23, 23, 30, 18, 16, 22, 13, 10, 14, 8, 28, 24, 20, 21, 18, 13, 14, 12, 8, 26, 30, 20,
    28, 30, 8, 28, 26, 10, 24, 24, 9, 19, 17, 9, 14, 12, 8, 39, 43, 39, 30, 37, 30, 22, 31, 22,
    16, 26, 16, 14, 22, 22, 12, 19, 18, 10, 17, 15, 8, 15, 11, 7, 12, 9, 5, 10, 6, 4, 8, 4,
    6, 12, 6, 4, 9, 3, 2, 7, 1, 1, 5, 0, 1, 3, 0, 35, 39, 39, 30, 37, 38, 25, 34, 37,
    20, 31, 36, 16, 27, 35, 12, 22, 35, 11, 19, 31, 10, 17, 27, 8, 14, 23, 7, 12, 19, 6, 10, 16,
    39, 41, 41, 14, 18, 26, 20, 22, 22, 22, 26, 33, 14, 16, 20, 47, 47, 47, 43, 41, 38, 40, 36, 31,
    37, 31, 24, 34, 26, 19, 31, 22, 13, 28, 18, 9, 25, 15, 5, 22, 12, 2, 63, 51, 51, 63, 44, 44,
    63, 38, 38, 63, 31, 31, 63, 25, 25, 63, 18, 18, 63, 12, 12, 63, 0, 0, 56, 0, 0, 49, 0, 0,
    42, 0, 0, 36, 0, 0, 29, 0, 0, 22, 0, 0, 16, 0, 0, 63, 56, 50, 63, 49, 37, 63, 46, 30,
    63, 43, 24, 63, 39, 18, 63, 37, 11, 63, 34, 5, 63, 31, 0, 55, 27, 0, 48, 24, 0, 41, 20, 0,
    33, 17, 0, 26, 13, 0, 19, 9, 0, 12, 6, 0, 62, 53, 41, 54, 44, 30, 50, 40, 25, 47, 36, 21,
    43, 32, 17, 39, 29, 13, 35, 25, 10, 31, 22, 7, 28, 19, 5, 24, 16, 2, 20, 13, 1, 16, 10, 0,
    13, 8, 0, 63, 57, 46, 58, 50, 38, 53, 43, 31, 49, 36, 25, 44, 29, 19, 40, 23, 14, 36, 19, 11,
    33, 15, 8, 30, 11, 6, 27, 8, 4, 23, 5, 2, 18, 3, 1, 15, 1, 0, 63, 58, 55, 62, 53, 47,
    61, 48, 40, 60, 44, 33, 60, 40, 27, 60, 37, 23, 54, 32, 21, 48, 28, 18, 42, 24, 16, 36, 20, 14,
    30, 16, 12, 24, 12, 9, 18, 9, 7, 14, 6, 5, 25, 57, 25, 5, 38, 5, 0, 41, 0, 20, 20, 18,
    0, 27, 0, 35, 35, 33, 7, 7, 7, 26, 20, 14, 12, 10, 8, 35, 28, 24, 18, 14, 10, 3, 3, 3,
    15, 15, 15, 27, 29, 27, 30, 33, 30, 34, 37, 34, 37, 41, 37, 22, 26, 24, 24, 28, 26, 15, 62, 0,
    14, 53, 2, 13, 45, 4, 12, 37, 5, 10, 29, 6, 63, 63, 63, 60, 59, 52, 52, 46, 34, 38, 31, 20,
    26, 22, 15, 20, 16, 9, 13, 10, 7, 6, 4, 3, 0, 0, 0, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
)

DEFAULT_PALETTE = bytes(_DEFAULT_ENTRIES) + bytes(PALETTE_BYTES - len(_DEFAULT_ENTRIES))


def _clamp(value: int) -> int:
    return max(0, min(value, 255))


@dataclass(frozen=True)
class Color:
    """An 8-bit per channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __str__(self) -> str:
        return f"{self.r}, {self.g}, {self.b}"

    def gray(self) -> Color:
        level = (self.r + self.g + self.b) // 3
        return Color(level, level, level, self.a)

    def lighten(self) -> Color:
        """Raise each channel by a quarter, saturating at 255."""
        return Color(
            min(self.r + (self.r >> 2), 255),
            min(self.g + (self.g >> 2), 255),
            min(self.b + (self.b >> 2), 255),
            self.a,
        )

    def darken(self) -> Color:
        """Lower each channel by an eighth."""
        return Color(
            self.r - (self.r >> 3),
            self.g - (self.g >> 3),
            self.b - (self.b >> 3),
            self.a,
        )

    def bright(self, percent: int) -> Color:
        """Shift every channel by ``percent - 100`` percent of full scale."""
        shift = int(256 * (percent - 100) / 100)
        return Color(
            _clamp(self.r + shift),
            _clamp(self.g + shift),
            _clamp(self.b + shift),
            self.a,
        )

    def mix(self, other: Color, alpha: int) -> Color:
        """Blend with ``other``; ``alpha`` of 255 keeps this colour."""
        alpha &= 0xFF
        rest = 255 - alpha
        return Color(
            (self.r * alpha + other.r * rest) >> 8,
            (self.g * alpha + other.g * rest) >> 8,
            (self.b * alpha + other.b * rest) >> 8,
            self.a,
        )

    def negative(self) -> Color:
        return Color(~self.r & 0xFF, ~self.g & 0xFF, ~self.b & 0xFF, ~self.a & 0xFF)


def _key(color: Color) -> int:
    return ((color.r >> 3) << 10) | ((color.g >> 3) << 5) | (color.b >> 3)


@dataclass
class Palette:
    """256 six-bit RGB entries with an optional 15-bit inverse lookup table.

    An entry whose red component is 255 is unused.
    """

    rgb: bytes = DEFAULT_PALETTE
    inverse: bytes | None = None
    _cache: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.rgb) < PALETTE_BYTES:
            raise ValueError(f"palette needs {PALETTE_BYTES} bytes, got {len(self.rgb)}")
        if self.inverse is not None and len(self.inverse) < INVERSE_BYTES:
            raise ValueError(f"inverse table needs {INVERSE_BYTES} bytes, got {len(self.inverse)}")

    @classmethod
    def from_bytes(cls, data: bytes) -> Palette:
        """Build from palette file contents: entries followed by an inverse table."""
        if len(data) < PALETTE_BYTES:
            raise ValueError(f"palette data needs at least {PALETTE_BYTES} bytes")
        inverse = data[PALETTE_BYTES:PALETTE_BYTES + INVERSE_BYTES]
        return cls(bytes(data[:PALETTE_BYTES]), bytes(inverse) if len(inverse) == INVERSE_BYTES else None)

    def _entry(self, index: int) -> tuple[int, int, int]:
        base = (index & 0xFF) * 3
        return self.rgb[base], self.rgb[base + 1], self.rgb[base + 2]

    def color(self, index: int) -> Color:
        """The colour of a palette entry scaled to 8 bits, alpha zero."""
        r, g, b = self._entry(index)
        return Color((r << 2) & 0xFF, (g << 2) & 0xFF, (b << 2) & 0xFF, 0)

    def index_of(self, color: Color) -> int:
        """The palette index that best matches ``color``."""
        key = _key(color)
        if self.inverse is not None:
            return self.inverse[key]
        if key not in self._cache:
            self._cache[key] = self._nearest(key)
        return self._cache[key]

    def _nearest(self, key: int) -> int:
        target = ((key >> 10) << 3, ((key >> 5) & 0x1F) << 3, (key & 0x1F) << 3)
        best, best_distance = 0, None
        for index in range(PALETTE_SIZE):
            entry = self._entry(index)
            if entry[0] == UNUSED_ENTRY:
                continue
            distance = sum((c * 4 - t) ** 2 for c, t in zip(entry, target))
            if best_distance is None or distance < best_distance:
                best, best_distance = index, distance
        return best

    def rgb_table(self) -> list[tuple[int, int, int]]:
        """Display colours for all 256 entries; unused entries are black."""
        table = []
        for index in range(PALETTE_SIZE):
            r, g, b = self._entry(index)
            if r == UNUSED_ENTRY:
                table.append((0, 0, 0))
            else:
                table.append(((r * 4) & 0xFF, (g * 4) & 0xFF, (b * 4) & 0xFF))
        return table