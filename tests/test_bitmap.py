import pytest

from wastekit.bitmap import Bitmap
from wastekit.geometry import Rect


def lit(bitmap):
    return sum(1 for v in bitmap.pixels if v)


def test_new_bitmap_is_blank():
    bitmap = Bitmap(16, 8)
    assert len(bitmap.pixels) == 16 * 8
    assert lit(bitmap) == 0
    assert bitmap.clipping == Rect(0, 0, 16, 8)


def test_invalid_size():
    with pytest.raises(ValueError):
        Bitmap(0, 10)


def test_pixel_roundtrip():
    bitmap = Bitmap(16, 8)
    bitmap.pixel(3, 4, 9)
    assert bitmap.get(3, 4) == 9


def test_pixel_outside_clip_ignored():
    bitmap = Bitmap(16, 8)
    bitmap.pixel(16, 0, 9)
    bitmap.pixel(-1, 0, 9)
    assert lit(bitmap) == 0


def test_get_outside_raises():
    with pytest.raises(IndexError):
        Bitmap(16, 8).get(16, 0)


def test_horizontal_line_includes_endpoints():
    bitmap = Bitmap(16, 8)
    bitmap.line(2, 5, 6, 5, 9)
    assert [bitmap.get(x, 5) for x in range(2, 7)] == [9] * 5
    assert bitmap.get(1, 5) == 0
    assert bitmap.get(7, 5) == 0


def test_reversed_horizontal_line_same():
    a, b = Bitmap(16, 8), Bitmap(16, 8)
    a.line(2, 5, 6, 5, 9)
    b.line(6, 5, 2, 5, 9)
    assert a.pixels == b.pixels


def test_vertical_line():
    bitmap = Bitmap(16, 8)
    bitmap.line(4, 1, 4, 3, 7)
    assert [bitmap.get(4, y) for y in range(1, 4)] == [7, 7, 7]
    assert lit(bitmap) == 3


def test_diagonal_line():
    bitmap = Bitmap(16, 8)
    bitmap.line(0, 0, 4, 4, 5)
    assert all(bitmap.get(i, i) == 5 for i in range(5))
    assert lit(bitmap) == 5


def test_sloped_line_endpoints_set():
    bitmap = Bitmap(32, 32)
    bitmap.line(1, 2, 20, 9, 3)
    assert bitmap.get(1, 2) == 3
    assert bitmap.get(20, 9) == 3


def test_line_outside_clip_draws_nothing():
    bitmap = Bitmap(16, 8)
    with bitmap.clipped(Rect(0, 0, 4, 4)):
        bitmap.line(8, 6, 12, 6, 1)
        bitmap.line(10, 5, 10, 7, 1)
    assert lit(bitmap) == 0


def test_rectf_fills_half_open_area():
    bitmap = Bitmap(16, 8)
    bitmap.rectf(2, 1, 6, 4, 8)
    assert lit(bitmap) == (6 - 2) * (4 - 1)
    assert bitmap.get(2, 1) == 8
    assert bitmap.get(6, 1) == 0
    assert bitmap.get(2, 4) == 0


def test_rectb_outline_only():
    bitmap = Bitmap(16, 16)
    bitmap.rectb(2, 2, 8, 8, 4)
    for x, y in [(2, 2), (8, 2), (2, 8), (8, 8), (5, 2), (2, 5)]:
        assert bitmap.get(x, y) == 4
    assert bitmap.get(5, 5) == 0


def test_clipped_restores_and_limits():
    bitmap = Bitmap(16, 8)
    original = bitmap.clipping
    with bitmap.clipped(Rect(0, 0, 4, 4)) as surface:
        assert surface.clipping == Rect(0, 0, 4, 4)
        surface.pixel(5, 5, 1)
        surface.pixel(1, 1, 1)
    assert bitmap.clipping == original
    assert lit(bitmap) == 1
    assert bitmap.get(1, 1) == 1