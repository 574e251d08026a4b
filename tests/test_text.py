import pytest

from wastekit.bitmap import Bitmap
from wastekit.sprite import ColorScheme, Cycle, Frame, Sprite
from wastekit.text import Font

A_PIXELS = bytes([7, 0, 7, 7, 7, 7])


def make_font():
    sprite = Sprite(256)
    sprite.vars[:3] = [2, 1, 1]
    sprite.store(ord("A"), A_PIXELS, 3, 2, ox=1, oy=2)
    sprite.store(ord("B"), bytes([7] * 4), 2, 2, ox=1, oy=2)
    sprite.cycles[ord(" ")] = Cycle([Frame(width=2)])
    return Font(sprite)


def nonzero(bitmap):
    return [
        (index % bitmap.width, index // bitmap.width)
        for index, value in enumerate(bitmap.pixels)
        if value
    ]


def test_glyph_index_ascii_is_identity():
    assert make_font().glyph_index("A") == ord("A")


def test_glyph_index_cyrillic_and_unmapped():
    font = make_font()
    assert font.glyph_index("\u0410") == 128
    assert font.glyph_index(0x80) == 0


def test_glyph_index_rejects_long_string():
    with pytest.raises(ValueError):
        make_font().glyph_index("AB")


def test_text_width_is_additive():
    font = make_font()
    assert font.text_width("AB") == font.text_width("A") + font.text_width("B")
    assert font.text_width("AA") == 2 * font.text_width("A")


def test_text_width_accepts_bytes():
    font = make_font()
    assert font.text_width(b"AB A") == font.text_width("AB A")


def test_break_count_whole_text_fits():
    font = make_font()
    assert font.break_count("AA AA", 1000) == len("AA AA")


def test_break_count_breaks_after_space():
    font = make_font()
    assert font.break_count("AA AA", 12) == len("AA ")


def test_break_count_without_break_point():
    assert make_font().break_count("AAAA", 5) == 2


def test_break_count_stops_at_newline():
    font = make_font()
    assert font.break_count("A\nA", 1000) == len("A\n")


def test_lines_wrap():
    font = make_font()
    assert list(font.lines("AA AA", 12)) == ["AA ", "AA"]


def test_lines_keep_bytes_type():
    font = make_font()
    assert list(font.lines(b"AA AA", 12)) == [b"AA ", b"AA"]


def test_lines_skip_line_end():
    font = make_font()
    assert list(font.lines("A\r\nB", 1000)) == ["A\r", "B"]


def test_text_height_counts_lines():
    font = make_font()
    text = "AA AA"
    assert font.text_height(text, 12) == len(list(font.lines(text, 12))) * font.line_height()


def test_line_height_from_vars():
    font = make_font()
    assert font.line_height() == font.sprite.vars[0] + font.sprite.vars[2]


def test_text_height_unmapped_first_character():
    font = make_font()
    assert font.text_height("\u0402", 100) == font.line_height()
    assert list(font.lines("\u0402", 100)) == []


def test_draw_copies_glyph_pixels():
    font = make_font()
    bitmap = Bitmap(32, 32)
    advance = font.draw(bitmap, 10, 10, "A")
    assert advance == font.text_width("A")
    points = nonzero(bitmap)
    assert len(points) == sum(1 for value in A_PIXELS if value)
    assert all(10 <= x < 13 and 10 <= y < 12 for x, y in points)


def test_draw_with_scheme_uses_scheme_colour():
    font = make_font()
    bitmap = Bitmap(32, 32)
    scheme = ColorScheme((50, 60, 70), tuple(bytes(range(256)) for _ in range(6)))
    font.draw(bitmap, 10, 10, "A", scheme)
    values = {value for value in bitmap.pixels if value}
    assert values == {50}


def test_draw_wrapped_returns_height():
    font = make_font()
    bitmap = Bitmap(64, 64)
    height = font.draw_wrapped(bitmap, 0, 10, 12, "AA AA")
    assert height == 2 * font.line_height()
    rows = {y for _, y in nonzero(bitmap)}
    assert max(rows) - min(rows) >= font.line_height()


def test_draw_centered_places_line_in_middle():
    font = make_font()
    bitmap = Bitmap(64, 64)
    height = font.draw_centered(bitmap, 0, 10, 20, "A")
    assert height == font.line_height()
    left = min(x for x, _ in nonzero(bitmap))
    assert left == (20 - font.text_width("A")) // 2