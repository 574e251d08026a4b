import struct

import pytest

from wastekit.aaf import HEADER_SIZE, load_aaf, parse_aaf
from wastekit.sprite import Encoding, encode_rle
from wastekit.text import Font

HEIGHT, GAP_HOR, SPACE, GAP_VER = 6, 1, 4, 2


def build_aaf(glyphs):
    header = struct.pack(">I4H", 1, HEIGHT, GAP_HOR, SPACE, GAP_VER)
    table = bytearray()
    body = bytearray()
    for glyph in range(256):
        width, rows, pixels = glyphs.get(glyph, (0, 0, b""))
        table += struct.pack(">HHI", width, rows, 0xDEAD)
        body += pixels
    return header + bytes(table) + bytes(body)


GLYPHS = {
    65: (2, 2, bytes([1, 2, 3, 4])),
    66: (2, 1, bytes([0, 5])),
}


def test_header_only_file_parses_and_one_byte_less_fails():
    data = build_aaf({})
    assert len(data) == HEADER_SIZE
    sprite = parse_aaf(data)
    assert sprite.frame_width(65) == SPACE
    with pytest.raises(ValueError):
        parse_aaf(data[: HEADER_SIZE - 1])


def test_vars_from_header():
    sprite = parse_aaf(build_aaf(GLYPHS))
    assert sprite.vars[:3] == [HEIGHT, GAP_HOR, GAP_VER]


def test_opaque_glyph_stored_raw():
    sprite = parse_aaf(build_aaf(GLYPHS))
    frame = sprite.frame(65)
    assert frame.encoding is Encoding.RAW
    assert frame.data == bytes([1, 2, 3, 4])
    assert (frame.width, frame.height) == (2, 2)
    assert (frame.ox, frame.oy) == (1, HEIGHT)


def test_transparent_glyph_stored_rle():
    sprite = parse_aaf(build_aaf(GLYPHS))
    frame = sprite.frame(66)
    assert frame.encoding is Encoding.RLE
    assert frame.data == encode_rle(bytes([0, 5]), 2, 1)


def test_empty_glyph_has_space_width():
    sprite = parse_aaf(build_aaf(GLYPHS))
    assert sprite.frame_width(32) == SPACE
    assert sprite.frame(32).data is None


def test_font_from_aaf_measures_text():
    font = Font(parse_aaf(build_aaf(GLYPHS)))
    assert font.text_width("AA") == 2 * (2 + GAP_HOR)
    assert font.line_height() == HEIGHT + GAP_VER


def test_short_header_raises():
    with pytest.raises(ValueError):
        parse_aaf(b"\x00" * 10)


def test_truncated_pixels_raise():
    data = build_aaf(GLYPHS)
    with pytest.raises(ValueError):
        parse_aaf(data[:-3])


def test_load_aaf(tmp_path):
    path = tmp_path / "font.aaf"
    path.write_bytes(build_aaf(GLYPHS))
    sprite = load_aaf(path)
    assert sprite.frame(65).data == bytes([1, 2, 3, 4])