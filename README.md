# wastekit

A pure-Python toolkit for the assets and rules of an isometric
post-apocalyptic role-playing game: palette-indexed drawing, run-length
encoded sprites, bitmap fonts, message files, code-page tables and the game
calendar. It has no dependencies outside the standard library.

## Modules

- `wastekit.geometry` – `Rect` (`width`, `height`, `is_valid`, `shrink`) and
  `Point` (`in_rect`, `in_triangle`).
- `wastekit.rng` – `Rng`, a 15-bit linear congruential generator with `seed`,
  `rand`, `choice` and `d100`; `count_until_zero` counts the items of a list
  before its first zero.
- `wastekit.sorting` – `xsort`, an in-place quicksort driven by a three-way
  compare function, and `xfind`, a binary search over a sorted sequence.
- `wastekit.calendar` – game time is counted in minutes ("rounds").
  `round_from_date`, `year_of`, `month_of`, `day_of` and `hour_of` convert
  between rounds and dates; `World` holds the clock and `World.reset` sets it
  to 15 January 2200.
- `wastekit.stream` – `Stream` wraps a binary file object: `read_u8`,
  `read_u16` and `read_u32` read big-endian values (raising `EOFError` when
  data runs out), `size` and `skip` move around, `write_text` and `write_int`
  write text. It is a context manager.
- `wastekit.color` – `Color` (`gray`, `lighten`, `darken`, `bright`, `mix`,
  `negative`) and `Palette`, 256 six-bit entries with `color`, `index_of`
  (through an inverse table if given, otherwise nearest match) and
  `rgb_table`. `Palette.from_bytes` reads palette file contents;
  `DEFAULT_PALETTE` is the built-in palette.
- `wastekit.bitmap` – `Bitmap`, an 8-bit indexed surface (640×480 by default)
  with a clipping rectangle: `get`, `pixel`, `line`, `rectf`, `rectb`, and
  the `clipped` context manager.
- `wastekit.counter` – `Counter.passed(ms)` reports when more than `ms`
  milliseconds went by; a clock function can be passed in.
- `wastekit.sprite` – `Sprite` with animation `Cycle`s of `Frame`s,
  `Sprite.store` to encode pixels as raw or RLE (`Encoding`), `encode_raw`,
  `encode_rle`, `is_opaque`, `skip_rle_rows`, nearest-neighbour `scale`,
  `draw` and `hittest` with `DrawFlags`, colour-keyed drawing through
  `ColorScheme`s made by `build_color_schemes`, and `draw_sorted` for
  `ZSprite`s ordered by depth.
- `wastekit.text` – `Font` over a font sprite: `glyph_index`, `text_width`,
  `break_count`, `line_height`, `text_height`, `lines`, `draw`,
  `draw_wrapped` and `draw_centered`. Text is handled in code page 1251.
- `wastekit.aaf` – `parse_aaf` and `load_aaf` turn AAF font files into font
  sprites.
- `wastekit.codepage` – `decode_game_text` converts game text to code page
  1251; `skip_past` scans text; `identity_table` and `recode_table` build
  byte conversion tables from the `CP1251` and `CP866` code point lists.
- `wastekit.msgfile` – `parse_messages` and `load_messages` read
  `{id}{sound}{text}` message files into `MessageItem`s; `message_name` looks
  an id up (`"<?>"` when unknown, `""` for -1); `escape_message` drops line
  breaks and escapes double quotes.

## Examples

```python
from wastekit.calendar import round_from_date, year_of, month_of, day_of

r = round_from_date(2200, 1, 15)
assert (year_of(r), month_of(r), day_of(r)) == (2200, 1, 15)
```

```python
from wastekit.rng import Rng

rng = Rng()
rng.seed(1)
roll = rng.d100()  # 0..99
```

```python
from wastekit.msgfile import parse_messages, message_name

items = parse_messages("{100}{}{Hello there}\n{101}{}{Goodbye}\n")
print(message_name(100, items))   # Hello there
print(message_name(999, items))   # <?>
```

An entry whose closing brace is the very last character of the text is not
read, so message text should end with a line break.

```python
from wastekit.bitmap import Bitmap
from wastekit.sprite import DrawFlags, Sprite, draw

bmp = Bitmap(64, 64)
bmp.line(0, 0, 63, 63, 15)
assert bmp.get(10, 10) == 15

sprite = Sprite(1)
sprite.store(0, bytes([0, 5, 5, 0]), 4, 1)   # stored as RLE: it has transparent pixels
draw(bmp, 10, 20, sprite, 0, DrawFlags.NO_OFFSET)
assert [bmp.get(x, 20) for x in range(10, 14)] == [0, 5, 5, 0]
```

## What it does not do

wastekit works on data in memory and on files you point it at. It opens no
window, reads no keyboard or mouse, and has no game loop, dialogs or
viewer. Resources are not looked up by name from a data directory, sprites
cannot be written back to files, and creature statistics, inventories, maps
and path finding are not part of the package.

## Running the tests

```
pip install .[test]
pytest
```