"""Message (.msg) files: numbered text entries in braces."""

from __future__ import annotations

import itertools
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from wastekit.codepage import decode_game_text, skip_past

TEXT_ENCODING = "cp1251"


@dataclass(frozen=True)
class MessageItem:
    """One numbered message."""

    id: int
    text: str


def escape_message(text: str) -> str:
    """Drop line breaks and escape double quotes."""
    return text.replace("\r", "").replace("\n", "").replace('"', '\\"')


def _parse_int(text: str, pos: int) -> tuple[int, int]:
    start = pos
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    digits = pos
    while pos < len(text) and text[pos].isdigit():
        pos += 1
    if pos == digits:
        return 0, start
    return int(text[start:pos]), pos


def parse_messages(text: str) -> list[MessageItem]:
    """Parse ``{id}{sound}{text}`` entries.

    An entry whose closing brace is the last character of the text is
    dropped, so files normally end with a line break.
    """
    items = []
    pos = 0

    def at_end(position: int) -> bool:
        return position >= len(text) or text[position] == "\0"

    while not at_end(pos):
        pos = skip_past(text, pos, "{")
        if at_end(pos):
            break
        message_id, pos = _parse_int(text, pos)
        pos = skip_past(text, pos, "}")
        if at_end(pos):
            break
        pos = skip_past(text, pos, "{")
        if at_end(pos):
            break
        pos = skip_past(text, pos, "}")
        if at_end(pos):
            break
        pos = skip_past(text, pos, "{")
        if at_end(pos):
            break
        start = pos
        pos = skip_past(text, pos, "}")
        if at_end(pos):
            break
        items.append(MessageItem(message_id, text[start:pos - 1]))
    return items


def load_messages(path: str | os.PathLike[str]) -> list[MessageItem]:
    """Read a message file in the game code page and parse it."""
    data = decode_game_text(Path(path).read_bytes())
    return parse_messages(data.decode(TEXT_ENCODING, errors="replace"))


def message_name(message_id: int, items: Iterable[MessageItem]) -> str:
    """The text of message ``message_id``.

    An item with id 0 ends the list. An unknown id gives ``"<?>"``, except
    -1 which gives an empty string.
    """
    for item in itertools.takewhile(lambda entry: entry.id, items):
        if item.id == message_id:
            return item.text
    if message_id == -1:
        return ""
    return "<?>"