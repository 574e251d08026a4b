"""Binary stream reading and text writing over a file object."""

from __future__ import annotations

import enum
from typing import BinaryIO


class Whence(enum.IntEnum):
    """Origin for :meth:`Stream.seek`."""

    BEGIN = 0
    CURRENT = 1
    END = 2


class Stream:
    """Wraps a binary file object with helpers for game file formats."""

    def __init__(self, fileobj: BinaryIO) -> None:
        self._file = fileobj

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._file.close()

    def read(self, count: int) -> bytes:
        return self._file.read(count)

    def write(self, data: bytes) -> int:
        return self._file.write(data)

    def seek(self, offset: int, whence: Whence = Whence.BEGIN) -> int:
        return self._file.seek(offset, int(whence))

    def _read_exact(self, count: int) -> bytes:
        data = self.read(count)
        if len(data) != count:
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return data

    def read_u8(self) -> int:
        return self._read_exact(1)[0]

    def read_u16(self) -> int:
        """Read two bytes, the first one being the high byte."""
        return int.from_bytes(self._read_exact(2), "big")

    def read_u32(self) -> int:
        """Read four bytes, the first one being the high byte."""
        return int.from_bytes(self._read_exact(4), "big")

    def size(self) -> int:
        """Total size of the stream; the position is left unchanged."""
        pos = self.seek(0, Whence.CURRENT)
        end = self.seek(0, Whence.END)
        self.seek(pos, Whence.BEGIN)
        return end

    def skip(self, count: int) -> None:
        self.seek(count, Whence.CURRENT)

    def write_text(self, text: str | bytes) -> Stream:
        if isinstance(text, str):
            text = text.encode("utf-8")
        self.write(text)
        return self

    def write_int(self, value: int) -> Stream:
        """Write an integer as decimal text."""
        return self.write_text(str(value))