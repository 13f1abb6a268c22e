"""Random-access binary streams over in-memory data and files."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from enum import Enum
from os import PathLike
from typing import BinaryIO

__all__ = ["SeekDirection", "BinaryStream", "BinaryDataStream", "BinaryFileStream"]


class SeekDirection(Enum):
    """Reference point for a seek."""

    BEGIN = "begin"
    CURRENT = "current"
    END = "end"


def _resolve_seek(offset: int, direction: SeekDirection, current: int, size: int) -> int:
    """Compute the absolute position of a seek, raising ValueError if invalid."""
    if direction is SeekDirection.BEGIN:
        if offset < 0:
            raise ValueError("Invalid seek offset")
        pos = offset
    elif direction is SeekDirection.END:
        if offset > 0:
            raise ValueError("Invalid seek offset")
        pos = size + offset
    else:
        pos = current + offset
    if pos < 0 or pos > size:
        raise ValueError("Invalid seek offset")
    return pos


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class BinaryStream(ABC):
    """Base class for seekable byte streams with typed read helpers."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes, raising EOFError if too few remain."""

    @abstractmethod
    def seek(self, offset: int, direction: SeekDirection = SeekDirection.CURRENT) -> None:
        """Move the read position; ValueError if it would leave the stream."""

    @abstractmethod
    def tell(self) -> int:
        """Return the current read position."""

    def has_bytes_available(self) -> bool:
        return self.available_bytes() > 0

    def available_bytes(self) -> int:
        current = self.tell()
        self.seek(0, SeekDirection.END)
        end = self.tell()
        self.seek(current, SeekDirection.BEGIN)
        return end - current

    def get(self, pos: int, length: int) -> bytes:
        """Read ``length`` bytes at ``pos`` relative to the current position without moving it."""
        current = self.tell()
        self.seek(pos, SeekDirection.CURRENT)
        try:
            return self.read(length)
        finally:
            self.seek(current, SeekDirection.BEGIN)

    def read_all_data(self) -> bytes:
        return self.read(self.available_bytes())

    def _unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))[0]

    def read_uint8(self) -> int:
        return self._unpack("B")

    def read_int8(self) -> int:
        return self._unpack("b")

    def read_uint16(self) -> int:
        return self._unpack("=H")

    def read_big_endian_uint16(self) -> int:
        return self._unpack(">H")

    def read_little_endian_uint16(self) -> int:
        return self._unpack("<H")

    def read_uint32(self) -> int:
        return self._unpack("=I")

    def read_big_endian_uint32(self) -> int:
        return self._unpack(">I")

    def read_big_endian_int32(self) -> int:
        """Read a big-endian 32-bit value whose top bit is a sign flag over a 31-bit magnitude."""
        raw = self.read_big_endian_uint32()
        magnitude = raw & 0x7FFFFFFF
        return -magnitude if raw & 0x80000000 else magnitude

    def read_little_endian_uint32(self) -> int:
        return self._unpack("<I")

    def read_uint64(self) -> int:
        return self._unpack("=Q")

    def read_big_endian_uint64(self) -> int:
        return self._unpack(">Q")

    def read_little_endian_uint64(self) -> int:
        return self._unpack("<Q")

    @staticmethod
    def _fixed_point(raw: int, fractional_length: int) -> float:
        integer = raw >> fractional_length
        mask = (1 << fractional_length) - 1
        fractional = _to_float32((raw & mask) / (1 << fractional_length))
        return _to_float32(_to_float32(float(integer)) + fractional)

    def read_big_endian_fixed_point(self, integer_length: int, fractional_length: int) -> float:
        if integer_length + fractional_length == 16:
            raw = self.read_big_endian_uint16()
        else:
            raw = self.read_big_endian_uint32()
        return self._fixed_point(raw, fractional_length)

    def read_little_endian_fixed_point(self, integer_length: int, fractional_length: int) -> float:
        if integer_length + fractional_length == 16:
            raw = self.read_little_endian_uint16()
        else:
            raw = self.read_little_endian_uint32()
        return self._fixed_point(raw, fractional_length)

    def read_four_cc(self) -> str:
        return self.read(4).decode("latin-1")

    def read_pascal_string(self) -> str:
        length = self.read_uint8()
        if length == 0:
            return ""
        return _decode(self.read(length))

    def read_string(self, length: int) -> str:
        """Read a fixed-size field and return the text before its first NUL byte."""
        raw = self.read(length)
        return _decode(raw.split(b"\x00", 1)[0])

    def read_null_terminated_string(self) -> str:
        chunks = bytearray()
        while True:
            byte = self.read(1)
            if byte == b"\x00":
                break
            chunks += byte
        return _decode(bytes(chunks))


class BinaryDataStream(BinaryStream):
    """A binary stream over an in-memory byte sequence."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, size: int) -> bytes:
        if size < 0 or size > len(self._data) - self._pos:
            raise EOFError("Invalid read - Not enough data available")
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def seek(self, offset: int, direction: SeekDirection = SeekDirection.CURRENT) -> None:
        self._pos = _resolve_seek(offset, direction, self._pos, len(self._data))

    def tell(self) -> int:
        return self._pos


class BinaryFileStream(BinaryStream):
    """A binary stream reading from a file on disk."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self._path = path
        self._file: BinaryIO | None = open(path, "rb")
        self._file.seek(0, 2)
        self._size = self._file.tell()
        self._file.seek(0)
        self._pos = 0

    def _handle(self) -> BinaryIO:
        if self._file is None or self._file.closed:
            raise ValueError("Invalid file stream")
        return self._file

    def read(self, size: int) -> bytes:
        handle = self._handle()
        if size < 0 or size > self._size - self._pos:
            raise EOFError("Invalid read - Not enough data available")
        data = handle.read(size)
        if len(data) != size:
            raise EOFError("Invalid read - Not enough data available")
        self._pos += size
        return data

    def seek(self, offset: int, direction: SeekDirection = SeekDirection.CURRENT) -> None:
        handle = self._handle()
        pos = _resolve_seek(offset, direction, self._pos, self._size)
        self._pos = pos
        handle.seek(pos)

    def tell(self) -> int:
        self._handle()
        return self._pos

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> BinaryFileStream:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()