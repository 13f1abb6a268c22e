import struct

import pytest

from isobox.binary_stream import (
    BinaryDataStream,
    BinaryFileStream,
    SeekDirection,
)


@pytest.mark.parametrize(
    "fmt, method, value",
    [
        ("B", "read_uint8", 200),
        ("b", "read_int8", -100),
        ("=H", "read_uint16", 4660),
        (">H", "read_big_endian_uint16", 4660),
        ("<H", "read_little_endian_uint16", 4660),
        ("=I", "read_uint32", 305419896),
        (">I", "read_big_endian_uint32", 305419896),
        ("<I", "read_little_endian_uint32", 305419896),
        ("=Q", "read_uint64", 1311768467463790320),
        (">Q", "read_big_endian_uint64", 1311768467463790320),
        ("<Q", "read_little_endian_uint64", 1311768467463790320),
    ],
)
def test_integer_round_trip(fmt, method, value):
    data = struct.pack(fmt, value)
    stream = BinaryDataStream(data)
    assert getattr(stream, method)() == value
    assert stream.tell() == len(data)
    assert not stream.has_bytes_available()


def test_big_endian_int32_positive():
    stream = BinaryDataStream(struct.pack(">I", 12345))
    assert stream.read_big_endian_int32() == 12345


def test_big_endian_int32_sign_magnitude():
    stream = BinaryDataStream(struct.pack(">I", 0x80000000 | 5))
    assert stream.read_big_endian_int32() == -5


def test_fixed_point_16_16():
    stream = BinaryDataStream(struct.pack(">I", 7 << 16))
    assert stream.read_big_endian_fixed_point(16, 16) == 7.0
    assert stream.tell() == 4


def test_fixed_point_8_8_uses_two_bytes():
    stream = BinaryDataStream(struct.pack(">H", (2 << 8) | 0x40) + b"\xff")
    assert stream.read_big_endian_fixed_point(8, 8) == 2.25
    assert stream.tell() == 2


def test_little_endian_fixed_point_matches_big_endian():
    raw = (9 << 16) | 0x8000
    big = BinaryDataStream(struct.pack(">I", raw)).read_big_endian_fixed_point(16, 16)
    little = BinaryDataStream(struct.pack("<I", raw)).read_little_endian_fixed_point(16, 16)
    assert big == little == 9.5


def test_read_four_cc():
    stream = BinaryDataStream(b"ftypmp42")
    assert stream.read_four_cc() == "ftyp"
    assert stream.read_four_cc() == "mp42"


def test_read_pascal_string():
    stream = BinaryDataStream(b"\x05hello!")
    assert stream.read_pascal_string() == "hello"
    assert stream.read(1) == b"!"


def test_read_pascal_string_empty():
    stream = BinaryDataStream(b"\x00abc")
    assert stream.read_pascal_string() == ""
    assert stream.tell() == 1


def test_read_string_stops_at_nul_but_consumes_length():
    stream = BinaryDataStream(b"abc\x00def\x00xx")
    assert stream.read_string(8) == "abc"
    assert stream.tell() == 8
    assert stream.read_all_data() == b"xx"


def test_read_null_terminated_string():
    stream = BinaryDataStream(b"VideoHandle\x00rest")
    assert stream.read_null_terminated_string() == "VideoHandle"
    assert stream.read_all_data() == b"rest"


def test_read_null_terminated_string_without_terminator():
    stream = BinaryDataStream(b"abc")
    with pytest.raises(EOFError):
        stream.read_null_terminated_string()


def test_read_past_end_raises():
    stream = BinaryDataStream(b"\x01\x02")
    with pytest.raises(EOFError):
        stream.read(3)
    assert stream.tell() == 0


def test_read_zero_bytes():
    stream = BinaryDataStream(b"")
    assert stream.read(0) == b""
    assert stream.read_all_data() == b""


def test_available_bytes_keeps_position():
    stream = BinaryDataStream(b"0123456789")
    stream.read(3)
    assert stream.available_bytes() == 7
    assert stream.tell() == 3


def test_get_does_not_move_position():
    stream = BinaryDataStream(b"0123456789")
    stream.read(2)
    assert stream.get(3, 2) == b"56"
    assert stream.tell() == 2


def test_seek_directions():
    stream = BinaryDataStream(b"0123456789")
    stream.seek(4, SeekDirection.BEGIN)
    assert stream.read(1) == b"4"
    stream.seek(-2, SeekDirection.END)
    assert stream.read(1) == b"8"
    stream.seek(-3)
    assert stream.read(1) == b"6"
    stream.seek(0, SeekDirection.END)
    assert stream.tell() == 10


@pytest.mark.parametrize(
    "offset, direction",
    [
        (-1, SeekDirection.BEGIN),
        (1, SeekDirection.END),
        (11, SeekDirection.BEGIN),
        (-11, SeekDirection.END),
        (-1, SeekDirection.CURRENT),
        (11, SeekDirection.CURRENT),
    ],
)
def test_invalid_seek(offset, direction):
    stream = BinaryDataStream(b"0123456789")
    with pytest.raises(ValueError):
        stream.seek(offset, direction)
    assert stream.tell() == 0


def test_file_stream_reads(tmp_path):
    path = tmp_path / "sample.bin"
    payload = struct.pack(">I", 24) + b"ftyp" + b"mp42"
    path.write_bytes(payload)
    with BinaryFileStream(path) as stream:
        assert stream.available_bytes() == len(payload)
        assert stream.read_big_endian_uint32() == 24
        assert stream.read_four_cc() == "ftyp"
        assert stream.get(0, 4) == b"mp42"
        assert stream.tell() == 8
        assert stream.read_all_data() == b"mp42"
        with pytest.raises(EOFError):
            stream.read(1)


def test_file_stream_seek(tmp_path):
    path = tmp_path / "digits.bin"
    path.write_bytes(b"0123456789")
    with BinaryFileStream(path) as stream:
        stream.seek(-1, SeekDirection.END)
        assert stream.read(1) == b"9"
        stream.seek(2, SeekDirection.BEGIN)
        assert stream.read(2) == b"23"
        with pytest.raises(ValueError):
            stream.seek(20, SeekDirection.BEGIN)
        assert stream.tell() == 4


def test_file_stream_closed(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abcd")
    stream = BinaryFileStream(path)
    stream.close()
    with pytest.raises(ValueError):
        stream.read(1)
    with pytest.raises(ValueError):
        stream.tell()


def test_file_stream_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BinaryFileStream(tmp_path / "missing.bin")