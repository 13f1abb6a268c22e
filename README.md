# isobox

Pure-Python building blocks for reading the ISO base media file format
(the container behind MP4 and MOV files): seekable binary readers, a
generic box class, and a decoder for the H.264 `avcC` configuration box.
It has no dependencies outside the standard library.

## Modules

- `isobox.binary_stream`
  - `BinaryStream` – abstract base with typed read helpers:
    `read_uint8`, `read_int8`, native-order `read_uint16` / `read_uint32` /
    `read_uint64`, big- and little-endian variants of those,
    `read_big_endian_int32` (top bit is a sign flag over a 31-bit magnitude),
    `read_big_endian_fixed_point` / `read_little_endian_fixed_point`
    (16-bit source when the two lengths add up to 16, otherwise 32-bit),
    `read_four_cc`, `read_pascal_string`, `read_string` (fixed-length field,
    cut at the first NUL) and `read_null_terminated_string`. It also offers
    `available_bytes`, `has_bytes_available`, `read_all_data` and `get`,
    which reads at an offset from the current position without moving it.
  - `BinaryDataStream` – reads from bytes held in memory.
  - `BinaryFileStream` – reads from a file on disk; close it with `close()`
    or use it as a context manager.
  - `SeekDirection` – `BEGIN`, `CURRENT` or `END`, the reference point for
    `seek(offset, direction)`; `CURRENT` is the default.
- `isobox.box` – `Box`, a box with a four-character `name`, its raw `data`
  (filled by `read_data`, which takes the rest of the stream) and
  `displayable_properties()`, a list of `(label, value)` pairs.
- `isobox.avcc` – `AVCC`, the `avcC` box, and `NALUnit`, one of its
  length-prefixed sequence or picture parameter sets.

Reading past the end of a stream raises `EOFError`; seeking before the
start or past the end raises `ValueError`, as does using a closed
`BinaryFileStream`.

## Installation

From a checkout of the project:

```
pip install .
```

## Usage

Reading values from bytes:

```python
from isobox.binary_stream import BinaryDataStream, SeekDirection

stream = BinaryDataStream(b"\x00\x00\x00\x18ftypmp42")
size = stream.read_big_endian_uint32()   # 24
kind = stream.read_four_cc()             # "ftyp"
stream.available_bytes()                 # 4
stream.seek(0, SeekDirection.BEGIN)
```

Reading from a file:

```python
from isobox.binary_stream import BinaryFileStream

with BinaryFileStream("movie.mp4") as stream:
    print(stream.available_bytes())
```

Decoding the body of an `avcC` box:

```python
from isobox.avcc import AVCC
from isobox.binary_stream import BinaryDataStream

body = bytes.fromhex("0164001fffe100046764001f01000268ee")
avcc = AVCC()
avcc.read_data(None, BinaryDataStream(body))

avcc.avc_profile_indication      # 100
avcc.avc_level_indication        # 31
avcc.length_size_minus_one       # 3
for label, value in avcc.displayable_properties():
    print(f"{label}: {value}")
for nal in avcc.displayable_objects():
    print(nal.displayable_properties())
# [('Length', '4'), ('Data', '67 64 00 1F')]
# [('Length', '2'), ('Data', '68 EE')]
```

If the record declares more parameter sets than the data holds, `AVCC`
stops reading them when the stream runs out.

## What it does not do

There is no whole-file parser: nothing walks a file's box tree, reads box
headers or picks a class by box type. `AVCC` is the only box type with its
own decoding; everything else is left to the generic `Box`. There is no
command-line tool and nothing is written back to files.

## Running the tests

```
pip install -e ".[test]"
pytest
```