import io

import pytest

from riffwave.byte_reader import ByteReader
from riffwave.exceptions import TruncatedInput

from conftest import ShortReadSource


def test_little_endian_integers():
    reader = ByteReader(io.BytesIO(b'\x34\x12\x78\x56\x34\x12'))
    assert reader.read_u16() == 0x1234
    assert reader.read_u32() == 0x12345678
    assert reader.position == 6


def test_read_fourcc_returns_raw_bytes():
    reader = ByteReader(io.BytesIO(b'fmt \x10'))
    assert reader.read_fourcc() == b'fmt '


def test_truncated_read_reports_counts():
    reader = ByteReader(io.BytesIO(b'\x00\x01\x02'))
    reader.read_u16()
    with pytest.raises(TruncatedInput) as excinfo:
        reader.read_u32()
    assert excinfo.value.expected == 4
    assert excinfo.value.received == 1
    assert excinfo.value.offset == 2
    assert reader.position == 3


def test_short_reads_are_reassembled():
    reader = ByteReader(ShortReadSource(b'RIFF\x24\x00\x00\x00'))
    assert reader.read_fourcc() == b'RIFF'
    assert reader.read_u32() == 0x24


def test_skip_uses_bounded_blocks():
    reader = ByteReader(io.BytesIO(bytes(10) + b'\xff'), block_size=3)
    reader.skip(10)
    assert reader.position == 10
    assert reader.read_bytes(1) == b'\xff'


def test_skip_past_end_is_truncated():
    reader = ByteReader(io.BytesIO(bytes(5)), block_size=2)
    with pytest.raises(TruncatedInput) as excinfo:
        reader.skip(8)
    assert excinfo.value.received == 5


def test_at_eof_does_not_lose_bytes():
    reader = ByteReader(io.BytesIO(b'ab'))
    assert not reader.at_eof()
    assert reader.position == 0
    assert reader.read_bytes(2) == b'ab'
    assert reader.at_eof()


def test_read_available_stops_at_end():
    reader = ByteReader(io.BytesIO(b'xyz'))
    assert reader.read_available(10) == b'xyz'
    assert reader.read_available(1) == b''
