import io
import struct

import pytest


KSDATAFORMAT_SUBTYPE_PCM = bytes.fromhex("0100000000001000800000aa00389b71")


def chunk(chunk_id, body, size=None, pad=True):
    """Encode one chunk; size overrides the declared length."""
    declared = len(body) if size is None else size
    out = chunk_id + struct.pack('<I', declared) + body
    if pad and len(body) % 2:
        out += b'\x00'
    return out


def pcm_fmt_body(channels=2, sample_rate=44100, bits=16, tag=1):
    block_align = channels * bits // 8
    return struct.pack('<HHIIHH', tag, channels, sample_rate,
                       sample_rate * block_align, block_align, bits)


def extensible_fmt_body(channels=2, sample_rate=48000, bits=24, valid_bits=20,
                        channel_mask=0x3, sub_format=KSDATAFORMAT_SUBTYPE_PCM,
                        extra_info_size=22, trailing=b''):
    return (pcm_fmt_body(channels, sample_rate, bits, tag=0xFFFE)
            + struct.pack('<HHI', extra_info_size, valid_bits, channel_mask)
            + sub_format + trailing)


def riff(*chunks, riff_size=None, form=b'WAVE'):
    body = form + b''.join(chunks)
    size = len(body) if riff_size is None else riff_size
    return b'RIFF' + struct.pack('<I', size) + body


class ShortReadSource:
    """Source that returns at most one byte per read, like a slow pipe."""

    def __init__(self, data):
        self._buffer = io.BytesIO(data)

    def read(self, n):
        return self._buffer.read(min(n, 1))


@pytest.fixture
def minimal_wav():
    """Two channel 44.1kHz 16-bit PCM with a four byte payload."""
    return riff(chunk(b'fmt ', pcm_fmt_body()), chunk(b'data', b'\x01\x02\x03\x04'))
