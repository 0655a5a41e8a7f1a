# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
RIFF/WAVE chunk model

Plain data types produced by the wave parser. A WaveDescriptor describes the
whole file structure but never holds payload bytes; audio samples are read
lazily through WaveReader.data().

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple, Union
import uuid


# Chunk identifiers
RIFF_ID = b'RIFF'
WAVE_ID = b'WAVE'
FMT_ID = b'fmt '
FACT_ID = b'fact'
DATA_ID = b'data'

# Standard fmt layout (format tag through bits per sample)
FMT_BASE_SIZE = 16
# cbSize field that follows the base layout
FMT_CB_SIZE_FIELD = 2
# valid bits (2) + channel mask (4) + sub format GUID (16)
EXTENSIBLE_MIN_EXTRA = 22
FACT_MIN_SIZE = 4


class WaveFormatTag(IntEnum):
    """Known fmt chunk format codes."""
    PCM = 0x0001
    IEEE_FLOAT = 0x0003
    ALAW = 0x0006
    MULAW = 0x0007
    EXTENSIBLE = 0xFFFE  # Forces the extensible fmt layout

    @classmethod
    def classify(cls, code: int) -> Union['WaveFormatTag', int]:
        """Return the matching member, or the raw code for unrecognized tags."""
        try:
            return cls(code)
        except ValueError:
            return code


# WAVEFORMATEXTENSIBLE dwChannelMask bits
SPEAKER_POSITIONS = [
    (0x1, 'FrontLeft'),
    (0x2, 'FrontRight'),
    (0x4, 'FrontCenter'),
    (0x8, 'LowFrequency'),
    (0x10, 'BackLeft'),
    (0x20, 'BackRight'),
    (0x40, 'FrontLeftOfCenter'),
    (0x80, 'FrontRightOfCenter'),
    (0x100, 'BackCenter'),
    (0x200, 'SideLeft'),
    (0x400, 'SideRight'),
    (0x800, 'TopCenter'),
    (0x1000, 'TopFrontLeft'),
    (0x2000, 'TopFrontCenter'),
    (0x4000, 'TopFrontRight'),
    (0x8000, 'TopBackLeft'),
    (0x10000, 'TopBackCenter'),
    (0x20000, 'TopBackRight'),
]


def format_tag_name(tag: Union[WaveFormatTag, int]) -> str:
    """Human-readable name for a classified format tag."""
    if isinstance(tag, WaveFormatTag):
        return tag.name
    return f'Unknown(0x{tag:04X})'


@dataclass(frozen=True)
class FormatExtension:
    """Fields only present in the extensible fmt layout."""
    valid_bits_per_sample: int
    channel_mask: int
    sub_format: uuid.UUID
    remaining_data: bytes = b''

    @property
    def sub_format_bytes(self) -> bytes:
        """The GUID exactly as stored in the file."""
        return self.sub_format.bytes_le

    def speaker_positions(self) -> List[str]:
        """Decode the channel mask into speaker position names."""
        return [name for bit, name in SPEAKER_POSITIONS if self.channel_mask & bit]


@dataclass(frozen=True)
class FormatChunk:
    """
    Parsed 'fmt ' chunk.

    extra_info_size is None for the bare 16-byte layout. For the
    non-extensible layout with a cbSize field, the opaque bytes that follow
    it are kept in extra_data; the extensible layout keeps its fields in
    extension.
    """
    chunk_size: int
    format_tag: Union[WaveFormatTag, int]
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    extra_info_size: Optional[int] = None
    extra_data: bytes = b''
    extension: Optional[FormatExtension] = None

    @property
    def is_extensible(self) -> bool:
        return self.extension is not None


@dataclass(frozen=True)
class FactChunk:
    chunk_size: int
    sample_length: int
    remaining_data: bytes = b''


@dataclass(frozen=True)
class UnknownChunk:
    chunk_id: bytes
    chunk_size: int

    @property
    def name(self) -> str:
        return self.chunk_id.decode('latin-1')


@dataclass(frozen=True)
class DataChunkDescriptor:
    """Location of the audio payload; offset counts from the start of the source."""
    chunk_size: int
    offset: int

    @property
    def has_pad_byte(self) -> bool:
        return self.chunk_size % 2 == 1


@dataclass(frozen=True)
class WaveDescriptor:
    """Structure of a whole RIFF/WAVE file, built once by WaveReader."""
    riff_size: int
    format: FormatChunk
    data: DataChunkDescriptor
    fact: Optional[FactChunk] = None
    unknown_chunks: Tuple[UnknownChunk, ...] = field(default_factory=tuple)

    @property
    def unknown_chunk_ids(self) -> List[bytes]:
        return [chunk.chunk_id for chunk in self.unknown_chunks]

    @property
    def frame_count(self) -> Optional[int]:
        if not self.format.block_align:
            return None
        return self.data.chunk_size // self.format.block_align

    @property
    def duration_seconds(self) -> Optional[float]:
        frames = self.frame_count
        if frames is None or not self.format.sample_rate:
            return None
        return frames / self.format.sample_rate
