# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
riffwave - A Pure Python RIFF/WAVE Structure Reader

Reads the chunk structure of WAV files from any binary source: the format
descriptor (standard or extensible), the optional fact chunk, unknown chunks,
and the raw audio payload. Sample values are never interpreted.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from riffwave.byte_reader import ByteReader, ByteSource
from riffwave.chunks import (
    DataChunkDescriptor,
    FactChunk,
    FormatChunk,
    FormatExtension,
    UnknownChunk,
    WaveDescriptor,
    WaveFormatTag,
)
from riffwave.config import ReaderConfig
from riffwave.exceptions import (
    DataAlreadyConsumed,
    DuplicateFactChunk,
    DuplicateFormatChunk,
    InvalidContainer,
    InvalidFactChunkSize,
    InvalidFormatChunkSize,
    MissingDataChunk,
    MissingFormatChunk,
    RiffWaveError,
    TruncatedInput,
    WaveReadError,
)
from riffwave.info_formatter import descriptor_to_dict, format_info
from riffwave.wave_parser import WaveReader

__all__ = [
    "WaveReader",
    "ReaderConfig",
    "ByteReader",
    "ByteSource",
    "WaveDescriptor",
    "FormatChunk",
    "FormatExtension",
    "FactChunk",
    "UnknownChunk",
    "DataChunkDescriptor",
    "WaveFormatTag",
    "format_info",
    "descriptor_to_dict",
    "RiffWaveError",
    "WaveReadError",
    "TruncatedInput",
    "InvalidContainer",
    "MissingFormatChunk",
    "DuplicateFormatChunk",
    "InvalidFormatChunkSize",
    "InvalidFactChunkSize",
    "DuplicateFactChunk",
    "MissingDataChunk",
    "DataAlreadyConsumed",
]
