# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
RIFF/WAVE structure parser

This module walks the chunks of a WAV file in a single forward pass. The
'fmt ' chunk must come first, an optional 'fact' chunk and any number of
unknown chunks may follow, and the traversal stops at the 'data' chunk
without reading its payload. The payload is then available exactly once
through WaveReader.data().

Copyright 2025 DNAi inc.
"""

import logging
import uuid
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from riffwave.byte_reader import ByteReader, ByteSource
from riffwave.chunks import (
    EXTENSIBLE_MIN_EXTRA,
    FACT_ID,
    FACT_MIN_SIZE,
    FMT_BASE_SIZE,
    FMT_CB_SIZE_FIELD,
    FMT_ID,
    RIFF_ID,
    WAVE_ID,
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
    TruncatedInput,
)
from riffwave.info_formatter import format_info

logger = logging.getLogger(__name__)


class _State(Enum):
    AWAITING_FORMAT = "awaiting_format"
    SCANNING = "scanning"
    DONE = "done"


class WaveReader:
    """
    Reader for RIFF/WAVE files.

    The header is parsed when the reader is constructed; any structural
    problem raises a WaveReadError subclass and no reader is returned.

    Example:
        >>> with open('tone.wav', 'rb') as f:
        ...     reader = WaveReader(f)
        ...     samples = reader.read_data()
    """

    def __init__(self, source: ByteSource, config: Optional[ReaderConfig] = None):
        """
        Parse the header of a WAV file.

        Args:
            source: Binary source positioned at the 'RIFF' identifier
            config: Optional reader configuration

        Raises:
            WaveReadError: If the header is malformed
        """
        self.config = config or ReaderConfig()
        self._source = source
        self._reader = ByteReader(source, self.config.block_size)
        self._data_consumed = False
        self.descriptor = self._parse()

    @property
    def riff_size(self) -> int:
        return self.descriptor.riff_size

    @property
    def format(self) -> FormatChunk:
        return self.descriptor.format

    @property
    def fact(self) -> Optional[FactChunk]:
        return self.descriptor.fact

    @property
    def unknown_chunks(self) -> Tuple[UnknownChunk, ...]:
        return self.descriptor.unknown_chunks

    @property
    def data_chunk(self) -> DataChunkDescriptor:
        return self.descriptor.data

    def _parse(self) -> WaveDescriptor:
        riff_size = self._read_envelope()

        state = _State.AWAITING_FORMAT
        fmt_chunk: Optional[FormatChunk] = None
        fact_chunk: Optional[FactChunk] = None
        data_chunk: Optional[DataChunkDescriptor] = None
        unknown_chunks: List[UnknownChunk] = []

        while state is not _State.DONE:
            offset = self._reader.position
            if self._reader.at_eof():
                if state is _State.AWAITING_FORMAT:
                    raise MissingFormatChunk()
                raise MissingDataChunk(offset)

            chunk_id = self._reader.read_fourcc()
            if state is _State.AWAITING_FORMAT and chunk_id != FMT_ID:
                raise MissingFormatChunk(chunk_id)
            chunk_size = self._reader.read_u32()
            logger.debug("0x%08x: Chunk %r, %d bytes", offset, chunk_id, chunk_size)

            if state is _State.AWAITING_FORMAT:
                fmt_chunk = self._parse_format_chunk(chunk_size)
                state = _State.SCANNING
            elif chunk_id == FMT_ID:
                raise DuplicateFormatChunk(offset)
            elif chunk_id == FACT_ID:
                if fact_chunk is not None:
                    raise DuplicateFactChunk(offset)
                fact_chunk = self._parse_fact_chunk(chunk_size)
            elif chunk_id in self.config.data_chunk_ids:
                # Payload is left in the source for data()
                data_chunk = DataChunkDescriptor(chunk_size, self._reader.position)
                logger.debug("0x%08x: Audio payload starts", data_chunk.offset)
                state = _State.DONE
            else:
                logger.debug("Skipping unknown chunk %r", chunk_id)
                unknown_chunks.append(UnknownChunk(chunk_id, chunk_size))
                self._reader.skip(chunk_size)

            if state is not _State.DONE and chunk_size % 2:
                logger.debug("0x%08x: Skipping pad byte", self._reader.position)
                self._reader.skip(1)

        declared_end = data_chunk.offset + data_chunk.chunk_size - 8
        if riff_size < declared_end:
            logger.warning(
                "RIFF size %d is smaller than the data chunk extent %d",
                riff_size, declared_end)

        return WaveDescriptor(
            riff_size=riff_size,
            format=fmt_chunk,
            data=data_chunk,
            fact=fact_chunk,
            unknown_chunks=tuple(unknown_chunks),
        )

    def _read_envelope(self) -> int:
        """Validate the RIFF/WAVE header and return the declared RIFF size."""
        riff_id = self._reader.read_fourcc()
        if riff_id != RIFF_ID:
            raise InvalidContainer(RIFF_ID, riff_id)
        riff_size = self._reader.read_u32()
        form_type = self._reader.read_fourcc()
        if form_type != WAVE_ID:
            raise InvalidContainer(WAVE_ID, form_type)
        logger.debug("RIFF size %d", riff_size)
        return riff_size

    def _parse_format_chunk(self, chunk_size: int) -> FormatChunk:
        """
        Parse the 'fmt ' chunk content.

        Accepted layouts:
        - 16 bytes: base fields only
        - 18 + n bytes: base fields, cbSize = n, then n opaque bytes
        - 0xFFFE tag: base fields, cbSize >= 22, extensible fields, then
          cbSize - 22 opaque bytes (40 bytes in the usual case)

        Chunk sizes are validated before the variable part is read so that
        a bad size can never leave the reader inside the chunk body.
        """
        if chunk_size < FMT_BASE_SIZE:
            raise InvalidFormatChunkSize(chunk_size, "shorter than the 16 byte base layout")

        code = self._reader.read_u16()
        channels = self._reader.read_u16()
        sample_rate = self._reader.read_u32()
        byte_rate = self._reader.read_u32()
        block_align = self._reader.read_u16()
        bits_per_sample = self._reader.read_u16()
        base = dict(
            chunk_size=chunk_size,
            format_tag=WaveFormatTag.classify(code),
            channels=channels,
            sample_rate=sample_rate,
            byte_rate=byte_rate,
            block_align=block_align,
            bits_per_sample=bits_per_sample,
        )

        if code == WaveFormatTag.EXTENSIBLE:
            return self._parse_extensible(base)

        if chunk_size == FMT_BASE_SIZE:
            return FormatChunk(**base)

        if chunk_size < FMT_BASE_SIZE + FMT_CB_SIZE_FIELD:
            raise InvalidFormatChunkSize(chunk_size, "no room for the extra info size field")
        extra_info_size = self._reader.read_u16()
        expected = FMT_BASE_SIZE + FMT_CB_SIZE_FIELD + extra_info_size
        if chunk_size != expected:
            raise InvalidFormatChunkSize(
                chunk_size, f"extra info size {extra_info_size} implies {expected} bytes")
        extra_data = self._reader.read_bytes(extra_info_size)
        return FormatChunk(extra_info_size=extra_info_size, extra_data=extra_data, **base)

    def _parse_extensible(self, base: dict) -> FormatChunk:
        chunk_size = base['chunk_size']
        if chunk_size < FMT_BASE_SIZE + FMT_CB_SIZE_FIELD:
            raise InvalidFormatChunkSize(
                chunk_size, "extensible format has no extra info size field")
        extra_info_size = self._reader.read_u16()
        if extra_info_size < EXTENSIBLE_MIN_EXTRA:
            raise InvalidFormatChunkSize(
                chunk_size,
                f"extensible extra info size {extra_info_size} is less than {EXTENSIBLE_MIN_EXTRA}")
        expected = FMT_BASE_SIZE + FMT_CB_SIZE_FIELD + extra_info_size
        if chunk_size != expected:
            raise InvalidFormatChunkSize(
                chunk_size, f"extra info size {extra_info_size} implies {expected} bytes")

        valid_bits_per_sample = self._reader.read_u16()
        channel_mask = self._reader.read_u32()
        sub_format = uuid.UUID(bytes_le=self._reader.read_bytes(16))
        remaining_data = self._reader.read_bytes(extra_info_size - EXTENSIBLE_MIN_EXTRA)
        extension = FormatExtension(
            valid_bits_per_sample=valid_bits_per_sample,
            channel_mask=channel_mask,
            sub_format=sub_format,
            remaining_data=remaining_data,
        )
        return FormatChunk(extra_info_size=extra_info_size, extension=extension, **base)

    def _parse_fact_chunk(self, chunk_size: int) -> FactChunk:
        if chunk_size < FACT_MIN_SIZE:
            raise InvalidFactChunkSize(chunk_size)
        sample_length = self._reader.read_u32()
        remaining_data = self._reader.read_bytes(chunk_size - FACT_MIN_SIZE)
        return FactChunk(chunk_size, sample_length, remaining_data)

    def data(self) -> Iterator[bytes]:
        """
        Stream the audio payload.

        Returns a generator yielding the data chunk's bytes in blocks of at
        most config.block_size. The payload can only be read once.

        Raises:
            DataAlreadyConsumed: If the payload was already requested
            TruncatedInput: While iterating, if the source ends early
        """
        if self._data_consumed:
            raise DataAlreadyConsumed()
        self._data_consumed = True
        return self._stream_payload()

    def read_data(self) -> bytes:
        """Read the whole audio payload into memory."""
        return b''.join(self.data())

    def _stream_payload(self) -> Iterator[bytes]:
        data_chunk = self.descriptor.data
        remaining = data_chunk.chunk_size
        while remaining > 0:
            block = self._reader.read_available(min(self.config.block_size, remaining))
            if not block:
                raise TruncatedInput(
                    data_chunk.chunk_size, data_chunk.chunk_size - remaining, data_chunk.offset)
            remaining -= len(block)
            yield block

        if data_chunk.has_pad_byte and not self._reader.read_available(1):
            logger.debug("Ignoring missing pad byte after data chunk")

    def into_source(self) -> ByteSource:
        """Give back the underlying source."""
        return self._source

    def __str__(self) -> str:
        return format_info(self.descriptor)
