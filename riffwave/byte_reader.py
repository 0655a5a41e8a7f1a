# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Primitive little-endian decoders over a forward-only byte source.

Nothing here knows about RIFF or WAVE; the wave parser builds on these
reads for every field it decodes.

Copyright 2025 DNAi inc.
"""

import struct
from typing import Protocol

from riffwave.exceptions import TruncatedInput


class ByteSource(Protocol):
    """Anything with a binary ``read(n)``; a short or empty read means exhausted."""

    def read(self, n: int) -> bytes:
        ...


class ByteReader:
    """
    Sequential reader that tracks its own position over a ByteSource.

    The source is never asked to seek or tell, so pipes, sockets and
    in-memory buffers all work the same way.
    """

    def __init__(self, source: ByteSource, block_size: int = 65536):
        self.source = source
        self.block_size = block_size
        self.position = 0
        self._peeked = b''

    def _read_up_to(self, n: int) -> bytes:
        # Raw and socket files may return short reads before EOF
        parts = []
        remaining = n
        if self._peeked and remaining > 0:
            parts.append(self._peeked)
            remaining -= len(self._peeked)
            self._peeked = b''
        while remaining > 0:
            chunk = self.source.read(remaining)
            if not chunk:
                break
            parts.append(chunk)
            remaining -= len(chunk)
        data = b''.join(parts)
        self.position += len(data)
        return data

    def read_bytes(self, n: int) -> bytes:
        """
        Read exactly n bytes.

        Raises:
            TruncatedInput: If the source holds fewer than n bytes
        """
        offset = self.position
        data = self._read_up_to(n)
        if len(data) < n:
            raise TruncatedInput(n, len(data), offset)
        return data

    def read_available(self, n: int) -> bytes:
        """Read at most n bytes without failing on a short source."""
        return self._read_up_to(n)

    def read_u16(self) -> int:
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_u32(self) -> int:
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_fourcc(self) -> bytes:
        return self.read_bytes(4)

    def skip(self, n: int) -> None:
        """Discard n bytes, reading in bounded blocks."""
        offset = self.position
        skipped = 0
        while skipped < n:
            data = self._read_up_to(min(self.block_size, n - skipped))
            if not data:
                raise TruncatedInput(n, skipped, offset)
            skipped += len(data)

    def at_eof(self) -> bool:
        """Return True if no further byte can be read from the source."""
        if self._peeked:
            return False
        self._peeked = self.source.read(1)
        return not self._peeked
