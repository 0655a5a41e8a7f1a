# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Reader configuration

Copyright 2025 DNAi inc.
"""

from typing import FrozenSet, Iterable, Optional

from riffwave.chunks import DATA_ID


DEFAULT_BLOCK_SIZE = 65536
# Some writers emit a capitalized data identifier
DEFAULT_DATA_CHUNK_IDS = frozenset([DATA_ID, b'Data'])


class ReaderConfig:
    """
    Configuration for WaveReader.

    This class controls how payload bytes are streamed and which chunk
    identifiers end the header traversal.
    """

    def __init__(
        self,
        block_size: int = DEFAULT_BLOCK_SIZE,
        data_chunk_ids: Optional[Iterable[bytes]] = None,
    ):
        """
        Initialize reader configuration.

        Args:
            block_size: Largest block yielded by WaveReader.data(), also used
                when skipping unknown chunk content
            data_chunk_ids: Identifiers treated as the data chunk
                (defaults to b'data' and b'Data')

        Raises:
            ValueError: If block_size is not positive or an identifier is
                not exactly 4 bytes
        """
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self.block_size = block_size

        if data_chunk_ids is None:
            ids: FrozenSet[bytes] = DEFAULT_DATA_CHUNK_IDS
        else:
            ids = frozenset(data_chunk_ids)
        for chunk_id in ids:
            if len(chunk_id) != 4:
                raise ValueError(f"Chunk identifiers must be 4 bytes, got {chunk_id!r}")
        self.data_chunk_ids = ids

    def __repr__(self) -> str:
        ids = sorted(self.data_chunk_ids)
        return f"ReaderConfig(block_size={self.block_size}, data_chunk_ids={ids!r})"
