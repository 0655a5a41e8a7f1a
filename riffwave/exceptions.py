# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for riffwave

This module defines the exceptions raised while reading RIFF/WAVE files.
Every failure is fatal to the parse in progress; no partially populated
descriptor is ever returned.

Copyright 2025 DNAi inc.
"""

from typing import Optional


class RiffWaveError(Exception):
    """
    Base exception for all riffwave errors.

    All riffwave exceptions inherit from this class, allowing
    catch-all error handling for any riffwave-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class WaveReadError(RiffWaveError):
    """
    Raised when a RIFF/WAVE structure cannot be read.

    This is the base class for every malformed-input failure:
    - The source ends before a field or chunk is complete
    - Container identifiers are wrong
    - Mandatory chunks are missing, misplaced or repeated
    - A chunk's declared length does not match a known layout
    """
    pass


class TruncatedInput(WaveReadError):
    """Raised when fewer bytes are available than a field or chunk declares."""

    def __init__(self, expected: int, received: int, offset: Optional[int] = None):
        self.expected = expected
        self.received = received
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(
            f"Truncated input{where}: expected {expected} bytes, got {received}"
        )


class InvalidContainer(WaveReadError):
    """Raised when the outer RIFF/WAVE identifiers are missing or wrong."""

    def __init__(self, expected: bytes, observed: bytes):
        self.expected = expected
        self.observed = observed
        super().__init__(f"Invalid container: expected {expected!r}, found {observed!r}")


class MissingFormatChunk(WaveReadError):
    """Raised when the first chunk after the envelope is not 'fmt '."""

    def __init__(self, observed: Optional[bytes] = None):
        self.observed = observed
        if observed is None:
            message = "Missing fmt chunk: source ended after the RIFF header"
        else:
            message = f"Missing fmt chunk: first chunk is {observed!r}"
        super().__init__(message)


class DuplicateFormatChunk(WaveReadError):
    """Raised when a second 'fmt ' chunk is encountered."""

    def __init__(self, offset: Optional[int] = None):
        self.offset = offset
        super().__init__(f"Duplicate fmt chunk at offset {offset}")


class InvalidFormatChunkSize(WaveReadError):
    """Raised when the fmt chunk's declared length matches no known layout."""

    def __init__(self, chunk_size: int, reason: str = ""):
        self.chunk_size = chunk_size
        self.reason = reason
        message = f"Invalid fmt chunk size {chunk_size}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidFactChunkSize(WaveReadError):
    """Raised when a 'fact' chunk is too short to hold its sample count."""

    def __init__(self, chunk_size: int):
        self.chunk_size = chunk_size
        super().__init__(f"Invalid fact chunk size {chunk_size}, need at least 4 bytes")


class DuplicateFactChunk(WaveReadError):
    """Raised when a second 'fact' chunk is encountered."""

    def __init__(self, offset: Optional[int] = None):
        self.offset = offset
        super().__init__(f"Duplicate fact chunk at offset {offset}")


class MissingDataChunk(WaveReadError):
    """Raised when the source is exhausted before a 'data' chunk is found."""

    def __init__(self, offset: Optional[int] = None):
        self.offset = offset
        super().__init__(f"Missing data chunk: source exhausted at offset {offset}")


class DataAlreadyConsumed(RiffWaveError):
    """
    Raised when the data payload accessor is invoked more than once.

    The payload is streamed straight from a forward-only source and is
    never buffered, so it can only be read a single time.
    """

    def __init__(self):
        super().__init__("Data payload has already been consumed")
