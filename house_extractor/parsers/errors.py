"""
Errors raised while reading OTBM map streams.

Hierarchy:
- ExtractionError: base for everything below
  - EndOfStream: no more bytes; the normal "no more markers" signal
  - ShortRead: fewer bytes available than requested
  - SeekError: relative seek to an invalid position
  - InvalidFormat: file identifier mismatch
  - TraversalAbort: fatal failure mid-traversal, wraps the cause with context
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for house extraction failures."""


class EndOfStream(ExtractionError, EOFError):
    """Raised when the stream is exhausted before any requested byte is read."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"end of stream at offset {offset}")


class ShortRead(ExtractionError):
    """Raised when the stream ends partway through a fixed-size read."""

    def __init__(self, requested: int, received: int, offset: int):
        self.requested = requested
        self.received = received
        self.offset = offset
        super().__init__(
            f"short read at offset {offset}: wanted {requested} bytes, got {received}"
        )


class SeekError(ExtractionError):
    """Raised when a relative seek would move outside the stream."""

    def __init__(self, delta: int, offset: int, reason: Optional[str] = None):
        self.delta = delta
        self.offset = offset
        message = f"cannot move {delta:+d} bytes from offset {offset}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidFormat(ExtractionError):
    """Raised when the stream does not start with a known OTBM identifier."""


class TraversalAbort(ExtractionError):
    """
    Fatal error during traversal.

    `operation` names what was being read or sought ("while reading tile
    area base x pos"); the original error is kept as `cause` and chained
    via `raise ... from`.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")
