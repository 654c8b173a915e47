"""
Base utilities for OTBM binary stream reading.

This module provides the sequential reader used by the marker scanner and
the house extraction traversal:
- ByteCursor: forward reader over a binary stream with little-endian
  integer decoding and bounded relative seeks for backtracking
"""

import io
import struct
from typing import BinaryIO

from .errors import EndOfStream, SeekError, ShortRead


class ByteCursor:
    """
    Sequential reader over a binary stream.

    Reads exactly what callers ask for and nothing more; there is no
    look-ahead buffer. Backtracking goes through seek_relative() so every
    rewind is an explicit byte delta.

    Usage:
        with open("map.otbm", "rb") as f:
            cursor = ByteCursor(f)
            identifier = cursor.read_bytes(4)
            base_x = cursor.read_u16()
            cursor.seek_relative(-2)
    """

    def __init__(self, stream: BinaryIO):
        """
        Initialize cursor.

        Args:
            stream: Readable, seekable binary stream (file or BytesIO).
                    Reading starts at the stream's current position.
        """
        self.stream = stream

    @property
    def position(self) -> int:
        """Absolute offset of the next byte to be read."""
        return self.stream.tell()

    def read_bytes(self, n: int) -> bytes:
        """
        Read exactly n bytes.

        Args:
            n: Number of bytes to read

        Returns:
            The n bytes read

        Raises:
            EndOfStream: No byte at all was available
            ShortRead: Fewer than n bytes were available
        """
        offset = self.stream.tell()
        data = self.stream.read(n)
        if n > 0 and not data:
            raise EndOfStream(offset)
        if len(data) < n:
            raise ShortRead(n, len(data), offset)
        return data

    def read_u8(self) -> int:
        return self.read_bytes(1)[0]

    def read_u16(self) -> int:
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_u32(self) -> int:
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_u64(self) -> int:
        return struct.unpack('<Q', self.read_bytes(8))[0]

    def seek_relative(self, delta: int):
        """
        Move the read position by delta bytes (negative moves back).

        Moving past the end is allowed; the next read reports EndOfStream.

        Raises:
            SeekError: Target position is negative or the stream refused
        """
        offset = self.stream.tell()
        if offset + delta < 0:
            raise SeekError(delta, offset, "before start of stream")
        try:
            self.stream.seek(delta, io.SEEK_CUR)
        except (OSError, ValueError) as e:
            raise SeekError(delta, offset, str(e)) from e
