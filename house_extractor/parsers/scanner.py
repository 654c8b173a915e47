"""
Marker Scanner

Finds node markers in an OTBM stream without parsing the node tree.

The scanner reads one byte at a time. A byte matching the first byte of the
terminator (if any) starts a terminator probe; otherwise a byte matching the
first byte of the marker starts a marker probe.

- Terminator probe that fails partway rewinds to just after the byte that
  started it, so that byte can still start a marker probe.
- Terminator probe that succeeds rewinds over the whole terminator, leaving
  it unconsumed for the caller.
- Marker probe that fails partway does NOT rewind. Bytes read during the
  probe are not rescanned, so with marker FE 0E the stream FE FE 0E does not
  yield a match. Existing extracted data depends on this behaviour.

The escape byte (0xFD) is not consulted; marker bytes inside escaped node
payloads are reported as markers.
"""

from typing import Optional

from .base import ByteCursor


class MarkerScanner:
    """
    Byte-by-byte marker search over a ByteCursor.

    Usage:
        scanner = MarkerScanner(cursor)
        if scanner.scan(HOUSE_TILE_MARKER, terminator=TILE_AREA_MARKER):
            ...  # cursor is right after the marker
        else:
            ...  # terminator is next in the stream

    EndOfStream from the cursor propagates unchanged; it means no further
    marker exists.
    """

    def __init__(self, cursor: ByteCursor):
        self.cursor = cursor

    def scan(self, marker: bytes, terminator: Optional[bytes] = None) -> bool:
        """
        Advance to just past the next occurrence of marker.

        Args:
            marker: Byte sequence to find
            terminator: Optional byte sequence that ends the search early

        Returns:
            True if the marker was found, False if the terminator was hit

        Raises:
            EndOfStream: Stream exhausted before marker or terminator
            SeekError: Backtracking failed
        """
        if not marker:
            raise ValueError("marker must not be empty")

        while True:
            value = self.cursor.read_u8()

            if terminator and value == terminator[0]:
                if self._probe_terminator(terminator):
                    return False

            if value == marker[0] and self._probe_marker(marker):
                return True

    def _probe_terminator(self, terminator: bytes) -> bool:
        """Match the rest of the terminator, rewinding in both outcomes."""
        for index, expected in enumerate(terminator[1:]):
            if self.cursor.read_u8() != expected:
                # Back to just after the terminator's first byte
                self.cursor.seek_relative(-(index + 1))
                return False
        self.cursor.seek_relative(-len(terminator))
        return True

    def _probe_marker(self, marker: bytes) -> bool:
        """Match the rest of the marker; mismatching bytes stay consumed."""
        for expected in marker[1:]:
            if self.cursor.read_u8() != expected:
                return False
        return True
