"""
OTBM Binary Stream Readers

This package provides the low-level readers used by house extraction:

- base: ByteCursor for sequential little-endian reads with relative seeks
- scanner: MarkerScanner for locating node markers without parsing the tree
- errors: Error taxonomy shared by readers and the traversal

Usage:
    from house_extractor.parsers import ByteCursor, MarkerScanner

    with open("map.otbm", "rb") as f:
        cursor = ByteCursor(f)
        scanner = MarkerScanner(cursor)
        if scanner.scan(b"\xfe\x04"):
            base_x = cursor.read_u16()
"""

from .base import ByteCursor
from .scanner import MarkerScanner
from .errors import (
    ExtractionError,
    EndOfStream,
    ShortRead,
    SeekError,
    InvalidFormat,
    TraversalAbort,
)

__all__ = [
    'ByteCursor',
    'MarkerScanner',
    'ExtractionError',
    'EndOfStream',
    'ShortRead',
    'SeekError',
    'InvalidFormat',
    'TraversalAbort',
]
