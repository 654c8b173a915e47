"""
House Extractor

Walks an OTBM stream and collects every house tile with its absolute
position. Only OTBM_TILE_AREA and OTBM_HOUSETILE nodes are looked at; the
rest of the node tree is skipped by the marker scanner.

Traversal states:

    SEEKING_AREA --marker--> READING_AREA --record--> SEEKING_TILE_OR_END
    SEEKING_TILE_OR_END --marker--> READING_TILE --record--> SEEKING_TILE_OR_END
    SEEKING_TILE_OR_END --terminator (next area marker)--> SEEKING_AREA
    SEEKING_AREA / SEEKING_TILE_OR_END --end of stream--> DONE

Record layouts (little-endian):
- Tile area: u16 base_x, u16 base_y, u8 base_z
- House tile: u8 offset_x, u8 offset_y, u32 house_id
"""

from enum import Enum, auto
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Union

from ..constants import (
    HOUSE_TILE_MARKER,
    IDENTIFIER_SIZE,
    NULL_IDENTIFIER,
    OTBM_IDENTIFIER,
    TILE_AREA_MARKER,
)
from ..parsers import ByteCursor, MarkerScanner
from ..parsers.errors import EndOfStream, ExtractionError, InvalidFormat, TraversalAbort
from ..utils import log, logDebug
from .data_types import HouseRecords, HouseTile, TileArea


class TraversalState(Enum):
    SEEKING_AREA = auto()
    READING_AREA = auto()
    SEEKING_TILE_OR_END = auto()
    READING_TILE = auto()
    DONE = auto()


class TraversalEvent(Enum):
    MARKER_FOUND = auto()
    TERMINATOR_HIT = auto()
    END_OF_STREAM = auto()
    RECORD_READ = auto()


_TRANSITIONS = {
    (TraversalState.SEEKING_AREA, TraversalEvent.MARKER_FOUND): TraversalState.READING_AREA,
    (TraversalState.SEEKING_AREA, TraversalEvent.END_OF_STREAM): TraversalState.DONE,
    (TraversalState.READING_AREA, TraversalEvent.RECORD_READ): TraversalState.SEEKING_TILE_OR_END,
    (TraversalState.SEEKING_TILE_OR_END, TraversalEvent.MARKER_FOUND): TraversalState.READING_TILE,
    (TraversalState.SEEKING_TILE_OR_END, TraversalEvent.TERMINATOR_HIT): TraversalState.SEEKING_AREA,
    (TraversalState.SEEKING_TILE_OR_END, TraversalEvent.END_OF_STREAM): TraversalState.DONE,
    (TraversalState.READING_TILE, TraversalEvent.RECORD_READ): TraversalState.SEEKING_TILE_OR_END,
}


def next_state(state: TraversalState, event: TraversalEvent) -> TraversalState:
    """
    Transition function of the traversal.

    Raises:
        ValueError: The event cannot happen in the given state
    """
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise ValueError(f"No transition from {state.name} on {event.name}") from None


def validate_identifier(identifier: bytes):
    """
    Check the 4-byte file identifier.

    Raises:
        InvalidFormat: Identifier is neither all-zero nor 'OTBM'
    """
    if identifier not in (NULL_IDENTIFIER, OTBM_IDENTIFIER):
        raise InvalidFormat(f"invalid file identifier: {identifier!r}")


class HouseExtractor:
    """
    Extracts house tiles from one OTBM stream.

    The stream is owned by the extractor for the duration of extract();
    reading starts at its current position, which must be the start of the
    file.

    Usage:
        with open("map.otbm", "rb") as f:
            records = HouseExtractor(f).extract()
        for house_id, tiles in records.items():
            ...
    """

    def __init__(self, stream: BinaryIO):
        self.cursor = ByteCursor(stream)
        self.scanner = MarkerScanner(self.cursor)

    def extract(self) -> HouseRecords:
        """
        Run the full traversal.

        Returns:
            HouseRecords with every house tile in encounter order

        Raises:
            InvalidFormat: Bad file identifier
            TraversalAbort: Any read or seek failure after the identifier
        """
        self._check_identifier()

        records = HouseRecords()
        state = TraversalState.SEEKING_AREA
        tile_area: Optional[TileArea] = None

        while state is not TraversalState.DONE:
            if state is TraversalState.SEEKING_AREA:
                tile_area = None
                event = self._seek(TILE_AREA_MARKER, None,
                                   "while looking for TileArea node in file")
            elif state is TraversalState.READING_AREA:
                tile_area = self.read_tile_area()
                event = TraversalEvent.RECORD_READ
            elif state is TraversalState.SEEKING_TILE_OR_END:
                event = self._seek(HOUSE_TILE_MARKER, TILE_AREA_MARKER,
                                   "while looking for HouseTile node in file")
            else:
                records.add(self.read_house_tile(tile_area))
                event = TraversalEvent.RECORD_READ

            state = next_state(state, event)

        log(f"Houses found: {records.house_count}, HouseTiles found: {records.tile_count}")
        return records

    def read_tile_area(self) -> TileArea:
        """Decode a tile area record at the cursor."""
        return TileArea(
            base_x=self._read("while reading tile area base x pos", self.cursor.read_u16),
            base_y=self._read("while reading tile area base y pos", self.cursor.read_u16),
            base_z=self._read("while reading tile area base z pos", self.cursor.read_u8),
        )

    def read_house_tile(self, tile_area: TileArea) -> HouseTile:
        """Decode a house tile record at the cursor, relative to tile_area."""
        offset_x = self._read("while reading house tile offset x pos", self.cursor.read_u8)
        offset_y = self._read("while reading house tile offset y pos", self.cursor.read_u8)
        house_id = self._read("while reading house tile house id", self.cursor.read_u32)

        return HouseTile(
            house_id=house_id,
            pos_x=tile_area.base_x + offset_x,
            pos_y=tile_area.base_y + offset_y,
            pos_z=tile_area.base_z,
        )

    def _check_identifier(self):
        try:
            identifier = self.cursor.read_bytes(IDENTIFIER_SIZE)
        except ExtractionError as e:
            raise InvalidFormat(f"while reading file identifier: {e}") from e
        validate_identifier(identifier)
        logDebug(f"File identifier: {identifier!r}")

    def _seek(self, marker: bytes, terminator: Optional[bytes], operation: str) -> TraversalEvent:
        try:
            found = self.scanner.scan(marker, terminator)
        except EndOfStream:
            return TraversalEvent.END_OF_STREAM
        except ExtractionError as e:
            raise TraversalAbort(operation, e) from e
        return TraversalEvent.MARKER_FOUND if found else TraversalEvent.TERMINATOR_HIT

    @staticmethod
    def _read(operation: str, reader: Callable[[], int]) -> int:
        # End of stream inside a record is fatal, unlike between markers
        try:
            return reader()
        except ExtractionError as e:
            raise TraversalAbort(operation, e) from e


def extract_houses(source: Union[str, Path, BinaryIO]) -> HouseRecords:
    """
    Extract house tiles from a file path or an open binary stream.

    A path is opened read-only and closed again before returning, also when
    extraction fails.
    """
    if isinstance(source, (str, Path)):
        with open(source, 'rb') as f:
            return HouseExtractor(f).extract()
    return HouseExtractor(source).extract()
