"""
Extraction Package

Handles read-only extraction of house tiles from OTBM map files.
"""

from .data_types import TileArea, HouseTile, HouseRecords
from .house_extractor import (
    TraversalState,
    TraversalEvent,
    next_state,
    validate_identifier,
    HouseExtractor,
    extract_houses,
)
