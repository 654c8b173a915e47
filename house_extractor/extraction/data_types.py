"""
Data types for house extraction.

Contains the records decoded from the stream and the store that
accumulates house tiles across a traversal.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class TileArea:
    """Origin of a cluster of tiles (OTBM_TILE_AREA node payload)."""
    base_x: int  # u16
    base_y: int  # u16
    base_z: int  # u8


@dataclass(frozen=True)
class HouseTile:
    """One tile of a house, in absolute map coordinates."""
    house_id: int  # u32
    pos_x: int
    pos_y: int
    pos_z: int

    @property
    def position(self) -> Tuple[int, int, int]:
        return (self.pos_x, self.pos_y, self.pos_z)


@dataclass
class HouseRecords:
    """
    House ID -> tiles, in the order they were encountered in the file.

    Houses keep the order of their first tile. Adding a tile never replaces
    an earlier one.
    """
    houses: Dict[int, List[HouseTile]] = field(default_factory=dict)

    def add(self, tile: HouseTile):
        self.houses.setdefault(tile.house_id, []).append(tile)

    @property
    def house_count(self) -> int:
        return len(self.houses)

    @property
    def tile_count(self) -> int:
        return sum(len(tiles) for tiles in self.houses.values())

    def __len__(self) -> int:
        return len(self.houses)

    def __iter__(self) -> Iterator[int]:
        return iter(self.houses)

    def __contains__(self, house_id: int) -> bool:
        return house_id in self.houses

    def __getitem__(self, house_id: int) -> List[HouseTile]:
        return self.houses[house_id]

    def items(self):
        return self.houses.items()

    def positions(self, house_id: int) -> np.ndarray:
        """
        Tile positions of a house as an (n, 3) int64 array of x, y, z.

        Raises:
            KeyError: Unknown house ID
        """
        tiles = self.houses[house_id]
        return np.array([tile.position for tile in tiles], dtype=np.int64).reshape(-1, 3)

    def bounds(self, house_id: int) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
        """
        Axis-aligned bounding box of a house.

        Returns:
            Tuple of (min corner, max corner), each (x, y, z)
        """
        positions = self.positions(house_id)
        low = positions.min(axis=0)
        high = positions.max(axis=0)
        return tuple(int(v) for v in low), tuple(int(v) for v in high)
