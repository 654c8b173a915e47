"""
JSON Writer

Writes extracted houses as JSON. House IDs become string keys; each house
carries its tiles and its bounding box.
"""

import json
from pathlib import Path
from typing import Union

from ..extraction import HouseRecords
from .output_file import write_text_file


def houses_to_dict(records: HouseRecords) -> dict:
    """
    Convert records to a JSON-ready dict.

    Returns:
        {'house_count', 'tile_count', 'houses': {id: {'tiles', 'bounds'}}}
    """
    houses = {}
    for house_id, tiles in records.items():
        low, high = records.bounds(house_id)
        houses[str(house_id)] = {
            'tiles': [{'x': t.pos_x, 'y': t.pos_y, 'z': t.pos_z} for t in tiles],
            'bounds': {'min': list(low), 'max': list(high)},
        }

    return {
        'house_count': records.house_count,
        'tile_count': records.tile_count,
        'houses': houses,
    }


def write_houses_json(records: HouseRecords, output_path: Union[str, Path]):
    write_text_file(Path(output_path), json.dumps(houses_to_dict(records), indent=2) + "\n")
