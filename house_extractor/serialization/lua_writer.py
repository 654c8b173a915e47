"""
Lua Table Writer

Writes extracted houses as a Lua table, one entry per house:

    houses = {
      [5] = {
        {x = 11, y = 22, z = 7},
        {x = 13, y = 24, z = 7},
      },
    }
"""

from pathlib import Path
from typing import List, Union

from ..extraction import HouseRecords
from .output_file import write_text_file


def format_houses_lua(records: HouseRecords) -> str:
    """Render records as Lua source."""
    lines: List[str] = ["houses = {"]
    for house_id, tiles in records.items():
        lines.append(f"  [{house_id}] = {{")
        for tile in tiles:
            lines.append(f"    {{x = {tile.pos_x}, y = {tile.pos_y}, z = {tile.pos_z}}},")
        lines.append("  },")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_houses_lua(records: HouseRecords, output_path: Union[str, Path]):
    write_text_file(Path(output_path), format_houses_lua(records))
