"""
Serialization Package

Writes extracted house records to text tables.

Formats:
- lua: `houses = { [id] = { {x = .., y = .., z = ..}, ... }, ... }`
- json: house/tile counts plus per-house tiles and bounds
"""

from .lua_writer import format_houses_lua, write_houses_lua
from .json_writer import houses_to_dict, write_houses_json

# Output format name -> writer(records, output_path)
WRITERS = {
    'lua': write_houses_lua,
    'json': write_houses_json,
}
