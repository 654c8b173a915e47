"""
Builders for synthetic OTBM streams.
"""

import io
import struct


def tile_area_node(base_x: int, base_y: int, base_z: int) -> bytes:
    return b'\xfe\x04' + struct.pack('<HHB', base_x, base_y, base_z)


def house_tile_node(offset_x: int, offset_y: int, house_id: int) -> bytes:
    return b'\xfe\x0e' + struct.pack('<BBI', offset_x, offset_y, house_id)


def otbm_stream(*parts: bytes, identifier: bytes = b'\x00\x00\x00\x00') -> io.BytesIO:
    return io.BytesIO(identifier + b''.join(parts))


# Area (10, 20, 7) with two tiles of house 5, then area (0, 0, 0) with house 9
SCENARIO_BYTES = (
    b'\x00\x00\x00\x00'
    + tile_area_node(10, 20, 7)
    + house_tile_node(1, 2, 5)
    + house_tile_node(3, 4, 5)
    + tile_area_node(0, 0, 0)
    + house_tile_node(0, 0, 9)
)

# Lua table written for SCENARIO_BYTES
SCENARIO_LUA = """\
houses = {
  [5] = {
    {x = 11, y = 22, z = 7},
    {x = 13, y = 24, z = 7},
  },
  [9] = {
    {x = 0, y = 0, z = 0},
  },
}
"""
