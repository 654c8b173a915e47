"""
Constants used across the house extractor modules.

OTBM node layout values. References:
- https://github.com/hjnilsson/rme/blob/master/source/iomap_otbm.h
- https://github.com/edubart/otclient/blob/master/src/client/mapio.cpp
"""

# Node framing bytes
NODE_START = 0xFE
NODE_END = 0xFF
# Reserved for escaping NODE_START/NODE_END inside payloads; never consulted
# by the scanner, so escaped marker bytes in payloads still match
ESCAPE_CHAR = 0xFD

# Node tags
TILE_AREA = 0x04
HOUSE_TILE = 0x0E

# Marker sequences as seen in the stream
TILE_AREA_MARKER = bytes((NODE_START, TILE_AREA))
HOUSE_TILE_MARKER = bytes((NODE_START, HOUSE_TILE))

# Accepted file identifiers (first 4 bytes)
OTBM_IDENTIFIER = b'OTBM'
NULL_IDENTIFIER = b'\x00\x00\x00\x00'
IDENTIFIER_SIZE = 4

# Default output path of the command line tool
DEFAULT_OUTPUT_PATH = './output.lua'

# Output formats understood by the writers
OUTPUT_FORMATS = ('lua', 'json')
DEFAULT_OUTPUT_FORMAT = 'lua'
