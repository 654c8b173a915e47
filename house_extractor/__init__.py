"""
House Extractor

Extracts house tile coordinates from OTBM map files and writes them out as
a Lua or JSON table.
"""

__version__ = "1.0.0"
