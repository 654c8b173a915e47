"""
Config Package

Handles extractor configuration (extractor.ini).
"""

from .extractor_config import ExtractorConfig, load_extractor_config
