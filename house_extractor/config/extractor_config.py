#!/usr/bin/env python3
"""
Extractor Configuration

Parser for the optional extractor.ini file:

    [extractor]
    output = ./houses.lua
    format = lua
    log = ./extract.log

Command line flags override values read from the file.
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..constants import DEFAULT_OUTPUT_FORMAT, DEFAULT_OUTPUT_PATH, OUTPUT_FORMATS
from ..utils import logWarning

SECTION = 'extractor'
KNOWN_KEYS = ('output', 'format', 'log')


@dataclass
class ExtractorConfig:
    """Settings for one extraction run"""
    output_path: str = DEFAULT_OUTPUT_PATH  # Where the table is written
    output_format: str = DEFAULT_OUTPUT_FORMAT  # 'lua' or 'json'
    log_path: Optional[str] = None  # Log file; None logs to console only

    def __post_init__(self):
        """Validate configuration"""
        self.output_format = self.output_format.strip().lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

        if not self.output_path:
            raise ValueError("Output path must not be empty")


def load_extractor_config(config_path: Union[str, Path]) -> ExtractorConfig:
    """
    Load extractor.ini

    Args:
        config_path: Path to the INI file

    Returns:
        ExtractorConfig with defaults for missing keys
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = configparser.ConfigParser()
    config.read(config_path)

    if not config.has_section(SECTION):
        logWarning(f"No [{SECTION}] section in {config_path}, using defaults")
        return ExtractorConfig()

    data = config[SECTION]
    for key in data:
        if key not in KNOWN_KEYS:
            logWarning(f"Ignoring unknown key '{key}' in [{SECTION}] of {config_path}")

    log_path = data.get('log', None)
    if log_path:
        log_path = log_path.strip()

    return ExtractorConfig(
        output_path=data.get('output', DEFAULT_OUTPUT_PATH).strip(),
        output_format=data.get('format', DEFAULT_OUTPUT_FORMAT),
        log_path=log_path or None,
    )
