#!/usr/bin/env python3
"""
Extract Houses

Command line tool that extracts house tiles from an OTBM map file.

Pipeline:
1. Validate the file identifier
2. Walk tile areas and house tiles, collecting absolute positions per house
3. Write the house table (Lua or JSON)

Usage:
    python -m house_extractor.extract_houses -i world.otbm -o houses.lua
"""

import sys
import argparse
import time
from pathlib import Path
from typing import Optional, Union

from .config import ExtractorConfig, load_extractor_config
from .extraction import HouseRecords, extract_houses
from .parsers import ExtractionError, InvalidFormat, TraversalAbort
from .serialization import WRITERS
from .utils import log, logDebug, logError, init_logging, print_summary


class HouseDataExporter:
    """
    Runs one extraction: input map file in, house table out.
    """

    def __init__(self, input_path: Union[str, Path], output_path: Union[str, Path],
                 output_format: str = 'lua'):
        """
        Initialize exporter

        Args:
            input_path: OTBM map file to read
            output_path: Destination of the house table
            output_format: Key of serialization.WRITERS ('lua' or 'json')
        """
        if output_format not in WRITERS:
            raise ValueError(f"Unknown output format: {output_format}")

        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.output_format = output_format

    def run(self) -> HouseRecords:
        """
        Extract and write.

        Nothing is written if extraction fails.

        Returns:
            The extracted house records
        """
        start_time = time.time()

        try:
            records = extract_houses(self.input_path)
        except InvalidFormat as e:
            raise InvalidFormat(f"while reading map data: {e}") from e
        except ExtractionError as e:
            raise TraversalAbort("while reading map data", e) from e

        for house_id in records:
            low, high = records.bounds(house_id)
            logDebug(f"House {house_id}: {len(records[house_id])} tiles, bounds {low} - {high}")

        try:
            WRITERS[self.output_format](records, self.output_path)
        except OSError as e:
            raise OSError(f"while writing house data to file: {e}") from e

        logDebug(f"Extraction took {time.time() - start_time:.2f} seconds")
        return records


def resolve_config(args: argparse.Namespace) -> ExtractorConfig:
    """Merge the optional config file with command line overrides."""
    config = load_extractor_config(args.config) if args.config else ExtractorConfig()

    return ExtractorConfig(
        output_path=args.output or config.output_path,
        output_format=args.format or config.output_format,
        log_path=args.log or config.log_path,
    )


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description='Extract house tile positions from an OTBM map file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    python -m house_extractor.extract_houses -i world.otbm

    # JSON output with a log file:
    python -m house_extractor.extract_houses -i world.otbm -o houses.json -f json --log extract.log

    # Settings from a config file ([extractor] section: output, format, log):
    python -m house_extractor.extract_houses -i world.otbm -c extractor.ini
        """
    )

    parser.add_argument('-i', '--input',
                        help='Path to the input .otbm file')
    parser.add_argument('-o', '--output', default=None,
                        help='Output file path (default: ./output.lua)')
    parser.add_argument('-f', '--format', choices=sorted(WRITERS), default=None,
                        help='Output format (default: lua)')
    parser.add_argument('-c', '--config', default=None,
                        help='Path to extractor.ini configuration file')
    parser.add_argument('--log', default=None,
                        help='Also write log output to this file')
    args = parser.parse_args(argv)

    if not args.input:
        parser.error("Please specify input file path (use -i flag)")

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        logError(f"{e}")
        sys.exit(1)

    init_logging(Path(config.log_path) if config.log_path else None)

    log(f"Extracting house data from file `{args.input}` into file `{config.output_path}`")

    try:
        exporter = HouseDataExporter(args.input, config.output_path, config.output_format)
        exporter.run()
    except (ExtractionError, OSError) as e:
        logError(f"{e}")
        print_summary()
        sys.exit(1)
    except Exception as e:
        logError(f"{e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    print_summary()
    log("Success")


if __name__ == '__main__':
    main()
