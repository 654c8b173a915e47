"""
Unified logging for the house extractor.

Console output, optionally mirrored to a log file.
Tracks warnings and errors for the end-of-run summary.

Usage:
    from ..utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # At start of the command line tool (log file is optional):
    init_logging(Path("extract.log"))

    # Throughout code:
    log("Houses found: 12")                   # Info - progress and results
    logWarning("unknown config key")          # Suspicious but not fatal
    logError("invalid file identifier")       # The run fails
    logDebug("house 5: 14 tiles")             # Log file only

    # At end:
    print_summary()  # Shows warning/error counts
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_log_file = None
_log_path: Optional[Path] = None
_initialized = False
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Optional[Path] = None):
    """
    Initialize logging.

    Args:
        log_path: Path to log file. None logs to the console only.
    """
    global _initialized, _warnings, _errors

    if _initialized:
        # Console logging may have started before the log file was known
        if log_path is not None and _log_file is None:
            _open_log_file(log_path)
            for warn in _warnings:
                _write_to_file(f"Warning: {warn}")
            for err in _errors:
                _write_to_file(f"ERROR: {err}")
        return

    _warnings = []
    _errors = []
    _initialized = True
    atexit.register(close_logging)

    if log_path is not None:
        _open_log_file(log_path)


def _open_log_file(log_path: Path):
    global _log_file, _log_path

    _log_path = Path(log_path)
    _log_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        _log_file = open(_log_path, 'w', encoding='utf-8')
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"Extraction started: {timestamp}\n")
        _log_file.write("=" * 70 + "\n\n")
        _log_file.flush()
    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None


def close_logging():
    """Close the log file and reset module state."""
    global _log_file, _log_path, _initialized

    if _log_file is not None:
        try:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            _log_file.write(f"\n{'=' * 70}\n")
            _log_file.write(f"Extraction finished: {timestamp}\n")
            _log_file.close()
        except OSError:
            pass
        _log_file = None

    _log_path = None
    _initialized = False


def print_summary():
    """Print warning/error details and counts at the end of a run."""
    if _errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")

    if _warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")

    error_part = (f"{Colors.RED}{Colors.BOLD}{len(_errors)} Error(s){Colors.RESET}"
                  if _errors else f"{Colors.GREEN}0 Errors{Colors.RESET}")
    warning_part = (f"{Colors.YELLOW}{Colors.BOLD}{len(_warnings)} Warning(s){Colors.RESET}"
                    if _warnings else f"{Colors.GREEN}0 Warnings{Colors.RESET}")
    print(f"{error_part} | {warning_part}")

    _write_to_file(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)")


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    return len(_errors), len(_warnings)


def _write_to_file(msg: str, end: str = "\n"):
    if _log_file is not None:
        try:
            _log_file.write(msg + end)
            _log_file.flush()
        except OSError:
            pass


def log(msg: str = "", end: str = "\n"):
    """Log an info message to the console and the log file."""
    if not _initialized:
        init_logging()

    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning. Displayed in yellow, tracked for the summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error. Displayed in red on stderr, tracked for the summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """Log a debug message. Written to the log file only."""
    if not _initialized:
        init_logging()

    _write_to_file(f"[DEBUG] {msg}", end)
