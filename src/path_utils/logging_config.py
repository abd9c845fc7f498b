"""
Logging configuration for applications using path-utils.

The library itself only attaches a NullHandler to the ``path_utils`` logger;
applications call one of these functions to actually see the diagnostics
emitted through LoggingSink.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "path_utils"

DEFAULT_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_str: Optional[str] = None,
) -> None:
    """
    Configure the path_utils logger.

    Subsequent calls replace the handlers installed by earlier ones.

    Args:
        level: The logging level (e.g., logging.DEBUG, logging.INFO).
        log_file: Optional path to a log file. Directory will be created if missing.
        format_str: Optional custom format string. If None, uses level-appropriate default.
    """
    if format_str is None:
        format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in package_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    package_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_str))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
            package_logger.addHandler(file_handler)
        except OSError as e:
            # Read-only filesystems still get console output
            package_logger.debug(f"Could not set up file logging to {log_file}: {e}")


def get_log_level_from_flags(
    quiet: bool = False,
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """
    Determine the log level from verbosity flags.

    Precedence: debug > quiet > verbose > default (WARNING).

    Returns:
        The appropriate logging level constant.
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def get_log_level_from_name(name: str) -> int:
    """Map a level name such as "info" or "WARNING" to its logging constant."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging from verbosity flags.

    Args:
        verbose: Enable INFO level logging (shows progress and success messages).
        debug: Enable DEBUG level logging (overrides verbose and quiet).
        quiet: Enable ERROR level only (overrides verbose, overridden by debug).
        log_file: Optional path to a log file.
    """
    level = get_log_level_from_flags(quiet=quiet, verbose=verbose, debug=debug)
    configure_logging(level=level, log_file=log_file)
