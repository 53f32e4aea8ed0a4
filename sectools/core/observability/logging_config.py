"""
Logging setup for the installer process.

Modules log through ``logging.getLogger(__name__)``; terminal progress
for the user goes through ``click.secho`` in the UI layer instead.

Console level precedence:
    --debug / --verbose / --quiet  >  SECTOOLS_LOG_LEVEL  >  WARNING

SECTOOLS_LOG_FILE adds a file handler, at SECTOOLS_LOG_FILE_LEVEL or
the console level.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

DEFAULT_LEVEL = logging.WARNING

# (format, datefmt) per console threshold, most verbose first
_CONSOLE_FORMATS: list[tuple[int, str, str | None]] = [
    (logging.DEBUG, "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(levelname)s: %(message)s", None),
]

_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d  %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown names give WARNING."""
    if not level:
        return DEFAULT_LEVEL
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else DEFAULT_LEVEL


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Console level name from the global CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get("SECTOOLS_LOG_LEVEL", logging.getLevelName(DEFAULT_LEVEL))


def _console_formatter(numeric_level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if numeric_level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_CONSOLE_FORMATS[-1][1])


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a console handler and,
    if ``log_file`` is set, a file handler.

    Args:
        level: Console level name.
        log_file: Path of a log file to append to.
        log_file_level: File handler level name; defaults to ``level``.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    # Root must pass records down to the most verbose handler
    root.setLevel(root_level)
    logging.raiseExceptions = False
