from __future__ import annotations

"""
Log sinks for the build CLI.

Every handler created here is tagged, so a later bootstrap or shutdown only
touches handlers this package installed.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from cssinliner.infra.fs import ensure_parent_dir

_HANDLER_TAG_ATTR: str = "_cssinliner_handler"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# A build log stays small; two 1MB segments cover many runs
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sinks(level: int, console: bool, log_file: Optional[str]) -> List[logging.Handler]:
    """
    Create the stderr and rotating-file handlers requested for a run.

    A log file that cannot be opened is reported on stderr and skipped;
    the build itself never fails because of logging.

    Args:
        level: Numeric logging level applied to every sink.
        console: Whether to log to stderr.
        log_file: Optional path of a rotating build log.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    sinks: List[logging.Handler] = []

    if console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        sinks.append(sh)

    if log_file:
        fh = _open_log_file(log_file)
        if fh is not None:
            fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            sinks.append(fh)

    for sink in sinks:
        sink.setLevel(level)
        _tag_handler(sink)
    return sinks


def _open_log_file(log_file: str) -> Optional[RotatingFileHandler]:
    ok, err = ensure_parent_dir(log_file)
    if not ok:
        sys.stderr.write(f"WARNING: Cannot create log directory for '{log_file}': {err}\n")
        return None
    try:
        return RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None
