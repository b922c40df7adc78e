from __future__ import annotations

"""
Logging bootstrap for the build CLI.

Records from every module reach the root logger through a single tagged
QueueHandler; a QueueListener thread forwards them to the stderr and
log-file sinks. Bootstrapping twice is a no-op unless forced, and
shutdown_logging() drains the queue before the process reports its result.
"""

import atexit
import logging
import queue
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from cssinliner.infra.logging.handlers import _is_our_handler, _tag_handler, build_sinks

_CONFIGURED_FLAG_ATTR: str = "_cssinliner_configured"
_QUEUE_LISTENER_ATTR: str = "_cssinliner_queue_listener"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging options exposed by the CLI.

    Attributes:
        level: Level name ('DEBUG' with --debug, otherwise 'INFO').
        console: Log to stderr.
        log_file: Optional rotating log file (--log-file).
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the queue-based handler chain to the root logger.

    Args:
        cfg: Logging options for this run.
        force: Replace an existing configuration instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level = _parse_level(cfg.level)
    root.setLevel(level)

    sinks = build_sinks(level, cfg.console, cfg.log_file)
    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = _tag_handler(QueueHandler(log_queue))
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Covers exits that bypass the CLI's own shutdown (sys.excepthook)
    atexit.register(_stop_listener, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Flush pending records and detach this package's handlers.

    Safe to call when logging was never configured.
    """
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def _parse_level(level: str) -> int:
    value = logging.getLevelName(str(level or "INFO").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _stop_listener(listener: QueueListener) -> None:
    # stop() must not run twice: the atexit hook fires after an explicit shutdown
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
