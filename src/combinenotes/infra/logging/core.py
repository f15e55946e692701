from __future__ import annotations

"""
Logging Bootstrap.

The root logger gets a single QueueHandler; a QueueListener thread hands
the records to the console and file handlers, so file I/O never happens on
the thread reading and combining notes. Configuration is idempotent and can
be undone with reset_logging().
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from combinenotes.infra.logging.config import LoggingConfig
from combinenotes.infra.logging.handlers import build_handlers, is_tagged, tag_handler

_CONFIGURED_FLAG_ATTR = "_combinenotes_configured"
_QUEUE_LISTENER_ATTR = "_combinenotes_queue_listener"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the queue-based handler chain on the root logger.

    Only the first call has an effect unless `force` is given, in which case
    the previous chain is torn down and rebuilt from `cfg`.

    Args:
        cfg: Where and how verbosely to log.
        force: Rebuild even if logging was already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    reset_logging(root)
    level = cfg.level_number()
    root.setLevel(level)

    targets = build_handlers(cfg, level)
    if not targets:
        return root

    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(records, *targets, respect_handler_level=True)
    listener.start()
    root.addHandler(tag_handler(QueueHandler(records)))

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_stop_listener, listener)
    return root


def reset_logging(root: Optional[logging.Logger] = None) -> None:
    """
    Remove everything configure_logging installed.

    Pending records are flushed by stopping the listener before its handlers
    are closed.
    """
    root = root or logging.getLogger()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in [h for h in root.handlers if is_tagged(h)]:
        root.removeHandler(handler)
        handler.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; records reach the root handler chain."""
    return logging.getLogger(name)


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() on an already stopped listener fails on older Pythons
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
        for handler in listener.handlers:
            handler.close()
