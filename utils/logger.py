"""
utils/logger.py
---------------
Logging setup for the data-access layer.
Modules call `get_logger(__name__)`; the first call installs one stdout
handler on the root logger at the level named by `LOG_LEVEL`.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None, stream=None) -> logging.Handler:
    """
    Install (or replace) the stdout handler on the root logger.

    Calling it again swaps the previous handler out instead of stacking a
    second one, so repeated setup never duplicates log lines.

    Args:
        level: Level name such as "DEBUG". Defaults to ``config.LOG_LEVEL``;
            unknown names fall back to INFO.
        stream: Where records go. Defaults to ``sys.stdout``.

    Returns:
        The installed handler.
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(_handler)

    resolved = getattr(logging, (level or LOG_LEVEL).upper(), None)
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return _handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for `name`, configuring logging on first use."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
