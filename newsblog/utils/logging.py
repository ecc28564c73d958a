"""Logging setup shared by the web app and the API client.

One call to `configure_logging()` at startup; modules grab their logger with
`get_logger(__name__)`.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger to write to stdout.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value. Falls back
        to the LOG_LEVEL environment variable, then INFO.
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
