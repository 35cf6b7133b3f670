"""
Logging setup for the users API.

Modules call `get_logger(__name__)`; everything under the `usersvc` logger
goes to one stdout handler. The root logger is left alone so uvicorn keeps
its own handlers and lines are not printed twice.
"""

import logging
import sys

PACKAGE_LOGGER = "usersvc"
_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configure(logger: logging.Logger) -> None:
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""
    _configure(logging.getLogger(PACKAGE_LOGGER))
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
