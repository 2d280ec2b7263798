"""Logging helpers for the xword package."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "xword"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Route package logs to ``stream`` (stderr by default) at ``level``.

    Only the ``xword`` logger hierarchy is touched so that embedding
    applications keep control of the root logger.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``xword`` hierarchy, configuring defaults if needed."""

    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        configure_logging()
    if not name or name == "__main__":
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
