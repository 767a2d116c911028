"""Logging utilities for the ``hidato`` logger tree."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "hidato"


def configure_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """Attach a single formatted handler to the ``hidato`` logger.

    Only the package logger is touched so applications embedding the solver
    keep their own root configuration. Records still propagate upwards.
    Per-step search messages are emitted at DEBUG.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``hidato`` tree, configuring defaults if needed."""

    if not logging.getLogger(ROOT_LOGGER).handlers:
        configure_logging()
    name = name or ROOT_LOGGER
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
