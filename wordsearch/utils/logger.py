"""Logging utilities tailored for word search generation."""

from __future__ import annotations

import logging
from typing import Optional


ROOT_LOGGER_NAME = "wordsearch"
FILL_LOGGER_NAME = "wordsearch.engine.validator"


def configure_logging(level: int = logging.INFO, *, show_fill_rejections: bool = False) -> None:
    """Configure root logging with a sensible formatter.

    Filling a large grid can reject thousands of candidate letters. Those
    rejections are logged at DEBUG by the validator and stay muted unless
    ``show_fill_rejections`` is set, even when ``level`` is DEBUG.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    fill_level = logging.DEBUG if show_fill_rejections else max(level, logging.INFO)
    logging.getLogger(FILL_LOGGER_NAME).setLevel(fill_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
