# MIT License (see LICENSE)
"""
Logging configuration for hosts embedding the simulation.

Library modules only create loggers (``logging.getLogger(__name__)``); they
never configure handlers. A host calls setup_logging() once at startup.
"""
from __future__ import annotations
import logging
import sys

LOGGER_NAME = "verlet_sim"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the 'verlet_sim' logger namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to see registration events).
        log_file: Optional path; logs are also written there (overwritten).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
