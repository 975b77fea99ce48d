"""Package logger factory.

Module loggers are plain children of the ``"pydosefit"`` logger and carry
no handlers or levels of their own, so an application's logging setup
applies to them unchanged.  The console handler lives on the parent and
is attached only when asked for, through ``PYDOSEFIT_LOG_LEVEL`` or
:func:`set_log_level`.
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "pydosefit"


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger

    logger.addHandler(logging.NullHandler())
    level_name = os.getenv("PYDOSEFIT_LOG_LEVEL")
    if level_name:
        set_log_level(level_name)
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    _package_logger()
    return logging.getLogger(name)


def set_log_level(level: str | int) -> None:
    """Log package messages at *level* and above to stderr.

    Installs one console handler on the package logger and stops
    propagation to the root logger, so records are printed once.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    if not any(getattr(h, "name", None) == "pydosefit-console" for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name("pydosefit-console")
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
