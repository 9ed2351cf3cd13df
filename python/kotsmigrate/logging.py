"""Logging utilities for kotsmigrate."""

from __future__ import annotations

import logging
import os
import sys

from kotsmigrate.constants import LOG_LEVEL_ENV_VAR


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name with some formatting configs."""
    # No need to reconfigure the logger if it was already created
    if name in logging.Logger.manager.loggerDict:
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    logger.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, logging.INFO))
    formatter = logging.Formatter("%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
