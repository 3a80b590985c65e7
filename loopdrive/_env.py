# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Environment-driven defaults shared across the loopdrive package.
"""

import logging
import os
from typing import Optional

LOG_LEVEL_VAR = "LOOPDRIVE_LOG_LEVEL"
TIMING_KIND_VAR = "LOOPDRIVE_TIMING_KIND"

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_TIMING_KIND = "real"

_handler: Optional[logging.Handler] = None


def get_log_level() -> int:
    """
    Return the numeric log level named by ``LOOPDRIVE_LOG_LEVEL``.

    Unknown names fall back to WARNING.
    """
    name = os.environ.get(LOG_LEVEL_VAR, _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_timing_kind() -> str:
    """Return the default clock kind for ``timing()``."""
    return os.environ.get(TIMING_KIND_VAR, _DEFAULT_TIMING_KIND).strip().lower()


def configure_logging(level: Optional[int | str] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``loopdrive`` logger and set its level.

    Calling this more than once only updates the level.

    Args:
        level: Level name or number; defaults to ``LOOPDRIVE_LOG_LEVEL``

    Returns:
        The package logger
    """
    global _handler

    logger = logging.getLogger("loopdrive")
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(level)
    return logger
