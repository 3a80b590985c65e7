# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""NestedCounter implementation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .._config import RangeConfig
from .._errors import ConfigError
from ._base import DONE, DriverBase
from ._protocol import DriverProtocol
from ._range import RangeStepper

logger = logging.getLogger(__name__)


def _ensure_driver(level) -> DriverProtocol:
    """Wrap a range description in a RangeStepper; pass drivers through."""
    if isinstance(level, DriverProtocol):
        return level
    return RangeStepper(RangeConfig.coerce(level))


class NestedCounter(DriverBase):
    """
    Mixed-radix counter composed of one driver per level.

    Level 0 is the outermost digit and the last level the innermost. Every
    pull advances the innermost level; when a level runs out it is reset and
    the carry advances the next level out, like an odometer. A carry out of
    level 0 ends the counter.

    Each pull returns a tuple of the current value of every level, ordered
    outermost to innermost.
    """

    __slots__ = ["_levels", "_values", "_seeded"]

    def __init__(self, levels: Sequence[Any]):
        """
        Create a nested counter.

        Args:
            levels: Range descriptions (RangeConfig, mapping or tuple) or resettable
                drivers, outermost first
        """
        levels = list(levels)
        if not levels:
            raise ConfigError("a nested counter needs at least one level")
        super().__init__()
        self._levels = [_ensure_driver(level) for level in levels]
        self._values: list[Any] = [None] * len(self._levels)
        self._seeded = False
        logger.debug("built %d-level nested counter", len(self._levels))

    @property
    def levels(self) -> tuple[DriverProtocol, ...]:
        return tuple(self._levels)

    @property
    def children(self):
        # pull order is innermost first
        return tuple(reversed(self._levels))

    def _seed(self) -> bool:
        for i in reversed(range(len(self._levels))):
            value = self._levels[i].pull()
            if value is DONE:
                return False
            self._values[i] = value
        self._seeded = True
        return True

    def _carry(self) -> bool:
        """Advance by one tick, propagating carries outward."""
        depth = len(self._levels) - 1
        while True:
            level = self._levels[depth]
            value = level.pull()
            if value is not DONE:
                self._values[depth] = value
                return True
            if depth == 0:
                return False

            level.reset()
            first = level.pull()
            if first is DONE:
                return False
            self._values[depth] = first
            depth -= 1
            logger.debug("carry into level %d", depth)

    def _next(self) -> Any:
        if not self._seeded:
            advanced = self._seed()
        else:
            advanced = self._carry()
        if not advanced:
            return DONE
        return tuple(self._values)

    def _reset(self) -> None:
        self._values = [None] * len(self._levels)
        self._seeded = False
