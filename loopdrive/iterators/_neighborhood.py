# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""RadiusEnumerator implementation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from .._config import Boundary, Direction, RangeConfig
from .._errors import ConfigError
from .._types import is_integral
from ._base import DONE, DriverBase
from ._nested import NestedCounter

logger = logging.getLogger(__name__)


class RadiusEnumerator(DriverBase):
    """
    Driver enumerating every integer point within a radius of an origin.

    Each axis ``i`` spans ``[origin[i] - radius, origin[i] + radius]``
    inclusive; points come out in row-major order (last axis fastest).
    With ``skip_origin`` the origin itself is never produced.
    """

    __slots__ = ["_origin", "_radius", "_skip_origin", "_offsets", "_counter"]

    def __init__(
        self,
        origin: Sequence[int],
        radius: int,
        skip_origin: bool = False,
        offsets: bool = False,
    ):
        """
        Create a radius enumerator.

        Args:
            origin: Integer coordinates of the center point
            radius: Non-negative integer radius applied on every axis
            skip_origin: Suppress the center point
            offsets: Yield offsets from the origin instead of absolute points
        """
        origin = tuple(np.asarray(origin).reshape(-1).tolist())
        if not origin:
            raise ConfigError("origin must have at least one axis")
        if not all(is_integral(o) for o in origin):
            raise ConfigError(f"origin must contain integers, got {origin!r}")
        if not is_integral(radius) or radius < 0:
            raise ConfigError(f"radius must be a non-negative integer, got {radius!r}")
        radius = int(radius)
        if radius == 0 and skip_origin:
            raise ConfigError("radius 0 with skip_origin enumerates nothing")

        super().__init__()
        self._origin = origin
        self._radius = radius
        self._skip_origin = skip_origin
        self._offsets = offsets
        self._counter = NestedCounter(
            [
                RangeConfig(
                    o - radius,
                    o + radius,
                    1,
                    Direction.ASCENDING,
                    Boundary.INCLUSIVE,
                )
                for o in origin
            ]
        )
        logger.debug(
            "neighborhood of %r with radius %d (skip_origin=%s)",
            origin,
            radius,
            skip_origin,
        )

    @property
    def origin(self) -> tuple[int, ...]:
        return self._origin

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def children(self):
        return (self._counter,)

    def _next(self) -> Any:
        point = self._counter.pull()
        if point is not DONE and self._skip_origin and point == self._origin:
            point = self._counter.pull()
        if point is DONE:
            return DONE
        if self._offsets:
            return tuple(p - o for p, o in zip(point, self._origin))
        return point

    def _reset(self) -> None:
        pass
