# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""PeriodicTrigger implementation."""

from __future__ import annotations

from typing import NamedTuple

from .._errors import ConfigError
from .._types import is_integral
from ._base import DriverBase


class Phase(NamedTuple):
    phase: int
    fire: bool


class PeriodicTrigger(DriverBase):
    """
    Driver counting ``0..n-1`` forever and firing on the last phase.

    ``fire`` is True exactly once every ``n`` pulls.
    """

    __slots__ = ["_period", "_phase"]

    def __init__(self, n: int):
        if not is_integral(n) or n <= 0:
            raise ConfigError(f"period must be a positive integer, got {n!r}")
        super().__init__()
        self._period = int(n)
        self._phase = -1

    @property
    def period(self) -> int:
        return self._period

    def _next(self) -> Phase:
        self._phase = (self._phase + 1) % self._period
        return Phase(self._phase, self._phase == self._period - 1)

    def _reset(self) -> None:
        self._phase = -1
