# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""RangeStepper implementation."""

from __future__ import annotations

from typing import Any

from .._config import RangeConfig
from ._base import DONE, DriverBase


class RangeStepper(DriverBase):
    """
    Driver stepping through one numeric dimension.

    Pull number ``k`` produces ``start + k * increment`` (ascending) or
    ``start - k * increment`` (descending). Each candidate is checked against
    the configured end under the boundary rule before it is returned.
    """

    __slots__ = ["_config", "_current", "_tick"]

    def __init__(self, config: RangeConfig):
        """
        Create a stepper over ``config``.

        Args:
            config: A RangeConfig, or anything ``RangeConfig.coerce`` accepts
        """
        super().__init__()
        self._config = RangeConfig.coerce(config)
        self._current: Any = None
        self._tick = 0

    @property
    def config(self) -> RangeConfig:
        return self._config

    @property
    def current(self) -> Any:
        """Last produced value, ``None`` before the first pull."""
        return self._current

    @property
    def value_type(self) -> type:
        return self._config.value_type

    def _next(self) -> Any:
        candidate = self._config.value_at(self._tick)
        if self._config.is_past(candidate):
            return DONE
        self._tick += 1
        self._current = candidate
        return candidate

    def _reset(self) -> None:
        self._current = None
        self._tick = 0

    def __repr__(self) -> str:
        return f"RangeStepper({self._config!r})"
