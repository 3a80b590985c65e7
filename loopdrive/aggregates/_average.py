# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""RunningAverage implementation."""

from __future__ import annotations

from typing import Any, Optional


class RunningAverage:
    """
    Incremental arithmetic mean.

    Each update moves the mean toward the new value by ``1 / count`` of the
    difference, which equals ``(average * (count - 1) + value) / count``
    without ever holding the running total.
    """

    __slots__ = ["_average", "_count"]

    def __init__(self):
        self._average: Optional[Any] = None
        self._count = 0

    @property
    def average(self) -> Optional[Any]:
        """Mean of every value seen, ``None`` before the first update."""
        return self._average

    @property
    def count(self) -> int:
        return self._count

    def update(self, value) -> Any:
        """Fold ``value`` into the mean and return the new mean."""
        self._count += 1
        if self._average is None:
            self._average = value / 1
        else:
            self._average = self._average + (value - self._average) / self._count
        return self._average

    def reset(self) -> None:
        self._average = None
        self._count = 0

    def __repr__(self) -> str:
        return f"RunningAverage(average={self._average!r}, count={self._count})"
