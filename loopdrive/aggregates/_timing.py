# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""TimingState implementation."""

from __future__ import annotations

import time
from typing import Callable, NamedTuple, Optional

from .._env import get_timing_kind
from .._errors import ConfigError

CLOCKS: dict[str, Callable[[], float]] = {
    "real": time.perf_counter,
    "run": time.process_time,
}


class Elapsed(NamedTuple):
    since: float
    per_tick: float


class TimingState:
    """
    Elapsed time since a start point and since the previous tick.

    The first tick measures ``per_tick`` from the start point, so it equals
    ``since``.
    """

    __slots__ = ["_kind", "_clock", "_start", "_previous"]

    def __init__(self, kind: Optional[str] = None, start: Optional[float] = None):
        """
        Create a timing state.

        Args:
            kind: ``"real"`` for wall-clock time or ``"run"`` for process CPU
                time; defaults to ``LOOPDRIVE_TIMING_KIND``
            start: Start time on the chosen clock; defaults to now
        """
        if kind is None:
            kind = get_timing_kind()
        if kind not in CLOCKS:
            raise ConfigError(
                f"unknown timing kind {kind!r}; expected one of {sorted(CLOCKS)}"
            )
        self._kind = kind
        self._clock = CLOCKS[kind]
        self._start = self._clock() if start is None else start
        self._previous = self._start

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def start(self) -> float:
        return self._start

    def tick(self, now: Optional[float] = None) -> Elapsed:
        """Return ``(since, per_tick)`` at ``now``, read from the clock when omitted."""
        if now is None:
            now = self._clock()
        elapsed = Elapsed(now - self._start, now - self._previous)
        self._previous = now
        return elapsed

    def reset(self, start: Optional[float] = None) -> None:
        self._start = self._clock() if start is None else start
        self._previous = self._start
