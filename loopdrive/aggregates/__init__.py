# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Running aggregations fed one value per tick by an owning loop.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Optional

from ._average import RunningAverage
from ._boolean import BooleanReduce
from ._keyed import KeyedAccumulate
from ._timing import CLOCKS, Elapsed, TimingState


def running_average() -> RunningAverage:
    return RunningAverage()


def timing(kind: Optional[str] = None, start: Optional[float] = None) -> TimingState:
    return TimingState(kind, start)


def boolean_reduce(kind: str) -> BooleanReduce:
    return BooleanReduce(kind)


def keyed_accumulate(mapping: Optional[MutableMapping] = None) -> KeyedAccumulate:
    return KeyedAccumulate(mapping)


__all__ = [
    "BooleanReduce",
    "CLOCKS",
    "Elapsed",
    "KeyedAccumulate",
    "RunningAverage",
    "TimingState",
    "boolean_reduce",
    "keyed_accumulate",
    "running_average",
    "timing",
]
