# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ChainedSequenceIterator implementation."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from .._errors import ConfigError
from ._base import DONE, DriverBase

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def _is_positional(source) -> bool:
    """Return True for sources read by index in constant time."""
    # deque registers as a Sequence but indexes in linear time
    if isinstance(source, deque):
        return False
    return isinstance(source, (Sequence, np.ndarray))


class ChainedSequenceIterator(DriverBase):
    """
    Driver iterating a list of sources end to end.

    Positional sources (lists, tuples, strings, ranges, numpy arrays) are
    read by index. Every other iterable (deques, linked structures,
    generators) is consumed through an iterator over its remaining tail.
    Empty sources are skipped without the caller observing them.

    Sources are borrowed: they are never modified and must outlive the
    driver.
    """

    __slots__ = ["_sources", "_cursor", "_position", "_tail"]

    def __init__(self, sources: Iterable[Any]):
        """
        Create a chained iterator.

        Args:
            sources: Ordered iterable of sources
        """
        if isinstance(sources, (str, bytes)) or not isinstance(sources, Iterable):
            raise ConfigError(
                f"sources must be an iterable of sequences, got {sources!r}"
            )
        sources = list(sources)
        for source in sources:
            if not isinstance(source, Iterable):
                raise ConfigError(f"chain source is not iterable: {source!r}")
            if isinstance(source, np.ndarray) and source.ndim == 0:
                raise ConfigError(f"chain source is a 0-d array: {source!r}")
        super().__init__()
        self._sources = sources
        self._cursor = 0
        self._position = 0
        self._tail = None

    @property
    def sources(self) -> tuple[Any, ...]:
        return tuple(self._sources)

    def _next_from_current(self) -> Any:
        source = self._sources[self._cursor]
        if _is_positional(source):
            if self._position < len(source):
                value = source[self._position]
                self._position += 1
                return value
            return _EXHAUSTED

        if self._tail is None:
            self._tail = iter(source)
        value = next(self._tail, _EXHAUSTED)
        if value is not _EXHAUSTED:
            self._position += 1
        return value

    def _next(self) -> Any:
        while self._cursor < len(self._sources):
            value = self._next_from_current()
            if value is not _EXHAUSTED:
                return value
            if self._position == 0:
                logger.debug("skipping empty source #%d", self._cursor)
            self._cursor += 1
            self._position = 0
            self._tail = None
        return DONE

    def _reset(self) -> None:
        self._cursor = 0
        self._position = 0
        self._tail = None
