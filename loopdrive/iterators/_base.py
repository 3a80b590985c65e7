# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Base classes for drivers.
"""

from __future__ import annotations

from typing import Any

from .._errors import OverPullError


class _DoneType:
    """Type of the ``DONE`` sentinel."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DONE"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_DoneType, ())


DONE = _DoneType()

_NOTHING = object()


class DriverBase:
    """
    Base class for pull drivers.

    Subclasses must implement:
    - _next() -> value or DONE  # produce one value, called at most once per pull
    - _reset() -> None          # restore the subclass's own state

    Optionally override:
    - children property to return child drivers, reset recursively by reset()

    The base class handles the ``DONE`` latch, over-pull detection, peeking,
    and the Python iterator protocol.
    """

    __slots__ = ["_done", "_peeked"]

    def __init__(self):
        self._done = False
        self._peeked: Any = _NOTHING

    @property
    def exhausted(self) -> bool:
        """Return True once ``pull`` has reported ``DONE``."""
        return self._done

    @property
    def children(self) -> tuple[DriverBase, ...]:
        """Return child drivers in pull order. Override in subclasses."""
        return ()

    def pull(self) -> Any:
        """
        Advance one tick.

        Returns:
            The next value, or ``DONE`` once the driver is exhausted

        Raises:
            OverPullError: if the driver already reported ``DONE``
        """
        if self._done:
            raise OverPullError(self)
        if self._peeked is not _NOTHING:
            value, self._peeked = self._peeked, _NOTHING
        else:
            value = self._next()
        if value is DONE:
            self._done = True
        return value

    def peek(self) -> Any:
        """
        Return what the next ``pull`` will return without consuming it.

        The value is computed once and handed out by the following ``pull``.
        """
        if self._done:
            return DONE
        if self._peeked is _NOTHING:
            self._peeked = self._next()
        return self._peeked

    def reset(self) -> None:
        """Return the driver and its children to their initial state."""
        for child in self.children:
            child.reset()
        self._done = False
        self._peeked = _NOTHING
        self._reset()

    def take(self, n: int) -> list:
        """Pull up to ``n`` values, stopping early at ``DONE``."""
        values = []
        for _ in range(n):
            value = self.pull()
            if value is DONE:
                break
            values.append(value)
        return values

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        value = self.pull()
        if value is DONE:
            raise StopIteration
        return value

    # Abstract methods for subclasses
    def _next(self) -> Any:
        """Produce the next value or ``DONE``."""
        raise NotImplementedError

    def _reset(self) -> None:
        """Restore subclass state. Children are reset by ``reset``."""
        raise NotImplementedError
