# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Explicit getter/setter places for read-modify-write updates.
"""

from __future__ import annotations

from typing import Any, Callable


class Place:
    """
    A mutable location described by a getter and a setter.

    A place lets an owning loop update a value it does not hold directly:
    the caller supplies a pure function and the place performs the
    read-modify-write.

    Args:
        getter: Zero-argument callable returning the current value
        setter: One-argument callable storing a new value

    Example (object attribute):
        >>> class Counter:
        ...     total = 0
        >>> c = Counter()
        >>> total = Place.attribute(c, "total")
        >>> total.update(lambda v: v + 5)
        5

    Example (mapping item):
        >>> hist = {}
        >>> Place.item(hist, "a", default=0).update(lambda v: v + 1)
        1
    """

    __slots__ = ["_getter", "_setter"]

    def __init__(self, getter: Callable[[], Any], setter: Callable[[Any], Any]):
        self._getter = getter
        self._setter = setter

    @classmethod
    def attribute(cls, obj: Any, name: str) -> "Place":
        """Place for ``obj.<name>``."""
        return cls(lambda: getattr(obj, name), lambda value: setattr(obj, name, value))

    @classmethod
    def item(cls, container: Any, key: Any, default: Any = None) -> "Place":
        """
        Place for ``container[key]``.

        Reading a missing key from a mapping returns ``default``.
        """

        def getter():
            if hasattr(container, "get"):
                return container.get(key, default)
            return container[key]

        def setter(value):
            container[key] = value

        return cls(getter, setter)

    def get(self) -> Any:
        return self._getter()

    def set(self, value: Any) -> Any:
        self._setter(value)
        return value

    def update(self, fn: Callable[[Any], Any]) -> Any:
        """Store ``fn(current)`` and return it."""
        return self.set(fn(self.get()))


class Cell(Place):
    """A free-standing place holding one value."""

    __slots__ = ["value"]

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__(self._read, self._write)

    def _read(self) -> Any:
        return self.value

    def _write(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"
