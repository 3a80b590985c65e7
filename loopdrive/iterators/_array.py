# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""MultiIndexArrayTraversal implementation."""

from __future__ import annotations

import math
from typing import Any, NamedTuple, Optional, Sequence

import numpy as np

from .._caching import cache_with_key
from .._errors import ConfigError
from .._types import is_integral
from ._base import DONE, DriverBase


class ArrayPosition(NamedTuple):
    flat_index: int
    index: Optional[tuple[int, ...]]


class ArrayElement(NamedTuple):
    flat_index: int
    index: Optional[tuple[int, ...]]
    value: Any


@cache_with_key(lambda dims: dims)
def row_major_strides(dims: tuple[int, ...]) -> tuple[int, ...]:
    """
    Return the row-major stride of each axis, in elements.

    ``strides[i]`` is the product of every dimension after ``i``; the last
    axis always has stride 1.

    Example:
        row_major_strides((2, 3, 4))  # (12, 4, 1)
    """
    strides = [1] * len(dims)
    for i in range(len(dims) - 2, -1, -1):
        strides[i] = strides[i + 1] * dims[i + 1]
    return tuple(strides)


def _shape_of(source) -> tuple[int, ...]:
    if isinstance(source, np.ndarray):
        return tuple(int(d) for d in source.shape)
    if is_integral(source):
        source = (source,)
    try:
        dims = tuple(source)
    except TypeError:
        raise ConfigError(f"expected a shape or an array, got {source!r}") from None
    for d in dims:
        if not is_integral(d):
            raise ConfigError(f"dimensions must be integers, got {dims!r}")
        if d < 0:
            raise ConfigError(f"dimensions must be non-negative, got {dims!r}")
    return tuple(int(d) for d in dims)


class MultiIndexArrayTraversal(DriverBase):
    """
    Driver walking an array shape in row-major order.

    Each pull advances the flat index by one and derives the per-axis index
    as ``(flat_index // strides[i]) % dims[i]``. When built from a numpy
    array, the element at that position is produced as well.
    """

    __slots__ = ["_array", "_dims", "_size", "_strides", "_with_index", "_flat"]

    def __init__(self, source: Sequence[int] | np.ndarray, with_index: bool = True):
        """
        Create an array traversal.

        Args:
            source: An array shape, or a numpy array to read elements from
            with_index: Derive the multi-index on every pull; when False the
                stride table is never built and ``index`` is ``None``
        """
        self._array = source if isinstance(source, np.ndarray) else None
        self._dims = _shape_of(source)
        super().__init__()
        self._size = math.prod(self._dims)
        self._with_index = with_index
        self._strides = row_major_strides(self._dims) if with_index else None
        self._flat = 0

    @property
    def dims(self) -> tuple[int, ...]:
        return self._dims

    @property
    def size(self) -> int:
        return self._size

    @property
    def strides(self) -> Optional[tuple[int, ...]]:
        return self._strides

    def unravel(self, flat_index: int) -> tuple[int, ...]:
        """
        Return the multi-index of ``flat_index``.

        Raises:
            IndexError: if ``flat_index`` is outside ``[0, size)``
        """
        if not 0 <= flat_index < self._size:
            raise IndexError(
                f"flat index {flat_index} out of range for shape {self._dims}"
            )
        strides = self._strides
        if strides is None:
            strides = row_major_strides(self._dims)
        return tuple(
            (flat_index // stride) % dim for stride, dim in zip(strides, self._dims)
        )

    def _next(self) -> Any:
        flat = self._flat
        if flat >= self._size:
            return DONE
        self._flat = flat + 1
        index = self.unravel(flat) if self._with_index else None
        if self._array is None:
            return ArrayPosition(flat, index)
        return ArrayElement(flat, index, self._array.flat[flat])

    def _reset(self) -> None:
        self._flat = 0
