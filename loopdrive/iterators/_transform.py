# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""TransformDriver implementation."""

from __future__ import annotations

from typing import Any, Callable

from .._errors import ConfigError
from ._base import DONE, DriverBase
from ._protocol import DriverProtocol


class TransformDriver(DriverBase):
    """
    Driver that applies a unary function to values from an underlying driver.

    ``DONE`` from the underlying driver passes through untouched; the
    function is never called for it.
    """

    __slots__ = ["_underlying", "_transform_op"]

    def __init__(self, underlying: DriverProtocol, transform_op: Callable[[Any], Any]):
        """
        Create a transform driver.

        Args:
            underlying: The driver to read from
            transform_op: Pure unary function applied to every value
        """
        if not callable(transform_op):
            raise ConfigError(f"transform op must be callable, got {transform_op!r}")
        super().__init__()
        self._underlying = underlying
        self._transform_op = transform_op

    @property
    def children(self):
        return (self._underlying,)

    def _next(self) -> Any:
        value = self._underlying.pull()
        if value is DONE:
            return DONE
        return self._transform_op(value)

    def _reset(self) -> None:
        pass
