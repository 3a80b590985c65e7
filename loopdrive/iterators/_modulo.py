# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ModuloView implementation."""

from __future__ import annotations

from typing import Any

from .._errors import ConfigError
from .._types import is_number
from ._base import DONE, DriverBase
from ._protocol import DriverProtocol


class ModuloView(DriverBase):
    """
    Driver that reduces every value of an underlying driver modulo a divisor.

    The underlying driver keeps its own progression; only the value handed
    to the caller is reduced.
    """

    __slots__ = ["_underlying", "_divisor"]

    def __init__(self, underlying: DriverProtocol, divisor):
        """
        Create a modulo view.

        Args:
            underlying: The driver whose values are reduced
            divisor: Positive divisor
        """
        if not is_number(divisor) or divisor <= 0:
            raise ConfigError(f"divisor must be a positive number, got {divisor!r}")
        super().__init__()
        self._underlying = underlying
        self._divisor = divisor

    @property
    def divisor(self):
        return self._divisor

    @property
    def children(self):
        return (self._underlying,)

    def _next(self) -> Any:
        raw = self._underlying.pull()
        if raw is DONE:
            return DONE
        return raw % self._divisor

    def _reset(self) -> None:
        pass
