# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ConstantDriver implementation."""

from __future__ import annotations

from typing import Any

from ._base import DriverBase


class ConstantDriver(DriverBase):
    """
    Driver producing the same value on every pull. Never reports ``DONE``.
    """

    __slots__ = ["_value"]

    def __init__(self, value: Any):
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def _next(self) -> Any:
        return self._value

    def _reset(self) -> None:
        pass
