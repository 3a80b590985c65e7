# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ZipDriver implementation."""

from __future__ import annotations

from typing import Any

from .._errors import ConfigError
from ._base import DONE, DriverBase
from ._protocol import DriverProtocol


class ZipDriver(DriverBase):
    """
    Driver that zips several drivers together.

    Each pull pulls every child once, in order, and yields a tuple of their
    values. The zip is done as soon as any child is done; children after the
    first finished one are not pulled on that tick.
    """

    __slots__ = ["_drivers"]

    def __init__(self, *args: DriverProtocol):
        """
        Create a zip driver.

        Args:
            *args: Drivers to zip together. Can be:
                   - Multiple drivers: ZipDriver(d1, d2, d3)
                   - A single sequence of drivers: ZipDriver([d1, d2, d3])
        """
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            drivers = args[0]
        else:
            drivers = args

        if len(drivers) < 1:
            raise ConfigError("ZipDriver requires at least one driver")
        for driver in drivers:
            if not isinstance(driver, DriverProtocol):
                raise ConfigError(f"ZipDriver requires drivers, got {driver!r}")

        super().__init__()
        self._drivers = list(drivers)

    @property
    def children(self):
        return tuple(self._drivers)

    def _next(self) -> Any:
        values = []
        for driver in self._drivers:
            value = driver.pull()
            if value is DONE:
                return DONE
            values.append(value)
        return tuple(values)

    def _reset(self) -> None:
        pass
