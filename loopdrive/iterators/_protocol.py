# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Driver protocol for loopdrive.

Defines the interface every driver implements so that composite drivers
can own and pull arbitrary children.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DriverProtocol(Protocol):
    """
    Protocol defining the interface for pull drivers.

    Composite drivers (cycles, nested counters, zips) accept any object
    implementing this protocol as a child.
    """

    def pull(self) -> Any:
        """Return the next value, or ``DONE`` once exhausted."""
        ...

    def peek(self) -> Any:
        """Return what the next ``pull`` will return without consuming it."""
        ...

    def reset(self) -> None:
        """Return the driver to its freshly constructed state."""
        ...

    @property
    def exhausted(self) -> bool:
        """Return True once ``pull`` has reported ``DONE``."""
        ...

    @property
    def children(self) -> tuple["DriverProtocol", ...]:
        """Return child drivers in pull order."""
        ...
