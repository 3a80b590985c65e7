# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""CyclicStepper implementation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .._errors import ConfigError, DriverError
from ._base import DONE, DriverBase
from ._protocol import DriverProtocol

logger = logging.getLogger(__name__)


class CyclicStepper(DriverBase):
    """
    Driver that restarts its underlying driver whenever it runs out.

    On exhaustion the underlying driver is reset, ``on_wrap`` is called, and
    the fresh first value is returned in the same pull. A cyclic stepper
    never reports ``DONE``.
    """

    __slots__ = ["_underlying", "_on_wrap", "_wraps"]

    def __init__(
        self,
        underlying: DriverProtocol,
        on_wrap: Optional[Callable[[], Any]] = None,
    ):
        """
        Create a cyclic stepper.

        Args:
            underlying: A resettable driver producing at least one value
            on_wrap: Zero-argument callback invoked on every wraparound
        """
        config = getattr(underlying, "config", None)
        if config is not None and config.is_empty:
            raise ConfigError(f"cannot cycle over an empty range: {config!r}")
        if on_wrap is not None and not callable(on_wrap):
            raise ConfigError(f"on_wrap must be callable, got {on_wrap!r}")
        super().__init__()
        self._underlying = underlying
        self._on_wrap = on_wrap
        self._wraps = 0

    @property
    def wraps(self) -> int:
        """Number of wraparounds so far."""
        return self._wraps

    @property
    def children(self):
        return (self._underlying,)

    def _next(self) -> Any:
        value = self._underlying.pull()
        if value is not DONE:
            return value

        self._underlying.reset()
        self._wraps += 1
        logger.debug("%r wrapped (wrap #%d)", self._underlying, self._wraps)
        if self._on_wrap is not None:
            self._on_wrap()

        value = self._underlying.pull()
        if value is DONE:
            raise DriverError(
                f"cannot cycle over {self._underlying!r}: it produced no values"
            )
        return value

    def _reset(self) -> None:
        self._wraps = 0
