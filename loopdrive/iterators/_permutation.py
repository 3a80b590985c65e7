# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""PermutationDriver implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .._errors import ConfigError
from ._base import DONE, DriverBase
from ._chain import ChainedSequenceIterator
from ._protocol import DriverProtocol


def _ensure_driver(obj) -> DriverProtocol:
    """Wrap a plain sequence of indices in a single-source chain."""
    if isinstance(obj, DriverProtocol):
        return obj
    return ChainedSequenceIterator([obj])


class PermutationDriver(DriverBase):
    """
    Driver that reads values through an index mapping.

    Each pull pulls one index from the ``indices`` driver and yields
    ``values[index]``. Only the indices are advanced; ``values`` is accessed
    by position.
    """

    __slots__ = ["_values", "_indices"]

    def __init__(self, values, indices):
        """
        Create a permutation driver.

        Args:
            values: Positional sequence or numpy array providing the values
            indices: Driver, or sequence, providing the indices
        """
        if not isinstance(values, (Sequence, np.ndarray)):
            raise ConfigError(
                f"permutation values must be a positional sequence, got {values!r}"
            )
        super().__init__()
        self._values = values
        self._indices = _ensure_driver(indices)

    @property
    def children(self):
        return (self._indices,)

    def _next(self) -> Any:
        index = self._indices.pull()
        if index is DONE:
            return DONE
        return self._values[index]

    def _reset(self) -> None:
        pass
