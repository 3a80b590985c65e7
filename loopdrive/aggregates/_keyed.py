# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""KeyedAccumulate implementation."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Callable, Optional

from .._errors import ConfigError
from ..place import Place


class KeyedAccumulate:
    """
    Collects ``key -> value`` pairs into a mapping, last write wins.

    The mapping is borrowed when supplied by the caller: updates land in it
    and ``reset()`` clears it.
    """

    __slots__ = ["_mapping"]

    def __init__(self, mapping: Optional[MutableMapping] = None):
        if mapping is None:
            mapping = {}
        elif not isinstance(mapping, MutableMapping):
            raise ConfigError(f"expected a mutable mapping, got {mapping!r}")
        self._mapping = mapping

    @property
    def mapping(self) -> MutableMapping:
        return self._mapping

    def update(self, key: Any, value: Any) -> MutableMapping:
        self._mapping[key] = value
        return self._mapping

    def update_with(
        self, key: Any, fn: Callable[[Any], Any], default: Any = None
    ) -> Any:
        """Store ``fn(mapping.get(key, default))`` under ``key`` and return it."""
        return Place.item(self._mapping, key, default).update(fn)

    def reset(self) -> None:
        self._mapping.clear()
