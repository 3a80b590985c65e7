# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""BooleanReduce implementation."""

from __future__ import annotations

from typing import Any

from .._errors import ConfigError

_INITIAL = {"or": False, "and": True}


class BooleanReduce:
    """
    Running ``or`` / ``and`` over every value seen.

    Every value is folded, even once the result can no longer change.
    """

    __slots__ = ["_kind", "_value", "_count"]

    def __init__(self, kind: str):
        kind = kind.lower() if isinstance(kind, str) else kind
        if kind not in _INITIAL:
            raise ConfigError(
                f"boolean reduce kind must be 'or' or 'and', got {kind!r}"
            )
        self._kind = kind
        self._value = _INITIAL[kind]
        self._count = 0

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def value(self) -> bool:
        return self._value

    @property
    def count(self) -> int:
        return self._count

    def update(self, value: Any) -> bool:
        self._count += 1
        if self._kind == "or":
            self._value = bool(value) or self._value
        else:
            self._value = bool(value) and self._value
        return self._value

    def reset(self) -> None:
        self._value = _INITIAL[self._kind]
        self._count = 0
