# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Range configuration: direction, boundary and the validated RangeConfig.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from ._errors import ConfigError
from ._types import is_integral, promote


class Direction(enum.Enum):
    """Which way a range steps."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _DIRECTION_ALIASES.get(value.strip().lower())
        return None


class Boundary(enum.Enum):
    """Whether the configured end is itself a produced value."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _BOUNDARY_ALIASES.get(value.strip().lower())
        return None


_DIRECTION_ALIASES = {
    "ascending": Direction.ASCENDING,
    "asc": Direction.ASCENDING,
    "up": Direction.ASCENDING,
    "descending": Direction.DESCENDING,
    "desc": Direction.DESCENDING,
    "down": Direction.DESCENDING,
}

_BOUNDARY_ALIASES = {
    "inclusive": Boundary.INCLUSIVE,
    "incl": Boundary.INCLUSIVE,
    "exclusive": Boundary.EXCLUSIVE,
    "excl": Boundary.EXCLUSIVE,
}

_OPTION_NAMES = ("start", "end", "increment", "direction", "boundary")


def _coerce_enum(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigError(f"unknown {what} {value!r}") from None


@dataclass(frozen=True)
class RangeConfig:
    """
    A validated single-dimension range.

    Attributes:
        start: First value produced
        end: Bound tested by the done predicate; ``None`` for an infinite range
        increment: Step magnitude, always positive after validation
        direction: ``Direction.ASCENDING`` adds the step, ``DESCENDING`` subtracts it
        boundary: Whether ``end`` itself may be produced
        value_type: Scalar type of every produced value
    """

    start: Any
    end: Any = None
    increment: Any = 1
    direction: Optional[Direction] = None
    boundary: Boundary = Boundary.EXCLUSIVE
    value_type: type = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.start is None:
            raise ConfigError("range start is required")
        (start, end, increment), value_type = promote(
            self.start, self.end, self.increment
        )
        if increment == 0:
            raise ConfigError(f"increment must be non-zero, got {self.increment!r}")

        if self.direction is None:
            if end is not None:
                descending = end < start
            else:
                descending = increment < 0
            direction = Direction.DESCENDING if descending else Direction.ASCENDING
        else:
            direction = _coerce_enum(Direction, self.direction, "direction")
        boundary = _coerce_enum(Boundary, self.boundary, "boundary")

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "increment", abs(increment))
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "boundary", boundary)
        object.__setattr__(self, "value_type", value_type)

    @classmethod
    def coerce(cls, obj) -> "RangeConfig":
        """
        Build a RangeConfig from a config, a mapping of options, or a tuple.

        Tuples are positional: ``(start, end[, increment[, direction[, boundary]]])``.
        """
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, Mapping):
            unknown = set(obj) - set(_OPTION_NAMES)
            if unknown:
                raise ConfigError(
                    f"unknown range options: {', '.join(sorted(map(str, unknown)))}"
                )
            return cls(**obj)
        if isinstance(obj, (tuple, list)):
            if not 1 <= len(obj) <= len(_OPTION_NAMES):
                raise ConfigError(
                    f"range tuple must have 1 to 5 entries, got {len(obj)}"
                )
            return cls(*obj)
        raise ConfigError(f"cannot build a range from {obj!r}")

    @property
    def ascending(self) -> bool:
        return self.direction is Direction.ASCENDING

    @property
    def inclusive(self) -> bool:
        return self.boundary is Boundary.INCLUSIVE

    @property
    def infinite(self) -> bool:
        return self.end is None

    def value_at(self, tick: int):
        """
        Return the value produced on pull number ``tick`` (0-based).

        Values are computed as ``start +/- tick * increment`` rather than by
        repeated addition, so rounding does not accumulate across ticks.
        """
        start, increment = self.start, self.increment
        if isinstance(start, np.generic):
            # numpy integers would wrap on tick * increment
            start, increment = start.item(), increment.item()
        offset = tick * increment
        value = start + offset if self.ascending else start - offset
        if self.value_type is object:
            return value
        return self.value_type(value)

    def is_past(self, value) -> bool:
        """Done predicate: True when ``value`` lies beyond the configured end."""
        if self.end is None:
            return False
        if self.ascending:
            return value > self.end if self.inclusive else value >= self.end
        return value < self.end if self.inclusive else value <= self.end

    @property
    def is_empty(self) -> bool:
        return self.is_past(self.start)

    @property
    def count(self) -> Optional[int]:
        """Number of values a stepper over this config produces."""
        if self.end is None:
            return None
        if self.is_empty:
            return 0
        if all(is_integral(v) for v in (self.start, self.end, self.increment)):
            start, end, step = int(self.start), int(self.end), int(self.increment)
            span = end - start if self.ascending else start - end
            if self.inclusive:
                return span // step + 1
            return -(-span // step)

        span = self.end - self.start if self.ascending else self.start - self.end
        ratio = span / self.increment
        whole = int(ratio)
        if self.inclusive:
            count = whole + 1
        else:
            count = whole if whole == ratio else whole + 1
        # settle on the tick where value_at() first fails the done predicate
        while count > 1 and self.is_past(self.value_at(count - 1)):
            count -= 1
        while not self.is_past(self.value_at(count)):
            count += 1
        return count
