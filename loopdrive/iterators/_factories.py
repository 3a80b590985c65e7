# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Factory functions for drivers.

These provide the user-facing combinator API, accepting plain numbers,
tuples and mappings where a RangeConfig is expected and converting
appropriately.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence

from .._config import Boundary, Direction, RangeConfig
from ._array import MultiIndexArrayTraversal
from ._chain import ChainedSequenceIterator
from ._constant import ConstantDriver
from ._cycle import CyclicStepper
from ._modulo import ModuloView
from ._nested import NestedCounter
from ._neighborhood import RadiusEnumerator
from ._periodic import PeriodicTrigger
from ._permutation import PermutationDriver
from ._protocol import DriverProtocol
from ._range import RangeStepper
from ._transform import TransformDriver
from ._zip import ZipDriver


def _ensure_driver(obj) -> DriverProtocol:
    """Pass drivers through; build a RangeStepper from anything else."""
    if isinstance(obj, DriverProtocol):
        return obj
    return RangeStepper(RangeConfig.coerce(obj))


def range_stepper(
    start: Any,
    end: Any = None,
    increment: Any = 1,
    *,
    direction: Optional[Direction | str] = None,
    boundary: Boundary | str = Boundary.EXCLUSIVE,
) -> RangeStepper:
    """
    Create a stepper over a single numeric range.

    Args:
        start: First value, or a complete RangeConfig / mapping / tuple
        end: Bound checked under ``boundary``; ``None`` for an infinite range
        increment: Non-zero step; only its magnitude is used
        direction: Inferred from ``start`` and ``end`` when omitted
        boundary: ``"exclusive"`` (default) or ``"inclusive"``

    Returns:
        RangeStepper

    Example:
        list(range_stepper(0, 10, 3))                        # [0, 3, 6, 9]
        list(range_stepper(3, 0, boundary="inclusive"))      # [3, 2, 1, 0]
    """
    if isinstance(start, (RangeConfig, dict, tuple, list)):
        return RangeStepper(RangeConfig.coerce(start))
    return RangeStepper(RangeConfig(start, end, increment, direction, boundary))


def modulo(stepper, divisor) -> ModuloView:
    """Create a view reducing each value of ``stepper`` modulo ``divisor``."""
    return ModuloView(_ensure_driver(stepper), divisor)


def cycle(stepper, on_wrap: Optional[Callable[[], Any]] = None) -> CyclicStepper:
    """
    Create an endlessly repeating driver.

    Args:
        stepper: A driver or range description producing at least one value
        on_wrap: Zero-argument callback run on every wraparound

    Example:
        wraps = []
        c = cycle(range_stepper(0, 4), on_wrap=lambda: wraps.append(1))
        c.take(10)   # [0, 1, 2, 3, 0, 1, 2, 3, 0, 1]; len(wraps) == 2
    """
    return CyclicStepper(_ensure_driver(stepper), on_wrap)


def nest(configs: Sequence[Any]) -> NestedCounter:
    """
    Create a mixed-radix counter, outermost level first.

    Example:
        list(nest([(0, 1, 1, "asc", "incl"), (0, 2)]))
        # [(0, 0), (0, 1), (1, 0), (1, 1)]
    """
    return NestedCounter(configs)


def neighborhood(
    origin: Sequence[int],
    radius: int,
    skip_origin: bool = False,
    *,
    offsets: bool = False,
) -> RadiusEnumerator:
    """Enumerate every integer point within ``radius`` of ``origin`` on all axes."""
    return RadiusEnumerator(origin, radius, skip_origin, offsets)


def traverse_array(source, with_index: bool = True) -> MultiIndexArrayTraversal:
    """Walk an array shape (or numpy array) in row-major order."""
    return MultiIndexArrayTraversal(source, with_index)


def chain(sources: Iterable[Any]) -> ChainedSequenceIterator:
    """Iterate ``sources`` end to end, skipping empty ones."""
    return ChainedSequenceIterator(sources)


def every_nth(n: int) -> PeriodicTrigger:
    """Create a trigger that fires on every ``n``-th pull."""
    return PeriodicTrigger(n)


def transform(driver, op: Callable[[Any], Any]) -> TransformDriver:
    """Apply ``op`` to every value pulled from ``driver``."""
    return TransformDriver(_ensure_driver(driver), op)


def zip_drivers(*drivers) -> ZipDriver:
    """Pull several drivers in lockstep, yielding tuples."""
    if len(drivers) == 1 and isinstance(drivers[0], (list, tuple)):
        drivers = drivers[0]
    return ZipDriver([_ensure_driver(d) for d in drivers])


def constant(value: Any) -> ConstantDriver:
    """Produce ``value`` forever."""
    return ConstantDriver(value)


def permutation(values, indices) -> PermutationDriver:
    """Yield ``values[i]`` for each ``i`` pulled from ``indices``."""
    return PermutationDriver(values, indices)
