# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Composable iteration drivers.

Drivers are small stateful producers pulled one tick at a time by an owning
loop: numeric ranges, modulo views, cycles, nested (mixed-radix) counters,
neighborhood enumeration, array traversal with multi-indices, chained
sequences and periodic triggers. Running aggregates consume one value per
tick.
"""

from ._config import Boundary, Direction, RangeConfig
from ._env import configure_logging
from ._errors import ConfigError, DriverError, OverPullError
from .aggregates import (
    BooleanReduce,
    Elapsed,
    KeyedAccumulate,
    RunningAverage,
    TimingState,
    boolean_reduce,
    keyed_accumulate,
    running_average,
    timing,
)
from .iterators import (
    DONE,
    ArrayElement,
    ArrayPosition,
    ChainedSequenceIterator,
    ConstantDriver,
    CyclicStepper,
    DriverBase,
    DriverProtocol,
    ModuloView,
    MultiIndexArrayTraversal,
    NestedCounter,
    PeriodicTrigger,
    PermutationDriver,
    Phase,
    RadiusEnumerator,
    RangeStepper,
    TransformDriver,
    ZipDriver,
    chain,
    constant,
    cycle,
    every_nth,
    modulo,
    neighborhood,
    nest,
    permutation,
    range_stepper,
    transform,
    traverse_array,
    zip_drivers,
)
from .place import Cell, Place

__version__ = "0.1.0"

__all__ = [
    "ArrayElement",
    "ArrayPosition",
    "BooleanReduce",
    "Boundary",
    "Cell",
    "ChainedSequenceIterator",
    "ConfigError",
    "ConstantDriver",
    "CyclicStepper",
    "DONE",
    "Direction",
    "DriverBase",
    "DriverError",
    "DriverProtocol",
    "Elapsed",
    "KeyedAccumulate",
    "ModuloView",
    "MultiIndexArrayTraversal",
    "NestedCounter",
    "OverPullError",
    "PeriodicTrigger",
    "PermutationDriver",
    "Phase",
    "Place",
    "RadiusEnumerator",
    "RangeConfig",
    "RangeStepper",
    "RunningAverage",
    "TimingState",
    "TransformDriver",
    "ZipDriver",
    "boolean_reduce",
    "chain",
    "configure_logging",
    "constant",
    "cycle",
    "every_nth",
    "keyed_accumulate",
    "modulo",
    "neighborhood",
    "nest",
    "permutation",
    "range_stepper",
    "running_average",
    "timing",
    "transform",
    "traverse_array",
    "zip_drivers",
]
