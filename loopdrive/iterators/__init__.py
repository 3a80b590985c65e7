# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Pull drivers.

Every driver is a small state machine advanced one tick at a time by
``pull()``; composite drivers own their children and pull them in a fixed
order.
"""

from ._array import ArrayElement, ArrayPosition, MultiIndexArrayTraversal
from ._base import DONE, DriverBase
from ._chain import ChainedSequenceIterator
from ._constant import ConstantDriver
from ._cycle import CyclicStepper
from ._factories import (
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
from ._modulo import ModuloView
from ._nested import NestedCounter
from ._neighborhood import RadiusEnumerator
from ._periodic import PeriodicTrigger, Phase
from ._permutation import PermutationDriver
from ._protocol import DriverProtocol
from ._range import RangeStepper
from ._transform import TransformDriver
from ._zip import ZipDriver

__all__ = [
    "ArrayElement",
    "ArrayPosition",
    "ChainedSequenceIterator",
    "ConstantDriver",
    "CyclicStepper",
    "DONE",
    "DriverBase",
    "DriverProtocol",
    "ModuloView",
    "MultiIndexArrayTraversal",
    "NestedCounter",
    "PeriodicTrigger",
    "PermutationDriver",
    "Phase",
    "RadiusEnumerator",
    "RangeStepper",
    "TransformDriver",
    "ZipDriver",
    "chain",
    "constant",
    "cycle",
    "every_nth",
    "modulo",
    "neighborhood",
    "nest",
    "permutation",
    "range_stepper",
    "transform",
    "traverse_array",
    "zip_drivers",
]
