# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Numeric promotion for range operands.

A range's start, end and increment are promoted together before the first
value is produced, so every value a stepper yields has the same type.
Plain Python operands follow Python's own int -> float contagion; as soon
as one operand is a numpy scalar the numpy promotion rules apply and the
produced values are numpy scalars of the promoted dtype.

This is an internal module.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from ._errors import ConfigError


def is_number(value: Any) -> bool:
    """Return True for real (non-complex) Python or numpy numbers."""
    return isinstance(value, numbers.Real)


def is_integral(value: Any) -> bool:
    """Return True for integral Python or numpy numbers, excluding bool."""
    return isinstance(value, numbers.Integral) and not isinstance(
        value, (bool, np.bool_)
    )


def result_type(*values: Any) -> type:
    """
    Return the scalar type that ``values`` promote to.

    ``None`` entries (open range ends) are ignored.

    Example:
        result_type(0, 3, 1)             # int
        result_type(0, 0.8, 0.4)         # float
        result_type(np.int32(0), 10, 2)  # numpy.int32
    """
    present = [v for v in values if v is not None]
    for value in present:
        if not is_number(value):
            raise ConfigError(f"range operands must be real numbers, got {value!r}")

    if any(isinstance(v, np.generic) for v in present):
        return np.result_type(*present).type

    if any(isinstance(v, float) for v in present):
        return float
    if all(isinstance(v, numbers.Integral) for v in present):
        return int
    # Other numbers.Real implementations (Fraction, Decimal-likes) keep
    # ordinary arithmetic semantics
    return object


def promote(*values: Any) -> tuple[tuple[Any, ...], type]:
    """
    Promote ``values`` to a common scalar type.

    Returns:
        Tuple of (promoted_values, value_type); ``None`` entries stay ``None``
    """
    value_type = result_type(*values)
    if value_type is object:
        return tuple(values), value_type
    return (
        tuple(None if v is None else value_type(v) for v in values),
        value_type,
    )
