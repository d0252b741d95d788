################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Scalar helpers used by the control loop."""

from __future__ import annotations

from typing import MutableSequence
from typing import Sequence

import numpy as np

from .units import to_int32
from .units import trunc_div
from .units import trunc_mod


def apply_deadband(value: int, deadband: int) -> int:
    """Zero values inside the deadband and shift the rest toward zero."""
    if abs(value) < deadband:
        return 0
    return value - deadband if value >= 0 else value + deadband


def fapply_deadband(value: float, deadband: float) -> float:
    """Single-precision version of apply_deadband()."""
    value_f: np.float32 = np.float32(value)
    deadband_f: np.float32 = np.float32(deadband)
    if np.abs(value_f) < deadband_f:
        return 0.0
    if value_f >= 0:
        return float(value_f - deadband_f)
    return float(value_f + deadband_f)


def scale_range(
    x: int, src_from: int, src_to: int, dest_from: int, dest_to: int
) -> int:
    """
    Map x from [src_from, src_to] onto [dest_from, dest_to].

    The product is formed before the division so no precision is lost, and
    the division rounds toward zero. A zero-width source interval raises
    ZeroDivisionError.
    """
    a: int = (dest_to - dest_from) * (x - src_from)
    b: int = src_to - src_from
    return to_int32(trunc_div(a, b) + dest_from)


def scale_rangef(
    x: float, src_from: float, src_to: float, dest_from: float, dest_to: float
) -> float:
    """
    Single-precision version of scale_range().

    A zero-width source interval yields inf or NaN.
    """
    a: np.float32 = (np.float32(dest_to) - np.float32(dest_from)) * (
        np.float32(x) - np.float32(src_from)
    )
    b: np.float32 = np.float32(src_to) - np.float32(src_from)
    with np.errstate(divide="ignore", invalid="ignore"):
        scaled: np.float32 = a / b
    return float(scaled + np.float32(dest_from))


def gcd(num: int, denom: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(n, 0) is n."""
    while denom != 0:
        num, denom = denom, trunc_mod(num, denom)
    return num


def array_sub_int32(
    dest: MutableSequence[int],
    array1: Sequence[int],
    array2: Sequence[int],
    count: int,
) -> MutableSequence[int]:
    """Write array1[i] - array2[i] into dest for the first count entries."""
    for i in range(count):
        dest[i] = to_int32(array1[i] - array2[i])
    return dest
