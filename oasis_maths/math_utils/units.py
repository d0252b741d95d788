################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Single-precision constants and C integer semantics."""

from __future__ import annotations

import math

import numpy as np


class FloatConstants:
    """Single-precision constants shared by the approximations."""

    PI: np.float32 = np.float32(math.pi)
    HALF_PI: np.float32 = np.float32(0.5) * PI
    TWO_PI: np.float32 = np.float32(2.0) * PI
    # Radians per degree, computed in single precision
    RAD: np.float32 = PI / np.float32(180.0)


class IntWidth:
    """Bit widths of the fixed-size integers the kernel emulates."""

    INT16: int = 16
    INT32: int = 32


def wrap_int(value: int, bits: int) -> int:
    """Wrap an integer into the two's complement range of the given width."""
    half: int = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def to_int16(value: int) -> int:
    """Truncate an integer to int16."""
    return wrap_int(value, IntWidth.INT16)


def to_int32(value: int) -> int:
    """Truncate an integer to int32."""
    return wrap_int(value, IntWidth.INT32)


def trunc_div(num: int, den: int) -> int:
    """
    Integer division rounding toward zero, as in C.

    Raises ZeroDivisionError when den is zero.
    """
    quotient: int = abs(num) // abs(den)
    if (num < 0) != (den < 0):
        return -quotient
    return quotient


def trunc_mod(num: int, den: int) -> int:
    """Remainder whose sign follows the dividend, as in C."""
    return num - den * trunc_div(num, den)


def degrees_to_radians(degrees: int) -> float:
    """Convert int16 degrees to radians in single precision."""
    return float(np.float32(to_int16(int(degrees))) * FloatConstants.RAD)
