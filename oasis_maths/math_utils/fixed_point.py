################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Q12 fixed-point helpers

A Q12 value is an int with 12 fractional bits, so 1.0 is 4096. Inputs are
int16 and results follow C integer semantics: division rounds toward zero,
right shifts are arithmetic, and int16 results wrap. Callers size their
inputs so the pre-shift products do not overflow, and must not pass a zero
denominator.
"""

from __future__ import annotations

from .units import to_int16
from .units import to_int32
from .units import trunc_div


# Number of fractional bits
Q12_SHIFT: int = 12

# Q12 representation of 1.0
Q12_ONE: int = 1 << Q12_SHIFT


def q_construct(num: int, den: int) -> int:
    """Return num / den as a Q12 value."""
    return to_int32(trunc_div(num << Q12_SHIFT, den))


def q_multiply(q: int, value: int) -> int:
    """Scale an int16 value by a Q12 factor."""
    return to_int16((value * q) >> Q12_SHIFT)


def q_percent(q: int) -> int:
    """Return a Q12 value as a whole percentage."""
    return to_int16((100 * q) >> Q12_SHIFT)
