################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the fast trigonometric approximations."""

from __future__ import annotations

import math

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_maths.math_utils.trig_approx import ApproxMode
from oasis_maths.math_utils.trig_approx import TrigApprox
from oasis_maths.math_utils.trig_approx import acos_approx
from oasis_maths.math_utils.trig_approx import atan2_approx
from oasis_maths.math_utils.trig_approx import cos_approx
from oasis_maths.math_utils.trig_approx import default_trig
from oasis_maths.math_utils.trig_approx import sin_approx


def _f32(x: float) -> float:
    return float(np.float32(x))


ANGLES: NDArray[np.float32] = np.linspace(-math.pi, math.pi, 2001, dtype=np.float32)


def test_sin_accurate_error_bound() -> None:
    """Checks sin_approx stays within 3e-6 on [-pi, pi]."""
    for angle in ANGLES:
        x: float = float(angle)
        assert abs(sin_approx(x) - math.sin(x)) <= 3e-6


def test_cos_accurate_error_bound() -> None:
    """Checks cos_approx stays within 3e-6 on [-pi, pi]."""
    for angle in ANGLES:
        x: float = float(angle)
        assert abs(cos_approx(x) - math.cos(x)) <= 3e-6


def test_fast_mode_error_bound() -> None:
    """Checks the fast polynomial stays within its looser bound."""
    trig: TrigApprox = TrigApprox(ApproxMode.FAST)
    for angle in ANGLES:
        x: float = float(angle)
        assert abs(trig.sin(x) - math.sin(x)) <= 2.3e-6
        assert abs(trig.cos(x) - math.cos(x)) <= 2.9e-6


def test_modes_differ() -> None:
    """Checks the two modes select different polynomials."""
    fast: TrigApprox = TrigApprox(ApproxMode.FAST)
    accurate: TrigApprox = TrigApprox(ApproxMode.ACCURATE)
    assert fast.mode is ApproxMode.FAST
    assert accurate.mode is ApproxMode.ACCURATE
    assert fast.sin(1.0) != accurate.sin(1.0)


def test_default_mode_is_accurate() -> None:
    """Checks the module-level functions use the accurate polynomial."""
    assert default_trig().mode is ApproxMode.ACCURATE
    assert sin_approx(0.7) == TrigApprox(ApproxMode.ACCURATE).sin(0.7)


def test_sin_exact_points() -> None:
    """Checks sine at zero and at the quarter turns."""
    assert sin_approx(0.0) == 0.0
    assert sin_approx(math.pi / 2.0) == pytest.approx(1.0, abs=3e-6)
    assert sin_approx(-math.pi / 2.0) == pytest.approx(-1.0, abs=3e-6)


def test_sin_periodic() -> None:
    """Checks sine wraps full turns inside the input guard."""
    for x in (-2.5, -1.0, 0.3, 1.2, 3.0):
        for k in (-4, -1, 1, 4):
            shifted: float = x + 2.0 * math.pi * k
            assert abs(sin_approx(shifted) - sin_approx(x)) <= 1e-5


def test_sin_out_of_range_returns_zero() -> None:
    """Checks inputs beyond the truncated +-32 guard return zero."""
    assert sin_approx(33.0) == 0.0
    assert sin_approx(-33.0) == 0.0
    assert sin_approx(1000.0) == 0.0
    # Truncation toward zero keeps 32.9 inside the guard
    assert sin_approx(32.9) == pytest.approx(math.sin(_f32(32.9)), abs=1e-5)
    assert sin_approx(-32.9) == pytest.approx(math.sin(_f32(-32.9)), abs=1e-5)


def test_sin_non_finite_returns_zero() -> None:
    """Checks NaN and infinities are rejected."""
    assert sin_approx(math.nan) == 0.0
    assert sin_approx(math.inf) == 0.0
    assert sin_approx(-math.inf) == 0.0


def test_atan2_error_bound() -> None:
    """Checks atan2_approx stays within 7.2e-7 rad around the circle."""
    for angle in ANGLES:
        for radius in (0.001, 1.0, 250.0):
            y: float = _f32(radius * math.sin(float(angle)))
            x: float = _f32(radius * math.cos(float(angle)))
            expected: float = math.atan2(y, x)
            result: float = atan2_approx(y, x)
            # +pi and -pi are the same direction
            if abs(expected) > math.pi - 1e-5 and expected * result < 0.0:
                result = -result
            assert abs(result - expected) <= 7.2e-7


def test_atan2_quadrants() -> None:
    """Checks the quadrant corrections."""
    assert atan2_approx(1.0, 1.0) == pytest.approx(math.pi / 4.0, abs=2e-6)
    assert atan2_approx(1.0, -1.0) == pytest.approx(3.0 * math.pi / 4.0, abs=2e-6)
    assert atan2_approx(-1.0, -1.0) == pytest.approx(-3.0 * math.pi / 4.0, abs=2e-6)
    assert atan2_approx(-1.0, 1.0) == pytest.approx(-math.pi / 4.0, abs=2e-6)
    assert atan2_approx(1.0, 0.0) == pytest.approx(math.pi / 2.0, abs=2e-6)
    assert atan2_approx(-1.0, 0.0) == pytest.approx(-math.pi / 2.0, abs=2e-6)


def test_atan2_origin_is_zero() -> None:
    """Checks atan2(0, 0) returns zero without dividing."""
    result: float = atan2_approx(0.0, 0.0)
    assert abs(result) < 1e-6
    assert math.isfinite(result)


def test_acos_error_bound() -> None:
    """Checks acos_approx stays within 6.8e-5 rad on [-1, 1]."""
    for value in np.linspace(-1.0, 1.0, 2001, dtype=np.float32):
        x: float = float(value)
        assert abs(acos_approx(x) - math.acos(x)) <= 6.8e-5


def test_acos_out_of_range_is_nan() -> None:
    """Checks inputs outside [-1, 1] propagate NaN."""
    assert math.isnan(acos_approx(1.5))
    assert math.isnan(acos_approx(-1.5))


def test_acos_of_cos_recovers_angle() -> None:
    """Checks acos_approx(cos_approx(t)) is |t| away from the endpoints."""
    for angle in np.linspace(0.1, math.pi - 0.1, 200):
        for theta in (float(angle), -float(angle)):
            assert acos_approx(cos_approx(theta)) == pytest.approx(
                abs(theta), abs=2e-4
            )


def _bits(value: float) -> int:
    return int(np.float32(value).view(np.uint32))


# (x, accurate sin, fast sin, accurate cos, fast cos) as float32 bit patterns
SIN_COS_BITS: list[tuple[float, int, int, int, int]] = [
    (0.5, 0x3EF57744, 0x3EF5775A, 0x3F60A940, 0x3F60A934),
    (1.0, 0x3F576AA4, 0x3F576A9F, 0x3F0A5140, 0x3F0A514D),
    (2.5, 0x3F19357A, 0x3F193588, 0xBF4D17C0, 0xBF4D17C1),
    (-3.0, 0xBE1081C9, 0xBE1081CB, 0xBF7D7026, 0xBF7D7032),
    (10.0, 0xBF0B44F4, 0xBF0B4502, 0xBF56CD6A, 0xBF56CD65),
]


def test_sin_cos_bit_patterns() -> None:
    """Checks sine and cosine reproduce the reference float32 results."""
    accurate: TrigApprox = TrigApprox(ApproxMode.ACCURATE)
    fast: TrigApprox = TrigApprox(ApproxMode.FAST)
    for x, sin_acc, sin_fast, cos_acc, cos_fast in SIN_COS_BITS:
        assert _bits(accurate.sin(x)) == sin_acc
        assert _bits(fast.sin(x)) == sin_fast
        assert _bits(accurate.cos(x)) == cos_acc
        assert _bits(fast.cos(x)) == cos_fast


def test_atan2_bit_patterns() -> None:
    """Checks atan2 reproduces the reference float32 results."""
    assert _bits(atan2_approx(1.0, 2.0)) == 0x3EED633A
    assert _bits(atan2_approx(-0.5, -3.0)) == 0xC03E7E0E
    assert _bits(atan2_approx(3.0, -1.0)) == 0x3FF23EF9
    assert _bits(atan2_approx(0.0, 0.0)) == 0x34A8DFA7


def test_acos_bit_patterns() -> None:
    """Checks acos reproduces the reference float32 results."""
    assert _bits(acos_approx(0.25)) == 0x3FA8B894
    assert _bits(acos_approx(-0.75)) == 0x401ACE36
    assert _bits(acos_approx(0.0)) == 0x3FC90DA4
