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
Fast single-precision approximations of sin, cos, atan2 and acos

Conventions:
    * Inputs are converted to float32 and every intermediate stays float32
    * Angles are in radians
    * The sine polynomial is selected once, when a TrigApprox is built

Error bounds (max absolute):
    * sin, ACCURATE: ~2.6e-6
    * sin, FAST: ~2.3e-6, cos FAST: ~2.9e-6
    * atan2: ~7.15e-7 rad
    * acos: ~6.76e-5 rad on [-1, 1]
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .units import FloatConstants


_LOG: logging.Logger = logging.getLogger(__name__)


################################################################################
# Coefficients
################################################################################


# Units: radians. Meaning: truncated inputs beyond this magnitude are rejected
# as bad input (about 5 turns)
SIN_INPUT_LIMIT: int = 32

# atan(t) ~= -((((c5*t - c4)*t - c3)*t - c2)*t - c1) / ((c7*t + c6)*t + 1)
ATAN_COEF_1: np.float32 = np.float32(3.14551665884836e-07)
ATAN_COEF_2: np.float32 = np.float32(0.99997356613987)
ATAN_COEF_3: np.float32 = np.float32(0.14744007058297684)
ATAN_COEF_4: np.float32 = np.float32(0.3099814292351353)
ATAN_COEF_5: np.float32 = np.float32(0.05030176425872175)
ATAN_COEF_6: np.float32 = np.float32(0.1471039133652469)
ATAN_COEF_7: np.float32 = np.float32(0.6444640676891548)

# acos(|x|) ~= sqrt(1 - |x|) * (a0 + |x|*(a1 + |x|*(a2 + a3*|x|)))
ACOS_COEF_0: np.float32 = np.float32(1.5707288)
ACOS_COEF_1: np.float32 = np.float32(-0.2121144)
ACOS_COEF_2: np.float32 = np.float32(0.0742610)
ACOS_COEF_3: np.float32 = np.float32(-0.0187293)

_ZERO: np.float32 = np.float32(0.0)
_ONE: np.float32 = np.float32(1.0)


class ApproxMode(Enum):
    """Accuracy/speed trade for the sine polynomial."""

    FAST = "fast"
    ACCURATE = "accurate"


@dataclass(frozen=True)
class SinCoefficients:
    """Odd-power coefficients of the sine polynomial on [-pi/2, pi/2]."""

    c3: np.float32
    c5: np.float32
    c7: np.float32
    c9: np.float32

    @staticmethod
    def for_mode(mode: ApproxMode) -> "SinCoefficients":
        """Return the coefficient set for an approximation mode."""
        if mode is ApproxMode.FAST:
            # 7th order, the x^9 term is dropped
            return SinCoefficients(
                c3=np.float32(-1.666568107e-1),
                c5=np.float32(8.312366210e-3),
                c7=np.float32(-1.849218155e-4),
                c9=np.float32(0.0),
            )
        if mode is ApproxMode.ACCURATE:
            return SinCoefficients(
                c3=np.float32(-1.666665710e-1),
                c5=np.float32(8.333017292e-3),
                c7=np.float32(-1.980661520e-4),
                c9=np.float32(2.600054768e-6),
            )
        raise ValueError(f"Unknown approximation mode: {mode}")


DEFAULT_APPROX_MODE: ApproxMode = ApproxMode.ACCURATE


################################################################################
# Approximations
################################################################################


class TrigApprox:
    """
    Trigonometric approximations bound to one sine coefficient set.

    Instances are immutable and safe to share between threads.
    """

    def __init__(self, mode: ApproxMode = DEFAULT_APPROX_MODE) -> None:
        """
        Select the sine polynomial.

        Args:
            mode: FAST for fewer polynomial terms, ACCURATE for the 9th order fit
        """

        self._mode: ApproxMode = mode
        self._coef: SinCoefficients = SinCoefficients.for_mode(mode)

    @property
    def mode(self) -> ApproxMode:
        """Get the approximation mode."""
        return self._mode

    def sin(self, x: float) -> float:
        """
        Approximate sin(x).

        Returns 0.0 when x truncated toward zero lies outside [-32, 32], or
        when x is not finite.
        """

        return float(self._sin_f32(np.float32(x)))

    def cos(self, x: float) -> float:
        """Approximate cos(x) as sin(x + pi/2)."""
        return float(self._sin_f32(np.float32(x) + FloatConstants.HALF_PI))

    def atan2(self, y: float, x: float) -> float:
        """
        Approximate atan2(y, x).

        When both inputs are zero no division happens and the result is the
        polynomial's value at zero, ATAN_COEF_1 (about 3.1e-7).
        """

        x_f: np.float32 = np.float32(x)
        y_f: np.float32 = np.float32(y)
        abs_x: np.float32 = np.abs(x_f)
        abs_y: np.float32 = np.abs(y_f)

        res: np.float32 = abs_x if abs_x > abs_y else abs_y
        if res != _ZERO:
            res = (abs_x if abs_x < abs_y else abs_y) / res
        else:
            res = _ZERO

        numerator: np.float32 = (
            ((ATAN_COEF_5 * res - ATAN_COEF_4) * res - ATAN_COEF_3) * res - ATAN_COEF_2
        ) * res - ATAN_COEF_1
        res = -numerator / ((ATAN_COEF_7 * res + ATAN_COEF_6) * res + _ONE)

        # Quadrant correction
        if abs_y > abs_x:
            res = FloatConstants.HALF_PI - res
        if x_f < _ZERO:
            res = FloatConstants.PI - res
        if y_f < _ZERO:
            res = -res

        return float(res)

    def acos(self, x: float) -> float:
        """
        Approximate acos(x) for x in [-1, 1].

        Inputs with |x| > 1 produce NaN.
        """

        x_f: np.float32 = np.float32(x)
        xa: np.float32 = np.abs(x_f)
        with np.errstate(invalid="ignore"):
            root: np.float32 = np.sqrt(_ONE - xa)
        result: np.float32 = root * (
            ACOS_COEF_0 + xa * (ACOS_COEF_1 + xa * (ACOS_COEF_2 + (ACOS_COEF_3 * xa)))
        )
        if x_f < _ZERO:
            return float(FloatConstants.PI - result)
        return float(result)

    def _sin_f32(self, x: np.float32) -> np.float32:
        if not math.isfinite(x):
            _LOG.debug("Rejecting non-finite sine input %s", x)
            return _ZERO

        x_int: int = int(x)
        if x_int < -SIN_INPUT_LIMIT or x_int > SIN_INPUT_LIMIT:
            _LOG.debug("Rejecting out-of-range sine input %s", x)
            return _ZERO

        # Wrap to [-pi, pi]
        while x > FloatConstants.PI:
            x = x - FloatConstants.TWO_PI
        while x < -FloatConstants.PI:
            x = x + FloatConstants.TWO_PI

        # Reflect to [-pi/2, pi/2]
        if x > FloatConstants.HALF_PI:
            x = FloatConstants.HALF_PI - (x - FloatConstants.HALF_PI)
        elif x < -FloatConstants.HALF_PI:
            x = -FloatConstants.HALF_PI - (FloatConstants.HALF_PI + x)

        coef: SinCoefficients = self._coef
        x2: np.float32 = x * x
        return x + x * x2 * (coef.c3 + x2 * (coef.c5 + x2 * (coef.c7 + x2 * coef.c9)))


_DEFAULT_TRIG: TrigApprox = TrigApprox(DEFAULT_APPROX_MODE)


def default_trig() -> TrigApprox:
    """Return the shared approximations for the default mode."""
    return _DEFAULT_TRIG


def sin_approx(x: float) -> float:
    """Approximate sin(x) with the default mode."""
    return _DEFAULT_TRIG.sin(x)


def cos_approx(x: float) -> float:
    """Approximate cos(x) with the default mode."""
    return _DEFAULT_TRIG.cos(x)


def atan2_approx(y: float, x: float) -> float:
    """Approximate atan2(y, x)."""
    return _DEFAULT_TRIG.atan2(y, x)


def acos_approx(x: float) -> float:
    """Approximate acos(x) for x in [-1, 1]."""
    return _DEFAULT_TRIG.acos(x)
