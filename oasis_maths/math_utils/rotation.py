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
Euler-angle rotation helpers

Conventions:
    * Angles are (roll, pitch, yaw) in radians and rotate earth to body
    * The matrix is Rz(yaw) * Ry(pitch) * Rx(roll) and is indexed
      matrix[row, axis]
    * Vectors are rotated as row vectors: v' = v * M
    * Sines and cosines come from the fast approximations
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .trig_approx import TrigApprox
from .trig_approx import default_trig


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FpVector:
    """Free 3-vector with single-precision components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        """Round components to single precision."""
        object.__setattr__(self, "x", float(np.float32(self.x)))
        object.__setattr__(self, "y", float(np.float32(self.y)))
        object.__setattr__(self, "z", float(np.float32(self.z)))

    @staticmethod
    def from_array(v: NDArray[np.float32]) -> "FpVector":
        """Create a vector from a shape (3,) array."""
        vec: NDArray[np.float32] = np.asarray(v, dtype=np.float32)
        if vec.shape != (3,):
            raise ValueError("v must be shape (3,)")
        return FpVector(float(vec[0]), float(vec[1]), float(vec[2]))

    def as_array(self) -> NDArray[np.float32]:
        """Return the components as a float32 array."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def length(self) -> float:
        """Return the Euclidean norm."""
        x: np.float32 = np.float32(self.x)
        y: np.float32 = np.float32(self.y)
        z: np.float32 = np.float32(self.z)
        return float(np.sqrt(x * x + y * y + z * z))

    def can_normalize(self) -> bool:
        """Return True when normalize_v() would change the vector."""
        return self.length() != 0.0


@dataclass(frozen=True)
class FpAngles:
    """Euler angles in radians."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0


def normalize_v(src: FpVector, dest: Optional[FpVector] = None) -> FpVector:
    """
    Scale a vector to unit length.

    When src has zero length, dest is returned unmodified (src when dest is
    not given).
    """

    length: np.float32 = np.float32(src.length())
    if length == 0:
        _LOG.debug("Skipping normalization of a zero-length vector")
        return dest if dest is not None else src

    return FpVector(
        float(np.float32(src.x) / length),
        float(np.float32(src.y) / length),
        float(np.float32(src.z) / length),
    )


def build_rotation_matrix(
    angles: FpAngles, trig: Optional[TrigApprox] = None
) -> NDArray[np.float32]:
    """Return the earth-to-body rotation matrix for the Euler angles."""
    approx: TrigApprox = trig if trig is not None else default_trig()

    cosx: np.float32 = np.float32(approx.cos(angles.roll))
    sinx: np.float32 = np.float32(approx.sin(angles.roll))
    cosy: np.float32 = np.float32(approx.cos(angles.pitch))
    siny: np.float32 = np.float32(approx.sin(angles.pitch))
    cosz: np.float32 = np.float32(approx.cos(angles.yaw))
    sinz: np.float32 = np.float32(approx.sin(angles.yaw))

    coszcosx: np.float32 = cosz * cosx
    sinzcosx: np.float32 = sinz * cosx
    coszsinx: np.float32 = sinx * cosz
    sinzsinx: np.float32 = sinx * sinz

    matrix: NDArray[np.float32] = np.empty((3, 3), dtype=np.float32)
    matrix[0, 0] = cosz * cosy
    matrix[0, 1] = -cosy * sinz
    matrix[0, 2] = siny
    matrix[1, 0] = sinzcosx + (coszsinx * siny)
    matrix[1, 1] = coszcosx - (sinzsinx * siny)
    matrix[1, 2] = -sinx * cosy
    matrix[2, 0] = (sinzsinx) - (coszcosx * siny)
    matrix[2, 1] = (coszsinx) + (sinzcosx * siny)
    matrix[2, 2] = cosy * cosx
    return matrix


def rotate_v(
    v: FpVector, angles: FpAngles, trig: Optional[TrigApprox] = None
) -> FpVector:
    """Rotate a vector by Euler angles and return the result."""
    matrix: NDArray[np.float32] = build_rotation_matrix(angles, trig)

    x: np.float32 = np.float32(v.x)
    y: np.float32 = np.float32(v.y)
    z: np.float32 = np.float32(v.z)

    return FpVector(
        float(x * matrix[0, 0] + y * matrix[1, 0] + z * matrix[2, 0]),
        float(x * matrix[0, 1] + y * matrix[1, 1] + z * matrix[2, 1]),
        float(x * matrix[0, 2] + y * matrix[1, 2] + z * matrix[2, 2]),
    )
