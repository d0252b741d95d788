################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Single-precision quaternion algebra using the wxyz convention."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuaternionProducts:
    """Pairwise products of quaternion components."""

    ww: float
    wx: float
    wy: float
    wz: float
    xx: float
    xy: float
    xz: float
    yy: float
    yz: float
    zz: float


@dataclass(frozen=True)
class Quaternion:
    """
    Quaternion stored in wxyz order as float32.

    A vector quaternion has w == 0. Rotation quaternions are expected to have
    unit modulus, which is not enforced.
    """

    wxyz: NDArray[np.float32]

    def __post_init__(self) -> None:
        """Validate the shape and copy to float32 storage."""
        wxyz: NDArray[np.float32] = np.array(self.wxyz, dtype=np.float32)
        if wxyz.shape != (4,):
            raise ValueError("wxyz must be shape (4,)")
        wxyz.setflags(write=False)
        object.__setattr__(self, "wxyz", wxyz)

    @staticmethod
    def identity() -> "Quaternion":
        """Return the identity rotation."""
        return Quaternion.from_wxyz(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def zero_vector() -> "Quaternion":
        """Return the zero vector quaternion."""
        return Quaternion.from_wxyz(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> "Quaternion":
        """Create a quaternion from components."""
        return Quaternion(np.array([w, x, y, z], dtype=np.float32))

    @staticmethod
    def from_vector(x: float, y: float, z: float) -> "Quaternion":
        """Create a vector quaternion."""
        return Quaternion.from_wxyz(0.0, x, y, z)

    @property
    def w(self) -> float:
        return float(self.wxyz[0])

    @property
    def x(self) -> float:
        return float(self.wxyz[1])

    @property
    def y(self) -> float:
        return float(self.wxyz[2])

    @property
    def z(self) -> float:
        return float(self.wxyz[3])

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Multiply two quaternions using the Hamilton product."""
        lw, lx, ly, lz = self.wxyz
        rw, rx, ry, rz = other.wxyz
        w: np.float32 = lw * rw - lx * rx - ly * ry - lz * rz
        x: np.float32 = lw * rx + lx * rw + ly * rz - lz * ry
        y: np.float32 = lw * ry - lx * rz + ly * rw + lz * rx
        z: np.float32 = lw * rz + lx * ry - ly * rx + lz * rw
        return Quaternion(np.array([w, x, y, z], dtype=np.float32))

    def __add__(self, other: "Quaternion") -> "Quaternion":
        """Add two quaternions component-wise."""
        return Quaternion(self.wxyz + other.wxyz)

    def conjugate(self) -> "Quaternion":
        """Return the quaternion with its vector part negated."""
        w, x, y, z = self.wxyz
        return Quaternion(np.array([w, -x, -y, -z], dtype=np.float32))

    def as_vector(self) -> "Quaternion":
        """Return a copy with w forced to zero."""
        _, x, y, z = self.wxyz
        return Quaternion(np.array([0.0, x, y, z], dtype=np.float32))

    def dot(self, other: "Quaternion") -> float:
        """Return the four-component dot product."""
        lw, lx, ly, lz = self.wxyz
        rw, rx, ry, rz = other.wxyz
        return float(lw * rw + lx * rx + ly * ry + lz * rz)

    def norm(self) -> float:
        """Return the squared modulus."""
        w, x, y, z = self.wxyz
        return float(w * w + x * x + y * y + z * z)

    def modulus(self) -> float:
        """Return the modulus."""
        return float(np.sqrt(np.float32(self.norm())))

    def can_normalize(self) -> bool:
        """Return True when the modulus is non-zero."""
        return self.modulus() != 0.0

    def normalized(self) -> "Quaternion":
        """
        Return the quaternion scaled to unit modulus.

        A zero quaternion is returned unchanged.
        """

        modulus: np.float32 = np.float32(self.modulus())
        if modulus == 0:
            _LOG.debug("Skipping normalization of a zero quaternion")
            return self
        return Quaternion(self.wxyz / modulus)

    def compute_products(self) -> QuaternionProducts:
        """Return the pairwise component products."""
        w, x, y, z = self.wxyz
        return QuaternionProducts(
            ww=float(w * w),
            wx=float(w * x),
            wy=float(w * y),
            wz=float(w * z),
            xx=float(x * x),
            xy=float(x * y),
            xz=float(x * z),
            yy=float(y * y),
            yz=float(y * z),
            zz=float(z * z),
        )

    def to_wxyz(self) -> NDArray[np.float32]:
        """Return a writable copy of the components."""
        return np.array(self.wxyz, dtype=np.float32)

    def almost_equal(self, other: "Quaternion", atol: float = 1e-6) -> bool:
        """Check approximate component-wise equality."""
        return bool(np.allclose(self.wxyz, other.wxyz, atol=atol))


def quaternion_transform_vector_body_to_earth(
    v: Quaternion, q_ref: Quaternion
) -> Quaternion:
    """
    Rotate a body-frame vector into the earth frame: q_ref * v * conj(q_ref).

    v is treated as a pure vector quaternion, its w is ignored.
    """

    return (q_ref * v.as_vector()) * q_ref.conjugate()


def quaternion_transform_vector_earth_to_body(
    v: Quaternion, q_ref: Quaternion
) -> Quaternion:
    """
    Rotate an earth-frame vector into the body frame: conj(q_ref) * v * q_ref.

    v is treated as a pure vector quaternion, its w is ignored.
    """

    return (q_ref.conjugate() * v.as_vector()) * q_ref


def quaternion_compute_products(q: Quaternion) -> QuaternionProducts:
    """Return the ten pairwise products of the components of q."""
    return q.compute_products()
