################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Running scalar statistics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class RunningStdDev:
    """
    Online mean and sample variance of a scalar stream (Welford's method).

    Not synchronized; guard shared instances externally.
    """

    _count: int = 0
    _old_mean: np.float32 = np.float32(0.0)
    _new_mean: np.float32 = np.float32(0.0)
    _old_s: np.float32 = np.float32(0.0)
    _new_s: np.float32 = np.float32(0.0)

    def clear(self) -> None:
        """Forget all samples."""
        self._count = 0

    def push(self, x: float) -> None:
        """Add a sample."""
        x_f: np.float32 = np.float32(x)
        self._count += 1
        if self._count == 1:
            self._old_mean = x_f
            self._new_mean = x_f
            self._old_s = np.float32(0.0)
        else:
            n: np.float32 = np.float32(self._count)
            self._new_mean = self._old_mean + (x_f - self._old_mean) / n
            self._new_s = self._old_s + (x_f - self._old_mean) * (x_f - self._new_mean)
            self._old_mean = self._new_mean
            self._old_s = self._new_s

    def count(self) -> int:
        """Return the number of samples pushed since the last clear."""
        return self._count

    def mean(self) -> float:
        """Return the running mean, or 0.0 before the first sample."""
        if self._count == 0:
            return 0.0
        return float(self._new_mean)

    def variance(self) -> float:
        """Return the Bessel-corrected variance, or 0.0 with fewer than 2 samples."""
        if self._count > 1:
            return float(self._new_s / np.float32(self._count - 1))
        return 0.0

    def standard_deviation(self) -> float:
        """Return the square root of variance()."""
        return float(np.sqrt(np.float32(self.variance())))
