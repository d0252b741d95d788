################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for the maths kernel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from typing import Sequence

from ..math_utils.median_filter import quick_median_filter3f
from ..math_utils.median_filter import quick_median_filter5f
from ..math_utils.median_filter import quick_median_filter7f
from ..math_utils.median_filter import quick_median_filter9f
from ..math_utils.trig_approx import ApproxMode
from ..math_utils.trig_approx import TrigApprox
from .maths_params import MathsParams
from .maths_params import MathsParamsError


_LOG: logging.Logger = logging.getLogger(__name__)

# Float median filter for each supported window length
_MEDIAN_FILTERS: dict[int, Callable[[Sequence[float]], float]] = {
    3: quick_median_filter3f,
    5: quick_median_filter5f,
    7: quick_median_filter7f,
    9: quick_median_filter9f,
}


class MathsConfigError(Exception):
    """Raised when maths configuration validation fails."""


@dataclass(frozen=True)
class MathsConfig:
    """Convenience wrapper around maths parameters."""

    params: MathsParams

    def __init__(self, params: MathsParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except MathsParamsError as exc:
            raise MathsConfigError(str(exc)) from exc

    def approx_mode(self) -> ApproxMode:
        """Return the configured sine polynomial selection."""
        return self.params.trig.approx_mode

    def median_window(self) -> int:
        """Return the configured median window length."""
        return self.params.median.window

    def trig(self) -> TrigApprox:
        """Build the approximations for the configured mode."""
        mode: ApproxMode = self.approx_mode()
        _LOG.info("Using %s trigonometric approximations", mode.value)
        return TrigApprox(mode)

    def median(self, values: Sequence[float]) -> float:
        """
        Return the median of a window of the configured length.

        Raises ValueError when the window has a different length.
        """

        return _MEDIAN_FILTERS[self.median_window()](values)
