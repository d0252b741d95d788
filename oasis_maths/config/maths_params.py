################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the maths kernel."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from enum import Enum
from typing import Any
from typing import Mapping

from ..math_utils.median_filter import MEDIAN_NETWORKS
from ..math_utils.trig_approx import DEFAULT_APPROX_MODE
from ..math_utils.trig_approx import ApproxMode


# Sine polynomial selection
TRIG_APPROX_MODE: ApproxMode = DEFAULT_APPROX_MODE

# Default median filter window length in samples
MEDIAN_WINDOW: int = 3


class MathsParamsError(Exception):
    """Raised when maths parameters are invalid."""


def _as_approx_mode(value: Any, name: str) -> ApproxMode:
    if isinstance(value, ApproxMode):
        return value
    if isinstance(value, str):
        try:
            return ApproxMode(value.lower())
        except ValueError as exc:
            raise MathsParamsError(
                f"{name} must be one of "
                + ", ".join(mode.value for mode in ApproxMode)
            ) from exc
    raise MathsParamsError(f"{name} must be an ApproxMode or string")


@dataclass(frozen=True)
class TrigParams:
    """Trigonometric approximation parameters."""

    # Sine polynomial selection
    approx_mode: ApproxMode = TRIG_APPROX_MODE


@dataclass(frozen=True)
class MedianParams:
    """Median filter parameters."""

    # Window length in samples
    window: int = MEDIAN_WINDOW


@dataclass(frozen=True)
class MathsParams:
    """Complete configuration tree for the maths kernel."""

    trig: TrigParams
    median: MedianParams

    @classmethod
    def defaults(cls) -> MathsParams:
        """Return the default parameter tree."""
        return cls(trig=TrigParams(), median=MedianParams())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MathsParams:
        """
        Build parameters from a nested mapping.

        Missing namespaces and keys keep their defaults. Approximation modes
        may be given by name, for example {"trig": {"approx_mode": "fast"}}.
        """

        unknown: set[str] = set(data) - {"trig", "median"}
        if unknown:
            raise MathsParamsError(f"Unknown namespaces: {sorted(unknown)}")

        defaults: MathsParams = cls.defaults()

        trig_data: Mapping[str, Any] = data.get("trig", {})
        trig: TrigParams = defaults.trig
        if "approx_mode" in trig_data:
            trig = TrigParams(
                approx_mode=_as_approx_mode(
                    trig_data["approx_mode"], "trig.approx_mode"
                )
            )

        median_data: Mapping[str, Any] = data.get("median", {})
        median: MedianParams = defaults.median
        if "window" in median_data:
            median = MedianParams(window=median_data["window"])

        params: MathsParams = cls(trig=trig, median=median)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants."""
        if not isinstance(self.trig.approx_mode, ApproxMode):
            raise MathsParamsError("trig.approx_mode must be an ApproxMode")

        window: Any = self.median.window
        if isinstance(window, bool) or not isinstance(window, int):
            raise MathsParamsError("median.window must be an int")
        if window not in MEDIAN_NETWORKS:
            raise MathsParamsError(
                "median.window must be one of "
                + ", ".join(str(size) for size in sorted(MEDIAN_NETWORKS))
            )

    def replace(self, **namespace_overrides: Any) -> MathsParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses and enums into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    return value
