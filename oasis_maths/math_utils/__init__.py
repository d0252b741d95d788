################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from oasis_maths.math_utils.quat import Quaternion
from oasis_maths.math_utils.quat import QuaternionProducts
from oasis_maths.math_utils.rotation import FpAngles
from oasis_maths.math_utils.rotation import FpVector
from oasis_maths.math_utils.stats import RunningStdDev
from oasis_maths.math_utils.trig_approx import ApproxMode
from oasis_maths.math_utils.trig_approx import TrigApprox


__all__ = [
    "ApproxMode",
    "FpAngles",
    "FpVector",
    "Quaternion",
    "QuaternionProducts",
    "RunningStdDev",
    "TrigApprox",
]
