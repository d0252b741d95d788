################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from oasis_maths.config.maths_config import MathsConfig
from oasis_maths.config.maths_config import MathsConfigError
from oasis_maths.config.maths_params import MathsParams
from oasis_maths.config.maths_params import MathsParamsError
from oasis_maths.config.maths_params import MedianParams
from oasis_maths.config.maths_params import TrigParams


__all__ = [
    "MathsConfig",
    "MathsConfigError",
    "MathsParams",
    "MathsParamsError",
    "MedianParams",
    "TrigParams",
]
