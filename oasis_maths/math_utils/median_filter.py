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
Median of small fixed-size windows using comparator networks

The networks are the minimal compare-and-swap sequences published by
N. Devillard, "Fast median search: an ANSI C implementation" (1998). Each
pair (a, b) swaps p[a] and p[b] when p[a] > p[b]. After the network runs,
the median sits at the listed index. The networks are partial sorts, so
only that index is meaningful.

Float windows are evaluated in float32. NaN ordering is unspecified, but
NaN input never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class SortingNetwork:
    """Comparator sequence for one window size."""

    size: int
    comparators: tuple[tuple[int, int], ...]
    median_index: int


MEDIAN_NETWORK_3: SortingNetwork = SortingNetwork(
    size=3,
    comparators=((0, 1), (1, 2), (0, 1)),
    median_index=1,
)

MEDIAN_NETWORK_5: SortingNetwork = SortingNetwork(
    size=5,
    comparators=((0, 1), (3, 4), (0, 3), (1, 4), (1, 2), (2, 3), (1, 2)),
    median_index=2,
)

MEDIAN_NETWORK_7: SortingNetwork = SortingNetwork(
    size=7,
    comparators=(
        (0, 5),
        (0, 3),
        (1, 6),
        (2, 4),
        (0, 1),
        (3, 5),
        (2, 6),
        (2, 3),
        (3, 6),
        (4, 5),
        (1, 4),
        (1, 3),
        (3, 4),
    ),
    median_index=3,
)

MEDIAN_NETWORK_9: SortingNetwork = SortingNetwork(
    size=9,
    comparators=(
        (1, 2),
        (4, 5),
        (7, 8),
        (0, 1),
        (3, 4),
        (6, 7),
        (1, 2),
        (4, 5),
        (7, 8),
        (0, 3),
        (5, 8),
        (4, 7),
        (3, 6),
        (1, 4),
        (2, 5),
        (4, 7),
        (4, 2),
        (6, 4),
        (4, 2),
    ),
    median_index=4,
)

MEDIAN_NETWORKS: dict[int, SortingNetwork] = {
    network.size: network
    for network in (
        MEDIAN_NETWORK_3,
        MEDIAN_NETWORK_5,
        MEDIAN_NETWORK_7,
        MEDIAN_NETWORK_9,
    )
}


def _run_network(network: SortingNetwork, p: list[Any]) -> Any:
    """Apply the comparators to the scratch list and return its median slot."""
    if len(p) != network.size:
        raise ValueError(f"Median window must have {network.size} values, got {len(p)}")
    for a, b in network.comparators:
        if p[a] > p[b]:
            p[a], p[b] = p[b], p[a]
    return p[network.median_index]


def _network_for(size: int) -> SortingNetwork:
    network: SortingNetwork | None = MEDIAN_NETWORKS.get(size)
    if network is None:
        raise ValueError(f"Unsupported median window size: {size}")
    return network


def _median_int(network: SortingNetwork, values: Sequence[int]) -> int:
    return int(_run_network(network, [int(v) for v in values]))


def _median_float(network: SortingNetwork, values: Sequence[float]) -> float:
    return float(_run_network(network, [np.float32(v) for v in values]))


def quick_median_filter(values: Sequence[int]) -> int:
    """Return the median of a 3, 5, 7 or 9 element integer window."""
    return _median_int(_network_for(len(values)), values)


def quick_median_filterf(values: Sequence[float]) -> float:
    """Return the median of a 3, 5, 7 or 9 element float window."""
    return _median_float(_network_for(len(values)), values)


def quick_median_filter3(values: Sequence[int]) -> int:
    return _median_int(MEDIAN_NETWORK_3, values)


def quick_median_filter5(values: Sequence[int]) -> int:
    return _median_int(MEDIAN_NETWORK_5, values)


def quick_median_filter7(values: Sequence[int]) -> int:
    return _median_int(MEDIAN_NETWORK_7, values)


def quick_median_filter9(values: Sequence[int]) -> int:
    return _median_int(MEDIAN_NETWORK_9, values)


def quick_median_filter3f(values: Sequence[float]) -> float:
    return _median_float(MEDIAN_NETWORK_3, values)


def quick_median_filter5f(values: Sequence[float]) -> float:
    return _median_float(MEDIAN_NETWORK_5, values)


def quick_median_filter7f(values: Sequence[float]) -> float:
    return _median_float(MEDIAN_NETWORK_7, values)


def quick_median_filter9f(values: Sequence[float]) -> float:
    return _median_float(MEDIAN_NETWORK_9, values)
