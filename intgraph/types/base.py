"""Constants and aliases shared by the matrix model and the algorithms."""

from __future__ import annotations

import math
from typing import Union

#: Edge weight or path length: a non-negative int, or INF for "no edge".
Weight = Union[int, float]

#: Sentinel for "no edge" / "unreachable". Arithmetic with it saturates.
INF: float = math.inf

#: Input weights at or above this threshold are normalized to INF.
MAX_WEIGHT = 100

#: Sum searched for by the three-sum service.
THREE_SUM_TARGET = 100

#: Wire value of INF in 16-bit encoding.
UNREACHABLE_16 = 0xFFFF


def is_inf(value: Weight | None) -> bool:
    """Return True if `value` is the INF sentinel (or None)."""
    return value is None or (isinstance(value, float) and math.isinf(value))
