"""Shared typing constructs for intgraph.

This package defines the constants, type aliases and result containers used
across the engine. It centralizes typing to improve readability and static
analysis and contains no algorithmic logic.
"""

from intgraph.types.base import (
    INF,
    MAX_WEIGHT,
    THREE_SUM_TARGET,
    UNREACHABLE_16,
    Weight,
    is_inf,
)
from intgraph.types.dto import AllPairsResult, BoundedPathResult, IndexedValue, Triple

__all__ = [
    # Type aliases and constants
    "Weight",
    "INF",
    "MAX_WEIGHT",
    "THREE_SUM_TARGET",
    "UNREACHABLE_16",
    "is_inf",
    # DTOs
    "IndexedValue",
    "Triple",
    "AllPairsResult",
    "BoundedPathResult",
]
