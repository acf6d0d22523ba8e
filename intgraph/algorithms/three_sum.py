from __future__ import annotations

from typing import List, Sequence

from intgraph.logging import get_logger
from intgraph.types.base import THREE_SUM_TARGET
from intgraph.types.dto import IndexedValue, Triple

LOGGER = get_logger(__name__)


def index_values(values: Sequence[int]) -> List[IndexedValue]:
    """Attach original indices and sort ascending by value (stable)."""
    indexed = [IndexedValue(value=v, index=i) for i, v in enumerate(values)]
    return sorted(indexed, key=lambda iv: iv.value)


def three_sum_sorted(
    ordered: Sequence[IndexedValue], target: int = THREE_SUM_TARGET
) -> List[Triple]:
    """
    Find index triples in an ascending sequence whose values sum to `target`.

    For each fixed smallest element ``a = ordered[i]`` a two-pointer scan runs
    over ``ordered[i+1:]``. On a match the low pointer advances if the next
    element repeats ``b``'s value, otherwise the high pointer retreats. This
    enumerates duplicate families on the low side only; combinations that
    differ only in a repeated high-side value can be skipped.

    Args:
        ordered: Indexed values sorted ascending by value.
        target: Sum to search for.

    Returns:
        Triples in discovery order; empty if none match.
    """
    result: List[Triple] = []
    n = len(ordered)
    for i in range(n - 2):
        a = ordered[i]
        start = i + 1
        end = n - 1
        while start < end:
            b = ordered[start]
            c = ordered[end]
            total = a.value + b.value + c.value
            if total == target:
                result.append(Triple(a, b, c))
                if b.value == ordered[start + 1].value:
                    start += 1
                else:
                    end -= 1
            elif total > target:
                end -= 1
            else:
                start += 1
    return result


def three_sum(values: Sequence[int], target: int = THREE_SUM_TARGET) -> List[Triple]:
    """
    Find triples of elements of `values` that sum to `target`.

    Args:
        values: Unsorted integers; triples refer to positions in this sequence.
        target: Sum to search for.

    Returns:
        Triples whose ``indices`` are positions in `values`, in discovery order.
    """
    result = three_sum_sorted(index_values(values), target)
    LOGGER.debug(
        "three_sum(n=%d, target=%d) found %d", len(values), target, len(result)
    )
    return result
