"""Result containers for the array and graph algorithms.

All containers are immutable; they are created fresh per call and never
shared between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from intgraph.types.base import Weight


@dataclass(frozen=True)
class IndexedValue:
    """A value paired with its position in the caller's unsorted input.

    Attributes:
        value: The integer value.
        index: Original (pre-sort) index of the value.
    """

    value: int
    index: int


@dataclass(frozen=True)
class Triple:
    """Three indexed values whose values sum to the search target.

    Attributes:
        a: Smallest element (the fixed element of the scan).
        b: Low-pointer element.
        c: High-pointer element.
    """

    a: IndexedValue
    b: IndexedValue
    c: IndexedValue

    @property
    def indices(self) -> Tuple[int, int, int]:
        """Original indices of (a, b, c)."""
        return (self.a.index, self.b.index, self.c.index)

    @property
    def values(self) -> Tuple[int, int, int]:
        """Values of (a, b, c)."""
        return (self.a.value, self.b.value, self.c.value)


@dataclass(frozen=True)
class AllPairsResult:
    """Output of the all-pairs shortest path computation.

    Attributes:
        dist: Row-major distance table; ``dist[i][j]`` is INF when j is
            unreachable from i.
        next: Next-hop table; ``next[i][j]`` is the vertex after i on a
            shortest i->j path, or None.
    """

    dist: Tuple[Tuple[Weight, ...], ...]
    next: Tuple[Tuple[Optional[int], ...], ...]

    @property
    def n(self) -> int:
        return len(self.dist)

    def flat_distances(self) -> List[Weight]:
        """Return distances flattened in row-major order."""
        return [d for row in self.dist for d in row]


@dataclass(frozen=True)
class BoundedPathResult:
    """Output of the exact-edge-count shortest path search.

    An empty ``path`` means no path of the requested edge count fits under the
    weight ceiling; this is a normal outcome, not an error.

    Attributes:
        path: Vertex sequence of ``edge_count + 1`` vertices, or empty.
        weight: Total weight of ``path``; INF when no path was found.
        edge_count: Requested number of edges.
    """

    path: Tuple[int, ...]
    weight: Weight
    edge_count: int

    @property
    def found(self) -> bool:
        return bool(self.path)
