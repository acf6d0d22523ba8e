from __future__ import annotations

from typing import List, Optional

from intgraph.algorithms.path_utils import reconstruct_path
from intgraph.logging import get_logger
from intgraph.model.matrix import WeightMatrix
from intgraph.types.base import Weight, is_inf
from intgraph.types.dto import AllPairsResult

LOGGER = get_logger(__name__)


def floyd_warshall(
    weights: WeightMatrix,
    seed_direct_hops: bool = True,
) -> AllPairsResult:
    """
    Compute all-pairs shortest paths with the Floyd-Warshall algorithm.

    ``dist[i][j]`` starts at 0 on the diagonal and ``w[i][j]`` elsewhere; each
    pass over an intermediary k relaxes every pair through k. With
    non-negative weights the result holds the true shortest distances.

    Args:
        weights: Square weight matrix; INF means no edge.
        seed_direct_hops: If True, ``next[i][j] = j`` for every finite
            off-diagonal edge before relaxation, so paths made of a single
            direct edge can be reconstructed. If False, the next-hop table
            starts empty and only pairs improved through an intermediary
            get an entry; since an entry is copied from ``next[i][k]``, such
            a table stays all None.

    Returns:
        AllPairsResult with the distance and next-hop tables.
    """
    n = weights.n
    dist: List[List[Weight]] = [
        [0 if i == j else weights[i][j] for j in range(n)] for i in range(n)
    ]
    next_hop: List[List[Optional[int]]] = [[None] * n for _ in range(n)]

    if seed_direct_hops:
        for i in range(n):
            for j in range(n):
                if i != j and not is_inf(dist[i][j]):
                    next_hop[i][j] = j

    # dist after pass k: shortest i -> j using intermediaries from {0..k}
    for k in range(n):
        dist_k = dist[k]
        for i in range(n):
            dist_i = dist[i]
            d_ik = dist_i[k]
            if is_inf(d_ik):
                continue
            for j in range(n):
                candidate = d_ik + dist_k[j]
                if candidate < dist_i[j]:
                    dist_i[j] = candidate
                    next_hop[i][j] = next_hop[i][k]

    LOGGER.debug("floyd_warshall(n=%d) distances: %s", n, dist)
    return AllPairsResult(
        dist=tuple(tuple(row) for row in dist),
        next=tuple(tuple(row) for row in next_hop),
    )


def shortest_path(result: AllPairsResult, u: int, v: int) -> List[int]:
    """Return the vertices of a shortest u->v path from an all-pairs result."""
    return reconstruct_path(u, v, result.next)
