from __future__ import annotations

from typing import List, Optional, Sequence

from intgraph.types.base import INF, Weight, is_inf


def reconstruct_path(
    u: int,
    v: int,
    next_hop: Sequence[Sequence[Optional[int]]],
) -> List[int]:
    """
    Walk a next-hop table from `u` to `v`.

    Args:
        u: Source vertex.
        v: Destination vertex.
        next_hop: Table where ``next_hop[x][v]`` is the vertex after x on a
            shortest x->v path, or None.

    Returns:
        Vertices from u to v inclusive, or an empty list if ``next_hop[u][v]``
        is None (no path, or the trivial u == v path).

    Raises:
        ValueError: If the walk does not reach v within n-1 hops.
    """
    if next_hop[u][v] is None:
        return []

    n = len(next_hop)
    path = [u]
    while u != v:
        u = next_hop[u][v]
        if u is None or len(path) > n - 1:
            raise ValueError(
                f"Next-hop table does not lead from {path[0]} to {v}: {path}"
            )
        path.append(u)
    return path


def path_weight(path: Sequence[int], weights: Sequence[Sequence[Weight]]) -> Weight:
    """
    Sum the edge weights along consecutive vertices of `path`.

    A path of fewer than two vertices weighs 0. Any missing edge makes the
    total INF.
    """
    total: Weight = 0
    for src, dst in zip(path, path[1:]):
        w = weights[src][dst]
        if is_inf(w):
            return INF
        total += w
    return total
