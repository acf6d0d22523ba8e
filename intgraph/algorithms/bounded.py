"""Shortest path constrained to an exact number of edges.

The search fills an edge-count-indexed table ``sp[e][i][j]``: the weight of
the lightest i -> j walk using exactly ``e`` edges. Vertices may repeat; the
walk is not required to be simple.

    sp[0][i][i] = 0, sp[0][i][j] = INF (i != j)
    sp[1][i][j] = w[i][j]
    sp[e][i][j] = min over a of (w[i][a] + sp[e-1][a][j])

Each layer is an ``n x n`` float array with ``np.inf`` for "no walk", and
the min-plus step is evaluated one source row at a time. The lightest entry
of ``sp[k]`` is reported if it does not exceed the weight ceiling, and its
path is recovered by walking forward from the source and choosing, at each
step, the lowest-index vertex consistent with the table.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from intgraph.errors import InvalidInputError
from intgraph.logging import get_logger
from intgraph.model.matrix import WeightMatrix
from intgraph.types.base import INF, Weight, is_inf
from intgraph.types.dto import BoundedPathResult

LOGGER = get_logger(__name__)

EdgeCountTable = List[np.ndarray]


def _min_plus(w: np.ndarray, prev: np.ndarray) -> np.ndarray:
    layer = np.empty_like(prev)
    for i in range(w.shape[0]):
        layer[i] = (w[i][:, None] + prev).min(axis=0)
    return layer


def edge_count_table(weights: WeightMatrix, edge_count: int) -> EdgeCountTable:
    """Build ``sp[e]`` for e in 0..edge_count.

    Args:
        weights: Square weight matrix.
        edge_count: Largest edge count to tabulate (>= 1).

    Returns:
        A list of ``edge_count + 1`` float arrays of shape (n, n), indexed by
        edge count.
    """
    w = weights.to_numpy()
    zero = np.full_like(w, np.inf)
    np.fill_diagonal(zero, 0.0)
    sp: EdgeCountTable = [zero, w]

    for _ in range(2, edge_count + 1):
        sp.append(_min_plus(w, sp[-1]))
    return sp


def _lightest_pair(
    layer: np.ndarray,
) -> Tuple[Optional[int], Optional[int], Weight]:
    # argmin returns the first minimum, so ties go to the earliest row-major pair
    if layer.size == 0:
        return None, None, INF
    src, dest = divmod(int(np.argmin(layer)), layer.shape[1])
    best = float(layer[src, dest])
    if is_inf(best):
        return None, None, INF
    return src, dest, int(best)


def _walk(
    w: np.ndarray,
    sp: EdgeCountTable,
    src: int,
    dest: int,
    length: float,
    edge_count: int,
) -> List[int]:
    path = [src]
    for e in range(edge_count, 1, -1):
        rest = sp[e - 1][:, dest]
        matches = np.flatnonzero(w[src] + rest == length)
        if matches.size == 0:
            raise RuntimeError(
                f"Edge-count table is inconsistent at e={e}, vertex {src}"
            )
        src = int(matches[0])
        length = rest[src]
        path.append(src)
    path.append(dest)
    return path


def bounded_edge_shortest_path(
    weights: WeightMatrix,
    edge_count: int,
    max_weight: int,
) -> BoundedPathResult:
    """
    Find the lightest path of exactly `edge_count` edges over all vertex pairs.

    Args:
        weights: Square weight matrix; INF means no edge.
        edge_count: Required number of edges (k > 0).
        max_weight: Inclusive ceiling on the total path weight (W >= 0).

    Returns:
        BoundedPathResult with ``edge_count + 1`` vertices, or an empty path
        when the lightest k-edge path exceeds `max_weight` or none exists.

    Raises:
        InvalidInputError: If `edge_count` <= 0 or `max_weight` < 0.
    """
    if edge_count <= 0:
        raise InvalidInputError(f"Length must be positive, got {edge_count}")
    if max_weight < 0:
        raise InvalidInputError(f"Weight must be non-negative, got {max_weight}")

    sp = edge_count_table(weights, edge_count)
    src, dest, sp_len = _lightest_pair(sp[edge_count])

    if is_inf(sp_len) or sp_len > max_weight:
        LOGGER.debug(
            "No %d-edge path with weight <= %d (lightest: %s)",
            edge_count,
            max_weight,
            sp_len,
        )
        return BoundedPathResult(path=(), weight=INF, edge_count=edge_count)

    path = _walk(sp[1], sp, src, dest, float(sp_len), edge_count)
    LOGGER.debug("Lightest %d-edge path %s weighs %s", edge_count, path, sp_len)
    return BoundedPathResult(path=tuple(path), weight=sp_len, edge_count=edge_count)
