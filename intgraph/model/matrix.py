"""Dense weight matrix over the complete vertex set {0..n-1}.

``WeightMatrix.from_sequence`` is the single validated entry point for
building a matrix from caller input: it derives and checks the dimension
before any row is allocated, then normalizes weights at or above
``MAX_WEIGHT`` to INF ("no edge"). Diagonal entries are kept as given; the
shortest-path algorithms impose the zero self-distance themselves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from intgraph.errors import InvalidInputError, InvalidShapeError
from intgraph.logging import get_logger
from intgraph.types.base import INF, MAX_WEIGHT, Weight, is_inf

LOGGER = get_logger(__name__)


def _normalize(value: Weight, max_weight: int) -> Weight:
    if is_inf(value):
        return INF
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInputError(f"Edge weight must be an integer, got {value}")
    if value < 0:
        raise InvalidInputError(f"Edge weight must be non-negative, got {value}")
    return INF if value >= max_weight else int(value)


def matrix_dimension(length: int) -> int:
    """Return n such that n * n == length.

    Raises:
        InvalidShapeError: If `length` is not a perfect square.
    """
    if length < 0:
        raise InvalidShapeError(f"Invalid sequence length {length}")
    n = math.isqrt(length)
    if n * n != length:
        raise InvalidShapeError(
            f"Not a square array: length {length} has no integer square root"
        )
    return n


@dataclass(frozen=True)
class WeightMatrix:
    """Square matrix of edge weights; ``w[i][j]`` is INF when there is no edge.

    Attributes:
        weights: Rows of the matrix; every row has ``len(weights)`` entries.
    """

    weights: Tuple[Tuple[Weight, ...], ...]

    def __post_init__(self) -> None:
        n = len(self.weights)
        for i, row in enumerate(self.weights):
            if len(row) != n:
                raise InvalidShapeError(
                    f"Row {i} has {len(row)} entries, expected {n}"
                )

    @classmethod
    def from_sequence(
        cls, values: Sequence[int], max_weight: int = MAX_WEIGHT
    ) -> "WeightMatrix":
        """Build an n x n matrix from a flat row-major sequence of length n*n.

        Args:
            values: Flat sequence; ``values[i * n + j]`` is the weight i -> j.
            max_weight: Threshold at or above which a weight becomes INF.

        Returns:
            The normalized matrix. An empty sequence gives the 0 x 0 matrix.

        Raises:
            InvalidShapeError: If ``len(values)`` is not a perfect square.
            InvalidInputError: If a weight is negative or not integral.
        """
        n = matrix_dimension(len(values))
        rows = tuple(
            tuple(_normalize(values[i * n + j], max_weight) for j in range(n))
            for i in range(n)
        )
        LOGGER.debug("Built %dx%d weight matrix", n, n)
        return cls(rows)

    @classmethod
    def from_rows(
        cls, rows: Iterable[Iterable[Weight]], max_weight: int = MAX_WEIGHT
    ) -> "WeightMatrix":
        """Build a matrix from nested rows, applying the same normalization."""
        return cls(
            tuple(tuple(_normalize(v, max_weight) for v in row) for row in rows)
        )

    @property
    def n(self) -> int:
        """Number of vertices."""
        return len(self.weights)

    def __len__(self) -> int:
        return len(self.weights)

    def __getitem__(self, i: int) -> Tuple[Weight, ...]:
        return self.weights[i]

    def __iter__(self) -> Iterator[Tuple[Weight, ...]]:
        return iter(self.weights)

    def edges(self) -> List[Tuple[int, int, int]]:
        """Return ``(i, j, weight)`` for every finite entry, row-major."""
        return [
            (i, j, w)
            for i, row in enumerate(self.weights)
            for j, w in enumerate(row)
            if not is_inf(w)
        ]

    def to_numpy(self) -> np.ndarray:
        """Return the matrix as a float array with ``np.inf`` for no edge."""
        return np.array(self.weights, dtype=float).reshape(self.n, self.n)
