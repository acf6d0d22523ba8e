"""Graph model package: the dense weight matrix consumed by the algorithms."""

from intgraph.model.matrix import WeightMatrix, matrix_dimension

__all__ = ["WeightMatrix", "matrix_dimension"]
