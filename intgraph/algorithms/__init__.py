"""Array and graph algorithms over integer sequences and weight matrices."""

from intgraph.algorithms.apsp import floyd_warshall, shortest_path
from intgraph.algorithms.bounded import bounded_edge_shortest_path, edge_count_table
from intgraph.algorithms.path_utils import path_weight, reconstruct_path
from intgraph.algorithms.three_sum import index_values, three_sum, three_sum_sorted

__all__ = [
    "floyd_warshall",
    "shortest_path",
    "bounded_edge_shortest_path",
    "edge_count_table",
    "reconstruct_path",
    "path_weight",
    "three_sum",
    "three_sum_sorted",
    "index_values",
]
