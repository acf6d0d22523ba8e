"""intgraph: integer-array and graph algorithms over a binary wire protocol.

intgraph answers requests of the form "integers in, bytes out": a caller
supplies a slash-delimited integer sequence and receives fixed-width
big-endian integers back.

Primary API:
    WeightMatrix - Validated n x n weight matrix built from a flat sequence
    floyd_warshall() - All-pairs shortest distances with next-hop table
    reconstruct_path() - Walk a next-hop table into a vertex path
    bounded_edge_shortest_path() - Lightest path of exactly k edges
    three_sum() - Index triples summing to a target
    ServiceRouter - Named services returning encoded responses

Example:
    from intgraph import WeightMatrix, floyd_warshall, reconstruct_path

    w = WeightMatrix.from_sequence([0, 4, 1, 100, 0, 100, 100, 2, 0])
    result = floyd_warshall(w)
    result.dist[0][1]                        # 3, via vertex 2
    reconstruct_path(0, 1, result.next)      # [0, 2, 1]
"""

from __future__ import annotations

from intgraph import cli, logging
from intgraph._version import __version__
from intgraph.algorithms.apsp import floyd_warshall
from intgraph.algorithms.bounded import bounded_edge_shortest_path
from intgraph.algorithms.path_utils import path_weight, reconstruct_path
from intgraph.algorithms.three_sum import three_sum
from intgraph.codec import encode16, encode16_many, encode32, pack_index_pair
from intgraph.config import EngineConfig, load_config
from intgraph.errors import EngineError, InvalidInputError, InvalidShapeError
from intgraph.lib.nx import NodeMap, from_networkx, to_networkx
from intgraph.model.matrix import WeightMatrix
from intgraph.service import Response, ServiceRouter, parse_sequence
from intgraph.types.base import INF, MAX_WEIGHT
from intgraph.types.dto import AllPairsResult, BoundedPathResult, IndexedValue, Triple

__all__ = [
    # Version
    "__version__",
    # Model
    "WeightMatrix",
    # Algorithms
    "floyd_warshall",
    "reconstruct_path",
    "path_weight",
    "bounded_edge_shortest_path",
    "three_sum",
    # Codec
    "encode16",
    "encode32",
    "encode16_many",
    "pack_index_pair",
    # Service
    "ServiceRouter",
    "Response",
    "parse_sequence",
    # Config
    "EngineConfig",
    "load_config",
    # Errors
    "EngineError",
    "InvalidInputError",
    "InvalidShapeError",
    # Types
    "INF",
    "MAX_WEIGHT",
    "AllPairsResult",
    "BoundedPathResult",
    "IndexedValue",
    "Triple",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
