"""NetworkX graph conversion utilities.

Converts between NetworkX directed graphs and the dense ``WeightMatrix``
used by the intgraph algorithms.

Example:
    >>> import networkx as nx
    >>> from intgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> matrix, node_map = from_networkx(G)
    >>> matrix[node_map.to_index["A"]][node_map.to_index["B"]]
    3
    >>> G_out = to_networkx(matrix, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from intgraph.model.matrix import WeightMatrix
from intgraph.types.base import INF, MAX_WEIGHT, Weight

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.Graph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and matrix indices.

    Attributes:
        to_index: Maps original node names to matrix row/column indices.
        to_name: Maps indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    max_weight: int = MAX_WEIGHT,
) -> Tuple[WeightMatrix, NodeMap]:
    """Convert a NetworkX graph to a dense weight matrix.

    Nodes are sorted by ``str`` for a deterministic index order. Missing
    node pairs become INF; undirected graphs produce a symmetric matrix.

    Args:
        G: NetworkX ``DiGraph`` or ``Graph``.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        max_weight: Weights at or above this value become INF.

    Returns:
        Tuple of (matrix, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph or is a multigraph.
        InvalidInputError: If an edge weight is negative or not integral.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.Graph)) or G.is_multigraph():
        raise TypeError(
            f"Expected NetworkX DiGraph or Graph, got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)
    n = len(node_names)

    rows: List[List[Weight]] = [[INF] * n for _ in range(n)]
    for u, v, data in G.edges(data=True):
        i = node_map.to_index[u]
        j = node_map.to_index[v]
        weight = data.get(weight_attr, default_weight)
        rows[i][j] = weight
        if not G.is_directed():
            rows[j][i] = weight

    return WeightMatrix.from_rows(rows, max_weight=max_weight), node_map


def to_networkx(
    matrix: WeightMatrix,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
    self_loops: bool = True,
) -> "nx.DiGraph":
    """Convert a weight matrix to a NetworkX ``DiGraph``.

    Every vertex becomes a node; every finite entry becomes an edge carrying
    its weight under `weight_attr`.

    Args:
        matrix: Matrix to convert.
        node_map: Optional NodeMap restoring original node names. If None,
            nodes are labeled 0, 1, 2, ...
        weight_attr: Edge attribute name for the weight.
        self_loops: Include finite diagonal entries as self-loop edges.

    Returns:
        nx.DiGraph with one edge per finite matrix entry.
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(matrix.n))
    for i, j, weight in matrix.edges():
        if i == j and not self_loops:
            continue
        G.add_edge(name(i), name(j), **{weight_attr: weight})
    return G
