import networkx as nx
import pytest

from intgraph.algorithms.apsp import floyd_warshall, shortest_path
from intgraph.algorithms.path_utils import path_weight
from intgraph.codec import encode16_many
from intgraph.lib.nx import to_networkx
from intgraph.model.matrix import WeightMatrix
from intgraph.types.base import INF
from tests.algorithms.sample_matrices import *


def _nx_distances(matrix):
    """Reference distances computed by NetworkX (self-loops ignored)."""
    G = to_networkx(matrix, self_loops=False)
    lengths = dict(nx.all_pairs_dijkstra_path_length(G, weight="weight"))
    n = matrix.n
    return [[lengths[i].get(j, INF) for j in range(n)] for i in range(n)]


class TestFloydWarshall:
    def test_pair1_serializes_to_expected_words(self, pair1):
        """The two-vertex example encodes to 0000 0001 0001 0000."""
        result = floyd_warshall(pair1)
        assert result.dist == ((0, 1), (1, 0))
        expected = bytes.fromhex("0000000100010000")
        assert encode16_many(result.flat_distances()) == expected

    def test_line1_uses_intermediary(self, line1):
        result = floyd_warshall(line1)
        assert result.dist == (
            (0, 2, 5),
            (INF, 0, 3),
            (INF, INF, 0),
        )
        assert result.next[0][2] == 1
        assert result.next[1][0] is None

    def test_square1_distances(self, square1):
        result = floyd_warshall(square1)
        assert result.dist[0] == (0, 1, 2, 3)
        assert result.dist[3] == (INF, INF, INF, 0)

    def test_diagonal_forced_to_zero(self, disconnected1):
        """Self-loop weights never leak into the distance table."""
        result = floyd_warshall(disconnected1)
        assert [result.dist[i][i] for i in range(3)] == [0, 0, 0]
        assert result.next[2][2] is None

    def test_unreachable_pairs_stay_inf(self, disconnected1):
        result = floyd_warshall(disconnected1)
        assert result.dist[0][2] == INF
        assert result.dist[2][0] == INF
        assert result.next[0][2] is None
        assert encode16_many(result.flat_distances())[4:6] == b"\xff\xff"

    @pytest.mark.parametrize(
        "fixture", ["pair1", "line1", "square1", "disconnected1", "dense5"]
    )
    def test_matches_networkx(self, request, fixture):
        matrix = request.getfixturevalue(fixture)
        result = floyd_warshall(matrix)
        expected = _nx_distances(matrix)
        assert [list(row) for row in result.dist] == expected

    def test_empty_matrix(self):
        result = floyd_warshall(WeightMatrix.from_sequence([]))
        assert result.n == 0
        assert result.dist == ()
        assert result.flat_distances() == []

    def test_repeated_calls_identical(self, dense5):
        first = floyd_warshall(dense5)
        second = floyd_warshall(dense5)
        assert first == second
        assert encode16_many(first.flat_distances()) == encode16_many(
            second.flat_distances()
        )


class TestNextHopSeeding:
    def test_direct_edge_reconstructs_when_seeded(self, pair1):
        result = floyd_warshall(pair1)
        assert shortest_path(result, 0, 1) == [0, 1]

    def test_unseeded_table_stays_empty(self, line1):
        """Without seeding, no entry can ever be populated."""
        result = floyd_warshall(line1, seed_direct_hops=False)
        assert all(hop is None for row in result.next for hop in row)
        assert shortest_path(result, 0, 2) == []
        # Distances are unaffected by seeding
        assert result.dist == floyd_warshall(line1).dist

    @pytest.mark.parametrize("fixture", ["line1", "square1", "dense5"])
    def test_every_finite_pair_reconstructs_to_its_distance(self, request, fixture):
        matrix = request.getfixturevalue(fixture)
        result = floyd_warshall(matrix)
        for u in range(matrix.n):
            for v in range(matrix.n):
                if u == v or result.dist[u][v] == INF:
                    continue
                path = shortest_path(result, u, v)
                assert path[0] == u
                assert path[-1] == v
                assert path_weight(path, matrix) == result.dist[u][v]
