# pylint: disable=protected-access,invalid-name
import pytest

from graphwalk import UndirectedGraph, VertexIndexError
from graphwalk.algorithms.spf import bfs_layers, find_shortest_path


def test_square_direct_edge(square_1):
    assert find_shortest_path(square_1, 0, 3) == [0, 3]
    # Excluding a vertex off the route changes nothing
    assert find_shortest_path(square_1, 0, 3, excluded=1) == [0, 3]
    assert find_shortest_path(square_1, 0, 3, excluded=2) == [0, 3]


def test_exclusion_forces_detour(square_1):
    assert find_shortest_path(square_1, 0, 2) == [0, 1, 2]
    assert find_shortest_path(square_1, 0, 2, excluded=1) == [0, 3, 2]


def test_exclusion_can_disconnect(line_1):
    assert find_shortest_path(line_1, 0, 4) == [0, 1, 2, 3, 4]
    for v in (1, 2, 3):
        assert find_shortest_path(line_1, 0, 4, excluded=v) == []


def test_excluding_an_endpoint_is_ignored(line_1):
    assert find_shortest_path(line_1, 0, 4, excluded=0) == [0, 1, 2, 3, 4]
    assert find_shortest_path(line_1, 0, 4, excluded=4) == [0, 1, 2, 3, 4]


def test_excluded_vertex_never_in_result(ladder_1):
    for v in range(1, 10):
        if v == 5:
            continue
        path = find_shortest_path(ladder_1, 0, 5, excluded=v)
        assert v not in path
        assert path[0] == 0 and path[-1] == 5


def test_tie_break_follows_adjacency_order(diamond_1):
    assert find_shortest_path(diamond_1, 0, 3) == [0, 1, 3]


def test_same_vertex(square_1):
    assert find_shortest_path(square_1, 1, 1) == [1]


def test_same_vertex_with_self_loop():
    g = UndirectedGraph(2)
    g.add_edge(0, 0)
    g.add_edge(0, 1)
    assert find_shortest_path(g, 0, 0) == [0]


def test_unreachable(disconnected_1):
    assert find_shortest_path(disconnected_1, 0, 4) == []
    assert find_shortest_path(disconnected_1, 4, 0) == []


def test_directed_shortest_path(digraph_1):
    assert find_shortest_path(digraph_1, 0, 3) == [0, 2, 3]
    assert find_shortest_path(digraph_1, 0, 3, excluded=2) == []
    assert find_shortest_path(digraph_1, 3, 1) == [3, 0, 1]


def test_out_of_range_arguments(square_1):
    with pytest.raises(VertexIndexError):
        find_shortest_path(square_1, 0, 4)
    with pytest.raises(VertexIndexError):
        find_shortest_path(square_1, 9, 0)
    with pytest.raises(VertexIndexError):
        find_shortest_path(square_1, 0, 1, excluded=7)


def test_idempotent(ladder_1):
    assert find_shortest_path(ladder_1, 0, 5) == find_shortest_path(ladder_1, 0, 5)


def test_bfs_layers_full_sweep(diamond_1):
    dist, pred = bfs_layers(diamond_1, 0)
    assert dist == {0: 0, 1: 1, 2: 1, 3: 2}
    assert pred == {0: [], 1: [0], 2: [0], 3: [1, 2]}


def test_bfs_layers_stops_after_destination_layer(line_1):
    dist, pred = bfs_layers(line_1, 0, dst=2)
    assert dist == {0: 0, 1: 1, 2: 2}
    assert 3 not in pred


def test_bfs_layers_with_exclusion(diamond_1):
    dist, pred = bfs_layers(diamond_1, 0, dst=3, excluded=1)
    assert 1 not in dist
    assert pred[3] == [2]


def test_bfs_layers_ignores_parallel_duplicates():
    g = UndirectedGraph(2)
    g.add_edge(0, 1)
    g.add_edge(0, 1)
    _, pred = bfs_layers(g, 0)
    assert pred[1] == [0]
