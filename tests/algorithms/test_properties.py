"""Cross-checks against NetworkX on seeded random graphs."""

import itertools

import networkx as nx
import pytest

from graphwalk import CommonVertexStatus, CutVertexStatus, from_networkx
from graphwalk.algorithms.bottleneck import find_common_vertices, find_cut_vertices
from graphwalk.algorithms.paths import find_all_simple_paths
from graphwalk.algorithms.spf import find_shortest_path
from graphwalk.algorithms.traversal import (
    bfs_iter,
    bfs_visit,
    dfs_iter,
    dfs_visit,
    dfs_visit_stack,
)

SEEDS = [1, 7, 42]


def _random_graph(seed, directed=False, n=8, p=0.3):
    G = nx.gnp_random_graph(n, p, seed=seed, directed=directed)
    graph, node_map = from_networkx(G)
    # Relabel the reference graph with graphwalk indices
    return graph, nx.relabel_nodes(G, node_map.to_index)


def _collect(visit, graph, start):
    seen = []
    visit(graph, start, seen.append)
    return seen


def _reference_reachable(G, start):
    return {start} | nx.descendants(G, start)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("directed", [False, True])
def test_all_traversals_reach_the_same_set(seed, directed):
    graph, G = _random_graph(seed, directed)
    for start in range(graph.vertex_count()):
        expected = _reference_reachable(G, start)
        orders = [
            _collect(dfs_visit, graph, start),
            _collect(dfs_visit_stack, graph, start),
            _collect(bfs_visit, graph, start),
            list(dfs_iter(graph, start)),
            list(bfs_iter(graph, start)),
        ]
        for order in orders:
            assert len(order) == len(set(order))
            assert set(order) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_visits_in_non_decreasing_distance(seed):
    graph, G = _random_graph(seed)
    for start in range(graph.vertex_count()):
        dist = nx.single_source_shortest_path_length(G, start)
        distances = [dist[v] for v in _collect(bfs_visit, graph, start)]
        assert distances == sorted(distances)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("directed", [False, True])
def test_shortest_path_length_matches_reference(seed, directed):
    graph, G = _random_graph(seed, directed)
    for src, dst in itertools.permutations(range(graph.vertex_count()), 2):
        path = find_shortest_path(graph, src, dst)
        if nx.has_path(G, src, dst):
            assert len(path) - 1 == nx.shortest_path_length(G, src, dst)
            assert path[0] == src and path[-1] == dst
            assert all(G.has_edge(a, b) for a, b in zip(path, path[1:]))
        else:
            assert path == []


@pytest.mark.parametrize("seed", SEEDS)
def test_simple_paths_match_reference(seed):
    graph, G = _random_graph(seed, n=7, p=0.4)
    for src, dst in itertools.permutations(range(graph.vertex_count()), 2):
        ours = find_all_simple_paths(graph, src, dst)
        reference = list(nx.all_simple_paths(G, src, dst))
        assert sorted(map(tuple, ours)) == sorted(map(tuple, reference))
        if ours:
            shortest = find_shortest_path(graph, src, dst)
            assert all(len(shortest) <= len(p) for p in ours)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("directed", [False, True])
def test_common_vertices_match_reference(seed, directed):
    graph, G = _random_graph(seed, directed)
    for src, dst in itertools.permutations(range(graph.vertex_count()), 2):
        result = find_common_vertices(graph, src, dst)
        if not nx.has_path(G, src, dst):
            assert result.status == CommonVertexStatus.UNREACHABLE
            continue
        reference = [set(p) for p in nx.all_shortest_paths(G, src, dst)]
        assert result.path_count == len(reference)
        if len(reference) == 1:
            assert result.status == CommonVertexStatus.SINGLE_PATH
        else:
            shared = set.intersection(*reference) - {src, dst}
            assert result.status == CommonVertexStatus.MULTIPLE_PATHS
            assert result.vertices == tuple(sorted(shared))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("directed", [False, True])
def test_cut_vertices_match_reference(seed, directed):
    graph, G = _random_graph(seed, directed)
    for src, dst in itertools.permutations(range(graph.vertex_count()), 2):
        result = find_cut_vertices(graph, src, dst)
        if not nx.has_path(G, src, dst):
            assert result.status == CutVertexStatus.UNREACHABLE
            continue
        expected = set()
        for v in G.nodes():
            if v in (src, dst):
                continue
            H = G.copy()
            H.remove_node(v)
            if not nx.has_path(H, src, dst):
                expected.add(v)
        assert set(result.vertices) == expected
        if not expected:
            assert result.status == CutVertexStatus.NO_CUT_VERTEX


@pytest.mark.parametrize("seed", SEEDS)
def test_repeated_calls_are_idempotent(seed):
    graph, _ = _random_graph(seed)
    for start in range(graph.vertex_count()):
        assert list(dfs_iter(graph, start)) == list(dfs_iter(graph, start))
        assert list(bfs_iter(graph, start)) == list(bfs_iter(graph, start))
    assert find_cut_vertices(graph, 0, 1) == find_cut_vertices(graph, 0, 1)
    assert find_common_vertices(graph, 0, 1) == find_common_vertices(graph, 0, 1)
