"""Traversal and path-analysis algorithms over the `GraphView` contract."""

from graphwalk.algorithms.bottleneck import find_common_vertices, find_cut_vertices
from graphwalk.algorithms.path_bundle import ShortestPathBundle
from graphwalk.algorithms.paths import find_all_simple_paths, iter_simple_paths
from graphwalk.algorithms.spf import bfs_layers, find_shortest_path
from graphwalk.algorithms.traversal import (
    BreadthFirstIterator,
    DepthFirstIterator,
    bfs_iter,
    bfs_visit,
    dfs_iter,
    dfs_visit,
    dfs_visit_stack,
    reachable,
)

__all__ = [
    "dfs_visit",
    "dfs_visit_stack",
    "bfs_visit",
    "dfs_iter",
    "bfs_iter",
    "reachable",
    "DepthFirstIterator",
    "BreadthFirstIterator",
    "find_all_simple_paths",
    "iter_simple_paths",
    "find_shortest_path",
    "bfs_layers",
    "ShortestPathBundle",
    "find_cut_vertices",
    "find_common_vertices",
]
