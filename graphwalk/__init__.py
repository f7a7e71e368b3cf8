"""graphwalk: traversal and path analysis over integer-indexed graphs.

Primary API:
    UndirectedGraph, Digraph - networkx-backed graph storage
    GraphView - abstract contract every algorithm consumes
    dfs_visit(), bfs_visit(), dfs_iter(), bfs_iter() - traversals
    find_all_simple_paths() - exhaustive simple-path enumeration
    find_shortest_path() - BFS shortest path with optional vertex exclusion
    find_cut_vertices(), find_common_vertices() - bottleneck analyses

Example:
    from graphwalk import UndirectedGraph

    g = UndirectedGraph(5)
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4)]:
        g.add_edge(a, b)

    g.find_shortest_path(0, 4)        # [0, 1, 2, 3, 4]
    g.find_cut_vertices(0, 4)         # status FOUND, vertices (1, 2, 3)
    print(g.to_dot())
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk.algorithms import (
    BreadthFirstIterator,
    DepthFirstIterator,
    ShortestPathBundle,
    bfs_iter,
    bfs_visit,
    dfs_iter,
    dfs_visit,
    dfs_visit_stack,
    find_all_simple_paths,
    find_common_vertices,
    find_cut_vertices,
    find_shortest_path,
    iter_simple_paths,
)
from graphwalk.config import TRAVERSAL_CONFIG, TraversalConfig
from graphwalk.errors import EdgeNotFoundError, GraphError, VertexIndexError
from graphwalk.graph import AdjacencyGraph, Digraph, GraphView, UndirectedGraph
from graphwalk.graph.io import to_dot
from graphwalk.graph.nx import NodeMap, from_networkx, to_networkx
from graphwalk.types import (
    CommonVertexResult,
    CommonVertexStatus,
    CutVertexResult,
    CutVertexStatus,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graphs
    "GraphView",
    "AdjacencyGraph",
    "UndirectedGraph",
    "Digraph",
    # Traversal
    "dfs_visit",
    "dfs_visit_stack",
    "bfs_visit",
    "dfs_iter",
    "bfs_iter",
    "DepthFirstIterator",
    "BreadthFirstIterator",
    # Paths
    "find_all_simple_paths",
    "iter_simple_paths",
    "find_shortest_path",
    "ShortestPathBundle",
    # Bottlenecks
    "find_cut_vertices",
    "find_common_vertices",
    "CutVertexResult",
    "CutVertexStatus",
    "CommonVertexResult",
    "CommonVertexStatus",
    # Errors
    "GraphError",
    "VertexIndexError",
    "EdgeNotFoundError",
    # Config
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Export and interop
    "to_dot",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
