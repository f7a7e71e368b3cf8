"""Depth-first and breadth-first traversal.

Eager forms call a visitor for every vertex reachable from ``start``
(``start`` included), each exactly once. Lazy forms return single-pass
iterator objects that produce the same vertices on demand.

Notes:
    Stack-based DFS marks a vertex visited when it is pushed, not when it is
    popped. It still visits each reachable vertex once, but siblings come out
    in reverse adjacency order and the overall order differs from the
    recursive variant. The lazy DFS iterator shares this behavior.

    BFS visits vertices in non-decreasing distance from ``start``.
"""

from __future__ import annotations

import sys
from abc import abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional

import numpy as np

from graphwalk.config import TRAVERSAL_CONFIG, TraversalConfig
from graphwalk.logging import get_logger
from graphwalk.types.base import VertexID, Visitor

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView

logger = get_logger(__name__)


def new_visited(graph: "GraphView") -> np.ndarray:
    """Return a fresh all-False visited array sized to the graph."""
    return np.zeros(graph.vertex_count(), dtype=bool)


def dfs_visit(
    graph: "GraphView",
    start: VertexID,
    visitor: Visitor,
    config: Optional[TraversalConfig] = None,
) -> None:
    """Recursive depth-first traversal from ``start``.

    Recursion depth equals the depth of the DFS tree, so it can reach
    ``vertex_count()`` frames. The interpreter recursion limit is raised by
    ``vertex_count() + config.recursion_headroom`` for the duration of the
    walk and restored afterwards, so the depth is bounded by the graph only.

    Args:
        graph: Graph to traverse.
        start: Start vertex.
        visitor: Called once per reachable vertex, in recursive DFS order.
        config: Optional traversal configuration.

    Raises:
        VertexIndexError: If ``start`` is out of range.
    """
    graph.check_vertex(start)
    config = config or TRAVERSAL_CONFIG
    limit = sys.getrecursionlimit()
    needed = limit + config.recursion_limit_for(graph.vertex_count())
    if not config.fits_recursion_limit(graph.vertex_count(), limit):
        logger.debug(
            "Raising recursion limit %d -> %d for recursive DFS over %d vertices",
            limit,
            needed,
            graph.vertex_count(),
        )
    sys.setrecursionlimit(needed)
    try:
        _dfs_visit_from(graph, start, visitor, new_visited(graph))
    finally:
        sys.setrecursionlimit(limit)


def _dfs_visit_from(
    graph: "GraphView", curr: VertexID, visitor: Visitor, visited: np.ndarray
) -> None:
    visitor(curr)
    visited[curr] = True
    for v in graph.adjacencies(curr):
        if not visited[v]:
            _dfs_visit_from(graph, v, visitor, visited)


def dfs_visit_stack(graph: "GraphView", start: VertexID, visitor: Visitor) -> None:
    """Stack-based depth-first traversal from ``start``.

    Raises:
        VertexIndexError: If ``start`` is out of range.
    """
    for v in dfs_iter(graph, start):
        visitor(v)


def bfs_visit(graph: "GraphView", start: VertexID, visitor: Visitor) -> None:
    """Queue-based breadth-first traversal from ``start``.

    Raises:
        VertexIndexError: If ``start`` is out of range.
    """
    for v in bfs_iter(graph, start):
        visitor(v)


class _FrontierIterator(Iterator[VertexID]):
    """Single-pass traversal driven by ``next()``.

    Holds its own frontier and visited array. Each step removes one vertex
    from the frontier, schedules its unvisited neighbors (marking them
    visited immediately so no vertex is scheduled twice) and returns it.
    Once the frontier is empty the iterator stays exhausted; request a new
    one to traverse again.
    """

    def __init__(self, graph: "GraphView", start: VertexID) -> None:
        graph.check_vertex(start)
        self._graph = graph
        self._frontier: Deque[VertexID] = deque([start])
        self._visited = new_visited(graph)
        self._visited[start] = True

    @abstractmethod
    def _take(self) -> VertexID:
        """Remove and return the next vertex from the frontier."""

    def __iter__(self) -> "_FrontierIterator":
        return self

    def __next__(self) -> VertexID:
        if not self._frontier:
            raise StopIteration
        curr = self._take()
        for adj in self._graph.adjacencies(curr):
            if not self._visited[adj]:
                self._visited[adj] = True
                self._frontier.append(adj)
        return curr


class DepthFirstIterator(_FrontierIterator):
    """Lazy stack-based DFS (LIFO frontier)."""

    def _take(self) -> VertexID:
        return self._frontier.pop()


class BreadthFirstIterator(_FrontierIterator):
    """Lazy BFS (FIFO frontier)."""

    def _take(self) -> VertexID:
        return self._frontier.popleft()


def dfs_iter(graph: "GraphView", start: VertexID) -> DepthFirstIterator:
    """Return a lazy stack-based DFS iterator starting at ``start``.

    Raises:
        VertexIndexError: If ``start`` is out of range (raised here, not on
            first ``next()``).
    """
    return DepthFirstIterator(graph, start)


def bfs_iter(graph: "GraphView", start: VertexID) -> BreadthFirstIterator:
    """Return a lazy BFS iterator starting at ``start``.

    Raises:
        VertexIndexError: If ``start`` is out of range.
    """
    return BreadthFirstIterator(graph, start)


def reachable(graph: "GraphView", start: VertexID) -> List[VertexID]:
    """Return the vertices reachable from ``start`` in BFS order."""
    return list(bfs_iter(graph, start))
