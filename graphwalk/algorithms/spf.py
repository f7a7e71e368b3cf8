"""Unweighted shortest paths by breadth-first search.

`find_shortest_path` returns one shortest path and stops the sweep as soon as
the destination is discovered. `bfs_layers` keeps every equal-length
predecessor instead, which is what the all-shortest-paths bundle builds on.

Notes:
    Among several shortest paths, `find_shortest_path` returns whichever BFS
    discovers first under the graph's adjacency order. Different storage
    implementations of the same graph may return different (equally short)
    paths.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Optional, Tuple

from graphwalk.algorithms.traversal import new_visited
from graphwalk.logging import get_logger
from graphwalk.types.base import Path, VertexID

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView

logger = get_logger(__name__)

_NO_PRED = -1


def _check_excluded(
    graph: "GraphView", src: VertexID, dst: VertexID, excluded: Optional[VertexID]
) -> Optional[VertexID]:
    """Validate ``excluded``; an endpoint is never excluded from its own query."""
    if excluded is None:
        return None
    graph.check_vertex(excluded)
    if excluded in (src, dst):
        return None
    return excluded


def find_shortest_path(
    graph: "GraphView",
    src: VertexID,
    dst: VertexID,
    excluded: Optional[VertexID] = None,
) -> Path:
    """Find one shortest path (by edge count) from ``src`` to ``dst``.

    Args:
        graph: Graph to search.
        src: Source vertex.
        dst: Destination vertex.
        excluded: Optional vertex treated as removed from the graph. Ignored
            if it equals ``src`` or ``dst``.

    Returns:
        Vertices from ``src`` to ``dst`` inclusive, ``[src]`` if they are the
        same vertex, or an empty list if ``dst`` is unreachable.

    Raises:
        VertexIndexError: If any vertex argument is out of range.
    """
    graph.check_vertex(src)
    graph.check_vertex(dst)
    excluded = _check_excluded(graph, src, dst, excluded)
    if src == dst:
        return [src]

    visited = new_visited(graph)
    if excluded is not None:
        visited[excluded] = True
    visited[src] = True
    pred: List[VertexID] = [_NO_PRED] * graph.vertex_count()
    queue: Deque[VertexID] = deque([src])

    found = False
    while queue and not found:
        curr = queue.popleft()
        for v in graph.adjacencies(curr):
            if v == dst:
                pred[v] = curr
                found = True
                break
            if not visited[v]:
                visited[v] = True
                pred[v] = curr
                queue.append(v)

    if not found:
        logger.debug("No path %d -> %d (excluded=%s)", src, dst, excluded)
        return []

    path: Path = []
    v = dst
    while v != _NO_PRED:
        path.append(v)
        v = pred[v]
    path.reverse()
    return path


def bfs_layers(
    graph: "GraphView",
    src: VertexID,
    dst: Optional[VertexID] = None,
    excluded: Optional[VertexID] = None,
) -> Tuple[Dict[VertexID, int], Dict[VertexID, List[VertexID]]]:
    """Breadth-first search that records every shortest-path predecessor.

    Args:
        graph: Graph to search.
        src: Source vertex.
        dst: Optional destination. When given, the sweep stops once the layer
            containing ``dst`` has been fully discovered; ``dst`` itself is
            not expanded.
        excluded: Optional vertex treated as removed from the graph.

    Returns:
        A tuple of (dist, pred):
          - dist: Maps each discovered vertex to its edge distance from ``src``.
          - pred: For each discovered vertex, the distinct predecessors ``u``
            with ``dist[u] + 1 == dist[v]``, in discovery order. ``pred[src]``
            is empty.

    Raises:
        VertexIndexError: If any vertex argument is out of range.
    """
    graph.check_vertex(src)
    if dst is not None:
        graph.check_vertex(dst)
    excluded = _check_excluded(graph, src, dst, excluded)

    dist: Dict[VertexID, int] = {src: 0}
    pred: Dict[VertexID, List[VertexID]] = {src: []}
    queue: Deque[VertexID] = deque([src])
    while queue:
        curr = queue.popleft()
        if curr == dst:
            continue
        if dst is not None and dst in dist and dist[curr] >= dist[dst]:
            break
        next_dist = dist[curr] + 1
        for v in graph.adjacencies(curr):
            if v == excluded:
                continue
            if v not in dist:
                dist[v] = next_dist
                pred[v] = [curr]
                queue.append(v)
            elif dist[v] == next_dist and curr not in pred[v]:
                pred[v].append(curr)
    return dist, pred
