"""Exhaustive simple-path enumeration by backtracking DFS.

The number of simple paths grows combinatorially: a dense graph can have on
the order of ``vertex_count!`` of them. This is a property of the problem, not
a defect, but callers on large or dense graphs should prefer the lazy
`iter_simple_paths` and stop early.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional

import numpy as np

from graphwalk.algorithms.traversal import new_visited
from graphwalk.config import TRAVERSAL_CONFIG, TraversalConfig
from graphwalk.logging import get_logger
from graphwalk.types.base import Path, VertexID

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView

logger = get_logger(__name__)


def iter_simple_paths(
    graph: "GraphView",
    src: VertexID,
    dst: VertexID,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Path]:
    """Yield every simple path from ``src`` to ``dst``.

    Paths come out in depth-first discovery order over adjacency order. Each
    yielded path is a new list owned by the caller. ``src == dst`` yields the
    single-vertex path; an unreachable ``dst`` yields nothing.

    Raises:
        VertexIndexError: If ``src`` or ``dst`` is out of range (raised on
            first iteration).
    """
    graph.check_vertex(src)
    graph.check_vertex(dst)
    config = config or TRAVERSAL_CONFIG

    found = 0
    for path in _backtrack(graph, src, dst, new_visited(graph), []):
        found += 1
        if found == config.simple_path_warning:
            logger.warning(
                "Simple path enumeration %d -> %d reached %d paths and is still running",
                src,
                dst,
                found,
            )
        yield path


def _backtrack(
    graph: "GraphView",
    src: VertexID,
    dst: VertexID,
    visited: np.ndarray,
    path: Path,
) -> Iterator[Path]:
    visited[src] = True
    path.append(src)
    if src == dst:
        yield list(path)
        visited[src] = False
        path.pop()
        return

    # One adjacency iterator per vertex on the current path
    stack: List[Iterator[VertexID]] = [iter(graph.adjacencies(src))]
    while stack:
        nbr = next(stack[-1], None)
        if nbr is None:
            stack.pop()
            visited[path.pop()] = False
            continue
        if visited[nbr]:
            continue
        path.append(nbr)
        if nbr == dst:
            yield list(path)
            path.pop()
            continue
        visited[nbr] = True
        stack.append(iter(graph.adjacencies(nbr)))


def find_all_simple_paths(
    graph: "GraphView",
    src: VertexID,
    dst: VertexID,
    config: Optional[TraversalConfig] = None,
) -> List[Path]:
    """Return every simple path from ``src`` to ``dst`` as a list.

    Raises:
        VertexIndexError: If ``src`` or ``dst`` is out of range.
    """
    result = list(iter_simple_paths(graph, src, dst, config))
    logger.debug("Found %d simple paths %d -> %d", len(result), src, dst)
    return result
