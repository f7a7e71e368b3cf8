"""Bottleneck analyses between a source and a target vertex.

Both analyses are relative to one source/target pair:

- `find_cut_vertices` reports interior vertices whose removal leaves the
  target unreachable. These are cut vertices for this pair only, not
  articulation points of the whole graph.
- `find_common_vertices` reports interior vertices shared by every shortest
  path between the pair.

Outcomes such as "unreachable" are returned as tagged results, never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from graphwalk.algorithms.path_bundle import ShortestPathBundle
from graphwalk.algorithms.spf import find_shortest_path
from graphwalk.logging import get_logger
from graphwalk.types.base import CommonVertexStatus, CutVertexStatus, VertexID
from graphwalk.types.dto import CommonVertexResult, CutVertexResult

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView

logger = get_logger(__name__)


def find_cut_vertices(
    graph: "GraphView", src: VertexID, dst: VertexID
) -> CutVertexResult:
    """Find the vertices without which ``dst`` cannot be reached from ``src``.

    Every such vertex lies on every path, so only the interior of one
    baseline shortest path needs testing: each interior vertex is excluded in
    turn and the path search repeated. On undirected graphs the baseline is
    searched from ``dst`` back to ``src``; on directed graphs it has to follow
    edge direction, from ``src`` to ``dst``.

    Args:
        graph: Graph to analyze.
        src: Source vertex.
        dst: Target vertex.

    Returns:
        `CutVertexResult` with status ``FOUND`` and the indispensable vertices
        in route order from ``src``; ``NO_CUT_VERTEX`` if a path survives
        every single removal; ``UNREACHABLE`` if no path exists at all.

    Raises:
        VertexIndexError: If ``src`` or ``dst`` is out of range.
    """
    if graph.directed:
        baseline = find_shortest_path(graph, src, dst)
    else:
        baseline = find_shortest_path(graph, dst, src)[::-1]

    if not baseline:
        logger.debug("Cut vertices %d -> %d: unreachable", src, dst)
        return CutVertexResult(CutVertexStatus.UNREACHABLE)

    cut: List[VertexID] = []
    for v in baseline[1:-1]:
        if not find_shortest_path(graph, src, dst, excluded=v):
            cut.append(v)

    logger.debug(
        "Cut vertices %d -> %d: tested %d interior vertices, found %d",
        src,
        dst,
        max(len(baseline) - 2, 0),
        len(cut),
    )
    if not cut:
        return CutVertexResult(CutVertexStatus.NO_CUT_VERTEX)
    return CutVertexResult(CutVertexStatus.FOUND, tuple(cut))


def find_common_vertices(
    graph: "GraphView", src: VertexID, dst: VertexID
) -> CommonVertexResult:
    """Find the interior vertices shared by all shortest ``src`` -> ``dst`` paths.

    One multipath BFS sweep records every equal-length predecessor; the
    resulting predecessor DAG is then used to count paths through each
    vertex without enumerating the paths.

    Args:
        graph: Graph to analyze.
        src: Source vertex.
        dst: Target vertex.

    Returns:
        `CommonVertexResult` with status ``MULTIPLE_PATHS`` and the sorted
        shared interior vertices (possibly none) when several shortest paths
        exist; ``SINGLE_PATH`` when there is exactly one; ``UNREACHABLE``
        when there is none.

    Raises:
        VertexIndexError: If ``src`` or ``dst`` is out of range.
    """
    bundle = ShortestPathBundle.from_graph(graph, src, dst)
    path_count = bundle.count_paths()
    logger.debug(
        "Common vertices %d -> %d: %d shortest paths of length %s",
        src,
        dst,
        path_count,
        bundle.length,
    )
    if path_count == 0:
        return CommonVertexResult(CommonVertexStatus.UNREACHABLE)
    if path_count == 1:
        return CommonVertexResult(CommonVertexStatus.SINGLE_PATH, path_count=1)
    return CommonVertexResult(
        CommonVertexStatus.MULTIPLE_PATHS,
        tuple(bundle.common_vertices()),
        path_count,
    )
