"""Text export of a graph in DOT edge-list form."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView


def to_dot(graph: "GraphView", directed: Optional[bool] = None) -> str:
    """Render ``graph`` as DOT text.

    Every adjacency entry becomes one edge line, so an undirected edge shows
    up once from each endpoint; the ``strict graph`` header lets Graphviz
    merge the duplicates. A vertex with no adjacencies is emitted as a bare
    line holding its index.

    Args:
        graph: Graph to render.
        directed: Force the directed (``digraph``/``->``) or undirected
            (``strict graph``/``--``) flavor. Defaults to ``graph.directed``.

    Returns:
        DOT text, each line terminated by ``\\n``.
    """
    if directed is None:
        directed = graph.directed
    arrow = "->" if directed else "--"

    lines: List[str] = ["digraph {" if directed else "strict graph {"]
    for v1 in range(graph.vertex_count()):
        count = 0
        for v2 in graph.adjacencies(v1):
            lines.append(f"  {v1} {arrow} {v2}")
            count += 1
        if count == 0:
            lines.append(str(v1))
    lines.append("}")
    return "\n".join(lines) + "\n"
