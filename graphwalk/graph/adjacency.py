"""NetworkX-backed graph storage implementing `GraphView`.

Vertices are the dense indices ``0 .. n-1`` and exist from construction.
Edges are stored in a `networkx.MultiGraph` (undirected) or
`networkx.MultiDiGraph` (directed), so parallel edges and self-loops are
kept.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Iterator, Type, TypeVar

import networkx as nx

from graphwalk.errors import EdgeNotFoundError
from graphwalk.graph.view import GraphView
from graphwalk.types.base import VertexID

G = TypeVar("G", bound="AdjacencyGraph")


class AdjacencyGraph(GraphView):
    """Common storage logic for the undirected and directed variants.

    Rules:
      - Vertices ``0 .. vertex_count-1`` exist up front; ``add_vertex()``
        appends the next index.
      - ``add_edge`` never creates vertices; unknown indices raise
        `VertexIndexError`.
      - ``remove_edge`` removes all parallel edges between the pair and raises
        `EdgeNotFoundError` if there are none.
      - ``adjacencies(v)`` yields a neighbor once per parallel edge, in edge
        insertion order.
    """

    _nx_class: Type[nx.MultiGraph] = nx.MultiGraph

    def __init__(self, vertex_count: int = 0) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise TypeError(
                f"vertex_count must be an int, got {type(vertex_count).__name__}"
            )
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._graph = self._nx_class()
        self._graph.add_nodes_from(range(vertex_count))

    @property
    def directed(self) -> bool:
        return self._graph.is_directed()

    @property
    def nx_graph(self) -> nx.MultiGraph:
        """The underlying networkx graph. Treat as read-only."""
        return self._graph

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def add_vertex(self) -> VertexID:
        """Append a new isolated vertex and return its index."""
        v = self._graph.number_of_nodes()
        self._graph.add_node(v)
        return v

    def add_edge(self, v1: VertexID, v2: VertexID) -> None:
        self.check_vertex(v1)
        self.check_vertex(v2)
        self._graph.add_edge(v1, v2)

    def remove_edge(self, v1: VertexID, v2: VertexID) -> None:
        self.check_vertex(v1)
        self.check_vertex(v2)
        if not self._graph.has_edge(v1, v2):
            raise EdgeNotFoundError(v1, v2)
        keys = list(self._graph[v1][v2])
        self._graph.remove_edges_from((v1, v2, key) for key in keys)

    def adjacencies(self, v: VertexID) -> Iterator[VertexID]:
        self.check_vertex(v)
        return self._iter_adjacencies(v)

    def _iter_adjacencies(self, v: VertexID) -> Iterator[VertexID]:
        for nbr, keyed_edges in self._graph.adj[v].items():
            for _ in keyed_edges:
                yield nbr

    def copy(self: G) -> G:
        """Return an independent deep copy (pickle-based)."""
        return loads(dumps(self))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )


class UndirectedGraph(AdjacencyGraph):
    """Undirected multigraph; ``add_edge(a, b)`` makes each endpoint adjacent to the other."""

    _nx_class = nx.MultiGraph


class Digraph(AdjacencyGraph):
    """Directed multigraph; ``add_edge(a, b)`` makes ``b`` adjacent to ``a`` only."""

    _nx_class = nx.MultiDiGraph
