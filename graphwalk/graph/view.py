"""The abstract graph contract consumed by every graphwalk algorithm.

A `GraphView` identifies vertices by dense integer indices and exposes only
vertex/edge counts, adjacency enumeration and edge mutation. The traversal and
path algorithms in `graphwalk.algorithms` are free functions over this
contract; the convenience methods below delegate to them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Iterator, List, Optional

from graphwalk.algorithms import bottleneck, paths, spf, traversal
from graphwalk.errors import VertexIndexError
from graphwalk.graph.io import to_dot
from graphwalk.types.base import Path, VertexID, Visitor
from graphwalk.types.dto import CommonVertexResult, CutVertexResult


class GraphView(ABC):
    """Abstract graph over vertices ``0 .. vertex_count() - 1``.

    Implementations must keep ``adjacencies(v)`` stable for the duration of a
    single call and must only yield indices inside the vertex range. The graph
    must not be mutated while a traversal or analysis over it is running.
    """

    @property
    @abstractmethod
    def directed(self) -> bool:
        """True if edges are one-way."""

    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges, parallel edges counted individually."""

    @abstractmethod
    def add_edge(self, v1: VertexID, v2: VertexID) -> None:
        """Add an edge between ``v1`` and ``v2``."""

    @abstractmethod
    def remove_edge(self, v1: VertexID, v2: VertexID) -> None:
        """Remove every edge between ``v1`` and ``v2``."""

    @abstractmethod
    def adjacencies(self, v: VertexID) -> Iterator[VertexID]:
        """Lazily yield the neighbors of ``v``."""

    def is_adjacent(self, v1: VertexID, v2: VertexID) -> bool:
        """Return True if ``v2`` appears among the adjacencies of ``v1``."""
        self.check_vertex(v1)
        self.check_vertex(v2)
        for adj in self.adjacencies(v1):
            if adj == v2:
                return True
        return False

    def check_vertex(self, v: VertexID) -> None:
        """Raise `VertexIndexError` unless ``v`` is a valid vertex index.

        Any integral type is accepted (including numpy integers); booleans are
        rejected even though ``bool`` subclasses ``int``.
        """
        count = self.vertex_count()
        if isinstance(v, bool) or not isinstance(v, Integral) or not 0 <= v < count:
            raise VertexIndexError(v, count)

    #
    # Algorithm shortcuts
    #
    def dfs_visit(self, start: VertexID, visitor: Visitor) -> None:
        traversal.dfs_visit(self, start, visitor)

    def dfs_visit_stack(self, start: VertexID, visitor: Visitor) -> None:
        traversal.dfs_visit_stack(self, start, visitor)

    def bfs_visit(self, start: VertexID, visitor: Visitor) -> None:
        traversal.bfs_visit(self, start, visitor)

    def dfs_iter(self, start: VertexID) -> traversal.DepthFirstIterator:
        return traversal.dfs_iter(self, start)

    def bfs_iter(self, start: VertexID) -> traversal.BreadthFirstIterator:
        return traversal.bfs_iter(self, start)

    def find_all_simple_paths(self, src: VertexID, dst: VertexID) -> List[Path]:
        return paths.find_all_simple_paths(self, src, dst)

    def find_shortest_path(
        self, src: VertexID, dst: VertexID, excluded: Optional[VertexID] = None
    ) -> Path:
        return spf.find_shortest_path(self, src, dst, excluded)

    def find_cut_vertices(self, src: VertexID, dst: VertexID) -> CutVertexResult:
        return bottleneck.find_cut_vertices(self, src, dst)

    def find_common_vertices(
        self, src: VertexID, dst: VertexID
    ) -> CommonVertexResult:
        return bottleneck.find_common_vertices(self, src, dst)

    def to_dot(self, directed: Optional[bool] = None) -> str:
        return to_dot(self, directed)
