from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Set

from graphwalk.algorithms.spf import bfs_layers
from graphwalk.types.base import Path, VertexID

if TYPE_CHECKING:
    from graphwalk.graph.view import GraphView


class ShortestPathBundle:
    """All shortest paths between two vertices, kept as a predecessor DAG.

    Only vertices lying on at least one shortest ``src`` -> ``dst`` path are
    retained. Paths are counted and intersected on the DAG directly; they are
    only materialized by `resolve_to_paths`.
    """

    def __init__(
        self,
        src: VertexID,
        dst: VertexID,
        pred: Dict[VertexID, List[VertexID]],
        dist: Dict[VertexID, int],
    ):
        self.src: VertexID = src
        self.dst: VertexID = dst
        self.length: Optional[int] = dist.get(dst)
        self.pred: Dict[VertexID, List[VertexID]] = {}
        self.vertices: Set[VertexID] = set()
        if dst in pred:
            self.vertices.add(dst)
            queue = deque([dst])
            while queue:
                node = queue.popleft()
                self.pred[node] = list(pred[node])
                for prev_node in pred[node]:
                    if prev_node not in self.vertices:
                        self.vertices.add(prev_node)
                        queue.append(prev_node)
        self._dist: Dict[VertexID, int] = {v: dist[v] for v in self.vertices}

    @classmethod
    def from_graph(
        cls,
        graph: "GraphView",
        src: VertexID,
        dst: VertexID,
        excluded: Optional[VertexID] = None,
    ) -> ShortestPathBundle:
        dist, pred = bfs_layers(graph, src, dst, excluded)
        return cls(src, dst, pred, dist)

    @property
    def reachable(self) -> bool:
        return self.length is not None

    def __repr__(self) -> str:
        return (
            f"ShortestPathBundle({self.src}, {self.dst}, length={self.length}, "
            f"vertices={sorted(self.vertices)})"
        )

    def _by_distance(self, reverse: bool = False) -> List[VertexID]:
        return sorted(self.vertices, key=self._dist.__getitem__, reverse=reverse)

    def _paths_from_src(self) -> Dict[VertexID, int]:
        counts = {v: 0 for v in self.vertices}
        counts[self.src] = 1
        for v in self._by_distance():
            if v != self.src:
                counts[v] = sum(counts[p] for p in self.pred[v])
        return counts

    def _paths_to_dst(self) -> Dict[VertexID, int]:
        counts = {v: 0 for v in self.vertices}
        counts[self.dst] = 1
        for v in self._by_distance(reverse=True):
            if v == self.src:
                continue
            for p in self.pred[v]:
                counts[p] += counts[v]
        return counts

    def count_paths(self) -> int:
        """Number of distinct shortest vertex sequences from src to dst."""
        if not self.reachable:
            return 0
        return self._paths_from_src()[self.dst]

    def common_vertices(self) -> List[VertexID]:
        """Interior vertices present on every shortest path, sorted.

        A vertex ``v`` lies on every shortest path exactly when the paths
        through it (``from_src[v] * to_dst[v]``) account for all of them.
        """
        if not self.reachable:
            return []
        from_src = self._paths_from_src()
        to_dst = self._paths_to_dst()
        total = from_src[self.dst]
        return sorted(
            v
            for v in self.vertices
            if v not in (self.src, self.dst) and from_src[v] * to_dst[v] == total
        )

    def resolve_to_paths(self) -> Iterator[Path]:
        """Yield every shortest path, each as a src-first vertex list."""
        if not self.reachable:
            return
        if self.src == self.dst:
            yield [self.src]
            return
        path: Path = [self.dst]
        stack = [iter(self.pred[self.dst])]
        while stack:
            prev_node = next(stack[-1], None)
            if prev_node is None:
                stack.pop()
                path.pop()
                continue
            path.append(prev_node)
            if prev_node == self.src:
                yield path[::-1]
                path.pop()
            else:
                stack.append(iter(self.pred[prev_node]))
