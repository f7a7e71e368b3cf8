"""NetworkX graph conversion utilities.

graphwalk algorithms work on dense integer vertices. These helpers convert
any NetworkX graph with arbitrary hashable node names into a graphwalk graph
and keep the name/index mapping for interpreting results.

Example:
    >>> import networkx as nx
    >>> from graphwalk.graph.nx import from_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B")
    >>> G.add_edge("B", "C")
    >>> graph, node_map = from_networkx(G)
    >>> path = graph.find_shortest_path(node_map.to_index["A"], node_map.to_index["C"])
    >>> [node_map.to_name[v] for v in path]
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from graphwalk.graph.adjacency import AdjacencyGraph, Digraph, UndirectedGraph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, vertices: List[int]) -> List[Hashable]:
        """Translate a vertex sequence (e.g. a path) back to node names."""
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(G: NxGraph) -> Tuple[AdjacencyGraph, NodeMap]:
    """Convert a NetworkX graph to a graphwalk graph.

    Node names are sorted by their string form so indices are deterministic.
    Directed inputs become a `Digraph`, undirected ones an `UndirectedGraph`.
    Parallel edges of multigraphs are preserved; edge attributes are dropped.

    Args:
        G: NetworkX Graph, DiGraph, MultiGraph or MultiDiGraph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph_cls = Digraph if G.is_directed() else UndirectedGraph
    graph = graph_cls(len(node_map))
    for u, v in G.edges():
        graph.add_edge(node_map.to_index[u], node_map.to_index[v])
    return graph, node_map


def to_networkx(
    graph: AdjacencyGraph, node_map: Optional[NodeMap] = None
) -> NxGraph:
    """Convert a graphwalk graph back to a NetworkX multigraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original node names. Without it
            nodes are labeled with their vertex indices.

    Returns:
        `networkx.MultiDiGraph` for directed graphs, `networkx.MultiGraph`
        otherwise. Undirected edges appear once.
    """
    G = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()

    def name(v: int) -> Hashable:
        return node_map.to_name.get(v, v) if node_map is not None else v

    G.add_nodes_from(name(v) for v in range(graph.vertex_count()))
    for u, v in graph.nx_graph.edges():
        G.add_edge(name(u), name(v))
    return G
