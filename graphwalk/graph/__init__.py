"""Graph contract and storage.

This package provides the abstract `GraphView` contract, the networkx-backed
`UndirectedGraph` and `Digraph` implementations, DOT export (`io`) and
NetworkX interop (`nx`).
"""

from graphwalk.graph.view import GraphView
from graphwalk.graph.adjacency import AdjacencyGraph, Digraph, UndirectedGraph

__all__ = ["GraphView", "AdjacencyGraph", "UndirectedGraph", "Digraph"]
