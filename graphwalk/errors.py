"""Exception types raised by graphwalk.

Only structural misuse raises. Reachability outcomes (no path, a single
path, no cut vertex) are ordinary results and never surface here.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for graphwalk errors."""


class VertexIndexError(GraphError, IndexError):
    """A vertex argument is outside ``[0, vertex_count)``.

    Attributes:
        vertex: The offending value as passed by the caller.
        vertex_count: Number of vertices in the graph at the time of the call.
    """

    def __init__(self, vertex: Any, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} is out of range for a graph with "
            f"{vertex_count} vertices (expected 0 <= v < {vertex_count})."
        )


class EdgeNotFoundError(GraphError, ValueError):
    """No edge exists between the given vertices."""

    def __init__(self, v1: int, v2: int) -> None:
        self.v1 = v1
        self.v2 = v2
        super().__init__(f"No edges between {v1} and {v2} to remove.")
