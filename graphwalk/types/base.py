"""Base aliases and enums shared by graphwalk algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List

#: A vertex is identified by its dense index in ``[0, vertex_count)``.
VertexID = int

#: Ordered vertex sequence, source first.
Path = List[VertexID]

#: Per-vertex callback used by the eager traversals. Return value is ignored.
Visitor = Callable[[VertexID], object]


class CutVertexStatus(IntEnum):
    """Outcome of a relative cut-vertex search between two vertices."""

    #: At least one interior vertex is indispensable for reachability.
    FOUND = 1
    #: A path exists, but no single interior vertex removal breaks it.
    NO_CUT_VERTEX = 2
    #: The target is not reachable from the source at all.
    UNREACHABLE = 3


class CommonVertexStatus(IntEnum):
    """Outcome of a common-vertex search over all shortest paths."""

    #: Several shortest paths exist; their shared interior vertices are reported.
    MULTIPLE_PATHS = 1
    #: Exactly one shortest path exists.
    SINGLE_PATH = 2
    #: The target is not reachable from the source at all.
    UNREACHABLE = 3
