"""Result containers for the bottleneck analyses.

Each result carries an explicit status tag instead of mixing sentinel values
into the vertex collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from graphwalk.types.base import CommonVertexStatus, CutVertexStatus, VertexID


@dataclass(frozen=True)
class CutVertexResult:
    """Result of ``find_cut_vertices``.

    Attributes:
        status: Outcome tag.
        vertices: Indispensable vertices in route order from the source.
            Empty unless ``status`` is ``FOUND``.
    """

    status: CutVertexStatus
    vertices: Tuple[VertexID, ...] = ()

    def __bool__(self) -> bool:
        return self.status == CutVertexStatus.FOUND

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.name, "vertices": list(self.vertices)}


@dataclass(frozen=True)
class CommonVertexResult:
    """Result of ``find_common_vertices``.

    Attributes:
        status: Outcome tag.
        vertices: Sorted interior vertices shared by every shortest path.
            May be empty even when ``status`` is ``MULTIPLE_PATHS``.
        path_count: Number of distinct shortest paths found.
    """

    status: CommonVertexStatus
    vertices: Tuple[VertexID, ...] = ()
    path_count: int = 0

    def __bool__(self) -> bool:
        return bool(self.vertices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.name,
            "vertices": list(self.vertices),
            "path_count": self.path_count,
        }
