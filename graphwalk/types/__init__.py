"""Shared aliases, enums and result containers."""

from graphwalk.types.base import (
    CommonVertexStatus,
    CutVertexStatus,
    Path,
    VertexID,
    Visitor,
)
from graphwalk.types.dto import CommonVertexResult, CutVertexResult

__all__ = [
    "VertexID",
    "Path",
    "Visitor",
    "CutVertexStatus",
    "CommonVertexStatus",
    "CutVertexResult",
    "CommonVertexResult",
]
