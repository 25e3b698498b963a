"""Graph model for graph6codec."""

from __future__ import annotations

from .graph import Graph, GraphKind

__all__ = [
    "Graph",
    "GraphKind",
]
