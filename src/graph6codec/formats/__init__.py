"""Text format projections for graph6codec.

This module provides adjacency-matrix, DOT and Pajek NET renderings of a Graph.
"""

from __future__ import annotations

from .projections import to_adjacency_text, to_dot, to_graph_description, to_pajek_net

__all__ = [
    "to_adjacency_text",
    "to_graph_description",
    "to_dot",
    "to_pajek_net",
]
