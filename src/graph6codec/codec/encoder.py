"""graph6/digraph6 encoder.

This module provides the encode() function that converts a Graph into its
canonical graph6 or digraph6 string.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import InvalidAdjacencyMatrixError
from ..models.graph import Graph
from .bitpack import pack_bits
from .constants import DIGRAPH6_HEADER, DIGRAPH_PREFIX, GRAPH6_HEADER
from .size import encode_size
from .triangle import collapse

logger = logging.getLogger(__name__)


def encode(graph: Graph, config: CodecConfig | None = None) -> str:
    """Encode a graph as a graph6 (undirected) or digraph6 (directed) string.

    Directed graphs transmit the whole adjacency matrix, undirected graphs
    only one triangle of it. The data bits are zero-padded to a multiple of
    six, so the result is always canonical.

    Args:
        graph: Graph to encode
        config: Codec options (write_header)

    Returns:
        Encoded string

    Raises:
        GraphTooLargeError: If the graph has more than 62 vertices

    Examples:
        ```python
        from graph6codec import Graph, encode

        graph = Graph.from_adjacency([0, 0, 1, 0], directed=True)
        encode(graph)  # '&AG'
        ```
    """
    config = config or DEFAULT_CONFIG

    size_char = encode_size(graph.n)

    if graph.is_directed:
        bits = graph.bit_vec
    else:
        bits = collapse(graph.bit_vec, graph.n)

    parts = []
    if config.write_header:
        parts.append(DIGRAPH6_HEADER if graph.is_directed else GRAPH6_HEADER)
    if graph.is_directed:
        parts.append(DIGRAPH_PREFIX)
    parts.append(size_char)
    parts.append(pack_bits(bits))

    encoded = "".join(parts)
    logger.debug("Encoded graph with %d vertices into %d characters", graph.n, len(encoded))
    return encoded


def encode_directed(
    n: int, matrix: Sequence[int], config: CodecConfig | None = None
) -> str:
    """Encode a flattened n×n adjacency matrix as a digraph6 string.

    Args:
        n: Number of vertices
        matrix: Row-major adjacency matrix of length n*n
        config: Codec options

    Returns:
        Encoded string starting with ``&``

    Raises:
        InvalidAdjacencyMatrixError: If the matrix is not n×n or has entries
            other than 0 and 1
        GraphTooLargeError: If n exceeds 62

    Example:
        >>> encode_directed(2, [0, 0, 1, 0])
        '&AG'
    """
    return encode(_graph_from_matrix(n, matrix, directed=True), config=config)


def encode_undirected(
    n: int, matrix: Sequence[int], config: CodecConfig | None = None
) -> str:
    """Encode a flattened n×n adjacency matrix as a graph6 string.

    The matrix is symmetrised (an edge is kept if either direction is set) and
    its diagonal is dropped.

    Example:
        >>> encode_undirected(2, [0, 1, 0, 0])
        'A_'
    """
    return encode(_graph_from_matrix(n, matrix, directed=False), config=config)


def _graph_from_matrix(n: int, matrix: Sequence[int], directed: bool) -> Graph:
    graph = Graph.from_adjacency(matrix, directed=directed)
    if graph.n != n:
        raise InvalidAdjacencyMatrixError(
            f"Matrix of length {len(matrix)} describes {graph.n} vertices, not {n}"
        )
    return graph
