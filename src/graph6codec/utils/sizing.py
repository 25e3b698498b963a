"""Encoded size calculation utilities.

This module provides functions to calculate the length of a graph6/digraph6
string without actually encoding it.
"""

from __future__ import annotations

from ..codec.bitpack import chars_for_bits
from ..codec.constants import BITS_PER_CHAR, DIGRAPH6_HEADER, GRAPH6_HEADER
from ..codec.triangle import triangle_length
from ..models.graph import Graph


def data_bits(n: int, directed: bool) -> int:
    """Return the number of data bits transmitted for a graph on n vertices.

    Directed graphs send the full n×n matrix, undirected graphs only the
    ``n*(n-1)/2`` entries of one triangle.

    Example:
        >>> data_bits(3, directed=False)
        3
        >>> data_bits(3, directed=True)
        9
    """
    if n < 0:
        raise ValueError(f"Vertex count must be non-negative, got {n}")
    return n * n if directed else triangle_length(n)


def data_chars(n: int, directed: bool) -> int:
    """Return the number of data characters for a graph on n vertices."""
    return chars_for_bits(data_bits(n, directed))


def prefix_length(directed: bool) -> int:
    """Return the number of characters before the data: '&' (digraphs) plus the size."""
    return 2 if directed else 1


def encoded_bits(graph: Graph) -> int:
    """Calculate the number of data bits of a graph, excluding padding.

    Example:
        >>> encoded_bits(decode("Bw"))
        3
    """
    return data_bits(graph.n, graph.is_directed)


def padding_bits(graph: Graph) -> int:
    """Calculate the number of zero bits appended to fill the last data character."""
    return (-encoded_bits(graph)) % BITS_PER_CHAR


def encoded_size(graph: Graph, header: bool = False) -> int:
    """Calculate the length of the encoded string of a graph.

    Args:
        graph: Graph to measure
        header: Count the optional ``>>graph6<<``/``>>digraph6<<`` file header

    Returns:
        Number of characters

    Example:
        >>> encoded_size(decode("&AG"))
        3
    """
    size = prefix_length(graph.is_directed) + data_chars(graph.n, graph.is_directed)
    if header:
        size += len(DIGRAPH6_HEADER if graph.is_directed else GRAPH6_HEADER)
    return size
