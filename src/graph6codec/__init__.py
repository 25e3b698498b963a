"""graph6codec: graph6/digraph6 Codec

A Python library for the graph6 and digraph6 text encodings of graphs: compact,
printable-ASCII strings that store an adjacency matrix six bits per character.

Format reference: https://users.cecs.anu.edu.au/~bdm/data/formats.txt

Key Features:
- Bit-exact graph6 (undirected) and digraph6 (directed) encoding and decoding
- Immutable Pydantic-based Graph model over a flattened adjacency matrix
- Strict mode rejecting non-canonical encodings
- Adjacency-matrix, DOT and Pajek NET projections

Quick Start:
    >>> from graph6codec import Graph, decode, encode
    >>>
    >>> graph = decode("Bw")
    >>> graph.n
    3
    >>> list(graph.edges())
    [(0, 1), (0, 2), (1, 2)]
    >>> encode(Graph.from_adjacency([0, 0, 1, 0], directed=True))
    '&AG'
"""

from __future__ import annotations

from .codec import (
    collapse,
    decode,
    decode_directed,
    decode_size,
    decode_undirected,
    encode,
    encode_directed,
    encode_size,
    encode_undirected,
    expand,
    pack_bits,
    unpack_bits,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    Graph6Error,
    GraphTooLargeError,
    InvalidAdjacencyMatrixError,
    InvalidCharacterError,
    InvalidDigraphHeaderError,
    InvalidSizeCharError,
    NonCanonicalEncodingError,
    UnexpectedEndOfInputError,
)
from .formats import to_adjacency_text, to_dot, to_graph_description, to_pajek_net
from .models import Graph, GraphKind
from .utils import encoded_bits, encoded_size

__version__ = "0.1.0"

from_adjacency = Graph.from_adjacency

__all__ = [
    # Core API
    "Graph",
    "GraphKind",
    "from_adjacency",
    "encode",
    "encode_directed",
    "encode_undirected",
    "decode",
    "decode_directed",
    "decode_undirected",
    # Primitives
    "decode_size",
    "encode_size",
    "pack_bits",
    "unpack_bits",
    "expand",
    "collapse",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "Graph6Error",
    "DecodeError",
    "EncodeError",
    "InvalidDigraphHeaderError",
    "InvalidSizeCharError",
    "GraphTooLargeError",
    "UnexpectedEndOfInputError",
    "NonCanonicalEncodingError",
    "InvalidCharacterError",
    "InvalidAdjacencyMatrixError",
    # Projections
    "to_adjacency_text",
    "to_graph_description",
    "to_dot",
    "to_pajek_net",
    # Sizing
    "encoded_size",
    "encoded_bits",
    # Version
    "__version__",
]
