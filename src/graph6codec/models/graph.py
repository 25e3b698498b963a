"""Graph model holding a flattened adjacency matrix.

This module provides the immutable Graph value produced by the decoder and
consumed by the encoder and the format projections.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import InvalidAdjacencyMatrixError

if TYPE_CHECKING:
    from ..config import CodecConfig

logger = logging.getLogger(__name__)


class GraphKind(str, enum.Enum):
    """Kind of graph, selecting the packing scheme and the '&' prefix."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Graph(BaseModel):
    """A directed or undirected graph on vertices ``0..n-1``.

    ``bit_vec`` is the row-major n×n adjacency matrix: entry ``i*n + j`` is 1
    iff there is an edge from i to j. Undirected graphs are symmetric with an
    empty diagonal.

    Example:
        >>> from graph6codec import decode
        >>> graph = decode("A_")
        >>> graph.n, graph.bit_vec
        (2, (0, 1, 1, 0))
        >>> list(graph.edges())
        [(0, 1)]

    Attributes:
        kind: Directed or undirected
        n: Number of vertices
        bit_vec: Flattened adjacency matrix of length n*n
    """

    model_config = ConfigDict(
        # Graphs are values: immutable and hashable
        frozen=True,
        extra="forbid",
    )

    kind: GraphKind
    n: int = Field(ge=0)
    bit_vec: tuple[int, ...]

    @model_validator(mode="after")
    def check_matrix(self) -> Graph:
        n = self.n
        bits = self.bit_vec
        if n * n != len(bits):
            raise ValueError(f"bit_vec has {len(bits)} entries, expected n*n = {n * n}")
        if any(bit not in (0, 1) for bit in bits):
            raise ValueError("bit_vec entries must be 0 or 1")
        if self.kind is GraphKind.UNDIRECTED:
            for i in range(n):
                if bits[i * n + i]:
                    raise ValueError(f"Undirected graph has a self-loop at vertex {i}")
                for j in range(i):
                    if bits[i * n + j] != bits[j * n + i]:
                        raise ValueError(
                            f"Undirected matrix is not symmetric at ({i}, {j})"
                        )
        return self

    @classmethod
    def from_adjacency(cls, matrix: Sequence[int], directed: bool = False) -> Graph:
        """Create a graph from a flattened adjacency matrix.

        The vertex count is the square root of the matrix length. For undirected
        graphs the matrix does not need to be symmetric: an edge is present if
        either ``matrix[i*n + j]`` or ``matrix[j*n + i]`` is set. Diagonal entries
        cannot be represented in graph6 and are dropped.

        Args:
            matrix: Row-major n×n matrix of 0/1 values
            directed: Build a directed graph instead of an undirected one

        Returns:
            Graph instance

        Raises:
            InvalidAdjacencyMatrixError: If the length is not a perfect square
                or an entry is not 0 or 1
        """
        length = len(matrix)
        n = math.isqrt(length)
        if n * n != length:
            raise InvalidAdjacencyMatrixError(
                f"Adjacency matrix of length {length} is not square"
            )
        if any(value not in (0, 1) for value in matrix):
            raise InvalidAdjacencyMatrixError("Adjacency matrix entries must be 0 or 1")

        bits = [int(value) for value in matrix]

        if directed:
            return cls(kind=GraphKind.DIRECTED, n=n, bit_vec=tuple(bits))

        loops = [i for i in range(n) if bits[i * n + i]]
        if loops:
            logger.warning("Dropping self-loops at vertices %s from undirected graph", loops)
            for i in loops:
                bits[i * n + i] = 0

        for i in range(1, n):
            for j in range(i):
                value = bits[i * n + j] | bits[j * n + i]
                bits[i * n + j] = value
                bits[j * n + i] = value

        return cls(kind=GraphKind.UNDIRECTED, n=n, bit_vec=tuple(bits))

    @property
    def is_directed(self) -> bool:
        """True for digraph6 graphs."""
        return self.kind is GraphKind.DIRECTED

    def size(self) -> int:
        """Return the number of vertices."""
        return self.n

    def bits(self) -> tuple[int, ...]:
        """Return the flattened adjacency matrix."""
        return self.bit_vec

    def has_edge(self, i: int, j: int) -> bool:
        """Return True if there is an edge from vertex i to vertex j.

        Raises:
            IndexError: If either vertex is out of range
        """
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"Vertex pair ({i}, {j}) out of range for {self.n} vertices")
        return self.bit_vec[i * self.n + j] == 1

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield edges in row-major order.

        Undirected edges are yielded once, as ``(i, j)`` with ``i < j``.
        """
        n = self.n
        for i in range(n):
            start = 0 if self.is_directed else i + 1
            for j in range(start, n):
                if self.bit_vec[i * n + j]:
                    yield i, j

    @property
    def edge_count(self) -> int:
        """Number of edges (undirected edges counted once)."""
        return sum(1 for _ in self.edges())

    # Conversions

    def to_graph6(self, config: CodecConfig | None = None) -> str:
        """Encode this graph as a graph6/digraph6 string."""
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self, config=config)

    def to_adjacency_text(self) -> str:
        """Return the adjacency matrix as text rows."""
        from ..formats.projections import to_adjacency_text

        return to_adjacency_text(self)

    def to_graph_description(self, label: int | str | None = None) -> str:
        """Return the graph in DOT format."""
        from ..formats.projections import to_graph_description

        return to_graph_description(self, label)

    to_dot = to_graph_description

    def to_pajek_net(self) -> str:
        """Return the graph in Pajek NET format."""
        from ..formats.projections import to_pajek_net

        return to_pajek_net(self)
