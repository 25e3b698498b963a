"""Unit tests for the Graph model."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from graph6codec import Graph, GraphKind, InvalidAdjacencyMatrixError, decode, from_adjacency


class TestFromAdjacency:
    """Test construction from a flattened matrix."""

    def test_directed(self) -> None:
        """Test that directed matrices are kept as given."""
        graph = Graph.from_adjacency([0, 0, 1, 0], directed=True)
        assert graph.kind is GraphKind.DIRECTED
        assert graph.n == 2
        assert graph.bit_vec == (0, 0, 1, 0)

    def test_undirected_symmetrised(self) -> None:
        """Test that an edge in either direction becomes symmetric."""
        graph = Graph.from_adjacency([0, 0, 1, 0])
        assert graph.bit_vec == (0, 1, 1, 0)

    def test_undirected_drops_self_loops(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that diagonal entries are removed with a warning."""
        with caplog.at_level(logging.WARNING, logger="graph6codec.models.graph"):
            graph = Graph.from_adjacency([1, 1, 0, 0])
        assert graph.bit_vec == (0, 1, 1, 0)
        assert "self-loops" in caplog.text

    def test_directed_keeps_self_loops(self) -> None:
        """Test that digraphs keep diagonal entries."""
        graph = Graph.from_adjacency([1, 0, 0, 1], directed=True)
        assert graph.has_edge(0, 0)
        assert graph.has_edge(1, 1)

    def test_non_square(self) -> None:
        """Test a matrix of length 5."""
        with pytest.raises(InvalidAdjacencyMatrixError, match="not square"):
            Graph.from_adjacency([0, 1, 1, 0, 0])

    def test_invalid_entries(self) -> None:
        """Test entries other than 0 and 1."""
        with pytest.raises(InvalidAdjacencyMatrixError, match="0 or 1"):
            Graph.from_adjacency([0, 2, 2, 0])

    def test_booleans(self) -> None:
        """Test that booleans are accepted and stored as ints."""
        graph = Graph.from_adjacency([False, True, True, False])
        assert graph.bit_vec == (0, 1, 1, 0)

    def test_module_alias(self) -> None:
        """Test the top-level from_adjacency alias."""
        assert from_adjacency([0, 1, 1, 0]) == decode("A_")

    def test_invalid_matrix_is_value_error(self) -> None:
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            Graph.from_adjacency([0, 0, 0])


class TestValidation:
    """Test model invariants on direct construction."""

    def test_length_mismatch(self) -> None:
        """Test that n*n must equal the matrix length."""
        with pytest.raises(ValidationError, match="expected n\\*n"):
            Graph(kind=GraphKind.DIRECTED, n=3, bit_vec=(0, 0, 1, 0))

    def test_asymmetric_undirected(self) -> None:
        """Test that undirected matrices must be symmetric."""
        with pytest.raises(ValidationError, match="not symmetric"):
            Graph(kind=GraphKind.UNDIRECTED, n=2, bit_vec=(0, 0, 1, 0))

    def test_undirected_self_loop(self) -> None:
        """Test that undirected matrices must have an empty diagonal."""
        with pytest.raises(ValidationError, match="self-loop"):
            Graph(kind=GraphKind.UNDIRECTED, n=1, bit_vec=(1,))

    def test_negative_n(self) -> None:
        """Test that the vertex count is non-negative."""
        with pytest.raises(ValidationError):
            Graph(kind=GraphKind.DIRECTED, n=-1, bit_vec=())

    def test_kind_from_string(self) -> None:
        """Test that the kind can be given by value."""
        graph = Graph(kind="directed", n=1, bit_vec=(1,))
        assert graph.kind is GraphKind.DIRECTED

    def test_immutable(self, complete_k4: Graph) -> None:
        """Test that graphs cannot be modified."""
        with pytest.raises(ValidationError):
            complete_k4.n = 5  # type: ignore[misc]


class TestAccessors:
    """Test read-only accessors."""

    def test_size_and_bits(self, single_arc: Graph) -> None:
        """Test the size()/bits()/is_directed interface."""
        assert single_arc.size() == 2
        assert single_arc.bits() == (0, 0, 1, 0)
        assert single_arc.is_directed

    def test_has_edge(self, single_arc: Graph) -> None:
        """Test arc lookup."""
        assert single_arc.has_edge(1, 0)
        assert not single_arc.has_edge(0, 1)

    def test_has_edge_out_of_range(self, single_arc: Graph) -> None:
        """Test vertex bounds."""
        with pytest.raises(IndexError):
            single_arc.has_edge(0, 2)

    def test_edges_undirected(self, complete_k4: Graph) -> None:
        """Test that undirected edges are listed once."""
        assert list(complete_k4.edges()) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        assert complete_k4.edge_count == 6

    def test_edges_directed(self) -> None:
        """Test that every arc is listed."""
        graph = decode("&C]|w")
        assert graph.edge_count == 12
        assert (1, 0) in list(graph.edges())

    def test_symmetry_invariant(self, petersen_g6: str) -> None:
        """Test symmetry and empty diagonal of a decoded graph."""
        graph = decode(petersen_g6)
        n = graph.n
        for i in range(n):
            assert graph.bit_vec[i * n + i] == 0
            for j in range(n):
                assert graph.bit_vec[i * n + j] == graph.bit_vec[j * n + i]


class TestEquality:
    """Test value semantics."""

    def test_equal_graphs(self) -> None:
        """Test that equal matrices compare equal."""
        assert decode("A_") == Graph.from_adjacency([0, 1, 1, 0])

    def test_kind_matters(self) -> None:
        """Test that a digraph never equals a graph."""
        assert decode("&A_") != Graph.from_adjacency([0, 1, 1, 0])

    def test_hashable(self) -> None:
        """Test that graphs can be used in sets."""
        assert len({decode("A_"), decode("A_"), decode("A?")}) == 2
