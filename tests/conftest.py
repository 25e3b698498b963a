"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from graph6codec import Graph, decode


@pytest.fixture
def petersen_g6() -> str:
    """graph6 encoding of the Petersen graph."""
    return "IheA@GUAo"


@pytest.fixture
def complete_k4() -> Graph:
    """Undirected complete graph on four vertices."""
    return decode("C~")


@pytest.fixture
def single_arc() -> Graph:
    """Two-vertex digraph with the single arc 1 -> 0."""
    return decode("&AG")
