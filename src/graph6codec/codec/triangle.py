"""Mapping between an undirected adjacency matrix and its transmitted triangle.

Undirected graph6 data only carries the upper triangle of the matrix, read
column by column. Indexed as (i, j) with i > j that is the row-by-row order
(1, 0), (2, 0), (2, 1), (3, 0), ... Symmetry of the expanded
matrix follows from writing every value to both (i, j) and (j, i).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def triangle_length(n: int) -> int:
    """Return the number of entries strictly below the diagonal of an n×n matrix."""
    return n * (n - 1) // 2


def triangle_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Yield ``(i, j)`` with ``i > j`` in transmission order."""
    for i in range(1, n):
        for j in range(i):
            yield i, j


def expand(triangle: Sequence[int], n: int) -> tuple[int, ...]:
    """Build the full symmetric n×n matrix from a lower-triangle bit sequence.

    Args:
        triangle: ``n*(n-1)/2`` bits in transmission order
        n: Number of vertices

    Returns:
        Flattened row-major matrix with a zero diagonal

    Raises:
        ValueError: If the triangle length does not match n
    """
    if len(triangle) != triangle_length(n):
        raise ValueError(
            f"Triangle for {n} vertices needs {triangle_length(n)} bits, got {len(triangle)}"
        )

    matrix = [0] * (n * n)
    for (i, j), value in zip(triangle_pairs(n), triangle):
        matrix[i * n + j] = value
        matrix[j * n + i] = value
    return tuple(matrix)


def collapse(matrix: Sequence[int], n: int) -> tuple[int, ...]:
    """Extract the lower-triangle bits of a flattened n×n matrix.

    Args:
        matrix: Flattened row-major matrix of length n*n
        n: Number of vertices

    Returns:
        ``n*(n-1)/2`` bits in transmission order

    Raises:
        ValueError: If the matrix length does not match n
    """
    if len(matrix) != n * n:
        raise ValueError(f"Matrix for {n} vertices needs {n * n} entries, got {len(matrix)}")

    return tuple(matrix[i * n + j] for i, j in triangle_pairs(n))
