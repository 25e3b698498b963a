"""Vertex-count prefix encoding.

graph6 stores the number of vertices in a single character: ``n + 63``.
Only counts 0-62 fit. The character 126 announces a multi-byte extended
header, which this package does not support.
"""

from __future__ import annotations

from ..exceptions import GraphTooLargeError, InvalidSizeCharError
from .constants import CHAR_OFFSET, EXTENDED_SIZE_MARKER, MAX_VERTICES


def decode_size(byte: int) -> int:
    """Decode the vertex count from a size character.

    Args:
        byte: Ordinal value of the size character

    Returns:
        Number of vertices (0-62)

    Raises:
        GraphTooLargeError: If byte is the extended-size marker (126)
        InvalidSizeCharError: If byte is below 63 or above 126

    Example:
        >>> decode_size(ord("A"))
        2
    """
    if byte == EXTENDED_SIZE_MARKER:
        raise GraphTooLargeError(
            "Size character 126 marks an extended size header; "
            f"graphs with more than {MAX_VERTICES} vertices are not supported"
        )
    if byte < CHAR_OFFSET or byte > EXTENDED_SIZE_MARKER:
        raise InvalidSizeCharError(
            f"Invalid size character {byte!r}: expected a value in "
            f"[{CHAR_OFFSET}, {EXTENDED_SIZE_MARKER - 1}]"
        )
    return byte - CHAR_OFFSET


def encode_size(n: int) -> str:
    """Encode a vertex count as its size character.

    Args:
        n: Number of vertices (0-62)

    Returns:
        Single-character string

    Raises:
        ValueError: If n is negative
        GraphTooLargeError: If n exceeds 62
    """
    if n < 0:
        raise ValueError(f"Vertex count must be non-negative, got {n}")
    if n > MAX_VERTICES:
        raise GraphTooLargeError(
            f"Cannot encode {n} vertices: at most {MAX_VERTICES} fit in one size character"
        )
    return chr(n + CHAR_OFFSET)
