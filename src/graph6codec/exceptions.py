"""Exception hierarchy for graph6codec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Graph6Error for easy catching of any codec-specific error.
"""

from __future__ import annotations


class Graph6Error(Exception):
    """Base exception for all graph6codec errors."""

    pass


class DecodeError(Graph6Error):
    """Raised when a graph6/digraph6 string cannot be decoded.

    Examples:
        - Size character outside the valid range
        - Truncated data (fewer characters than the size requires)
        - Nonzero padding bits in strict mode
    """

    pass


class EncodeError(Graph6Error):
    """Raised when a graph cannot be encoded.

    Examples:
        - Vertex count beyond the single-character size range
    """

    pass


class InvalidDigraphHeaderError(DecodeError):
    """Raised when digraph6 parsing is requested but the string lacks the '&' prefix."""

    pass


class InvalidSizeCharError(DecodeError):
    """Raised when the size character is not a valid encoded vertex count."""

    pass


class GraphTooLargeError(DecodeError, EncodeError):
    """Raised when a graph has more vertices than the single-character size allows.

    On decode this means the size character is the reserved extended-size
    marker (126) or the count exceeds the configured limit. On encode it means
    the graph has more than 62 vertices.
    """

    pass


class UnexpectedEndOfInputError(DecodeError):
    """Raised when the input ends before all data characters were read."""

    pass


class NonCanonicalEncodingError(DecodeError):
    """Raised in strict mode when the encoding is not byte-for-byte canonical.

    Examples:
        - Nonzero padding bits in the final data character
        - Extra characters after the data section
    """

    pass


class InvalidCharacterError(DecodeError):
    """Raised when a data character falls outside the printable range [63, 126]."""

    pass


class InvalidAdjacencyMatrixError(Graph6Error, ValueError):
    """Raised when a flattened adjacency matrix cannot describe a graph.

    Examples:
        - Length is not a perfect square
        - Entries other than 0 and 1
        - Declared vertex count disagrees with the matrix length
    """

    pass
