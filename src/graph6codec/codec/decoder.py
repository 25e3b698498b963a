"""graph6/digraph6 decoder.

This module provides the decode() functions that turn a graph6 or digraph6
string into a Graph.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    GraphTooLargeError,
    InvalidCharacterError,
    InvalidDigraphHeaderError,
    NonCanonicalEncodingError,
    UnexpectedEndOfInputError,
)
from ..models.graph import Graph, GraphKind
from ..utils.sizing import data_bits, data_chars, prefix_length
from .bitpack import unpack_bits
from .constants import DIGRAPH6_HEADER, DIGRAPH_PREFIX, GRAPH6_HEADER
from .size import decode_size
from .triangle import expand

logger = logging.getLogger(__name__)

_HEADERS = (
    (DIGRAPH6_HEADER.encode("ascii"), True),
    (GRAPH6_HEADER.encode("ascii"), False),
)
_PREFIX_BYTE = ord(DIGRAPH_PREFIX)


def decode(text: str | bytes, config: CodecConfig | None = None) -> Graph:
    """Decode a graph6 or digraph6 string, detecting the kind.

    A leading ``&`` selects digraph6, anything else graph6. An optional
    ``>>graph6<<`` or ``>>digraph6<<`` file header is accepted and fixes the
    kind the rest of the string must have.

    Args:
        text: Encoded graph
        config: Codec options (strict mode, vertex limit)

    Returns:
        Decoded Graph

    Raises:
        DecodeError: If the string is malformed (see the subclasses in
            graph6codec.exceptions)

    Examples:
        ```python
        from graph6codec import decode

        graph = decode("A_")      # undirected, one edge
        digraph = decode("&AG")   # directed, edge 1 -> 0
        ```
    """
    data = _to_bytes(text)

    for header, directed in _HEADERS:
        if data.startswith(header):
            body = data[len(header) :]
            logger.debug("Stripped %s file header", header.decode("ascii"))
            return _decode_body(body, directed, config or DEFAULT_CONFIG)

    directed = data[:1] == DIGRAPH_PREFIX.encode("ascii")
    return _decode_body(data, directed, config or DEFAULT_CONFIG)


def decode_undirected(text: str | bytes, config: CodecConfig | None = None) -> Graph:
    """Decode a graph6 string into an undirected Graph.

    Args:
        text: Encoded graph, size character first
        config: Codec options

    Returns:
        Undirected Graph

    Raises:
        InvalidSizeCharError: If the first character is not a valid size
        GraphTooLargeError: If the size is the extended-size marker or above
            the configured limit
        UnexpectedEndOfInputError: If the data is shorter than the size requires
        InvalidCharacterError: If a data character is out of range
        NonCanonicalEncodingError: In strict mode, on nonzero padding or
            trailing characters
    """
    return _decode_body(_to_bytes(text), False, config or DEFAULT_CONFIG)


def decode_directed(text: str | bytes, config: CodecConfig | None = None) -> Graph:
    """Decode a digraph6 string into a directed Graph.

    Args:
        text: Encoded graph starting with ``&``
        config: Codec options

    Returns:
        Directed Graph

    Raises:
        InvalidDigraphHeaderError: If the string does not start with ``&``
        DecodeError: For the same body errors as decode_undirected()
    """
    return _decode_body(_to_bytes(text), True, config or DEFAULT_CONFIG)


def _to_bytes(text: str | bytes) -> bytes:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    try:
        return text.encode("ascii")
    except UnicodeEncodeError as e:
        raise InvalidCharacterError(f"graph6 strings are printable ASCII: {e}") from e


def _decode_body(data: bytes, directed: bool, config: CodecConfig) -> Graph:
    """Decode the size and data section of one graph.

    Args:
        data: Encoded graph without file header
        directed: Expect a digraph6 string
        config: Codec options

    Returns:
        Decoded Graph
    """
    if directed:
        if not data:
            raise UnexpectedEndOfInputError("Empty input: expected '&' and a size character")
        if data[0] != _PREFIX_BYTE:
            raise InvalidDigraphHeaderError(
                f"digraph6 string must start with {DIGRAPH_PREFIX!r}, got {chr(data[0])!r}"
            )

    offset = prefix_length(directed)
    if len(data) < offset:
        raise UnexpectedEndOfInputError("Input ends before the size character")

    n = decode_size(data[offset - 1])
    if n > config.max_vertices:
        raise GraphTooLargeError(
            f"Graph has {n} vertices, more than the configured limit of {config.max_vertices}"
        )

    length = data_bits(n, directed)
    body = data[offset:]
    bits = unpack_bits(body, length, strict=config.strict)

    trailing = len(body) - data_chars(n, directed)
    if trailing > 0:
        if config.strict:
            raise NonCanonicalEncodingError(
                f"{trailing} unexpected character(s) after the data section"
            )
        logger.debug("Ignoring %d trailing character(s) after the data section", trailing)

    logger.debug(
        "Decoded %s graph with %d vertices from %d data bits",
        "directed" if directed else "undirected",
        n,
        length,
    )

    if directed:
        return Graph(kind=GraphKind.DIRECTED, n=n, bit_vec=bits)
    return Graph(kind=GraphKind.UNDIRECTED, n=n, bit_vec=expand(bits, n))
