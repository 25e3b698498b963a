#!/usr/bin/env python3
"""Basic usage example for graph6codec.

This example demonstrates:
1. Decoding graph6 and digraph6 strings
2. Building a graph from an adjacency matrix and encoding it
3. Rendering a graph as DOT and Pajek NET
4. Strict decoding of non-canonical input
"""

from __future__ import annotations

from graph6codec import (
    CodecConfig,
    Graph,
    NonCanonicalEncodingError,
    decode,
    encode,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("graph6codec Basic Usage Example")
    print("=" * 60)
    print()

    # Decode the Petersen graph
    print("1. Decoding the Petersen graph...")
    petersen = decode("IheA@GUAo")
    print(f"   Vertices: {petersen.n}")
    print(f"   Edges: {petersen.edge_count}")
    print(f"   Encoded size: {encoded_size(petersen)} characters")
    print()

    # Build a digraph from a matrix
    print("2. Encoding a directed 3-cycle...")
    cycle = Graph.from_adjacency([0, 1, 0, 0, 0, 1, 1, 0, 0], directed=True)
    encoded = encode(cycle)
    print(f"   digraph6: {encoded}")
    print(f"   Round trip OK: {decode(encoded) == cycle}")
    print()

    # Projections
    print("3. DOT output:")
    print(cycle.to_dot(label=1))
    print()
    print("   Pajek NET output:")
    print(cycle.to_pajek_net(), end="")
    print()

    # Strict mode
    print("4. Strict decoding of 'A`' (nonzero padding bits)...")
    print(f"   Lenient decode re-encodes as: {encode(decode('A`'))}")
    try:
        decode("A`", config=CodecConfig(strict=True))
    except NonCanonicalEncodingError as e:
        print(f"   Strict decode rejected it: {e}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
