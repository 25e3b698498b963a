"""Graph conversion CLI helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

from ..codec.encoder import encode
from ..config import CodecConfig
from ..formats.projections import to_adjacency_text, to_graph_description, to_pajek_net
from ..models.graph import Graph

FORMATS = ("adjacency", "dot", "net", "graph6")


def read_inputs(graphs: Iterable[str], file: str | None = None) -> list[str]:
    """Collect encoded graphs from the command line and an optional file.

    Args:
        graphs: Encoded graphs given as arguments
        file: Path with one encoded graph per line, or ``-`` for stdin

    Returns:
        Encoded graphs with line terminators stripped and blank lines removed

    Raises:
        FileNotFoundError: If file does not exist
    """
    lines = list(graphs)

    if file is not None:
        if file == "-":
            lines.extend(sys.stdin.read().splitlines())
        else:
            file_path = Path(file)
            if not file_path.exists():
                raise FileNotFoundError(f"File not found: {file_path}")
            lines.extend(file_path.read_text(encoding="ascii").splitlines())

    return [line.strip() for line in lines if line.strip()]


def render_graph(
    graph: Graph,
    fmt: str,
    label: int | None = None,
    config: CodecConfig | None = None,
) -> str:
    """Render a decoded graph in the requested output format.

    Args:
        graph: Decoded graph
        fmt: One of FORMATS
        label: DOT graph label (ignored by other formats)
        config: Codec options used when re-encoding to graph6

    Returns:
        Rendered text, always ending with a newline
    """
    if fmt == "adjacency":
        return to_adjacency_text(graph)
    if fmt == "dot":
        return to_graph_description(graph, label) + "\n"
    if fmt == "net":
        return to_pajek_net(graph)
    if fmt == "graph6":
        return encode(graph, config=config) + "\n"
    raise ValueError(f"Unknown output format {fmt!r}, expected one of {', '.join(FORMATS)}")
