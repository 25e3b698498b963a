"""Text projections of a decoded graph.

Each function is a read-only view over a Graph's adjacency matrix:
plain matrix rows, a DOT graph description, and Pajek NET.
"""

from __future__ import annotations

from ..models.graph import Graph


def to_adjacency_text(graph: Graph) -> str:
    """Return the adjacency matrix as space-separated rows.

    Example:
        >>> to_adjacency_text(decode("A_"))
        '0 1\\n1 0\\n'
    """
    n = graph.n
    bits = graph.bit_vec
    rows = []
    for i in range(n):
        rows.append(" ".join(str(bit) for bit in bits[i * n : (i + 1) * n]) + "\n")
    return "".join(rows)


def to_graph_description(graph: Graph, label: int | str | None = None) -> str:
    """Return the graph in DOT format.

    Undirected graphs list each edge once (``i -- j`` with ``i <= j``);
    directed graphs list every arc (``i -> j``).

    Args:
        graph: Graph to describe
        label: Optional identifier, rendered as ``graph_<label>``

    Returns:
        DOT source without a trailing newline

    Example:
        >>> to_graph_description(decode("&AG"), label=1)
        'digraph graph_1 {\\n1 -> 0;\\n}'
    """
    n = graph.n
    bits = graph.bit_vec

    keyword = "digraph" if graph.is_directed else "graph"
    name = f"graph_{label} " if label is not None else ""
    connector = "->" if graph.is_directed else "--"

    parts = [f"{keyword} {name}{{"]
    for i in range(n):
        start = 0 if graph.is_directed else i
        for j in range(start, n):
            if bits[i * n + j] == 1:
                parts.append(f"\n{i} {connector} {j};")
    parts.append("\n}")
    return "".join(parts)


to_dot = to_graph_description


def to_pajek_net(graph: Graph) -> str:
    """Return the graph in Pajek NET format.

    Vertices are numbered from 1 and labelled with their 0-based index. Every
    set matrix entry becomes an arc, so undirected edges appear in both
    directions.

    Example:
        >>> print(to_pajek_net(decode("&AG")), end="")
        *Vertices 2
        1 "0"
        2 "1"
        *Arcs
        2 1
    """
    n = graph.n
    bits = graph.bit_vec

    lines = [f"*Vertices {n}\n"]
    for i in range(n):
        lines.append(f'{i + 1} "{i}"\n')
    lines.append("*Arcs\n")
    for i in range(n):
        for j in range(n):
            if bits[i * n + j] == 1:
                lines.append(f"{i + 1} {j + 1}\n")
    return "".join(lines)
