"""Main CLI entry point for graph6codec."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec.decoder import decode
from ..config import CodecConfig
from ..exceptions import Graph6Error
from .convert import FORMATS, read_inputs, render_graph

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the graph6codec CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="graph6codec",
        description="graph6codec: graph6/digraph6 Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graph6codec A_                       Print the adjacency matrix
  graph6codec --to dot '&AG'           Print a DOT digraph
  graph6codec --to net --file g.d6     Convert every line of a file to Pajek NET
  graph6codec --strict --to graph6 A`  Reject non-canonical padding
        """,
    )

    parser.add_argument(
        "graphs",
        nargs="*",
        metavar="GRAPH",
        help="graph6 or digraph6 string",
    )

    parser.add_argument(
        "--file",
        metavar="FILE",
        type=str,
        help="read one graph per line from FILE ('-' for stdin)",
    )

    parser.add_argument(
        "--to",
        choices=FORMATS,
        default="adjacency",
        help="output format (default: adjacency)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject nonzero padding bits and trailing characters",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"graph6codec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # If no input specified, show help
    if not args.graphs and args.file is None:
        parser.print_help()
        return 0

    try:
        inputs = read_inputs(args.graphs, args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = CodecConfig(strict=args.strict)
    separate = args.to == "adjacency" and len(inputs) > 1

    for index, text in enumerate(inputs):
        try:
            graph = decode(text, config=config)
        except Graph6Error as e:
            print(f"Error: input {index + 1} ({text!r}): {e}", file=sys.stderr)
            return 1

        logger.debug("Input %d: %d vertices, %d edges", index + 1, graph.n, graph.edge_count)
        label = index if len(inputs) > 1 else None
        if separate and index > 0:
            print()
        print(render_graph(graph, args.to, label=label, config=config), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
