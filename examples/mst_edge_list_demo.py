"""MST example: minimum spanning tree of a graph read from an edge-list file.

The file starts with a ``num_vertices num_edges`` header followed by one
``vertex1 vertex2 weight`` line per edge. Without an argument the bundled
examples/edges.txt is used.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import algokit as ak

DEFAULT_EDGES = Path(__file__).resolve().parent / "edges.txt"


def main(argv: list[str] | None = None) -> None:
    """Load the edge list and print the spanning tree."""
    parser = argparse.ArgumentParser(description="Prim-style MST over an edge-list file")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_EDGES), help="Edge-list file")
    parser.add_argument("--seed", type=int, default=1, help="Vertex id the tree starts from")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every MST round")
    args = parser.parse_args(argv)

    if args.verbose:
        ak.configure_logging(level=logging.DEBUG)

    graph = ak.load_edge_list(args.path)
    print(f"Num vertices: {graph.num_vertices}")
    print(f"Num edges parsed: {graph.num_edges}")

    tree = graph.min_spanning_tree(seed=args.seed)
    print("\nTree edges:")
    for edge in tree.edges:
        print(f"  {edge}")
    print(f"\nMST cost: {tree.total_cost:g}")


if __name__ == "__main__":
    main(sys.argv[1:])
