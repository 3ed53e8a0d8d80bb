"""CLI entry point for building and rendering a label tree."""

from __future__ import annotations

import argparse
import sys

from .core import Tree


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a tree from PARENT:CHILD edges and render it."
    )
    parser.add_argument("root", help="Label of the root node")
    parser.add_argument(
        "edges",
        nargs="*",
        metavar="PARENT:CHILD",
        help="Edges applied in order; CHILD is attached under PARENT",
    )
    parser.add_argument(
        "--format",
        choices=["ascii", "pretty"],
        default="pretty",
        help="Output format (default: pretty)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print node count, depth and leaf count after the tree",
    )
    return parser.parse_args(argv)


def parse_edge(edge: str) -> tuple[str, str] | None:
    """Split ``PARENT:CHILD``; None if either side is missing."""
    parent, sep, child = edge.partition(":")
    if not sep or not parent or not child:
        return None
    return parent, child


def build_tree(root: str, edges: list[str]) -> Tree[str]:
    """Build a tree by attaching each edge's child under its parent label."""
    tree = Tree(root)
    for edge in edges:
        parsed = parse_edge(edge)
        if parsed is None:
            print(f"Error: invalid edge '{edge}'", file=sys.stderr)
            sys.exit(1)
        parent, child = parsed
        if parent not in tree:
            print(f"Warning: no node labeled '{parent}'", file=sys.stderr)
        tree.add_leaf_at_label(parent, child)
    return tree


def main(argv: list[str] | None = None) -> None:
    """Build the tree from the command line and render it."""
    args = parse_args(argv)
    tree = build_tree(args.root, args.edges)

    if args.format == "ascii":
        tree.print()
    else:
        tree.pretty_print()

    if args.stats:
        print(
            f"{tree.order()} nodes | depth {tree.depth()} | {len(tree.leaves())} leaves"
        )


if __name__ == "__main__":
    main()
