"""Compact and box-drawing rendering for label trees."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from ..prettyprint import label_ascii, label_debug

if TYPE_CHECKING:
    from .core import Tree

TEE = "├── "
CORNER = "└── "
PIPE = "│   "
BLANK = "    "


def render_ascii(tree: Tree) -> str:
    """Render a tree inline as ``label[child, child, ...]``."""
    children = tree.root_children()
    if children is None:
        return label_debug(tree.label())
    inner = ", ".join(render_ascii(child) for child in children)
    return f"{label_debug(tree.label())}[{inner}]"


def render_pretty(
    tree: Tree, depth: int = 0, col_display: list[bool] | None = None
) -> str:
    """Render a tree with box-drawing connectors, one node per line.

    ``col_display[j]`` records whether the ancestor at depth ``j`` still has
    siblings to draw, which decides between a vertical bar and blank padding
    in that column. The list is shared across the whole walk.
    """
    if col_display is None:
        col_display = [True] * (depth + tree.depth())
    elif len(col_display) < depth + tree.depth():
        raise ValueError(
            f"col_display needs {depth + tree.depth()} slots, got {len(col_display)}"
        )
    return _render_subtree(tree, depth, col_display)


def _render_subtree(tree: Tree, depth: int, col_display: list[bool]) -> str:
    out = label_ascii(tree.label())
    children = tree.root_children()
    if children is None:
        return out
    last = len(children) - 1
    for i, child in enumerate(children):
        if not out.endswith("\n"):
            out += "\n"
        out += "".join(PIPE if col_display[j] else BLANK for j in range(depth))
        col_display[depth] = i != last
        connector = CORNER if i == last else TEE
        out += connector + _render_subtree(child, depth + 1, col_display)
    if not out.endswith("\n"):
        out += "\n"
    return out


def write_line(text: str, file: TextIO | None = None) -> None:
    """Write ``text`` with exactly one trailing newline."""
    print(text.rstrip("\n"), file=file or sys.stdout)
