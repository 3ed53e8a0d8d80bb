"""Tree container and its renderers."""

from .core import Tree
from .renderer import render_ascii, render_pretty

__all__ = [
    "Tree",
    "render_ascii",
    "render_pretty",
]
