"""Generic labeled rooted trees."""

from .models import Leaf, Node
from .prettyprint import PrettyPrint, PrettyPrintMixin, label_ascii, label_debug
from .tree import Tree, render_ascii, render_pretty

__all__ = [
    "Leaf",
    "Node",
    "PrettyPrint",
    "PrettyPrintMixin",
    "Tree",
    "label_ascii",
    "label_debug",
    "render_ascii",
    "render_pretty",
]
