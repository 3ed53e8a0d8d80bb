"""Generic rooted tree with label-addressed mutation."""

from __future__ import annotations

import copy
from typing import Generic, Iterator, TypeVar

from ..models import Leaf, Node
from .renderer import render_ascii, render_pretty, write_line

T = TypeVar("T")


class Tree(Generic[T]):
    """A rooted tree whose nodes carry labels of type T.

    The root is either a Leaf or a Node. Children are owned exclusively by
    their parent and kept in insertion order. Labels only need to support
    ``==``; they are not required to be unique.
    """

    __slots__ = ("_shape",)

    def __init__(self, label: T):
        self._shape: Leaf[T] | Node[T] = Leaf(label)

    @classmethod
    def new(cls, label: T) -> Tree[T]:
        return cls(label)

    @property
    def shape(self) -> Leaf[T] | Node[T]:
        return self._shape

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def add_child(self, child: Tree[T]) -> None:
        """Append ``child`` as the last child of the root.

        A leaf root is promoted to an internal node, keeping its label.
        ``child`` must not already be part of this tree, and this tree must
        not be part of ``child``; pass a clone to attach a copy.
        """
        if not isinstance(child, Tree):
            raise TypeError(f"expected Tree, got {type(child).__name__}")
        if any(node is self for node in child.iter_nodes()):
            raise ValueError("cannot add a tree as a descendant of itself")
        if any(node is child for node in self.iter_nodes()):
            raise ValueError("child is already part of this tree")
        if isinstance(self._shape, Leaf):
            self._shape = Node(self._shape.label, [child])
        else:
            self._shape.children.append(child)

    def label(self) -> T:
        return self._shape.label

    def is_leaf(self) -> bool:
        return isinstance(self._shape, Leaf)

    def get_child(self, index: int) -> Tree[T] | None:
        """Return the root's child at ``index``, or None if there is none."""
        children = self.root_children()
        if children is None or not 0 <= index < len(children):
            return None
        return children[index]

    def get_child_label(self, index: int) -> T | None:
        child = self.get_child(index)
        return None if child is None else child.label()

    def root_children(self) -> list[Tree[T]] | None:
        """Direct children of the root, or None for a leaf."""
        if isinstance(self._shape, Leaf):
            return None
        return self._shape.children

    # ------------------------------------------------------------------
    # Aggregates and traversal
    # ------------------------------------------------------------------

    def depth(self) -> int:
        """Longest root-to-leaf path, counting the root as 1."""
        if isinstance(self._shape, Leaf):
            return 1
        return 1 + max(child.depth() for child in self._shape.children)

    def order(self) -> int:
        """Total number of nodes."""
        if isinstance(self._shape, Leaf):
            return 1
        return 1 + sum(child.order() for child in self._shape.children)

    def iter_nodes(self) -> Iterator[Tree[T]]:
        """Preorder walk: a node, then each child's subtree left to right."""
        yield self
        for child in self.root_children() or ():
            yield from child.iter_nodes()

    def get_nodes(self) -> list[Tree[T]]:
        return list(self.iter_nodes())

    def node_labels(self) -> list[T]:
        """Labels of every node in preorder, duplicates included."""
        return [node.label() for node in self.iter_nodes()]

    def leaves(self) -> list[Tree[T]]:
        """Every leaf node, left to right."""
        return [node for node in self.iter_nodes() if node.is_leaf()]

    # ------------------------------------------------------------------
    # Label-addressed mutation
    # ------------------------------------------------------------------

    def add_child_at_label(self, label: T, new_child: Tree[T]) -> None:
        """Attach a copy of ``new_child`` under nodes labeled ``label``.

        Matching stops at the first hit on each root-to-leaf path: when a
        node matches, its own subtree is not searched. Matches in unrelated
        branches each receive their own copy. No match leaves the tree
        unchanged.
        """
        self._attach_shallowest(label, new_child.clone())

    def _attach_shallowest(self, label: T, snapshot: Tree[T]) -> None:
        if self.label() == label:
            self.add_child(snapshot.clone())
            return
        for child in self.root_children() or ():
            child._attach_shallowest(label, snapshot)

    def add_leaf_at_label(self, label: T, new_label: T) -> None:
        """Attach a new leaf under nodes labeled ``label``.

        Same matching rule as ``add_child_at_label``.
        """
        self.add_child_at_label(label, Tree(new_label))

    def add_child_at_every_label(self, label: T, new_child: Tree[T]) -> None:
        """Attach a copy of ``new_child`` under every node labeled ``label``.

        Unlike ``add_child_at_label`` this also descends into matching
        nodes. Only nodes that existed before the call are considered.
        """
        snapshot = new_child.clone()
        targets = [node for node in self.iter_nodes() if node.label() == label]
        for node in targets:
            node.add_child(snapshot.clone())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def ascii(self) -> str:
        """Compact form, e.g. ``1[2[5], 3, 4]``."""
        return render_ascii(self)

    def ascii_pretty(self, depth: int = 0, col_display: list[bool] | None = None) -> str:
        """Indented box-drawing form."""
        return render_pretty(self, depth, col_display)

    def print(self, file=None) -> None:
        write_line(self.ascii(), file)

    def pretty_print(self, file=None) -> None:
        write_line(self.ascii_pretty(), file)

    # ------------------------------------------------------------------
    # Copying and comparison
    # ------------------------------------------------------------------

    def clone(self) -> Tree[T]:
        """Fully independent deep copy, labels included."""
        return copy.deepcopy(self)

    def __copy__(self) -> Tree[T]:
        return self.clone()

    def __deepcopy__(self, memo) -> Tree[T]:
        new = type(self).__new__(type(self))
        new._shape = copy.deepcopy(self._shape, memo)
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return self._shape == other._shape

    __hash__ = None

    def __len__(self) -> int:
        return self.order()

    def __iter__(self) -> Iterator[T]:
        return (node.label() for node in self.iter_nodes())

    def __contains__(self, label: object) -> bool:
        return any(node.label() == label for node in self.iter_nodes())

    def __str__(self) -> str:
        return self.ascii()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ascii()})"
