"""
Node shapes for label trees.

A tree's root is always exactly one of these two variants. A node without
children is a Leaf; a Node always holds at least one child.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .tree.core import Tree

T = TypeVar("T")


@dataclass
class Leaf(Generic[T]):
    """A node with no children."""

    label: T


@dataclass
class Node(Generic[T]):
    """An internal node with one or more ordered children."""

    label: T
    children: list[Tree[T]]

    def __post_init__(self) -> None:
        if not self.children:
            raise ValueError("Node requires at least one child; use Leaf instead")
