"""
Tiling Tree

A tiling tree is a binary tree whose leaves are tiles (one window each) and
whose inner nodes are containers describing how their area is divided.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Union

from .geometry import Orientation


class InvariantViolation(RuntimeError):
    """Raised when a tiling tree has a shape no algorithm can handle."""


@dataclass
class Tile:
    """Leaf node holding exactly one window."""

    window_id: int


@dataclass
class Container:
    """
    Inner node splitting its area between two children.

    A container without children is only valid as the root of a tree and
    stands for a desktop that has no windows yet.
    """

    orientation: Orientation = Orientation.HORIZONTAL
    constraint: Optional[int] = None  # Size of the left/top child in pixels
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_split(self) -> bool:
        return self.left is not None and self.right is not None

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.right is None


Node = Union[Tile, Container]


def is_empty(node: Node) -> bool:
    """Check whether a tree holds no window at all."""
    return isinstance(node, Container) and node.is_empty


def tiles(node: Node) -> Iterator[Tile]:
    """Yield all tiles of a tree from left to right."""
    if isinstance(node, Tile):
        yield node
    elif isinstance(node, Container):
        for child in (node.left, node.right):
            if child is not None:
                yield from tiles(child)


def containers(node: Node) -> Iterator[Container]:
    """Yield all containers of a tree in pre-order."""
    if isinstance(node, Container):
        yield node
        for child in (node.left, node.right):
            if child is not None:
                yield from containers(child)


def window_ids(node: Node) -> List[int]:
    """List the window ids of a tree from left to right."""
    return [tile.window_id for tile in tiles(node)]


def check_invariants(root: Node):
    """
    Validate the structure of a tree.

    Raises:
        InvariantViolation: On a half-populated container, an empty container
            below the root, an unknown node type or a window id that occurs
            more than once.
    """
    seen: Set[int] = set()

    def visit(node: Node, is_root: bool):
        if isinstance(node, Tile):
            if node.window_id in seen:
                raise InvariantViolation(
                    f"Window {node.window_id} occurs in more than one tile"
                )
            seen.add(node.window_id)
        elif isinstance(node, Container):
            if node.is_empty:
                if not is_root:
                    raise InvariantViolation(f"Empty container below root: {node}")
            elif node.is_split:
                visit(node.left, False)
                visit(node.right, False)
            else:
                raise InvariantViolation(f"Container with a single child: {node}")
        else:
            raise InvariantViolation(f"Unknown node type: {node!r}")

    visit(root, True)
