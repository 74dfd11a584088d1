"""
Tree Mutator

Keeps a tiling tree in sync with the windows of a desktop. Functions return
the node that replaces the one passed in, so callers always store the
result.
"""

from __future__ import annotations
import logging
from typing import Iterable, Tuple

from ..geometry import Orientation, Rectangle, contains_point, split
from ..tree import Container, InvariantViolation, Node, Tile, containers, tiles

logger = logging.getLogger(__name__)


def insert(
    node: Node, tile: Tile, area: Rectangle, pointer: Tuple[int, int]
) -> Node:
    """
    Insert a tile at the position of the pointer.

    The tile ends up in the half of the leaf area that contains the pointer.
    If the pointer lies outside `area` the tree is left untouched.

    Args:
        node: Root of the (sub)tree
        tile: Tile for the new window
        area: Area the (sub)tree is laid out in
        pointer: Pointer position (x, y)

    Returns:
        The node that takes the place of `node`
    """
    x, y = pointer
    if not contains_point(area, x, y):
        return node

    if isinstance(node, Container) and node.is_empty:
        return tile

    if isinstance(node, Tile):
        orientation = Orientation.for_area(area)
        primary, _ = split(area, orientation)
        if contains_point(primary, x, y):
            return Container(orientation, left=tile, right=node)
        return Container(orientation, left=node, right=tile)

    if isinstance(node, Container) and node.is_split:
        primary, secondary = split(area, node.orientation, node.constraint)
        if contains_point(primary, x, y):
            node.left = insert(node.left, tile, primary, pointer)
        else:
            node.right = insert(node.right, tile, secondary, pointer)
        return node

    raise InvariantViolation(f"Cannot insert into {node!r}")


def delete(node: Node, window_id: int) -> Node:
    """
    Remove the tile of a window.

    The sibling of the removed tile takes the place of their parent. Removing
    the only tile of a tree leaves an empty container.

    Returns:
        The node that takes the place of `node`
    """
    if isinstance(node, Container) and node.is_split:
        if isinstance(node.left, Container):
            node.left = delete(node.left, window_id)
        if isinstance(node.right, Container):
            node.right = delete(node.right, window_id)

        if isinstance(node.left, Tile) and node.left.window_id == window_id:
            return node.right
        if isinstance(node.right, Tile) and node.right.window_id == window_id:
            return node.left

    if isinstance(node, Tile) and node.window_id == window_id:
        return Container(Orientation.HORIZONTAL)

    return node


def exists(node: Node, window_id: int) -> bool:
    """Check whether a window has a tile in the tree."""
    if isinstance(node, Tile):
        return node.window_id == window_id

    if isinstance(node, Container) and node.is_split:
        return exists(node.left, window_id) or exists(node.right, window_id)

    return False


def init_tree(window_ids: Iterable[int], area: Rectangle) -> Node:
    """
    Build a tree for windows that are already on a desktop.

    Every window after the first splits the previous insertion point: the
    prior content moves to the left child, the new window becomes the right
    child and the next insertion point. The result leans to the right.

    Args:
        window_ids: Windows in stacking order
        area: Work area of the desktop

    Returns:
        Root of the new tree, an empty container if there are no windows
    """
    root: Node = Container(Orientation.HORIZONTAL)
    parent = None

    for index, window_id in enumerate(window_ids):
        tile = Tile(window_id)
        if index == 0:
            root = tile
            continue

        if index % 2 == 0 and area.width > area.height:
            orientation = Orientation.HORIZONTAL
        else:
            orientation = Orientation.VERTICAL

        current = root if parent is None else parent.right
        container = Container(orientation, left=current, right=tile)
        if parent is None:
            root = container
        else:
            parent.right = container
        parent = container

    logger.debug(
        "Built tree for %d windows with %d splits in %s",
        sum(1 for _ in tiles(root)),
        sum(1 for c in containers(root) if c.is_split),
        area,
    )
    return root
