"""
Unit tests for the tiling tree structure.
"""

import pytest
from hyprtile.geometry import Orientation
from hyprtile.tree import (
    Container,
    InvariantViolation,
    Tile,
    check_invariants,
    containers,
    is_empty,
    tiles,
    window_ids,
)


def _sample_tree():
    return Container(
        Orientation.VERTICAL,
        left=Tile(1),
        right=Container(Orientation.HORIZONTAL, left=Tile(2), right=Tile(3)),
    )


@pytest.mark.unit
class TestTraversal:
    def test_tiles_left_to_right(self):
        """Tiles are yielded left to right."""
        assert window_ids(_sample_tree()) == [1, 2, 3]
        assert [t.window_id for t in tiles(_sample_tree())] == [1, 2, 3]

    def test_containers_pre_order(self):
        """Containers are yielded in pre-order."""
        found = list(containers(_sample_tree()))
        assert [c.orientation for c in found] == [
            Orientation.VERTICAL,
            Orientation.HORIZONTAL,
        ]

    def test_empty_tree(self):
        """An empty root container is an empty tree."""
        root = Container()
        assert is_empty(root)
        assert window_ids(root) == []

    def test_tile_is_not_empty(self):
        """A tile is never an empty tree."""
        assert not is_empty(Tile(1))


@pytest.mark.unit
class TestInvariants:
    def test_valid_trees_pass(self):
        """Well formed trees pass the checks."""
        check_invariants(Container())
        check_invariants(Tile(1))
        check_invariants(_sample_tree())

    def test_single_child_container_rejected(self):
        """A container with one child is rejected."""
        with pytest.raises(InvariantViolation):
            check_invariants(Container(left=Tile(1)))

    def test_nested_single_child_container_rejected(self):
        """Nested containers with one child are rejected."""
        tree = Container(left=Tile(1), right=Container(right=Tile(2)))
        with pytest.raises(InvariantViolation):
            check_invariants(tree)

    def test_empty_container_below_root_rejected(self):
        """Empty containers below the root are rejected."""
        with pytest.raises(InvariantViolation):
            check_invariants(Container(left=Tile(1), right=Container()))

    def test_duplicate_window_rejected(self):
        """A window in two tiles is rejected."""
        with pytest.raises(InvariantViolation, match="more than one tile"):
            check_invariants(Container(left=Tile(1), right=Tile(1)))

    def test_unknown_node_rejected(self):
        """Unknown node types are rejected."""
        with pytest.raises(InvariantViolation):
            check_invariants(Container(left=Tile(1), right="window"))
