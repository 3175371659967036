"""Tests for rotation primitives."""

import pytest

from avlreplay.tree.events import RotationKind
from avlreplay.tree.node import Node, refresh_heights
from avlreplay.tree.rotations import apply_rotation, rotate_left, rotate_right


def _build(layout):
    """Build nodes from nested (key, left, right) tuples; None for absent."""
    if layout is None:
        return None
    if isinstance(layout, int):
        return Node(layout)
    key, left, right = layout
    node = Node(key)
    node.left = _build(left)
    node.right = _build(right)
    return node


def _tree(layout):
    root = _build(layout)
    refresh_heights(root)
    return root


def _shape(node):
    if node is None:
        return None
    if node.left is None and node.right is None:
        return node.key
    return (node.key, _shape(node.left), _shape(node.right))


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


class TestRotateRight:
    """Tests for rotate_right."""

    def test_left_child_becomes_root(self):
        """y.left is promoted and its right subtree moves under y."""
        y = _tree((50, (30, 20, 40), 60))
        x = rotate_right(y)
        assert x.key == 30
        assert _shape(x) == (30, 20, (50, 40, 60))

    def test_heights_recomputed(self):
        """Both rotated nodes carry fresh heights."""
        y = _tree((30, (20, 10, None), None))
        x = rotate_right(y)
        assert x.height == 2
        assert x.right.height == 1

    def test_preserves_in_order(self):
        """Rotation never reorders keys."""
        y = _tree((50, (30, 20, 40), 60))
        before = _in_order(y)
        assert _in_order(rotate_right(y)) == before

    def test_requires_left_child(self):
        """Rotating right without a left child is a caller error."""
        with pytest.raises(ValueError):
            rotate_right(Node(1))


class TestRotateLeft:
    """Tests for rotate_left."""

    def test_right_child_becomes_root(self):
        """x.right is promoted and its left subtree moves under x."""
        x = _tree((10, 5, (30, 20, 40)))
        y = rotate_left(x)
        assert _shape(y) == (30, (10, 5, 20), 40)

    def test_heights_recomputed(self):
        """Chain 10-20-30 becomes a height-2 tree."""
        x = _tree((10, None, (20, None, 30)))
        y = rotate_left(x)
        assert y.key == 20
        assert y.height == 2
        assert y.left.height == 1

    def test_requires_right_child(self):
        """Rotating left without a right child is a caller error."""
        with pytest.raises(ValueError):
            rotate_left(Node(1))


class TestApplyRotation:
    """Tests for apply_rotation."""

    def test_ll(self):
        """LL is a single right rotation."""
        root = apply_rotation(_tree((30, (20, 10, None), None)), RotationKind.LL)
        assert _shape(root) == (20, 10, 30)

    def test_rr(self):
        """RR is a single left rotation."""
        root = apply_rotation(_tree((10, None, (20, None, 30))), RotationKind.RR)
        assert _shape(root) == (20, 10, 30)

    def test_lr(self):
        """LR rotates the left child left, then the node right."""
        root = apply_rotation(_tree((30, (10, None, 20), None)), RotationKind.LR)
        assert _shape(root) == (20, 10, 30)

    def test_rl(self):
        """RL rotates the right child right, then the node left."""
        root = apply_rotation(_tree((10, None, (30, 20, None))), RotationKind.RL)
        assert _shape(root) == (20, 10, 30)

    def test_double_rotation_requires_child(self):
        """LR and RL need the heavy child to exist."""
        with pytest.raises(ValueError):
            apply_rotation(Node(1), RotationKind.LR)
        with pytest.raises(ValueError):
            apply_rotation(Node(1), RotationKind.RL)
