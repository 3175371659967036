"""Tests for node height bookkeeping."""

from avlreplay.tree.node import (
    Node,
    balance_factor,
    copy_tree,
    height,
    min_value_node,
    recompute_height,
    refresh_heights,
)


def _chain(*keys: int) -> Node:
    """Left-leaning chain: keys[0] is the root, each next key its left child."""
    root = Node(keys[0])
    current = root
    for key in keys[1:]:
        current.left = Node(key)
        current = current.left
    refresh_heights(root)
    return root


class TestHeight:
    """Tests for height and balance_factor."""

    def test_absent_node_has_height_zero(self):
        """None counts as an empty subtree."""
        assert height(None) == 0
        assert balance_factor(None) == 0

    def test_new_node_is_leaf(self):
        """A fresh node has height 1 and no children."""
        node = Node(5)
        assert height(node) == 1
        assert node.left is None
        assert node.right is None
        assert balance_factor(node) == 0

    def test_balance_factor_left_heavy(self):
        """Left minus right height."""
        root = _chain(30, 20, 10)
        assert balance_factor(root) == 2
        assert balance_factor(root.left) == 1

    def test_balance_factor_right_heavy(self):
        """A right child alone gives -1."""
        node = Node(1)
        node.right = Node(2)
        recompute_height(node)
        assert balance_factor(node) == -1


class TestRecomputeHeight:
    """Tests for recompute_height and refresh_heights."""

    def test_recompute_uses_taller_child(self):
        """Height is one more than the taller child."""
        node = Node(10)
        node.left = _chain(5, 3)
        node.right = Node(15)
        recompute_height(node)
        assert node.height == 3

    def test_recompute_only_looks_at_cached_children(self):
        """Stale child heights are trusted as-is."""
        node = Node(10)
        node.left = Node(5)
        node.left.height = 7
        recompute_height(node)
        assert node.height == 8

    def test_refresh_heights_fixes_whole_tree(self):
        """Every cached height is rebuilt bottom-up."""
        root = Node(10)
        root.left = Node(5)
        root.left.left = Node(1)
        root.height = root.left.height = 99
        assert refresh_heights(root) == 3
        assert root.left.height == 2
        assert root.left.left.height == 1

    def test_refresh_heights_of_empty_tree(self):
        """None has height 0."""
        assert refresh_heights(None) == 0


class TestMinValueNode:
    """Tests for min_value_node."""

    def test_leftmost(self):
        """Follows left links to the end."""
        root = _chain(30, 20, 10)
        assert min_value_node(root).key == 10

    def test_leaf_is_its_own_minimum(self):
        """A node without a left child is the minimum."""
        node = Node(4)
        node.right = Node(9)
        assert min_value_node(node) is node


class TestCopyTree:
    """Tests for copy_tree."""

    def test_copy_is_detached(self):
        """No node object is shared with the original."""
        root = _chain(30, 20, 10)
        clone = copy_tree(root)
        assert clone is not root
        assert clone.left is not root.left
        clone.left.key = 99
        assert root.left.key == 20

    def test_copy_keeps_heights(self):
        """Heights are copied, not recomputed."""
        root = _chain(30, 20)
        root.height = 42
        assert copy_tree(root).height == 42

    def test_copy_of_none(self):
        """Copying an empty tree gives an empty tree."""
        assert copy_tree(None) is None
