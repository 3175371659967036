"""Mutable AVL node and the height bookkeeping shared by every algorithm.

Only the engine and the snapshot recorder's working copy ever hold ``Node``
instances. Each node exclusively owns its children; nothing points back up
the tree, so a rotation is just a handful of link rewrites.
"""

from __future__ import annotations


class Node:
    """One key in a live AVL tree.

    Attributes:
        key: The ordered key stored at this node.
        left: Left child (keys smaller than ``key``), or None.
        right: Right child (keys larger than ``key``), or None.
        height: Cached height of the subtree rooted here (leaf = 1).
    """

    __slots__ = ("key", "left", "right", "height")

    def __init__(self, key: int) -> None:
        self.key = key
        self.left: Node | None = None
        self.right: Node | None = None
        self.height = 1

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, height={self.height})"


def height(node: Node | None) -> int:
    """Cached height of ``node``; an absent subtree has height 0."""
    if node is None:
        return 0
    return node.height


def balance_factor(node: Node | None) -> int:
    """Left height minus right height; 0 for an absent subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def recompute_height(node: Node) -> None:
    """Refresh ``node.height`` from its children's cached heights."""
    node.height = 1 + max(height(node.left), height(node.right))


def min_value_node(node: Node) -> Node:
    """Leftmost node of the subtree rooted at ``node``."""
    current = node
    while current.left is not None:
        current = current.left
    return current


def copy_tree(node: Node | None) -> Node | None:
    """Deep copy of a live subtree, heights included."""
    if node is None:
        return None
    clone = Node(node.key)
    clone.height = node.height
    clone.left = copy_tree(node.left)
    clone.right = copy_tree(node.right)
    return clone


def refresh_heights(node: Node | None) -> int:
    """Recompute every cached height below ``node`` bottom-up.

    Returns:
        The height of ``node`` (0 when absent).
    """
    if node is None:
        return 0
    node.height = 1 + max(refresh_heights(node.left), refresh_heights(node.right))
    return node.height
