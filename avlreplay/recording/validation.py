"""Structural checks for frozen trees.

These answer the three questions a replay consumer cares about: is the key
order intact, is every node within one level of balance, and do the cached
heights agree with the actual shape.
"""

from __future__ import annotations

from avlreplay.recording.snapshot import TreeSnapshot


class InvariantViolation(AssertionError):
    """A frozen tree breaks the search-tree, balance or height invariant."""


def is_bst(tree: TreeSnapshot | None) -> bool:
    """True if every left key < node key < every right key, throughout."""
    if tree is None:
        return True
    keys = list(tree.in_order())
    return all(a < b for a, b in zip(keys, keys[1:]))


def is_balanced(tree: TreeSnapshot | None) -> bool:
    """True if every node's stored balance factor lies in {-1, 0, 1}."""
    if tree is None:
        return True
    return all(-1 <= node.bf <= 1 for node in tree.nodes())


def _height(tree: TreeSnapshot | None) -> int:
    return 0 if tree is None else tree.height


def heights_consistent(tree: TreeSnapshot | None) -> bool:
    """True if each height is 1 + the taller child and each bf matches."""
    if tree is None:
        return True
    for node in tree.nodes():
        if node.height != 1 + max(_height(node.left), _height(node.right)):
            return False
        if node.bf != _height(node.left) - _height(node.right):
            return False
    return True


def check_invariants(tree: TreeSnapshot | None, balanced: bool = True) -> None:
    """Raise ``InvariantViolation`` describing the first broken invariant.

    Args:
        tree: The tree to inspect.
        balanced: Also require AVL balance. Intermediate replay states may
            legitimately hold a node with ``|bf| == 2`` just before its
            rotation, so callers checking those pass False.
    """
    if tree is None:
        return
    keys = list(tree.in_order())
    for a, b in zip(keys, keys[1:]):
        if not a < b:
            raise InvariantViolation(f"key order broken between {a!r} and {b!r}")
    for node in tree.nodes():
        expected = 1 + max(_height(node.left), _height(node.right))
        if node.height != expected:
            raise InvariantViolation(f"node {node.key!r} has height {node.height}, expected {expected}")
        if node.bf != _height(node.left) - _height(node.right):
            raise InvariantViolation(f"node {node.key!r} has stale balance factor {node.bf}")
        if balanced and not -1 <= node.bf <= 1:
            raise InvariantViolation(f"node {node.key!r} is out of balance (bf={node.bf})")
