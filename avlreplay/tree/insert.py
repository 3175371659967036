"""Recursive AVL insertion.

The rotation case at each ancestor is picked by comparing the inserted key
with the heavy child's key. A single insertion can unbalance at most one
ancestor, and only along its own path, so that comparison always names the
right case.
"""

from __future__ import annotations

from avlreplay.tree.events import NodeInserted, Rotation, RotationKind, TreeEvent
from avlreplay.tree.node import Node, balance_factor, recompute_height
from avlreplay.tree.rotations import apply_rotation


def insert_node(node: Node | None, key: int, events: list[TreeEvent]) -> Node | None:
    """Insert ``key`` below ``node`` and return the (possibly new) subtree root.

    Inserting a key that is already present changes nothing and appends no
    events.

    Args:
        node: Root of the subtree to insert into, or None for an empty slot.
        key: Key to insert.
        events: Receives every structural change, deepest first.
    """
    if node is None:
        events.append(NodeInserted(key))
        return Node(key)

    if key < node.key:
        node.left = insert_node(node.left, key, events)
    elif key > node.key:
        node.right = insert_node(node.right, key, events)
    else:
        return node

    recompute_height(node)
    kind = _classify(node, key)
    if kind is None:
        return node

    events.append(Rotation(kind, node.key))
    return apply_rotation(node, kind)


def _classify(node: Node, key: int) -> RotationKind | None:
    bf = balance_factor(node)
    if bf > 1 and key < node.left.key:
        return RotationKind.LL
    if bf < -1 and key > node.right.key:
        return RotationKind.RR
    if bf > 1 and key > node.left.key:
        return RotationKind.LR
    if bf < -1 and key < node.right.key:
        return RotationKind.RL
    return None
