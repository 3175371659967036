"""Recursive AVL deletion.

Unlike insertion, a deletion can leave either side heavy regardless of where
the key was removed, so the rotation case is chosen from the heavy child's
own balance factor.
"""

from __future__ import annotations

from avlreplay.tree.events import NodeDeleted, Rotation, RotationKind, TreeEvent
from avlreplay.tree.node import Node, balance_factor, min_value_node, recompute_height
from avlreplay.tree.rotations import apply_rotation


def delete_node(node: Node | None, key: int, events: list[TreeEvent]) -> Node | None:
    """Remove ``key`` from the subtree at ``node`` and return its new root.

    A node with two children takes over its in-order successor's key, and
    the successor is then deleted from the right subtree (emitting its own
    ``NodeDeleted``). Removing an absent key changes nothing and appends no
    events.

    Args:
        node: Root of the subtree, or None.
        key: Key to remove.
        events: Receives every structural change, in the order it happens.
    """
    if node is None:
        return None

    if key < node.key:
        node.left = delete_node(node.left, key, events)
    elif key > node.key:
        node.right = delete_node(node.right, key, events)
    else:
        events.append(NodeDeleted(key))
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = min_value_node(node.right)
        node.key = successor.key
        node.right = delete_node(node.right, successor.key, events)

    recompute_height(node)
    kind = _classify(node)
    if kind is None:
        return node

    events.append(Rotation(kind, node.key))
    return apply_rotation(node, kind)


def _classify(node: Node) -> RotationKind | None:
    bf = balance_factor(node)
    if bf > 1:
        return RotationKind.LL if balance_factor(node.left) >= 0 else RotationKind.LR
    if bf < -1:
        return RotationKind.RR if balance_factor(node.right) <= 0 else RotationKind.RL
    return None
