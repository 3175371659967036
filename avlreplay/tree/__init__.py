"""Live AVL nodes and the algorithms that mutate them."""

from avlreplay.tree.delete import delete_node
from avlreplay.tree.events import NodeDeleted, NodeInserted, Rotation, RotationKind, TreeEvent
from avlreplay.tree.insert import insert_node
from avlreplay.tree.node import (
    Node,
    balance_factor,
    copy_tree,
    height,
    min_value_node,
    recompute_height,
    refresh_heights,
)
from avlreplay.tree.rotations import apply_rotation, rotate_left, rotate_right

__all__ = [
    "Node",
    "NodeDeleted",
    "NodeInserted",
    "Rotation",
    "RotationKind",
    "TreeEvent",
    "apply_rotation",
    "balance_factor",
    "copy_tree",
    "delete_node",
    "height",
    "insert_node",
    "min_value_node",
    "recompute_height",
    "refresh_heights",
    "rotate_left",
    "rotate_right",
]
