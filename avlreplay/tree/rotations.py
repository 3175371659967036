"""Single and double rotations.

Every rotation rewrites a constant number of child links and returns the new
root of the rotated subtree. The caller is responsible for linking that
node into the parent's slot (or adopting it as the tree root).
"""

from __future__ import annotations

import logging

from avlreplay.tree.events import RotationKind
from avlreplay.tree.node import Node, recompute_height

logger = logging.getLogger(__name__)


def rotate_right(y: Node) -> Node:
    """Rotate the subtree rooted at ``y`` to the right.

    ``y.left`` becomes the subtree root, its former right child moves under
    ``y`` as the new left child.

    Raises:
        ValueError: If ``y`` has no left child.
    """
    x = y.left
    if x is None:
        raise ValueError(f"rotate_right requires a left child at key {y.key!r}")
    y.left = x.right
    x.right = y
    recompute_height(y)
    recompute_height(x)
    return x


def rotate_left(x: Node) -> Node:
    """Rotate the subtree rooted at ``x`` to the left.

    Mirror image of :func:`rotate_right`.

    Raises:
        ValueError: If ``x`` has no right child.
    """
    y = x.right
    if y is None:
        raise ValueError(f"rotate_left requires a right child at key {x.key!r}")
    x.right = y.left
    y.left = x
    recompute_height(x)
    recompute_height(y)
    return y


def apply_rotation(node: Node, kind: RotationKind) -> Node:
    """Apply the rebalancing ``kind`` at ``node`` and return the new subtree root.

    LL and RR are single rotations; LR and RL first rotate the child, then
    the node itself.

    Raises:
        ValueError: If the nodes the rotation moves are missing.
    """
    logger.debug("%s rotation at %r", kind.value, node.key)
    if kind is RotationKind.LL:
        return rotate_right(node)
    if kind is RotationKind.RR:
        return rotate_left(node)
    if kind is RotationKind.LR:
        if node.left is None:
            raise ValueError(f"LR rotation requires a left child at key {node.key!r}")
        node.left = rotate_left(node.left)
        return rotate_right(node)
    if node.right is None:
        raise ValueError(f"RL rotation requires a right child at key {node.key!r}")
    node.right = rotate_right(node.right)
    return rotate_left(node)
