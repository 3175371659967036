"""Immutable tree states handed to callers.

A ``TreeSnapshot`` is a frozen, fully detached copy of a subtree: it shares
no objects with the live tree or with any other snapshot, so callers may keep
it indefinitely and read it from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from avlreplay.tree.events import RotationKind
from avlreplay.tree.node import Node, balance_factor


@dataclass(frozen=True)
class TreeSnapshot:
    """Frozen copy of one node and everything below it.

    Attributes:
        key: The node's key.
        height: Height of the subtree rooted here (leaf = 1).
        bf: Balance factor at the time of the copy (left minus right height).
        left: Frozen left subtree, or None.
        right: Frozen right subtree, or None.
    """

    key: int
    height: int
    bf: int
    left: TreeSnapshot | None = None
    right: TreeSnapshot | None = None

    def in_order(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        if self.left is not None:
            yield from self.left.in_order()
        yield self.key
        if self.right is not None:
            yield from self.right.in_order()

    def nodes(self) -> Iterator[TreeSnapshot]:
        """Yield every node of the subtree, pre-order."""
        yield self
        if self.left is not None:
            yield from self.left.nodes()
        if self.right is not None:
            yield from self.right.nodes()

    @property
    def size(self) -> int:
        return sum(1 for _ in self.nodes())

    def find(self, key: int) -> TreeSnapshot | None:
        """Return the node holding ``key``, or None."""
        current: TreeSnapshot | None = self
        while current is not None and current.key != key:
            current = current.left if key < current.key else current.right
        return current

    def to_dict(self) -> dict[str, Any]:
        """Plain recursive ``{key, height, bf, left, right}`` structure."""
        return {
            "key": self.key,
            "height": self.height,
            "bf": self.bf,
            "left": self.left.to_dict() if self.left is not None else None,
            "right": self.right.to_dict() if self.right is not None else None,
        }


def freeze(node: Node | None) -> TreeSnapshot | None:
    """Copy a live subtree into a ``TreeSnapshot`` (None for an empty tree)."""
    if node is None:
        return None
    return TreeSnapshot(
        key=node.key,
        height=node.height,
        bf=balance_factor(node),
        left=freeze(node.left),
        right=freeze(node.right),
    )


@dataclass(frozen=True)
class Snapshot:
    """One labelled step of a mutation's replay.

    Attributes:
        label: Caption such as ``"Inserted 5"`` or ``"LL rotation at node 30"``.
        tree: Tree state at this step (None when the tree is empty).
        highlight: Key to emphasise, if any.
        rotation_kind: Set only for steps produced by a rotation.
    """

    label: str
    tree: TreeSnapshot | None
    highlight: int | None = None
    rotation_kind: RotationKind | None = None
