"""Turns a mutation's event list into its replay sequence.

The recorder never looks at the live tree after the mutation. It starts from
a detached copy of the tree as it was before the call and re-applies each
event to that copy, freezing the state after every step:

1. ``"Before insert 7"`` / ``"Before delete 7"`` with the untouched tree.
2. One snapshot per event, in emission order.
3. A terminal ``"Inserted 7"`` / ``"Deleted 7"`` snapshot when the call was a
   no-op, so every sequence has at least two entries.

Replaying a two-child deletion overwrites the node's key with its successor
and splices the successor out in one step; the successor's own
``NodeDeleted`` that follows then shows the same shape. Every frozen state is
therefore a valid search tree.
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from avlreplay.recording.snapshot import Snapshot, freeze
from avlreplay.tree.events import NodeDeleted, NodeInserted, Rotation, RotationKind, TreeEvent
from avlreplay.tree.node import Node, min_value_node, refresh_heights
from avlreplay.tree.rotations import apply_rotation

logger = logging.getLogger(__name__)

Operation = Literal["insert", "delete"]


class ReplayError(RuntimeError):
    """An event does not apply to the tree it is replayed against."""


class _WorkingTree:
    """Mutable scratch copy the events are replayed on."""

    def __init__(self, root: Node | None) -> None:
        self.root = root

    def _locate(self, key: int) -> tuple[Node | None, Node | None]:
        parent = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        return parent, current

    def _relink(self, parent: Node | None, old: Node, new: Node | None) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def insert_leaf(self, key: int) -> None:
        parent, existing = self._locate(key)
        if existing is not None:
            raise ReplayError(f"cannot insert {key!r}: key already present")
        leaf = Node(key)
        if parent is None:
            self.root = leaf
        elif key < parent.key:
            parent.left = leaf
        else:
            parent.right = leaf
        refresh_heights(self.root)

    def delete(self, key: int) -> int | None:
        """Remove ``key``; returns the successor key when one was pulled up."""
        parent, node = self._locate(key)
        if node is None:
            raise ReplayError(f"cannot delete {key!r}: key not present")

        successor_key = None
        if node.left is None or node.right is None:
            self._relink(parent, node, node.left if node.left is not None else node.right)
        else:
            successor = min_value_node(node.right)
            successor_key = successor.key
            # The successor has no left child, so splicing it is a single relink.
            if node.right is successor:
                node.right = successor.right
            else:
                holder = node.right
                while holder.left is not successor:
                    holder = holder.left
                holder.left = successor.right
            node.key = successor_key

        refresh_heights(self.root)
        return successor_key

    def rotate(self, pivot: int, kind: RotationKind) -> None:
        parent, node = self._locate(pivot)
        if node is None:
            raise ReplayError(f"cannot rotate at {pivot!r}: key not present")
        try:
            new_root = apply_rotation(node, kind)
        except ValueError as exc:
            raise ReplayError(f"{kind.value} rotation does not fit at {pivot!r}") from exc
        self._relink(parent, node, new_root)
        refresh_heights(self.root)


class SnapshotRecorder:
    """Builds the snapshot sequence for one insert or delete call."""

    def record(
        self,
        operation: Operation,
        key: int,
        before: Node | None,
        events: Sequence[TreeEvent],
    ) -> tuple[Snapshot, ...]:
        """Replay ``events`` on ``before`` and return the labelled states.

        Args:
            operation: ``"insert"`` or ``"delete"``.
            key: The key the caller asked to insert or delete.
            before: A detached copy of the pre-mutation tree. It is consumed
                by the replay and must not be shared with the live tree.
            events: Events the mutation emitted, in emission order.

        Raises:
            ReplayError: If an event does not apply to the replayed tree.
        """
        working = _WorkingTree(before)
        snapshots = [Snapshot(label=f"Before {operation} {key}", tree=freeze(working.root))]

        applied_successor: int | None = None
        for event in events:
            highlight = None
            rotation_kind = None
            if isinstance(event, NodeInserted):
                working.insert_leaf(event.key)
                highlight = event.key
            elif isinstance(event, NodeDeleted):
                if applied_successor is not None and event.key == applied_successor:
                    applied_successor = None
                else:
                    applied_successor = working.delete(event.key)
            elif isinstance(event, Rotation):
                working.rotate(event.pivot, event.kind)
                highlight = event.pivot
                rotation_kind = event.kind
            else:
                raise ReplayError(f"unknown event {event!r}")

            snapshots.append(
                Snapshot(
                    label=event.label,
                    tree=freeze(working.root),
                    highlight=highlight,
                    rotation_kind=rotation_kind,
                )
            )

        if not events:
            if operation == "insert":
                snapshots.append(Snapshot(label=f"Inserted {key}", tree=freeze(working.root), highlight=key))
            else:
                snapshots.append(Snapshot(label=f"Deleted {key}", tree=freeze(working.root)))

        logger.debug("Recorded %d snapshots for %s %r", len(snapshots), operation, key)
        return tuple(snapshots)
