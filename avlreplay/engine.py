"""The balanced tree engine: one live AVL tree plus its replay history.

Example::

    from avlreplay import BalancedTreeEngine

    engine = BalancedTreeEngine()
    engine.insert(10)
    engine.insert(20)
    result = engine.insert(30)

    for snapshot in result.snapshots:
        print(snapshot.label)
    # Before insert 30
    # Inserted 30
    # RR rotation at node 10

    assert result.tree.key == 20

A mutation runs to completion before it returns. Outside callers only ever
see the live tree in its final state; the intermediate states exist solely
inside the returned snapshots. The engine is not safe for concurrent
writers; use one engine per session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from avlreplay.recording.recorder import Operation, SnapshotRecorder
from avlreplay.recording.snapshot import Snapshot, TreeSnapshot, freeze
from avlreplay.tree.delete import delete_node
from avlreplay.tree.events import Rotation, TreeEvent
from avlreplay.tree.insert import insert_node
from avlreplay.tree.node import Node, copy_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """What an insert or remove hands back.

    Attributes:
        tree: Frozen copy of the tree after the mutation (None if empty).
        snapshots: Replay sequence, first entry is the pre-mutation state.
    """

    tree: TreeSnapshot | None
    snapshots: tuple[Snapshot, ...]


class BalancedTreeEngine:
    """Owns one mutable AVL tree and records every change made to it."""

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size = 0
        self._recorder = SnapshotRecorder()

    def insert(self, key: int) -> MutationResult:
        """Insert ``key``, rebalancing as needed.

        Inserting a key that is already present leaves the tree untouched
        and returns a two-step sequence.
        """
        before = copy_tree(self._root)
        events: list[TreeEvent] = []
        self._root = insert_node(self._root, key, events)
        if events:
            self._size += 1
        return self._finish("insert", key, before, events)

    def remove(self, key: int) -> MutationResult:
        """Delete ``key``, rebalancing as needed.

        Deleting a key that is not present leaves the tree untouched and
        returns a two-step sequence.
        """
        before = copy_tree(self._root)
        events: list[TreeEvent] = []
        self._root = delete_node(self._root, key, events)
        if events:
            self._size -= 1
        return self._finish("delete", key, before, events)

    def build(self, keys: Iterable[int]) -> MutationResult:
        """Start over from an empty tree and insert ``keys`` in order.

        Returns:
            The final tree and every insert's snapshots, concatenated.
        """
        self.clear()
        snapshots: list[Snapshot] = []
        for key in keys:
            snapshots.extend(self.insert(key).snapshots)
        return MutationResult(tree=self.get_tree(), snapshots=tuple(snapshots))

    def get_tree(self) -> TreeSnapshot | None:
        """Frozen copy of the current tree (None when empty)."""
        return freeze(self._root)

    def clear(self) -> None:
        """Discard every key. Produces no snapshots."""
        self._root = None
        self._size = 0
        logger.debug("Tree cleared")

    def keys(self) -> list[int]:
        """All keys in ascending order."""
        tree = self.get_tree()
        return [] if tree is None else list(tree.in_order())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        current = self._root
        while current is not None:
            if key == current.key:
                return True
            current = current.left if key < current.key else current.right
        return False

    def __repr__(self) -> str:
        root = self._root.key if self._root is not None else None
        return f"BalancedTreeEngine(size={self._size}, root={root!r})"

    def _finish(
        self,
        operation: Operation,
        key: int,
        before: Node | None,
        events: list[TreeEvent],
    ) -> MutationResult:
        if not events:
            logger.debug("%s %r is a no-op", operation, key)
        else:
            rotations = sum(1 for e in events if isinstance(e, Rotation))
            logger.debug("%s %r: %d events, %d rotations", operation, key, len(events), rotations)
        snapshots = self._recorder.record(operation, key, before, events)
        return MutationResult(tree=self.get_tree(), snapshots=snapshots)
