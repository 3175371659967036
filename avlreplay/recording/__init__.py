"""Frozen tree states and the recorder that produces them."""

from avlreplay.recording.recorder import ReplayError, SnapshotRecorder
from avlreplay.recording.serializers import snapshot_to_dict, snapshots_to_frame, snapshots_to_json
from avlreplay.recording.snapshot import Snapshot, TreeSnapshot, freeze
from avlreplay.recording.validation import (
    InvariantViolation,
    check_invariants,
    heights_consistent,
    is_balanced,
    is_bst,
)

__all__ = [
    "InvariantViolation",
    "ReplayError",
    "Snapshot",
    "SnapshotRecorder",
    "TreeSnapshot",
    "check_invariants",
    "freeze",
    "heights_consistent",
    "is_balanced",
    "is_bst",
    "snapshot_to_dict",
    "snapshots_to_frame",
    "snapshots_to_json",
]
