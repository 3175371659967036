"""avlreplay: an AVL tree that records every step it takes.

Each insert or remove returns the final tree together with an ordered
sequence of immutable snapshots (the state before the call, one state per
insertion, deletion or rotation) ready to be stepped through or animated.

Example:
    from avlreplay import BalancedTreeEngine

    engine = BalancedTreeEngine()
    result = engine.build([30, 10, 20])
    print([s.label for s in result.snapshots])
"""

import logging

from avlreplay.engine import BalancedTreeEngine, MutationResult
from avlreplay.keys import InvalidKeyError, parse_key, parse_keys
from avlreplay.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from avlreplay.recording import (
    InvariantViolation,
    ReplayError,
    Snapshot,
    SnapshotRecorder,
    TreeSnapshot,
    check_invariants,
    snapshot_to_dict,
    snapshots_to_frame,
    snapshots_to_json,
)
from avlreplay.tree import NodeDeleted, NodeInserted, Rotation, RotationKind, TreeEvent

logging.getLogger("avlreplay").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Engine
    "BalancedTreeEngine",
    "MutationResult",
    # Events
    "NodeDeleted",
    "NodeInserted",
    "Rotation",
    "RotationKind",
    "TreeEvent",
    # Snapshots
    "InvariantViolation",
    "ReplayError",
    "Snapshot",
    "SnapshotRecorder",
    "TreeSnapshot",
    "check_invariants",
    "snapshot_to_dict",
    "snapshots_to_frame",
    "snapshots_to_json",
    # Input
    "InvalidKeyError",
    "parse_key",
    "parse_keys",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
