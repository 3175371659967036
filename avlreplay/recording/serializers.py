"""Export helpers for snapshot sequences.

Renderers get JSON-safe dicts; analysis code gets a pandas DataFrame with
one row per replay step.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

import pandas as pd

from avlreplay.recording.snapshot import Snapshot

FRAME_COLUMNS = ["step", "label", "highlight", "rotation_kind", "root", "height", "size"]


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Serialize one snapshot to a JSON-safe dict."""
    return {
        "label": snapshot.label,
        "tree": snapshot.tree.to_dict() if snapshot.tree is not None else None,
        "highlight": snapshot.highlight,
        "rotation_kind": snapshot.rotation_kind.value if snapshot.rotation_kind is not None else None,
    }


def snapshots_to_json(snapshots: Iterable[Snapshot], indent: int | None = None) -> str:
    """Serialize a snapshot sequence to a JSON array."""
    return json.dumps([snapshot_to_dict(s) for s in snapshots], indent=indent)


def snapshots_to_frame(snapshots: Iterable[Snapshot]) -> pd.DataFrame:
    """Tabulate a snapshot sequence, one row per step.

    Empty trees show ``root`` as None and ``height`` / ``size`` as 0.
    """
    rows = []
    for step, snapshot in enumerate(snapshots):
        tree = snapshot.tree
        rows.append({
            "step": step,
            "label": snapshot.label,
            "highlight": snapshot.highlight,
            "rotation_kind": snapshot.rotation_kind.value if snapshot.rotation_kind is not None else None,
            "root": tree.key if tree is not None else None,
            "height": tree.height if tree is not None else 0,
            "size": tree.size if tree is not None else 0,
        })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
