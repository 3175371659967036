"""Structural events emitted while a mutation runs.

A single insert or remove produces an ordered list of these records, deepest
change first. The snapshot recorder turns that list into the replay
sequence; nothing else consumes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RotationKind(Enum):
    """The four rebalancing cases, named after the heavy path."""

    LL = "LL"
    RR = "RR"
    LR = "LR"
    RL = "RL"


@dataclass(frozen=True)
class NodeInserted:
    """A new leaf holding ``key`` was attached."""

    key: int

    @property
    def label(self) -> str:
        return f"Inserted {self.key}"


@dataclass(frozen=True)
class NodeDeleted:
    """The node holding ``key`` was removed (or replaced by its successor)."""

    key: int

    @property
    def label(self) -> str:
        return f"Deleted {self.key}"


@dataclass(frozen=True)
class Rotation:
    """A rebalancing rotation of ``kind`` was applied at the node keyed ``pivot``."""

    kind: RotationKind
    pivot: int

    @property
    def label(self) -> str:
        return f"{self.kind.value} rotation at node {self.pivot}"


TreeEvent = Union[NodeInserted, NodeDeleted, Rotation]
