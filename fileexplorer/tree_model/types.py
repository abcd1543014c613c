"""Flat tree node datatypes shared by the model, state and pane modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    """Closed set of node variants."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FlatNode:
    """One pre-order row of the flattened tree.

    ``size`` and ``modified`` are set for files only. The root is the single
    node whose ``parent_id`` is ``None``.
    """

    id: str
    parent_id: str | None
    level: int
    name: str
    kind: NodeKind
    size: str | None = None
    modified: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY
