"""Immutable explorer state owned by one widget instance."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import InvalidOperation
from ..tree_model.types import FlatNode


@dataclass(frozen=True)
class ExplorerState:
    """Flat node list plus selection, expansion and visibility sets.

    ``visible_ids`` always equals ``derive_visible_ids(nodes, expanded_ids)``;
    transitions maintain it incrementally.
    """

    nodes: tuple[FlatNode, ...]
    selected_id: str | None = None
    expanded_ids: frozenset[str] = frozenset()
    visible_ids: frozenset[str] = frozenset()

    @property
    def root(self) -> FlatNode:
        return self.nodes[0]

    @property
    def directory_count(self) -> int:
        return sum(1 for node in self.nodes if node.is_dir)


def initial_state(nodes: Sequence[FlatNode]) -> ExplorerState:
    """Start with every directory collapsed and only the root visible."""
    if not nodes or nodes[0].parent_id is not None:
        raise InvalidOperation("flat list must start with the root node")
    return ExplorerState(nodes=tuple(nodes), visible_ids=frozenset({nodes[0].id}))
