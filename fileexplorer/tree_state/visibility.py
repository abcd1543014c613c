"""Visible-set closure over the expanded-directory set."""

from __future__ import annotations

from collections.abc import Sequence, Set

from ..tree_model.navigation import index_of, subtree_end
from ..tree_model.types import FlatNode


def derive_visible_ids(nodes: Sequence[FlatNode], expanded_ids: Set[str]) -> frozenset[str]:
    """Return the root plus every node whose ancestors are all expanded.

    Relies on parents preceding their children in ``nodes``.
    """
    if not nodes:
        return frozenset()
    visible = {nodes[0].id}
    for node in nodes[1:]:
        if node.parent_id in visible and node.parent_id in expanded_ids:
            visible.add(node.id)
    return frozenset(visible)


def revealed_ids(nodes: Sequence[FlatNode], expanded_ids: Set[str], directory_id: str) -> list[str]:
    """Return ids shown when ``directory_id`` opens.

    Direct children always appear; children of already-expanded nested
    directories reappear too, in flat-list order.
    """
    start = index_of(nodes, directory_id)
    opened = {directory_id}
    revealed: list[str] = []
    for node in nodes[start + 1 : subtree_end(nodes, start)]:
        if node.parent_id not in opened:
            continue
        revealed.append(node.id)
        if node.is_dir and node.id in expanded_ids:
            opened.add(node.id)
    return revealed


def hidden_ids(nodes: Sequence[FlatNode], visible_ids: Set[str], directory_id: str) -> list[str]:
    """Return currently visible descendants of ``directory_id``."""
    start = index_of(nodes, directory_id)
    return [node.id for node in nodes[start + 1 : subtree_end(nodes, start)] if node.id in visible_ids]
