"""Pure state transitions: ``(state, ...) -> ExplorerState``.

Every function returns a new state and leaves its input untouched. Unknown
ids or indices raise ``NodeNotFound``; disallowed edits raise
``InvalidOperation``. Callers at the gesture boundary treat both as no-ops.
"""

from __future__ import annotations

from dataclasses import replace

from ..errors import InvalidOperation
from ..ids import IdFactory, new_node_id
from ..tree_model.navigation import index_of, node_at, subtree_end
from ..tree_model.types import FlatNode, NodeKind
from .state import ExplorerState
from .visibility import hidden_ids, revealed_ids

DEFAULT_FILE_NAME = "Untitled"
DEFAULT_FILE_SIZE = "0 B"
DEFAULT_FILE_MODIFIED = "Just now"


def _directory(state: ExplorerState, node_id: str) -> FlatNode:
    node = state.nodes[index_of(state.nodes, node_id)]
    if not node.is_dir:
        raise InvalidOperation(f"{node.name!r} is not a directory")
    return node


def _shows_children(state: ExplorerState, directory_id: str) -> bool:
    return directory_id in state.expanded_ids and directory_id in state.visible_ids


def select(state: ExplorerState, node_id: str) -> ExplorerState:
    index_of(state.nodes, node_id)
    return replace(state, selected_id=node_id)


def expand(state: ExplorerState, node_id: str) -> ExplorerState:
    """Open one directory, replaying remembered nested expansion.

    A directory hidden behind a collapsed ancestor is marked expanded but
    reveals nothing until that ancestor opens.
    """
    _directory(state, node_id)
    if node_id in state.expanded_ids:
        return state
    visible = state.visible_ids
    if node_id in visible:
        visible = visible | frozenset(revealed_ids(state.nodes, state.expanded_ids, node_id))
    return replace(state, expanded_ids=state.expanded_ids | {node_id}, visible_ids=visible)


def collapse(state: ExplorerState, node_id: str) -> ExplorerState:
    """Close one directory and hide its visible descendants.

    Nested expanded directories stay in ``expanded_ids``.
    """
    _directory(state, node_id)
    if node_id not in state.expanded_ids:
        return state
    hidden = hidden_ids(state.nodes, state.visible_ids, node_id)
    return replace(
        state,
        expanded_ids=state.expanded_ids - {node_id},
        visible_ids=state.visible_ids - frozenset(hidden),
    )


def toggle(state: ExplorerState, node_id: str) -> ExplorerState:
    """Handle a click: files are selected, directories flip and are selected."""
    node = state.nodes[index_of(state.nodes, node_id)]
    if node.kind is NodeKind.FILE:
        return replace(state, selected_id=node_id)
    if node_id in state.expanded_ids:
        toggled = collapse(state, node_id)
    else:
        toggled = expand(state, node_id)
    return replace(toggled, selected_id=node_id)


def expand_all(state: ExplorerState) -> ExplorerState:
    return replace(
        state,
        expanded_ids=frozenset(node.id for node in state.nodes if node.is_dir),
        visible_ids=frozenset(node.id for node in state.nodes),
    )


def collapse_all(state: ExplorerState) -> ExplorerState:
    return replace(state, expanded_ids=frozenset(), visible_ids=frozenset({state.root.id}))


def is_fully_expanded(state: ExplorerState) -> bool:
    """Return whether a single toggle-all control should collapse."""
    return len(state.expanded_ids) == state.directory_count


def has_expanded(state: ExplorerState) -> bool:
    return bool(state.expanded_ids)


def insert_file(
    state: ExplorerState,
    parent_id: str,
    name: str | None,
    *,
    size: str = DEFAULT_FILE_SIZE,
    modified: str = DEFAULT_FILE_MODIFIED,
    default_name: str = DEFAULT_FILE_NAME,
    id_factory: IdFactory = new_node_id,
) -> ExplorerState:
    """Insert a new file directly after ``parent_id`` (first child in list order).

    Blank names fall back to ``default_name``. The file is visible right away
    only when the parent currently shows its children.
    """
    parent = _directory(state, parent_id)
    parent_idx = index_of(state.nodes, parent_id)
    new_file = FlatNode(
        id_factory(),
        parent.id,
        parent.level + 1,
        name.strip() if name and name.strip() else default_name,
        NodeKind.FILE,
        size=size,
        modified=modified,
    )
    nodes = state.nodes[: parent_idx + 1] + (new_file,) + state.nodes[parent_idx + 1 :]
    visible = state.visible_ids
    if _shows_children(state, parent.id):
        visible = visible | {new_file.id}
    return replace(state, nodes=nodes, visible_ids=visible)


def move_landing_index(state: ExplorerState, from_index: int, to_index: int) -> int:
    """Return the index the file at ``from_index`` occupies after the move.

    Moving up lands on ``to_index``. Moving down lands right after the target
    and its whole subtree, so dropping onto a directory can land further down
    than ``to_index``. Drag sources must track this index, not ``to_index``.
    Raises like ``move_node`` for rejected moves.
    """
    moving = node_at(state.nodes, from_index)
    target = node_at(state.nodes, to_index)
    if from_index == to_index:
        return from_index
    if moving.is_dir:
        raise InvalidOperation(f"cannot move directory {moving.name!r}")
    if target.parent_id is None:
        raise InvalidOperation("cannot move a node above the root")
    if from_index > to_index:
        return to_index
    remaining = state.nodes[:from_index] + state.nodes[from_index + 1 :]
    return subtree_end(remaining, to_index - 1)


def move_node(state: ExplorerState, from_index: int, to_index: int) -> ExplorerState:
    """Move the file at ``from_index`` into the neighborhood of ``to_index``.

    The file adopts the parent and level of the node at ``to_index`` and lands
    at ``move_landing_index(...)`` so every subtree stays contiguous.
    Directories and the root slot are rejected.
    """
    insert_at = move_landing_index(state, from_index, to_index)
    if from_index == to_index:
        return state
    target = state.nodes[to_index]
    moved = replace(state.nodes[from_index], parent_id=target.parent_id, level=target.level)
    remaining = state.nodes[:from_index] + state.nodes[from_index + 1 :]
    nodes = remaining[:insert_at] + (moved,) + remaining[insert_at:]

    visible = state.visible_ids - {moved.id}
    if _shows_children(state, target.parent_id):
        visible = visible | {moved.id}
    return replace(state, nodes=nodes, visible_ids=visible)
