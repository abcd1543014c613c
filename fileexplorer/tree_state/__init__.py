"""Explorer state and its pure transitions."""

from __future__ import annotations

from .state import ExplorerState, initial_state
from .transitions import (
    DEFAULT_FILE_MODIFIED,
    DEFAULT_FILE_NAME,
    DEFAULT_FILE_SIZE,
    collapse,
    collapse_all,
    expand,
    expand_all,
    has_expanded,
    insert_file,
    is_fully_expanded,
    move_landing_index,
    move_node,
    select,
    toggle,
)
from .visibility import derive_visible_ids, hidden_ids, revealed_ids

__all__ = [
    "ExplorerState",
    "initial_state",
    "select",
    "toggle",
    "expand",
    "collapse",
    "expand_all",
    "collapse_all",
    "is_fully_expanded",
    "has_expanded",
    "insert_file",
    "move_node",
    "move_landing_index",
    "derive_visible_ids",
    "revealed_ids",
    "hidden_ids",
    "DEFAULT_FILE_NAME",
    "DEFAULT_FILE_SIZE",
    "DEFAULT_FILE_MODIFIED",
]
