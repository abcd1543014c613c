"""Explorer façade: owns one widget's state and interprets gestures.

Gesture handlers translate presentation events into pure state transitions.
``NodeNotFound`` and ``InvalidOperation`` are recovered here: the previous
state is kept, the rejection is logged, and the handler returns ``False``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .. import tree_state
from ..config import NewFileDefaults
from ..errors import InvalidOperation, NodeNotFound
from ..ids import IdFactory, new_node_id
from ..tree_model import index_of, node_at, parse_tree_data
from ..tree_state import ExplorerState
from .rows import NodeView, node_views

logger = logging.getLogger(__name__)


class FileExplorer:
    """State holder for one explorer widget.

    The flat list is built once from ``data``; every gesture swaps in the next
    immutable ``ExplorerState``. Handlers return ``True`` when state changed;
    ``on_drop`` returns the landing index instead.
    """

    def __init__(
        self,
        data: object,
        *,
        prompt_for_name: Callable[[], str | None] | None = None,
        id_factory: IdFactory = new_node_id,
        new_file_defaults: NewFileDefaults | None = None,
        on_state_change: Callable[[ExplorerState], None] | None = None,
    ) -> None:
        """Validate and flatten ``data``; raises ``SchemaViolation``.

        Args:
            data: Untyped recursive tree value.
            prompt_for_name: Asked for a file name on create; ``None`` or a
                blank answer falls back to the default name.
            id_factory: Source of fresh node ids.
            new_file_defaults: Name/size/modified used for created files.
            on_state_change: Called with each newly applied state.
        """
        self._id_factory = id_factory
        self._prompt_for_name = prompt_for_name
        self._new_file_defaults = new_file_defaults or NewFileDefaults()
        self._on_state_change = on_state_change
        self.state = tree_state.initial_state(parse_tree_data(data, id_factory=id_factory))

    def rows(self) -> list[NodeView]:
        return node_views(self.state)

    @property
    def is_fully_expanded(self) -> bool:
        return tree_state.is_fully_expanded(self.state)

    def _apply(self, action: str, transition: Callable[[ExplorerState], ExplorerState]) -> bool:
        try:
            updated = transition(self.state)
        except (NodeNotFound, InvalidOperation) as exc:
            logger.debug("%s rejected: %s", action, exc)
            return False
        if updated == self.state:
            return False
        self.state = updated
        if self._on_state_change is not None:
            self._on_state_change(updated)
        return True

    def on_node_click(self, node_id: str) -> bool:
        """Select a file, or flip and select a directory."""
        return self._apply("click", lambda state: tree_state.toggle(state, node_id))

    def on_create_file(self, parent_index: int) -> bool:
        """Prompt for a name and insert a file as the parent's first child."""
        try:
            parent = node_at(self.state.nodes, parent_index)
        except NodeNotFound as exc:
            logger.debug("create file rejected: %s", exc)
            return False
        if not parent.is_dir:
            logger.debug("create file rejected: %r is not a directory", parent.name)
            return False
        name = self._prompt_for_name() if self._prompt_for_name is not None else None
        defaults = self._new_file_defaults
        return self._apply(
            "create file",
            lambda state: tree_state.insert_file(
                state,
                parent.id,
                name,
                size=defaults.size,
                modified=defaults.modified,
                default_name=defaults.name,
                id_factory=self._id_factory,
            ),
        )

    def on_toggle_all(self) -> bool:
        """Collapse everything when fully expanded, otherwise expand everything."""
        if tree_state.is_fully_expanded(self.state):
            return self._apply("collapse all", tree_state.collapse_all)
        return self._apply("expand all", tree_state.expand_all)

    def on_drag_start(self, node_id: str) -> bool:
        """Collapse a dragged directory before any drop is processed."""
        try:
            node = self.state.nodes[index_of(self.state.nodes, node_id)]
        except NodeNotFound as exc:
            logger.debug("drag start rejected: %s", exc)
            return False
        if not node.is_dir:
            return False
        return self._apply("drag start", lambda state: tree_state.collapse(state, node_id))

    def on_drop(self, from_index: int, to_index: int) -> int | None:
        """Reorder a file and return the index it now occupies.

        Drag sources must carry this landing index into the next hover event;
        it differs from ``to_index`` when a file is dropped down onto a
        directory. Rejected drops (directories, the root slot, bad indices)
        return ``None`` and keep the state.
        """
        try:
            landing = tree_state.move_landing_index(self.state, from_index, to_index)
        except (NodeNotFound, InvalidOperation) as exc:
            logger.debug("drop rejected: %s", exc)
            return None
        self._apply("drop", lambda state: tree_state.move_node(state, from_index, to_index))
        return landing
