"""Row projection consumed by renderers."""

from __future__ import annotations

from dataclasses import dataclass

from ..tree_model.types import NodeKind
from ..tree_state import ExplorerState


@dataclass(frozen=True)
class NodeView:
    """Render inputs for one flat node; renderers skip rows with ``show`` false."""

    id: str
    index: int
    name: str
    kind: NodeKind
    size: str | None
    level: int
    show: bool
    is_open: bool
    is_selected: bool


def node_views(state: ExplorerState) -> list[NodeView]:
    """Project every node, hidden ones included, in flat-list order."""
    return [
        NodeView(
            id=node.id,
            index=idx,
            name=node.name,
            kind=node.kind,
            size=node.size,
            level=node.level,
            show=node.id in state.visible_ids,
            is_open=node.id in state.expanded_ids,
            is_selected=node.id == state.selected_id,
        )
        for idx, node in enumerate(state.nodes)
    ]


def visible_node_views(state: ExplorerState) -> list[NodeView]:
    return [view for view in node_views(state) if view.show]
