"""Index and ancestry helpers over the flat node list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ..errors import NodeNotFound
from .types import FlatNode, NodeKind


def index_of(nodes: Sequence[FlatNode], node_id: str) -> int:
    """Return the index of ``node_id``; raises ``NodeNotFound``."""
    for idx, node in enumerate(nodes):
        if node.id == node_id:
            return idx
    raise NodeNotFound(node_id)


def node_at(nodes: Sequence[FlatNode], index: int) -> FlatNode:
    """Return the node at ``index``; negative or out-of-range raises ``NodeNotFound``."""
    if not 0 <= index < len(nodes):
        raise NodeNotFound(index)
    return nodes[index]


def subtree_end(nodes: Sequence[FlatNode], index: int) -> int:
    """Return the first index after the subtree rooted at ``index``."""
    node = node_at(nodes, index)
    idx = index + 1
    while idx < len(nodes) and nodes[idx].level > node.level:
        idx += 1
    return idx


def child_ids(nodes: Sequence[FlatNode], parent_id: str) -> list[str]:
    """Return direct children of ``parent_id`` in list order."""
    return [node.id for node in nodes if node.parent_id == parent_id]


def descendant_ids(nodes: Sequence[FlatNode], node_id: str) -> list[str]:
    """Return every transitive descendant of ``node_id`` in list order."""
    start = index_of(nodes, node_id)
    return [node.id for node in nodes[start + 1 : subtree_end(nodes, start)]]


def directory_ids(nodes: Sequence[FlatNode]) -> list[str]:
    return [node.id for node in nodes if node.kind is NodeKind.DIRECTORY]


def iter_ancestor_ids(nodes: Sequence[FlatNode], node_id: str) -> Iterator[str]:
    """Yield ancestor ids of ``node_id`` from its parent up to the root."""
    parents = {node.id: node.parent_id for node in nodes}
    if node_id not in parents:
        raise NodeNotFound(node_id)
    parent_id = parents[node_id]
    while parent_id is not None:
        yield parent_id
        parent_id = parents.get(parent_id)


def to_tree(nodes: Sequence[FlatNode]) -> dict[str, object]:
    """Re-nest the flat list into the JSON-like input shape.

    Children follow flat-list order. Used for export and inspection only.
    """
    if not nodes:
        raise NodeNotFound(0)
    by_id: dict[str, dict[str, object]] = {}
    root: dict[str, object] | None = None
    for node in nodes:
        if node.kind is NodeKind.FILE:
            value: dict[str, object] = {
                "name": node.name,
                "kind": node.kind.value,
                "size": node.size,
                "modified": node.modified,
            }
        else:
            value = {"name": node.name, "kind": node.kind.value, "children": []}
        by_id[node.id] = value
        if node.parent_id is None:
            root = value
            continue
        parent = by_id.get(node.parent_id)
        if parent is None:
            raise NodeNotFound(node.parent_id)
        children = parent["children"]
        assert isinstance(children, list)
        children.append(value)
    assert root is not None
    return root
