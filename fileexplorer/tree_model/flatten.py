"""Pre-order flattening of the validated recursive tree."""

from __future__ import annotations

from ..ids import IdFactory, new_node_id
from .schema import DirectoryNode, FileNode, validate_tree
from .types import FlatNode, NodeKind


def flatten(tree: FileNode | DirectoryNode, id_factory: IdFactory = new_node_id) -> tuple[FlatNode, ...]:
    """Flatten ``tree`` into depth-first pre-order rows.

    Each node is emitted before its children, so every subtree occupies a
    contiguous index range right after its root row.
    """
    nodes: list[FlatNode] = []

    def walk(node: FileNode | DirectoryNode, parent_id: str | None, level: int) -> None:
        node_id = id_factory()
        if isinstance(node, FileNode):
            nodes.append(
                FlatNode(
                    node_id,
                    parent_id,
                    level,
                    node.name,
                    NodeKind.FILE,
                    size=node.size,
                    modified=node.modified,
                )
            )
            return
        nodes.append(FlatNode(node_id, parent_id, level, node.name, NodeKind.DIRECTORY))
        for child in node.children:
            walk(child, node_id, level + 1)

    walk(tree, None, 0)
    return tuple(nodes)


def parse_tree_data(data: object, id_factory: IdFactory = new_node_id) -> tuple[FlatNode, ...]:
    """Validate untyped ``data`` and flatten it; raises ``SchemaViolation``."""
    return flatten(validate_tree(data), id_factory=id_factory)
