"""Tree validation, flattening, and flat-list navigation.

Defines ``FlatNode`` rows produced from validated ``FileNode`` /
``DirectoryNode`` input plus index helpers over the flat list.
"""

from __future__ import annotations

from .flatten import flatten, parse_tree_data
from .navigation import (
    child_ids,
    descendant_ids,
    directory_ids,
    index_of,
    iter_ancestor_ids,
    node_at,
    subtree_end,
    to_tree,
)
from .schema import DirectoryNode, FileNode, TreeNode, format_error_path, validate_tree
from .types import FlatNode, NodeKind

__all__ = [
    "FlatNode",
    "NodeKind",
    "FileNode",
    "DirectoryNode",
    "TreeNode",
    "validate_tree",
    "format_error_path",
    "flatten",
    "parse_tree_data",
    "index_of",
    "node_at",
    "subtree_end",
    "child_ids",
    "descendant_ids",
    "directory_ids",
    "iter_ancestor_ids",
    "to_tree",
]
