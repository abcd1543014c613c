"""Public package surface for fileexplorer.

Exports the explorer façade, the tree/state entry points, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .errors import FileExplorerError, InvalidOperation, NodeNotFound, SchemaViolation
from .tree_model import FlatNode, NodeKind, flatten, parse_tree_data, validate_tree
from .tree_pane import FileExplorer, NodeView
from .tree_state import ExplorerState, derive_visible_ids, initial_state


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "FileExplorer",
    "NodeView",
    "ExplorerState",
    "initial_state",
    "derive_visible_ids",
    "FlatNode",
    "NodeKind",
    "flatten",
    "parse_tree_data",
    "validate_tree",
    "FileExplorerError",
    "SchemaViolation",
    "NodeNotFound",
    "InvalidOperation",
]
