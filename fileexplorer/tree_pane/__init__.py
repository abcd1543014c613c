"""Presentation-facing explorer pieces: rows, gestures, text rows."""

from .explorer import FileExplorer
from .rendering import format_node_view, format_rows
from .rows import NodeView, node_views, visible_node_views

__all__ = [
    "FileExplorer",
    "NodeView",
    "node_views",
    "visible_node_views",
    "format_node_view",
    "format_rows",
]
