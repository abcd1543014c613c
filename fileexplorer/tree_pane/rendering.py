"""Plain-text formatting of explorer rows."""

from __future__ import annotations

from ..tree_model.types import NodeKind
from ..ui_theme import DEFAULT_THEME, UITheme
from .rows import NodeView

SELECTED_SUFFIX = " *"


def format_node_view(
    view: NodeView,
    theme: UITheme | None = None,
    show_size_labels: bool = True,
) -> str:
    """Render one row as indented, ANSI-styled text.

    Selected rows are drawn in reverse video as a single span; themes without
    a reverse code mark them with a trailing ``*`` instead.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * view.level
    if view.kind is NodeKind.DIRECTORY:
        marker = "▾ " if view.is_open else "▸ "
        name = f"{view.name}/"
        size_label = ""
        name_color = active_theme.tree_dir
    else:
        marker = "  "
        name = view.name
        size_label = f" [{view.size}]" if show_size_labels and view.size else ""
        name_color = active_theme.tree_file

    if view.is_selected:
        if active_theme.reverse:
            return f"{indent}{active_theme.reverse}{marker}{name}{size_label}{reset}"
        return f"{indent}{marker}{name}{size_label}{SELECTED_SUFFIX}"

    marker_text = f"{active_theme.tree_marker}{marker}{reset}" if view.kind is NodeKind.DIRECTORY else marker
    size_text = f"{active_theme.tree_size}{size_label}{reset}" if size_label else ""
    return f"{indent}{marker_text}{name_color}{name}{reset}{size_text}"


def format_rows(
    views: list[NodeView],
    theme: UITheme | None = None,
    show_size_labels: bool = True,
) -> list[str]:
    """Format shown rows in order, skipping hidden ones."""
    return [format_node_view(view, theme, show_size_labels) for view in views if view.show]
