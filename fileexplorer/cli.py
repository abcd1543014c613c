"""Command-line preview for explorer trees.

Loads a JSON tree, replays optional clicks, and prints the visible rows.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import config, tree_state
from .errors import SchemaViolation
from .tree_pane import FileExplorer, format_rows
from .ui_theme import PLAIN_THEME, available_theme_names, theme_by_name

logger = logging.getLogger(__name__)


def load_tree_file(path: Path) -> object:
    """Read JSON tree data from ``path``; exits with a message on failure."""
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def click_by_name(explorer: FileExplorer, name: str) -> None:
    """Click the first node named ``name`` in list order."""
    for node in explorer.state.nodes:
        if node.name == name:
            explorer.on_node_click(node.id)
            return
    raise SystemExit(f"No node named {name!r}")


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and print the explorer rows for a JSON tree file."""
    parser = argparse.ArgumentParser(description="Preview a file-explorer tree from a JSON file.")
    parser.add_argument("path", help="JSON file holding the tree.")
    parser.add_argument("--expand-all", action="store_true", help="Expand every directory before printing.")
    parser.add_argument(
        "--toggle",
        metavar="NAME",
        action="append",
        default=[],
        help="Click the first node with NAME (repeatable, applied in order).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--no-sizes", action="store_true", help="Hide file size labels.")
    parser.add_argument("--verbose", action="store_true", help="Log rejected gestures.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    path = Path(args.path)
    data = load_tree_file(path)
    try:
        explorer = FileExplorer(data, new_file_defaults=config.load_new_file_defaults())
    except SchemaViolation as exc:
        raise SystemExit(f"Invalid tree in {path}: {exc}") from exc

    if args.expand_all:
        explorer.state = tree_state.expand_all(explorer.state)
    for name in args.toggle:
        click_by_name(explorer, name)
    logger.debug("visible %d of %d nodes", len(explorer.state.visible_ids), len(explorer.state.nodes))

    use_color = not args.no_color and sys.stdout.isatty()
    theme = theme_by_name(args.theme) if use_color else PLAIN_THEME
    show_sizes = False if args.no_sizes else config.load_show_size_labels()
    for line in format_rows(explorer.rows(), theme=theme, show_size_labels=show_sizes):
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
