"""ANSI palettes for plain-text tree previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the row formatter."""

    name: str
    reset: str
    reverse: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_size: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;109m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_size="",
)

THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, PLAIN_THEME)}


def available_theme_names() -> list[str]:
    return sorted(THEMES)


def theme_by_name(name: str | None) -> UITheme:
    """Return the named theme, falling back to ``DEFAULT_THEME``."""
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name.strip().lower(), DEFAULT_THEME)
