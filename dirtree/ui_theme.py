"""ANSI palettes for tree output.

A theme only decides colors; glyph shapes live in ``dirtree.render``.
``PLAIN_THEME`` is used whenever color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    tree_root: str
    tree_dir: str
    tree_file: str
    tree_branch: str
    stats: str

    def paint(self, color: str, text: str) -> str:
        """Wrap ``text`` in ``color``; no-op when the color is empty."""
        if not color:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_root="\033[94m",
    tree_dir="\033[94m",
    tree_file="",
    tree_branch="",
    stats="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_branch="\033[2;38;5;31m",
    stats="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_root="",
    tree_dir="",
    tree_file="",
    tree_branch="",
    stats="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
