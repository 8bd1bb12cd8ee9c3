"""Row rendering for the streamed tree.

Each row prefix is rebuilt from the entry's root-relative path: for every
ancestor level the finished-directory map decides between a vertical bar and
blank filler, and the entry's own level gets a branch or last connector.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from .fs import ROOT_MARKER, path_join
from .types import Kind, TraversalState, TraversalStats
from .ui_theme import PLAIN_THEME, UITheme

INTER_LEVEL_INDENT = 3


@dataclass(frozen=True)
class Glyphs:
    """Connector glyph set."""

    name: str
    branch: str
    last: str
    vertical: str
    blank: str


UNICODE_GLYPHS = Glyphs(name="unicode", branch="├──", last="└──", vertical="│", blank=" ")
ASCII_GLYPHS = Glyphs(name="ascii", branch="|--", last="`--", vertical="|", blank=" ")

_GLYPH_SETS: dict[str, Glyphs] = {
    UNICODE_GLYPHS.name: UNICODE_GLYPHS,
    ASCII_GLYPHS.name: ASCII_GLYPHS,
}


def available_charsets() -> tuple[str, ...]:
    return tuple(sorted(_GLYPH_SETS.keys()))


def resolve_glyphs(name: str | None) -> Glyphs:
    """Return the glyph set for ``name``, falling back to unicode."""
    if not name:
        return UNICODE_GLYPHS
    return _GLYPH_SETS.get(str(name).strip().lower(), UNICODE_GLYPHS)


def render_row_prefix(
    depth: int,
    entry: PurePath,
    is_last: bool,
    state: TraversalState,
    glyphs: Glyphs = UNICODE_GLYPHS,
) -> str:
    """Return the connector prefix for ``entry`` at ``depth``.

    ``entry`` is relative to the traversal root and must have at least
    ``depth + 1`` components. Ancestor lookup keys are built with
    ``path_join`` starting from ``ROOT_MARKER``, the same rule the walker
    uses when it marks a directory finished.
    """
    components = entry.parts
    if depth < 0 or len(components) < depth + 1:
        raise ValueError(f"depth {depth} does not fit path {entry}")

    pieces: list[str] = []
    lookup = ROOT_MARKER
    for level in range(depth + 1):
        if level > 0:
            lookup = path_join(lookup, components[level - 1])
        indent = 0 if level == 0 else INTER_LEVEL_INDENT
        if level == depth:
            glyph = glyphs.last if is_last else glyphs.branch
        elif state.is_finished(lookup):
            glyph = glyphs.blank
        else:
            glyph = glyphs.vertical
        pieces.append(" " * indent + glyph)
    return "".join(pieces)


def display_text(text: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) with U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_row(prefix: str, name: str, kind: Kind, theme: UITheme = PLAIN_THEME) -> str:
    """Join a prefix and display name into one output line."""
    name_color = theme.tree_dir if kind is Kind.DIRECTORY else theme.tree_file
    return f"{theme.paint(theme.tree_branch, prefix)} {theme.paint(name_color, display_text(name))}"


def format_header(root_label: str, theme: UITheme = PLAIN_THEME) -> str:
    return theme.paint(theme.tree_root, display_text(root_label))


def format_stats(stats: TraversalStats, theme: UITheme = PLAIN_THEME) -> str:
    """Summary line: ``dirs=<N> files=<N> symlinks=<N>``."""
    return theme.paint(theme.stats, f"dirs={stats.dirs} files={stats.files} symlinks={stats.symlinks}")


__all__ = [
    "ASCII_GLYPHS",
    "INTER_LEVEL_INDENT",
    "UNICODE_GLYPHS",
    "Glyphs",
    "available_charsets",
    "display_text",
    "format_header",
    "format_row",
    "format_stats",
    "render_row_prefix",
    "resolve_glyphs",
]
