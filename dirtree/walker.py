"""Depth-first directory walker that streams tree rows.

Children are sorted per directory by base name bytes, counted as they are
classified, and rendered immediately. A directory is marked finished in the
traversal state as soon as its last child starts processing, before any
recursion, so deeper rows already see it as finished.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import PurePath
from typing import TextIO

from .fs import (
    ROOT_MARKER,
    ensure_traversable_root,
    list_children,
    on_disk,
    path_parent,
    read_kind,
    sort_key,
)
from .render import (
    UNICODE_GLYPHS,
    Glyphs,
    display_text,
    format_header,
    format_row,
    format_stats,
    render_row_prefix,
)
from .types import Kind, TraversalError, TraversalState, TraversalStats
from .ui_theme import PLAIN_THEME, UITheme

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def is_hidden_top_level(entry: PurePath) -> bool:
    """Return whether ``entry`` is a direct child of the root named with a leading dot."""
    return len(entry.parts) == 1 and entry.name.startswith(HIDDEN_PREFIX)


class Traverser:
    """One traversal run over a directory tree.

    Construction validates the root and raises ``RootNotTraversableError``
    before anything is written.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        theme: UITheme = PLAIN_THEME,
        glyphs: Glyphs = UNICODE_GLYPHS,
        show_hidden: bool = False,
    ) -> None:
        self.root_label = os.fspath(root)
        self.root = ensure_traversable_root(root)
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.theme = theme
        self.glyphs = glyphs
        self.show_hidden = show_hidden
        self.state = TraversalState()

    @property
    def stats(self) -> TraversalStats:
        return self.state.stats

    @property
    def errors(self) -> list[TraversalError]:
        return self.state.errors

    def run(self) -> TraversalStats:
        """Walk the tree, then print the summary."""
        self.walk()
        self.report_stats()
        return self.stats

    def walk(self) -> TraversalStats:
        """Print the header and every row; return the accumulated counters."""
        self._emit(format_header(self.root_label, self.theme))
        self._walk_directory(ROOT_MARKER, 0)
        return self.stats

    def report_stats(self) -> None:
        self._emit("")
        self._emit(format_stats(self.stats, self.theme))

    def _walk_directory(self, directory: PurePath, depth: int) -> None:
        try:
            children = list_children(self.root, directory)
        except OSError as exc:
            self._record_error(directory, exc)
            return
        children.sort(key=lambda child: sort_key(child[0]))

        count = len(children)
        for index, (name, entry) in enumerate(children):
            try:
                kind = read_kind(on_disk(self.root, entry))
            except OSError as exc:
                self._record_error(entry, exc)
                continue
            self.state.stats.count(kind)

            is_last = index == count - 1
            if is_last:
                self.state.mark_finished(ROOT_MARKER if depth == 0 else path_parent(entry))

            if kind is Kind.DIRECTORY:
                if not self.show_hidden and is_hidden_top_level(entry):
                    logger.debug("skipping hidden directory %s", entry)
                    continue
                self._emit_row(depth, entry, name, kind, is_last)
                self._walk_directory(entry, depth + 1)
            else:
                self._emit_row(depth, entry, name, kind, is_last)

    def _emit_row(self, depth: int, entry: PurePath, name: str, kind: Kind, is_last: bool) -> None:
        prefix = render_row_prefix(depth, entry, is_last, self.state, self.glyphs)
        self._emit(format_row(prefix, name, kind, self.theme))

    def _emit(self, line: str) -> None:
        self.out.write(f"{line}\n")

    def _display_path(self, relative: PurePath) -> str:
        if relative == ROOT_MARKER:
            return self.root_label
        return os.path.join(self.root_label, relative)

    def _record_error(self, relative: PurePath, exc: OSError) -> None:
        error = TraversalError(path=relative, error=exc)
        self.state.errors.append(error)
        logger.debug("subtree error at %s", relative, exc_info=exc)
        self.out.flush()
        self.err.write(f"dirtree: {display_text(self._display_path(relative))}: {error.reason}\n")
        self.err.flush()


def walk(root: str | os.PathLike[str], **kwargs) -> tuple[int, int, int]:
    """Render the tree under ``root`` with stats and return ``(files, dirs, symlinks)``."""
    return Traverser(root, **kwargs).run().as_tuple()


__all__ = ["HIDDEN_PREFIX", "Traverser", "is_hidden_top_level", "walk"]
