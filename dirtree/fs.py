"""Filesystem collaborator used by the walker.

Paths handed around during a traversal are ``PurePath`` values relative to the
traversal root (the root itself is ``ROOT_MARKER``). Only this module turns
them back into on-disk paths.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path, PurePath

from .types import Kind, RootNotTraversableError

ROOT_MARKER = PurePath(".")


def path_join(base: PurePath, name: str) -> PurePath:
    """Join ``name`` onto a root-relative path (``"." + "a" -> "a"``)."""
    return base / name


def path_parent(path: PurePath) -> PurePath:
    """Return the root-relative parent; top-level entries map to ``ROOT_MARKER``."""
    return path.parent


def on_disk(root: Path, relative: PurePath) -> Path:
    return root / relative


def read_kind(path: Path) -> Kind:
    """Classify ``path`` without following symlinks.

    Regular files win over symlinks, and everything else (directories, FIFOs,
    sockets, devices) is treated as a directory. Raises ``OSError`` when the
    entry's metadata cannot be read.
    """
    mode = os.lstat(path).st_mode
    if stat.S_ISREG(mode) and not stat.S_ISLNK(mode):
        return Kind.FILE
    if stat.S_ISLNK(mode):
        return Kind.SYMLINK
    return Kind.DIRECTORY


def list_children(root: Path, directory: PurePath) -> list[tuple[str, PurePath]]:
    """Return ``(name, relative_path)`` for every direct child of ``directory``.

    Order is whatever the OS yields; callers sort. Raises ``OSError`` when the
    directory cannot be opened or read.
    """
    with os.scandir(on_disk(root, directory)) as entries:
        names = [entry.name for entry in entries]
    return [(name, path_join(directory, name)) for name in names]


def sort_key(name: str) -> bytes:
    """Byte-wise ordering key for a base name."""
    return os.fsencode(name)


def ensure_traversable_root(root: str | os.PathLike[str]) -> Path:
    """Validate the traversal root and return it as a resolved ``Path``.

    Raises ``RootNotTraversableError`` when the path is missing, is not a
    directory, or cannot be listed.
    """
    label = os.fspath(root)
    path = Path(root)
    if not path.exists():
        raise RootNotTraversableError(label, "No such file or directory")
    if not path.is_dir():
        raise RootNotTraversableError(label, "Not a directory")
    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        raise RootNotTraversableError(label, exc.strerror or str(exc)) from exc
    return path.resolve()


__all__ = [
    "ROOT_MARKER",
    "ensure_traversable_root",
    "list_children",
    "on_disk",
    "path_join",
    "path_parent",
    "read_kind",
    "sort_key",
]
