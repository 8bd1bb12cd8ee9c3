"""Shared traversal data types.

``Kind`` tags each directory entry once. ``TraversalState`` is owned by a
single ``Traverser`` run and holds the counters plus the finished-directory map
that drives connector glyphs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath


class Kind(Enum):
    FILE = "file"
    SYMLINK = "symlink"
    DIRECTORY = "directory"


class RootNotTraversableError(Exception):
    """Raised before any output when the traversal root cannot be walked."""

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"{root}: {reason}")
        self.root = root
        self.reason = reason


@dataclass(frozen=True)
class TraversalError:
    """One recovered subtree error: which relative path failed and why."""

    path: PurePath
    error: OSError

    @property
    def reason(self) -> str:
        return self.error.strerror or str(self.error)


@dataclass
class TraversalStats:
    files: int = 0
    dirs: int = 0
    symlinks: int = 0

    def count(self, kind: Kind) -> None:
        """Increment the counter matching ``kind``."""
        if kind is Kind.FILE:
            self.files += 1
        elif kind is Kind.SYMLINK:
            self.symlinks += 1
        else:
            self.dirs += 1

    def as_tuple(self) -> tuple[int, int, int]:
        """Return ``(files, dirs, symlinks)``."""
        return self.files, self.dirs, self.symlinks


@dataclass
class TraversalState:
    """Mutable per-run state.

    ``finished`` maps a directory path (relative to the root, root is ``"."``)
    to ``True`` once that directory's last child has started processing.
    Keys are inserted once and never removed.
    """

    stats: TraversalStats = field(default_factory=TraversalStats)
    finished: dict[PurePath, bool] = field(default_factory=dict)
    errors: list[TraversalError] = field(default_factory=list)

    def mark_finished(self, directory: PurePath) -> None:
        self.finished[directory] = True

    def is_finished(self, directory: PurePath) -> bool:
        return self.finished.get(directory) is True


__all__ = [
    "Kind",
    "RootNotTraversableError",
    "TraversalError",
    "TraversalStats",
    "TraversalState",
]
