"""Classifier and filesystem collaborator tests."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path, PurePath

from dirtree.fs import (
    ROOT_MARKER,
    ensure_traversable_root,
    list_children,
    path_join,
    path_parent,
    read_kind,
    sort_key,
)
from dirtree.types import Kind, RootNotTraversableError


class ReadKindTests(unittest.TestCase):
    def test_regular_file_directory_and_symlinks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "file.txt").write_text("x\n", encoding="utf-8")
            (root / "sub").mkdir()
            os.symlink(root / "file.txt", root / "link-to-file")
            os.symlink(root / "sub", root / "link-to-dir")
            os.symlink(root / "missing", root / "dangling")

            self.assertIs(read_kind(root / "file.txt"), Kind.FILE)
            self.assertIs(read_kind(root / "sub"), Kind.DIRECTORY)
            self.assertIs(read_kind(root / "link-to-file"), Kind.SYMLINK)
            self.assertIs(read_kind(root / "link-to-dir"), Kind.SYMLINK)
            self.assertIs(read_kind(root / "dangling"), Kind.SYMLINK)

    @unittest.skipUnless(hasattr(os, "mkfifo"), "mkfifo not available")
    def test_unrecognized_types_fall_back_to_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fifo = Path(tmp) / "pipe"
            os.mkfifo(fifo)
            self.assertIs(read_kind(fifo), Kind.DIRECTORY)

    def test_missing_entry_raises_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                read_kind(Path(tmp) / "gone")


class PathHelperTests(unittest.TestCase):
    def test_join_and_parent_round_through_root_marker(self) -> None:
        top = path_join(ROOT_MARKER, "a")
        self.assertEqual(top, PurePath("a"))
        self.assertEqual(path_parent(top), ROOT_MARKER)
        nested = path_join(top, "b")
        self.assertEqual(path_parent(nested), PurePath("a"))

    def test_list_children_returns_relative_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "sub" / "inner.txt").write_text("", encoding="utf-8")

            top = sorted(list_children(root, ROOT_MARKER))
            self.assertEqual(top, [("sub", PurePath("sub"))])
            nested = list_children(root, PurePath("sub"))
            self.assertEqual(nested, [("inner.txt", PurePath("sub/inner.txt"))])

    def test_list_children_raises_for_non_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "file.txt").write_text("", encoding="utf-8")
            with self.assertRaises(OSError):
                list_children(root, PurePath("file.txt"))

    def test_sort_key_orders_by_bytes(self) -> None:
        names = ["b", "B", "a", "_x", ".hidden"]
        self.assertEqual(sorted(names, key=sort_key), [".hidden", "B", "_x", "a", "b"])


class EnsureTraversableRootTests(unittest.TestCase):
    def test_returns_resolved_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(ensure_traversable_root(tmp), Path(tmp).resolve())

    def test_missing_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "nope")
            with self.assertRaises(RootNotTraversableError) as ctx:
                ensure_traversable_root(missing)
            self.assertEqual(ctx.exception.root, missing)
            self.assertIn("No such file or directory", str(ctx.exception))

    def test_file_root_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("", encoding="utf-8")
            with self.assertRaises(RootNotTraversableError) as ctx:
                ensure_traversable_root(target)
            self.assertEqual(ctx.exception.reason, "Not a directory")


if __name__ == "__main__":
    unittest.main()
