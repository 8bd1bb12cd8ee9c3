from __future__ import annotations

import unittest

from dirtree.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("solarized"), "default")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_paint_skips_empty_colors(self) -> None:
        self.assertEqual(PLAIN_THEME.paint(PLAIN_THEME.tree_dir, "src"), "src")
        self.assertEqual(OCEAN_THEME.paint(OCEAN_THEME.tree_dir, "src"), "\033[1;38;5;45msrc\033[0m")


if __name__ == "__main__":
    unittest.main()
