"""Command-line front door for dirtree.

Parses CLI options, merges them over persisted config, validates the root and
streams the rendered tree to stdout. Subtree errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from .config import load_settings
from .render import available_charsets, resolve_glyphs
from .types import RootNotTraversableError
from .ui_theme import available_theme_names, resolve_theme
from .walker import Traverser


def color_enabled(stream: TextIO, no_color: bool) -> bool:
    """Return whether ANSI colors should be written to ``stream``."""
    if no_color or os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="Print a directory tree with file, directory and symlink counts.",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to walk. Defaults to current directory.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--ascii",
        action="store_const",
        const="ascii",
        dest="charset",
        default=None,
        help=f"Use ASCII connectors instead of Unicode (charsets: {', '.join(available_charsets())}).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        default=None,
        dest="show_hidden",
        help="Also descend into hidden top-level directories.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 1 when any subtree could not be read.",
    )
    parser.add_argument("--debug", action="store_true", help="Log traversal details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and render the tree rooted at ``path``.

    Raises ``SystemExit`` with a message when the root cannot be traversed, and
    with status 1 after printing stats when ``--strict`` is active and a
    subtree error was reported.
    """
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    settings = load_settings()
    charset = args.charset if args.charset is not None else settings.charset
    show_hidden = args.show_hidden if args.show_hidden is not None else settings.show_hidden
    strict = args.strict if args.strict is not None else settings.strict
    theme = resolve_theme(args.theme or settings.theme, no_color=not color_enabled(sys.stdout, args.no_color))

    try:
        traverser = Traverser(
            args.path,
            out=sys.stdout,
            err=sys.stderr,
            theme=theme,
            glyphs=resolve_glyphs(charset),
            show_hidden=show_hidden,
        )
    except RootNotTraversableError as exc:
        raise SystemExit(f"dirtree: {exc}") from exc

    traverser.run()
    sys.stdout.flush()
    if strict and traverser.errors:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
