"""Public package surface for dirtree.

Exports ``main`` for programmatic CLI invocation and ``walk`` for rendering a
tree to any text stream.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def walk(*args, **kwargs):
    """Render a tree and return ``(files, dirs, symlinks)``."""
    from .walker import walk as _walk

    return _walk(*args, **kwargs)


__all__ = ["main", "walk"]
