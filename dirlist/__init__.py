"""Public package surface for dirlist.

Exports ``main`` for programmatic CLI invocation and ``list_directory`` for
callers that want the rendered listing text directly.
"""

from __future__ import annotations

__version__ = "1.3.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def list_directory(*args, **kwargs):
    """Render one listing; see :func:`dirlist.listing.list_directory`."""
    from .listing import list_directory as _list_directory

    return _list_directory(*args, **kwargs)


__all__ = ["__version__", "main", "list_directory"]
