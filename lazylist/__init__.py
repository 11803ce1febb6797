"""Public package surface for lazylist.

Exports the list component and ``main`` for programmatic CLI invocation.
Terminal runtime code lives under ``lazylist.runtime``.
"""

from __future__ import annotations

from .list_model import Effect, FilterKeystroke, InputMode, Item, ListAction, ListModel, ListState, Resize, SetItems


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Effect",
    "FilterKeystroke",
    "InputMode",
    "Item",
    "ListAction",
    "ListModel",
    "ListState",
    "Resize",
    "SetItems",
    "main",
]
