"""Layout, filtering, scrolling, and rendering for the item list.

Pure state machine: no terminal I/O happens in this package.
"""

from __future__ import annotations

from .filtering import FILTER_CHAR_LIMIT, filter_item_indices, item_matches
from .layout import HeightTable, item_content_rows, item_height
from .model import ListModel
from .reducer import Transition, reduce
from .rendering import render_item_block, render_list
from .state import DEFAULT_PLACEHOLDER, ListState
from .text import wrap_text
from .types import Action, Effect, FilterKeystroke, InputMode, Item, ListAction, Resize, SetItems
from .viewport import PAGE_STEP, adjust_viewport, cursor_block_visible, move_cursor

__all__ = [
    "Action",
    "DEFAULT_PLACEHOLDER",
    "Effect",
    "FILTER_CHAR_LIMIT",
    "FilterKeystroke",
    "HeightTable",
    "InputMode",
    "Item",
    "ListAction",
    "ListModel",
    "ListState",
    "PAGE_STEP",
    "Resize",
    "SetItems",
    "Transition",
    "adjust_viewport",
    "cursor_block_visible",
    "filter_item_indices",
    "item_content_rows",
    "item_height",
    "item_matches",
    "move_cursor",
    "reduce",
    "render_item_block",
    "render_list",
    "wrap_text",
]
