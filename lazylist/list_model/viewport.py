"""Cursor-follow scrolling over variable-height item blocks.

After every transition the cursor's whole block must sit inside the viewport:
``top(viewport_start) <= top(cursor)`` and
``bottom(cursor) <= top(viewport_start) + viewport_height``. Scrolling moves
the viewport by the minimum number of items needed to restore that.
"""

from __future__ import annotations

from dataclasses import replace

from .state import ListState

PAGE_STEP = 5


def clamp_index(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count - 1]``, or ``0`` for an empty range."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def follow_cursor(cursor: int, viewport_start: int, state: ListState) -> tuple[int, int]:
    """Return ``(cursor, viewport_start)`` with the cursor block made visible.

    The cursor is clamped first. An item above the viewport becomes the first
    visible item; an item below it scrolls down until its bottom edge meets the
    viewport bottom. An item taller than the viewport is shown from its top.
    """
    count = len(state.visible)
    if count == 0 or len(state.heights) == 0:
        return 0, 0

    cursor = clamp_index(cursor, count)
    heights = state.heights
    item_top = heights.top(cursor)
    item_bottom = heights.bottom(cursor)
    viewport_top = heights.top(viewport_start)
    viewport_bottom = viewport_top + state.viewport_height

    if item_top < viewport_top:
        viewport_start = cursor
    elif item_bottom > viewport_bottom:
        target_top = item_bottom - state.viewport_height
        viewport_start = min(heights.first_index_at_or_after(target_top), cursor)

    return cursor, clamp_index(viewport_start, count)


def adjust_viewport(state: ListState) -> ListState:
    """Return ``state`` with cursor clamped and the viewport following it."""
    cursor, viewport_start = follow_cursor(state.cursor, state.viewport_start, state)
    if cursor == state.cursor and viewport_start == state.viewport_start:
        return state
    return replace(state, cursor=cursor, viewport_start=viewport_start)


def move_cursor(state: ListState, delta: int) -> ListState:
    """Move the cursor by ``delta`` items, clamped, and scroll to follow it."""
    if not state.visible:
        return state
    target = clamp_index(state.cursor + delta, len(state.visible))
    if target == state.cursor:
        return state
    return adjust_viewport(replace(state, cursor=target))


def reset_viewport(state: ListState) -> ListState:
    """Put cursor and viewport back at the top, then validate."""
    return adjust_viewport(replace(state, cursor=0, viewport_start=0))


def cursor_block_visible(state: ListState) -> bool:
    """Return whether the cursor block lies fully inside the viewport."""
    if not state.visible:
        return True
    viewport_top = state.heights.top(state.viewport_start)
    return (
        viewport_top <= state.heights.top(state.cursor)
        and state.heights.bottom(state.cursor) <= viewport_top + state.viewport_height
    )
