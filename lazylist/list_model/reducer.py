"""State transitions for the list: ``reduce(state, action) -> Transition``.

Each input mode owns a disjoint handler table. Actions without a handler in
the current mode leave the state untouched, which is how the filter editor
swallows navigation keys while it is open. Size and item replacement apply
in every mode.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .filtering import clip_filter_text, filter_item_indices
from .layout import HeightTable, content_width_for, item_height, viewport_height_for
from .state import ListState
from .types import Action, Effect, FilterKeystroke, InputMode, Item, ListAction, Resize, SetItems
from .viewport import PAGE_STEP, adjust_viewport, move_cursor, reset_viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Next state plus the intent the host should act on."""

    state: ListState
    effect: Effect = Effect.NONE


def set_items(state: ListState, items: Sequence[Item]) -> ListState:
    """Replace items, reapply the current filter, and reset to the top."""
    items = tuple(items)
    visible = filter_item_indices(items, state.filter_text)
    logger.debug("set_items: %d items, %d visible", len(items), len(visible))
    return reset_viewport(
        replace(
            state,
            items=items,
            visible=visible,
            heights=HeightTable.for_items([items[idx] for idx in visible], state.width),
        )
    )


def apply_filter(state: ListState, filter_text: str) -> ListState:
    """Set filter text, recompute the visible subsequence, and reset to the top."""
    filter_text = clip_filter_text(filter_text)
    visible = filter_item_indices(state.items, filter_text)
    logger.debug("apply_filter: %r matched %d of %d", filter_text, len(visible), len(state.items))
    return reset_viewport(
        replace(
            state,
            filter_text=filter_text,
            visible=visible,
            heights=HeightTable.for_items([state.items[idx] for idx in visible], state.width),
        )
    )


def resize(state: ListState, width: int, height: int) -> ListState:
    """Apply a new surface size: viewport budget first, then heights, then scroll."""
    viewport_height = viewport_height_for(height, state.with_filter)
    heights = state.heights
    if width != state.width:
        heights = HeightTable.for_items(state.filtered_items, width)
    if (width, height, viewport_height) != (state.width, state.height, state.viewport_height):
        logger.debug("resize: %dx%d, viewport %d rows", width, height, viewport_height)
    return adjust_viewport(
        replace(state, width=width, height=height, viewport_height=viewport_height, heights=heights)
    )


def toggle_select(state: ListState) -> ListState:
    """Flip ``selected`` on the cursor item, addressed by its original index."""
    if not (0 <= state.cursor < len(state.visible)):
        return state
    item_index = state.visible[state.cursor]
    item = state.items[item_index]
    toggled = replace(item, selected=not item.selected)
    items = state.items[:item_index] + (toggled,) + state.items[item_index + 1:]
    # The selection marker can change how the title wraps.
    heights = state.heights.with_height(state.cursor, item_height(toggled, content_width_for(state.width)))
    return adjust_viewport(replace(state, items=items, heights=heights))


def _move(delta: int) -> Callable[[ListState], Transition]:
    """Build a handler that moves the cursor by ``delta`` items."""

    def handler(state: ListState) -> Transition:
        return Transition(move_cursor(state, delta))

    return handler


def _toggle_select(state: ListState) -> Transition:
    """Flip selection on the cursor item."""
    return Transition(toggle_select(state))


def _enter_filter(state: ListState) -> Transition:
    """Open the filter editor, unless filtering is disabled."""
    if not state.with_filter:
        return Transition(state)
    return Transition(replace(state, mode=InputMode.FILTER))


def _clear_applied_filter(state: ListState) -> Transition:
    """Drop a committed filter from normal mode."""
    if not state.filter_text:
        return Transition(state)
    return Transition(apply_filter(state, ""))


def _choose(state: ListState) -> Transition:
    """Emit ``CHOOSE`` when the cursor rests on an item."""
    if state.cursor_item() is None:
        return Transition(state)
    return Transition(state, Effect.CHOOSE)


def _quit(state: ListState) -> Transition:
    """Emit ``QUIT``; the host decides what quitting means."""
    return Transition(state, Effect.QUIT)


def _confirm_filter(state: ListState) -> Transition:
    """Leave the editor and keep the typed filter."""
    return Transition(apply_filter(replace(state, mode=InputMode.NORMAL), state.filter_text))


def _clear_filter(state: ListState) -> Transition:
    """Leave the editor with the filter emptied."""
    return Transition(apply_filter(replace(state, mode=InputMode.NORMAL), ""))


def _filter_backspace(state: ListState) -> Transition:
    """Delete the last filter character."""
    if not state.filter_text:
        return Transition(state)
    return Transition(apply_filter(state, state.filter_text[:-1]))


def _filter_keystroke(state: ListState, char: str) -> Transition:
    """Append one typed character to the filter, within the length cap."""
    if state.mode is not InputMode.FILTER or not char:
        return Transition(state)
    filter_text = clip_filter_text(state.filter_text + char)
    if filter_text == state.filter_text:
        return Transition(state)
    return Transition(apply_filter(state, filter_text))


_NORMAL_HANDLERS: dict[ListAction, Callable[[ListState], Transition]] = {
    ListAction.MOVE_UP: _move(-1),
    ListAction.MOVE_DOWN: _move(1),
    ListAction.PAGE_UP: _move(-PAGE_STEP),
    ListAction.PAGE_DOWN: _move(PAGE_STEP),
    ListAction.TOGGLE_SELECT: _toggle_select,
    ListAction.ENTER_FILTER: _enter_filter,
    ListAction.CLEAR_FILTER: _clear_applied_filter,
    ListAction.CHOOSE: _choose,
    ListAction.QUIT: _quit,
}

_FILTER_HANDLERS: dict[ListAction, Callable[[ListState], Transition]] = {
    ListAction.CONFIRM_FILTER: _confirm_filter,
    ListAction.CLEAR_FILTER: _clear_filter,
    ListAction.FILTER_BACKSPACE: _filter_backspace,
}

MODE_HANDLERS: dict[InputMode, dict[ListAction, Callable[[ListState], Transition]]] = {
    InputMode.NORMAL: _NORMAL_HANDLERS,
    InputMode.FILTER: _FILTER_HANDLERS,
}


def reduce(state: ListState, action: Action) -> Transition:
    """Apply one action and return the next state with its effect."""
    if isinstance(action, Resize):
        return Transition(resize(state, action.width, action.height))
    if isinstance(action, SetItems):
        return Transition(set_items(state, action.items))
    if isinstance(action, FilterKeystroke):
        return _filter_keystroke(state, action.char)
    handler = MODE_HANDLERS[state.mode].get(action)
    if handler is None:
        return Transition(state)
    return handler(state)
