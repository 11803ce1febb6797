"""Host-facing list component wrapping the pure reducer.

``ListModel`` holds the current ``ListState`` and forwards every event to
``reduce``. Hosts that prefer explicit state threading can call ``reduce``
directly and ignore this class.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..ui_theme import DEFAULT_THEME, UITheme
from .reducer import Transition, reduce
from .rendering import render_list
from .state import DEFAULT_PLACEHOLDER, ListState
from .types import Action, Effect, Item, Resize, SetItems


class ListModel:
    """Scrollable, filterable list of multi-line items."""

    def __init__(
        self,
        items: Sequence[Item],
        width: int,
        height: int,
        *,
        with_filter: bool = True,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self.state = ListState.create(
            items,
            width,
            height,
            with_filter=with_filter,
            placeholder=placeholder,
        )

    def dispatch(self, action: Action) -> Effect:
        """Apply one action and return the effect the host should honor."""
        transition: Transition = reduce(self.state, action)
        self.state = transition.state
        return transition.effect

    def set_items(self, items: Sequence[Item]) -> None:
        self.dispatch(SetItems(tuple(items)))

    def resize(self, width: int, height: int) -> None:
        self.dispatch(Resize(width, height))

    def set_placeholder(self, placeholder: str) -> None:
        """Set the message shown when the list has no items."""
        self.state = replace(self.state, placeholder=placeholder)

    def selected_item(self) -> tuple[Item | None, bool]:
        """Return the cursor item and whether one exists."""
        item = self.state.cursor_item()
        return item, item is not None

    def selected_items(self) -> list[Item]:
        """Return every item marked selected, in original item order."""
        return [item for item in self.state.items if item.selected]

    def index(self) -> int:
        """Return the cursor index within the filtered items, or ``-1``."""
        if self.state.cursor_item() is None:
            return -1
        return self.state.cursor

    def render(self, theme: UITheme = DEFAULT_THEME) -> str:
        return render_list(self.state, theme)
