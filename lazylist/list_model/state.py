"""Immutable list state owned by one event loop.

Every transition builds a new ``ListState``; nothing mutates in place, so a
state value can be kept, compared, or rendered without copying.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .filtering import clip_filter_text, filter_item_indices
from .layout import HeightTable, MIN_VIEWPORT_HEIGHT, viewport_height_for
from .types import InputMode, Item

DEFAULT_PLACEHOLDER = "No items to display"


@dataclass(frozen=True)
class ListState:
    """Items, active filter, cached layout, and cursor/scroll indices.

    ``visible`` holds indices into ``items`` so selection toggles address the
    underlying item directly. ``cursor`` and ``viewport_start`` index the
    filtered sequence; ``heights`` is parallel to it.
    """

    items: tuple[Item, ...] = ()
    visible: tuple[int, ...] = ()
    cursor: int = 0
    viewport_start: int = 0
    heights: HeightTable = field(default_factory=HeightTable)
    width: int = 0
    height: int = 0
    viewport_height: int = MIN_VIEWPORT_HEIGHT
    filter_text: str = ""
    mode: InputMode = InputMode.NORMAL
    with_filter: bool = True
    placeholder: str = DEFAULT_PLACEHOLDER

    @classmethod
    def create(
        cls,
        items: Sequence[Item],
        width: int,
        height: int,
        *,
        with_filter: bool = True,
        placeholder: str = DEFAULT_PLACEHOLDER,
        filter_text: str = "",
    ) -> ListState:
        """Build the initial state with layout computed and cursor at the top."""
        items = tuple(items)
        filter_text = clip_filter_text(filter_text)
        visible = filter_item_indices(items, filter_text)
        return cls(
            items=items,
            visible=visible,
            heights=HeightTable.for_items([items[idx] for idx in visible], width),
            width=width,
            height=height,
            viewport_height=viewport_height_for(height, with_filter),
            filter_text=filter_text,
            with_filter=with_filter,
            placeholder=placeholder,
        )

    @property
    def filtered_items(self) -> tuple[Item, ...]:
        return tuple(self.items[idx] for idx in self.visible)

    @property
    def item_heights(self) -> tuple[int, ...]:
        return self.heights.heights

    @property
    def total_height(self) -> int:
        return self.heights.total

    @property
    def filter_active(self) -> bool:
        """Whether the filter editor currently owns key input."""
        return self.mode is InputMode.FILTER

    @property
    def viewport_top(self) -> int:
        """First row of the viewport in whole-list row coordinates."""
        return self.heights.top(self.viewport_start)

    def cursor_item(self) -> Item | None:
        """Return the item under the cursor, or ``None`` for an empty result."""
        if not (0 <= self.cursor < len(self.visible)):
            return None
        return self.items[self.visible[self.cursor]]
