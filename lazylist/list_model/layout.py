"""Item block geometry and the cached per-item height table.

Both the height pass and the renderer derive an item's rows from
``item_content_rows`` so a block always renders exactly as tall as its
cached height. ``HeightTable`` keeps heights with prefix sums, which makes
every scroll computation a lookup instead of a re-wrap.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate

from .text import wrap_text
from .types import Item

FILTER_BAR_HEIGHT = 1
ITEM_BORDER_HEIGHT = 2
ITEM_SPACING = 1
MIN_VIEWPORT_HEIGHT = 3
# Outer list borders (4) plus item border and padding (4).
CONTENT_MARGIN = 8
# Outer list borders only; the item box spans the rest.
BLOCK_MARGIN = 4
SELECTED_MARKER = "✓ "


def content_width_for(total_width: int) -> int:
    """Return the wrap width available to item text."""
    return total_width - CONTENT_MARGIN


def viewport_height_for(total_height: int, with_filter: bool) -> int:
    """Return the row budget for item blocks, floored at the minimum."""
    reserved = FILTER_BAR_HEIGHT if with_filter else 0
    return max(total_height - reserved, MIN_VIEWPORT_HEIGHT)


def item_content_rows(item: Item, content_width: int) -> list[tuple[str, str]]:
    """Return ``(kind, text)`` rows between an item's borders.

    Kinds are ``title``, ``subtitle``, ``description`` and ``blank``. Empty
    fields contribute nothing; an item with no text keeps one blank row.
    """
    rows: list[tuple[str, str]] = []
    if item.title:
        title = SELECTED_MARKER + item.title if item.selected else item.title
        rows.extend(("title", line) for line in wrap_text(title, content_width))
    if item.subtitle:
        rows.extend(("subtitle", line) for line in wrap_text(item.subtitle, content_width))
    if item.description:
        for paragraph in item.description.split("\n"):
            if not paragraph:
                rows.append(("blank", ""))
                continue
            rows.extend(("description", line) for line in wrap_text(paragraph, content_width))
    if not rows:
        rows.append(("blank", ""))
    return rows


def item_height(item: Item, content_width: int) -> int:
    """Return total rendered rows of one item block, border and spacing included."""
    return len(item_content_rows(item, content_width)) + ITEM_BORDER_HEIGHT + ITEM_SPACING


@dataclass(frozen=True)
class HeightTable:
    """Per-item heights plus prefix sums, parallel to the filtered items.

    ``offsets[i]`` is the first row of item ``i``; ``offsets[-1]`` is the
    total height.
    """

    heights: tuple[int, ...] = ()
    offsets: tuple[int, ...] = (0,)

    @classmethod
    def from_heights(cls, heights: Sequence[int]) -> HeightTable:
        heights = tuple(heights)
        return cls(heights=heights, offsets=tuple(accumulate(heights, initial=0)))

    @classmethod
    def for_items(cls, items: Sequence[Item], total_width: int) -> HeightTable:
        """Measure every item at the content width implied by ``total_width``."""
        content_width = content_width_for(total_width)
        return cls.from_heights(item_height(item, content_width) for item in items)

    def __len__(self) -> int:
        return len(self.heights)

    @property
    def total(self) -> int:
        return self.offsets[-1]

    def top(self, index: int) -> int:
        """Return the first row of item ``index``, clamped to the table."""
        index = max(0, min(index, len(self.heights)))
        return self.offsets[index]

    def bottom(self, index: int) -> int:
        """Return the row just past item ``index``."""
        if not (0 <= index < len(self.heights)):
            return self.top(index)
        return self.offsets[index + 1]

    def first_index_at_or_after(self, row: int) -> int:
        """Return the smallest index whose top row is ``>= row``.

        Returns ``len(self)`` when every item starts above ``row``.
        """
        return bisect_left(self.offsets, row, 0, len(self.heights))

    def with_height(self, index: int, height: int) -> HeightTable:
        """Return a copy with one entry replaced and prefix sums rebuilt."""
        if not (0 <= index < len(self.heights)) or self.heights[index] == height:
            return self
        heights = list(self.heights)
        heights[index] = height
        return HeightTable.from_heights(heights)
