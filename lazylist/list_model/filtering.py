"""Case-insensitive substring filtering over item text fields."""

from __future__ import annotations

from collections.abc import Sequence

from .types import Item

FILTER_CHAR_LIMIT = 50


def item_matches(item: Item, query_folded: str) -> bool:
    """Return whether any text field of ``item`` contains ``query_folded``."""
    return (
        query_folded in item.title.casefold()
        or query_folded in item.subtitle.casefold()
        or query_folded in item.description.casefold()
    )


def filter_item_indices(items: Sequence[Item], filter_text: str) -> tuple[int, ...]:
    """Return indices of items matching ``filter_text``, in original order.

    An empty filter keeps every item.
    """
    if not filter_text:
        return tuple(range(len(items)))
    query_folded = filter_text.casefold()
    return tuple(idx for idx, item in enumerate(items) if item_matches(item, query_folded))


def clip_filter_text(text: str) -> str:
    """Bound editor text to the filter input's character limit."""
    return text[:FILTER_CHAR_LIMIT]
