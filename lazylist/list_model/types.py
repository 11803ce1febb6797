"""Item, mode, action, and effect datatypes shared by list-model modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Item:
    """One list entry; ``description`` paragraphs are separated by ``\\n``."""

    title: str
    subtitle: str = ""
    description: str = ""
    selected: bool = False


class InputMode(Enum):
    """Which key table owns input: list navigation or the filter editor."""

    NORMAL = "normal"
    FILTER = "filter"


class ListAction(Enum):
    """Parameterless logical actions delivered by the host."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TOGGLE_SELECT = "toggle_select"
    ENTER_FILTER = "enter_filter"
    CONFIRM_FILTER = "confirm_filter"
    CLEAR_FILTER = "clear_filter"
    FILTER_BACKSPACE = "filter_backspace"
    CHOOSE = "choose"
    QUIT = "quit"


@dataclass(frozen=True)
class FilterKeystroke:
    """One printable character typed into the filter editor."""

    char: str


@dataclass(frozen=True)
class Resize:
    """New total size of the surface the list renders into."""

    width: int
    height: int


@dataclass(frozen=True)
class SetItems:
    """Replace the whole item sequence."""

    items: Sequence[Item]


Action = ListAction | FilterKeystroke | Resize | SetItems


class Effect(Enum):
    """Intent emitted to the host; the list never acts on it itself."""

    NONE = "none"
    QUIT = "quit"
    CHOOSE = "choose"


__all__ = [
    "Action",
    "Effect",
    "FilterKeystroke",
    "InputMode",
    "Item",
    "ListAction",
    "Resize",
    "SetItems",
]
