"""Default key tables mapping key tokens to list actions, one table per mode.

The tables are disjoint on purpose: in filter mode every key that is not
Confirm, Clear or Backspace becomes filter text, so ``q`` types a letter
instead of quitting.
"""

from __future__ import annotations

from ..list_model import Action, FilterKeystroke, InputMode, ListAction
from .key_registry import KeyComboBinding, KeyComboRegistry

NORMAL_BINDINGS: tuple[KeyComboBinding[ListAction], ...] = (
    KeyComboBinding(("UP", "k"), ListAction.MOVE_UP, "↑/k", "up"),
    KeyComboBinding(("DOWN", "j"), ListAction.MOVE_DOWN, "↓/j", "down"),
    KeyComboBinding(("PAGE_UP", "CTRL_U"), ListAction.PAGE_UP, "pgup", "page up"),
    KeyComboBinding(("PAGE_DOWN", "CTRL_D"), ListAction.PAGE_DOWN, "pgdown", "page down"),
    KeyComboBinding((" ",), ListAction.TOGGLE_SELECT, "space", "select"),
    KeyComboBinding(("/",), ListAction.ENTER_FILTER, "/", "filter"),
    KeyComboBinding(("ESC",), ListAction.CLEAR_FILTER, "esc", "clear filter"),
    KeyComboBinding(("ENTER",), ListAction.CHOOSE, "enter", "choose"),
    KeyComboBinding(("q", "CTRL_C"), ListAction.QUIT, "q", "quit"),
)

FILTER_BINDINGS: tuple[KeyComboBinding[ListAction], ...] = (
    KeyComboBinding(("ENTER",), ListAction.CONFIRM_FILTER, "enter", "apply filter"),
    KeyComboBinding(("ESC",), ListAction.CLEAR_FILTER, "esc", "clear filter"),
    KeyComboBinding(("BACKSPACE",), ListAction.FILTER_BACKSPACE, "backspace", "delete char"),
)


def default_key_tables() -> dict[InputMode, KeyComboRegistry[ListAction]]:
    """Build fresh per-mode registries from the default bindings."""
    return {
        InputMode.NORMAL: KeyComboRegistry[ListAction]().register_bindings(*NORMAL_BINDINGS),
        InputMode.FILTER: KeyComboRegistry[ListAction]().register_bindings(*FILTER_BINDINGS),
    }


def action_for_key(
    key: str,
    mode: InputMode,
    tables: dict[InputMode, KeyComboRegistry[ListAction]],
) -> Action | None:
    """Translate one key token into an action for the given mode.

    In filter mode unbound printable characters become ``FilterKeystroke``;
    any other unbound token maps to ``None``.
    """
    action = tables[mode].lookup(key)
    if action is not None:
        return action
    if mode is InputMode.FILTER and len(key) == 1 and key.isprintable():
        return FilterKeystroke(key)
    return None


def describe_bindings(bindings: tuple[KeyComboBinding[ListAction], ...]) -> str:
    """Return ``key action`` pairs joined for one-line help output."""
    return "  ".join(f"{binding.help_key} {binding.help_text}" for binding in bindings)
