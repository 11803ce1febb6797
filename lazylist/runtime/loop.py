"""Interactive event loop for the terminal list.

Each iteration syncs the list to the terminal size, redraws when the state
changed, then decodes one key and dispatches it through the key table of
the current input mode. Events are handled strictly in arrival order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..input import action_for_key, default_key_tables, read_key
from ..input.key_registry import KeyComboRegistry
from ..list_model import Effect, InputMode, ListAction, ListModel
from ..ui_theme import UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_timeout_ms: int = 120


def run_list_loop(
    model: ListModel,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    key_tables: dict[InputMode, KeyComboRegistry[ListAction]] | None = None,
) -> Effect:
    """Run the list until it emits a non-empty effect, and return that effect."""
    tables = key_tables if key_tables is not None else default_key_tables()
    dirty = True
    logger.debug("loop start: %d items", len(model.state.items))

    with terminal.raw_mode():
        while True:
            columns, lines = terminal.terminal_size()
            if (columns, lines) != (model.state.width, model.state.height):
                model.resize(columns, lines)
                dirty = True

            if dirty:
                terminal.write_frame(model.render(theme).split("\n"))
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            action = action_for_key(key, model.state.mode, tables)
            if action is None:
                continue
            previous = model.state
            effect = model.dispatch(action)
            if model.state is not previous:
                dirty = True
            if effect is not Effect.NONE:
                logger.debug("loop stop: %s", effect.value)
                return effect
