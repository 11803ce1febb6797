"""Tests for the interactive list loop with a fake terminal."""

from __future__ import annotations

import contextlib
import unittest
from unittest import mock

from lazylist.list_model import Effect, Item, ListModel
from lazylist.runtime.loop import run_list_loop
from lazylist.runtime.terminal import DEFAULT_TERMINAL_SIZE
from lazylist.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self, sizes: list[tuple[int, int]]) -> None:
        self._sizes = list(sizes)
        self.frames: list[list[str]] = []
        self.raw_mode_entered = False
        self.raw_mode_exited = False

    def terminal_size(self, fallback: tuple[int, int] = DEFAULT_TERMINAL_SIZE) -> tuple[int, int]:
        if len(self._sizes) > 1:
            return self._sizes.pop(0)
        return self._sizes[0]

    def write_frame(self, rows: list[str]) -> None:
        self.frames.append(rows)

    @contextlib.contextmanager
    def raw_mode(self):
        self.raw_mode_entered = True
        try:
            yield
        finally:
            self.raw_mode_exited = True


def _model() -> ListModel:
    return ListModel([Item("Alpha"), Item("Beta"), Item("Calculus")], 40, 12)


class RunListLoopTests(unittest.TestCase):
    def _run(self, model: ListModel, keys: list, sizes=None) -> tuple[Effect, _FakeTerminal]:
        terminal = _FakeTerminal(sizes or [(40, 12)])
        with mock.patch("lazylist.runtime.loop.read_key", side_effect=keys):
            effect = run_list_loop(model, terminal, 0, PLAIN_THEME)
        return effect, terminal

    def test_quit_returns_effect_and_restores_terminal(self) -> None:
        model = _model()
        effect, terminal = self._run(model, ["j", " ", "q"])
        self.assertIs(effect, Effect.QUIT)
        self.assertEqual([item.title for item in model.selected_items()], ["Beta"])
        self.assertTrue(terminal.raw_mode_entered)
        self.assertTrue(terminal.raw_mode_exited)

    def test_filter_then_choose(self) -> None:
        model = _model()
        effect, _ = self._run(model, ["/", "a", "l", "ENTER", "ENTER"])
        self.assertIs(effect, Effect.CHOOSE)
        self.assertEqual(model.selected_item(), (Item("Alpha"), True))

    def test_q_inside_filter_is_text(self) -> None:
        model = _model()
        effect, _ = self._run(model, ["/", "q", "ESC", "q"])
        self.assertIs(effect, Effect.QUIT)
        self.assertEqual(model.state.filter_text, "")

    def test_timeouts_unbound_keys_and_interrupts_are_ignored(self) -> None:
        model = _model()
        effect, terminal = self._run(model, ["", "x", KeyboardInterrupt(), "q"])
        self.assertIs(effect, Effect.QUIT)
        self.assertEqual(len(terminal.frames), 1)

    def test_redraws_only_after_state_changes(self) -> None:
        model = _model()
        _, terminal = self._run(model, ["j", "k", "k", "q"])
        self.assertEqual(len(terminal.frames), 3)
        self.assertTrue(terminal.frames[1][4].startswith("╭"))

    def test_terminal_resize_is_applied(self) -> None:
        model = _model()
        _, terminal = self._run(model, ["", "q"], sizes=[(40, 12), (30, 9)])
        self.assertEqual((model.state.width, model.state.height), (30, 9))
        self.assertEqual(len(terminal.frames), 2)
        self.assertEqual(len(terminal.frames[-1]), 9)
