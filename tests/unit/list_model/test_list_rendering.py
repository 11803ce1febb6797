"""Tests for rendering list state into text rows."""

from __future__ import annotations

import unittest

from lazylist.ansi import display_width, strip_ansi
from lazylist.list_model import (
    FilterKeystroke,
    Item,
    ListAction,
    ListState,
    SetItems,
    item_height,
    reduce,
    render_item_block,
    render_list,
)
from lazylist.list_model.rendering import HELP_TEXT
from lazylist.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _run(state: ListState, *actions) -> ListState:
    for action in actions:
        state = reduce(state, action).state
    return state


def _rows(state: ListState, theme=PLAIN_THEME) -> list[str]:
    return render_list(state, theme).split("\n")


class ItemBlockTests(unittest.TestCase):
    def test_cursor_block_has_rounded_border(self) -> None:
        rows = render_item_block(Item("Alpha"), True, 20, PLAIN_THEME)
        self.assertEqual(
            rows,
            [
                "╭" + "─" * 14 + "╮",
                "│ Alpha        │",
                "╰" + "─" * 14 + "╯",
                "",
            ],
        )

    def test_idle_block_keeps_same_geometry(self) -> None:
        cursor_rows = render_item_block(Item("Beta"), True, 20, PLAIN_THEME)
        idle_rows = render_item_block(Item("Beta"), False, 20, PLAIN_THEME)
        self.assertEqual(len(idle_rows), len(cursor_rows))
        self.assertEqual([len(row) for row in idle_rows], [len(row) for row in cursor_rows])
        self.assertEqual(idle_rows[0], " " * 16)
        self.assertEqual(idle_rows[1].strip(), "Beta")

    def test_block_height_matches_cached_height(self) -> None:
        items = [
            Item("Title", "Subtitle", "first paragraph here\n\nsecond one"),
            Item("a very long title that will need wrapping", selected=True),
            Item(""),
        ]
        for item in items:
            for width in (12, 20, 40):
                rows = render_item_block(item, False, width, PLAIN_THEME)
                self.assertEqual(len(rows), item_height(item, width - 8))

    def test_selected_item_shows_marker(self) -> None:
        rows = render_item_block(Item("Alpha", selected=True), False, 30, PLAIN_THEME)
        self.assertIn("✓ Alpha", rows[1])

    def test_themed_cursor_border_is_styled(self) -> None:
        rows = render_item_block(Item("Alpha"), True, 20, DEFAULT_THEME)
        self.assertTrue(rows[0].startswith(DEFAULT_THEME.cursor_border))
        self.assertEqual(strip_ansi(rows[1]), "│ Alpha        │")


class RenderListTests(unittest.TestCase):
    def test_body_plus_status_row(self) -> None:
        state = ListState.create([Item("Alpha"), Item("Beta")], 60, 12)
        rows = _rows(state)
        self.assertEqual(len(rows), state.viewport_height + 1)
        self.assertTrue(rows[0].startswith("╭"))
        self.assertEqual(rows[5].strip(), "Beta")
        self.assertEqual(rows[8:11], ["", "", ""])
        self.assertEqual(rows[-1], HELP_TEXT)

    def test_without_filter_bar_body_fills_height(self) -> None:
        state = ListState.create([Item("Alpha")], 60, 12, with_filter=False)
        self.assertEqual(len(_rows(state)), 12)

    def test_cursor_move_moves_border(self) -> None:
        state = ListState.create([Item("Alpha"), Item("Beta")], 60, 12)
        before = _rows(state)
        after = _rows(_run(state, ListAction.MOVE_DOWN))
        self.assertEqual(len(before), len(after))
        self.assertEqual(after[0].strip(), "")
        self.assertTrue(after[4].startswith("╭"))
        self.assertEqual([display_width(row) for row in before], [display_width(row) for row in after])

    def test_body_is_cut_at_viewport_height(self) -> None:
        state = ListState.create([Item(f"Item {idx}") for idx in range(50)], 40, 11)
        state = _run(state, *([ListAction.MOVE_DOWN] * 12))
        rows = _rows(state)
        self.assertEqual(len(rows), 11)
        self.assertEqual(rows[1].strip(), "Item 11")
        self.assertTrue(rows[4].startswith("╭"))
        self.assertIn("Item 12", rows[5])

    def test_empty_list_shows_placeholder(self) -> None:
        state = _run(ListState.create([Item("Alpha")], 40, 20), SetItems([]))
        text = render_list(state, PLAIN_THEME)
        self.assertIn("No items to display", text)
        self.assertEqual(len(text.split("\n")), 20)

    def test_custom_placeholder(self) -> None:
        state = ListState.create([], 40, 20, placeholder="Nothing here")
        self.assertIn("Nothing here", render_list(state, PLAIN_THEME))

    def test_filter_without_match_names_the_filter(self) -> None:
        state = ListState.create([Item("Alpha")], 60, 20)
        state = _run(state, ListAction.ENTER_FILTER, FilterKeystroke("z"))
        self.assertIn("No items match filter: z", render_list(state, PLAIN_THEME))

    def test_status_row_follows_filter_mode(self) -> None:
        state = ListState.create([Item("Alpha"), Item("Calculus")], 60, 12)
        state = _run(state, ListAction.ENTER_FILTER)
        self.assertEqual(_rows(state)[-1], "Filter: Filter_")
        state = _run(state, FilterKeystroke("a"), FilterKeystroke("l"))
        self.assertEqual(_rows(state)[-1], "Filter: al_")
        state = _run(state, ListAction.CONFIRM_FILTER)
        self.assertEqual(_rows(state)[-1], "Filter: al (press / to edit, esc to clear)")

    def test_rows_never_exceed_width(self) -> None:
        items = [Item("x" * 30, description="short"), Item("wide 日本語 text")]
        state = ListState.create(items, 20, 12)
        for theme in (PLAIN_THEME, DEFAULT_THEME):
            for row in _rows(state, theme):
                self.assertLessEqual(display_width(row), 20)
