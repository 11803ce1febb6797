"""Pure rendering of a ``ListState`` into text rows.

The list body is always exactly ``viewport_height`` rows: item blocks from
``viewport_start`` onward, cut at the bottom edge, then blank padding. The
cursor block gets a visible rounded border; every other block gets a blank
border of identical geometry so moving the cursor never reflows the list.
"""

from __future__ import annotations

from ..ansi import center_text, clip_ansi_line, pad_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme, styled
from .layout import BLOCK_MARGIN, content_width_for, item_content_rows
from .state import ListState
from .types import Item

HELP_TEXT = "Press / to filter, space to select, q to quit"
FILTER_PROMPT = "Filter: "
FILTER_INPUT_PLACEHOLDER = "Filter"
FILTER_EDIT_HINT = "(press / to edit, esc to clear)"
NO_MATCH_PREFIX = "No items match filter: "

_ROUNDED = ("╭", "─", "╮", "│", "╰", "╯")
_HIDDEN = (" ", " ", " ", " ", " ", " ")


def _row_style(theme: UITheme, kind: str) -> str:
    if kind == "title":
        return theme.item_title
    if kind == "subtitle":
        return theme.item_subtitle
    if kind == "description":
        return theme.item_description
    return ""


def render_item_block(item: Item, is_cursor: bool, width: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render one item as border, content rows, border, and a spacing row."""
    content_width = max(0, content_width_for(width))
    # Border-to-border span: one padding column on each side of the content.
    inner_width = content_width + 2
    top_left, horizontal, top_right, vertical, bottom_left, bottom_right = _ROUNDED if is_cursor else _HIDDEN
    border_style = theme.cursor_border if is_cursor else theme.idle_border

    def border(text: str) -> str:
        return styled(theme, border_style, text)

    rows = [border(top_left + horizontal * inner_width + top_right)]
    for kind, text in item_content_rows(item, content_width_for(width)):
        body = pad_ansi_line(styled(theme, _row_style(theme, kind), text), content_width)
        rows.append(f"{border(vertical)} {body} {border(vertical)}")
    rows.append(border(bottom_left + horizontal * inner_width + bottom_right))
    rows.append("")
    return rows


def _status_row(state: ListState, theme: UITheme) -> str:
    """Return the filter prompt, active-filter summary, or key help row."""
    if state.filter_active:
        prompt = styled(theme, theme.filter_prompt, FILTER_PROMPT)
        if state.filter_text:
            query = styled(theme, theme.filter_query, state.filter_text)
        else:
            query = styled(theme, theme.help, FILTER_INPUT_PLACEHOLDER)
        cursor_cell = styled(theme, theme.reverse, " ") if theme.reverse else "_"
        return prompt + query + cursor_cell
    if state.filter_text:
        return styled(theme, theme.filter_prompt, f"{FILTER_PROMPT}{state.filter_text} {FILTER_EDIT_HINT}")
    return styled(theme, theme.help, HELP_TEXT)


def empty_message(state: ListState) -> str:
    """Return the placeholder shown when no item passes the filter."""
    if state.filter_text:
        return NO_MATCH_PREFIX + state.filter_text
    return state.placeholder


def _body_rows(state: ListState, theme: UITheme) -> list[str]:
    if not state.visible:
        rows = [""] * state.viewport_height
        message = styled(theme, theme.placeholder, empty_message(state))
        rows[(state.viewport_height - 1) // 2] = center_text(message, max(0, state.width - BLOCK_MARGIN))
        return rows

    rows: list[str] = []
    idx = state.viewport_start
    while len(rows) < state.viewport_height and idx < len(state.visible):
        item = state.items[state.visible[idx]]
        rows.extend(render_item_block(item, idx == state.cursor, state.width, theme))
        idx += 1
    del rows[state.viewport_height:]
    rows.extend([""] * (state.viewport_height - len(rows)))
    return rows


def render_list(state: ListState, theme: UITheme = DEFAULT_THEME) -> str:
    """Render the list body plus, when filtering is enabled, the status row."""
    rows = _body_rows(state, theme)
    if state.with_filter:
        rows.append(_status_row(state, theme))
    if state.width > 0:
        rows = [clip_ansi_line(row, state.width) if row else row for row in rows]
    return "\n".join(rows)
