"""Word wrapping for item text.

Lines are packed greedily by display width and never split inside a word.
A word wider than the target sits alone on its own line and may overflow.
"""

from __future__ import annotations

from ..ansi import display_width


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap ``text`` into lines of at most ``width`` columns.

    ``width <= 0`` disables wrapping and returns ``[text]``. Blank input
    yields ``[""]`` so empty paragraphs still occupy one row. The result is
    never empty.
    """
    if width <= 0:
        return [text]

    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    current_width = display_width(current)
    for word in words[1:]:
        word_width = display_width(word)
        if current_width + 1 + word_width > width:
            lines.append(current)
            current = word
            current_width = word_width
        else:
            current = f"{current} {word}"
            current_width += 1 + word_width
    lines.append(current)
    return lines
