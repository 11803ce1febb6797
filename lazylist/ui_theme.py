"""UI theme definitions and selection helpers.

Themes are ANSI palettes for list chrome: item text, the cursor border,
and the filter/help status row. Geometry never depends on the theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the list renderer."""

    name: str
    reset: str
    reverse: str
    item_title: str
    item_subtitle: str
    item_description: str
    cursor_border: str
    idle_border: str
    placeholder: str
    filter_prompt: str
    filter_query: str
    help: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    item_title="\033[38;5;252m",
    item_subtitle="\033[38;5;250m",
    item_description="\033[38;5;110m",
    cursor_border="\033[38;5;110m",
    idle_border="",
    placeholder="\033[2;38;5;250m",
    filter_prompt="\033[1;38;5;81m",
    filter_query="\033[1;38;5;81m",
    help="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    item_title="\033[38;5;153m",
    item_subtitle="\033[38;5;110m",
    item_description="\033[38;5;117m",
    cursor_border="\033[38;5;39m",
    idle_border="",
    placeholder="\033[2;38;5;110m",
    filter_prompt="\033[1;38;5;45m",
    filter_query="\033[1;38;5;45m",
    help="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    item_title="",
    item_subtitle="",
    item_description="",
    cursor_border="",
    idle_border="",
    placeholder="",
    filter_prompt="",
    filter_query="",
    help="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def styled(theme: UITheme, style: str, text: str) -> str:
    """Wrap ``text`` in ``style`` and the theme reset, skipping empty styles."""
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "styled",
]
