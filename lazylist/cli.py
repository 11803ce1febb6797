"""Command-line front door for lazylist.

Parses CLI options and loads items from a file or stdin. It then either
prints one rendered frame (``--render``) or runs the interactive list and
prints what the user picked.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path

from .input import FILTER_BINDINGS, NORMAL_BINDINGS, describe_bindings
from .items_io import ItemSourceError, load_items, parse_items
from .list_model import Effect, FilterKeystroke, Item, ListAction, ListModel
from .runtime import TerminalController, run_list_loop, setup_logging
from .runtime.config import load_preferences
from .runtime.terminal import DEFAULT_TERMINAL_SIZE
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazylist",
        description="Browse, filter, and pick multi-line items in the terminal.",
        epilog=(
            f"list keys: {describe_bindings(NORMAL_BINDINGS)}\n"
            f"filter keys: {describe_bindings(FILTER_BINDINGS)}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON array or text file (one title per line). '-' or omitted reads stdin.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--no-filter", action="store_true", help="Hide the filter bar and disable filtering.")
    parser.add_argument("--placeholder", default=None, help="Message shown when there are no items.")
    parser.add_argument("--render", action="store_true", help="Print one rendered frame and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width; only valid with --render.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Frame height; only valid with --render.")
    parser.add_argument("--filter", default="", help="Filter text applied before the first frame; requires the filter bar.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug log records to this file.")
    return parser


def _read_items(path_arg: str) -> list[Item]:
    if path_arg == "-":
        return parse_items(sys.stdin.read())
    path = Path(path_arg)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    return load_items(path)


def apply_initial_filter(model: ListModel, filter_text: str) -> None:
    """Type ``filter_text`` into the filter editor and confirm it."""
    if not filter_text or not model.state.with_filter:
        return
    model.dispatch(ListAction.ENTER_FILTER)
    for char in filter_text:
        model.dispatch(FilterKeystroke(char))
    model.dispatch(ListAction.CONFIRM_FILTER)


def _open_tty() -> tuple[int, int, bool]:
    """Return input and output fds for the terminal, and whether they were opened here."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        return sys.stdin.fileno(), sys.stdout.fileno(), False
    try:
        tty_fd = os.open("/dev/tty", os.O_RDWR)
    except OSError as exc:
        raise SystemExit(f"No terminal available for interactive mode: {exc.strerror or exc}") from exc
    return tty_fd, tty_fd, True


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and show the list."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.render and (args.width is not None or args.height is not None):
        parser.error("--width and --height require --render")
    setup_logging(args.log_file)

    try:
        items = _read_items(args.path)
    except ItemSourceError as exc:
        raise SystemExit(f"Invalid items in {args.path}: {exc}") from exc

    prefs = load_preferences()
    theme = resolve_theme(args.theme or prefs.theme, no_color=args.no_color)
    with_filter = prefs.show_filter and not args.no_filter
    placeholder = args.placeholder if args.placeholder is not None else prefs.placeholder
    if args.filter and not with_filter:
        parser.error("--filter needs the filter bar, which --no-filter or the show_filter config key hides")

    if args.render:
        term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
        width = args.width if args.width is not None else term.columns
        height = args.height if args.height is not None else term.lines
        model = ListModel(items, width, height, with_filter=with_filter, placeholder=placeholder)
        apply_initial_filter(model, args.filter)
        sys.stdout.write(model.render(theme) + "\n")
        return

    tty_fd, out_fd, owns_tty = _open_tty()
    try:
        terminal = TerminalController(tty_fd, out_fd)
        width, height = terminal.terminal_size()
        model = ListModel(items, width, height, with_filter=with_filter, placeholder=placeholder)
        apply_initial_filter(model, args.filter)
        effect = run_list_loop(model, terminal, tty_fd, theme)
    finally:
        if owns_tty:
            os.close(tty_fd)

    if effect is Effect.CHOOSE:
        item, found = model.selected_item()
        picked = [item] if found and item is not None else []
    else:
        picked = model.selected_items()
    logger.debug("exit: %s with %d picked", effect.value, len(picked))
    for item in picked:
        sys.stdout.write(item.title + "\n")


if __name__ == "__main__":
    main()
