"""Terminal control helpers for the list session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

DEFAULT_TERMINAL_SIZE = (80, 24)


class TerminalController:
    """Manage terminal mode transitions around the interactive loop."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show cursor and restore the main screen buffer and tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def terminal_size(self, fallback: tuple[int, int] = DEFAULT_TERMINAL_SIZE) -> tuple[int, int]:
        """Return ``(columns, lines)`` of the controlled terminal."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            return fallback
        return size.columns, size.lines

    def write_frame(self, rows: list[str]) -> None:
        """Redraw the screen from the top with ``rows``, clearing leftovers."""
        out = ["\033[H"]
        for idx, row in enumerate(rows):
            if idx:
                out.append("\r\n")
            out.append(row)
            out.append("\033[0m\033[K")
        out.append("\033[J")
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
