"""Terminal runtime: config, logging, raw-mode control, and the event loop."""

from __future__ import annotations

from .log_setup import setup_logging
from .loop import RuntimeLoopTiming, run_list_loop
from .terminal import TerminalController

__all__ = [
    "RuntimeLoopTiming",
    "TerminalController",
    "run_list_loop",
    "setup_logging",
]
