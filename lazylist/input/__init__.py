"""Keyboard decoding and per-mode key dispatch."""

from __future__ import annotations

from .bindings import (
    FILTER_BINDINGS,
    NORMAL_BINDINGS,
    action_for_key,
    default_key_tables,
    describe_bindings,
)
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import read_key

__all__ = [
    "FILTER_BINDINGS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "NORMAL_BINDINGS",
    "action_for_key",
    "default_key_tables",
    "describe_bindings",
    "read_key",
]
