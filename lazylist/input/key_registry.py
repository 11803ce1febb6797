"""Reusable key-combo registry primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeyComboBinding(Generic[T]):
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    action: T
    help_key: str = ""
    help_text: str = ""


class KeyComboRegistry(Generic[T]):
    """Small exact-match key-dispatch table."""

    def __init__(self) -> None:
        """Initialize an empty exact-match registry."""
        self._actions: dict[str, T] = {}
        self._bindings: list[KeyComboBinding[T]] = []

    def register_binding(self, binding: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register one binding, overwriting existing actions for same combos."""
        for combo in binding.combos:
            self._actions[combo] = binding.action
        self._bindings.append(binding)
        return self

    def register_bindings(self, *bindings: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> T | None:
        """Return the action bound to ``key``, or ``None``."""
        return self._actions.get(key)

    def bindings(self) -> tuple[KeyComboBinding[T], ...]:
        """Return bindings in registration order, for help rendering."""
        return tuple(self._bindings)
