"""Loading list items from JSON or plain-text sources.

JSON input is an array whose entries are either strings (titles) or objects
with ``title``, ``subtitle``, ``description`` and ``selected`` keys. Any other
text is read as one title per non-blank line.
"""

from __future__ import annotations

import json
from pathlib import Path

from .list_model import Item


class ItemSourceError(ValueError):
    """Raised when an item source cannot be read or has the wrong shape."""


def _item_from_json(entry: object, position: int) -> Item:
    if isinstance(entry, str):
        return Item(title=entry)
    if not isinstance(entry, dict):
        raise ItemSourceError(f"entry {position}: expected a string or an object")

    fields: dict[str, str] = {}
    for key in ("title", "subtitle", "description"):
        value = entry.get(key, "")
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ItemSourceError(f"entry {position}: {key!r} must be a string")
        fields[key] = value
    selected = entry.get("selected", False)
    if not isinstance(selected, bool):
        raise ItemSourceError(f"entry {position}: 'selected' must be a boolean")
    return Item(selected=selected, **fields)


def parse_items(text: str) -> list[Item]:
    """Parse item text, preferring a JSON array when the input looks like one.

    Text that starts with ``[`` but is not valid JSON, such as a first title
    of ``[WIP] fix login``, is read line by line like any other text.
    """
    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list):
            return [_item_from_json(entry, position) for position, entry in enumerate(data)]
    return [Item(title=line.strip()) for line in text.splitlines() if line.strip()]


def read_text(path: Path) -> str:
    """Read ``path`` as utf-8 (BOM tolerated), falling back to latin-1."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ItemSourceError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def load_items(path: Path) -> list[Item]:
    """Load items from a file."""
    return parse_items(read_text(path))
