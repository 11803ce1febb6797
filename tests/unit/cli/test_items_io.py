"""Tests for loading items from JSON and plain-text sources."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazylist.items_io import ItemSourceError, load_items, parse_items
from lazylist.list_model import Item


class ParseItemsTests(unittest.TestCase):
    def test_json_strings_and_objects(self) -> None:
        items = parse_items(
            '[ "Alpha", {"title": "Beta", "subtitle": "b", "description": "x\\ny", "selected": true},'
            ' {"title": "Gamma", "subtitle": null} ]'
        )
        self.assertEqual(
            items,
            [
                Item("Alpha"),
                Item("Beta", "b", "x\ny", selected=True),
                Item("Gamma"),
            ],
        )

    def test_plain_text_lines(self) -> None:
        self.assertEqual(parse_items("  one \n\n two\n"), [Item("one"), Item("two")])
        self.assertEqual(parse_items(""), [])

    def test_bracketed_first_title_reads_as_text(self) -> None:
        self.assertEqual(
            parse_items("[WIP] fix login\nship release\n"),
            [Item("[WIP] fix login"), Item("ship release")],
        )
        self.assertEqual(parse_items("[1, "), [Item("[1,")])

    def test_wrong_entry_shapes_raise(self) -> None:
        for text in ("[1]", '[{"title": 5}]', '[{"title": "a", "selected": "yes"}]'):
            with self.assertRaises(ItemSourceError, msg=text):
                parse_items(text)


class LoadItemsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_utf8_bom_is_tolerated(self) -> None:
        path = self.root / "items.json"
        path.write_bytes(b"\xef\xbb\xbf" + '["Café"]'.encode("utf-8"))
        self.assertEqual(load_items(path), [Item("Café")])

    def test_latin1_fallback(self) -> None:
        path = self.root / "items.txt"
        path.write_bytes("Café\n".encode("latin-1"))
        self.assertEqual(load_items(path), [Item("Café")])

    def test_unreadable_path_raises(self) -> None:
        with self.assertRaises(ItemSourceError):
            load_items(self.root)
