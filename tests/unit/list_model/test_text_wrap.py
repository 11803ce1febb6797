"""Tests for greedy word wrapping of item text."""

from __future__ import annotations

import unittest

from lazylist.ansi import display_width
from lazylist.list_model import wrap_text


class WrapTextTests(unittest.TestCase):
    def test_non_positive_width_disables_wrapping(self) -> None:
        self.assertEqual(wrap_text("hello  world", 0), ["hello  world"])
        self.assertEqual(wrap_text("hello world", -3), ["hello world"])

    def test_blank_text_yields_single_empty_line(self) -> None:
        self.assertEqual(wrap_text("", 10), [""])
        self.assertEqual(wrap_text("   ", 10), [""])

    def test_packs_words_greedily(self) -> None:
        self.assertEqual(wrap_text("the quick brown fox", 10), ["the quick", "brown fox"])

    def test_exact_fit_stays_on_one_line(self) -> None:
        self.assertEqual(wrap_text("abc def", 7), ["abc def"])

    def test_long_word_sits_alone_and_overflows(self) -> None:
        self.assertEqual(
            wrap_text("a supercalifragilistic b", 5),
            ["a", "supercalifragilistic", "b"],
        )

    def test_whitespace_runs_collapse(self) -> None:
        self.assertEqual(wrap_text("  one \t two   three ", 40), ["one two three"])

    def test_wide_characters_count_two_columns(self) -> None:
        self.assertEqual(wrap_text("日本 語", 4), ["日本", "語"])

    def test_lines_respect_width_and_keep_every_word(self) -> None:
        texts = [
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit",
            "a bb ccc dddd eeeee ffffff ggggggg",
            "single",
        ]
        for text in texts:
            for width in range(1, 30):
                lines = wrap_text(text, width)
                self.assertTrue(lines)
                self.assertEqual(" ".join(lines).split(), text.split())
                for line in lines:
                    if " " in line:
                        self.assertLessEqual(display_width(line), width)
