"""
Phrase translator: literal (hour, minute) -> phrase pairs.
"""

from __future__ import annotations

import unittest

from talkclock.logic.phrase_translator import (
    lookup_preposition,
    phrase_for,
    spoken_hour,
    spoken_minutes,
)
from talkclock.models.phrase_range import DEFAULT_PHRASE_TABLE, PhraseRange


class TestPhraseFor(unittest.TestCase):
    def test_past_the_hour(self) -> None:
        self.assertEqual(phrase_for(3, 5), "It is 5 past 3")
        self.assertEqual(phrase_for(15, 20), "It is 20 past 3")

    def test_to_the_next_hour(self) -> None:
        self.assertEqual(phrase_for(9, 35), "It is 25 to 10")
        self.assertEqual(phrase_for(21, 45), "It is 15 to 10")

    def test_rounds_up_to_twelve(self) -> None:
        self.assertEqual(phrase_for(11, 59), "It is 1 to 12")
        self.assertEqual(phrase_for(23, 59), "It is 1 to 12")

    def test_exact_hour_falls_back_to_oclock(self) -> None:
        self.assertEqual(phrase_for(9, 0), "It is 9 o'clock")
        self.assertEqual(phrase_for(12, 0), "It is 12 o'clock")
        self.assertEqual(phrase_for(0, 0), "It is 12 o'clock")

    def test_exact_half_falls_back_to_half_past(self) -> None:
        self.assertEqual(phrase_for(9, 30), "It is half past 9")
        self.assertEqual(phrase_for(0, 30), "It is half past 12")

    def test_half_rounds_up(self) -> None:
        # (8 % 12) + 30 / 60 == 8.5 must give 9, not banker's 8
        self.assertEqual(phrase_for(8, 35), "It is 25 to 9")

    def test_after_midnight_speaks_twelve(self) -> None:
        self.assertEqual(phrase_for(0, 10), "It is 10 past 12")

    def test_custom_prefix(self) -> None:
        self.assertEqual(phrase_for(3, 5, prefix="Now it's"), "Now it's 5 past 3")

    def test_gap_in_custom_table_never_raises(self) -> None:
        table = (PhraseRange(1, 10, "past"),)
        with self.assertLogs("talkclock.logic.phrase_translator", level="WARNING"):
            self.assertEqual(phrase_for(14, 20, table=table), "It is 2:20")

    def test_every_minute_produces_a_phrase(self) -> None:
        for hour in range(24):
            for minute in range(60):
                phrase = phrase_for(hour, minute)
                self.assertTrue(phrase.startswith("It is "), (hour, minute, phrase))


class TestPhraseParts(unittest.TestCase):
    def test_spoken_minutes_fold_at_half(self) -> None:
        self.assertEqual(spoken_minutes(0), 0)
        self.assertEqual(spoken_minutes(30), 30)
        self.assertEqual(spoken_minutes(31), 29)
        self.assertEqual(spoken_minutes(59), 1)

    def test_spoken_hour_at_the_half(self) -> None:
        self.assertEqual(spoken_hour(9, 30), 9)
        self.assertEqual(spoken_hour(9, 35), 10)
        self.assertEqual(spoken_hour(9, 4), 9)

    def test_lookup_is_first_match(self) -> None:
        table = (PhraseRange(1, 10, "first"), PhraseRange(5, 20, "second"))
        self.assertEqual(lookup_preposition(table, 7), "first")
        self.assertEqual(lookup_preposition(table, 15), "second")
        self.assertIsNone(lookup_preposition(table, 21))

    def test_default_table_leaves_hour_and_half_uncovered(self) -> None:
        self.assertIsNone(lookup_preposition(DEFAULT_PHRASE_TABLE, 0))
        self.assertIsNone(lookup_preposition(DEFAULT_PHRASE_TABLE, 30))
        self.assertEqual(lookup_preposition(DEFAULT_PHRASE_TABLE, 1), "past")
        self.assertEqual(lookup_preposition(DEFAULT_PHRASE_TABLE, 59), "to")


if __name__ == "__main__":
    unittest.main()
