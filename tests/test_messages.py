"""Tests for the messages module."""

import datetime
import unittest

from prayer_engine.messages import (
    DAILY_MESSAGES,
    MESSAGE_TYPE_LABELS,
    daily_message,
    message_type_label,
)


class TestDailyMessage(unittest.TestCase):
    def test_first_day_of_year(self):
        self.assertIs(daily_message(datetime.date(2026, 1, 1)), DAILY_MESSAGES[1])

    def test_rotates_day_by_day(self):
        self.assertIs(daily_message(datetime.date(2026, 1, 2)), DAILY_MESSAGES[2])
        self.assertIs(daily_message(datetime.date(2026, 1, 11)), DAILY_MESSAGES[11])

    def test_wraps_around_table(self):
        self.assertIs(daily_message(datetime.date(2026, 1, 12)), DAILY_MESSAGES[0])
        self.assertIs(daily_message(datetime.date(2026, 1, 13)), DAILY_MESSAGES[1])

    def test_end_of_year(self):
        self.assertIs(daily_message(datetime.date(2026, 12, 31)), DAILY_MESSAGES[365 % 12])
        self.assertIs(daily_message(datetime.date(2024, 12, 31)), DAILY_MESSAGES[366 % 12])

    def test_same_day_same_message(self):
        self.assertIs(daily_message(datetime.date(2026, 10, 19)), daily_message(datetime.date(2026, 10, 19)))

    def test_defaults_to_today(self):
        self.assertIs(daily_message(), daily_message(datetime.date.today()))

    def test_every_message_is_complete(self):
        for message in DAILY_MESSAGES:
            self.assertIn(message["type"], MESSAGE_TYPE_LABELS)
            self.assertTrue(message["text"])
            self.assertTrue(message["source"])


class TestMessageTypeLabel(unittest.TestCase):
    def test_localized(self):
        ayah = {"type": "ayah", "text": "", "source": ""}
        self.assertEqual(message_type_label(ayah, "ar"), "📖 آية كريمة")
        self.assertEqual(message_type_label(ayah, "en"), "📖 Verse")

    def test_unknown_language_falls_back(self):
        self.assertEqual(message_type_label({"type": "hadith"}, "de"), "💬 حديث شريف")


if __name__ == "__main__":
    unittest.main()
