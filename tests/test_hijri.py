"""Tests for the hijri module."""

import datetime
import unittest

from prayer_engine.hijri import HijriDate, format_hijri, hijri_month_name, to_hijri


class TestToHijri(unittest.TestCase):
    def test_new_year_1446(self):
        self.assertEqual(to_hijri(datetime.date(2024, 7, 7)), HijriDate(1, 1, 1446))

    def test_ramadan_1446(self):
        self.assertEqual(to_hijri(datetime.date(2025, 3, 1)), HijriDate(2, 9, 1446))

    def test_days_advance_consecutively(self):
        first = to_hijri(datetime.date(2024, 7, 7))
        second = to_hijri(datetime.date(2024, 7, 8))
        self.assertEqual(second, HijriDate(first.day + 1, first.month, first.year))

    def test_month_always_in_range(self):
        day = datetime.date(2000, 1, 1)
        while day.year < 2003:
            hijri = to_hijri(day)
            self.assertTrue(1 <= hijri.month <= 12, day.isoformat())
            self.assertTrue(1 <= hijri.day <= 30, day.isoformat())
            day += datetime.timedelta(days=5)

    def test_defaults_to_today(self):
        self.assertEqual(to_hijri(), to_hijri(datetime.date.today()))


class TestFormatHijri(unittest.TestCase):
    def test_arabic(self):
        self.assertEqual(format_hijri(HijriDate(1, 1, 1446), "ar"), "1 محرم 1446 هـ")

    def test_english(self):
        self.assertEqual(format_hijri(HijriDate(1, 9, 1446), "en"), "1 Ramadan 1446 AH")

    def test_unknown_language_falls_back_to_arabic(self):
        self.assertEqual(format_hijri(HijriDate(1, 1, 1446), "de"), "1 محرم 1446 هـ")

    def test_has_no_weekday_prefix(self):
        with self.assertRaises(TypeError):
            format_hijri(HijriDate(1, 1, 1446), "en", weekday=6)

    def test_month_names(self):
        self.assertEqual(hijri_month_name(12, "fr"), "Dhou al-hijja")
        self.assertEqual(hijri_month_name(9, "xx"), "رمضان")


if __name__ == "__main__":
    unittest.main()
