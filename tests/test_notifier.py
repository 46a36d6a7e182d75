"""Tests for the notifier module."""

import datetime
import unittest
from unittest.mock import MagicMock, patch

from prayer_engine.notifier import ArrivalNotifier, _send_plyer, notify_prayer_time
from prayer_engine.schedule import PrayerEvent
from prayer_engine.selector import NO_SCHEDULE, NextPrayerState

NOON = datetime.datetime(2026, 10, 19, 12, 15)


def state(name, display_name=""):
    return NextPrayerState(PrayerEvent(name, display_name, NOON), "00:10:00", 600)


class TestNotifyPrayerTime(unittest.TestCase):
    @patch("prayer_engine.notifier._send_plyer")
    def test_calls_send_plyer(self, mock_plyer):
        sent = notify_prayer_time(PrayerEvent("maghrib", "المغرب", NOON), "en")
        self.assertTrue(sent)
        mock_plyer.assert_called_once()
        title, message = mock_plyer.call_args[0][:2]
        self.assertIn("Maghrib", title)
        self.assertIn("time for Maghrib", message)

    @patch("prayer_engine.notifier._send_plyer")
    def test_arabic_message(self, mock_plyer):
        notify_prayer_time(PrayerEvent("dhuhr", "Dhuhr", NOON), "ar")
        message = mock_plyer.call_args[0][1]
        self.assertIn("الظهر", message)

    @patch("prayer_engine.notifier._send_plyer")
    def test_calls_callback(self, mock_plyer):
        cb = MagicMock()
        notify_prayer_time(PrayerEvent("asr", "Asr", NOON), "fr", callback=cb)
        cb.assert_called_once()

    @patch("prayer_engine.notifier._send_plyer")
    def test_sunrise_is_silent(self, mock_plyer):
        cb = MagicMock()
        self.assertFalse(notify_prayer_time(PrayerEvent("sunrise", "Sunrise", NOON), "en", cb))
        mock_plyer.assert_not_called()
        cb.assert_not_called()

    @patch("prayer_engine.notifier.plyer_notification")
    def test_backend_failure_is_logged(self, mock_notification):
        mock_notification.notify.side_effect = NotImplementedError("no backend")
        with self.assertLogs("prayer_engine.notifier", level="WARNING"):
            _send_plyer("title", "message")


class TestArrivalNotifier(unittest.TestCase):
    @patch("prayer_engine.notifier.notify_prayer_time")
    def test_first_commit_is_silent(self, mock_notify):
        notifier = ArrivalNotifier(lambda: "en")
        notifier(state("dhuhr"), True)
        mock_notify.assert_not_called()

    @patch("prayer_engine.notifier.notify_prayer_time")
    def test_announces_previous_prayer_on_change(self, mock_notify):
        cb = MagicMock()
        notifier = ArrivalNotifier(lambda: "en", cb)
        notifier(state("dhuhr"), True)
        notifier(state("dhuhr"), False)
        notifier(state("asr"), True)
        mock_notify.assert_called_once()
        event, language, callback = mock_notify.call_args[0]
        self.assertEqual(event.name, "dhuhr")
        self.assertEqual(language, "en")
        self.assertIs(callback, cb)

    @patch("prayer_engine.notifier.notify_prayer_time")
    def test_held_change_is_not_announced(self, mock_notify):
        notifier = ArrivalNotifier(lambda: "en")
        notifier(state("dhuhr"), True)
        notifier(state("dhuhr"), False)
        mock_notify.assert_not_called()

    @patch("prayer_engine.notifier.notify_prayer_time")
    def test_ignores_missing_schedule(self, mock_notify):
        notifier = ArrivalNotifier(lambda: "en")
        notifier(NO_SCHEDULE, False)
        notifier(state("fajr"), True)
        mock_notify.assert_not_called()

    @patch("prayer_engine.notifier.notify_prayer_time")
    def test_gap_without_schedule_announces_nothing(self, mock_notify):
        notifier = ArrivalNotifier(lambda: "en")
        notifier(state("isha"), True)
        notifier(NO_SCHEDULE, True)
        notifier(state("fajr"), True)
        mock_notify.assert_not_called()


if __name__ == "__main__":
    unittest.main()
