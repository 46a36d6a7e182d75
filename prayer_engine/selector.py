"""Pick the next upcoming prayer and format the countdown to it."""

import datetime
from typing import NamedTuple

from prayer_engine.i18n import prayer_label
from prayer_engine.schedule import PRAYER_NAMES, PrayerEvent, PrayerSchedule

PASSED = "passed"
CURRENT = "current"
UPCOMING = "upcoming"


class NextPrayerState(NamedTuple):
    event: PrayerEvent
    remaining: str
    seconds: int


class NoScheduleAvailable:
    """Result returned when there is nothing to select from; always falsy."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_SCHEDULE"


NO_SCHEDULE = NoScheduleAvailable()


def seconds_until(target_dt: datetime.datetime, now: datetime.datetime) -> int:
    """Return whole seconds from now until target_dt (negative if past)."""
    delta = target_dt - now
    return int(delta.total_seconds())


def format_remaining(seconds: int) -> str:
    """Format seconds into an HH:MM:SS countdown string."""
    if seconds < 0:
        return "00:00:00"
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def make_state(event: PrayerEvent, now: datetime.datetime) -> NextPrayerState:
    seconds = max(seconds_until(event.instant, now), 0)
    return NextPrayerState(event, format_remaining(seconds), seconds)


def select_next(
    today_schedule: PrayerSchedule | None,
    tomorrow_fajr: datetime.datetime | None,
    now: datetime.datetime,
    language: str = "ar",
):
    """
    Return the NextPrayerState for the first prayer strictly after now.

    A prayer whose instant equals now has already passed. After today's Isha
    the next prayer is tomorrow's Fajr. Returns NO_SCHEDULE instead of raising
    when there is no schedule or no future event to point at.
    """
    if today_schedule is None:
        return NO_SCHEDULE

    for event in today_schedule.events(language):
        if event.instant > now:
            return make_state(event, now)

    if tomorrow_fajr is None or tomorrow_fajr <= now:
        return NO_SCHEDULE
    event = PrayerEvent("fajr", prayer_label("fajr", language), tomorrow_fajr)
    return make_state(event, now)


def prayer_status(schedule: PrayerSchedule | None, now: datetime.datetime) -> dict:
    """
    Classify each prayer of the day as passed, current or upcoming.

    The most recently reached prayer is current; before Fajr nothing is.
    """
    if schedule is None:
        return {}
    reached = [name for name in PRAYER_NAMES if schedule.instant(name) <= now]
    status = {}
    for name in PRAYER_NAMES:
        if name not in reached:
            status[name] = UPCOMING
        elif name == reached[-1]:
            status[name] = CURRENT
        else:
            status[name] = PASSED
    return status
