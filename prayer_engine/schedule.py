"""Compute the six daily prayer times for the fixed location."""

import datetime
import logging
from typing import NamedTuple

import pytz
from adhanpy.PrayerTimes import PrayerTimes
from adhanpy.calculation import CalculationMethod

from prayer_engine.config import CALCULATION_METHOD, LOCATION, MAX_YEAR, MIN_YEAR
from prayer_engine.i18n import prayer_label

logger = logging.getLogger(__name__)

PRAYER_NAMES = ["fajr", "sunrise", "dhuhr", "asr", "maghrib", "isha"]


class PrayerEngineError(Exception):
    """Base class for prayer engine errors."""


class UnsupportedDateError(PrayerEngineError):
    """The requested date lies outside the supported computational range."""


class ScheduleComputationError(PrayerEngineError):
    """The computed times do not form a valid schedule for the day."""


class PrayerEvent(NamedTuple):
    name: str
    display_name: str
    instant: datetime.datetime


class PrayerSchedule(NamedTuple):
    date: datetime.date
    fajr: datetime.time
    sunrise: datetime.time
    dhuhr: datetime.time
    asr: datetime.time
    maghrib: datetime.time
    isha: datetime.time
    tzinfo: datetime.tzinfo | None = None

    def times(self) -> dict[str, datetime.time]:
        return {name: getattr(self, name) for name in PRAYER_NAMES}

    def instant(self, name: str) -> datetime.datetime:
        """Absolute instant of a prayer; tz-aware when the schedule has a tzinfo."""
        naive = datetime.datetime.combine(self.date, getattr(self, name))
        if self.tzinfo is None:
            return naive
        localize = getattr(self.tzinfo, "localize", None)
        if localize is not None:
            return localize(naive)
        return naive.replace(tzinfo=self.tzinfo)

    def events(self, language: str = "ar") -> list:
        """The six PrayerEvents of the day in chronological order."""
        return [
            PrayerEvent(name, prayer_label(name, language), self.instant(name))
            for name in PRAYER_NAMES
        ]


def location_timezone() -> datetime.tzinfo:
    return pytz.timezone(LOCATION["timezone"])


def parse_time(time_str: str) -> datetime.time:
    """Parse 'HH:MM' (extra characters such as seconds or a zone suffix are ignored)."""
    try:
        hour, minute = map(int, time_str.strip()[:5].split(":"))
        return datetime.time(hour, minute)
    except ValueError as exc:
        raise ScheduleComputationError(f"Invalid prayer time {time_str!r}") from exc


def _check_increasing(date: datetime.date, times: dict[str, datetime.time]) -> None:
    previous_name = None
    for name in PRAYER_NAMES:
        if previous_name is not None and times[name] <= times[previous_name]:
            raise ScheduleComputationError(
                f"{name} ({times[name]:%H:%M}) does not follow {previous_name} "
                f"({times[previous_name]:%H:%M}) on {date.isoformat()}"
            )
        previous_name = name


def schedule_from_strings(date: datetime.date, timings: dict, tzinfo=None) -> PrayerSchedule:
    """
    Build a schedule from {prayer_name: 'HH:MM'} strings.

    Keys are matched case-insensitively. Raises ScheduleComputationError when a
    prayer is missing or the times are not strictly increasing.
    """
    by_name = {str(key).lower(): value for key, value in timings.items()}
    missing = [name for name in PRAYER_NAMES if name not in by_name]
    if missing:
        raise ScheduleComputationError(f"Missing prayer times: {', '.join(missing)}")
    times = {name: parse_time(by_name[name]) for name in PRAYER_NAMES}
    _check_increasing(date, times)
    return PrayerSchedule(date=date, tzinfo=tzinfo, **times)


def adhan_calculator(date: datetime.date) -> dict[str, datetime.datetime]:
    """Astronomical prayer times for the fixed location, as aware datetimes."""
    method = getattr(CalculationMethod, CALCULATION_METHOD)
    prayer_times = PrayerTimes(
        (LOCATION["lat"], LOCATION["lon"]),
        datetime.datetime(date.year, date.month, date.day),
        method,
    )
    return {name: getattr(prayer_times, name) for name in PRAYER_NAMES}


class ScheduleProvider:
    """
    Produces PrayerSchedules for the fixed location.

    calculator maps a date to {prayer_name: datetime}; naive datetimes are
    taken as UTC. The provider keeps no state between calls.
    """

    def __init__(self, calculator=None, tzinfo: datetime.tzinfo | None = None):
        self.calculator = calculator or adhan_calculator
        self.tzinfo = tzinfo or location_timezone()

    def get_schedule(self, date: datetime.date) -> PrayerSchedule:
        if not MIN_YEAR <= date.year <= MAX_YEAR:
            raise UnsupportedDateError(
                f"{date.isoformat()} is outside the supported range {MIN_YEAR}-{MAX_YEAR}"
            )
        try:
            raw = self.calculator(date)
        except (ArithmeticError, ValueError) as exc:
            raise ScheduleComputationError(
                f"Prayer time calculation failed for {date.isoformat()}: {exc}"
            ) from exc

        times = {}
        for name in PRAYER_NAMES:
            value = raw.get(name)
            if value is None:
                raise ScheduleComputationError(f"No {name} time computed for {date.isoformat()}")
            if value.tzinfo is None:
                value = pytz.utc.localize(value)
            local = value.astimezone(self.tzinfo)
            if local.date() != date:
                raise ScheduleComputationError(
                    f"{name} falls on {local.date().isoformat()}, not {date.isoformat()}"
                )
            times[name] = datetime.time(local.hour, local.minute)

        _check_increasing(date, times)
        logger.debug(
            "Schedule for %s: %s",
            date.isoformat(),
            " ".join(f"{name}={times[name]:%H:%M}" for name in PRAYER_NAMES),
        )
        return PrayerSchedule(date=date, tzinfo=self.tzinfo, **times)

    def tomorrow_fajr(self, date: datetime.date) -> datetime.datetime:
        """Fajr instant of the day after date, for the after-Isha wraparound."""
        return self.get_schedule(date + datetime.timedelta(days=1)).instant("fajr")


_default_provider = None


def get_schedule(date: datetime.date) -> PrayerSchedule:
    """Schedule for date at the fixed location using the default provider."""
    global _default_provider
    if _default_provider is None:
        _default_provider = ScheduleProvider()
    return _default_provider.get_schedule(date)
