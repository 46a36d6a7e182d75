"""
Stable "next prayer" state for UI surfaces.

StableNextPrayer recomputes the next prayer on every tick but only lets the
highlighted prayer change once DWELL_SECONDS have passed since the previous
change, so a display refreshing near a boundary does not flip back and forth.
Timers are driven through any object offering Tk's after()/after_cancel().
"""

import datetime
import logging

from prayer_engine.config import DEFAULT_LANGUAGE, DWELL_SECONDS, TICK_INTERVAL_MS
from prayer_engine.hijri import format_hijri, to_hijri
from prayer_engine.i18n import (
    format_gregorian_date,
    format_time_12,
    location_label,
    normalize_language,
    prayer_label,
)
from prayer_engine.messages import daily_message
from prayer_engine.schedule import (
    ScheduleComputationError,
    ScheduleProvider,
    UnsupportedDateError,
)
from prayer_engine.selector import NO_SCHEDULE, make_state, prayer_status, select_next

logger = logging.getLogger(__name__)

IDLE = "idle"
TRACKING = "tracking"

# Margin past midnight so the rollover timer lands on the new date.
MIDNIGHT_MARGIN_MS = 1000


class StableNextPrayer:
    def __init__(self, provider=None, clock=None, dwell_seconds=DWELL_SECONDS, language=DEFAULT_LANGUAGE):
        self.provider = provider or ScheduleProvider()
        self.clock = clock or (lambda: datetime.datetime.now(self.provider.tzinfo))
        self.dwell = datetime.timedelta(seconds=dwell_seconds)
        self.language = normalize_language(language)

        self.phase = IDLE
        self.state = NO_SCHEDULE
        self.last_commit = None
        self.schedule = None
        self.tomorrow_fajr = None
        self.schedule_date = None

        self._listeners = []
        self._scheduler = None
        self._tick_ms = TICK_INTERVAL_MS
        self._tick_job = None
        self._midnight_job = None
        self._alive = True

    # ──────────────────────────────────────────────────────────────────────
    # Schedule loading
    # ──────────────────────────────────────────────────────────────────────
    def refresh_schedule(self, now: datetime.datetime | None = None):
        """
        Load the schedule for the current local date.

        An unsupported date leaves no schedule; a computation error keeps the
        last-known-good schedule. Neither propagates.
        """
        if now is None:
            now = self.clock()
        today = now.date()
        self.schedule_date = today

        try:
            schedule = self.provider.get_schedule(today)
        except UnsupportedDateError as exc:
            logger.warning("No prayer schedule for %s: %s", today.isoformat(), exc)
            self.schedule = None
            self.tomorrow_fajr = None
            return None
        except ScheduleComputationError as exc:
            if self.schedule is not None:
                logger.error(
                    "Invalid prayer schedule for %s, keeping schedule for %s: %s",
                    today.isoformat(), self.schedule.date.isoformat(), exc,
                )
            else:
                logger.error("Invalid prayer schedule for %s: %s", today.isoformat(), exc)
            return self.schedule

        self.schedule = schedule
        try:
            self.tomorrow_fajr = self.provider.tomorrow_fajr(today)
        except (UnsupportedDateError, ScheduleComputationError) as exc:
            logger.warning("No Fajr time for the day after %s: %s", today.isoformat(), exc)
            self.tomorrow_fajr = None
        logger.info("Loaded prayer schedule for %s", today.isoformat())
        return schedule

    # ──────────────────────────────────────────────────────────────────────
    # Ticking
    # ──────────────────────────────────────────────────────────────────────
    def tick(self):
        """Recompute the next prayer and apply the dwell rule; returns the stable state."""
        if not self._alive:
            return self.state
        now = self.clock()
        if self.schedule_date != now.date():
            self.refresh_schedule(now)

        candidate = select_next(self.schedule, self.tomorrow_fajr, now, self.language)
        changed = self._commit(candidate, now)
        for listener in list(self._listeners):
            listener(self.state, changed)
        return self.state

    def _commit(self, candidate, now) -> bool:
        if not candidate:
            # Nothing upcoming to point at; a stale past prayer is never shown.
            changed = bool(self.state)
            self.state = NO_SCHEDULE
            return changed
        if self.phase == IDLE or not self.state:
            self.phase = TRACKING
            self.state = candidate
            self.last_commit = now
            return True
        if candidate.event.name == self.state.event.name:
            self.state = candidate
            return False
        if now - self.last_commit >= self.dwell:
            logger.debug(
                "Next prayer %s -> %s", self.state.event.name, candidate.event.name
            )
            self.state = candidate
            self.last_commit = now
            return True
        # Hold the previous prayer until the dwell window has passed.
        self.state = make_state(self.state.event, now)
        return False

    def subscribe(self, callback):
        """Call callback(state, changed) after every tick; returns an unsubscribe function."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    # ──────────────────────────────────────────────────────────────────────
    # Timers
    # ──────────────────────────────────────────────────────────────────────
    def attach(self, scheduler, tick_ms: int = TICK_INTERVAL_MS):
        """Start the periodic tick and the midnight rollover timer on scheduler."""
        if not self._alive:
            return
        self.detach()
        self._scheduler = scheduler
        self._tick_ms = tick_ms
        self.refresh_schedule()
        self._run_tick()
        self._schedule_midnight()

    def detach(self):
        """Cancel any pending timers."""
        scheduler = self._scheduler
        if scheduler is not None:
            for job in (self._tick_job, self._midnight_job):
                if job is not None:
                    scheduler.after_cancel(job)
        self._tick_job = None
        self._midnight_job = None
        self._scheduler = None

    def close(self):
        """Tear down: cancel timers, drop subscribers and ignore any later callbacks."""
        self.detach()
        self._listeners.clear()
        self._alive = False

    @property
    def alive(self) -> bool:
        return self._alive

    def _run_tick(self):
        if not self._alive or self._scheduler is None:
            return
        self.tick()
        self._tick_job = self._scheduler.after(self._tick_ms, self._run_tick)

    def _schedule_midnight(self):
        if not self._alive or self._scheduler is None:
            return
        self._midnight_job = self._scheduler.after(ms_until_midnight(self.clock()), self._on_midnight)

    def _on_midnight(self):
        if not self._alive:
            return
        self.refresh_schedule()
        self.tick()
        self._schedule_midnight()

    # ──────────────────────────────────────────────────────────────────────
    # Read API
    # ──────────────────────────────────────────────────────────────────────
    def set_language(self, language: str):
        self.language = normalize_language(language)
        if self.state:
            event = self.state.event._replace(display_name=prayer_label(self.state.event.name, self.language))
            self.state = self.state._replace(event=event)

    def events(self) -> list:
        if self.schedule is None:
            return []
        return self.schedule.events(self.language)

    def status(self, now: datetime.datetime | None = None) -> dict:
        return prayer_status(self.schedule, now or self.clock())

    def display_times(self) -> list:
        """Rows for a prayer strip: name, label, formatted time and whether it is highlighted."""
        if self.schedule is None:
            return []
        next_name = self.state.event.name if self.state else None
        return [
            {
                "name": name,
                "label": prayer_label(name, self.language),
                "time": format_time_12(time, self.language),
                "is_next": name == next_name,
            }
            for name, time in self.schedule.times().items()
        ]

    def date_labels(self) -> dict:
        date = self.schedule_date or self.clock().date()
        return {
            "location": location_label(self.language),
            "gregorian": format_gregorian_date(date, self.language),
            "hijri": format_hijri(to_hijri(date), self.language),
        }

    def message(self) -> dict:
        """Daily message for the date currently on display."""
        return daily_message(self.schedule_date or self.clock().date())


def ms_until_midnight(now: datetime.datetime) -> int:
    """Milliseconds from now until just after the next local midnight."""
    elapsed = datetime.timedelta(
        hours=now.hour, minutes=now.minute, seconds=now.second, microseconds=now.microsecond
    )
    remaining = datetime.timedelta(days=1) - elapsed
    return int(remaining.total_seconds() * 1000) + MIDNIGHT_MARGIN_MS
