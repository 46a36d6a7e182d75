"""Desktop notifications when a prayer time arrives."""

import logging

from plyer import notification as plyer_notification

from prayer_engine.i18n import prayer_label, t

logger = logging.getLogger(__name__)

APP_NAME = "Prayer Times"
APP_ICON = ""  # Path to icon file; empty = default

# Sunrise marks the end of Fajr, not a prayer to call.
SILENT_PRAYERS = {"sunrise"}


def _send_plyer(title: str, message: str, timeout: int = 10) -> None:
    """Send a desktop notification via plyer (cross-platform)."""
    kwargs = dict(
        app_name=APP_NAME,
        title=title,
        message=message,
        timeout=timeout,
    )
    if APP_ICON:
        kwargs["app_icon"] = APP_ICON
    try:
        plyer_notification.notify(**kwargs)
    except Exception:
        # plyer raises backend-specific errors (no notification daemon, missing dbus, ...)
        logger.warning("Desktop notification failed: %s", title, exc_info=True)


def notify_prayer_time(event, language: str = "ar", callback=None) -> bool:
    """
    Send a desktop notification that event's prayer time has arrived.

    Optionally calls callback(title, message). Returns False for prayers that
    are not announced.
    """
    if event.name in SILENT_PRAYERS:
        return False
    name = prayer_label(event.name, language)
    title = f"🕌 {name}"
    message = t("prayer_arrived", language).format(name=name)
    _send_plyer(title, message, timeout=30)
    if callback:
        callback(title, message)
    return True


class ArrivalNotifier:
    """
    Subscriber for StableNextPrayer that announces the prayer just reached.

    When the stable next prayer changes, the previously shown prayer is the
    one whose time has come. The first commit of a session announces nothing.
    """

    def __init__(self, language_getter, callback=None):
        self.language_getter = language_getter
        self.callback = callback
        self._previous = None

    def __call__(self, state, changed: bool) -> None:
        if not state:
            self._previous = None
            return
        previous, self._previous = self._previous, state
        if changed and previous is not None and previous.event.name != state.event.name:
            notify_prayer_time(previous.event, self.language_getter(), self.callback)
