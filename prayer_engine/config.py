"""Fixed location, engine tunables and the saved display-language preference."""

import json
import logging
import os

logger = logging.getLogger(__name__)

# The engine serves a single fixed location.
LOCATION = {
    "city": "Tripoli",
    "country": "LB",
    "lat": 34.4367,
    "lon": 35.8497,
    "timezone": "Asia/Beirut",
}

# Name of an adhanpy CalculationMethod member.
CALCULATION_METHOD = "MUSLIM_WORLD_LEAGUE"

MIN_YEAR = 2000
MAX_YEAR = 2100

TICK_INTERVAL_MS = 60000  # recompute the next prayer once a minute
DWELL_SECONDS = 120       # minimum hold before the highlighted prayer may change

DEFAULT_LANGUAGE = "ar"
SUPPORTED_LANGUAGES = ("ar", "en", "fr")

DEFAULT_SETTINGS = {
    "language": DEFAULT_LANGUAGE,
}

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".prayertime")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


def load_settings() -> dict:
    """
    Load saved user settings merged over DEFAULT_SETTINGS.

    A missing, unreadable or malformed file yields the defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    if not os.path.isfile(CONFIG_FILE):
        return settings
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", CONFIG_FILE, exc)
        return settings
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected an object", CONFIG_FILE)
        return settings

    language = data.get("language")
    if language in SUPPORTED_LANGUAGES:
        settings["language"] = language
    elif language is not None:
        logger.warning("Unsupported language %r in settings, using %r", language, DEFAULT_LANGUAGE)
    return settings


def save_settings(settings: dict) -> None:
    """Persist the user settings to the config file."""
    language = settings.get("language", DEFAULT_LANGUAGE)
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language!r}")
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_FILE, "w", encoding="utf-8") as f:
        json.dump({"language": language}, f, indent=2)


def clear_settings() -> None:
    """Remove the saved settings file."""
    if os.path.isfile(CONFIG_FILE):
        os.remove(CONFIG_FILE)
