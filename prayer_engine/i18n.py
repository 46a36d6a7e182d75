"""Localized labels for prayers, dates and widget strings (Arabic, English, French)."""

import datetime

from prayer_engine.config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

LANGUAGES = SUPPORTED_LANGUAGES

PRAYER_LABELS = {
    "fajr": {"ar": "الفجر", "en": "Fajr", "fr": "Fajr"},
    "sunrise": {"ar": "الشروق", "en": "Sunrise", "fr": "Chourouk"},
    "dhuhr": {"ar": "الظهر", "en": "Dhuhr", "fr": "Dhohr"},
    "asr": {"ar": "العصر", "en": "Asr", "fr": "Asr"},
    "maghrib": {"ar": "المغرب", "en": "Maghrib", "fr": "Maghrib"},
    "isha": {"ar": "العشاء", "en": "Isha", "fr": "Icha"},
}

STRINGS = {
    "prayer_times": {"ar": "مواقيت الصلاة", "en": "Prayer Times", "fr": "Horaires de prière"},
    "next_prayer": {"ar": "الصلاة القادمة", "en": "Next prayer", "fr": "Prochaine prière"},
    "next": {"ar": "القادمة", "en": "Next", "fr": "Prochaine"},
    "in": {"ar": "بعد", "en": "in", "fr": "dans"},
    "not_available": {
        "ar": "لا تتوفر مواقيت الصلاة لهذا اليوم",
        "en": "Prayer times not available for today",
        "fr": "Horaires indisponibles pour aujourd'hui",
    },
    "location": {"ar": "طرابلس، لبنان", "en": "Tripoli, Lebanon", "fr": "Tripoli, Liban"},
    "prayer_arrived": {
        "ar": "حان الآن موعد صلاة {name}",
        "en": "It is now time for {name} prayer",
        "fr": "C'est l'heure de la prière de {name}",
    },
}

WEEKDAYS = {
    "ar": ["الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "fr": ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"],
}

MONTHS = {
    "ar": ["يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
           "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"],
    "en": ["January", "February", "March", "April", "May", "June",
           "July", "August", "September", "October", "November", "December"],
    "fr": ["janvier", "février", "mars", "avril", "mai", "juin",
           "juillet", "août", "septembre", "octobre", "novembre", "décembre"],
}

MERIDIEM = {
    "ar": ("ص", "م"),
    "en": ("AM", "PM"),
}


def normalize_language(language: str) -> str:
    """Return a supported language code, falling back to the default."""
    return language if language in LANGUAGES else DEFAULT_LANGUAGE


def t(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Translate a widget string, falling back to Arabic, then to the key itself."""
    entry = STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(language) or entry.get(DEFAULT_LANGUAGE) or key


def prayer_label(name: str, language: str = DEFAULT_LANGUAGE) -> str:
    labels = PRAYER_LABELS[name]
    return labels.get(language) or labels[DEFAULT_LANGUAGE]


def location_label(language: str = DEFAULT_LANGUAGE) -> str:
    return t("location", language)


def format_time_12(value: datetime.time, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Format a wall-clock time for display.

    Arabic and English use a 12-hour clock with their own AM/PM markers;
    French keeps the 24-hour HH:MM form.
    """
    if value is None:
        return ""
    if language not in MERIDIEM:
        return f"{value.hour:02d}:{value.minute:02d}"
    am, pm = MERIDIEM[language]
    suffix = pm if value.hour >= 12 else am
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {suffix}"


def format_gregorian_date(date: datetime.date, language: str = DEFAULT_LANGUAGE) -> str:
    """e.g. 'Monday, 19 October 2026' / 'الاثنين، 19 أكتوبر 2026' / 'lundi 19 octobre 2026'."""
    language = normalize_language(language)
    weekday = WEEKDAYS[language][date.weekday()]
    month = MONTHS[language][date.month - 1]
    if language == "ar":
        return f"{weekday}، {date.day} {month} {date.year}"
    if language == "fr":
        return f"{weekday} {date.day} {month} {date.year}"
    return f"{weekday}, {date.day} {month} {date.year}"
