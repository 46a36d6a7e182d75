"""Gregorian to Hijri conversion using the tabular (Kuwaiti) algorithm."""

import datetime
import math
from typing import NamedTuple

from prayer_engine.i18n import normalize_language

HIJRI_MONTHS = {
    "ar": ["محرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
           "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة"],
    "en": ["Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani", "Jumada al-Awwal", "Jumada al-Thani",
           "Rajab", "Shaban", "Ramadan", "Shawwal", "Dhu al-Qadah", "Dhu al-Hijjah"],
    "fr": ["Mouharram", "Safar", "Rabia al-awal", "Rabia ath-thani", "Joumada al-oula", "Joumada ath-thania",
           "Rajab", "Chaabane", "Ramadan", "Chawwal", "Dhou al-qi'da", "Dhou al-hijja"],
}

_EPOCH_ASTRO = 1948084
_CYCLE_DAYS = 10631        # days in a 30-year cycle
_YEAR_DAYS = 10631 / 30
_SHIFT = 8.01 / 60


class HijriDate(NamedTuple):
    day: int
    month: int
    year: int


def _julian_day(date: datetime.date) -> int:
    """Julian day number at noon of a Gregorian date."""
    year, month = date.year, date.month
    if month < 3:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + date.day + b - 1524
    )


def to_hijri(date: datetime.date | None = None) -> HijriDate:
    """Convert a Gregorian date (default: today) to its tabular Hijri equivalent."""
    if date is None:
        date = datetime.date.today()
    z = _julian_day(date) - _EPOCH_ASTRO
    cycle = math.floor(z / _CYCLE_DAYS)
    z -= _CYCLE_DAYS * cycle
    j = math.floor((z - _SHIFT) / _YEAR_DAYS)
    year = 30 * cycle + j
    z -= math.floor(j * _YEAR_DAYS + _SHIFT)
    month = min(math.floor((z + 28.5001) / 29.5), 12)
    day = z - math.floor(29.5001 * month - 29)
    return HijriDate(int(day), int(month), int(year))


def hijri_month_name(month: int, language: str = "ar") -> str:
    return HIJRI_MONTHS[normalize_language(language)][month - 1]


def format_hijri(hijri: HijriDate, language: str = "ar") -> str:
    """Render a Hijri date label, e.g. '1 محرم 1446 هـ' or '1 Muharram 1446 AH'."""
    language = normalize_language(language)
    suffix = "هـ" if language == "ar" else "AH"
    return f"{hijri.day} {hijri_month_name(hijri.month, language)} {hijri.year} {suffix}"
