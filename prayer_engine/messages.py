"""Daily rotating ayah / hadith / wisdom message shown under the prayer times."""

import datetime

from prayer_engine.i18n import normalize_language

DAILY_MESSAGES = [
    {
        "type": "ayah",
        "text": "وَمَا خَلَقْتُ الْجِنَّ وَالْإِنْسَ إِلَّا لِيَعْبُدُونِ",
        "source": "سورة الذاريات - الآية 56",
    },
    {
        "type": "hadith",
        "text": "الصَّلَاةُ عِمَادُ الدِّينِ، مَنْ أَقَامَهَا أَقَامَ الدِّينَ، وَمَنْ هَدَمَهَا هَدَمَ الدِّينَ",
        "source": "حديث شريف",
    },
    {
        "type": "ayah",
        "text": "وَأَقِيمُوا الصَّلَاةَ وَآتُوا الزَّكَاةَ وَارْكَعُوا مَعَ الرَّاكِعِينَ",
        "source": "سورة البقرة - الآية 43",
    },
    {
        "type": "hadith",
        "text": "مَنْ حَافَظَ عَلَى الصَّلَوَاتِ الْخَمْسِ كَانَ لَهُ نُورًا وَبُرْهَانًا وَنَجَاةً يَوْمَ الْقِيَامَةِ",
        "source": "حديث شريف",
    },
    {
        "type": "ayah",
        "text": "إِنَّ الصَّلَاةَ كَانَتْ عَلَى الْمُؤْمِنِينَ كِتَابًا مَوْقُوتًا",
        "source": "سورة النساء - الآية 103",
    },
    {
        "type": "hadith",
        "text": "أَوَّلُ مَا يُحَاسَبُ بِهِ الْعَبْدُ يَوْمَ الْقِيَامَةِ الصَّلَاةُ",
        "source": "حديث شريف",
    },
    {
        "type": "wisdom",
        "text": "أفضل الأعمال الصلاة في وقتها",
        "source": "حكمة",
    },
    {
        "type": "reminder",
        "text": "الوقت هو الحياة، فلا تضيعه في غير طاعة الله",
        "source": "موعظة",
    },
    {
        "type": "wisdom",
        "text": "الصلاة راحة للقلب وطمأنينة للنفس",
        "source": "حكمة",
    },
    {
        "type": "ayah",
        "text": "وَاسْتَعِينُوا بِالصَّبْرِ وَالصَّلَاةِ وَإِنَّهَا لَكَبِيرَةٌ إِلَّا عَلَى الْخَاشِعِينَ",
        "source": "سورة البقرة - الآية 45",
    },
    {
        "type": "hadith",
        "text": "الصَّلَاةُ نُورٌ، وَالصَّدَقَةُ بُرْهَانٌ، وَالصَّبْرُ ضِيَاءٌ",
        "source": "حديث شريف",
    },
    {
        "type": "reminder",
        "text": "احرص على الصلاة في أول وقتها، فهي أحب الأعمال إلى الله",
        "source": "موعظة",
    },
]

MESSAGE_TYPE_LABELS = {
    "ayah": {"ar": "📖 آية كريمة", "en": "📖 Verse", "fr": "📖 Verset"},
    "hadith": {"ar": "💬 حديث شريف", "en": "💬 Hadith", "fr": "💬 Hadith"},
    "wisdom": {"ar": "✨ حكمة", "en": "✨ Wisdom", "fr": "✨ Sagesse"},
    "reminder": {"ar": "💡 موعظة", "en": "💡 Reminder", "fr": "💡 Rappel"},
}


def daily_message(date: datetime.date | None = None) -> dict:
    """
    Message of the day, rotating through DAILY_MESSAGES by day of year.

    January 1st is day 1; the index wraps modulo the table length.
    """
    if date is None:
        date = datetime.date.today()
    day_of_year = date.timetuple().tm_yday
    return DAILY_MESSAGES[day_of_year % len(DAILY_MESSAGES)]


def message_type_label(message: dict, language: str = "ar") -> str:
    return MESSAGE_TYPE_LABELS[message["type"]][normalize_language(language)]
