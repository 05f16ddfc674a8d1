from __future__ import annotations
from typing import Dict

PREF_HEBREW = "hebrew"
PREF_GREGORIAN = "gregorian"
DEFAULT_PREFERENCE = PREF_HEBREW

LANG_EN = "en"
LANG_HE = "he"

# Nisan is 1, Tishrei is 7; 12/13 handled by hebrew_month_name()
HEBREW_MONTH_NAMES = {
    1: "ניסן", 2: "אייר", 3: "סיון", 4: "תמוז", 5: "אב", 6: "אלול",
    7: "תשרי", 8: "חשון", 9: "כסלו", 10: "טבת", 11: "שבט", 12: "אדר",
}
ADAR_ALEPH = "אדר א׳"
ADAR_BET = "אדר ב׳"
INVALID_MONTH_NAME = "חודש לא תקין"

# calendar-grid order, Tishrei first
YEAR_MONTH_ORDER = [7, 8, 9, 10, 11, 12, 13, 1, 2, 3, 4, 5, 6]

# year mod 19; cycle position 19 is residue 0
LEAP_CYCLE_POSITIONS = frozenset({0, 3, 6, 8, 11, 14, 17})

# python weekday() -> Hebrew name (Monday is 0)
HEBREW_WEEKDAYS = ["שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת", "ראשון"]

GREGORIAN_MONTHS = {
    LANG_EN: [
        "January", "February", "March", "April", "May", "June", "July",
        "August", "September", "October", "November", "December",
    ],
    LANG_HE: [
        "בינואר", "בפברואר", "במרץ", "באפריל", "במאי", "ביוני", "ביולי",
        "באוגוסט", "בספטמבר", "באוקטובר", "בנובמבר", "בדצמבר",
    ],
}
GREGORIAN_WEEKDAYS = {
    LANG_EN: ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    LANG_HE: ["יום שני", "יום שלישי", "יום רביעי", "יום חמישי", "יום שישי", "שבת", "יום ראשון"],
}

# key, english, hebrew
PHRASE_DEFS = [
    ("no_date",          "no date available",        "תאריך לא זמין"),
    ("invalid_date",     "invalid date",             "תאריך לא תקין"),
    ("date_error",       "date error",               "שגיאת תאריך"),
    ("today",            "today",                    "היום"),
    ("tomorrow",         "tomorrow",                 "מחר"),
    ("day_after",        "day after tomorrow",       "מחרתיים"),
    ("in_days",          "in {n} days from now",     "עוד {n} ימים מעכשיו"),
    ("seconds_ago",      "a few seconds ago",        "לפני מספר שניות"),
    ("minutes",          "{n} minutes",              "{n} דקות"),
    ("hour",             "1 hour",                   "שעה"),
    ("hours",            "{n} hours",                "{n} שעות"),
    ("ago",              "{what} ago",               "לפני {what}"),
    ("and",              "{a} and {b}",              "{a} ו-{b}"),
    ("yesterday",        "yesterday",                "אתמול"),
    ("day_before",       "day before yesterday",     "שלשום"),
    ("on_date",          "on {date}",                "ב-{date}"),
    ("at_time",          "{day} at {time}",          "{day} בשעה {time}"),
]

PHRASES: Dict[str, Dict[str, str]] = {
    LANG_EN: {k: en for (k, en, _he) in PHRASE_DEFS},
    LANG_HE: {k: he for (k, _en, he) in PHRASE_DEFS},
}

# special Shabbat designations: key, hebrew, english
SPECIAL_SHABBAT_DEFS = [
    ("shekalim",   "שבת שקלים",  "Shabbos Shekalim"),
    ("zachor",     "שבת זכור",   "Shabbos Zachor"),
    ("parah",      "שבת פרה",    "Shabbos Parah"),
    ("hachodesh",  "שבת החודש",  "Shabbos Hachodesh"),
    ("hagadol",    "שבת הגדול",  "Shabbos Hagadol"),
    ("shuva",      "שבת שובה",   "Shabbos Shuva"),
    ("chazon",     "שבת חזון",   "Shabbos Chazon"),
    ("nachamu",    "שבת נחמו",   "Shabbos Nachamu"),
    ("shira",      "שבת שירה",   "Shabbos Shira"),
    ("mevarchim",  "שבת מברכים", "Shabbos Mevorchim"),
]
ROSH_CHODESH = ("ראש חודש", "Rosh Chodesh")

HOLIDAY_SEPARATOR = ", "
DOUBLE_PARASHA_SEPARATOR = "-"

# parsha numbers, Bereishis is 0
PARASHA_BESHALACH = 15


def phrase(key: str, language: str = LANG_EN, **kwargs) -> str:
    table = PHRASES.get(language) or PHRASES[LANG_EN]
    text = table.get(key, key)
    return text.format(**kwargs) if kwargs else text


def special_shabbat_name(key: str, hebrew: bool = True) -> str:
    for k, he, en in SPECIAL_SHABBAT_DEFS:
        if k == key:
            return he if hebrew else en
    return key

