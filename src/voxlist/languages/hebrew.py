"""Hebrew language pack."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack

# Masculine and feminine forms share values.
_NUMBER_WORDS = {
    "אחד": 1,
    "אחת": 1,
    "שניים": 2,
    "שני": 2,
    "שתיים": 2,
    "שתי": 2,
    "שלוש": 3,
    "שלושה": 3,
    "ארבע": 4,
    "ארבעה": 4,
    "חמש": 5,
    "חמישה": 5,
    "שש": 6,
    "שישה": 6,
    "שבע": 7,
    "שבעה": 7,
    "שמונה": 8,
    "תשע": 9,
    "תשעה": 9,
    "עשר": 10,
    "עשרה": 10,
}

_COMPOUND_PHRASES = frozenset(
    {
        "רסק עגבניות",
        "רוטב עגבניות",
        "שמן זית",
        "שמן קנולה",
        "גבינה צהובה",
        "גבינה לבנה",
        "שמנת חמוצה",
        "שמנת מתוקה",
        "נייר טואלט",
        "נייר כסף",
        "נייר אפייה",
        "סבון כלים",
        "אבקת כביסה",
        "מרכך כביסה",
        "חמאת בוטנים",
        "לחם מלא",
        "חזה עוף",
        "בשר טחון",
        "מיץ תפוזים",
        "תפוחי אדמה",
        "משחת שיניים",
        "קמח תירס",
    }
)

_CLEAR_VERB = r"(?:מחק|תמחק|תמחוק|תמחקי|למחוק|נקה|תנקה|תנקי|רוקן|תרוקן|אפס|תאפס)"

_CLEAR_PATTERNS = (
    re.compile(rf"(?:^|\s){_CLEAR_VERB}\s+(?:את\s+)?(?:כל\s+)?ה?רשימה(?:\s|$)"),
    re.compile(rf"^{_CLEAR_VERB}\s+(?:את\s+)?הכל$"),
    re.compile(r"^(?:רשימה\s+חדשה|התחל\s+רשימה\s+חדשה)$"),
)


HEBREW_PACK = LanguagePack(
    code="he",
    name="Hebrew",
    number_words=_NUMBER_WORDS,
    comma_words=frozenset({"פסיק"}),
    filler_phrases=("בבקשה", "תודה רבה", "תודה", "אם אפשר"),
    conjunctions=("ואחר כך", "אחר כך", "וגם", "ואז", "ועוד", "ו"),
    compound_phrases=_COMPOUND_PHRASES,
    article_prefixes=("ה",),
    adjectives=frozenset(
        {
            "ירוק",
            "ירוקה",
            "ירוקים",
            "אדום",
            "אדומה",
            "אדומים",
            "צהוב",
            "צהובה",
            "לבן",
            "לבנה",
            "שחור",
            "שחורה",
            "מתוק",
            "מתוקה",
            "חמוץ",
            "חמוצה",
            "חמוצים",
            "טרי",
            "טרייה",
            "טריים",
            "קפוא",
            "קפואה",
            "קפואים",
            "מלא",
            "מלאה",
            "טחון",
            "כתוש",
            "קצוץ",
            "מרוסק",
        }
    ),
    tail_nouns=frozenset(
        {"כביסה", "כלים", "טואלט", "אדמה", "אפייה", "שיניים", "זית", "רצפות", "ידיים"}
    ),
    multiword_heads=frozenset(
        {"רוטב", "שמן", "גבינה", "רסק", "מיץ", "אבקת", "נייר", "סבון", "משחת", "חזה", "שקיות", "קמח"}
    ),
    connectors=frozenset({"של", "עם", "בלי"}),
    list_references=("מהרשימה שלי", "לרשימה שלי", "מהרשימה", "לרשימה", "ברשימה"),
    target_stopwords=frozenset({"את"}),
    add_verbs=("הוסף", "תוסיף", "תוסיפי", "קנה", "לקנות", "צריך", "צריכים"),
    delete_verbs=("מחק", "תמחק", "תמחוק", "תמחקי", "למחוק", "הסר", "תסיר", "הורד", "תוריד"),
    mark_verbs=("סמן", "תסמן", "תסמני"),
    purchased_markers=("כנקנה", "כנקנתה", "כקנוי", "שנקנה", "נקנה"),
    increase_verbs=("הוסף עוד", "תוסיף עוד", "הגדל", "תגדיל", "עוד"),
    decrease_verbs=("הפחת", "תפחית", "הקטן", "תקטין", "פחות"),
    clear_patterns=_CLEAR_PATTERNS,
)
