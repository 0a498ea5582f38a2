"""Arabic language pack."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack

_NUMBER_WORDS = {
    "واحد": 1,
    "اثنين": 2,
    "اثنان": 2,
    "ثلاثة": 3,
    "أربعة": 4,
    "خمسة": 5,
    "ستة": 6,
    "سبعة": 7,
    "ثمانية": 8,
    "تسعة": 9,
    "عشرة": 10,
}

_CLEAR_PATTERNS = (
    re.compile(r"^(?:امسح|احذف|افرغ)\s+(?:كل\s+)?القائمة$"),
    re.compile(r"^(?:امسح|احذف)\s+الكل$"),
)


ARABIC_PACK = LanguagePack(
    code="ar",
    name="Arabic",
    number_words=_NUMBER_WORDS,
    comma_words=frozenset({"فاصلة"}),
    filler_phrases=("من فضلك", "لو سمحت", "شكرا"),
    conjunctions=("وبعدين", "ثم", "و"),
    compound_phrases=frozenset({"زيت زيتون", "ورق تواليت", "معجون أسنان", "معجون طماطم"}),
    article_prefixes=("ال",),
    connectors=frozenset({"مع", "بدون"}),
    list_references=("من القائمة", "إلى القائمة", "الى القائمة", "للقائمة"),
    add_verbs=("أضف", "اضف", "اشتري"),
    delete_verbs=("احذف", "امسح", "أزل"),
    clear_patterns=_CLEAR_PATTERNS,
)
