"""Russian language pack."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack

_NUMBER_WORDS = {
    "один": 1,
    "одна": 1,
    "одно": 1,
    "два": 2,
    "две": 2,
    "три": 3,
    "четыре": 4,
    "пять": 5,
    "шесть": 6,
    "семь": 7,
    "восемь": 8,
    "девять": 9,
    "десять": 10,
}

_COMPOUND_PHRASES = frozenset(
    {
        "зелёный лук",
        "зеленый лук",
        "оливковое масло",
        "сливочное масло",
        "подсолнечное масло",
        "туалетная бумага",
        "зубная паста",
        "томатная паста",
        "апельсиновый сок",
        "яблочный сок",
        "куриная грудка",
    }
)

_CLEAR_PATTERNS = (
    re.compile(
        r"^(?:очист(?:ить|и)?|удал(?:ить|и)?|сотри|стереть|убери(?:те)?)\s+"
        r"(?:весь\s+|мой\s+|этот\s+)?спис(?:ок|ка)$"
    ),
    re.compile(r"^(?:удал(?:ить|и)?|очист(?:ить|и)?)\s+вс[её]$"),
)


RUSSIAN_PACK = LanguagePack(
    code="ru",
    name="Russian",
    number_words=_NUMBER_WORDS,
    comma_words=frozenset({"запятая"}),
    filler_phrases=("пожалуйста", "спасибо"),
    conjunctions=("а также", "потом", "и"),
    compound_phrases=_COMPOUND_PHRASES,
    connectors=frozenset({"с", "без"}),
    list_references=("из списка", "в список", "в списке"),
    add_verbs=("добавь", "добавить", "купи", "купить", "нужно"),
    delete_verbs=("удали", "удалить", "убери", "убрать", "сотри"),
    clear_patterns=_CLEAR_PATTERNS,
)
