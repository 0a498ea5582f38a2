"""English language pack."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack

_NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

_COMPOUND_PHRASES = frozenset(
    {
        "almond milk",
        "apple juice",
        "baking powder",
        "baking soda",
        "brown sugar",
        "chicken breast",
        "coconut milk",
        "cream cheese",
        "dish soap",
        "green beans",
        "green onion",
        "green onions",
        "ground beef",
        "hot dogs",
        "ice cream",
        "oat milk",
        "olive oil",
        "orange juice",
        "paper towels",
        "peanut butter",
        "red onion",
        "sour cream",
        "soy sauce",
        "sweet potato",
        "sweet potatoes",
        "toilet paper",
        "tomato paste",
        "whole milk",
    }
)

_CLEAR_PATTERNS = (
    re.compile(
        r"^(?:clear|empty|reset|wipe|erase|delete|remove)\s+(?:out\s+)?"
        r"(?:the\s+|my\s+|our\s+)?(?:whole\s+|entire\s+)?(?:shopping\s+|grocery\s+)?list$"
    ),
    re.compile(
        r"^(?:clear|delete|remove|erase)\s+(?:everything|all(?:\s+the)?\s+items|all)"
        r"(?:\s+(?:from|on)\s+(?:the|my)\s+list)?$"
    ),
    re.compile(r"^(?:start|make)\s+(?:a\s+)?(?:new|fresh)\s+list$"),
)


ENGLISH_PACK = LanguagePack(
    code="en",
    name="English",
    number_words=_NUMBER_WORDS,
    comma_words=frozenset({"comma"}),
    filler_phrases=("please", "thanks", "thank you", "kindly", "um", "uh"),
    conjunctions=("and also", "and then", "then", "and", "also", "plus"),
    compound_phrases=_COMPOUND_PHRASES,
    adjectives=frozenset({"free", "light", "lite", "zero"}),
    tail_nouns=frozenset(
        {
            "paste",
            "sauce",
            "juice",
            "powder",
            "soap",
            "flakes",
            "towels",
            "detergent",
            "softener",
            "foil",
            "wrap",
            "wipes",
        }
    ),
    multiword_heads=frozenset(
        {"ice", "peanut", "olive", "toilet", "dish", "baking", "sour", "ground", "soy", "paper"}
    ),
    connectors=frozenset({"of", "with", "without"}),
    list_references=(
        "to the shopping list",
        "to the list",
        "to my list",
        "from the list",
        "from my list",
        "off the list",
        "off my list",
        "on the list",
        "on my list",
        "to list",
        "from list",
    ),
    target_stopwords=frozenset({"the", "a", "an", "some", "my"}),
    add_verbs=("add", "put", "buy", "get", "i need", "we need", "need"),
    delete_verbs=("delete", "remove", "erase", "take off"),
    mark_verbs=("mark", "check", "tick"),
    purchased_markers=("as bought", "as purchased", "as done", "bought", "purchased", "done", "off"),
    increase_verbs=("increase", "add another", "add one more", "one more", "another", "more"),
    decrease_verbs=("decrease", "reduce", "lower", "one less", "less", "fewer"),
    clear_patterns=_CLEAR_PATTERNS,
)
