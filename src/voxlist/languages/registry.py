"""Language pack registry and resolution."""

from __future__ import annotations

from voxlist.languages.arabic import ARABIC_PACK
from voxlist.languages.base import LanguagePack
from voxlist.languages.english import ENGLISH_PACK
from voxlist.languages.hebrew import HEBREW_PACK
from voxlist.languages.russian import RUSSIAN_PACK

_LANGUAGE_PACKS: dict[str, LanguagePack] = {
    "en": ENGLISH_PACK,
    "he": HEBREW_PACK,
    "ru": RUSSIAN_PACK,
    "ar": ARABIC_PACK,
}

_ALIASES = {
    "en-us": "en",
    "en-gb": "en",
    "en-ca": "en",
    "en-au": "en",
    "he-il": "he",
    "iw": "he",
    "iw-il": "he",
    "ru-ru": "ru",
    "ar-sa": "ar",
}

DEFAULT_LANGUAGE = "en"


def resolve_language_pack(language_code: str) -> LanguagePack:
    """Resolve a language code to the best available language pack."""
    code = language_code.strip().casefold().replace("_", "-")
    canonical = _ALIASES.get(code, code)
    if canonical not in _LANGUAGE_PACKS:
        canonical = _ALIASES.get(canonical.split("-", 1)[0], canonical.split("-", 1)[0])
    return _LANGUAGE_PACKS.get(canonical, _LANGUAGE_PACKS[DEFAULT_LANGUAGE])


def available_languages() -> list[str]:
    """Return the canonical codes of all registered packs."""
    return sorted(_LANGUAGE_PACKS)
