"""Locale-aware utterance cleanup."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from voxlist.languages.base import LanguagePack

_SPACES_RE = re.compile(r"\s+")
_INLINE_SPACES_RE = re.compile(r"[^\S\n]+")
_LINE_BREAK_RE = re.compile(r"[\r\n]+")
_PUNCT_RE = re.compile(r"[^\w\s,'\-]", re.UNICODE)
_LOOSE_MARKS_RE = re.compile(r"(?<!\w)['\-]+|['\-]+(?!\w)")
_COMMA_RUN_RE = re.compile(r"\s*(?:,\s*)+")
_CHARMAP = str.maketrans(
    {
        "’": "'",
        "‘": "'",
        "׳": "'",
        "“": '"',
        "”": '"',
        "״": '"',
        "–": "-",
        "—": "-",
        "־": "-",
        "،": ",",
        "_": " ",
    }
)


@lru_cache(maxsize=128)
def phrase_pattern(phrases: tuple[str, ...]) -> re.Pattern[str] | None:
    """Compile phrases into one regex matching them as standalone tokens, longest first."""
    cleaned = sorted({phrase.strip() for phrase in phrases if phrase.strip()}, key=len, reverse=True)
    if not cleaned:
        return None
    body = "|".join(r"\s+".join(re.escape(word) for word in phrase.split()) for phrase in cleaned)
    return re.compile(rf"(?<![\w'])(?:{body})(?![\w'])", re.UNICODE)


def remove_phrases(text: str, phrases: Iterable[str], *, replacement: str = " ") -> str:
    """Replace every standalone occurrence of the phrases until none is left."""
    pattern = phrase_pattern(tuple(phrases))
    if pattern is None:
        return text
    while True:
        updated = pattern.sub(replacement, text)
        if updated == text:
            return updated
        text = _INLINE_SPACES_RE.sub(" ", updated)


def normalize_utterance(text: str, pack: LanguagePack) -> str:
    """Clean a raw utterance: casefold, drop punctuation and filler words, tidy commas.

    Line breaks and the locale's comma-words become literal commas. Applying
    the function to its own output returns that output unchanged.
    """
    normalized = text.translate(_CHARMAP).casefold()
    normalized = _LINE_BREAK_RE.sub(",", normalized)
    normalized = _PUNCT_RE.sub(" ", normalized)
    normalized = _LOOSE_MARKS_RE.sub(" ", normalized)
    normalized = _SPACES_RE.sub(" ", normalized)
    normalized = remove_phrases(normalized, tuple(sorted(pack.comma_words)), replacement=",")
    normalized = remove_phrases(normalized, pack.filler_phrases)
    normalized = _COMMA_RUN_RE.sub(", ", normalized)
    normalized = _SPACES_RE.sub(" ", normalized)
    return normalized.strip(" ,")
