"""Utterance classification into list commands."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from voxlist.languages.base import LanguagePack
from voxlist.models import (
    AddItems,
    ClearList,
    Command,
    DecreaseQty,
    DeleteItem,
    IncreaseQty,
    ListItem,
    MarkPurchased,
    Unrecognized,
)
from voxlist.text.normalizer import normalize_utterance, remove_phrases
from voxlist.text.segmenter import segment_items

logger = logging.getLogger(__name__)

_SPACES_RE = re.compile(r"\s+")


def classify_utterance(text: str, pack: LanguagePack) -> Command:
    """Decide which command an utterance expresses. Never raises on odd input."""
    normalized = normalize_utterance(text, pack)
    if not normalized:
        return Unrecognized(raw_text=text)

    if any(pattern.search(normalized) for pattern in pack.clear_patterns):
        return ClearList()

    rest = strip_leading_phrase(normalized, pack.delete_verbs)
    if rest is not None:
        name = _clean_target(rest, pack)
        return DeleteItem(name=name) if name else Unrecognized(raw_text=text)

    rest = strip_leading_phrase(normalized, pack.mark_verbs)
    if rest is not None:
        name = strip_trailing_phrase(rest, pack.purchased_markers)
        if name is not None:
            target = _clean_target(name, pack)
            return MarkPurchased(name=target) if target else Unrecognized(raw_text=text)

    rest = strip_leading_phrase(normalized, pack.increase_verbs)
    if rest is not None:
        name = _clean_target(rest, pack)
        return IncreaseQty(name=name) if name else Unrecognized(raw_text=text)

    rest = strip_leading_phrase(normalized, pack.decrease_verbs)
    if rest is not None:
        name = _clean_target(rest, pack)
        return DecreaseQty(name=name) if name else Unrecognized(raw_text=text)

    payload = strip_leading_phrase(normalized, pack.add_verbs)
    if payload is None:
        payload = normalized
    items = segment_items(remove_phrases(payload, pack.list_references), pack)
    if not items:
        logger.debug("No items in utterance %r", text)
        return Unrecognized(raw_text=text)
    return AddItems(items=items)


def strip_leading_phrase(text: str, phrases: Iterable[str]) -> str | None:
    """Return the text after a leading phrase, or None when no phrase leads it."""
    for phrase in sorted(phrases, key=len, reverse=True):
        if text == phrase:
            return ""
        if text.startswith(phrase) and text[len(phrase)] in " ,":
            return text[len(phrase) :].lstrip(" ,")
    return None


def strip_trailing_phrase(text: str, phrases: Iterable[str]) -> str | None:
    """Return the text before a trailing phrase, or None when no phrase ends it."""
    for phrase in sorted(phrases, key=len, reverse=True):
        if text == phrase:
            return ""
        if text.endswith(phrase) and text[-len(phrase) - 1] in " ,":
            return text[: -len(phrase)].rstrip(" ,")
    return None


def match_item(name: str, items: Sequence[ListItem]) -> ListItem | None:
    """Find the list item a spoken name refers to.

    Exact match on the normalized name wins; otherwise the first item whose
    name contains the spoken name, or is contained in it, is returned.
    """
    key = _match_key(name)
    if not key:
        return None
    for item in items:
        if _match_key(item.name) == key:
            return item
    for item in items:
        candidate = _match_key(item.name)
        if candidate and (key in candidate or candidate in key):
            return item
    return None


def find_exact(name: str, items: Sequence[ListItem]) -> ListItem | None:
    """Find an item whose normalized name equals the given name."""
    key = _match_key(name)
    return next((item for item in items if _match_key(item.name) == key), None)


def _match_key(name: str) -> str:
    return _SPACES_RE.sub(" ", name.casefold()).strip()


def _clean_target(text: str, pack: LanguagePack) -> str:
    cleaned = remove_phrases(text, pack.list_references)
    words = cleaned.replace(",", " ").split()
    while words and words[0] in pack.target_stopwords:
        words.pop(0)
    return " ".join(words)
