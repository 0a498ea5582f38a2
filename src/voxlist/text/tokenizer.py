"""Whitespace tokenization and compound phrase merging."""

from __future__ import annotations

from voxlist.languages.base import LanguagePack
from voxlist.text.quantity import is_quantity


def tokenize(text: str) -> list[str]:
    """Split normalized text into word tokens."""
    return text.split()


def merge_compounds(tokens: list[str], pack: LanguagePack) -> list[str]:
    """Fuse known two-word phrases into single tokens, greedily left to right.

    An article prefix on the second word is dropped when only its bare form
    makes the pair a known phrase, adjective or tail noun.
    """
    merged: list[str] = []
    idx = 0
    while idx < len(tokens):
        pair = _merged_pair(tokens[idx], tokens[idx + 1], pack) if idx + 1 < len(tokens) else None
        if pair is not None:
            merged.append(pair)
            idx += 2
            continue
        merged.append(tokens[idx])
        idx += 1
    return merged


def _merged_pair(first: str, second: str, pack: LanguagePack) -> str | None:
    if is_quantity(first, pack) or is_quantity(second, pack):
        return None
    if _joins(first, second, pack):
        return f"{first} {second}"
    bare = pack.strip_article(second)
    if bare != second and _joins(first, bare, pack):
        return f"{first} {bare}"
    return None


def _joins(first: str, second: str, pack: LanguagePack) -> bool:
    return (
        f"{first} {second}" in pack.compound_phrases
        or second in pack.adjectives
        or second in pack.tail_nouns
    )
