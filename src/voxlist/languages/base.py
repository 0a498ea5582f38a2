"""Language pack base types."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguagePack:
    """Locale-specific vocabularies driving normalization, segmentation and classification.

    Multi-word entries (fillers, conjunctions, verbs, markers) are stored as
    space-separated phrases and matched on whole-token boundaries.
    """

    code: str
    name: str
    number_words: Mapping[str, int]
    comma_words: frozenset[str] = frozenset()
    filler_phrases: tuple[str, ...] = ()
    conjunctions: tuple[str, ...] = ()
    compound_phrases: frozenset[str] = frozenset()
    article_prefixes: tuple[str, ...] = ()
    adjectives: frozenset[str] = frozenset()
    tail_nouns: frozenset[str] = frozenset()
    multiword_heads: frozenset[str] = frozenset()
    connectors: frozenset[str] = frozenset()
    list_references: tuple[str, ...] = ()
    target_stopwords: frozenset[str] = frozenset()
    add_verbs: tuple[str, ...] = ()
    delete_verbs: tuple[str, ...] = ()
    mark_verbs: tuple[str, ...] = ()
    purchased_markers: tuple[str, ...] = ()
    increase_verbs: tuple[str, ...] = ()
    decrease_verbs: tuple[str, ...] = ()
    clear_patterns: tuple[re.Pattern[str], ...] = field(default_factory=tuple)

    def strip_article(self, word: str) -> str:
        """Drop a leading definite-article prefix, keeping at least two characters."""
        for prefix in self.article_prefixes:
            if word.startswith(prefix) and len(word) - len(prefix) >= 2:
                return word[len(prefix) :]
        return word
