"""Split add-command payloads into item names and quantities."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack
from voxlist.models import ParsedItem
from voxlist.text.normalizer import remove_phrases
from voxlist.text.quantity import is_quantity, quantity_value
from voxlist.text.tokenizer import merge_compounds, tokenize

_CLAUSE_SPLIT_RE = re.compile(r"[,\n]+")
_SPACES_RE = re.compile(r"\s+")


def split_clauses(text: str, pack: LanguagePack) -> list[str]:
    """Split on commas, newlines and the locale's conjunction phrases."""
    delimited = remove_phrases(text, pack.conjunctions, replacement=",")
    clauses = (_SPACES_RE.sub(" ", part).strip() for part in _CLAUSE_SPLIT_RE.split(delimited))
    return [clause for clause in clauses if clause]


def segment_items(text: str, pack: LanguagePack) -> list[ParsedItem]:
    """Segment a normalized payload (leading verb already removed) into items."""
    items: list[ParsedItem] = []
    for clause in split_clauses(text, pack):
        items.extend(segment_tokens(merge_compounds(tokenize(clause), pack), pack))
    return items


def segment_tokens(tokens: list[str], pack: LanguagePack) -> list[ParsedItem]:
    """Walk one clause's tokens, attaching each quantity to the item it belongs to.

    A quantity before a name is a prefix for the upcoming item; a quantity
    closing the clause is a suffix for the item just spoken. Any other
    quantity ends the current item and carries over to the next one.
    """
    items: list[ParsedItem] = []
    name_parts: list[str] = []
    pending_quantity = 1

    def flush(quantity: int) -> None:
        name = _SPACES_RE.sub(" ", " ".join(name_parts)).strip()
        name_parts.clear()
        if name:
            items.append(ParsedItem(name=name, quantity=max(1, quantity)))

    last = len(tokens) - 1
    for idx, token in enumerate(tokens):
        if is_quantity(token, pack):
            value = quantity_value(token, pack) or 1
            if not name_parts:
                pending_quantity = value
            elif idx == last:
                flush(value)
                pending_quantity = 1
            else:
                flush(pending_quantity)
                pending_quantity = value
            continue

        name_parts.append(token)
        following = tokens[idx + 1] if idx < last else None
        if len(name_parts) == 1 and token in pack.multiword_heads:
            continue
        if token in pack.connectors:
            continue
        if following is not None and (
            following in pack.connectors or is_quantity(following, pack)
        ):
            continue
        flush(pending_quantity)
        pending_quantity = 1

    flush(pending_quantity)
    return items
