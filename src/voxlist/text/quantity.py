"""Quantity word resolution."""

from __future__ import annotations

import re

from voxlist.languages.base import LanguagePack

_DIGITS_RE = re.compile(r"[0-9]+")


def is_quantity(token: str, pack: LanguagePack) -> bool:
    """Return True for digit strings and the locale's number words."""
    return bool(_DIGITS_RE.fullmatch(token)) or token in pack.number_words


def quantity_value(token: str, pack: LanguagePack) -> int | None:
    """Map a quantity token to its integer value, or None when it is not one."""
    if _DIGITS_RE.fullmatch(token):
        return int(token)
    return pack.number_words.get(token)
