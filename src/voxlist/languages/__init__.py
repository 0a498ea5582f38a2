"""Locale vocabularies and pack resolution."""

from voxlist.languages.base import LanguagePack
from voxlist.languages.registry import available_languages, resolve_language_pack

__all__ = ["LanguagePack", "available_languages", "resolve_language_pack"]
