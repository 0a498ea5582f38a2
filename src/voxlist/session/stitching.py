"""Merge streaming transcript chunks into one utterance."""

from __future__ import annotations

from collections.abc import Iterable

from voxlist.models import TranscriptChunk

DEFAULT_MIN_OVERLAP_CHARS = 3


def stitch_transcript(
    chunks: Iterable[TranscriptChunk],
    *,
    min_overlap_chars: int = DEFAULT_MIN_OVERLAP_CHARS,
) -> str:
    """Join final chunks in order, then any interim text that follows the last final.

    A chunk that extends the accumulator word by word replaces it, a chunk the
    accumulator already opens with is dropped, and boundary overlaps are
    spliced instead of duplicated.
    """
    ordered = sorted(chunks, key=lambda chunk: (chunk.segment, chunk.index))
    finals = [chunk for chunk in ordered if chunk.is_final]
    last_final = (finals[-1].segment, finals[-1].index) if finals else (-1, -1)
    trailing = [
        chunk for chunk in ordered if not chunk.is_final and (chunk.segment, chunk.index) > last_final
    ]

    merged = ""
    for chunk in [*finals, *trailing]:
        merged = merge_text(merged, chunk.text, min_overlap_chars=min_overlap_chars)
    return merged


def merge_text(accumulated: str, text: str, *, min_overlap_chars: int = DEFAULT_MIN_OVERLAP_CHARS) -> str:
    """Merge one more piece of transcript into the accumulated text."""
    piece = " ".join(text.split())
    if not piece:
        return accumulated
    if not accumulated:
        return piece

    acc_key = accumulated.casefold()
    piece_key = piece.casefold()
    if _starts_with_words(piece_key, acc_key):
        return piece
    if _starts_with_words(acc_key, piece_key):
        return accumulated

    overlap = _boundary_overlap(acc_key, piece_key, min_overlap_chars)
    if overlap:
        return accumulated + piece[overlap:]
    return f"{accumulated} {piece}"


def _starts_with_words(text: str, prefix: str) -> bool:
    """True when `prefix` opens `text` and ends on a word boundary."""
    return text.startswith(prefix) and (len(text) == len(prefix) or text[len(prefix)] == " ")


def _boundary_overlap(accumulated: str, piece: str, min_chars: int) -> int:
    longest = min(len(accumulated), len(piece))
    for size in range(longest, max(min_chars, 1) - 1, -1):
        if not accumulated.endswith(piece[:size]):
            continue
        starts_on_word = size == len(accumulated) or accumulated[-size - 1] == " "
        ends_on_word = size == len(piece) or piece[size] == " "
        if starts_on_word and ends_on_word:
            return size
    return 0
