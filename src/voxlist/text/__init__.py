"""Utterance normalization, tokenization and item segmentation."""

from voxlist.text.normalizer import normalize_utterance
from voxlist.text.quantity import is_quantity, quantity_value
from voxlist.text.segmenter import segment_items, split_clauses
from voxlist.text.tokenizer import merge_compounds, tokenize

__all__ = [
    "is_quantity",
    "merge_compounds",
    "normalize_utterance",
    "quantity_value",
    "segment_items",
    "split_clauses",
    "tokenize",
]
