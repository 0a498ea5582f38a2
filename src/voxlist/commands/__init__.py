"""Command classification and execution."""

from voxlist.commands.classifier import classify_utterance, match_item
from voxlist.commands.executor import CommandExecutor, UndoLedger

__all__ = ["CommandExecutor", "UndoLedger", "classify_utterance", "match_item"]
