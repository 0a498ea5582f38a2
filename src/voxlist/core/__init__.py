"""Core interpretation pipeline."""

from voxlist.core.pipeline import (
    VoiceListAssistant,
    interpret_utterance,
    interpret_utterances,
    run_parse,
)

__all__ = ["VoiceListAssistant", "interpret_utterance", "interpret_utterances", "run_parse"]
