"""Streaming transcription source contract and a scripted implementation."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

SourceErrorReason = Literal["permission-denied", "device-unavailable", "no-speech", "other"]


@dataclass(frozen=True)
class TranscriptEvent:
    """Recognized text; interim results at an index are replaced by later ones."""

    index: int
    text: str
    is_final: bool


@dataclass(frozen=True)
class ErrorEvent:
    reason: SourceErrorReason
    message: str = ""


@dataclass(frozen=True)
class StreamEndedEvent:
    """The stream stopped, whether requested or spontaneously."""


SourceEvent = TranscriptEvent | ErrorEvent | StreamEndedEvent
SourceHandler = Callable[[SourceEvent], None]


class TranscriptionSource(Protocol):
    """Push-based speech-to-text stream."""

    def subscribe(self, handler: SourceHandler) -> None:
        """Register the callback receiving every event."""

    def start(self, locale: str) -> None:
        """Begin streaming recognition for `locale`."""

    def stop(self) -> None:
        """Stop streaming; a stream-ended event may follow."""


class ScriptedTranscriptionSource:
    """Source whose events are pushed by the caller.

    Records every start/stop call so tests and replays can inspect restarts.
    """

    def __init__(self) -> None:
        self._handlers: list[SourceHandler] = []
        self.running = False
        self.start_calls: list[str] = []
        self.stop_calls = 0

    def subscribe(self, handler: SourceHandler) -> None:
        self._handlers.append(handler)

    def start(self, locale: str) -> None:
        self.running = True
        self.start_calls.append(locale)

    def stop(self) -> None:
        self.stop_calls += 1
        self.running = False

    def emit(self, event: SourceEvent) -> None:
        if isinstance(event, StreamEndedEvent):
            self.running = False
        for handler in list(self._handlers):
            handler(event)

    def transcript(self, index: int, text: str, *, final: bool = False) -> None:
        self.emit(TranscriptEvent(index=index, text=text, is_final=final))

    def error(self, reason: SourceErrorReason, message: str = "") -> None:
        self.emit(ErrorEvent(reason=reason, message=message))

    def end(self) -> None:
        self.emit(StreamEndedEvent())


ScriptStep = dict[str, object]


def load_script(path: str | Path) -> list[ScriptStep]:
    """Load a replay script: a JSON list of step objects with a `type` key."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError("replay script must be a JSON list of steps")
    steps: list[ScriptStep] = []
    for position, step in enumerate(payload):
        if not isinstance(step, dict) or "type" not in step:
            raise ValueError(f"step {position} must be an object with a 'type' key")
        steps.append(step)
    return steps


def parse_event(step: ScriptStep) -> SourceEvent:
    """Convert a script step of type transcript/error/ended into a source event."""
    kind = step["type"]
    if kind == "transcript":
        return TranscriptEvent(
            index=int(step.get("index", 0)),  # type: ignore[arg-type]
            text=str(step.get("text", "")),
            is_final=bool(step.get("final", False)),
        )
    if kind == "error":
        reason = str(step.get("reason", "other"))
        if reason not in {"permission-denied", "device-unavailable", "no-speech", "other"}:
            raise ValueError(f"unknown error reason {reason!r}")
        return ErrorEvent(reason=reason, message=str(step.get("message", "")))  # type: ignore[arg-type]
    if kind == "ended":
        return StreamEndedEvent()
    raise ValueError(f"step type {kind!r} is not a source event")
