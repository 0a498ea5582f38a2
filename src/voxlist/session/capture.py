"""Speech capture session state machine."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from voxlist.models import SessionOutcome, TranscriptChunk
from voxlist.session.source import (
    ErrorEvent,
    SourceEvent,
    StreamEndedEvent,
    TranscriptEvent,
    TranscriptionSource,
)
from voxlist.session.stitching import stitch_transcript
from voxlist.session.timers import Scheduler, ThreadingScheduler, TimerHandle

logger = logging.getLogger(__name__)

_TERMINAL_ERRORS = {"permission-denied", "device-unavailable"}


class SessionState(str, Enum):
    IDLE = "idle"
    RECORDING = "recording"
    PROCESSING = "processing"
    REVIEW = "review"


class SessionStateError(ValueError):
    """Raised when a review action is requested outside the review state."""


class SessionSettings(BaseModel):
    """Timing and interaction settings of a capture session."""

    silence_timeout_sec: float = Field(default=3.0, gt=0)
    max_session_sec: float = Field(default=90.0, gt=0)
    restart_cooldown_sec: float = Field(default=0.3, ge=0)
    review_mode: Literal["review", "direct"] = "review"


OutcomeHandler = Callable[[SessionOutcome], None]


class CaptureSession:
    """Turn one user gesture into one finalized utterance.

    The session owns the chunk buffer and timers of the current recording.
    Timer callbacks and source events carry the recording generation they
    were created for and are ignored once that recording is over.
    """

    def __init__(
        self,
        source: TranscriptionSource,
        *,
        settings: SessionSettings | None = None,
        scheduler: Scheduler | None = None,
        on_outcome: OutcomeHandler | None = None,
    ) -> None:
        self.settings = settings or SessionSettings()
        self._source = source
        self._scheduler = scheduler or ThreadingScheduler()
        self._on_outcome = on_outcome
        self._lock = threading.RLock()

        self._state = SessionState.IDLE
        self._locale = "en"
        self._generation = 0
        self._segment = 0
        self._chunks: dict[tuple[int, int], TranscriptChunk] = {}
        self._want_recording = False
        self._last_activity: float | None = None
        self._pending_text: str | None = None
        self._silence_timer: TimerHandle | None = None
        self._ceiling_timer: TimerHandle | None = None
        self._restart_timer: TimerHandle | None = None
        self.restart_count = 0

        source.subscribe(self._handle_event)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def pending_text(self) -> str | None:
        """Stitched text awaiting confirmation while in review."""
        return self._pending_text

    @property
    def last_activity(self) -> float | None:
        return self._last_activity

    def preview(self) -> str:
        """Current best transcript of the recording in progress."""
        with self._lock:
            return stitch_transcript(self._chunks.values())

    def start(self, locale: str) -> None:
        """Begin recording for a new gesture, stopping any earlier session first."""
        with self._lock:
            if self._state == SessionState.RECORDING:
                logger.debug("Stopping previous recording before starting a new one")
                self._halt_recording()
            self._pending_text = None
            self._generation += 1
            self._segment = 0
            self._chunks = {}
            self._last_activity = None
            self._locale = locale
            self._want_recording = True
            self.restart_count = 0
            self._state = SessionState.RECORDING
            generation = self._generation
            self._ceiling_timer = self._scheduler.call_later(
                self.settings.max_session_sec, lambda: self._on_ceiling(generation)
            )
            logger.info("Recording started (locale=%s)", locale)
            self._source.start(locale)

    def release(self) -> SessionOutcome | None:
        """User ended the gesture; finish the recording."""
        return self._finish(trigger="release")

    def cancel(self) -> SessionOutcome | None:
        """Abandon the recording or the pending review."""
        with self._lock:
            if self._state == SessionState.RECORDING:
                self._halt_recording()
            elif self._state == SessionState.REVIEW:
                self._pending_text = None
            else:
                return None
            self._state = SessionState.IDLE
            outcome = SessionOutcome(status="cancelled", trigger="cancel")
        self._emit(outcome)
        return outcome

    def confirm(self, text: str | None = None) -> SessionOutcome:
        """Accept the reviewed text, optionally replaced by the user's edit."""
        with self._lock:
            if self._state != SessionState.REVIEW:
                raise SessionStateError(f"cannot confirm while {self._state.value}")
            final_text = " ".join((text if text is not None else self._pending_text or "").split())
            self._pending_text = None
            self._state = SessionState.IDLE
            if final_text:
                outcome = SessionOutcome(status="captured", text=final_text, trigger="confirm")
            else:
                outcome = SessionOutcome(status="nothing-captured", trigger="confirm")
        self._emit(outcome)
        return outcome

    def _finish(self, *, trigger: Literal["release", "silence", "ceiling"]) -> SessionOutcome | None:
        with self._lock:
            if self._state != SessionState.RECORDING:
                logger.debug("Ignoring %s while %s", trigger, self._state.value)
                return None
            self._state = SessionState.PROCESSING
            self._halt_recording()
            text = stitch_transcript(self._chunks.values())
            if not text:
                self._state = SessionState.IDLE
                outcome = SessionOutcome(status="nothing-captured", trigger=trigger)
            elif self.settings.review_mode == "review":
                self._pending_text = text
                self._state = SessionState.REVIEW
                outcome = SessionOutcome(status="review", text=text, trigger=trigger)
            else:
                self._state = SessionState.IDLE
                outcome = SessionOutcome(status="captured", text=text, trigger=trigger)
            logger.info("Recording finished by %s: %s", trigger, outcome.status)
        self._emit(outcome)
        return outcome

    def _halt_recording(self) -> None:
        self._want_recording = False
        self._cancel_timers()
        self._source.stop()

    def _cancel_timers(self) -> None:
        for timer in (self._silence_timer, self._ceiling_timer, self._restart_timer):
            if timer is not None:
                timer.cancel()
        self._silence_timer = None
        self._ceiling_timer = None
        self._restart_timer = None

    def _handle_event(self, event: SourceEvent) -> None:
        outcome: SessionOutcome | None = None
        with self._lock:
            if self._state != SessionState.RECORDING:
                return
            if isinstance(event, TranscriptEvent):
                self._on_transcript(event)
            elif isinstance(event, ErrorEvent):
                outcome = self._on_error(event)
            elif isinstance(event, StreamEndedEvent):
                self._on_stream_ended()
        if outcome is not None:
            self._emit(outcome)

    def _on_transcript(self, event: TranscriptEvent) -> None:
        key = (self._segment, event.index)
        existing = self._chunks.get(key)
        if existing is not None and existing.is_final and not event.is_final:
            return
        self._chunks[key] = TranscriptChunk(
            index=event.index, text=event.text, is_final=event.is_final, segment=self._segment
        )
        self._last_activity = self._scheduler.now()
        if self._silence_timer is not None:
            self._silence_timer.cancel()
        generation = self._generation
        self._silence_timer = self._scheduler.call_later(
            self.settings.silence_timeout_sec, lambda: self._on_silence(generation)
        )

    def _on_error(self, event: ErrorEvent) -> SessionOutcome | None:
        if event.reason in _TERMINAL_ERRORS:
            logger.warning("Recording aborted: %s %s", event.reason, event.message)
            self._halt_recording()
            self._state = SessionState.IDLE
            return SessionOutcome(status=event.reason, trigger="error")  # type: ignore[arg-type]
        if event.reason == "no-speech":
            logger.debug("No speech detected yet")
        else:
            logger.warning("Transient source error: %s", event.message or event.reason)
        return None

    def _on_stream_ended(self) -> None:
        if not self._want_recording or self._restart_timer is not None:
            return
        self._promote_interims(self._segment)
        self._segment += 1
        generation = self._generation
        logger.info("Stream ended during recording, restarting in %.2fs", self.settings.restart_cooldown_sec)
        self._restart_timer = self._scheduler.call_later(
            self.settings.restart_cooldown_sec, lambda: self._restart(generation)
        )

    def _promote_interims(self, segment: int) -> None:
        finals = [key for key, chunk in self._chunks.items() if key[0] == segment and chunk.is_final]
        last_final = max(finals, default=(segment, -1))
        for key, chunk in list(self._chunks.items()):
            if key[0] == segment and not chunk.is_final and key > last_final:
                self._chunks[key] = chunk.model_copy(update={"is_final": True})

    def _restart(self, generation: int) -> None:
        with self._lock:
            self._restart_timer = None
            if generation != self._generation or not self._want_recording:
                return
            if self._state != SessionState.RECORDING:
                return
            self.restart_count += 1
            self._source.start(self._locale)

    def _on_silence(self, generation: int) -> None:
        if generation == self._generation:
            self._finish(trigger="silence")

    def _on_ceiling(self, generation: int) -> None:
        if generation == self._generation:
            self._finish(trigger="ceiling")

    def _emit(self, outcome: SessionOutcome) -> None:
        if self._on_outcome is not None:
            self._on_outcome(outcome)
