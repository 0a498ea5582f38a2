"""Utterance interpretation and the end-to-end voice list assistant."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from voxlist.commands.classifier import classify_utterance
from voxlist.commands.executor import CommandExecutor
from voxlist.config import AppConfig
from voxlist.languages import resolve_language_pack
from voxlist.languages.base import LanguagePack
from voxlist.models import (
    Command,
    ExecutionReport,
    ItemOutcome,
    ParseRequest,
    ParseResponse,
    SessionOutcome,
    Unrecognized,
)
from voxlist.session.capture import CaptureSession, SessionSettings
from voxlist.session.source import TranscriptionSource
from voxlist.session.timers import Scheduler, ThreadingScheduler
from voxlist.store.base import ListStore
from voxlist.text.normalizer import normalize_utterance

logger = logging.getLogger(__name__)


def interpret_utterance(text: str, language: str = "en") -> Command:
    """Classify one utterance in the given language."""
    return classify_utterance(text, resolve_language_pack(language))


def interpret_utterances(texts: Iterable[str], language: str = "en") -> list[Command]:
    """Classify buffered utterances, dropping the ones that were not understood."""
    pack = resolve_language_pack(language)
    commands = (classify_utterance(text, pack) for text in texts if text and text.strip())
    return [command for command in commands if not isinstance(command, Unrecognized)]


def run_parse(request: ParseRequest) -> ParseResponse:
    """Interpret a parse request into its normalized text and command."""
    pack = resolve_language_pack(request.language)
    return ParseResponse(
        language=pack.code,
        normalized=normalize_utterance(request.utterance, pack),
        command=classify_utterance(request.utterance, pack),
    )


ReportHandler = Callable[[ExecutionReport], None]
SessionHandler = Callable[[SessionOutcome], None]


class VoiceListAssistant:
    """Wire a capture session to the classifier and the command executor.

    The active locale is read when a gesture starts, so a locale change
    applies from the next session on.
    """

    def __init__(
        self,
        store: ListStore,
        source: TranscriptionSource,
        *,
        config: AppConfig | None = None,
        settings: SessionSettings | None = None,
        scheduler: Scheduler | None = None,
        locale_provider: Callable[[], str] | None = None,
        confirm_clear: Callable[[], bool] | None = None,
        on_report: ReportHandler | None = None,
        on_session: SessionHandler | None = None,
    ) -> None:
        scheduler = scheduler or ThreadingScheduler()
        if settings is None:
            settings = config.session_settings() if config is not None else SessionSettings()
        default_locale = config.locale if config is not None else "en"
        undo_window_sec = config.undo_window_sec if config is not None else 3.0

        self._locale_provider = locale_provider or (lambda: default_locale)
        self._on_report = on_report
        self._on_session = on_session
        self._pack: LanguagePack = resolve_language_pack(default_locale)
        self.last_report: ExecutionReport | None = None
        self.executor = CommandExecutor(
            store,
            undo_window_sec=undo_window_sec,
            scheduler=scheduler,
            confirm_clear=confirm_clear,
        )
        self.session = CaptureSession(
            source, settings=settings, scheduler=scheduler, on_outcome=self._handle_outcome
        )

    def begin(self) -> None:
        """User gesture started."""
        self._pack = resolve_language_pack(self._locale_provider())
        self.session.start(self._pack.code)

    def release(self) -> SessionOutcome | None:
        return self.session.release()

    def cancel(self) -> SessionOutcome | None:
        return self.session.cancel()

    def confirm(self, text: str | None = None) -> SessionOutcome:
        return self.session.confirm(text)

    def undo(self) -> list[ItemOutcome]:
        return self.executor.undo()

    def execute_text(self, text: str) -> ExecutionReport:
        """Classify and execute one utterance with the current session locale."""
        command = classify_utterance(text, self._pack)
        report = self.executor.execute(command)
        self.last_report = report
        logger.info("Executed %s: %s", command.kind, [outcome.status for outcome in report.outcomes])
        if self._on_report is not None:
            self._on_report(report)
        return report

    def _handle_outcome(self, outcome: SessionOutcome) -> None:
        if self._on_session is not None:
            self._on_session(outcome)
        if outcome.status == "captured" and outcome.text:
            self.execute_text(outcome.text)
