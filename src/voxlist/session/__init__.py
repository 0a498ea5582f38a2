"""Speech capture: transcript stitching, timers and the session state machine."""

from voxlist.session.capture import CaptureSession, SessionSettings, SessionState, SessionStateError
from voxlist.session.source import ScriptedTranscriptionSource, TranscriptionSource
from voxlist.session.stitching import stitch_transcript
from voxlist.session.timers import ManualScheduler, Scheduler, ThreadingScheduler

__all__ = [
    "CaptureSession",
    "ManualScheduler",
    "Scheduler",
    "ScriptedTranscriptionSource",
    "SessionSettings",
    "SessionState",
    "SessionStateError",
    "ThreadingScheduler",
    "TranscriptionSource",
    "stitch_transcript",
]
