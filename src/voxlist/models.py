"""Shared data models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class ParsedItem(BaseModel):
    """One item name with its spoken quantity."""

    name: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)


class ListItem(BaseModel):
    """Item as exposed by a list store."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)
    purchased: bool = False


class AddItems(BaseModel):
    kind: Literal["add"] = "add"
    items: list[ParsedItem] = Field(min_length=1)


class DeleteItem(BaseModel):
    kind: Literal["delete"] = "delete"
    name: str = Field(min_length=1)


class MarkPurchased(BaseModel):
    kind: Literal["mark-purchased"] = "mark-purchased"
    name: str = Field(min_length=1)


class IncreaseQty(BaseModel):
    kind: Literal["increase"] = "increase"
    name: str = Field(min_length=1)


class DecreaseQty(BaseModel):
    kind: Literal["decrease"] = "decrease"
    name: str = Field(min_length=1)


class ClearList(BaseModel):
    kind: Literal["clear"] = "clear"


class Unrecognized(BaseModel):
    kind: Literal["unrecognized"] = "unrecognized"
    raw_text: str = ""


Command = Annotated[
    AddItems | DeleteItem | MarkPurchased | IncreaseQty | DecreaseQty | ClearList | Unrecognized,
    Field(discriminator="kind"),
]

UndoKind = Literal["revert-create", "revert-quantity"]


class UndoAction(BaseModel):
    """Inverse of one mutation performed for an add command."""

    kind: UndoKind
    item_id: str = Field(min_length=1)
    prior_quantity: int | None = Field(default=None, ge=1)


OutcomeStatus = Literal[
    "applied",
    "unchanged",
    "not-found",
    "not-understood",
    "needs-confirmation",
    "store-error",
]


class ItemOutcome(BaseModel):
    """Result of executing a command against one list item."""

    name: str | None = None
    status: OutcomeStatus
    item_id: str | None = None
    detail: str | None = None


class ExecutionReport(BaseModel):
    """All per-item outcomes of one executed command."""

    command: Command
    outcomes: list[ItemOutcome]
    undo_available: bool = False

    @property
    def ok(self) -> bool:
        return all(outcome.status in {"applied", "unchanged"} for outcome in self.outcomes)


class TranscriptChunk(BaseModel):
    """Piece of streaming transcription output.

    `segment` counts stream restarts within one capture so that indices
    restarting at zero after a restart never overwrite earlier chunks.
    """

    index: int = Field(ge=0)
    text: str
    is_final: bool = False
    segment: int = Field(default=0, ge=0)


SessionStatus = Literal[
    "review",
    "captured",
    "nothing-captured",
    "cancelled",
    "permission-denied",
    "device-unavailable",
]


class SessionOutcome(BaseModel):
    """What one capture session produced."""

    status: SessionStatus
    text: str | None = None
    trigger: Literal["release", "silence", "ceiling", "error", "cancel", "confirm"] = "release"


class ParseRequest(BaseModel):
    """Utterance interpretation request used by both CLI and API."""

    utterance: str = Field(min_length=1)
    language: str = Field(default="en", min_length=2)


class ParseResponse(BaseModel):
    """Interpretation of one utterance."""

    language: str
    normalized: str
    command: Command


class StitchRequest(BaseModel):
    chunks: list[TranscriptChunk]


class StitchResponse(BaseModel):
    text: str
