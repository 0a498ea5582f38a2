"""Command execution against a list store, with a short-lived undo ledger."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import assert_never

from voxlist.commands.classifier import find_exact, match_item
from voxlist.models import (
    AddItems,
    ClearList,
    Command,
    DecreaseQty,
    DeleteItem,
    ExecutionReport,
    IncreaseQty,
    ItemOutcome,
    MarkPurchased,
    ParsedItem,
    Unrecognized,
    UndoAction,
)
from voxlist.session.timers import Scheduler, ThreadingScheduler, TimerHandle
from voxlist.store.base import ListStore, StoreError

logger = logging.getLogger(__name__)


class UndoLedger:
    """Reversible actions of the latest add command, valid for a fixed window."""

    def __init__(self, scheduler: Scheduler, window_sec: float) -> None:
        self._scheduler = scheduler
        self._window_sec = window_sec
        self._lock = threading.Lock()
        self._actions: list[UndoAction] = []
        self._timer: TimerHandle | None = None
        self._generation = 0

    @property
    def active(self) -> bool:
        with self._lock:
            return bool(self._actions)

    @property
    def actions(self) -> list[UndoAction]:
        with self._lock:
            return list(self._actions)

    def arm(self, actions: list[UndoAction]) -> None:
        """Replace any previous ledger and start a new window."""
        with self._lock:
            self._cancel_timer()
            self._actions = list(actions)
            if self._actions:
                generation = self._generation
                self._timer = self._scheduler.call_later(
                    self._window_sec, lambda: self._expire(generation)
                )

    def discard(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._actions = []

    def take(self) -> list[UndoAction]:
        """Empty the ledger and return what it held."""
        with self._lock:
            self._cancel_timer()
            actions, self._actions = self._actions, []
            return actions

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            if self._actions:
                logger.debug("Undo window closed, dropping %d action(s)", len(self._actions))
            self._actions = []
            self._timer = None

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class CommandExecutor:
    """Apply classified commands to a list store.

    Only add commands are undoable. Items in one add command are applied
    independently, so a store failure on one item leaves the others in place.
    """

    def __init__(
        self,
        store: ListStore,
        *,
        undo_window_sec: float = 3.0,
        scheduler: Scheduler | None = None,
        confirm_clear: Callable[[], bool] | None = None,
    ) -> None:
        self.store = store
        self.ledger = UndoLedger(scheduler or ThreadingScheduler(), undo_window_sec)
        self._confirm_clear = confirm_clear

    def execute(self, command: Command) -> ExecutionReport:
        if isinstance(command, AddItems):
            return self._add_items(command)

        self.ledger.discard()
        if isinstance(command, DeleteItem):
            outcome = self._on_match(command.name, self.store.delete_item)
        elif isinstance(command, MarkPurchased):
            outcome = self._on_match(command.name, lambda item_id: self.store.set_purchased(item_id, True))
        elif isinstance(command, IncreaseQty):
            outcome = self._on_match(command.name, lambda item_id: self.store.increment_quantity(item_id, 1))
        elif isinstance(command, DecreaseQty):
            outcome = self._decrease(command.name)
        elif isinstance(command, ClearList):
            outcome = self._clear()
        elif isinstance(command, Unrecognized):
            logger.info("Command not understood: %r", command.raw_text)
            outcome = ItemOutcome(status="not-understood", detail=command.raw_text)
        else:
            assert_never(command)
        return ExecutionReport(command=command, outcomes=[outcome])

    def undo(self) -> list[ItemOutcome]:
        """Revert the latest add command if its window is still open.

        Actions are replayed newest first so repeated names within one
        command unwind cleanly.
        """
        outcomes: list[ItemOutcome] = []
        for action in reversed(self.ledger.take()):
            try:
                if action.kind == "revert-create":
                    self.store.delete_item(action.item_id)
                else:
                    self.store.set_quantity(action.item_id, action.prior_quantity or 1)
            except StoreError as exc:
                logger.warning("Undo of %s on %s failed: %s", action.kind, action.item_id, exc)
                outcomes.append(ItemOutcome(status="store-error", item_id=action.item_id, detail=str(exc)))
                continue
            outcomes.append(ItemOutcome(status="applied", item_id=action.item_id))
        return outcomes

    def _add_items(self, command: AddItems) -> ExecutionReport:
        outcomes: list[ItemOutcome] = []
        actions: list[UndoAction] = []
        for parsed in command.items:
            outcome, action = self._add_one(parsed)
            outcomes.append(outcome)
            if action is not None:
                actions.append(action)
        self.ledger.arm(actions)
        return ExecutionReport(command=command, outcomes=outcomes, undo_available=bool(actions))

    def _add_one(self, parsed: ParsedItem) -> tuple[ItemOutcome, UndoAction | None]:
        try:
            existing = find_exact(parsed.name, self.store.list_active_items())
            if existing is not None:
                self.store.set_quantity(existing.id, parsed.quantity)
                action = UndoAction(
                    kind="revert-quantity", item_id=existing.id, prior_quantity=existing.quantity
                )
                return ItemOutcome(name=parsed.name, status="applied", item_id=existing.id), action
            created = self.store.create_item(parsed.name, parsed.quantity)
        except StoreError as exc:
            logger.warning("Adding %r failed: %s", parsed.name, exc)
            return ItemOutcome(name=parsed.name, status="store-error", detail=str(exc)), None
        action = UndoAction(kind="revert-create", item_id=created.id)
        return ItemOutcome(name=parsed.name, status="applied", item_id=created.id), action

    def _on_match(self, name: str, mutate: Callable[[str], None]) -> ItemOutcome:
        try:
            item = match_item(name, self.store.list_active_items())
            if item is None:
                return ItemOutcome(name=name, status="not-found")
            mutate(item.id)
        except StoreError as exc:
            logger.warning("Mutation of %r failed: %s", name, exc)
            return ItemOutcome(name=name, status="store-error", detail=str(exc))
        return ItemOutcome(name=name, status="applied", item_id=item.id)

    def _decrease(self, name: str) -> ItemOutcome:
        try:
            item = match_item(name, self.store.list_active_items())
            if item is None:
                return ItemOutcome(name=name, status="not-found")
            if item.quantity <= 1:
                return ItemOutcome(name=name, status="unchanged", item_id=item.id, detail="quantity already 1")
            self.store.increment_quantity(item.id, -1)
        except StoreError as exc:
            logger.warning("Decreasing %r failed: %s", name, exc)
            return ItemOutcome(name=name, status="store-error", detail=str(exc))
        return ItemOutcome(name=name, status="applied", item_id=item.id)

    def _clear(self) -> ItemOutcome:
        if self._confirm_clear is None or not self._confirm_clear():
            return ItemOutcome(status="needs-confirmation")
        try:
            self.store.clear_all_items()
        except StoreError as exc:
            logger.warning("Clearing the list failed: %s", exc)
            return ItemOutcome(status="store-error", detail=str(exc))
        return ItemOutcome(status="applied")
