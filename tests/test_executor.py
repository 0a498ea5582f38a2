from voxlist.commands import CommandExecutor
from voxlist.models import (
    AddItems,
    ClearList,
    DecreaseQty,
    DeleteItem,
    IncreaseQty,
    ListItem,
    MarkPurchased,
    ParsedItem,
    Unrecognized,
)
from voxlist.session.timers import ManualScheduler
from voxlist.store import InMemoryListStore, StoreError


class _FlakyStore(InMemoryListStore):
    def create_item(self, name: str, quantity: int) -> ListItem:
        if name == "bad":
            raise StoreError("write rejected")
        return super().create_item(name, quantity)


def _executor(store: InMemoryListStore, **kwargs) -> tuple[CommandExecutor, ManualScheduler]:
    scheduler = ManualScheduler()
    return CommandExecutor(store, undo_window_sec=3.0, scheduler=scheduler, **kwargs), scheduler


def _add(*pairs: tuple[str, int]) -> AddItems:
    return AddItems(items=[ParsedItem(name=name, quantity=qty) for name, qty in pairs])


def test_add_creates_items_and_undo_removes_them() -> None:
    store = InMemoryListStore()
    executor, _ = _executor(store)

    report = executor.execute(_add(("eggs", 2), ("milk", 1)))

    assert report.ok
    assert report.undo_available
    assert [(item.name, item.quantity) for item in store.all_items()] == [("eggs", 2), ("milk", 1)]
    assert [action.kind for action in executor.ledger.actions] == ["revert-create", "revert-create"]

    undo_outcomes = executor.undo()

    assert [outcome.status for outcome in undo_outcomes] == ["applied", "applied"]
    assert store.all_items() == []


def test_add_existing_item_sets_quantity_and_undo_restores_it() -> None:
    store = InMemoryListStore([ListItem(id="m1", name="Milk", quantity=1), ListItem(id="b1", name="bread")])
    before = store.all_items()
    executor, _ = _executor(store)

    executor.execute(_add(("milk", 3), ("eggs", 1)))

    assert store.all_items()[0].quantity == 3
    assert executor.ledger.actions[0].prior_quantity == 1

    executor.undo()

    assert store.all_items() == before


def test_repeated_name_in_one_command_unwinds_cleanly() -> None:
    store = InMemoryListStore()
    executor, _ = _executor(store)

    executor.execute(_add(("milk", 1), ("milk", 2)))
    assert [(item.name, item.quantity) for item in store.all_items()] == [("milk", 2)]

    executor.undo()

    assert store.all_items() == []


def test_undo_window_expires() -> None:
    store = InMemoryListStore()
    executor, scheduler = _executor(store)

    executor.execute(_add(("eggs", 1)))
    scheduler.advance(3.1)

    assert not executor.ledger.active
    assert executor.undo() == []
    assert len(store.all_items()) == 1


def test_new_ledger_supersedes_previous_one() -> None:
    store = InMemoryListStore()
    executor, scheduler = _executor(store)

    executor.execute(_add(("eggs", 1)))
    scheduler.advance(2.0)
    executor.execute(_add(("milk", 1)))
    scheduler.advance(2.0)

    executor.undo()

    assert [item.name for item in store.all_items()] == ["eggs"]
    assert scheduler.pending == 0


def test_store_failure_is_isolated_per_item() -> None:
    store = _FlakyStore()
    executor, _ = _executor(store)

    report = executor.execute(_add(("eggs", 1), ("bad", 1), ("milk", 1)))

    assert [outcome.status for outcome in report.outcomes] == ["applied", "store-error", "applied"]
    assert not report.ok
    assert [item.name for item in store.all_items()] == ["eggs", "milk"]

    executor.undo()

    assert store.all_items() == []


def test_delete_mark_increase_decrease() -> None:
    store = InMemoryListStore(
        [
            ListItem(id="1", name="milk", quantity=1),
            ListItem(id="2", name="eggs", quantity=3),
            ListItem(id="3", name="bread", quantity=1),
        ]
    )
    executor, _ = _executor(store)

    assert executor.execute(IncreaseQty(name="milk")).outcomes[0].status == "applied"
    assert executor.execute(DecreaseQty(name="eggs")).outcomes[0].status == "applied"
    assert executor.execute(DecreaseQty(name="bread")).outcomes[0].status == "unchanged"
    assert executor.execute(MarkPurchased(name="bread")).outcomes[0].status == "applied"
    assert executor.execute(DeleteItem(name="egg")).outcomes[0].status == "applied"

    assert [(item.name, item.quantity, item.purchased) for item in store.all_items()] == [
        ("milk", 2, False),
        ("bread", 1, True),
    ]
    assert [item.name for item in store.list_active_items()] == ["milk"]


def test_missing_target_is_reported_without_mutation() -> None:
    store = InMemoryListStore([ListItem(id="1", name="milk")])
    executor, _ = _executor(store)

    report = executor.execute(DeleteItem(name="cheese"))

    assert report.outcomes[0].status == "not-found"
    assert len(store.all_items()) == 1


def test_other_commands_drop_the_undo_ledger() -> None:
    store = InMemoryListStore()
    executor, _ = _executor(store)

    executor.execute(_add(("eggs", 1)))
    executor.execute(IncreaseQty(name="eggs"))

    assert not executor.ledger.active
    assert executor.undo() == []


def test_clear_requires_confirmation() -> None:
    store = InMemoryListStore([ListItem(id="1", name="milk")])
    executor, _ = _executor(store)

    assert executor.execute(ClearList()).outcomes[0].status == "needs-confirmation"
    assert len(store.all_items()) == 1

    confirmed, _ = _executor(store, confirm_clear=lambda: True)
    assert confirmed.execute(ClearList()).outcomes[0].status == "applied"
    assert store.all_items() == []


def test_unrecognized_is_reported() -> None:
    executor, _ = _executor(InMemoryListStore())

    report = executor.execute(Unrecognized(raw_text="mumble"))

    assert report.outcomes[0].status == "not-understood"
    assert report.outcomes[0].detail == "mumble"


class _LateTimerScheduler(ManualScheduler):
    """Scheduler whose timers cannot be cancelled once handed out."""

    def __init__(self) -> None:
        super().__init__()
        self.callbacks: list = []

    def call_later(self, delay_sec: float, callback):
        self.callbacks.append(callback)
        return super().call_later(delay_sec, lambda: None)


def test_stale_undo_expiry_does_not_drop_newer_ledger() -> None:
    store = InMemoryListStore()
    scheduler = _LateTimerScheduler()
    executor = CommandExecutor(store, undo_window_sec=3.0, scheduler=scheduler)

    executor.execute(_add(("eggs", 1)))
    executor.execute(_add(("milk", 1)))
    scheduler.callbacks[0]()

    assert executor.ledger.active
    assert [action.item_id for action in executor.ledger.actions] == [store.list_active_items()[1].id]

    scheduler.callbacks[1]()

    assert not executor.ledger.active
