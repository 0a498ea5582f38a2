"""In-process list store."""

from __future__ import annotations

import threading
import uuid

from voxlist.models import ListItem
from voxlist.store.base import StoreError


class InMemoryListStore:
    """Dictionary-backed store keeping insertion order."""

    def __init__(self, items: list[ListItem] | None = None) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, ListItem] = {item.id: item for item in items or []}

    def list_active_items(self) -> list[ListItem]:
        with self._lock:
            return [item for item in self._items.values() if not item.purchased]

    def all_items(self) -> list[ListItem]:
        with self._lock:
            return list(self._items.values())

    def create_item(self, name: str, quantity: int) -> ListItem:
        item = ListItem(id=uuid.uuid4().hex, name=name, quantity=max(1, quantity))
        with self._lock:
            self._items[item.id] = item
        return item

    def set_quantity(self, item_id: str, quantity: int) -> None:
        if quantity < 1:
            raise StoreError(f"quantity must be at least 1, got {quantity}")
        self._update(item_id, quantity=quantity)

    def increment_quantity(self, item_id: str, delta: int) -> None:
        with self._lock:
            item = self._get(item_id)
            quantity = item.quantity + delta
            if quantity < 1:
                raise StoreError(f"quantity of {item.name!r} cannot drop below 1")
            self._items[item_id] = item.model_copy(update={"quantity": quantity})

    def delete_item(self, item_id: str) -> None:
        with self._lock:
            self._get(item_id)
            del self._items[item_id]

    def set_purchased(self, item_id: str, purchased: bool) -> None:
        self._update(item_id, purchased=purchased)

    def clear_all_items(self) -> None:
        with self._lock:
            self._items.clear()

    def _update(self, item_id: str, **changes: object) -> None:
        with self._lock:
            self._items[item_id] = self._get(item_id).model_copy(update=changes)

    def _get(self, item_id: str) -> ListItem:
        try:
            return self._items[item_id]
        except KeyError as exc:
            raise StoreError(f"unknown item id {item_id!r}") from exc
