"""List store interfaces."""

from __future__ import annotations

from typing import Protocol

from voxlist.models import ListItem


class StoreError(RuntimeError):
    """Raised by a list store when a mutation or read fails."""


class ListStore(Protocol):
    """Mutation interface of the shared shopping list.

    Implementations report failures by raising `StoreError`.
    """

    def list_active_items(self) -> list[ListItem]:
        """Return items that are not yet purchased."""

    def create_item(self, name: str, quantity: int) -> ListItem:
        """Create an item and return it with its assigned id."""

    def set_quantity(self, item_id: str, quantity: int) -> None:
        """Overwrite an item's quantity."""

    def increment_quantity(self, item_id: str, delta: int) -> None:
        """Add `delta` (possibly negative) to an item's quantity."""

    def delete_item(self, item_id: str) -> None:
        """Remove an item."""

    def set_purchased(self, item_id: str, purchased: bool) -> None:
        """Flag an item as purchased or not."""

    def clear_all_items(self) -> None:
        """Remove every item."""
