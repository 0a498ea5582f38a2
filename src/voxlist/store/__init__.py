"""List store contract and reference implementation."""

from voxlist.store.base import ListStore, StoreError
from voxlist.store.memory import InMemoryListStore

__all__ = ["InMemoryListStore", "ListStore", "StoreError"]
