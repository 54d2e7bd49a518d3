# Rev 0.1.0
from __future__ import annotations

import threading
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from todoapp.models.entities import TodoItem
from todoapp.models.errors import NotFound
from todoapp.models.types import SortOrder
from todoapp.services.validation import require_valid
from todoapp.utils.logging_setup import get_logger

log = get_logger("RecordStore")

SnapshotCallback = Callable[[List[TodoItem]], None]


class RecordStore(QObject):
    """
    Authoritative collection of to-do items over a persistence backend
    (SQLiteTodoRepository or anything with the same methods).

    Every successful mutation republishes the full id-ordered snapshot via
    snapshotChanged. Mutations are serialized, so observers only ever see
    complete snapshots, in the order the mutations were issued. Failed
    mutations raise and publish nothing.
    """

    snapshotChanged = Signal(object)   # list[TodoItem]
    emptinessChanged = Signal(bool)

    def __init__(self, backend, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._backend = backend
        self._lock = threading.RLock()
        self._empty: Optional[bool] = None

    # ---- observable collection
    def subscribe(self, callback: SnapshotCallback) -> None:
        """Connect `callback` and hand it the current snapshot right away."""
        self.snapshotChanged.connect(callback)
        callback(self.query_all())

    def unsubscribe(self, callback: SnapshotCallback) -> None:
        self.snapshotChanged.disconnect(callback)

    # ---- mutations
    def insert_record(self, item: TodoItem) -> Optional[int]:
        """
        Returns the stored id, or None when item.id is nonzero and already
        taken; that insert is ignored and nothing is republished.
        """
        require_valid(item)
        with self._lock:
            new_id = self._backend.insert(item)
            if new_id is None:
                log.warning("Insert ignored: id %s already exists", item.id)
                return None
            log.info("Inserted item %s", new_id)
            self._republish()
            return new_id

    def update_record(self, item: TodoItem) -> None:
        require_valid(item)
        with self._lock:
            if not self._backend.update(item):
                raise NotFound(item.id)
            log.info("Updated item %s", item.id)
            self._republish()

    def delete_record(self, item_id: int) -> TodoItem:
        with self._lock:
            existing = self._backend.get(item_id)
            if existing is None or not self._backend.delete(item_id):
                raise NotFound(item_id)
            log.info("Deleted item %s", item_id)
            self._republish()
            return existing

    def delete_all(self) -> int:
        with self._lock:
            removed = self._backend.delete_all()
            log.info("Deleted all items (%d)", removed)
            self._republish()
            return removed

    # ---- queries
    def query_all(self) -> List[TodoItem]:
        with self._lock:
            return self._backend.list_all()

    def get(self, item_id: int) -> TodoItem:
        with self._lock:
            item = self._backend.get(item_id)
        if item is None:
            raise NotFound(item_id)
        return item

    def search(self, query: str) -> List[TodoItem]:
        with self._lock:
            return self._backend.search(query)

    def sort_by(self, order: SortOrder) -> List[TodoItem]:
        with self._lock:
            return self._backend.list_by_priority(order)

    def is_empty(self) -> bool:
        with self._lock:
            return self._backend.count() == 0

    # ---- internals
    def _republish(self) -> None:
        snapshot = self._backend.list_all()
        self.snapshotChanged.emit(snapshot)
        empty = len(snapshot) == 0
        if empty != self._empty:
            self._empty = empty
            self.emptinessChanged.emit(empty)
