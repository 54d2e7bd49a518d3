# Rev 0.1.0
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from todoapp.models.entities import TodoItem
from todoapp.models.errors import DuplicateId
from todoapp.utils.logging_setup import get_logger

log = get_logger("UndoBuffer")


class UndoBuffer(QObject):
    """
    Single-slot undo for deletes. A new delete replaces whatever was
    pending; the replaced record can no longer be restored. Expiry is up
    to the caller (the main window drops it when the undo bar times out).
    """

    pendingChanged = Signal(bool)

    def __init__(self, store, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._pending: Optional[TodoItem] = None

    @property
    def pending(self) -> Optional[TodoItem]:
        return self._pending

    def delete(self, item_id: int) -> TodoItem:
        removed = self._store.delete_record(item_id)
        if self._pending is not None:
            log.debug("Undo for item %s superseded by delete of %s", self._pending.id, item_id)
        self._set_pending(removed)
        return removed

    def undo(self) -> Optional[TodoItem]:
        item = self._pending
        if item is None:
            return None
        # original id is kept, so the exact row comes back
        if self._store.insert_record(item) is None:
            # pending stays; the id was taken since the delete
            raise DuplicateId(item.id)
        self._set_pending(None)
        log.info("Restored item %s", item.id)
        return item

    def discard(self) -> None:
        if self._pending is not None:
            self._set_pending(None)

    def _set_pending(self, item: Optional[TodoItem]) -> None:
        was = self._pending is not None
        self._pending = item
        # emits on every capture, superseding ones included
        if was or item is not None:
            self.pendingChanged.emit(item is not None)
