# Rev 0.1.0
from __future__ import annotations

import threading
from functools import partial
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from todoapp.models.entities import TodoItem, UNASSIGNED_ID
from todoapp.models.errors import PersistenceFailure, TodoError
from todoapp.models.types import SortOrder
from todoapp.services.list_reconciler import diff
from todoapp.services.priority_classifier import parse_label
from todoapp.services.undo_buffer import UndoBuffer
from todoapp.utils.logging_setup import get_logger

log = get_logger("TodoListViewModel")

Query = Callable[[], List[TodoItem]]
Dispatch = Callable[[Callable[[], None]], None]


def _run_inline(job: Callable[[], None]) -> None:
    job()


class TodoListViewModel(QObject):
    """
    Keeps the rendered list in step with the store.

    The active query (all / search / sort) is re-run whenever the store
    republishes; each result is diffed against what is on screen and the
    edit script goes out on editsReady. Queries are numbered and only the
    most recently issued one may deliver, so a slow search cannot
    overwrite a newer result.

    `dispatch` decides where queries run; it receives a zero-arg job.
    The default runs it inline. Jobs may deliver from worker threads;
    the generation check and the items swap happen under one lock.
    """

    editsReady = Signal(object)      # list[Edit]
    emptyChanged = Signal(bool)
    undoAvailable = Signal(bool)
    errorOccurred = Signal(str)
    messagePosted = Signal(str)

    def __init__(self, store, *, undo: Optional[UndoBuffer] = None, dispatch: Optional[Dispatch] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._undo = undo if undo is not None else UndoBuffer(store, self)
        self._dispatch = dispatch or _run_inline
        self._items: List[TodoItem] = []
        self._empty: Optional[bool] = None
        self._generation = 0
        self._lock = threading.RLock()
        self._query: Query = store.query_all
        self._subscribed = False

        self._undo.pendingChanged.connect(self.undoAvailable)

    # ---- state
    @property
    def items(self) -> List[TodoItem]:
        with self._lock:
            return list(self._items)

    @property
    def is_empty(self) -> bool:
        return bool(self._empty)

    @property
    def undo_pending(self) -> Optional[TodoItem]:
        return self._undo.pending

    # ---- lifecycle
    def start(self) -> None:
        """Subscribe to the store; the current snapshot is rendered immediately."""
        if not self._subscribed:
            self._subscribed = True
            self._store.subscribe(self._on_snapshot)

    def stop(self) -> None:
        if self._subscribed:
            self._subscribed = False
            self._store.unsubscribe(self._on_snapshot)

    # ---- queries
    def show_all(self) -> None:
        self._set_query(self._store.query_all)

    def search(self, text: str) -> None:
        self._set_query(partial(self._store.search, text))

    def sort(self, order: SortOrder) -> None:
        self._set_query(partial(self._store.sort_by, order))

    # ---- commands
    def add(self, title: str, description: str, priority_label: str) -> Optional[int]:
        item = TodoItem(UNASSIGNED_ID, title, description, parse_label(priority_label))
        try:
            new_id = self._store.insert_record(item)
        except TodoError as e:
            self._report(e)
            return None
        self.messagePosted.emit("Successfully added!")
        return new_id

    def update(self, item_id: int, title: str, description: str, priority_label: str) -> bool:
        item = TodoItem(item_id, title, description, parse_label(priority_label))
        try:
            self._store.update_record(item)
        except TodoError as e:
            self._report(e)
            return False
        self.messagePosted.emit("Successfully updated!")
        return True

    def delete(self, item_id: int) -> Optional[TodoItem]:
        try:
            removed = self._undo.delete(item_id)
        except TodoError as e:
            self._report(e)
            return None
        self.messagePosted.emit(f"Deleted '{removed.title}'")
        return removed

    def remove(self, item_id: int) -> Optional[TodoItem]:
        """Confirmed delete from the edit form; not undoable."""
        try:
            removed = self._store.delete_record(item_id)
        except TodoError as e:
            self._report(e)
            return None
        self.messagePosted.emit(f"Successfully removed: {removed.title}")
        return removed

    def undo_delete(self) -> Optional[TodoItem]:
        try:
            return self._undo.undo()
        except TodoError as e:
            self._report(e)
            return None

    def discard_undo(self) -> None:
        self._undo.discard()

    def delete_all(self) -> bool:
        try:
            self._store.delete_all()
        except TodoError as e:
            self._report(e)
            return False
        self.messagePosted.emit("Successfully removed everything!")
        return True

    # ---- internals
    def _on_snapshot(self, snapshot: List[TodoItem]) -> None:
        empty = len(snapshot) == 0
        if empty != self._empty:
            self._empty = empty
            self.emptyChanged.emit(empty)
        self._issue(self._query)

    def _set_query(self, query: Query) -> None:
        self._query = query
        self._issue(query)

    def _issue(self, query: Query) -> int:
        with self._lock:
            self._generation += 1
            generation = self._generation

        def job() -> None:
            try:
                rows = query()
            except TodoError as e:
                self._report(e)
                return
            self.deliver(generation, rows)

        self._dispatch(job)
        return generation

    def deliver(self, generation: int, rows: List[TodoItem]) -> bool:
        """Render `rows` unless a newer query has been issued since `generation`."""
        with self._lock:
            if generation != self._generation:
                log.debug("Discarding stale result #%d (latest #%d)", generation, self._generation)
                return False
            edits = diff(self._items, rows)
            self._items = list(rows)
            # scripts leave in the order they were computed
            if edits:
                self.editsReady.emit(edits)
            return True

    def _report(self, error: TodoError) -> None:
        if isinstance(error, PersistenceFailure):
            log.error("Storage error: %s", error)
        else:
            log.warning("%s", error)
        self.errorOccurred.emit(str(error))
