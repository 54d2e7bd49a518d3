# tests/test_undo_buffer.py
from __future__ import annotations

import pytest

from todoapp.models.entities import TodoItem
from todoapp.models.errors import DuplicateId, NotFound
from todoapp.models.types import Priority
from todoapp.services.undo_buffer import UndoBuffer


@pytest.fixture()
def undo(seeded_store) -> UndoBuffer:
    return UndoBuffer(seeded_store)


def test_undo_restores_exact_record(undo, seeded_store):
    before = seeded_store.query_all()
    removed = undo.delete(2)
    assert removed == TodoItem(2, "B", "d2", Priority.HIGH)
    assert undo.pending == removed
    assert undo.undo() == removed
    assert seeded_store.query_all() == before
    assert undo.pending is None


def test_undo_with_nothing_pending(undo):
    assert undo.undo() is None


def test_second_delete_supersedes_first(undo, seeded_store):
    undo.delete(1)
    undo.delete(2)
    assert undo.undo().id == 2
    assert undo.undo() is None
    assert [i.id for i in seeded_store.query_all()] == [2]


def test_discard_drops_pending(undo, seeded_store):
    undo.delete(1)
    undo.discard()
    assert undo.undo() is None
    assert [i.id for i in seeded_store.query_all()] == [2]


def test_failed_delete_keeps_previous_pending(undo):
    undo.delete(1)
    with pytest.raises(NotFound):
        undo.delete(99)
    assert undo.pending.id == 1


def test_pending_changed_signal(undo):
    seen = []
    undo.pendingChanged.connect(lambda v: seen.append(v))
    undo.delete(1)
    undo.delete(2)
    undo.undo()
    undo.discard()
    assert seen == [True, True, False]


def test_undo_keeps_pending_when_id_was_retaken(undo, seeded_store):
    undo.delete(2)
    seeded_store.insert_record(TodoItem(2, "other", "x", Priority.LOW))
    with pytest.raises(DuplicateId):
        undo.undo()
    assert undo.pending == TodoItem(2, "B", "d2", Priority.HIGH)
    assert seeded_store.get(2).title == "other"
