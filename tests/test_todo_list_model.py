# tests/test_todo_list_model.py
from __future__ import annotations

import pytest
from PySide6.QtCore import Qt

from todoapp.models.entities import TodoItem
from todoapp.models.types import Priority
from todoapp.services.list_reconciler import diff
from todoapp.ui.todo_list_model import TodoListModel


def _items(*specs):
    return [TodoItem(i, t, f"d{i}", p) for i, t, p in specs]


@pytest.fixture()
def model(qapp):
    return TodoListModel()


def test_model_follows_edit_scripts(model):
    first = _items((1, "A", Priority.LOW), (2, "B", Priority.HIGH), (3, "C", Priority.MEDIUM))
    model.apply_edits(diff([], first))
    assert model.items() == first

    second = _items((3, "C", Priority.MEDIUM), (2, "B2", Priority.HIGH), (4, "D", Priority.LOW))
    model.apply_edits(diff(first, second))
    assert model.items() == second
    assert model.rowCount() == 3


def test_move_rows_signal(model):
    first = _items((1, "A", Priority.LOW), (2, "B", Priority.LOW), (3, "C", Priority.LOW))
    model.apply_edits(diff([], first))
    moves = []
    model.rowsMoved.connect(lambda parent, start, end, dest, row: moves.append((start, row)))
    reordered = [first[1], first[2], first[0]]
    model.apply_edits(diff(first, reordered))
    assert model.items() == reordered
    assert moves == [(0, 3)]


def test_data_roles(model):
    model.apply_edits(diff([], _items((7, "Title", Priority.HIGH))))
    ix = model.index(0, 0)
    assert model.data(ix, Qt.DisplayRole) == "Title"
    assert model.data(ix, TodoListModel.IdRole) == 7
    assert model.data(ix, TodoListModel.DescriptionRole) == "d7"
    assert model.data(ix, TodoListModel.PriorityRole) == "HIGH"
    assert "High Priority" in model.data(ix, Qt.ToolTipRole)
    assert model.data(model.index(5, 0), Qt.DisplayRole) is None
    assert model.item_at(0).id == 7
    assert model.item_at(3) is None
