# src/todoapp/ui/todo_list_model.py
# Rev 0.1.0
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt
from PySide6.QtGui import QColor

from todoapp.models.entities import TodoItem
from todoapp.services.list_reconciler import Change, Edit, Insert, Move, Remove
from todoapp.services.priority_classifier import hex_for, label_for


class TodoListModel(QAbstractListModel):
    """Row model fed by edit scripts, so views animate row by row instead of resetting."""

    IdRole = Qt.UserRole + 1
    DescriptionRole = Qt.UserRole + 2
    PriorityRole = Qt.UserRole + 3
    ItemRole = Qt.UserRole + 4

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._rows: List[TodoItem] = []

    # ---- Qt API
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None
        item = self._rows[index.row()]
        if role == Qt.DisplayRole:
            return item.title
        if role == Qt.ToolTipRole:
            return f"{item.description}\n{label_for(item.priority)}"
        if role == Qt.DecorationRole:
            return QColor(hex_for(item.priority))
        if role == self.IdRole:
            return item.id
        if role == self.DescriptionRole:
            return item.description
        if role == self.PriorityRole:
            return item.priority.name
        if role == self.ItemRole:
            return item
        return None

    def roleNames(self):
        names = super().roleNames()
        names[self.IdRole] = b"itemId"
        names[self.DescriptionRole] = b"description"
        names[self.PriorityRole] = b"priority"
        return names

    # ---- public
    def items(self) -> List[TodoItem]:
        return list(self._rows)

    def item_at(self, row: int) -> Optional[TodoItem]:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def apply_edits(self, edits: Sequence[Edit]) -> None:
        root = QModelIndex()
        for e in edits:
            if isinstance(e, Remove):
                self.beginRemoveRows(root, e.index, e.index)
                del self._rows[e.index]
                self.endRemoveRows()
            elif isinstance(e, Move):
                # Qt wants the destination in pre-move coordinates
                dest = e.to_index + 1 if e.to_index > e.from_index else e.to_index
                self.beginMoveRows(root, e.from_index, e.from_index, root, dest)
                self._rows.insert(e.to_index, self._rows.pop(e.from_index))
                self.endMoveRows()
            elif isinstance(e, Insert):
                self.beginInsertRows(root, e.index, e.index)
                self._rows.insert(e.index, e.item)
                self.endInsertRows()
            elif isinstance(e, Change):
                self._rows[e.index] = e.item
                ix = self.index(e.index, 0)
                self.dataChanged.emit(ix, ix)
            else:
                raise TypeError(f"unknown edit {e!r}")
