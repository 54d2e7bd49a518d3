# src/todoapp/ui/todo_editor_dialog.py
# Rev 0.1.0
from __future__ import annotations
from typing import Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QTextEdit,
    QDialogButtonBox, QComboBox, QWidget, QMessageBox
)

from todoapp.models.types import Priority
from todoapp.services.priority_classifier import (
    PRIORITY_LABELS, from_ordinal, hex_for, to_ordinal
)
from todoapp.ui.window_mode import lock_dialog_fixed

# first entry of the priority combo
DEFAULT_PRIORITY = Priority.LOW


def removal_prompt(item_title: str) -> Tuple[str, str]:
    """(window title, question) for the edit form's delete confirmation."""
    return (
        f"Delete '{item_title}'?",
        f"Are you sure you want to remove '{item_title}'?",
    )


class TodoEditorDialog(QDialog):
    """
    Add / edit form. values() returns (title, description, priority_label)
    exactly as typed; validation happens in the store.

    With allow_delete=True the form also offers Delete. After a confirmed
    delete the dialog closes rejected and delete_requested is True.
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        title: str = "Add",
        item_title: str = "",
        description: str = "",
        priority: Priority = DEFAULT_PRIORITY,
        allow_delete: bool = False,
    ):
        super().__init__(parent)
        self.setWindowTitle(title)
        self._item_title = item_title
        self._delete_requested = False

        self._title = QLineEdit(item_title)
        self._title.setPlaceholderText("Title")

        self._desc = QTextEdit()
        self._desc.setAcceptRichText(False)
        self._desc.setPlaceholderText("Description")
        self._desc.setPlainText(description)

        self._cmb_priority = QComboBox()
        self._cmb_priority.addItems(PRIORITY_LABELS)
        self._cmb_priority.currentIndexChanged.connect(self._on_priority_changed)
        self._cmb_priority.setCurrentIndex(to_ordinal(priority))
        self._on_priority_changed(self._cmb_priority.currentIndex())

        form = QFormLayout()
        form.addRow("Title:", self._title)
        form.addRow("Priority:", self._cmb_priority)
        form.addRow("Description:", self._desc)

        btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)
        if allow_delete:
            btn_delete = btns.addButton("Delete", QDialogButtonBox.DestructiveRole)
            btn_delete.clicked.connect(self._on_delete_clicked)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(btns)

        lock_dialog_fixed(self)
        self._title.setFocus(Qt.OtherFocusReason)

    @property
    def delete_requested(self) -> bool:
        return self._delete_requested

    def _on_priority_changed(self, index: int) -> None:
        if index < 0:
            return
        color = hex_for(from_ordinal(index))
        self._cmb_priority.setStyleSheet(f"QComboBox {{ color: {color}; }}")

    def _on_delete_clicked(self) -> None:
        caption, question = removal_prompt(self._item_title)
        if QMessageBox.question(
            self, caption, question, QMessageBox.Yes | QMessageBox.No
        ) == QMessageBox.Yes:
            self._delete_requested = True
            self.reject()

    def values(self) -> Tuple[str, str, str]:
        return (
            self._title.text(),
            self._desc.toPlainText(),
            self._cmb_priority.currentText(),
        )
