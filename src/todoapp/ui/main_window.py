# Rev 0.1.0
# todoapp main window: list, search, sort menu, undo bar

from __future__ import annotations

from typing import Any, Dict

from PySide6.QtCore import Qt, QTimer, QModelIndex
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit,
    QListView, QLabel, QStackedWidget, QMessageBox, QDialog, QAbstractItemView
)

from todoapp.models.types import SortOrder
from todoapp.services.priority_classifier import label_for
from todoapp.ui.todo_editor_dialog import TodoEditorDialog
from todoapp.ui.todo_list_model import TodoListModel
from todoapp.viewmodels.todo_list_viewmodel import TodoListViewModel
from todoapp.utils.config import save_settings
from todoapp.utils.logging_setup import get_logger

log = get_logger("MainWindow")

MESSAGE_MS = 2000


class MainWindow(QMainWindow):
    def __init__(self, *, viewmodel: TodoListViewModel, settings: Dict[str, Any], parent=None):
        super().__init__(parent)
        self._vm = viewmodel
        self._settings = settings
        self._undo_ms = int(settings["list"]["undo_timeout_ms"])

        self.setWindowTitle("To-Do List")
        win = settings["main_window"]
        self.resize(int(win["width"]), int(win["height"]))

        # ---- list + empty placeholder ----
        self._model = TodoListModel(self)
        self._list = QListView(self)
        self._list.setModel(self._model)
        self._list.setSelectionMode(QAbstractItemView.SingleSelection)
        self._list.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._list.setAlternatingRowColors(True)
        self._list.doubleClicked.connect(self._on_item_double_clicked)

        self._empty = QLabel("No Data", self)
        self._empty.setAlignment(Qt.AlignCenter)

        self._stack = QStackedWidget(self)
        self._stack.addWidget(self._list)
        self._stack.addWidget(self._empty)

        # ---- top bar ----
        self._search = QLineEdit(self)
        self._search.setPlaceholderText("Search…")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self._vm.search)

        self._btn_add = QPushButton("Add", self)
        self._btn_add.clicked.connect(self._on_add_clicked)

        top_bar = QHBoxLayout()
        top_bar.addWidget(self._search, 1)
        top_bar.addWidget(self._btn_add)

        # ---- undo bar ----
        self._undo_bar = QWidget(self)
        self._undo_label = QLabel(self._undo_bar)
        self._btn_undo = QPushButton("Undo", self._undo_bar)
        self._btn_undo.clicked.connect(self._on_undo_clicked)
        ub = QHBoxLayout(self._undo_bar)
        ub.setContentsMargins(6, 2, 6, 2)
        ub.addWidget(self._undo_label, 1)
        ub.addWidget(self._btn_undo)
        self._undo_bar.setVisible(False)

        self._undo_timer = QTimer(self)
        self._undo_timer.setSingleShot(True)
        self._undo_timer.timeout.connect(self._vm.discard_undo)

        # ---- central ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.addLayout(top_bar)
        v.addWidget(self._stack, 1)
        v.addWidget(self._undo_bar)
        self.setCentralWidget(central)

        self._build_menu()

        # ---- VM signals ----
        self._vm.editsReady.connect(self._model.apply_edits)
        self._vm.emptyChanged.connect(self._on_empty_changed)
        self._vm.undoAvailable.connect(self._on_undo_available)
        self._vm.errorOccurred.connect(self._show_message)
        self._vm.messagePosted.connect(self._show_message)

        self._vm.start()
        default_sort = settings["list"].get("default_sort")
        if default_sort:
            self._vm.sort(SortOrder(default_sort))

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu("&List")

        act_high = QAction("Sort: High Priority first", self)
        act_high.triggered.connect(lambda: self._vm.sort(SortOrder.DESCENDING))
        act_low = QAction("Sort: Low Priority first", self)
        act_low.triggered.connect(lambda: self._vm.sort(SortOrder.ASCENDING))
        act_all = QAction("Show all", self)
        act_all.triggered.connect(self._on_show_all)

        act_delete = QAction("Delete selected", self)
        act_delete.setShortcut(QKeySequence.Delete)
        act_delete.triggered.connect(self._on_delete_selected)
        act_delete_all = QAction("Delete everything…", self)
        act_delete_all.triggered.connect(self._confirm_delete_all)

        for act in (act_high, act_low, act_all):
            menu.addAction(act)
        menu.addSeparator()
        menu.addAction(act_delete)
        menu.addAction(act_delete_all)

    # ---------- VM → view ----------
    def _on_empty_changed(self, empty: bool) -> None:
        self._stack.setCurrentWidget(self._empty if empty else self._list)

    def _on_undo_available(self, available: bool) -> None:
        if available:
            pending = self._vm.undo_pending
            self._undo_label.setText(f"Deleted '{pending.title}'" if pending else "")
            self._undo_bar.setVisible(True)
            self._undo_timer.start(self._undo_ms)
        else:
            self._undo_timer.stop()
            self._undo_bar.setVisible(False)

    def _show_message(self, text: str) -> None:
        self.statusBar().showMessage(text, MESSAGE_MS)

    # ---------- actions ----------
    def _on_show_all(self) -> None:
        self._search.blockSignals(True)
        self._search.clear()
        self._search.blockSignals(False)
        self._vm.show_all()

    def _on_add_clicked(self) -> None:
        dlg = TodoEditorDialog(self, title="Add")
        while dlg.exec() == int(QDialog.DialogCode.Accepted):
            title, desc, priority_label = dlg.values()
            if self._vm.add(title, desc, priority_label) is not None:
                return

    def _on_item_double_clicked(self, index: QModelIndex) -> None:
        item = self._model.item_at(index.row())
        if item is None:
            return
        dlg = TodoEditorDialog(
            self,
            title="Update",
            item_title=item.title,
            description=item.description,
            priority=item.priority,
            allow_delete=True,
        )
        while dlg.exec() == int(QDialog.DialogCode.Accepted):
            title, desc, priority_label = dlg.values()
            if self._vm.update(item.id, title, desc, priority_label):
                return
        if dlg.delete_requested:
            self._vm.remove(item.id)

    def _on_delete_selected(self) -> None:
        idxs = self._list.selectionModel().selectedIndexes()
        if not idxs:
            return
        item = self._model.item_at(idxs[0].row())
        if item is not None:
            log.debug("Delete requested for %s (%s)", item.id, label_for(item.priority))
            self._vm.delete(item.id)

    def _on_undo_clicked(self) -> None:
        self._vm.undo_delete()

    def _confirm_delete_all(self) -> None:
        if QMessageBox.question(
            self, "Delete everything?", "Are you sure you want to remove everything?",
            QMessageBox.Yes | QMessageBox.No
        ) == QMessageBox.Yes:
            self._vm.delete_all()

    def closeEvent(self, ev):
        self._vm.stop()
        self._settings["main_window"].update(width=self.width(), height=self.height())
        try:
            save_settings(self._settings)
        except OSError as e:
            log.warning("Could not save settings: %s", e)
        super().closeEvent(ev)
