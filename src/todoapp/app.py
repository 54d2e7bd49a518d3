# Rev 0.1.0

# src/todoapp/app.py
from __future__ import annotations
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from todoapp.repositories.db import Database
from todoapp.repositories.sqlite_todo_repository import SQLiteTodoRepository
from todoapp.services.record_store import RecordStore
from todoapp.viewmodels.todo_list_viewmodel import TodoListViewModel
from todoapp.ui.main_window import MainWindow
from todoapp.utils.config import load_settings
from todoapp.utils.logging_setup import setup_logging, get_logger
from todoapp.utils.paths import db_path, ensure_dirs


def build_store(path=None) -> RecordStore:
    db = Database(path if path is not None else db_path())
    db.run_migrations()
    return RecordStore(SQLiteTodoRepository(db))


def main() -> int:
    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName("todoapp")

    ensure_dirs()
    logfile = setup_logging()
    log = get_logger("app")
    log.info("Starting; log file %s", logfile)

    # --- DI wiring ---
    store = build_store()
    vm = TodoListViewModel(store)

    # --- UI ---
    win = MainWindow(viewmodel=vm, settings=load_settings())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
