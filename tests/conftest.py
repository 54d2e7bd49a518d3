# Rev 0.1.0

"""Pytest fixtures for todoapp"""
from __future__ import annotations
import pytest
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from todoapp.models.entities import TodoItem
from todoapp.models.types import Priority
from todoapp.repositories.db import Database
from todoapp.repositories.sqlite_todo_repository import SQLiteTodoRepository
from todoapp.services.record_store import RecordStore


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=tmp_path / "test.db")
    try:
        database.run_migrations()
        yield database
    finally:
        database.close()


@pytest.fixture()
def repo(db) -> SQLiteTodoRepository:
    return SQLiteTodoRepository(db)


@pytest.fixture()
def store(repo, qapp) -> RecordStore:
    return RecordStore(repo)


@pytest.fixture()
def seeded_store(store) -> RecordStore:
    store.insert_record(TodoItem(0, "A", "d1", Priority.LOW))
    store.insert_record(TodoItem(0, "B", "d2", Priority.HIGH))
    return store
