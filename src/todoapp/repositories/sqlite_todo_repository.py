# Rev 0.1.0
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple, Union

from todoapp.models.entities import TodoItem
from todoapp.models.errors import PersistenceFailure
from todoapp.models.types import Priority, SortOrder
from todoapp.utils.logging_setup import get_logger

log = get_logger("SQLiteTodoRepository")

_COLUMNS = "id, title, description, priority"

# LOW=0, MEDIUM=1, HIGH=2
_ORDINAL_SQL = "CASE priority WHEN 'LOW' THEN 0 WHEN 'MEDIUM' THEN 1 WHEN 'HIGH' THEN 2 END"


class SQLiteTodoRepository:
    """
    Durable table of to-do items keyed by integer id.
    Every sqlite3.Error is re-raised as PersistenceFailure.
    """

    def __init__(self, db_or_conn: Union[sqlite3.Connection, Any]):
        self._db_or_conn = db_or_conn

    # -------------------------
    # Connection handling
    # -------------------------
    def _conn(self) -> sqlite3.Connection:
        if isinstance(self._db_or_conn, sqlite3.Connection):
            return self._db_or_conn
        conn = getattr(self._db_or_conn, "conn", None)
        if isinstance(conn, sqlite3.Connection):
            return conn
        raise RuntimeError(
            "SQLiteTodoRepository: could not obtain sqlite3.Connection "
            "(expected .conn on wrapper, or a raw Connection)."
        )

    @contextmanager
    def _guard(self, action: str) -> Iterator[sqlite3.Connection]:
        try:
            yield self._conn()
        except sqlite3.Error as e:
            log.error("%s failed: %s", action, e)
            raise PersistenceFailure(f"{action} failed: {e}") from e

    @staticmethod
    def _row_to_item(row: Tuple) -> TodoItem:
        return TodoItem(
            id=int(row[0]),
            title=row[1],
            description=row[2],
            priority=Priority[row[3]],
        )

    # -------------------------
    # CRUD
    # -------------------------
    def insert(self, item: TodoItem) -> Optional[int]:
        """
        Insert `item`. A new id is assigned when item.id == 0, otherwise the
        given id is kept. Returns the row id, or None when a row with that
        id already exists (the insert is ignored).
        """
        with self._guard("insert") as con:
            if item.is_new:
                cur = con.execute(
                    "INSERT INTO todo_items(title, description, priority) VALUES (?, ?, ?)",
                    (item.title, item.description, item.priority.name),
                )
                return int(cur.lastrowid)
            cur = con.execute(
                "INSERT OR IGNORE INTO todo_items(id, title, description, priority) VALUES (?, ?, ?, ?)",
                (item.id, item.title, item.description, item.priority.name),
            )
            return item.id if cur.rowcount > 0 else None

    def update(self, item: TodoItem) -> bool:
        with self._guard("update") as con:
            cur = con.execute(
                "UPDATE todo_items SET title = ?, description = ?, priority = ? WHERE id = ?",
                (item.title, item.description, item.priority.name, item.id),
            )
            return cur.rowcount > 0

    def delete(self, item_id: int) -> bool:
        with self._guard("delete") as con:
            cur = con.execute("DELETE FROM todo_items WHERE id = ?", (item_id,))
            return cur.rowcount > 0

    def delete_all(self) -> int:
        with self._guard("delete_all") as con:
            cur = con.execute("DELETE FROM todo_items")
            return max(cur.rowcount, 0)

    def get(self, item_id: int) -> Optional[TodoItem]:
        with self._guard("get") as con:
            row = con.execute(
                f"SELECT {_COLUMNS} FROM todo_items WHERE id = ?", (item_id,)
            ).fetchone()
            return self._row_to_item(row) if row else None

    # -------------------------
    # Listings
    # -------------------------
    def list_all(self) -> List[TodoItem]:
        with self._guard("list_all") as con:
            rows = con.execute(f"SELECT {_COLUMNS} FROM todo_items ORDER BY id ASC").fetchall()
            return [self._row_to_item(r) for r in rows]

    def count(self) -> int:
        with self._guard("count") as con:
            row = con.execute("SELECT COUNT(1) FROM todo_items").fetchone()
            return int(row[0]) if row and row[0] is not None else 0

    def search(self, query: str) -> List[TodoItem]:
        """Substring match on title; LIKE wildcards in `query` are literal."""
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        with self._guard("search") as con:
            rows = con.execute(
                f"SELECT {_COLUMNS} FROM todo_items WHERE title LIKE ? ESCAPE '\\' ORDER BY id ASC",
                (f"%{escaped}%",),
            ).fetchall()
            return [self._row_to_item(r) for r in rows]

    def list_by_priority(self, order: SortOrder) -> List[TodoItem]:
        direction = "DESC" if order is SortOrder.DESCENDING else "ASC"
        with self._guard("list_by_priority") as con:
            rows = con.execute(
                f"SELECT {_COLUMNS} FROM todo_items ORDER BY {_ORDINAL_SQL} {direction}, id ASC"
            ).fetchall()
            return [self._row_to_item(r) for r in rows]
