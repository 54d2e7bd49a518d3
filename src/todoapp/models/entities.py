# Rev 0.1.0
"""Lightweight entities for the todo_items table"""
from __future__ import annotations
from dataclasses import dataclass

from .types import Priority

UNASSIGNED_ID = 0


@dataclass(frozen=True)
class TodoItem:
    id: int
    title: str
    description: str
    priority: Priority = Priority.LOW

    @property
    def is_new(self) -> bool:
        return self.id == UNASSIGNED_ID

    def same_content(self, other: "TodoItem") -> bool:
        return (
            self.title == other.title
            and self.description == other.description
            and self.priority == other.priority
        )
