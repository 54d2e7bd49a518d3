# Rev 0.1.0
from __future__ import annotations

from todoapp.models.entities import TodoItem
from todoapp.models.errors import ValidationFailed


def is_valid(title: str, description: str) -> bool:
    # Raw emptiness only: whitespace-only strings pass.
    return len(title) > 0 and len(description) > 0


def require_valid(item: TodoItem) -> None:
    missing = tuple(
        name for name, value in (("title", item.title), ("description", item.description))
        if len(value) == 0
    )
    if missing:
        raise ValidationFailed("Please fill out all fields.", missing)
