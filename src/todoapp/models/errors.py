# Rev 0.1.0
"""Error taxonomy surfaced to the UI layer.

None of these are fatal; the viewmodel turns them into a transient
status message and the store never republishes after one.
"""
from __future__ import annotations


class TodoError(Exception):
    """Base class for all todoapp errors."""


class ValidationFailed(TodoError, ValueError):
    """Empty title or description. Nothing was mutated."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields


class UnknownPriority(ValidationFailed):
    def __init__(self, label: str):
        super().__init__(f"Unknown priority label: {label!r}", ("priority",))
        self.label = label


class NotFound(TodoError, LookupError):
    def __init__(self, item_id: int):
        super().__init__(f"No to-do item with id {item_id}")
        self.item_id = item_id


class PersistenceFailure(TodoError, RuntimeError):
    """Backend I/O error. The mutation is considered not applied."""


class DuplicateId(TodoError, ValueError):
    """A record with this explicit id already exists; nothing was written."""

    def __init__(self, item_id: int):
        super().__init__(f"A to-do item with id {item_id} already exists")
        self.item_id = item_id
