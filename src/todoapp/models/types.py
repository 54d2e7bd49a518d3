# todoapp type definitions
# Rev 0.1.0

from __future__ import annotations
from enum import Enum


class Priority(Enum):
    """Priority tag of a to-do item. Stored by name (LOW/MEDIUM/HIGH)."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SortOrder(Enum):
    ASCENDING = "ascending"     # LOW -> HIGH
    DESCENDING = "descending"   # HIGH -> LOW
