# Rev 0.1.0
"""Priority label / ordinal / colour mapping.

Plain functions with no shared state, so the add and edit dialogs can
each use them without stepping on each other.
"""
from __future__ import annotations

from typing import Dict, List

from todoapp.models.errors import UnknownPriority
from todoapp.models.types import Priority
from todoapp.utils.logging_setup import get_logger

log = get_logger("priority")

_LABELS: Dict[Priority, str] = {
    Priority.HIGH: "High Priority",
    Priority.MEDIUM: "Medium Priority",
    Priority.LOW: "Low Priority",
}
_BY_LABEL: Dict[str, Priority] = {v: k for k, v in _LABELS.items()}

_ORDINALS: Dict[Priority, int] = {Priority.LOW: 0, Priority.MEDIUM: 1, Priority.HIGH: 2}
_BY_ORDINAL: Dict[int, Priority] = {v: k for k, v in _ORDINALS.items()}

_COLORS: Dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}
_HEX: Dict[str, str] = {"green": "#00C980", "yellow": "#FFC114", "red": "#FF4646"}

# Selector entries, index == ordinal
PRIORITY_LABELS: List[str] = [_LABELS[_BY_ORDINAL[i]] for i in range(len(_BY_ORDINAL))]


def parse_label(label: str, *, strict: bool = False) -> Priority:
    """
    Map a selector label to a Priority. Unrecognized labels fall back to
    LOW unless `strict` is set, in which case UnknownPriority is raised.
    """
    priority = _BY_LABEL.get(label)
    if priority is not None:
        return priority
    if strict:
        raise UnknownPriority(label)
    log.debug("Unrecognized priority label %r, defaulting to LOW", label)
    return Priority.LOW


def label_for(priority: Priority) -> str:
    return _LABELS[priority]


def to_ordinal(priority: Priority) -> int:
    return _ORDINALS[priority]


def from_ordinal(ordinal: int) -> Priority:
    try:
        return _BY_ORDINAL[int(ordinal)]
    except KeyError:
        raise ValueError(f"priority ordinal out of range: {ordinal}") from None


def color_for(priority: Priority) -> str:
    return _COLORS[priority]


def hex_for(priority: Priority) -> str:
    return _HEX[color_for(priority)]
