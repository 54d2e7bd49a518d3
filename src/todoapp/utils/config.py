# src/todoapp/utils/config.py
from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from todoapp.models.types import SortOrder
from .paths import config_dir

log = logging.getLogger(__name__)

SETTINGS_NAME = "settings.json"
_SORT_VALUES = tuple(order.value for order in SortOrder)

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 480,
        "height": 720,
    },
    "list": {
        # how long the undo bar stays up after a delete (Snackbar LENGTH_LONG)
        "undo_timeout_ms": 2750,
        "default_sort": None,   # None | "ascending" | "descending"
    },
}


def settings_file() -> Path:
    return config_dir() / SETTINGS_NAME


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _check_default_sort(settings: Dict[str, Any]) -> None:
    value = settings["list"].get("default_sort")
    if value is not None and value not in _SORT_VALUES:
        log.warning("Ignoring unknown list.default_sort %r", value)
        settings["list"]["default_sort"] = None


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            settings = _merge(_DEFAULTS, json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", path, e)
            return copy.deepcopy(_DEFAULTS)
        _check_default_sort(settings)
        return settings
    return copy.deepcopy(_DEFAULTS)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
