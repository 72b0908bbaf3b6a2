
from __future__ import annotations
import logging
import os

_TRUTHY = ("1", "true", "True", "yes")

def _flag(name: str, default: bool = False) -> bool:
    v = os.environ.get(name)
    if v is None:
        return default
    return v in _TRUTHY

def sort_output() -> bool:
    return _flag("WFCOUNT_SORT")

def json_output() -> bool:
    return _flag("WFCOUNT_JSON")

def log_level() -> int:
    name = os.environ.get("WFCOUNT_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
