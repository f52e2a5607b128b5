# util/functions.py
from typing import Any, Mapping, Optional


def clip(text: str, max_chars: int = 50) -> str:
    """
    - Trim 'text' to at most `max_chars` characters for log lines.
    - Adds an ellipsis when trimming occurs.
    """
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


def dig(obj: Any, *path: str) -> Optional[Any]:
    """
    Walk nested mappings; returns None as soon as a hop is missing or not a mapping.
    dig(job, "results", "raw", "url")
    """
    cur = obj
    for key in path:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur


def non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None
