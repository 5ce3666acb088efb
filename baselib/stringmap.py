"""Helpers for using text strings as hash map keys."""

from __future__ import annotations

from typing import Any

from .hashmap import HashMap, HashMapEntry

__all__ = ["string_key", "string_map_insert", "string_map_find"]


def string_key(text: str | bytes) -> bytes:
    """Encode ``text`` as a NUL-terminated UTF-8 key."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return raw + b"\0"


def string_map_insert(map: HashMap, key: str | bytes, value: Any) -> HashMapEntry:
    """Insert ``value`` under the string ``key`` and return its entry."""
    return map.insert(string_key(key), value)


def string_map_find(map: HashMap, key: str | bytes) -> HashMapEntry | None:
    """Return the entry stored under the string ``key``, or ``None``."""
    return map.find(string_key(key))