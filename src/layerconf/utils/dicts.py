"""Dictionary helpers used across layerconf."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

__all__ = ["MISSING_PATH", "get_path", "insert_path", "split_key"]


class _MissingPath:
    def __repr__(self) -> str:
        return "MISSING_PATH"


MISSING_PATH = _MissingPath()


def split_key(key: str, separator: str = ".") -> list[str]:
    """Split a dotted option key into non-empty path segments."""
    return [segment for segment in key.split(separator) if segment]


def get_path(data: Mapping[str, object], path: list[str]) -> object:
    """Walk nested mappings along path; return MISSING_PATH when any segment is absent."""
    cursor: object = data
    for segment in path:
        if not isinstance(cursor, Mapping) or segment not in cursor:
            return MISSING_PATH
        cursor = cursor[segment]
    return cursor


def insert_path(data: MutableMapping[str, object], path: list[str], value: object) -> None:
    """Set value at path, replacing non-mapping intermediates with fresh mappings."""
    if not path:
        raise ValueError("Path must contain at least one segment")

    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value
