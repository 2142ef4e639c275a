"""In-memory store implementation."""

from __future__ import annotations

from collections.abc import Mapping

from result import Err, Ok, Result

from .models import StoreError, StoreKeyNotFoundError, StoreWriteUnsupportedError


class InMemoryStore:
    """Dict-backed implementation of the StoreAdapter protocol."""

    def __init__(
        self,
        values: Mapping[str, object] | None = None,
        *,
        name: str = "memory",
        writable: bool = True,
    ) -> None:
        self._values: dict[str, object] = dict(values or {})
        self._name = name
        self._writable = writable

    @property
    def name(self) -> str:
        return self._name

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def values(self) -> dict[str, object]:
        return dict(self._values)

    def read(self, key: str) -> Result[object, StoreError]:
        if key not in self._values:
            return Err(
                StoreKeyNotFoundError(
                    store=self._name,
                    key=key,
                    message=f"Key '{key}' not found in store '{self._name}'",
                )
            )
        return Ok(self._values[key])

    def write(self, key: str, raw: object) -> Result[None, StoreError]:
        if not self._writable:
            return Err(
                StoreWriteUnsupportedError(
                    store=self._name,
                    key=key,
                    message=f"Store '{self._name}' is read-only",
                )
            )
        self._values[key] = raw
        return Ok(None)

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
