from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pytest
from result import Err, Ok, Result

from layerconf.stores import (
    StoreError,
    StoreKeyNotFoundError,
    StoreReadError,
    StoreWriteError,
    StoreWriteUnsupportedError,
)


class RecordingStore:
    """In-memory store that records every call and can be told to misbehave."""

    def __init__(
        self,
        values: Mapping[str, object] | None = None,
        *,
        name: str = "store",
        writable: bool = True,
        read_error: bool = False,
        read_raises: bool = False,
        write_error: bool = False,
        write_unsupported: bool = False,
    ) -> None:
        self.values: dict[str, object] = dict(values or {})
        self.name = name
        self.writable = writable
        self.read_error = read_error
        self.read_raises = read_raises
        self.write_error = write_error
        self.write_unsupported = write_unsupported
        self.reads: list[str] = []
        self.writes: list[tuple[str, object]] = []

    def read(self, key: str) -> Result[object, StoreError]:
        self.reads.append(key)
        if self.read_raises:
            raise RuntimeError(f"{self.name} is down")
        if self.read_error:
            return Err(StoreReadError(store=self.name, key=key, message="backend unavailable"))
        if key not in self.values:
            return Err(StoreKeyNotFoundError(store=self.name, key=key, message="missing"))
        return Ok(self.values[key])

    def write(self, key: str, raw: object) -> Result[None, StoreError]:
        self.writes.append((key, raw))
        if self.write_unsupported:
            return Err(StoreWriteUnsupportedError(store=self.name, key=key, message="read-only"))
        if self.write_error:
            return Err(StoreWriteError(store=self.name, key=key, message="disk full"))
        self.values[key] = raw
        return Ok(None)


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def make_store() -> Callable[..., Any]:
    return RecordingStore


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
