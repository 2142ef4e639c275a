"""Store error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StoreError(BaseModel):
    """Base store error."""

    model_config = ConfigDict(extra="forbid")

    store: str
    message: str


class StoreKeyNotFoundError(StoreError):
    """Key not present in the store; resolution moves on to the next store."""

    key: str


class StoreReadError(StoreError):
    """Store failed while reading a key."""

    key: str


class StoreWriteError(StoreError):
    """Store failed while writing a key."""

    key: str


class StoreWriteUnsupportedError(StoreError):
    """Store does not accept writes."""

    key: str
