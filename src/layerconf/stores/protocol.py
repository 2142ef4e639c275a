"""Store adapter protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from result import Result

from .models import StoreError


@runtime_checkable
class StoreAdapter(Protocol):
    """Protocol for a named backend that supplies option values.

    ``writable`` is a static capability read once when a container is built;
    read-only stores are skipped on writes without being called.
    """

    @property
    def name(self) -> str: ...

    @property
    def writable(self) -> bool: ...

    def read(self, key: str) -> Result[object, StoreError]:
        """Read the raw value for key.

        Returns:
            Ok(raw) when the store holds the key.
            Err(StoreKeyNotFoundError) when it does not.
            Err(StoreError) for any other failure.
        """
        ...

    def write(self, key: str, raw: object) -> Result[None, StoreError]:
        """Persist the raw value for key.

        Returns:
            Ok(None) when the value was stored.
            Err(StoreWriteUnsupportedError) when the store does not accept writes.
            Err(StoreError) for any other failure.
        """
        ...
