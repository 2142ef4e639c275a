"""Environment variable store implementation."""

from __future__ import annotations

import os
from collections.abc import Mapping

from result import Err, Ok, Result

from .models import StoreError, StoreKeyNotFoundError, StoreWriteUnsupportedError


class EnvironmentStore:
    """Read-only store backed by process environment variables.

    Option keys map to variable names by upper-casing, turning ``.`` into
    ``__`` and ``-`` into ``_``, then adding the prefix: with prefix ``APP_``
    the key ``db.pool-size`` reads ``APP_DB__POOL_SIZE``.
    """

    def __init__(
        self,
        prefix: str = "",
        *,
        name: str = "env",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._prefix = prefix
        self._name = name
        self._environ = environ

    @property
    def name(self) -> str:
        return self._name

    @property
    def writable(self) -> bool:
        return False

    def variable_name(self, key: str) -> str:
        segments = [segment.replace("-", "_").upper() for segment in key.split(".") if segment]
        return f"{self._prefix}{'__'.join(segments)}"

    def read(self, key: str) -> Result[object, StoreError]:
        environ = os.environ if self._environ is None else self._environ
        variable = self.variable_name(key)
        if variable not in environ:
            return Err(
                StoreKeyNotFoundError(
                    store=self._name,
                    key=key,
                    message=f"Environment variable '{variable}' is not set",
                )
            )
        return Ok(environ[variable])

    def write(self, key: str, raw: object) -> Result[None, StoreError]:
        return Err(
            StoreWriteUnsupportedError(
                store=self._name,
                key=key,
                message="Environment variables are read-only",
            )
        )
