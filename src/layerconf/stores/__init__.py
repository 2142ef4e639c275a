"""layerconf store adapters."""

from .env import EnvironmentStore
from .file import YamlFileStore
from .memory import InMemoryStore
from .models import (
    StoreError,
    StoreKeyNotFoundError,
    StoreReadError,
    StoreWriteError,
    StoreWriteUnsupportedError,
)
from .protocol import StoreAdapter

__all__ = [
    "EnvironmentStore",
    "InMemoryStore",
    "StoreAdapter",
    "StoreError",
    "StoreKeyNotFoundError",
    "StoreReadError",
    "StoreWriteError",
    "StoreWriteUnsupportedError",
    "YamlFileStore",
]
