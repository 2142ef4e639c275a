"""Resolution engine, value cache and store diagnostics."""

from .cache import CacheEntry, ValueCache, normalize_timeout
from .diagnostics import DiagnosticCallback, StoreInteraction, StoreOutcome
from .models import ResolvedValue, WriteResult
from .resolution import ResolutionEngine

__all__ = [
    "CacheEntry",
    "DiagnosticCallback",
    "ResolutionEngine",
    "ResolvedValue",
    "StoreInteraction",
    "StoreOutcome",
    "ValueCache",
    "WriteResult",
    "normalize_timeout",
]
