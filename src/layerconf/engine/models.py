"""Results produced by the resolution engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolvedValue[T]:
    """Outcome of one resolution.

    ``found`` is False when the value came from the declared default or the
    type's zero value; ``source_index`` then is None.
    """

    value: T
    found: bool
    source_index: int | None
    cached: bool = False


@dataclass(frozen=True, slots=True)
class WriteResult:
    applied: bool
    source_index: int | None = None
    store_name: str | None = None
