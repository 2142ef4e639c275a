"""Store interaction diagnostics."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StoreOutcome(str, Enum):
    """Result of a single adapter interaction."""

    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"
    WRITTEN = "written"
    UNSUPPORTED = "unsupported"
    SKIPPED = "skipped"


class StoreInteraction(BaseModel):
    """One call (or skipped call) to a store adapter."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    option_name: str
    store_index: int
    store_name: str
    operation: Literal["read", "write"]
    outcome: StoreOutcome
    elapsed: float = Field(default=0.0, ge=0.0, description="Seconds spent inside the adapter call")
    message: str | None = None


type DiagnosticCallback = Callable[[StoreInteraction], None]
