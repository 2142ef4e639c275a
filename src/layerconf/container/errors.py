"""Container misuse errors."""

from __future__ import annotations


class BuilderFinalizedError(RuntimeError):
    """Raised when a builder is modified after build()."""


class UnknownOptionError(KeyError):
    """Raised when an option is not declared in the container."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Option '{self.name}' is not declared in this container"
