"""Configuration container: declared options resolved through one engine."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import timedelta
from types import MappingProxyType
from typing import Any

from layerconf.engine import ResolutionEngine, ResolvedValue, WriteResult
from layerconf.options import OptionDescriptor
from layerconf.stores import StoreAdapter

from .errors import UnknownOptionError

type OptionRef[T] = OptionDescriptor[T] | str


class Option[T]:
    """Typed accessor bound to one declared option."""

    __slots__ = ("_container", "_descriptor")

    def __init__(self, container: ConfigContainer, descriptor: OptionDescriptor[T]) -> None:
        self._container = container
        self._descriptor = descriptor

    def __repr__(self) -> str:
        return f"Option({self._descriptor.name!r}, {self._descriptor.option_type.value})"

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def descriptor(self) -> OptionDescriptor[T]:
        return self._descriptor

    def get(self) -> T:
        return self._container.get(self._descriptor)

    def resolve(self) -> ResolvedValue[T]:
        return self._container.resolve(self._descriptor)

    def set(self, value: T) -> WriteResult:
        return self._container.set(self._descriptor, value)

    def invalidate(self) -> None:
        self._container.invalidate(self._descriptor.name)


class ConfigContainer:
    """Owns the declared options and the engine (and cache) that resolves them."""

    def __init__(self, engine: ResolutionEngine, options: Mapping[str, OptionDescriptor[Any]]) -> None:
        self._engine = engine
        self._options: Mapping[str, OptionDescriptor[Any]] = MappingProxyType(dict(options))

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    @property
    def options(self) -> Mapping[str, OptionDescriptor[Any]]:
        return self._options

    @property
    def stores(self) -> tuple[StoreAdapter, ...]:
        return self._engine.stores

    @property
    def cache_timeout(self) -> timedelta:
        return self._engine.cache_timeout

    @property
    def engine(self) -> ResolutionEngine:
        return self._engine

    def descriptor(self, name: str) -> OptionDescriptor[Any]:
        try:
            return self._options[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def option(self, name: str) -> Option[Any]:
        return Option(self, self.descriptor(name))

    def get[T](self, option: OptionRef[T]) -> T:
        return self._engine.get(self._lookup(option))

    def resolve[T](self, option: OptionRef[T]) -> ResolvedValue[T]:
        return self._engine.resolve(self._lookup(option))

    def set[T](self, option: OptionRef[T], value: T) -> WriteResult:
        return self._engine.set(self._lookup(option), value)

    def invalidate(self, name: str | None = None) -> None:
        if name is not None:
            self.descriptor(name)
        self._engine.invalidate(name)

    def snapshot(self) -> dict[str, Any]:
        """Resolve every declared option, in declaration order."""
        return {name: self._engine.get(descriptor) for name, descriptor in self._options.items()}

    def _lookup[T](self, option: OptionRef[T]) -> OptionDescriptor[T]:
        if isinstance(option, str):
            return self.descriptor(option)
        declared = self._options.get(option.name)
        if declared is None or declared != option:
            raise UnknownOptionError(option.name)
        return declared
