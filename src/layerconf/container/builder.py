"""Append-only configuration surface for containers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from enum import Enum
from typing import Any, Self

from layerconf.common import create_logger
from layerconf.engine import DiagnosticCallback, ResolutionEngine, normalize_timeout
from layerconf.options import MISSING, ConversionError, OptionDescriptor, OptionType, TypeConverter, ValueConverter
from layerconf.settings import get_settings
from layerconf.stores import StoreAdapter

from .container import ConfigContainer
from .errors import BuilderFinalizedError

logger = create_logger("builder")


class ContainerBuilder:
    """Collect stores, options and cache settings, then build a container.

    Stores are added at the lowest current priority: the first store added
    is consulted first on reads and offered writes first. Once ``build()``
    has been called the builder rejects further changes, so the store list a
    container resolves against never changes under it.
    """

    def __init__(
        self,
        *,
        cache_timeout: timedelta | float | None = None,
        converter: TypeConverter | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._stores: list[StoreAdapter] = []
        self._options: dict[str, OptionDescriptor[Any]] = {}
        self._cache_timeout = normalize_timeout(cache_timeout) if cache_timeout is not None else None
        self._converter = converter or TypeConverter()
        self._on_interaction: DiagnosticCallback | None = None
        self._clock = clock
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_store(self, store: StoreAdapter) -> Self:
        self._ensure_open()
        if not isinstance(store, StoreAdapter):
            raise TypeError(f"{type(store).__name__} does not implement the StoreAdapter protocol")
        self._stores.append(store)
        logger.debug("Store added", store=store.name, priority=len(self._stores) - 1, writable=store.writable)
        return self

    def set_cache_timeout(self, timeout: timedelta | float) -> Self:
        self._ensure_open()
        self._cache_timeout = normalize_timeout(timeout)
        return self

    def on_store_interaction(self, callback: DiagnosticCallback) -> Self:
        self._ensure_open()
        self._on_interaction = callback
        return self

    def declare(
        self,
        name: str,
        option_type: OptionType,
        *,
        default: Any = MISSING,
        converter: ValueConverter[Any] | None = None,
        enum_type: type[Enum] | None = None,
        item_type: OptionType = OptionType.STRING,
        delimiter: str = ",",
        description: str | None = None,
    ) -> OptionDescriptor[Any]:
        return self.add_option(
            OptionDescriptor(
                name=name,
                option_type=option_type,
                default=default,
                converter=converter,
                enum_type=enum_type,
                item_type=item_type,
                delimiter=delimiter,
                description=description,
            )
        )

    def add_option[T](self, descriptor: OptionDescriptor[T]) -> OptionDescriptor[T]:
        self._ensure_open()
        if descriptor.name in self._options:
            raise ValueError(f"Option '{descriptor.name}' is already declared")
        if descriptor.has_default:
            try:
                self._converter.format(descriptor, descriptor.default)  # type: ignore[arg-type]
            except ConversionError as exc:
                raise ValueError(
                    f"Option '{descriptor.name}': default {descriptor.default!r} "
                    f"is not a valid {descriptor.option_type.value}"
                ) from exc
        self._options[descriptor.name] = descriptor
        return descriptor

    def build(self) -> ConfigContainer:
        self._ensure_open()
        self._finalized = True

        cache_timeout = self._cache_timeout
        if cache_timeout is None:
            cache_timeout = normalize_timeout(get_settings().cache_timeout)

        engine_kwargs: dict[str, Any] = {}
        if self._clock is not None:
            engine_kwargs["clock"] = self._clock

        engine = ResolutionEngine(
            self._stores,
            cache_timeout=cache_timeout,
            converter=self._converter,
            on_interaction=self._on_interaction,
            **engine_kwargs,
        )
        logger.debug(
            "Container built",
            stores=[store.name for store in engine.stores],
            options=len(self._options),
            cache_timeout=cache_timeout.total_seconds(),
        )
        return ConfigContainer(engine, self._options)

    def _ensure_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("Container builder is already finalized")
