"""Resolution engine: cache, ordered stores and type conversion behind get/set."""

from __future__ import annotations

import copy
import time
from collections.abc import Callable, Sequence
from datetime import timedelta
from typing import Literal

from result import is_ok

from layerconf.common import create_logger
from layerconf.constants import DEFAULT_CACHE_TIMEOUT_SECONDS
from layerconf.options import OptionDescriptor, TypeConverter
from layerconf.stores import StoreAdapter, StoreKeyNotFoundError, StoreWriteUnsupportedError

from .cache import ValueCache, normalize_timeout
from .diagnostics import DiagnosticCallback, StoreInteraction, StoreOutcome
from .models import ResolvedValue, WriteResult

logger = create_logger("engine")


class ResolutionEngine:
    """Resolve option values from an ordered, immutable list of stores.

    The first store is the highest priority for reads, and the first store
    that accepts a write receives it. Store misses and store failures never
    escape: a failing store is reported and resolution falls through to the
    next one. Only ``ConversionError`` reaches the caller.
    """

    def __init__(
        self,
        stores: Sequence[StoreAdapter],
        *,
        cache_timeout: timedelta | float = DEFAULT_CACHE_TIMEOUT_SECONDS,
        converter: TypeConverter | None = None,
        on_interaction: DiagnosticCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._stores: tuple[StoreAdapter, ...] = tuple(stores)
        self._writable: tuple[bool, ...] = tuple(bool(store.writable) for store in self._stores)
        self._cache_timeout = normalize_timeout(cache_timeout)
        self._converter = converter or TypeConverter()
        self._on_interaction = on_interaction
        self._clock = clock
        self._cache = ValueCache()

    @property
    def stores(self) -> tuple[StoreAdapter, ...]:
        return self._stores

    @property
    def cache_timeout(self) -> timedelta:
        return self._cache_timeout

    @property
    def caching_enabled(self) -> bool:
        return self._cache_timeout > timedelta(0)

    @property
    def cache(self) -> ValueCache:
        return self._cache

    @property
    def converter(self) -> TypeConverter:
        return self._converter

    def get[T](self, descriptor: OptionDescriptor[T]) -> T:
        return self.resolve(descriptor).value

    def resolve[T](self, descriptor: OptionDescriptor[T]) -> ResolvedValue[T]:
        name = descriptor.name
        with self._cache.lock_for(name):
            if self.caching_enabled:
                entry = self._cache.get(name, self._clock())
                if entry is not None:
                    logger.debug("Cache hit", option=name, source_index=entry.source_index)
                    return ResolvedValue(
                        value=entry.value,
                        found=entry.source_index is not None,
                        source_index=entry.source_index,
                        cached=True,
                    )

            logger.debug("Cache miss", option=name)
            lookup = self._read_stores(name)
            if lookup is None:
                if descriptor.has_default:
                    # Callers get their own copy so mutating a result never alters the declaration
                    value = copy.copy(descriptor.default)
                else:
                    value = self._converter.zero_value(descriptor)
                source_index = None
                logger.debug("Option not found in any store", option=name, has_default=descriptor.has_default)
            else:
                source_index, raw = lookup
                value = self._converter.parse(descriptor, raw)

            if self.caching_enabled:
                self._cache.put(
                    name,
                    value,
                    source_index=source_index,
                    expires_at=self._clock() + self._cache_timeout.total_seconds(),
                )

            return ResolvedValue(value=value, found=source_index is not None, source_index=source_index)

    def set[T](self, descriptor: OptionDescriptor[T], value: T) -> WriteResult:
        name = descriptor.name
        raw = self._converter.format(descriptor, value)

        with self._cache.lock_for(name):
            for index, store in enumerate(self._stores):
                if not self._writable[index]:
                    self._report(name, index, store, "write", StoreOutcome.SKIPPED, message="read-only store")
                    continue

                if self._write_store(name, index, store, raw):
                    if self.caching_enabled:
                        self._cache.put(
                            name,
                            value,
                            source_index=index,
                            expires_at=self._clock() + self._cache_timeout.total_seconds(),
                        )
                    logger.debug("Option written", option=name, store=store.name, store_index=index)
                    return WriteResult(applied=True, source_index=index, store_name=store.name)

        logger.warning("No store accepted write", option=name, stores=len(self._stores))
        return WriteResult(applied=False)

    def invalidate(self, name: str | None = None) -> None:
        """Drop the cached value of one option, or of every option when name is None."""
        if name is None:
            self._cache.clear()
            return
        with self._cache.lock_for(name):
            self._cache.invalidate(name)

    def _read_stores(self, name: str) -> tuple[int, object] | None:
        for index, store in enumerate(self._stores):
            started = time.perf_counter()
            try:
                result = store.read(name)
            except Exception as exc:
                logger.opt(exception=exc).warning("Store read raised", option=name, store=store.name)
                self._report(name, index, store, "read", StoreOutcome.ERROR, started, str(exc))
                continue

            if is_ok(result):
                self._report(name, index, store, "read", StoreOutcome.PRESENT, started)
                return index, result.ok_value

            error = result.err_value
            if isinstance(error, StoreKeyNotFoundError):
                self._report(name, index, store, "read", StoreOutcome.ABSENT, started)
                continue

            logger.warning("Store read failed", option=name, store=store.name, error=error.message)
            self._report(name, index, store, "read", StoreOutcome.ERROR, started, error.message)

        return None

    def _write_store(self, name: str, index: int, store: StoreAdapter, raw: object) -> bool:
        started = time.perf_counter()
        try:
            result = store.write(name, raw)
        except Exception as exc:
            logger.opt(exception=exc).warning("Store write raised", option=name, store=store.name)
            self._report(name, index, store, "write", StoreOutcome.ERROR, started, str(exc))
            return False

        if is_ok(result):
            self._report(name, index, store, "write", StoreOutcome.WRITTEN, started)
            return True

        error = result.err_value
        if isinstance(error, StoreWriteUnsupportedError):
            self._report(name, index, store, "write", StoreOutcome.UNSUPPORTED, started, error.message)
        else:
            logger.warning("Store write failed", option=name, store=store.name, error=error.message)
            self._report(name, index, store, "write", StoreOutcome.ERROR, started, error.message)
        return False

    def _report(
        self,
        name: str,
        index: int,
        store: StoreAdapter,
        operation: Literal["read", "write"],
        outcome: StoreOutcome,
        started: float | None = None,
        message: str | None = None,
    ) -> None:
        if self._on_interaction is None:
            return

        elapsed = max(time.perf_counter() - started, 0.0) if started is not None else 0.0
        interaction = StoreInteraction(
            option_name=name,
            store_index=index,
            store_name=store.name,
            operation=operation,
            outcome=outcome,
            elapsed=elapsed,
            message=message,
        )
        try:
            self._on_interaction(interaction)
        except Exception as exc:
            logger.opt(exception=exc).warning("Diagnostic callback raised", option=name, outcome=outcome.value)
