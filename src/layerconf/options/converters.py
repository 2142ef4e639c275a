"""Canonical conversions between raw store values and declared option types.

Stores hand back whatever their format produces: text from environment
variables, numbers and booleans from YAML, lists from JSON-like payloads.
Each adapter accepts those primitives, and formats typed values back to text
for writing.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Final, Protocol

from layerconf.common import create_logger

from .models import ConversionError, OptionDescriptor, OptionType

logger = create_logger("converter")

_TRUE_TOKENS: Final = frozenset({"true", "1", "yes", "on"})
_FALSE_TOKENS: Final = frozenset({"false", "0", "no", "off"})


class TypeAdapter(Protocol):
    """Parse raw values into a Python type and format them back.

    Implementations raise ``TypeError`` or ``ValueError`` on bad input.
    """

    def parse(self, raw: object) -> Any: ...

    def format(self, value: Any) -> str: ...

    def zero(self) -> Any: ...


class StringAdapter:
    def parse(self, raw: object) -> str:
        if isinstance(raw, str):
            return raw
        if isinstance(raw, bool):
            return "true" if raw else "false"
        if isinstance(raw, int | float):
            return str(raw)
        raise TypeError(f"expected text, got {type(raw).__name__}")

    def format(self, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError("expected str")
        return value

    def zero(self) -> str:
        return ""


class IntegerAdapter:
    def parse(self, raw: object) -> int:
        if isinstance(raw, bool):
            raise TypeError("booleans are not integers")
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ValueError("value has a fractional part")
            return int(raw)
        if isinstance(raw, str):
            return int(raw.strip())
        raise TypeError(f"expected integer, got {type(raw).__name__}")

    def format(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("expected int")
        return str(value)

    def zero(self) -> int:
        return 0


class FloatAdapter:
    def parse(self, raw: object) -> float:
        if isinstance(raw, bool):
            raise TypeError("booleans are not numbers")
        if isinstance(raw, int | float):
            return float(raw)
        if isinstance(raw, str):
            # float() ignores the process locale, so "1.5" parses everywhere
            return float(raw.strip())
        raise TypeError(f"expected number, got {type(raw).__name__}")

    def format(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError("expected number")
        return repr(float(value))

    def zero(self) -> float:
        return 0.0


class BooleanAdapter:
    def parse(self, raw: object) -> bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, int) and raw in (0, 1):
            return bool(raw)
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in _TRUE_TOKENS:
                return True
            if lowered in _FALSE_TOKENS:
                return False
        raise ValueError(f"invalid boolean: {raw!r}")

    def format(self, value: Any) -> str:
        if not isinstance(value, bool):
            raise TypeError("expected bool")
        return "true" if value else "false"

    def zero(self) -> bool:
        return False


SCALAR_ADAPTERS: dict[OptionType, TypeAdapter] = {
    OptionType.STRING: StringAdapter(),
    OptionType.INTEGER: IntegerAdapter(),
    OptionType.FLOAT: FloatAdapter(),
    OptionType.BOOLEAN: BooleanAdapter(),
}


class TypeConverter:
    """Convert values for a descriptor, preferring its custom converter."""

    def __init__(self, adapters: dict[OptionType, TypeAdapter] | None = None) -> None:
        self._adapters = dict(SCALAR_ADAPTERS if adapters is None else adapters)

    def parse[T](self, descriptor: OptionDescriptor[T], raw: object) -> T:
        # Custom converters may raise anything; every failure leaves as ConversionError
        handled = Exception if descriptor.converter is not None else (TypeError, ValueError, KeyError)
        try:
            if descriptor.converter is not None:
                return descriptor.converter.parse(raw)
            return self._parse_canonical(descriptor, raw)
        except ConversionError:
            raise
        except handled as exc:
            logger.error(
                "Conversion failed",
                option=descriptor.name,
                target_type=descriptor.option_type.value,
                error=str(exc),
            )
            raise ConversionError(descriptor.name, raw, descriptor.option_type, str(exc)) from exc

    def format[T](self, descriptor: OptionDescriptor[T], value: T) -> object:
        handled = Exception if descriptor.converter is not None else (TypeError, ValueError, KeyError)
        try:
            if descriptor.converter is not None:
                return descriptor.converter.format(value)
            return self._format_canonical(descriptor, value)
        except ConversionError:
            raise
        except handled as exc:
            raise ConversionError(descriptor.name, value, descriptor.option_type, str(exc)) from exc

    def zero_value(self, descriptor: OptionDescriptor[Any]) -> Any:
        """Value returned when nothing supplies an option that has no default."""
        match descriptor.option_type:
            case OptionType.LIST:
                return []
            case OptionType.ENUM:
                assert descriptor.enum_type is not None
                return next(iter(descriptor.enum_type))
            case OptionType.CUSTOM:
                return None
            case option_type:
                return self._adapters[option_type].zero()

    def _parse_canonical(self, descriptor: OptionDescriptor[Any], raw: object) -> Any:
        match descriptor.option_type:
            case OptionType.ENUM:
                assert descriptor.enum_type is not None
                return _parse_enum(descriptor.enum_type, raw)
            case OptionType.LIST:
                adapter = self._adapters[descriptor.item_type]
                return [adapter.parse(item) for item in _split_items(raw, descriptor.delimiter)]
            case OptionType.CUSTOM:
                raise TypeError("custom options have no canonical converter")
            case option_type:
                return self._adapters[option_type].parse(raw)

    def _format_canonical(self, descriptor: OptionDescriptor[Any], value: Any) -> str:
        match descriptor.option_type:
            case OptionType.ENUM:
                if not isinstance(value, descriptor.enum_type):  # type: ignore[arg-type]
                    raise TypeError(f"expected {descriptor.enum_type.__name__}")  # type: ignore[union-attr]
                return value.name
            case OptionType.LIST:
                if isinstance(value, str) or not isinstance(value, Sequence):
                    raise TypeError("expected a sequence")
                adapter = self._adapters[descriptor.item_type]
                return descriptor.delimiter.join(adapter.format(item) for item in value)
            case OptionType.CUSTOM:
                raise TypeError("custom options have no canonical converter")
            case option_type:
                return self._adapters[option_type].format(value)


def _parse_enum(enum_type: type[Enum], raw: object) -> Enum:
    if isinstance(raw, enum_type):
        return raw
    if isinstance(raw, str):
        name = raw.strip()
        if name in enum_type.__members__:
            return enum_type[name]
        folded = {member_name.lower(): member for member_name, member in enum_type.__members__.items()}
        if name.lower() in folded:
            return folded[name.lower()]
    # Falls through to value lookup, which raises ValueError for unknown input
    return enum_type(raw)


def _split_items(raw: object, delimiter: str) -> list[object]:
    if isinstance(raw, str):
        return [item.strip() for item in raw.split(delimiter) if item.strip()]
    if isinstance(raw, Sequence):
        return list(raw)
    raise TypeError(f"expected a delimited string or a sequence, got {type(raw).__name__}")
