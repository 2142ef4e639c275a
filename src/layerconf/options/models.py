"""Option declaration models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final


class OptionType(str, Enum):
    """Semantic type tags an option can be declared with."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ENUM = "enum"
    LIST = "list"
    CUSTOM = "custom"


SCALAR_TYPES: Final = frozenset({OptionType.STRING, OptionType.INTEGER, OptionType.FLOAT, OptionType.BOOLEAN})


class _Missing:
    """Marker for options declared without a default."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class ConversionError(ValueError):
    """A raw store value (or a value being written) does not fit the declared type."""

    def __init__(
        self,
        option_name: str,
        raw_value: object,
        target_type: OptionType,
        reason: str | None = None,
    ) -> None:
        self.option_name = option_name
        self.raw_value = raw_value
        self.target_type = target_type
        self.reason = reason
        message = f"Option '{option_name}': cannot convert {raw_value!r} to {target_type.value}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValueConverter[T]:
    """Custom parse/format pair overriding the canonical converter of a type."""

    parse: Callable[[object], T]
    format: Callable[[T], object]


@dataclass(frozen=True, kw_only=True)
class OptionDescriptor[T]:
    """Static metadata for one configuration option.

    Attributes:
        name: Key looked up in every store; unique within a container
        option_type: Declared semantic type
        default: Value used when no store supplies the key
        converter: Optional parse/format pair that replaces the canonical one
        enum_type: Enum class for ``OptionType.ENUM`` options
        item_type: Element type for ``OptionType.LIST`` options
        delimiter: Separator used when list values are stored as text
        description: Human-readable note shown by the CLI and diagnostics
    """

    name: str
    option_type: OptionType
    default: T | _Missing = MISSING
    converter: ValueConverter[T] | None = None
    enum_type: type[Enum] | None = None
    item_type: OptionType = OptionType.STRING
    delimiter: str = ","
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Option name must be a non-empty string")
        if self.option_type is OptionType.ENUM and self.enum_type is None:
            raise ValueError(f"Option '{self.name}': enum options require enum_type")
        if self.option_type is OptionType.CUSTOM and self.converter is None:
            raise ValueError(f"Option '{self.name}': custom options require a converter")
        if self.option_type is OptionType.LIST:
            if self.item_type not in SCALAR_TYPES:
                raise ValueError(
                    f"Option '{self.name}': list items must be one of "
                    f"{sorted(t.value for t in SCALAR_TYPES)}, got {self.item_type.value}"
                )
            if not self.delimiter:
                raise ValueError(f"Option '{self.name}': list delimiter must not be empty")

    @property
    def has_default(self) -> bool:
        return not isinstance(self.default, _Missing)
