"""Option declarations and type conversion."""

from .converters import TypeAdapter, TypeConverter
from .models import MISSING, SCALAR_TYPES, ConversionError, OptionDescriptor, OptionType, ValueConverter

__all__ = [
    "MISSING",
    "SCALAR_TYPES",
    "ConversionError",
    "OptionDescriptor",
    "OptionType",
    "TypeAdapter",
    "TypeConverter",
    "ValueConverter",
]
