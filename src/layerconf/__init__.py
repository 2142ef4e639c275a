"""layerconf - typed configuration options resolved from layered stores.

By default, layerconf's internal logging is disabled when used as a library.
Library users can enable logging by calling layerconf.enable_logging().
"""

from layerconf.common import disable_library_logging, enable_library_logging
from layerconf.container import ConfigContainer, ContainerBuilder, Option
from layerconf.engine import ResolutionEngine, ResolvedValue, StoreInteraction, StoreOutcome, WriteResult
from layerconf.options import ConversionError, OptionDescriptor, OptionType, ValueConverter
from layerconf.stores import EnvironmentStore, InMemoryStore, StoreAdapter, YamlFileStore

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ConfigContainer",
    "ContainerBuilder",
    "ConversionError",
    "EnvironmentStore",
    "InMemoryStore",
    "Option",
    "OptionDescriptor",
    "OptionType",
    "ResolutionEngine",
    "ResolvedValue",
    "StoreAdapter",
    "StoreInteraction",
    "StoreOutcome",
    "ValueConverter",
    "WriteResult",
    "YamlFileStore",
    "enable_logging",
]
