"""Configuration containers and their builder."""

from .builder import ContainerBuilder
from .container import ConfigContainer, Option
from .errors import BuilderFinalizedError, UnknownOptionError

__all__ = [
    "BuilderFinalizedError",
    "ConfigContainer",
    "ContainerBuilder",
    "Option",
    "UnknownOptionError",
]
