"""Per-type singleton registry backed by a scene graph."""

from .context import (
    SingletonComponent,
    current_registry,
    init_context,
    singleton_accessor,
    singleton_context,
    teardown_context,
)
from .singleton import (
    DEFAULT_CONTAINER_NAME,
    RegistryConfig,
    RegistryError,
    SingletonRegistry,
    SingletonValidator,
)

__all__ = [
    "DEFAULT_CONTAINER_NAME",
    "RegistryConfig",
    "RegistryError",
    "SingletonRegistry",
    "SingletonValidator",
    "SingletonComponent",
    "singleton_accessor",
    "init_context",
    "current_registry",
    "teardown_context",
    "singleton_context",
]
