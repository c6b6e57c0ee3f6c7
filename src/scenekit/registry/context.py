from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from scenekit.graph import Component, Scene
from scenekit.registry.singleton import RegistryConfig, RegistryError, SingletonRegistry
from scenekit.utils import get_logger

logger = get_logger(__name__)

_active: SingletonRegistry | None = None


def init_context(scene: Scene | None = None, config: RegistryConfig | None = None) -> SingletonRegistry:
    """Install the process-wide registry. Fails if one is already installed."""
    global _active
    if _active is not None:
        raise RegistryError("Singleton context already initialised", code="ECONTEXT_ACTIVE")
    _active = SingletonRegistry(scene if scene is not None else Scene(), config)
    logger.debug("Singleton context initialised")
    return _active


def current_registry() -> SingletonRegistry:
    if _active is None:
        raise RegistryError("Singleton context not initialised", code="ENO_CONTEXT")
    return _active


def teardown_context() -> None:
    """Destroy every singleton and uninstall the process-wide registry."""
    global _active
    if _active is None:
        return
    registry, _active = _active, None
    registry.teardown()


@contextmanager
def singleton_context(
    scene: Scene | None = None, config: RegistryConfig | None = None
) -> Iterator[SingletonRegistry]:
    registry = init_context(scene, config)
    try:
        yield registry
    finally:
        teardown_context()


class singleton_accessor:
    """
    Class-level property resolving the owner's singleton from the active context.

        class Audio(SingletonComponent):
            instance = singleton_accessor()

        Audio.instance  # created on first access

    Every attribute read goes through the registry, including the ones made
    by hasattr(), getattr(), inspect.getmembers() and help(): with a context
    active they create the singleton, without one they raise RegistryError
    (ENO_CONTEXT). Use inspect.getattr_static() to reach the accessor itself.
    """

    def __init__(self, create_if_null: bool = True) -> None:
        self.create_if_null = create_if_null

    def __get__(self, obj: Any, owner: type[Component]) -> Any:
        return current_registry().get(owner, create_if_null=self.create_if_null)


class SingletonComponent(Component):
    """Component that refuses to start unless it is the registry's instance."""

    instance = singleton_accessor()

    def start(self) -> None:
        existing = current_registry().get(type(self), create_if_null=False)
        if existing is not self:
            path = self.node.path if self.node is not None else None
            raise RegistryError(
                f"{type(self).__name__} exists more than once in scene",
                code="EDUP_COMPONENT",
                path=path,
            )
