from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TypeVar

from scenekit.graph import Component, Scene, SceneNode
from scenekit.graph import get_or_add_child, get_or_add_root
from scenekit.utils import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=Component)

DEFAULT_CONTAINER_NAME = "Singletons"
# Separates a key from the counter added when distinct types share that key.
KEY_SUFFIX_SEP = "#"


def base_key(name: str) -> str:
    """Strip a collision counter from a child name: "pkg.Audio#1" -> "pkg.Audio"."""
    return name.split(KEY_SUFFIX_SEP, 1)[0]


@dataclass
class RegistryConfig:
    container_name: str = DEFAULT_CONTAINER_NAME
    # Key children by "module.QualName" rather than the bare class name.
    qualified_keys: bool = True


class RegistryError(Exception):
    """Registry error with a code and the scene path it concerns."""

    def __init__(self, message: str, code: str = "EREGISTRY", path: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


class SingletonRegistry:
    """
    Get-or-create access to one component per type, stored in a scene.

    Every singleton lives on its own child of a root-level container node;
    the child is named after the component's type. Lookups never fail:
    they either create what is missing or return None.
    """

    def __init__(self, scene: Scene, config: RegistryConfig | None = None) -> None:
        self.scene = scene
        self.config = config or RegistryConfig()
        self._index: dict[type[Component], Component] = {}

    def key_for(self, component_type: type[Component]) -> str:
        if self.config.qualified_keys:
            return f"{component_type.__module__}.{component_type.__qualname__}"
        return component_type.__name__

    def container(self, create_if_null: bool = False) -> SceneNode | None:
        if create_if_null:
            return get_or_add_root(self.scene, self.config.container_name)
        return self.scene.find(self.config.container_name)

    def get(self, component_type: type[C], create_if_null: bool = True) -> C | None:
        cached = self._index.get(component_type)
        if cached is not None and self._is_live(cached):
            return cached  # type: ignore[return-value]

        if create_if_null:
            container = get_or_add_root(self.scene, self.config.container_name)
            child, comp = self._find_slot(container, component_type)
            if child is None:
                child = self._free_child(container, component_type)
            if comp is None:
                comp = child.add_component(component_type)
                logger.debug(f"Created singleton {component_type.__name__} at {child.path}")
        else:
            # Read-only path: must not touch the scene.
            container = self.scene.find(self.config.container_name)
            if container is None:
                return None
            _, comp = self._find_slot(container, component_type)
            if comp is None:
                return None

        self._index[component_type] = comp
        return comp

    def instances(self) -> list[Component]:
        """All singleton components currently attached under the container."""
        container = self.container()
        if container is None:
            return []
        found: list[Component] = []
        for child in container.children:
            base = base_key(child.name)
            found.extend(c for c in child.components if self.key_for(type(c)) == base)
        return found

    def teardown(self) -> None:
        """Destroy the container node with every singleton under it."""
        container = self.container()
        if container is not None:
            self.scene.destroy(container)
            logger.info(f"Destroyed singleton container '{container.name}'")
        self._index.clear()

    def _find_slot(
        self, container: SceneNode, component_type: type[C]
    ) -> tuple[SceneNode | None, C | None]:
        """
        Scan the children keyed for `component_type` ("key", "key#1", ...).
        Classes sharing a key get one child each, matched by exact type.
        Returns the child holding the instance, else the first empty child
        with that key and None, else (None, None).
        """
        key = self.key_for(component_type)
        empty: SceneNode | None = None
        for child in container.children:
            if base_key(child.name) != key:
                continue
            for comp in child.components:
                if type(comp) is component_type:
                    return child, comp  # type: ignore[return-value]
            if empty is None and not child.components:
                empty = child
        return empty, None

    def _free_child(self, container: SceneNode, component_type: type[Component]) -> SceneNode:
        key = self.key_for(component_type)
        name = key
        n = 0
        while container.find_child(name) is not None:
            n += 1
            name = f"{key}{KEY_SUFFIX_SEP}{n}"
        if n:
            logger.debug(f"Key '{key}' already taken by another type, using '{name}'")
        return get_or_add_child(container, name)

    def _is_live(self, comp: Component) -> bool:
        node = comp.node
        if node is None or node.scene is not self.scene:
            return False
        parent = node.parent
        return (
            parent is not None
            and parent.parent is None
            and parent.name == self.config.container_name
            and any(c is comp for c in node.components)
        )


class SingletonValidator:
    """Checks that the container holds at most one singleton per type."""

    def __init__(self, registry: SingletonRegistry) -> None:
        self.registry = registry

    def validate(self) -> None:
        containers = [
            n for n in self.registry.scene.roots if n.name == self.registry.config.container_name
        ]
        if len(containers) > 1:
            raise RegistryError(
                f"{len(containers)} root nodes named '{containers[0].name}'",
                code="EDUP_CONTAINER",
                path=containers[0].path,
            )
        if not containers:
            return
        container = containers[0]
        self._validate_unique_children(container)
        for child in container.children:
            self._validate_child(child)

    def _validate_unique_children(self, container: SceneNode) -> None:
        counts = Counter(child.name for child in container.children)
        for name, count in counts.items():
            if count > 1:
                raise RegistryError(
                    f"Singleton key '{name}' appears {count} times",
                    code="EDUP_CHILD",
                    path=f"{container.path}/{name}",
                )

    def _validate_child(self, child: SceneNode) -> None:
        for comp in child.components:
            comp_type = type(comp)
            if self.registry.key_for(comp_type) != base_key(child.name):
                raise RegistryError(
                    f"{comp_type.__name__} stored under key '{child.name}'",
                    code="EKEY_MISMATCH",
                    path=child.path,
                )
        if len(child.components) > 1:
            types = {type(c) for c in child.components}
            if len(types) == 1:
                raise RegistryError(
                    f"More than one {child.components[0].__class__.__name__} on '{child.name}'",
                    code="EDUP_COMPONENT",
                    path=child.path,
                )
            raise RegistryError(
                f"{len(types)} distinct types share key '{child.name}'",
                code="EKEY_COLLISION",
                path=child.path,
            )
