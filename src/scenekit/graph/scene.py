from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeVar

from scenekit.utils import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound="Component")


class Component:
    """
    Base class for anything that can be attached to a SceneNode.
    Subclasses may define their own __init__ without calling super().
    """

    node: SceneNode | None = None
    started: bool = False

    def start(self) -> None:
        """Called once by Scene.start() after the component is attached."""


@dataclass(eq=False)
class SceneNode:
    name: str
    parent: SceneNode | None = field(default=None, repr=False)
    children: list[SceneNode] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)
    scene: Scene | None = field(default=None, repr=False)

    @property
    def path(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent.path}/{self.name}"

    def find_child(self, name: str) -> SceneNode | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def set_parent(self, parent: SceneNode | None) -> None:
        """Reattach this node under `parent`, or at the scene root when None."""
        if parent is self.parent:
            return
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError(f"Cannot parent '{self.name}' under its own descendant")
            ancestor = ancestor.parent
        if self.parent is not None:
            self.parent.children.remove(self)
        elif self.scene is not None and self in self.scene.roots:
            self.scene.roots.remove(self)

        self.parent = parent
        if parent is not None:
            parent.children.append(self)
            for n in _iter_subtree(self):
                n.scene = parent.scene
        elif self.scene is not None:
            self.scene.roots.append(self)

    def get_component(self, component_type: type[C]) -> C | None:
        for comp in self.components:
            if isinstance(comp, component_type):
                return comp
        return None

    def get_components(self, component_type: type[C]) -> list[C]:
        return [c for c in self.components if isinstance(c, component_type)]

    def add_component(self, component_type: type[C]) -> C:
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component subclass")
        comp = component_type()
        comp.node = self
        self.components.append(comp)
        return comp


@dataclass
class Scene:
    roots: list[SceneNode] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def create_node(self, name: str, parent: SceneNode | None = None) -> SceneNode:
        node = SceneNode(name=name, scene=self)
        if parent is None:
            self.roots.append(node)
        else:
            node.set_parent(parent)
        logger.debug(f"Created node {node.path}")
        return node

    def find(self, name: str) -> SceneNode | None:
        """Find a root-level node by name."""
        for node in self.roots:
            if node.name == name:
                return node
        return None

    def destroy(self, node: SceneNode) -> None:
        """Detach `node` and its subtree from the scene."""
        if node.parent is not None:
            node.parent.children.remove(node)
        elif node in self.roots:
            self.roots.remove(node)
        for n in _iter_subtree(node):
            n.scene = None
            for comp in n.components:
                comp.node = None
        node.parent = None
        logger.debug(f"Destroyed node {node.name}")

    def clear(self) -> None:
        for node in list(self.roots):
            self.destroy(node)

    def walk(self) -> Iterator[SceneNode]:
        """Depth-first, pre-order traversal over every node in the scene."""
        for root in self.roots:
            yield from _iter_subtree(root)

    def start(self) -> None:
        # Components added while starting are picked up on the next call.
        for node in list(self.walk()):
            for comp in list(node.components):
                if not comp.started:
                    comp.started = True
                    comp.start()


def _iter_subtree(node: SceneNode) -> Iterator[SceneNode]:
    yield node
    for child in node.children:
        yield from _iter_subtree(child)
