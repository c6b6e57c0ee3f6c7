from __future__ import annotations

from typing import TypeVar

from scenekit.graph.scene import Component, Scene, SceneNode
from scenekit.utils import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=Component)


def get_or_add_root(scene: Scene, name: str) -> SceneNode:
    """Return the root-level node called `name`, creating it when missing."""
    node = scene.find(name)
    if node is not None:
        return node
    return scene.create_node(name)


def get_or_add_child(parent: SceneNode, name: str) -> SceneNode:
    """
    Return the child of `parent` called `name`.
    A new node is created and attached to `parent` when no such child exists.
    """
    child = parent.find_child(name)
    if child is not None:
        return child
    if parent.scene is not None:
        return parent.scene.create_node(name, parent=parent)
    child = SceneNode(name=name)
    child.set_parent(parent)
    logger.debug(f"Created detached child {child.path}")
    return child


def get_or_add_component(node: SceneNode, component_type: type[C]) -> C:
    """
    Return the first component of `component_type` on `node`.
    A default-constructed one is attached when none is present.
    """
    comp = node.get_component(component_type)
    if comp is not None:
        return comp
    comp = node.add_component(component_type)
    logger.debug(f"Added {component_type.__name__} to {node.path}")
    return comp


def format_tree(scene: Scene) -> str:
    """Render the scene as an indented outline, one node per line."""
    lines: list[str] = []

    def visit(node: SceneNode, depth: int) -> None:
        comps = ", ".join(type(c).__name__ for c in node.components)
        suffix = f" [{comps}]" if comps else ""
        lines.append(f"{'  ' * depth}{node.name}{suffix}")
        for child in node.children:
            visit(child, depth + 1)

    for root in scene.roots:
        visit(root, 0)
    return "\n".join(lines)
