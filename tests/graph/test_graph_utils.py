from __future__ import annotations

from scenekit.graph import (
    Component,
    Scene,
    SceneNode,
    get_or_add_child,
    get_or_add_component,
    get_or_add_root,
)


class Mover(Component):
    pass


def test_get_or_add_child_creates_once() -> None:
    scene = Scene()
    parent = scene.create_node("Parent")
    first = get_or_add_child(parent, "child")
    second = get_or_add_child(parent, "child")
    assert first is second
    assert parent.children == [first]
    assert first.parent is parent
    assert first.scene is scene


def test_get_or_add_child_returns_existing() -> None:
    scene = Scene()
    parent = scene.create_node("Parent")
    existing = scene.create_node("child", parent=parent)
    assert get_or_add_child(parent, "child") is existing


def test_get_or_add_child_on_detached_parent() -> None:
    parent = SceneNode(name="loose")
    child = get_or_add_child(parent, "child")
    assert child.parent is parent
    assert child.path == "loose/child"


def test_get_or_add_component_creates_once() -> None:
    node = Scene().create_node("N")
    first = get_or_add_component(node, Mover)
    second = get_or_add_component(node, Mover)
    assert first is second
    assert len(node.components) == 1


def test_get_or_add_root() -> None:
    scene = Scene()
    root = get_or_add_root(scene, "Singletons")
    assert get_or_add_root(scene, "Singletons") is root
    assert len(scene.roots) == 1
