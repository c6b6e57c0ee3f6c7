from __future__ import annotations

import pytest

from scenekit.graph import Component, Scene
from scenekit.registry import RegistryConfig, RegistryError, SingletonRegistry, SingletonValidator


class A(Component):
    pass


class B(Component):
    pass


def make() -> tuple[Scene, SingletonRegistry]:
    scene = Scene()
    return scene, SingletonRegistry(scene)


def test_registry_built_scene_is_valid() -> None:
    _, registry = make()
    registry.get(A)
    registry.get(B)
    SingletonValidator(registry).validate()  # should not raise


def test_empty_scene_is_valid() -> None:
    _, registry = make()
    SingletonValidator(registry).validate()


def test_duplicate_container_raises() -> None:
    scene, registry = make()
    scene.create_node("Singletons")
    scene.create_node("Singletons")
    with pytest.raises(RegistryError) as exc:
        SingletonValidator(registry).validate()
    assert exc.value.code == "EDUP_CONTAINER"


def test_duplicate_child_raises() -> None:
    scene, registry = make()
    container = scene.create_node("Singletons")
    scene.create_node(registry.key_for(A), parent=container)
    scene.create_node(registry.key_for(A), parent=container)
    with pytest.raises(RegistryError) as exc:
        SingletonValidator(registry).validate()
    assert exc.value.code == "EDUP_CHILD"


def test_duplicate_component_raises() -> None:
    _, registry = make()
    inst = registry.get(A)
    assert inst.node is not None
    inst.node.add_component(A)
    with pytest.raises(RegistryError) as exc:
        SingletonValidator(registry).validate()
    assert exc.value.code == "EDUP_COMPONENT"
    assert exc.value.path == inst.node.path


def test_component_under_wrong_key_raises() -> None:
    _, registry = make()
    inst = registry.get(A)
    assert inst.node is not None
    inst.node.add_component(B)
    with pytest.raises(RegistryError) as exc:
        SingletonValidator(registry).validate()
    assert exc.value.code == "EKEY_MISMATCH"


def test_distinct_types_sharing_a_child_raise() -> None:
    scene = Scene()
    registry = SingletonRegistry(scene, RegistryConfig(qualified_keys=False))
    first = type("Shared", (Component,), {"__module__": "pkg_one"})
    second = type("Shared", (Component,), {"__module__": "pkg_two"})
    container = scene.create_node("Singletons")
    child = scene.create_node("Shared", parent=container)
    child.add_component(first)
    child.add_component(second)
    with pytest.raises(RegistryError) as exc:
        SingletonValidator(registry).validate()
    assert exc.value.code == "EKEY_COLLISION"


def test_registry_resolved_collisions_are_valid() -> None:
    _, registry = make()
    first = type("Shared", (Component,), {"__module__": "pkg_one"})
    second = type("Shared", (Component,), {"__module__": "pkg_one"})
    registry.get(first)
    registry.get(second)
    SingletonValidator(registry).validate()  # should not raise
