"""In-memory scene graph and lookup-or-create helpers."""

from .scene import Component, Scene, SceneNode
from .utils import format_tree, get_or_add_child, get_or_add_component, get_or_add_root

__all__ = [
    "Scene",
    "SceneNode",
    "Component",
    "get_or_add_root",
    "get_or_add_child",
    "get_or_add_component",
    "format_tree",
]
