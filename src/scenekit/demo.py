from __future__ import annotations

from scenekit.registry import SingletonComponent, current_registry
from scenekit.utils import get_logger

logger = get_logger(__name__)


class ExampleSingleton(SingletonComponent):
    def __init__(self) -> None:
        super().__init__()
        self.my_var1 = "abc"


def run_demo() -> ExampleSingleton:
    """
    Resolve ExampleSingleton twice through the active context and check that
    both lookups see the same object. Raises AssertionError otherwise.
    """
    first = ExampleSingleton.instance
    if first is None or first.my_var1 != "abc":
        raise AssertionError("ExampleSingleton was not initialised on first use")
    first.my_var1 = "123"
    second = ExampleSingleton.instance
    if second is not first or second.my_var1 != "123":
        raise AssertionError("ExampleSingleton.instance returned a different object")
    current_registry().scene.start()
    logger.info("Demo scenario passed")
    return first
