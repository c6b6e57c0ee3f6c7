from __future__ import annotations

from enum import Enum

import typer

from scenekit.demo import run_demo
from scenekit.graph import Scene, format_tree
from scenekit.registry import DEFAULT_CONTAINER_NAME, RegistryConfig, singleton_context
from scenekit.utils import configure_logging

app = typer.Typer(help="scenekit CLI")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def setup(log_level: LogLevel = typer.Option(LogLevel.WARNING, envvar="SCENEKIT_LOG_LEVEL",
                                             case_sensitive=False, help="Logging level")) -> None:
    configure_logging(log_level.value)


@app.command()
def hello() -> None:
    typer.echo("scenekit CLI is ready.")


@app.command()
def demo(container_name: str = typer.Option(DEFAULT_CONTAINER_NAME, envvar="SCENEKIT_CONTAINER",
                                            help="Name of the root node holding singletons"),
         short_keys: bool = typer.Option(False, help="Key singletons by bare class name")) -> None:
    """
    Run the singleton scenario on a fresh scene and print the resulting tree.
    """
    config = RegistryConfig(container_name=container_name, qualified_keys=not short_keys)
    scene = Scene()
    with singleton_context(scene, config):
        singleton = run_demo()
        typer.echo(format_tree(scene))
    typer.echo(f"my_var1 = {singleton.my_var1}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
