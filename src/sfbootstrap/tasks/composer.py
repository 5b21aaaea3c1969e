# src/sfbootstrap/tasks/composer.py

from __future__ import annotations

from ..core.context import TaskContext
from ..core.registry import TaskRegistry


def composer_install(ctx: TaskContext) -> None:
    """Install every dependency declared in composer.json."""
    ctx.io.title("Installing composer dependencies")
    ctx.composer("install")
    ctx.io.new_line()
    ctx.io.success("Composer dependencies installed")


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "composer:install",
        composer_install,
        description="Install composer dependencies",
        namespace="composer",
        aliases=["comp:install"],
    )
