# src/sfbootstrap/tasks/maker.py

from __future__ import annotations

from ..core.context import TaskContext
from ..core.registry import TaskHandler, TaskRegistry

# kind -> display noun. Each maps to `symfony console make:<kind>`.
GENERATORS: dict[str, str] = {
    "controller": "Controller",
    "user": "User",
    "entity": "Entity",
    "form": "Form",
}


def install_maker_bundle(ctx: TaskContext) -> None:
    ctx.io.title("Installing Maker Bundle")
    ctx.composer("require", "--dev", "symfony/maker-bundle")
    ctx.io.new_line()
    ctx.io.success("Maker Bundle installed")


def make_generator(kind: str) -> TaskHandler:
    """Build the handler for one make:* generator (they are interactive, stdin is inherited)."""
    noun = GENERATORS[kind]

    def handler(ctx: TaskContext) -> None:
        ctx.io.title(f"Creating new {noun}")
        ctx.console(f"make:{kind}")

    handler.__name__ = f"make_{kind}"
    handler.__doc__ = f"`symfony console make:{kind}`"
    return handler


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "maker:install",
        install_maker_bundle,
        description="Install Maker Bundle",
        namespace="maker",
        aliases=["make:install"],
    )
    for kind, noun in GENERATORS.items():
        registry.register(
            f"maker:{kind}",
            make_generator(kind),
            description=f"Create new {noun}",
            namespace="maker",
            aliases=[f"make:{kind}"],
        )
