# src/sfbootstrap/tasks/docker.py

"""
Docker Compose stack tasks.

All of them act on the compose file of the project directory; the runner
never reads it.
"""

from __future__ import annotations

from ..core.context import TaskContext
from ..core.registry import TaskRegistry


def docker_start(ctx: TaskContext) -> None:
    ctx.io.title("Starting Docker Stack")
    ctx.compose("up", "-d")
    ctx.io.new_line()
    ctx.io.success("Docker Stack started")


def docker_stop(ctx: TaskContext) -> None:
    ctx.io.title("Stopping Docker Stack")
    ctx.compose("stop")
    ctx.io.new_line()
    ctx.io.success("Docker Stack stopped")


def docker_restart(ctx: TaskContext) -> None:
    ctx.io.title("Restarting Docker Stack")
    ctx.compose("restart")
    ctx.io.new_line()
    ctx.io.success("Docker Stack restarted")


def docker_remove(ctx: TaskContext) -> None:
    """`docker compose down`, after confirmation (default: no)."""
    ctx.io.title("Removing Docker Stack")
    ctx.io.info("This will remove all services defined in the compose.yml file.")
    if not ctx.io.confirm("Are you sure you want to remove the Docker Stack?", False):
        ctx.io.warning("Docker Stack not removed")
        return

    ctx.compose("down")
    ctx.io.new_line()
    ctx.io.success("Docker Stack removed")


def docker_clean(ctx: TaskContext) -> None:
    """
    `docker system prune -a -f [--volumes]`.

    Both questions are asked up front, the volumes one even when the first
    answer is no.
    """
    ctx.io.title("Cleaning Docker Environment")
    ctx.io.info("This will remove all unused Docker images, containers and networks.")
    confirm = ctx.io.confirm("Are you sure you want to clean the Docker Environment?", False)
    volumes = ctx.io.confirm("Do you want to remove unused Docker volumes too?", False)
    if not confirm:
        ctx.io.warning("Docker Environment not cleaned")
        return

    args = ["system", "prune", "-a", "-f"]
    if volumes:
        args.append("--volumes")
    ctx.docker(*args)
    ctx.io.new_line()
    ctx.io.success("Docker Environment cleaned")


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "docker:up",
        docker_start,
        description="Start Docker Stack",
        namespace="docker",
        aliases=["docker:start"],
    )
    registry.register("docker:stop", docker_stop, description="Stop Docker Stack", namespace="docker")
    registry.register(
        "docker:restart", docker_restart, description="Restart Docker Stack", namespace="docker"
    )
    registry.register(
        "docker:down",
        docker_remove,
        description="Remove Docker Stack",
        namespace="docker",
        aliases=["docker:remove"],
    )
    registry.register(
        "docker:clean", docker_clean, description="Clean Docker Environment", namespace="docker"
    )
