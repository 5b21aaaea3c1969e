# src/sfbootstrap/tasks/symfony.py

from __future__ import annotations

from ..core.context import TaskContext
from ..core.registry import TaskRegistry


def server_start(ctx: TaskContext) -> None:
    # -d: detached, the local web server keeps running after we exit.
    ctx.io.title("Starting Symfony Server")
    ctx.symfony("serve", "-d")


def server_stop(ctx: TaskContext) -> None:
    ctx.io.title("Stopping Symfony Server")
    ctx.symfony("server:stop")


def server_log(ctx: TaskContext) -> None:
    ctx.io.title("Showing Symfony Server Log")
    ctx.symfony("server:log")


def clear_cache(ctx: TaskContext) -> None:
    ctx.io.title("Clearing Cache")
    ctx.console("cache:clear")


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "symfony:serve",
        server_start,
        description="Start Symfony Server",
        namespace="symfony",
        aliases=["sf:srv:start"],
    )
    registry.register(
        "symfony:server-stop",
        server_stop,
        description="Stop Symfony Server",
        namespace="symfony",
        aliases=["sf:srv:stop"],
    )
    registry.register(
        "symfony:server-log",
        server_log,
        description="Show Symfony Server Log",
        namespace="symfony",
        aliases=["sf:srv:log"],
    )
    registry.register(
        "symfony:cache-clear",
        clear_cache,
        description="Clear Cache",
        namespace="symfony",
        aliases=["sf:cc"],
    )
