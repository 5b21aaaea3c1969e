# src/sfbootstrap/tasks/database.py

"""
Doctrine database tasks.

`database:init` and `database:reset` are plain compositions: they issue the
same commands as the single-step tasks, in a fixed order, and then offer to
load fixtures. Nothing is deduplicated or tracked between them.
"""

from __future__ import annotations

import logging

from ..core.context import TaskContext
from ..core.registry import TaskRegistry
from .fixtures import load_fixtures

logger = logging.getLogger(__name__)

FIXTURES_QUESTION = "Would you like to load fixtures?"


def create_database(ctx: TaskContext) -> None:
    ctx.io.title("Creating new Database")
    ctx.console("doctrine:database:create", "--if-not-exists")


def drop_database(ctx: TaskContext) -> None:
    ctx.io.title("Dropping Database")
    ctx.console("doctrine:database:drop", "--force")


def create_migration(ctx: TaskContext) -> None:
    ctx.io.title("Creating new Migration")
    ctx.console("make:migration", "--no-interaction")


def run_migrations(ctx: TaskContext) -> None:
    ctx.io.title("Running Migrations")
    ctx.console("doctrine:migrations:migrate", "--no-interaction")


def _maybe_load_fixtures(ctx: TaskContext) -> None:
    # Only an explicit "y" loads; the default answer is "y".
    answer = ctx.io.ask(FIXTURES_QUESTION, "y")
    if answer == "y":
        load_fixtures(ctx)
    else:
        logger.info("Fixtures not loaded (answer=%r)", answer)


def initialize_database(ctx: TaskContext) -> None:
    """create (if missing) -> make:migration -> migrate -> fixtures?"""
    ctx.io.title("Initializing Database")
    ctx.console("doctrine:database:create", "--if-not-exists")
    ctx.console("make:migration")
    ctx.console("doctrine:migrations:migrate")
    _maybe_load_fixtures(ctx)
    ctx.io.new_line()
    ctx.io.success("Database initialized")


def reset_database(ctx: TaskContext) -> None:
    """drop -> create -> migrate -> fixtures?"""
    ctx.io.title("Resetting Database")
    ctx.console("doctrine:database:drop", "--force")
    ctx.console("doctrine:database:create")
    ctx.console("doctrine:migrations:migrate")
    _maybe_load_fixtures(ctx)
    ctx.io.new_line()
    ctx.io.success("Database reset")


def register_tasks(registry: TaskRegistry) -> None:
    for name, handler, description, alias in (
        ("database:create", create_database, "Create new Database", "db:create"),
        ("database:drop", drop_database, "Drop Database", "db:drop"),
        ("database:migration", create_migration, "Create new Migration", "db:migration"),
        ("database:migrate", run_migrations, "Run Migrations", "db:migrate"),
        ("database:init", initialize_database, "Initialize Database", "db:init"),
        ("database:reset", reset_database, "Reset Database", "db:reset"),
    ):
        registry.register(
            name, handler, description=description, namespace="database", aliases=[alias]
        )
