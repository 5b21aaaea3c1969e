# src/sfbootstrap/tasks/fixtures.py

from __future__ import annotations

from ..core.context import TaskContext
from ..core.registry import TaskRegistry

FIXTURES_FILENAME = "AppFixtures.php"

APP_FIXTURES_TEMPLATE = """<?php

namespace App\\DataFixtures;

use Faker\\Factory as Factory;
use Doctrine\\Persistence\\ObjectManager;
use Doctrine\\Bundle\\FixturesBundle\\Fixture;

class AppFixtures extends Fixture
{
    public function load(ObjectManager $manager): void
    {
        $faker = Factory::create('fr_FR');
        // ...
    }
}"""


def load_fixtures(ctx: TaskContext) -> None:
    """Load App\\DataFixtures into the database (purges it first)."""
    ctx.io.title("Loading Fixtures")
    ctx.console("doctrine:fixtures:load", "--no-interaction")


def write_fixtures_file(ctx: TaskContext, directory: str) -> bool:
    """
    Create `<directory>/AppFixtures.php` from the sample class.

    Returns False (and leaves the file alone) when it already exists.
    """
    path = f"{directory.rstrip('/')}/{FIXTURES_FILENAME}"
    if ctx.fs.exists(path):
        ctx.io.new_line()
        ctx.io.info([f"`{path}` already exists.", "Edit this file to add your fixtures."])
        return False

    ctx.fs.mkdir(directory)
    ctx.fs.touch(path)
    ctx.fs.append_to_file(path, APP_FIXTURES_TEMPLATE)
    ctx.io.new_line()
    ctx.io.info([f"`{path}` created.", "Edit this file to add your fixtures."])
    return True


def install_fixtures(ctx: TaskContext) -> None:
    """
    Install DoctrineFixturesBundle, then optionally FakerPHP and a starter
    AppFixtures class.
    """
    ctx.io.title("Installing Fixtures Bundle")
    ctx.composer("require", "--dev", "doctrine/doctrine-fixtures-bundle")

    ctx.io.new_line()
    use_faker = ctx.io.ask("Would you use FakerPHP?", "y")
    if use_faker != "y":
        return

    ctx.io.section("Installing FakerPHP")
    ctx.composer("require", "--dev", "fakerphp/faker")

    ctx.io.new_line()
    default_dir = str(getattr(ctx.settings, "fixtures_dir", "src/DataFixtures"))
    directory = ctx.io.ask("Where do you want to create your fixtures?", default_dir)
    write_fixtures_file(ctx, directory)
    ctx.io.success("FakerPHP installed")


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "fixtures:install",
        install_fixtures,
        description="Install Fixtures Bundle",
        namespace="fixtures",
        aliases=["fixt:install"],
    )
    registry.register(
        "fixtures:load",
        load_fixtures,
        description="Load Fixtures",
        namespace="fixtures",
        aliases=["fixt:load"],
    )
