# src/sfbootstrap/tasks/project.py

"""
`project:create`: scaffold a Symfony project in the project directory.

Steps (each gated by a marker checked once, when reached):
- composer.json missing -> create-project into tmp/, move it in, install
- always -> disable the Symfony Docker recipe integration
- .git missing -> optionally git init, add remote, first commit
- templates/ missing -> optionally require the webapp pack
- README.md -> create, or back up to docs/templates/README.md and overwrite
"""

from __future__ import annotations

import logging

from ..core.context import TaskContext
from ..core.registry import TaskRegistry

logger = logging.getLogger(__name__)

SKELETON = "symfony/skeleton"
SCAFFOLD_DIR = "tmp"


def readme_content(ctx: TaskContext) -> str:
    return f"# {ctx.project_dir.resolve().name}\n"


def write_readme(ctx: TaskContext) -> None:
    """
    Create README.md with a title line.

    An existing README is copied to the backup path first, then overwritten.
    """
    content = readme_content(ctx)
    if not ctx.fs.exists("README.md"):
        ctx.fs.touch("README.md")
        ctx.fs.append_to_file("README.md", content)
        return

    backup = str(getattr(ctx.settings, "readme_backup", "docs/templates/README.md"))
    logger.info("README.md exists, backing it up to %s", backup)
    ctx.fs.copy("README.md", backup)
    ctx.fs.dump_file("README.md", content)


def _create_skeleton(ctx: TaskContext) -> None:
    ctx.io.section("Creating a new Symfony project in the current directory")
    version = ctx.io.ask("What version of Symfony do you want to use? (default: latest)", "")
    stability = ctx.io.ask("What stability do you want to use?", "stable")

    package = [SKELETON, version] if version else [SKELETON]
    ctx.composer(
        "create-project",
        *package,
        SCAFFOLD_DIR,
        f"--stability={stability}",
        "--prefer-dist",
        "--no-progress",
        "--no-interaction",
        "--no-install",
    )
    ctx.run("cp", "-Rp", f"{SCAFFOLD_DIR}/.", ".")
    ctx.run("rm", "-Rf", f"{SCAFFOLD_DIR}/")
    ctx.composer("install", "--prefer-dist", "--no-progress", "--no-interaction")


def _init_git(ctx: TaskContext) -> None:
    ctx.io.section("Initializing Git")
    if not ctx.io.confirm("Do you want to initialize Git in the project?", False):
        return

    ctx.git("init")
    remote_url = ctx.io.ask("What is the remote repository URL?")
    ctx.git("remote", "add", "origin", remote_url)
    ctx.io.new_line()
    ctx.io.info(
        [
            "Git initialized and remote repository added.",
            "You can now push your code to the remote repository.",
        ]
    )

    if ctx.io.confirm("Do you want to make the first commit?", False):
        ctx.git("add", ".")
        ctx.git("commit", "-m", "Initial commit")


def create_project(ctx: TaskContext) -> None:
    ctx.io.title("Creating new Symfony project")

    if not ctx.fs.exists("composer.json"):
        _create_skeleton(ctx)

    ctx.composer("config", "--json", "extra.symfony.docker", "false")

    if not ctx.fs.exists(".git"):
        _init_git(ctx)

    if not ctx.fs.exists("templates"):
        ctx.io.section("Configuring project as a web application")
        if ctx.io.confirm("Do you want to create a web application?", False):
            ctx.composer("require", "webapp", "--no-progress", "--no-interaction")

    write_readme(ctx)

    ctx.io.success([f"Your new Symfony project is successfully created in {ctx.project_dir.resolve()}"])
    ctx.io.info(["Run `sfbootstrap` to see all available tasks"])


def register_tasks(registry: TaskRegistry) -> None:
    registry.register(
        "project:create",
        create_project,
        description="Create new Symfony project",
        namespace="project",
        aliases=["project:init"],
    )
