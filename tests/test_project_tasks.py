# tests/test_project_tasks.py

from __future__ import annotations

import pytest

from sfbootstrap.errors import InputAbort
from sfbootstrap.tasks import project

from .fakes import ENTER

CONFIG_DOCKER = "composer config --json extra.symfony.docker false"


def _mark_existing_project(project_dir) -> None:
    (project_dir / "composer.json").write_text("{}", "utf-8")
    (project_dir / ".git").mkdir()
    (project_dir / "templates").mkdir()


def test_readme_created_when_missing(ctx, project_dir) -> None:
    project.write_readme(ctx)
    assert (project_dir / "README.md").read_text("utf-8") == "# acme-shop\n"
    assert not (project_dir / "docs").exists()


def test_readme_backed_up_then_overwritten(ctx, project_dir) -> None:
    (project_dir / "README.md").write_text("# Symfony skeleton\nold text\n", "utf-8")

    project.write_readme(ctx)
    project.write_readme(ctx)

    assert (project_dir / "README.md").read_text("utf-8") == "# acme-shop\n"
    # Second run backs up the README written by the first one.
    assert (project_dir / "docs/templates/README.md").read_text("utf-8") == "# acme-shop\n"


def test_readme_backup_holds_previous_content(ctx, project_dir) -> None:
    (project_dir / "README.md").write_text("old text\n", "utf-8")
    project.write_readme(ctx)
    assert (project_dir / "docs/templates/README.md").read_text("utf-8") == "old text\n"
    assert (project_dir / "README.md").read_text("utf-8") == "# acme-shop\n"


def test_existing_project_only_reconfigures(ctx, io, runner, project_dir) -> None:
    _mark_existing_project(project_dir)

    project.create_project(ctx)

    assert runner.command_lines == [CONFIG_DOCKER]
    assert io.questions == []
    assert (project_dir / "README.md").exists()
    assert len(io.kinds("success")) == 1


def test_fresh_project_full_flow(ctx, io, runner, project_dir) -> None:
    io.answers.extend(
        [
            "7.1.*",  # version
            ENTER,  # stability -> stable
            True,  # init git
            "git@example.com:acme/shop.git",
            True,  # first commit
            True,  # webapp
        ]
    )

    project.create_project(ctx)

    assert runner.calls == [
        [
            "composer", "create-project", "symfony/skeleton", "7.1.*", "tmp",
            "--stability=stable", "--prefer-dist", "--no-progress", "--no-interaction", "--no-install",
        ],
        ["cp", "-Rp", "tmp/.", "."],
        ["rm", "-Rf", "tmp/"],
        ["composer", "install", "--prefer-dist", "--no-progress", "--no-interaction"],
        ["composer", "config", "--json", "extra.symfony.docker", "false"],
        ["git", "init"],
        ["git", "remote", "add", "origin", "git@example.com:acme/shop.git"],
        ["git", "add", "."],
        ["git", "commit", "-m", "Initial commit"],
        ["composer", "require", "webapp", "--no-progress", "--no-interaction"],
    ]
    assert io.answers == []


def test_latest_version_omits_constraint(ctx, io, runner, project_dir) -> None:
    (project_dir / ".git").mkdir()
    (project_dir / "templates").mkdir()
    io.answers.extend([ENTER, "dev"])

    project.create_project(ctx)

    assert runner.calls[0][:4] == ["composer", "create-project", "symfony/skeleton", "tmp"]
    assert "--stability=dev" in runner.calls[0]


def test_git_declined_skips_remote_and_commit(ctx, io, runner, project_dir) -> None:
    (project_dir / "composer.json").write_text("{}", "utf-8")
    (project_dir / "templates").mkdir()
    io.answers.append(False)

    project.create_project(ctx)

    assert runner.command_lines == [CONFIG_DOCKER]
    assert len(io.questions) == 1


def test_closed_input_aborts_after_prior_steps(ctx, io, runner, project_dir) -> None:
    (project_dir / "composer.json").write_text("{}", "utf-8")

    with pytest.raises(InputAbort):
        project.create_project(ctx)

    # Steps already performed are not rolled back.
    assert runner.command_lines == [CONFIG_DOCKER]
    assert not (project_dir / "README.md").exists()
