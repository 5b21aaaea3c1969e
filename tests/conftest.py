# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from sfbootstrap.connectors.filesystem import LocalFileSystem
from sfbootstrap.core.context import TaskContext

from .fakes import FakeCommandRunner, ScriptedIO


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with TaskContext and the task modules.

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the developer's environment and .env.
    """
    project_dir = tmp_path / "acme-shop"
    project_dir.mkdir()
    return SimpleNamespace(
        app_name="sfbootstrap",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        project_dir=project_dir,
        fixtures_dir="src/DataFixtures",
        readme_backup="docs/templates/README.md",
        composer_bin="composer",
        symfony_bin="symfony",
        docker_bin="docker",
        git_bin="git",
    )


@pytest.fixture()
def runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture()
def io() -> ScriptedIO:
    return ScriptedIO()


@pytest.fixture()
def project_dir(settings: SimpleNamespace) -> Path:
    return settings.project_dir


@pytest.fixture()
def ctx(settings: SimpleNamespace, io: ScriptedIO, runner: FakeCommandRunner) -> TaskContext:
    """
    TaskContext wired with a fake shell and terminal.

    NOTE: the filesystem is real (rooted at tmp_path) because marker checks
    and README/fixtures writes are part of what we want to test.
    """
    return TaskContext(
        settings=settings,
        io=io,
        fs=LocalFileSystem(settings.project_dir),
        runner=runner,
    )
