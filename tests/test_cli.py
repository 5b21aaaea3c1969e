# tests/test_cli.py

from __future__ import annotations

import pytest

from sfbootstrap import config
from sfbootstrap.cli import main as cli_main
from sfbootstrap.errors import RegistrationConflict

from .fakes import FakeCommandRunner, ScriptedIO


@pytest.fixture()
def cli_env(monkeypatch, tmp_path):
    """Isolate main(): env-driven settings in tmp_path, no logging reconfiguration."""
    monkeypatch.setenv("SFBOOT_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SFBOOT_PROJECT_DIR", str(tmp_path))
    monkeypatch.setattr(config, "_SETTINGS", None)
    monkeypatch.setattr(cli_main, "configure_logging", lambda settings: None)

    runner = FakeCommandRunner()
    io = ScriptedIO()
    real_create_context = cli_main.create_context

    def fake_create_context(*, settings):
        return real_create_context(settings=settings, io=io, runner=runner)

    monkeypatch.setattr(cli_main, "create_context", fake_create_context)
    return runner, io


def test_no_task_lists_everything(cli_env, capsys) -> None:
    runner, _ = cli_env
    assert cli_main.main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Available tasks:")
    for namespace in ("composer", "database", "docker", "fixtures", "maker", "project", "symfony"):
        assert f"\n {namespace}\n" in out
    assert runner.calls == []


def test_list_flag(cli_env, capsys) -> None:
    assert cli_main.main(["--list"]) == 0
    assert "db:init" in capsys.readouterr().out


def test_runs_task_by_alias(cli_env, tmp_path) -> None:
    runner, _ = cli_env
    assert cli_main.main(["docker:start"]) == 0
    assert runner.command_lines == ["docker compose up -d"]
    assert runner.cwds == [tmp_path]


def test_project_dir_flag(cli_env, tmp_path) -> None:
    runner, _ = cli_env
    other = tmp_path / "other"
    other.mkdir()
    assert cli_main.main(["--project-dir", str(other), "sf:cc"]) == 0
    assert runner.cwds == [other]


def test_failing_command_exit_code(cli_env, capsys) -> None:
    runner, _ = cli_env
    runner.results[("symfony", "server:stop")] = 4
    assert cli_main.main(["sf:srv:stop"]) == 4
    assert "symfony server:stop" in capsys.readouterr().err


def test_unknown_task(cli_env, capsys) -> None:
    runner, _ = cli_env
    assert cli_main.main(["db:inti"]) == 1
    err = capsys.readouterr().err
    assert "Unknown task: 'db:inti'" in err
    assert "db:init" in err
    assert runner.calls == []


def test_registration_conflict_exits_before_running(cli_env, monkeypatch, capsys) -> None:
    runner, _ = cli_env

    def broken_registry():
        raise RegistrationConflict("docker:up", {"docker:start": "docker:up"})

    monkeypatch.setattr(cli_main, "build_registry", broken_registry)
    assert cli_main.main(["docker:up"]) == 1
    assert "docker:start" in capsys.readouterr().err
    assert runner.calls == []


def test_missing_project_dir_runs_nothing(cli_env, tmp_path, capsys) -> None:
    runner, _ = cli_env
    assert cli_main.main(["--project-dir", str(tmp_path / "missing"), "sf:cc"]) == 1
    assert "missing" in capsys.readouterr().err
    assert runner.calls == []


def test_file_as_project_dir_runs_nothing(cli_env, tmp_path, capsys) -> None:
    runner, _ = cli_env
    afile = tmp_path / "afile"
    afile.write_text("x")
    assert cli_main.main(["--project-dir", str(afile), "sf:cc"]) == 1
    assert "not a directory" in capsys.readouterr().err
    assert runner.calls == []
