# tests/test_filesystem.py

from __future__ import annotations

from pathlib import Path

import pytest

from sfbootstrap.connectors.filesystem import LocalFileSystem
from sfbootstrap.errors import FilesystemFailure


def test_relative_paths_are_rooted(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    fs.dump_file("docs/notes.md", "hello\n")

    assert (tmp_path / "docs" / "notes.md").read_text("utf-8") == "hello\n"
    assert fs.exists("docs/notes.md")
    assert fs.exists(tmp_path / "docs")


def test_dump_overwrites_and_append_appends(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    fs.dump_file("a.txt", "one")
    fs.append_to_file("a.txt", "two")
    assert (tmp_path / "a.txt").read_text("utf-8") == "onetwo"

    fs.dump_file("a.txt", "three")
    assert (tmp_path / "a.txt").read_text("utf-8") == "three"


def test_mkdir_is_idempotent_and_touch_keeps_content(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    fs.mkdir("src/DataFixtures")
    fs.mkdir("src/DataFixtures")
    fs.dump_file("src/DataFixtures/x.php", "<?php")
    fs.touch("src/DataFixtures/x.php")
    assert (tmp_path / "src/DataFixtures/x.php").read_text("utf-8") == "<?php"


def test_copy_creates_target_directories(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    fs.dump_file("README.md", "# old\n")
    fs.copy("README.md", "docs/templates/README.md")
    assert (tmp_path / "docs/templates/README.md").read_text("utf-8") == "# old\n"


def test_os_errors_become_filesystem_failure(tmp_path: Path) -> None:
    fs = LocalFileSystem(tmp_path)
    fs.dump_file("blocker", "a file, not a directory")

    with pytest.raises(FilesystemFailure) as excinfo:
        fs.mkdir("blocker/sub")
    assert excinfo.value.operation == "mkdir"

    with pytest.raises(FilesystemFailure):
        fs.copy("missing.md", "backup.md")


def test_unreadable_marker_becomes_filesystem_failure(tmp_path: Path, monkeypatch) -> None:
    fs = LocalFileSystem(tmp_path)
    real_exists = Path.exists

    def denied(self, *args, **kwargs):
        if self.name == "composer.json":
            raise PermissionError(13, "Permission denied", str(self))
        return real_exists(self, *args, **kwargs)

    monkeypatch.setattr(Path, "exists", denied)

    with pytest.raises(FilesystemFailure) as excinfo:
        fs.exists("composer.json")
    assert excinfo.value.operation == "exists"
    assert excinfo.value.reason == "Permission denied"
