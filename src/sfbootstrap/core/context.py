# src/sfbootstrap/core/context.py

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path

from ..errors import SubprocessFailure
from .ports import CommandRunner, FileSystem, TerminalIO

logger = logging.getLogger(__name__)


@dataclass
class TaskContext:
    """
    Everything a task handler may touch, passed in explicitly.

    `settings` only needs the attributes read here and by the task modules
    (project_dir, *_bin, fixtures_dir, readme_backup), so tests may pass a
    SimpleNamespace.
    """

    settings: object
    io: TerminalIO
    fs: FileSystem
    runner: CommandRunner

    @property
    def project_dir(self) -> Path:
        return Path(getattr(self.settings, "project_dir", "."))

    def run(self, *argv: str) -> None:
        """Run one command to completion; a non-zero exit aborts the handler."""
        command = [str(a) for a in argv]
        cwd = self.project_dir
        logger.info("Running: %s (cwd=%s)", shlex.join(command), cwd)

        returncode = self.runner.run(command, cwd=cwd)

        if returncode != 0:
            logger.error("Command exited with status %s: %s", returncode, shlex.join(command))
            raise SubprocessFailure(command, returncode)
        logger.debug("Command finished: %s", shlex.join(command))

    # Shorthands for the wrapped tools. Binaries come from settings so wrappers can be swapped in.

    def composer(self, *args: str) -> None:
        self.run(getattr(self.settings, "composer_bin", "composer"), *args)

    def symfony(self, *args: str) -> None:
        self.run(getattr(self.settings, "symfony_bin", "symfony"), *args)

    def console(self, *args: str) -> None:
        """`symfony console ...`"""
        self.symfony("console", *args)

    def docker(self, *args: str) -> None:
        self.run(getattr(self.settings, "docker_bin", "docker"), *args)

    def compose(self, *args: str) -> None:
        self.docker("compose", *args)

    def git(self, *args: str) -> None:
        self.run(getattr(self.settings, "git_bin", "git"), *args)
