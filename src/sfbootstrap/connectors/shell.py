# src/sfbootstrap/connectors/shell.py

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..errors import FilesystemFailure

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127
NOT_EXECUTABLE = 126


def _working_dir_failure(cwd: Path, reason: str) -> FilesystemFailure:
    logger.error("Cannot run commands in %s: %s", cwd, reason)
    return FilesystemFailure("chdir", cwd, reason)


class SubprocessRunner:
    """
    Run a command with the terminal's stdin/stdout/stderr inherited.

    Blocks until the child exits. Output is never captured: composer and the
    Symfony CLI are interactive (make:* generators ask questions).
    A missing or non-directory `cwd` raises FilesystemFailure; a missing
    executable returns 127.
    """

    def run(self, argv: Sequence[str], *, cwd: Path) -> int:
        command = list(argv)
        if not cwd.exists():
            raise _working_dir_failure(cwd, "No such directory")
        if not cwd.is_dir():
            raise _working_dir_failure(cwd, "Not a directory")

        try:
            completed = subprocess.run(command, cwd=cwd, check=False)
        except OSError as e:
            # subprocess reports a failed chdir with the cwd as filename.
            if e.filename is not None and str(e.filename) == str(cwd):
                raise _working_dir_failure(cwd, e.strerror or str(e)) from e
            if isinstance(e, FileNotFoundError):
                logger.error("Executable not found: %s", command[0] if command else "<empty>")
                return COMMAND_NOT_FOUND
            logger.error("Executable not runnable: %s (%s)", command[0], e.strerror or e)
            return NOT_EXECUTABLE
        return completed.returncode
