# src/sfbootstrap/errors.py

from __future__ import annotations

import shlex
from collections.abc import Iterable, Sequence


class SfBootstrapError(RuntimeError):
    """Base class for every failure the task runner reports to the terminal."""


class RegistrationConflict(SfBootstrapError):
    """Raised when a task name or alias is already taken in the registry."""

    def __init__(self, task_name: str, conflicts: dict[str, str]) -> None:
        listing = ", ".join(f"'{ident}' (held by '{owner}')" for ident, owner in conflicts.items())
        super().__init__(f"Cannot register task '{task_name}': identifier conflict: {listing}")
        self.task_name = task_name
        self.conflicts = dict(conflicts)


class UnknownTask(SfBootstrapError):
    """Raised when an identifier resolves to no registered task."""

    def __init__(self, identifier: str, suggestions: Iterable[str] = ()) -> None:
        self.identifier = identifier
        self.suggestions = list(suggestions)
        message = f"Unknown task: '{identifier}'."
        if self.suggestions:
            message += " Did you mean: " + ", ".join(self.suggestions) + "?"
        super().__init__(message)


class SubprocessFailure(SfBootstrapError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(f"Command failed with exit status {returncode}: {self.command_line}")

    @property
    def command_line(self) -> str:
        return shlex.join(self.command)


class FilesystemFailure(SfBootstrapError):
    """A file or directory operation could not complete."""

    def __init__(self, operation: str, path: object, reason: str = "") -> None:
        self.operation = operation
        self.path = str(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Filesystem operation '{operation}' failed for {self.path}{detail}")


class InputAbort(SfBootstrapError):
    """The input stream closed while a prompt was waiting for an answer."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"No input available while asking: {question}")
