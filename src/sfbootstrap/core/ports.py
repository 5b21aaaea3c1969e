# src/sfbootstrap/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task handlers.

Handlers depend on Protocols instead of concrete implementations.
The terminal, the shell and the disk are swappable, which is how the tests
drive every task without spawning processes or waiting on a keyboard.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

Message = str | Sequence[str]
# A display message: a single line or a block of lines.


class CommandRunner(Protocol):
    """Run an external command to completion and return its exit status."""
    def run(self, argv: Sequence[str], *, cwd: Path) -> int: ...


class Output(Protocol):
    def title(self, message: str) -> None: ...
    def section(self, message: str) -> None: ...
    def info(self, message: Message) -> None: ...
    def success(self, message: Message) -> None: ...
    def warning(self, message: Message) -> None: ...
    def new_line(self, count: int = 1) -> None: ...


class Prompter(Protocol):
    """
    Blocking interactive input.

    - ask: empty answer -> default (re-ask when default is None)
    - confirm: y/yes/n/no, empty answer -> default
    - choice: re-ask until one of `choices` is entered
    """

    def ask(self, question: str, default: str | None = None) -> str: ...
    def confirm(self, question: str, default: bool = False) -> bool: ...
    def choice(self, question: str, choices: Sequence[str], default: str | None = None) -> str: ...


class TerminalIO(Output, Prompter, Protocol):
    """Output + Prompter on the same terminal."""


class FileSystem(Protocol):
    """Paths are relative to the project directory unless absolute."""

    def exists(self, path: str | Path) -> bool: ...
    def touch(self, path: str | Path) -> None: ...
    def mkdir(self, path: str | Path) -> None: ...
    def append_to_file(self, path: str | Path, content: str) -> None: ...
    def dump_file(self, path: str | Path, content: str) -> None: ...
    def copy(self, source: str | Path, target: str | Path) -> None: ...
