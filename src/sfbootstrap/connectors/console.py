# src/sfbootstrap/connectors/console.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ..core.ports import Message
from ..errors import InputAbort

logger = logging.getLogger(__name__)

_YES = ("y", "yes")
_NO = ("n", "no")


def _lines(message: Message) -> list[str]:
    if isinstance(message, str):
        return [message]
    return [str(m) for m in message]


class ConsoleIO:
    """
    Terminal output + blocking prompts.

    Reads with `input_func` (builtin input by default) so it follows the
    controlling terminal; there is no timeout. EOF and a closed stream become
    InputAbort.
    """

    def __init__(
        self,
        *,
        stream: TextIO | None = None,
        input_func: Callable[[str], str] = input,
    ) -> None:
        self._stream = stream
        self._input = input_func

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honored.
        return self._stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream, flush=True)

    # ---- Output ----

    def title(self, message: str) -> None:
        self._print()
        self._print(message)
        self._print("=" * len(message))
        self._print()

    def section(self, message: str) -> None:
        self._print(message)
        self._print("-" * len(message))
        self._print()

    def _block(self, tag: str, message: Message) -> None:
        prefix = f"[{tag}] "
        pad = " " * len(prefix)
        for i, line in enumerate(_lines(message)):
            self._print((prefix if i == 0 else pad) + line)
        self._print()

    def info(self, message: Message) -> None:
        self._block("INFO", message)

    def success(self, message: Message) -> None:
        self._block("OK", message)

    def warning(self, message: Message) -> None:
        self._block("WARNING", message)

    def new_line(self, count: int = 1) -> None:
        for _ in range(max(0, count)):
            self._print()

    # ---- Prompter ----

    def _read(self, question: str, hint: str) -> str:
        try:
            answer = self._input(f" {question}{hint}:\n > ")
        except EOFError:
            logger.info("Input closed while asking: %s", question)
            raise InputAbort(question) from None
        return answer.strip()

    def ask(self, question: str, default: str | None = None) -> str:
        hint = f" [{default}]" if default else ""
        while True:
            answer = self._read(question, hint)
            if answer:
                return answer
            if default is not None:
                return default
            self._print(" A value is required.")

    def confirm(self, question: str, default: bool = False) -> bool:
        hint = " (yes/no) [yes]" if default else " (yes/no) [no]"
        while True:
            answer = self._read(question, hint).lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._print(" Please answer yes or no.")

    def choice(self, question: str, choices: Sequence[str], default: str | None = None) -> str:
        if not choices:
            raise ValueError("choice() needs at least one option.")
        if default is not None and default not in choices:
            raise ValueError(f"Default {default!r} is not one of the choices.")

        self._print(f" {question}")
        for i, c in enumerate(choices):
            self._print(f"  [{i}] {c}")
        hint = f" [{default}]" if default is not None else ""

        while True:
            answer = self._read("Your choice", hint)
            if not answer and default is not None:
                return default
            if answer in choices:
                return answer
            if answer.isdecimal() and int(answer) < len(choices):
                return choices[int(answer)]
            self._print(f" Value \"{answer}\" is invalid.")
