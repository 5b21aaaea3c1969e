# src/sfbootstrap/core/registry.py

from __future__ import annotations

import difflib
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import RegistrationConflict, UnknownTask

if TYPE_CHECKING:
    from .context import TaskContext

TaskHandler = Callable[["TaskContext"], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskDefinition:
    name: str
    aliases: tuple[str, ...]
    namespace: str
    description: str
    handler: TaskHandler

    @property
    def identifiers(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


class TaskRegistry:
    """
    Static table of tasks, built once before anything runs.

    Every name and alias maps to exactly one task. Lookup is case-sensitive.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, TaskDefinition] = {}
        self._index: dict[str, TaskDefinition] = {}

    def register(
        self,
        name: str,
        handler: TaskHandler,
        *,
        description: str,
        namespace: str = "",
        aliases: list[str] | tuple[str, ...] | None = None,
    ) -> TaskDefinition:
        aliases_t = tuple(aliases or ())
        if not name:
            raise ValueError("Task name must not be empty.")

        conflicts: dict[str, str] = {}
        seen: set[str] = set()
        for ident in (name, *aliases_t):
            owner = self._index.get(ident)
            if owner is not None:
                conflicts[ident] = owner.name
            elif ident in seen:
                conflicts[ident] = name
            seen.add(ident)

        if conflicts:
            raise RegistrationConflict(name, conflicts)

        task = TaskDefinition(
            name=name,
            aliases=aliases_t,
            namespace=namespace,
            description=description,
            handler=handler,
        )
        self._tasks[name] = task
        for ident in task.identifiers:
            self._index[ident] = task
        logger.debug("Registered task %s (aliases=%s)", name, ", ".join(aliases_t) or "-")
        return task

    def resolve(self, identifier: str) -> TaskDefinition:
        task = self._index.get(identifier)
        if task is None:
            raise UnknownTask(identifier, self.suggest(identifier))
        return task

    def suggest(self, identifier: str, limit: int = 3) -> list[str]:
        return difflib.get_close_matches(identifier, list(self._index), n=limit, cutoff=0.6)

    def grouped(self) -> dict[str, list[TaskDefinition]]:
        groups: dict[str, list[TaskDefinition]] = {}
        for task in sorted(self._tasks.values(), key=lambda t: (t.namespace, t.name)):
            groups.setdefault(task.namespace, []).append(task)
        return groups

    def format_listing(self) -> str:
        if not self._tasks:
            return "No tasks registered."

        rows: list[tuple[str, str] | str] = []
        for namespace, tasks in self.grouped().items():
            rows.append(namespace or "(no namespace)")
            for task in tasks:
                label = task.name
                if task.aliases:
                    label += f" [{', '.join(task.aliases)}]"
                rows.append((label, task.description))

        width = max(len(r[0]) for r in rows if isinstance(r, tuple))
        lines = ["Available tasks:"]
        for row in rows:
            if isinstance(row, str):
                lines.append(f" {row}")
            else:
                lines.append(f"  {row[0].ljust(width)}  {row[1]}")
        return "\n".join(lines)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[TaskDefinition]:
        return iter(self._tasks.values())
