# src/sfbootstrap/core/runner.py

"""
Single place where task failures turn into terminal diagnostics and exit codes.

Handlers never catch runner errors themselves: the first failing step unwinds
straight to `run_task`. Side effects of earlier steps are left as they are.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..errors import FilesystemFailure, InputAbort, SubprocessFailure, UnknownTask
from .context import TaskContext
from .registry import TaskRegistry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def subprocess_exit_code(returncode: int) -> int:
    """Propagate the child's status when it is a valid process exit code."""
    if 0 < returncode < 256:
        return returncode
    return EXIT_FAILURE


def run_task(
    registry: TaskRegistry,
    identifier: str,
    ctx: TaskContext,
    *,
    err: TextIO | None = None,
) -> int:
    err = err or sys.stderr

    try:
        task = registry.resolve(identifier)
    except UnknownTask as e:
        logger.info("Unknown task requested: %s", identifier)
        print(f"[ERROR] {e}", file=err)
        print("Run without arguments to list available tasks.", file=err)
        return EXIT_FAILURE

    logger.info("Running task %s (requested as %s)", task.name, identifier)

    try:
        task.handler(ctx)
    except SubprocessFailure as e:
        logger.error("Task %s aborted: %s", task.name, e)
        print(f"\n[ERROR] Task '{task.name}' failed.", file=err)
        print(f"  Command: {e.command_line}", file=err)
        print(f"  Exit status: {e.returncode}", file=err)
        return subprocess_exit_code(e.returncode)
    except FilesystemFailure as e:
        logger.error("Task %s aborted: %s", task.name, e)
        print(f"\n[ERROR] Task '{task.name}' failed.", file=err)
        print(f"  {e}", file=err)
        return EXIT_FAILURE
    except InputAbort as e:
        logger.error("Task %s aborted: %s", task.name, e)
        print(f"\n[ERROR] Task '{task.name}' aborted: {e}", file=err)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Task %s interrupted.", task.name)
        print("\nInterrupted.", file=err)
        return EXIT_INTERRUPTED

    logger.info("Task %s finished.", task.name)
    return EXIT_OK
