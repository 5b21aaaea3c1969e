# src/sfbootstrap/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once by main,
- configures logging,
- wires concrete terminal/shell/disk implementations into a TaskContext.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..connectors.console import ConsoleIO
from ..connectors.filesystem import LocalFileSystem
from ..connectors.shell import SubprocessRunner
from ..core.context import TaskContext
from ..core.ports import CommandRunner, TerminalIO
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.debug("Logging configured (console=%s, file=%s)", level_name, log_file)


def create_context(
    *,
    settings: Settings | None = None,
    io: TerminalIO | None = None,
    runner: CommandRunner | None = None,
) -> TaskContext:
    """
    Build the TaskContext handed to every handler.

    Keeping io/runner injectable lets tests and embedders replace the terminal
    and the shell. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return TaskContext(
        settings=settings,
        io=io or ConsoleIO(),
        fs=LocalFileSystem(settings.project_dir),
        runner=runner or SubprocessRunner(),
    )
