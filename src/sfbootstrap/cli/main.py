# src/sfbootstrap/cli/main.py

"""
CLI entrypoint.

    sfbootstrap                 list tasks grouped by namespace
    sfbootstrap <task|alias>    run one task, then exit with its status
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..core.runner import EXIT_FAILURE, EXIT_OK, run_task
from ..errors import RegistrationConflict
from ..tasks import build_registry
from .bootstrap import configure_logging, create_context

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfbootstrap",
        description="Task runner for Symfony projects running on a Docker Compose stack.",
    )
    parser.add_argument(
        "task",
        nargs="?",
        help="Task name or alias to run. Omit to list available tasks.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available tasks and exit.",
    )
    parser.add_argument(
        "--project-dir",
        default=None,
        help="Directory the tasks operate in (default: SFBOOT_PROJECT_DIR or current directory).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: SFBOOT_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings().with_overrides(
        project_dir=args.project_dir,
        log_level=args.log_level,
    )
    configure_logging(settings)

    try:
        registry = build_registry()
    except RegistrationConflict as e:
        logger.error("Task registry is inconsistent: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.list or not args.task:
        print(registry.format_listing())
        return EXIT_OK

    if not settings.project_dir.is_dir():
        logger.error("Project directory is not a directory: %s", settings.project_dir)
        print(
            f"[ERROR] Project directory does not exist or is not a directory: {settings.project_dir}",
            file=sys.stderr,
        )
        return EXIT_FAILURE

    logger.info("Starting %s (project_dir=%s)", settings.app_name, settings.project_dir)
    ctx = create_context(settings=settings)
    return run_task(registry, args.task, ctx)


if __name__ == "__main__":
    raise SystemExit(main())
