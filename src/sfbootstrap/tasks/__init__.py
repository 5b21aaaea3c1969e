"""
Task catalogue.

One module per namespace, each exposing `register_tasks(registry)`:
- project.py: scaffold a new Symfony project
- composer.py, maker.py, fixtures.py: dependency installs and generators
- docker.py: compose stack lifecycle
- symfony.py: local web server and cache
- database.py: Doctrine database/migrations (incl. composite init/reset)
"""

from __future__ import annotations

from ..core.registry import TaskRegistry
from . import composer, database, docker, fixtures, maker, project, symfony

TASK_MODULES = (project, composer, docker, symfony, maker, database, fixtures)


def build_registry() -> TaskRegistry:
    """Register every task. Raises RegistrationConflict on any clash."""
    registry = TaskRegistry()
    for module in TASK_MODULES:
        module.register_tasks(registry)
    return registry
