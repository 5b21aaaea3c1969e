"""
sfbootstrap: task runner for bootstrapping and operating Symfony projects.

Packages:
- core/: task registry, execution context, runner
- connectors/: terminal, shell and filesystem implementations
- tasks/: the task catalogue
- cli/: entrypoint and composition root
"""

__version__ = "0.1.0"
