# src/sfbootstrap/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole run.
- Executables are configurable so the same tasks work with wrappers
  (e.g. `docker-compose` shims or a composer.phar path).
- Nothing here touches the filesystem; bootstrap creates directories.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

ENV_PREFIX = "SFBOOT"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Workspace ----
    project_dir: Path
    fixtures_dir: str
    readme_backup: str

    # ---- External tools ----
    composer_bin: str
    symfony_bin: str
    docker_bin: str
    git_bin: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "sfbootstrap")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), Path.home() / ".local" / "state" / app_name)

        project_dir = _env_path(_k("PROJECT_DIR"), Path.cwd())
        fixtures_dir = _env(_k("FIXTURES_DIR"), "src/DataFixtures")
        readme_backup = _env(_k("README_BACKUP"), "docs/templates/README.md")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            project_dir=project_dir,
            fixtures_dir=fixtures_dir,
            readme_backup=readme_backup,
            composer_bin=_env(_k("COMPOSER_BIN"), "composer"),
            symfony_bin=_env(_k("SYMFONY_BIN"), "symfony"),
            docker_bin=_env(_k("DOCKER_BIN"), "docker"),
            git_bin=_env(_k("GIT_BIN"), "git"),
        )

    def with_overrides(
        self,
        *,
        project_dir: str | Path | None = None,
        log_level: str | None = None,
    ) -> "Settings":
        """Return a copy with CLI overrides applied (None keeps the current value)."""
        changes: dict[str, object] = {}
        if project_dir is not None:
            changes["project_dir"] = Path(project_dir).expanduser()
        if log_level:
            changes["log_level"] = log_level
        return replace(self, **changes) if changes else self


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process (reads .env on first call)."""
    global _SETTINGS
    if _SETTINGS is None:
        _load_dotenv_if_available()
        _SETTINGS = Settings.from_env()
    return _SETTINGS
