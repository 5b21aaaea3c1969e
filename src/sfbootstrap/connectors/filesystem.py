# src/sfbootstrap/connectors/filesystem.py

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..errors import FilesystemFailure

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Disk access rooted at the project directory. OSError -> FilesystemFailure."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _path(self, path: str | Path) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.root / p

    def exists(self, path: str | Path) -> bool:
        p = self._path(path)
        try:
            return p.exists()
        except OSError as e:
            raise FilesystemFailure("exists", p, e.strerror or str(e)) from e

    def touch(self, path: str | Path) -> None:
        p = self._path(path)
        logger.debug("touch %s", p)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.touch(exist_ok=True)
        except OSError as e:
            raise FilesystemFailure("touch", p, e.strerror or str(e)) from e

    def mkdir(self, path: str | Path) -> None:
        p = self._path(path)
        logger.debug("mkdir %s", p)
        try:
            p.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemFailure("mkdir", p, e.strerror or str(e)) from e

    def append_to_file(self, path: str | Path, content: str) -> None:
        p = self._path(path)
        logger.debug("append %d chars to %s", len(content), p)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with p.open("a", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as e:
            raise FilesystemFailure("append", p, e.strerror or str(e)) from e

    def dump_file(self, path: str | Path, content: str) -> None:
        """Create or overwrite `path` with exactly `content`."""
        p = self._path(path)
        logger.debug("write %d chars to %s", len(content), p)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemFailure("write", p, e.strerror or str(e)) from e

    def copy(self, source: str | Path, target: str | Path) -> None:
        """Copy a file, creating the target's parent directories. Overwrites `target`."""
        src = self._path(source)
        dst = self._path(target)
        logger.debug("copy %s -> %s", src, dst)
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        except OSError as e:
            raise FilesystemFailure("copy", src, e.strerror or str(e)) from e
