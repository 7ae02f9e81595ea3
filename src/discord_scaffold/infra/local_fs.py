"""Local-disk implementation of :class:`~discord_scaffold.core.protocols.FileSystem`.

Copies overwrite existing files and create missing parent directories;
files already present at the destination but absent from the source
are left alone.  Every ``OSError`` is re-raised as
:class:`~discord_scaffold.exceptions.FilesystemError`.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from discord_scaffold.exceptions import FilesystemError

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Concrete :class:`FileSystem` backed by :mod:`pathlib` and :mod:`shutil`."""

    def exists(self, path: Path) -> bool:
        """Return whether *path* exists."""
        return path.exists()

    def make_directory(self, path: Path) -> None:
        """Create *path*; its parent must exist and *path* must not."""
        logger.debug("mkdir %s", path)
        try:
            path.mkdir()
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory '{path}': {exc}") from exc

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Copy *source* recursively into *destination*, overwriting files."""
        logger.debug("copy tree %s -> %s", source, destination)
        try:
            shutil.copytree(source, destination, dirs_exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot copy '{source}' to '{destination}': {exc}",
            ) from exc

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy one file, creating the destination's parent directories."""
        logger.debug("copy file %s -> %s", source, destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
        except OSError as exc:
            raise FilesystemError(
                f"Cannot copy '{source}' to '{destination}': {exc}",
            ) from exc

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path* as UTF-8."""
        logger.debug("write %s (%d chars)", path, len(content))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FilesystemError(f"Cannot write '{path}': {exc}") from exc
