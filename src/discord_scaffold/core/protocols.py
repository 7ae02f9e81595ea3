"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
prompt layer must satisfy.  Core code depends ONLY on these protocols,
never on concrete implementations, so that a plan can be executed in
tests against in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

Validator = Callable[[str], bool | str]
"""Inline validation callback: ``True`` when valid, else an error message."""


class Prompter(Protocol):
    """Contract for interactive terminal prompts.

    Every method returns ``None`` when the user cancels the prompt.
    """

    def ask_text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str | None:
        """Ask for free text, re-asking inline while *validate* rejects it."""
        ...  # pragma: no cover

    def ask_secret(self, message: str, *, default: str = "") -> str | None:
        """Ask for masked text (the bot token)."""
        ...  # pragma: no cover

    def ask_confirm(self, message: str) -> bool | None:
        """Ask a yes/no question."""
        ...  # pragma: no cover


class FileSystem(Protocol):
    """Contract for the filesystem operations the runner performs.

    Implementations must map ``OSError`` to
    :class:`~discord_scaffold.exceptions.FilesystemError`.
    """

    def exists(self, path: Path) -> bool:
        """Return whether *path* exists."""
        ...  # pragma: no cover

    def make_directory(self, path: Path) -> None:
        """Create *path*; fails when it exists or its parent is missing."""
        ...  # pragma: no cover

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Recursively copy *source* into *destination*, overwriting files."""
        ...  # pragma: no cover

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy one file, creating parent directories as needed."""
        ...  # pragma: no cover

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path* as UTF-8, replacing any existing file."""
        ...  # pragma: no cover


class DependencyInstaller(Protocol):
    """Contract for the external package-manager invocation."""

    def install(self, directory: Path) -> None:
        """Install dependencies of the project in *directory*.

        Raises
        ------
        InstallFailedError
            When the installer exits with a non-zero status.
        """
        ...  # pragma: no cover


class IdentityLookup(Protocol):
    """Contract for the Discord application lookup."""

    def fetch_application(self, token: str) -> dict[str, Any]:
        """Return the application record owning the bot *token*.

        Raises
        ------
        IdentityLookupError
            On transport errors, non-2xx responses or malformed bodies.
        """
        ...  # pragma: no cover
