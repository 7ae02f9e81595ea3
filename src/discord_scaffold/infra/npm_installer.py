"""Infrastructure: npm detection and dependency installation.

Rules
-----
* Detection via :func:`shutil.which` only.
* The project directory is passed to the subprocess as ``cwd``; the
  process working directory is never changed.
* No timeout; the install runs until npm exits.
* npm output goes straight to the terminal; nothing is captured.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from discord_scaffold.exceptions import InstallFailedError, NpmNotFoundError

logger = logging.getLogger(__name__)

LOCKFILE_NAME: str = "package-lock.json"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NpmStatus:
    """Result of an npm detection probe.

    Attributes
    ----------
    found : bool
        Whether npm was located on PATH.
    path : Path | None
        Path to the npm executable as found on PATH, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Node.js / npm on the
        current platform.  Empty when npm is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_npm(executable: str = "npm") -> NpmStatus:
    """Probe the system for *executable*."""
    result = shutil.which(executable)
    if result is not None:
        return NpmStatus(found=True, path=Path(result), install_commands=())
    return NpmStatus(found=False, path=None, install_commands=_platform_install_commands())


def _platform_install_commands() -> tuple[str, ...]:
    """Return Node.js install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install OpenJS.NodeJS.LTS",
            "choco install nodejs-lts",
        )
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Please install Node.js from https://nodejs.org/en/download",)


def _missing_npm_error(executable: str, install_commands: tuple[str, ...]) -> NpmNotFoundError:
    hint_lines: list[str] = []
    if install_commands:
        hint_lines.append("Install Node.js (which ships npm) using one of:")
        hint_lines.extend(f"  {cmd}" for cmd in install_commands)
    return NpmNotFoundError(
        f"{executable} is not installed or not on PATH.",
        hint="\n".join(hint_lines) if hint_lines else None,
    )


# ---------------------------------------------------------------------------
# Installer
# ---------------------------------------------------------------------------

class NpmInstaller:
    """Concrete :class:`DependencyInstaller` that shells out to npm.

    ``npm ci`` is used when the project carries a lockfile, since it
    refuses to run without one; otherwise ``npm install``.
    """

    def __init__(self, executable: str = "npm") -> None:
        self._executable = executable

    def build_command(self, directory: Path) -> list[str]:
        """``npm ci`` when *directory* has a lockfile, else ``npm install``."""
        subcommand = "ci" if (directory / LOCKFILE_NAME).is_file() else "install"
        return [self._executable, subcommand]

    def install(self, directory: Path) -> None:
        """Run npm in *directory* and wait for it.

        Raises
        ------
        NpmNotFoundError
            When the npm executable cannot be found.
        InstallFailedError
            When npm exits with a non-zero status.
        """
        status = detect_npm(self._executable)
        if not status.found or status.path is None:
            raise _missing_npm_error(self._executable, status.install_commands)

        command = self.build_command(directory)
        command[0] = str(status.path)
        logger.debug("Running %s in %s", command, directory)

        try:
            subprocess.run(command, cwd=str(directory), check=True)
        except FileNotFoundError as exc:
            raise _missing_npm_error(self._executable, _platform_install_commands()) from exc
        except subprocess.CalledProcessError as exc:
            shown = " ".join([self._executable, *command[1:]])
            raise InstallFailedError(
                f"`{shown}` exited with status {exc.returncode}.",
                returncode=exc.returncode,
                hint=f"Fix the problem above, then run `{shown}` inside '{directory}'.",
            ) from exc
