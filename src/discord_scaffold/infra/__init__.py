"""Infrastructure layer — external system integration.

This layer wraps all interaction with the local disk, npm and the
Discord REST API.  Every raw third-party exception is caught here and
re-raised as a :class:`~discord_scaffold.exceptions.ScaffoldError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering); debug
  details go to module loggers.
"""

from discord_scaffold.infra.discord_client import DiscordApplicationClient
from discord_scaffold.infra.local_fs import LocalFileSystem
from discord_scaffold.infra.npm_installer import NpmInstaller, NpmStatus, detect_npm
from discord_scaffold.infra.template_loader import load_template

__all__: list[str] = [
    "DiscordApplicationClient",
    "LocalFileSystem",
    "NpmInstaller",
    "NpmStatus",
    "detect_npm",
    "load_template",
]
