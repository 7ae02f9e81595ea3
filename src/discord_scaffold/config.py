"""Runtime configuration read from environment variables.

Every setting has a default suitable for interactive use, so running
``discord-scaffold`` with a clean environment behaves exactly like the
published tool.  The overrides exist for packaging, testing against a
local template, and pointing the Discord lookup at a proxy.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from discord_scaffold.exceptions import ScaffoldError

ENV_TEMPLATE_DIR: str = "DISCORD_SCAFFOLD_TEMPLATE_DIR"
ENV_API_BASE: str = "DISCORD_SCAFFOLD_API_BASE"
ENV_LOOKUP_TIMEOUT: str = "DISCORD_SCAFFOLD_LOOKUP_TIMEOUT"
ENV_NPM: str = "DISCORD_SCAFFOLD_NPM"

DEFAULT_TEMPLATE_DIR: Path = Path(__file__).resolve().parent / "template"
DEFAULT_API_BASE: str = "https://discord.com/api"
DEFAULT_NPM: str = "npm"
TOKEN_PLACEHOLDER: str = "DISCORD_BOT_TOKEN_PLACEHOLDER"


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Resolved configuration for a single run."""

    template_dir: Path = DEFAULT_TEMPLATE_DIR
    """Root of the template tree copied into new projects."""

    api_base: str = DEFAULT_API_BASE
    """Base URL of the Discord REST API (no trailing slash)."""

    lookup_timeout: float | None = None
    """Seconds to wait for the Discord lookup; ``None`` blocks indefinitely."""

    npm_executable: str = DEFAULT_NPM
    """Name or path of the npm executable used to install dependencies."""

    token_placeholder: str = TOKEN_PLACEHOLDER
    """Default answer for the bot token prompt."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Empty variables are treated as unset.

        Raises
        ------
        ScaffoldError
            When ``DISCORD_SCAFFOLD_LOOKUP_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ

        template_dir = env.get(ENV_TEMPLATE_DIR) or ""
        api_base = env.get(ENV_API_BASE) or DEFAULT_API_BASE
        npm_executable = env.get(ENV_NPM) or DEFAULT_NPM

        return cls(
            template_dir=Path(template_dir).expanduser().resolve()
            if template_dir
            else DEFAULT_TEMPLATE_DIR,
            api_base=api_base.rstrip("/"),
            lookup_timeout=_parse_timeout(env.get(ENV_LOOKUP_TIMEOUT) or ""),
            npm_executable=npm_executable,
        )


def _parse_timeout(raw: str) -> float | None:
    """Parse a positive float, or return ``None`` for an empty value."""
    if not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ScaffoldError(
            f"Invalid lookup timeout: {raw!r}",
            hint=f"Set {ENV_LOOKUP_TIMEOUT} to a number of seconds, or unset it.",
        ) from exc
    if value <= 0:
        raise ScaffoldError(
            f"Lookup timeout must be positive, got {raw!r}",
            hint=f"Set {ENV_LOOKUP_TIMEOUT} to a number of seconds, or unset it.",
        )
    return value
