"""Single source of truth for the discord-scaffold version."""

from __future__ import annotations

__version__: str = "1.2.0"

TOOL_NAME: str = "discord-scaffold"
"""Distribution / console-script name shown in banners and descriptions."""


def tool_name_and_version() -> str:
    """Return the generator string, e.g. ``"discord-scaffold v1.2.0"``."""
    return f"{TOOL_NAME} v{__version__}"
