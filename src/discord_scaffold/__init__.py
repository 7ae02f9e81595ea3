"""discord-scaffold — interactive Discord bot project scaffolder.

Creates a new bot project from the bundled template, or refreshes the
core files of an existing one.
"""

from discord_scaffold.version import __version__

__all__: list[str] = ["__version__"]
