"""Allow ``python -m discord_scaffold`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m discord_scaffold`` behaves identically to the
``discord-scaffold`` console script.
"""

from __future__ import annotations

from discord_scaffold.cli.app import cli

if __name__ == "__main__":
    cli()
