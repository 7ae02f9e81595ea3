"""CLI application entry point for discord-scaffold.

This module is the **sole error boundary** for the entire application.
It catches :class:`~discord_scaffold.exceptions.ScaffoldError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; input collection, planning and
  execution are delegated to the core layer, side effects to infra.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from discord_scaffold.cli import exit_codes
from discord_scaffold.cli.console import configure_logging, console, escape_markup
from discord_scaffold.exceptions import ScaffoldError, UpdateDeclinedError
from discord_scaffold.version import TOOL_NAME, __version__, tool_name_and_version


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    There are no sub-commands; the CLI supports:
    * ``discord-scaffold``            — interactive create / update
    * ``discord-scaffold --dry-run``  — print the steps, skip their effects
    * ``discord-scaffold --version``
    """
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Create a Discord bot project, or update the core files of one.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print every step but only run the invite-link lookup.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging from file, npm and Discord operations.",
    )
    return parser


def _banner() -> str:
    return (
        f"This utility will walk you through creating a {TOOL_NAME} application.\n"
        "\n"
        "Press ENTER to use the default.\n"
        "Press ^C at any time to quit.\n"
        "\n"
        f"{tool_name_and_version()}"
    )


# ---------------------------------------------------------------------------
# Scaffolding flow
# ---------------------------------------------------------------------------

def _handle_scaffold(*, dry_run: bool) -> int:
    """Run the interactive scaffolding flow.

    Flow:
    1. Load settings and the bundled template.
    2. Collect and validate the application name.
    3. Resolve the target: confirm an update, or ask for the bot token.
    4. Build the create or update plan.
    5. Execute it and print the closing summary.
    """
    from discord_scaffold.cli.prompts import QuestionaryPrompter
    from discord_scaffold.config import ScaffoldSettings
    from discord_scaffold.core.intake import collect_app_name, resolve_target
    from discord_scaffold.core.invite import InviteResolver
    from discord_scaffold.core.planner import build_plan
    from discord_scaffold.core.runner import StepRunner, closing_summary
    from discord_scaffold.infra.discord_client import DiscordApplicationClient
    from discord_scaffold.infra.local_fs import LocalFileSystem
    from discord_scaffold.infra.npm_installer import NpmInstaller
    from discord_scaffold.infra.template_loader import load_template

    settings = ScaffoldSettings.from_env()
    template = load_template(settings.template_dir)
    filesystem = LocalFileSystem()

    console.plain(_banner())
    prompter = QuestionaryPrompter()

    name = collect_app_name(prompter, default=template.name)
    decision = resolve_target(
        name,
        prompter,
        filesystem,
        cwd=Path.cwd(),
        token_placeholder=settings.token_placeholder,
    )
    plan = build_plan(decision)

    runner = StepRunner(
        filesystem,
        NpmInstaller(settings.npm_executable),
        InviteResolver(
            DiscordApplicationClient(settings.api_base, timeout=settings.lookup_timeout),
        ),
        template,
        report=console.plain,
    )

    console.print()
    runner.run(plan, dry_run=dry_run)

    console.print()
    console.plain(closing_summary(plan.target.name))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the discord-scaffold CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    return _handle_scaffold(dry_run=args.dry_run)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UpdateDeclinedError as exc:
        console.print()
        console.print(f"[yellow]{escape_markup(str(exc))}[/yellow]")
        sys.exit(exit_codes.GENERAL_ERROR)
    except ScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
