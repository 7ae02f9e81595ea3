"""User input collection: application name and target resolution.

Both functions talk to the user only through the injected
:class:`~discord_scaffold.core.protocols.Prompter` and touch the disk only
through :meth:`FileSystem.exists`, so nothing here mutates anything.
"""

from __future__ import annotations

from pathlib import Path

from discord_scaffold.core.models import PlanMode, ScaffoldTarget, TargetDecision
from discord_scaffold.core.name_validation import check_name
from discord_scaffold.core.protocols import FileSystem, Prompter
from discord_scaffold.exceptions import PromptCancelledError, UpdateDeclinedError

NAME_PROMPT: str = "Application name?"
TOKEN_PROMPT: str = "Discord bot token?"
QUIT_MESSAGE: str = "Quitting..."


def collect_app_name(prompter: Prompter, *, default: str) -> str:
    """Ask for the application name until a valid one is given.

    The prompter validates inline; the loop here guarantees an invalid
    name is never returned even when a prompter ignores the callback.

    Raises
    ------
    PromptCancelledError
        If the user cancels the prompt.
    """
    while True:
        answer = prompter.ask_text(NAME_PROMPT, default=default, validate=check_name)
        if answer is None:
            raise PromptCancelledError("No application name given.")
        if check_name(answer) is True:
            return answer


def update_prompt(directory: Path) -> str:
    """Confirmation question shown when *directory* already exists."""
    return f"Directory '{directory}' already exists. Do you want to update it?"


def resolve_target(
    name: str,
    prompter: Prompter,
    filesystem: FileSystem,
    *,
    cwd: Path,
    token_placeholder: str,
) -> TargetDecision:
    """Decide between the update and create paths for *name*.

    The directory is resolved against *cwd*.  An existing directory must
    be confirmed explicitly; anything but a ``True`` answer aborts.

    Raises
    ------
    UpdateDeclinedError
        When the user does not confirm updating an existing directory.
    PromptCancelledError
        When the token prompt is cancelled.
    """
    directory = (cwd / name).resolve()
    target = ScaffoldTarget(name=name, directory=directory)

    if filesystem.exists(directory):
        if prompter.ask_confirm(update_prompt(directory)) is not True:
            raise UpdateDeclinedError(QUIT_MESSAGE)
        return TargetDecision(target=target, mode=PlanMode.UPDATE)

    token = prompter.ask_secret(TOKEN_PROMPT, default=token_placeholder)
    if token is None:
        raise PromptCancelledError("No bot token given.")
    return TargetDecision(target=target, mode=PlanMode.CREATE, token=token)
