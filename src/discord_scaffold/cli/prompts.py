"""Interactive prompts for the CLI layer.

:class:`QuestionaryPrompter` satisfies the core
:class:`~discord_scaffold.core.protocols.Prompter` protocol with
questionary widgets: a text prompt with inline validation, a masked
password prompt and a yes/no confirmation.

questionary is imported lazily so ``--help`` and ``--version`` work
without it.
"""

from __future__ import annotations

from typing import Any

from discord_scaffold.core.protocols import Validator
from discord_scaffold.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def build_style(questionary: Any) -> Any:
    """Shared prompt style."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:green bold"),
            ("instruction", "fg:white"),
        ]
    )


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by questionary.

    Ctrl+C propagates as ``KeyboardInterrupt`` (``unsafe_ask()``), so the
    CLI boundary reports it as an abort.  ``None`` is still passed through
    if questionary returns no answer.
    """

    def __init__(self) -> None:
        self._questionary = _import_questionary()
        self._style = build_style(self._questionary)

    def ask_text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str | None:
        """Free-text prompt with optional inline validation."""
        return self._questionary.text(
            message,
            default=default,
            validate=validate,
            style=self._style,
        ).unsafe_ask()

    def ask_secret(self, message: str, *, default: str = "") -> str | None:
        """Masked prompt; the default is pre-filled but hidden."""
        return self._questionary.password(
            message,
            default=default,
            style=self._style,
        ).unsafe_ask()

    def ask_confirm(self, message: str) -> bool | None:
        """Yes/no prompt defaulting to no."""
        return self._questionary.confirm(
            message,
            default=False,
            style=self._style,
        ).unsafe_ask()
